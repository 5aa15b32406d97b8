"""
Ingredient Matching Service

Functions for normalizing grocery item names and deciding whether two
entries are identical (safe to merge) or merely similar (shown together).
"""

import re

from constants import BASE_NAME_PREFIXES, SIMILAR_WORD_MIN_LENGTH
from .measurement import canonical_unit

_PREFIX_PATTERNS = tuple(re.compile(r'^' + prefix + r'\s+') for prefix in BASE_NAME_PREFIXES)


def normalize_name(name):
    """Normalize an item name for comparison: lowercase, no punctuation, single spaces."""
    normalized = (name or '').lower().strip()
    normalized = re.sub(r'[^\w\s]', '', normalized)
    return re.sub(r'\s+', ' ', normalized).strip()


def normalize_unit(unit):
    """Compare units by canonical code so 'cups' and 'cup' agree; absent is ''."""
    return canonical_unit(unit)


def _normalize_category(category):
    return (category or '').strip().lower()


def base_name(name):
    """
    Get the base ingredient name, removing descriptive modifiers.

    "Kosher salt" -> "salt", "Fresh baby spinach leaves" -> "spinach leaves".
    Only the last one or two words are kept.
    """
    normalized = normalize_name(name)

    base = normalized
    for pattern in _PREFIX_PATTERNS:
        base = pattern.sub('', base, count=1).strip()

    # The last word or two is usually the ingredient itself
    words = base.split()
    if len(words) > 1:
        base = ' '.join(words[-2:])

    return base.strip() or normalized


def items_identical(first, second):
    """
    Check if two items are the same entry and should be merged.

    Requires equal normalized names, equal units and equal categories,
    with missing units/categories treated as empty.
    """
    if normalize_name(first.name) != normalize_name(second.name):
        return False
    if normalize_unit(first.unit) != normalize_unit(second.unit):
        return False
    return _normalize_category(first.category) == _normalize_category(second.category)


def items_similar(first, second):
    """
    Check if two items are variations of the same ingredient.

    Similar items are shown together but never merged, e.g. "Kosher salt"
    and "Sea salt".
    """
    if items_identical(first, second):
        return True

    first_base = base_name(first.name)
    if first_base and first_base == base_name(second.name):
        return True

    first_name = normalize_name(first.name)
    second_name = normalize_name(second.name)
    if not first_name or not second_name:
        return False

    if first_name in second_name or second_name in first_name:
        # Guard against partial-word hits like "onion" in "union"
        second_words = set(second_name.split())
        return any(word in second_words and len(word) >= SIMILAR_WORD_MIN_LENGTH
                   for word in first_name.split())

    return False


def similarity(first, second):
    """'exact', 'similar' or 'none'."""
    if items_identical(first, second):
        return 'exact'
    if items_similar(first, second):
        return 'similar'
    return 'none'
