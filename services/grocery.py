"""
Grocery Service

Functions for merging, grouping and de-duplicating grocery list items.
Inputs are never modified; merged items are returned as copies.
"""

import dataclasses
import logging
import re

from constants import SEASONING_KEYWORDS, SEASONINGS_CATEGORY, DEFAULT_CATEGORY
from models import CategoryGroup, DuplicateResult
from .matching import normalize_name, normalize_unit, items_identical, items_similar

logger = logging.getLogger(__name__)


def is_seasoning(name):
    """Check if an item name contains a seasoning keyword."""
    lower_name = (name or '').lower()
    return any(keyword in lower_name for keyword in SEASONING_KEYWORDS)


def get_category_group(item):
    """Display bucket for an item: seasonings first, then its own category."""
    if is_seasoning(item.name):
        return SEASONINGS_CATEGORY
    return item.category or DEFAULT_CATEGORY


def _merge_key(item):
    return (normalize_name(item.name), normalize_unit(item.unit),
            (item.category or '').strip().lower())


def combine_notes(existing, new):
    """Union of two comma/semicolon separated note strings, order kept."""
    if not new or new == existing:
        return existing or ''
    if not existing:
        return new

    notes = []
    for part in re.split(r'[,;]', existing) + re.split(r'[,;]', new):
        part = part.strip()
        if part and part not in notes:
            notes.append(part)
    return ', '.join(notes)


def merge_identical_items(items):
    """
    Merge identical items by combining their quantities.

    Items with the same normalized name, unit and category collapse into the
    first one seen: quantities are summed, notes unioned and completed
    flags OR-ed.
    """
    merged = {}

    for item in items or []:
        key = _merge_key(item)
        existing = merged.get(key)
        if existing is None:
            merged[key] = dataclasses.replace(item)
            continue

        existing.quantity = (existing.quantity or 0) + (item.quantity or 0)
        existing.notes = combine_notes(existing.notes, item.notes)
        existing.completed = existing.completed or item.completed

    if len(merged) < len(items or []):
        logger.debug("Merged %d items into %d", len(items), len(merged))
    return list(merged.values())


def _cluster(items):
    """Greedy first-fit: each item joins the first cluster whose first member it resembles."""
    clusters = []
    for item in items:
        for cluster in clusters:
            if items_similar(cluster[0], item):
                cluster.append(item)
                break
        else:
            clusters.append([item])
    return clusters


def group_grocery_items(items):
    """
    Group items by category, then by similarity within each category.

    Returns a list of CategoryGroup with seasonings first and remaining
    categories in alphabetical order. Similar items share a cluster but
    stay separate entries.
    """
    by_category = {}
    for item in items or []:
        by_category.setdefault(get_category_group(item), []).append(item)

    result = [CategoryGroup(category=category, groups=_cluster(category_items))
              for category, category_items in by_category.items()]

    result.sort(key=lambda group: (group.category != SEASONINGS_CATEGORY,
                                   group.category.lower(), group.category))
    return result


def find_duplicates(existing_items, new_items):
    """
    Find which incoming items already exist in a list.

    Each incoming item is paired with the first identical existing item;
    anything without a match is queued to be added.
    """
    result = DuplicateResult()
    existing_items = list(existing_items or [])

    for new_item in new_items or []:
        match = next((existing for existing in existing_items
                      if items_identical(existing, new_item)), None)
        if match is not None:
            result.to_merge.append((match, new_item))
        else:
            result.to_add.append(new_item)

    return result


def apply_merges(duplicates):
    """
    Fold incoming quantities and notes into their matched existing items.

    Returns updated copies of the existing items, one per distinct item, in
    the order they were first matched.
    """
    updated = {}
    for existing, new in duplicates.to_merge:
        current = updated.get(id(existing))
        if current is None:
            current = updated[id(existing)] = dataclasses.replace(existing)
        current.quantity = (current.quantity or 0) + (new.quantity or 0)
        current.notes = combine_notes(current.notes, new.notes)
    return list(updated.values())
