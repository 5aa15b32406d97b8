"""
Parsing Service

Functions for parsing free-text recipe ingredient lines into structured
quantity / unit / name / notes data.
"""

import logging
import math
import re

from constants import UNIT_PATTERNS, UNICODE_FRACTIONS, QUANTITY_PATTERN
from models import ParsedIngredient

logger = logging.getLogger(__name__)

# Integer ranges like "3-4" (not part of a decimal or fraction)
_RANGE_PATTERN = re.compile(r'(?<![\d./])(\d+)\s*-\s*(\d+)(?![\d./])')

# Bare number, fraction or mixed fraction at the start, followed by whitespace
_LEADING_QUANTITY = re.compile(r'^' + QUANTITY_PATTERN + r'\s+')

# Leftover numeric fragments from incomplete quantities ("3-", "1/", "- 3")
_FRAGMENT_PATTERNS = (
    (re.compile(r'^\d+\s*[-/]\s*'), ''),
    (re.compile(r'\s+\d+\s*[-/]\s*'), ' '),
    (re.compile(r'\s*[-/]\s*\d+\s*'), ' '),
)

_PARENTHETICAL = re.compile(r'\(([^)]*)\)')


def normalize_fractions(text):
    """Replace Unicode fraction characters with ASCII fractions ("1½" -> "1 1/2")."""
    # First, normalize all whitespace (including non-breaking spaces) to regular spaces
    text = re.sub(r'[\s\u00a0\u2000-\u200b]+', ' ', text)

    for char, fraction in UNICODE_FRACTIONS.items():
        if char in text:
            # Mixed fraction like "1½" or "1 ½"
            text = re.sub(r'(\d)\s*' + re.escape(char), r'\1 ' + fraction, text)
            text = text.replace(char, fraction)
    return text


def _format_number(value):
    if value == int(value):
        return str(int(value))
    return str(value)


def _average_range(match):
    first = int(match.group(1))
    second = int(match.group(2))
    if first >= second:
        return match.group(0)
    average = (first + second) / 2
    # 0.25 steps for small values, whole numbers for larger
    if average < 5:
        return _format_number(math.floor(average * 4 + 0.5) / 4)
    return str(math.floor(average + 0.5))


def normalize_ranges(text):
    """Replace quantity ranges with their average ("3-4 tablespoons" -> "3.5 tablespoons")."""
    return _RANGE_PATTERN.sub(_average_range, text)


def parse_fraction(value, default=1.0):
    """
    Parse a quantity string like '1 1/2', '1/4', '0.5' or '½' into a float.

    Returns default when the value is empty, malformed, or not finite.
    """
    if value is None:
        return default

    s = normalize_fractions(str(value)).strip()
    if not s:
        return default

    mixed_match = re.match(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$', s)
    frac_match = re.match(r'^(\d+)\s*/\s*(\d+)$', s)

    if mixed_match:
        # Mixed fraction like "1 1/2"
        whole, numerator, denom = (float(group) for group in mixed_match.groups())
        if denom == 0:
            return default
        number = whole + numerator / denom
    elif frac_match:
        # Simple fraction like "1/2"
        numerator, denom = (float(group) for group in frac_match.groups())
        if denom == 0:
            return default
        number = numerator / denom
    else:
        # Otherwise it's a whole number or decimal
        try:
            number = float(s)
        except (ValueError, TypeError):
            return default

    # Overlong digit runs overflow to inf
    if not math.isfinite(number):
        return default
    return number


def _extract_unit_quantity(text):
    """First unit pattern (in priority order) with a positive quantity wins."""
    for pattern, unit in UNIT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        quantity = parse_fraction(match.group(1), default=0.0)
        if quantity > 0:
            remaining = text[:match.start()] + ' ' + text[match.end():]
            return quantity, unit, remaining.strip()
    return None


def _extract_leading_quantity(text):
    match = _LEADING_QUANTITY.match(text)
    if not match:
        return None
    quantity = parse_fraction(match.group(1), default=0.0)
    if quantity <= 0:
        return None
    return quantity, '', text[match.end():].strip()


def _strip_fragments(text):
    for pattern, replacement in _FRAGMENT_PATTERNS:
        text = pattern.sub(replacement, text)
    return text.strip()


def _clean_notes(text):
    parts = [part.strip() for part in text.split(',')]
    return ', '.join(part for part in parts if part)


def _split_notes(text):
    """Pull parenthetical content and anything after the first comma into notes."""
    notes = []
    for inner in _PARENTHETICAL.findall(text):
        inner = _clean_notes(inner)
        if inner:
            notes.append(inner)
    text = _PARENTHETICAL.sub(' ', text)
    # Unbalanced brackets
    text = re.sub(r'[()]+', ' ', text)

    if ',' in text:
        text, tail = text.split(',', 1)
        tail = _clean_notes(tail)
        if tail:
            notes.append(tail)

    return text, ', '.join(notes)


def _clean_name(name):
    name = re.sub(r'\s+', ' ', name).strip()
    name = re.sub(r'^,\s*', '', name)
    if name.endswith(','):
        name = name[:-1].rstrip()
    return name


def parse_ingredient_checked(line):
    """
    Parse an ingredient line and report whether a quantity was actually read.

    Returns (ParsedIngredient, has_quantity). has_quantity is False when the
    quantity is the default 1 rather than a number found in the text.
    """
    if not isinstance(line, str):
        line = '' if line is None else str(line)

    trimmed = line.strip()
    if not trimmed:
        return ParsedIngredient(quantity=1.0, unit='', name='Unknown', notes=''), False

    text = normalize_ranges(normalize_fractions(trimmed))

    extracted = _extract_unit_quantity(text) or _extract_leading_quantity(text)
    if extracted:
        quantity, unit, remaining = extracted
    else:
        quantity, unit, remaining = 1.0, '', text

    name, notes = _split_notes(remaining)
    name = _clean_name(_strip_fragments(name))

    if not name:
        logger.debug("No ingredient name left in %r, using raw line", trimmed)
        return ParsedIngredient(quantity=1.0, unit='', name=trimmed, notes=''), False

    return ParsedIngredient(quantity=quantity, unit=unit, name=name, notes=notes), extracted is not None


def parse_ingredient(line):
    """
    Parse ingredient text like '2 cups flour, sifted' into a ParsedIngredient.

    Handles formats like:
    - "500g chicken breast"
    - "1 1/2 cups flour"
    - "3 eggs"
    - "1 onion, finely chopped"
    - "2 tbsp olive oil (extra virgin)"

    Never raises; unparseable text comes back with quantity 1 and no unit.
    """
    parsed, _ = parse_ingredient_checked(line)
    return parsed


def parse_ingredients(lines):
    """Parse multiple ingredient lines."""
    return [parse_ingredient(line) for line in lines or []]


def has_explicit_quantity(line):
    """Whether the line carries a number the scaler can work with."""
    _, has_quantity = parse_ingredient_checked(line)
    return has_quantity
