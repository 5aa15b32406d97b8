"""
Scaling Service

Functions for scaling recipe ingredient lines to a different number of
portions.
"""

import logging
import math
import re

from constants import IMPLIED_UNITS
from .matching import normalize_name
from .measurement import convert_down, enforce_minimum, format_measure, round_for_unit
from .parsing import parse_ingredient_checked

logger = logging.getLogger(__name__)

_PORTION_NUMBER = re.compile(r'(\d+(?:\.\d+)?)')


def _positive_number(value):
    """value as a finite float > 0, or None."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def extract_portion_number(text, default=4):
    """
    Get the number of portions from a portion string.

    Examples: "4 servings" -> 4, "6" -> 6, "serves 8" -> 8
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        number = _positive_number(text)
        return math.floor(number + 0.5) if number else default
    if not text or not isinstance(text, str):
        return default

    match = _PORTION_NUMBER.search(text)
    if match:
        number = float(match.group(1))
        if number > 0:
            return math.floor(number + 0.5)
    return default


def calculate_scale_factor(from_portions, to_portions):
    """Ratio between target and original portions; 1.0 for invalid input."""
    original = _positive_number(from_portions)
    target = _positive_number(to_portions)
    if original is None or target is None:
        return 1.0
    return target / original


def _policy_unit(unit, name):
    """Unit whose rounding rules apply; '3 eggs' rounds like a count of eggs."""
    if unit:
        return unit
    words = normalize_name(name).split()
    return IMPLIED_UNITS.get(words[-1], '') if words else ''


def _assemble(measure, name, notes):
    result = f"{measure} {name}".strip()
    if notes:
        result = f"{result}, {notes}"
    return result


def scale_ingredient(line, from_portions, to_portions):
    """
    Scale one ingredient line from one portion count to another.

    Example: scale_ingredient("2 cups flour, sifted", 4, 2) -> "1 cup flour, sifted"

    Lines without a quantity, invalid portion counts and equal portion
    counts return the line unchanged.
    """
    original = _positive_number(from_portions)
    target = _positive_number(to_portions)
    if original is None or target is None:
        logger.debug("Invalid portions %r -> %r, leaving line as-is", from_portions, to_portions)
        return line
    if original == target or not isinstance(line, str):
        return line

    parsed, has_quantity = parse_ingredient_checked(line)
    if not has_quantity:
        return line

    scaled = parsed.quantity * (target / original)

    # Downgrade decision uses the unrounded value, rounding happens in the final unit
    value, unit = convert_down(scaled, parsed.unit)
    policy_unit = _policy_unit(unit, parsed.name)
    value = round_for_unit(value, policy_unit)

    if target < original:
        value = enforce_minimum(value, policy_unit)

    result = _assemble(format_measure(value, unit), parsed.name, parsed.notes)
    return result or line


def scale_ingredients(lines, from_portions, to_portions):
    """Scale every ingredient line in a list."""
    return [scale_ingredient(line, from_portions, to_portions) for line in lines or []]
