"""
Measurement Policy

Rounding, unit downgrade, minimum enforcement and display rules for
ingredient quantities. Every rule is selected by the unit's class
(see constants.units.UnitClass).
"""

import logging
import math

from constants import (
    UnitClass,
    UNIT_CLASSES,
    UNIT_ALIASES,
    SMALL_VOLUME_STEPS,
    CONTAINER_STEPS,
    CONVERSION_DOWN,
    MINIMUM_BY_CLASS,
    MINIMUM_BY_UNIT,
    FRACTION_THRESHOLDS,
    FRACTION_TOLERANCE,
    COMMON_FRACTIONS,
    UNIT_PLURALS,
    ABBREVIATED_UNITS,
)

logger = logging.getLogger(__name__)


def canonical_unit(unit):
    """Resolve a unit token ('Tablespoons', 'cups', 'oz.') to its canonical code."""
    if not unit:
        return ''
    cleaned = ' '.join(str(unit).lower().split()).rstrip('.')
    return UNIT_ALIASES.get(cleaned, cleaned)


def unit_class(unit):
    """Get the measurement class for a unit; unrecognized units are UNKNOWN."""
    return UNIT_CLASSES.get(canonical_unit(unit), UnitClass.UNKNOWN)


def _is_positive(value):
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def _round_half_up(value):
    return math.floor(value + 0.5)


def _round_to_increment(value, increment):
    return _round_half_up(value / increment) * increment


def _snap(value, steps):
    """Nearest preferred value; ties go to the first listed."""
    closest = steps[0]
    for step in steps[1:]:
        if abs(value - step) < abs(value - closest):
            closest = step
    return closest


def _round_small_volume(value, unit):
    if value > SMALL_VOLUME_STEPS[-1]:
        return _round_to_increment(value, 0.25)
    return _snap(value, SMALL_VOLUME_STEPS)


def _round_quarter(value, unit):
    return _round_to_increment(value, 0.25)


def _round_metric_weight(value, unit):
    if value < 10:
        return _round_to_increment(value, 0.25)
    if value < 100:
        return _round_to_increment(value, 0.5)
    return float(_round_half_up(value))


def _round_metric_volume(value, unit):
    if unit == 'l':
        return _round_to_increment(value, 0.25)
    if value < 100:
        return float(_round_to_increment(value, 5))
    return float(_round_half_up(value))


def _round_whole(value, unit):
    return float(max(1, _round_half_up(value)))


def _round_container(value, unit):
    if value < 2:
        return _snap(value, CONTAINER_STEPS)
    return _round_to_increment(value, 0.25)


def _round_unknown(value, unit):
    if value < 1:
        return _round_to_increment(value, 0.25)
    return float(_round_half_up(value))


_ROUNDERS = {
    UnitClass.SMALL_VOLUME: _round_small_volume,
    UnitClass.MEDIUM_VOLUME: _round_quarter,
    UnitClass.METRIC_WEIGHT: _round_metric_weight,
    UnitClass.IMPERIAL_WEIGHT: _round_quarter,
    UnitClass.METRIC_VOLUME: _round_metric_volume,
    UnitClass.WHOLE_COUNT: _round_whole,
    UnitClass.CONTAINER_COUNT: _round_container,
    UnitClass.UNKNOWN: _round_unknown,
}
assert set(_ROUNDERS) == set(UnitClass), 'missing rounding rule'


def round_for_unit(value, unit):
    """
    Round a quantity to a value that is practical to measure in the given unit.

    Non-positive or non-finite values are returned unchanged.
    """
    if not _is_positive(value):
        return value
    return _ROUNDERS[unit_class(unit)](value, canonical_unit(unit))


def convert_down(value, unit):
    """
    Move impractically small volumes to the next smaller unit.

    Cascades (cup -> tbsp -> tsp) until no further downgrade applies.
    Returns (value, canonical unit).
    """
    unit = canonical_unit(unit)
    while unit in CONVERSION_DOWN and _is_positive(value):
        threshold, smaller_unit, factor = CONVERSION_DOWN[unit]
        if value >= threshold:
            break
        logger.debug("Converting %s %s down to %s", value, unit, smaller_unit)
        value, unit = value * factor, smaller_unit
    return value, unit


def enforce_minimum(value, unit):
    """Clamp a scaled-down quantity to the smallest amount shown for its unit."""
    floor = MINIMUM_BY_CLASS[unit_class(unit)]
    below = 0.0
    override = MINIMUM_BY_UNIT.get(canonical_unit(unit))
    if override:
        floor, below = override
    if not value > 0 or value < below:
        return floor
    return value


def _as_fraction(value):
    """Vulgar fraction ('1/2', '1 1/3') for value, or None if none is close."""
    for decimal, fraction in COMMON_FRACTIONS:
        if abs(value - decimal) < FRACTION_TOLERANCE:
            return fraction

    whole = int(value)
    remainder = value - whole
    if whole > 0 and remainder > FRACTION_TOLERANCE:
        for decimal, fraction in COMMON_FRACTIONS:
            if abs(remainder - decimal) < FRACTION_TOLERANCE:
                return f"{whole} {fraction}"
    return None


def format_quantity(value, unit):
    """Format quantity for display: fractions for small amounts, else trimmed decimals."""
    if value is None:
        return '0'
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return str(value)

    if 0 < value < FRACTION_THRESHOLDS[unit_class(unit)]:
        fraction = _as_fraction(value)
        if fraction:
            return fraction

    if abs(value - _round_half_up(value)) < FRACTION_TOLERANCE:
        return str(int(_round_half_up(value)))
    return f"{value:.2f}".rstrip('0').rstrip('.')


def pluralize(value, unit):
    """Unit name for display with the given quantity; abbreviations never change."""
    canonical = canonical_unit(unit)
    if canonical in ABBREVIATED_UNITS:
        return canonical
    if canonical in UNIT_PLURALS:
        if isinstance(value, (int, float)) and value > 1:
            return UNIT_PLURALS[canonical]
        return canonical
    return (unit or '').strip()


def format_measure(value, unit):
    """Quantity plus unit, e.g. '1 1/2 cups', '3 cloves', '250 g' or just '2'."""
    quantity = format_quantity(value, unit)
    unit_name = pluralize(value, unit)
    if unit_name:
        return f"{quantity} {unit_name}"
    return quantity
