"""
Unit Constants and Measurement Tables

Contains unit aliases, the unit class taxonomy, parser unit patterns and the
per-class rounding, conversion, minimum and display tables used by the
measurement policy.
"""

import re
from enum import Enum
from types import MappingProxyType


class UnitClass(Enum):
    """Measurement classes that share a rounding/conversion policy."""
    SMALL_VOLUME = 'small-volume'
    MEDIUM_VOLUME = 'medium-volume'
    METRIC_WEIGHT = 'metric-weight'
    IMPERIAL_WEIGHT = 'imperial-weight'
    METRIC_VOLUME = 'metric-volume'
    WHOLE_COUNT = 'whole-count'
    CONTAINER_COUNT = 'container-count'
    UNKNOWN = 'unknown'


# Canonical unit code -> unit class
UNIT_CLASSES = MappingProxyType({
    'tsp': UnitClass.SMALL_VOLUME,
    'tbsp': UnitClass.SMALL_VOLUME,
    'cup': UnitClass.MEDIUM_VOLUME,
    'fl oz': UnitClass.MEDIUM_VOLUME,
    'g': UnitClass.METRIC_WEIGHT,
    'kg': UnitClass.METRIC_WEIGHT,
    'oz': UnitClass.IMPERIAL_WEIGHT,
    'lb': UnitClass.IMPERIAL_WEIGHT,
    'ml': UnitClass.METRIC_VOLUME,
    'l': UnitClass.METRIC_VOLUME,
    'egg': UnitClass.WHOLE_COUNT,
    'clove': UnitClass.WHOLE_COUNT,
    'can': UnitClass.CONTAINER_COUNT,
    'box': UnitClass.CONTAINER_COUNT,
    'bunch': UnitClass.CONTAINER_COUNT,
    'strip': UnitClass.CONTAINER_COUNT,
    'piece': UnitClass.CONTAINER_COUNT,
    'inch': UnitClass.UNKNOWN,
    'knob': UnitClass.UNKNOWN,
})

# Ingredients counted without a unit word ("3 eggs"): last word of the
# normalized name -> unit whose rounding policy applies
IMPLIED_UNITS = MappingProxyType({
    'egg': 'egg',
    'eggs': 'egg',
})

# Unit mappings (lowercase token -> canonical unit)
UNIT_ALIASES = MappingProxyType({
    'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbsp': 'tbsp', 'tbsps': 'tbsp',
    'tbs': 'tbsp', 't': 'tbsp',
    'teaspoon': 'tsp', 'teaspoons': 'tsp', 'tsp': 'tsp', 'tsps': 'tsp',
    'cup': 'cup', 'cups': 'cup',
    'fl oz': 'fl oz', 'floz': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'lb': 'lb', 'lbs': 'lb', 'pound': 'lb', 'pounds': 'lb',
    'kg': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    'g': 'g', 'gram': 'g', 'grams': 'g',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml',
    'millilitre': 'ml', 'millilitres': 'ml',
    'l': 'l', 'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l',
    'egg': 'egg', 'eggs': 'egg',
    'clove': 'clove', 'cloves': 'clove',
    'can': 'can', 'cans': 'can',
    'box': 'box', 'boxes': 'box',
    'bunch': 'bunch', 'bunches': 'bunch',
    'strip': 'strip', 'strips': 'strip',
    'piece': 'piece', 'pieces': 'piece',
    'inch': 'inch', 'inches': 'inch', 'in': 'inch',
    'knob': 'knob', 'knobs': 'knob',
})

# Quantity forms: mixed fraction "2 1/2", fraction "1/4", integer or decimal
QUANTITY_PATTERN = r'(\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)'


def _unit_pattern(tokens):
    # Unit token must end the word: "T-bone" is not a tablespoon
    return re.compile(QUANTITY_PATTERN + r'\s*(' + tokens + r')(?![-\w])', re.IGNORECASE)


# Ordered (pattern, canonical unit) pairs - order matters, first match wins.
# The tablespoon family owns the bare "T"; since matching is case-insensitive
# a bare "t" resolves to tbsp too.
UNIT_PATTERNS = (
    (_unit_pattern(r'tablespoons|tablespoon|tbsps|tbsp|tbs|T'), 'tbsp'),
    (_unit_pattern(r'teaspoons|teaspoon|tsps|tsp|t'), 'tsp'),
    (_unit_pattern(r'cups|cup'), 'cup'),
    (_unit_pattern(r'fl\s*oz|fluid\s+ounces|fluid\s+ounce'), 'fl oz'),
    (_unit_pattern(r'ounces|ounce|oz'), 'oz'),
    (_unit_pattern(r'pounds|pound|lbs|lb'), 'lb'),
    (_unit_pattern(r'kilograms|kilogram|kg'), 'kg'),
    (_unit_pattern(r'grams|gram|g'), 'g'),
    (_unit_pattern(r'milliliters|milliliter|millilitres|millilitre|ml'), 'ml'),
    (_unit_pattern(r'liters|liter|litres|litre|l'), 'l'),
    (_unit_pattern(r'pieces|piece'), 'piece'),
    (_unit_pattern(r'cloves|clove'), 'clove'),
    (_unit_pattern(r'strips|strip'), 'strip'),
    (_unit_pattern(r'boxes|box'), 'box'),
    (_unit_pattern(r'cans|can'), 'can'),
    (_unit_pattern(r'bunches|bunch'), 'bunch'),
    (_unit_pattern(r'inches|inch|in'), 'inch'),
    (_unit_pattern(r'knobs|knob'), 'knob'),
)

# Preferred snapping values for tsp/tbsp, in tie-break order
SMALL_VOLUME_STEPS = (1/8, 1/4, 1/3, 1/2, 2/3, 3/4, 1.0, 1.5, 2.0, 2.5, 3.0)

# Preferred snapping values for container counts below 2
CONTAINER_STEPS = (0.25, 0.33, 0.5, 0.67, 0.75, 1.0, 1.25, 1.33, 1.5, 1.67, 1.75, 2.0)

# Downgrade cascade: unit -> (threshold, smaller unit, factor)
CONVERSION_DOWN = MappingProxyType({
    'cup': (0.25, 'tbsp', 16),
    'tbsp': (1.0, 'tsp', 3),
})

# Smallest quantity a scaled-down ingredient may show, per class
MINIMUM_BY_CLASS = MappingProxyType({
    UnitClass.SMALL_VOLUME: 0.125,
    UnitClass.MEDIUM_VOLUME: 0.125,
    UnitClass.METRIC_WEIGHT: 1.0,
    UnitClass.IMPERIAL_WEIGHT: 0.125,
    UnitClass.METRIC_VOLUME: 1.0,
    UnitClass.WHOLE_COUNT: 1.0,
    UnitClass.CONTAINER_COUNT: 0.25,
    UnitClass.UNKNOWN: 0.125,
})

# Per-unit overrides of the class minimum: (floor, applies-below)
MINIMUM_BY_UNIT = MappingProxyType({
    'tsp': (0.25, 0.25),
    'kg': (0.01, 0.0),
    'l': (0.01, 0.0),
})

# Values below this render as vulgar fractions
FRACTION_THRESHOLDS = MappingProxyType({
    UnitClass.SMALL_VOLUME: 3.0,
    UnitClass.MEDIUM_VOLUME: 2.0,
    UnitClass.METRIC_WEIGHT: 0.0,
    UnitClass.IMPERIAL_WEIGHT: 1.0,
    UnitClass.METRIC_VOLUME: 0.0,
    UnitClass.WHOLE_COUNT: 0.0,
    UnitClass.CONTAINER_COUNT: 2.0,
    UnitClass.UNKNOWN: 1.0,
})

FRACTION_TOLERANCE = 0.01

# Common fractions for display
COMMON_FRACTIONS = (
    (0.125, '1/8'),
    (0.25, '1/4'),
    (0.33, '1/3'),
    (0.5, '1/2'),
    (0.67, '2/3'),
    (0.75, '3/4'),
)

# Singular -> plural display names; abbreviations are absent and stay as-is
UNIT_PLURALS = MappingProxyType({
    'cup': 'cups',
    'egg': 'eggs',
    'clove': 'cloves',
    'can': 'cans',
    'box': 'boxes',
    'bunch': 'bunches',
    'strip': 'strips',
    'piece': 'pieces',
    'inch': 'inches',
    'knob': 'knobs',
})

ABBREVIATED_UNITS = frozenset({'tsp', 'tbsp', 'oz', 'fl oz', 'lb', 'g', 'kg', 'ml', 'l'})

# Unicode fraction characters -> ASCII fraction
UNICODE_FRACTIONS = MappingProxyType({
    '\u00bd': '1/2',  # ½
    '\u2153': '1/3',  # ⅓
    '\u2154': '2/3',  # ⅔
    '\u00bc': '1/4',  # ¼
    '\u00be': '3/4',  # ¾
    '\u2155': '1/5',  # ⅕
    '\u2156': '2/5',  # ⅖
    '\u2157': '3/5',  # ⅗
    '\u2158': '4/5',  # ⅘
    '\u2159': '1/6',  # ⅙
    '\u215a': '5/6',  # ⅚
    '\u215b': '1/8',  # ⅛
    '\u215c': '3/8',  # ⅜
    '\u215d': '5/8',  # ⅝
    '\u215e': '7/8',  # ⅞
})

# Every policy table must cover every unit class
for _table in (MINIMUM_BY_CLASS, FRACTION_THRESHOLDS):
    assert set(_table) == set(UnitClass), 'unit class table is incomplete'
assert set(UNIT_ALIASES.values()) == set(UNIT_CLASSES), 'alias without unit class'
assert set(IMPLIED_UNITS.values()) <= set(UNIT_CLASSES), 'implied unit without unit class'
