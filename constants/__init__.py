"""
Constants Package

Static lookup tables for the ingredient engine. All values are immutable.
"""

from .units import (
    UnitClass,
    UNIT_CLASSES,
    IMPLIED_UNITS,
    UNIT_ALIASES,
    UNIT_PATTERNS,
    QUANTITY_PATTERN,
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
    UNICODE_FRACTIONS,
)

from .ingredients import (
    SEASONING_KEYWORDS,
    SEASONINGS_CATEGORY,
    DEFAULT_CATEGORY,
    BASE_NAME_PREFIXES,
    FUZZY_MATCH_MIN_LENGTH,
    SIMILAR_WORD_MIN_LENGTH,
    COMMON_INGREDIENTS,
    CATEGORY_NAMES,
)

from .cooking import (
    CAPACITY_LIMITED_EQUIPMENT,
    CONSTRAINT_PHRASES,
    BAKED_GOOD_NAMES,
    EQUIPMENT_CONFIDENCE,
    BAKING_CONFIDENCE,
    PHRASE_CONFIDENCE,
    MAX_PHRASE_CONFIDENCE,
    SIGNIFICANT_SCALE_CHANGE,
    SIGNIFICANT_SERVINGS_CHANGE,
)

from .validation import (
    VALID_GROCERY_CATEGORIES,
    VALID_PANTRY_CATEGORIES,
    MAX_LENGTHS,
    MAX_ITEMS_PER_REQUEST,
)
