"""
Validation Constants

Contains whitelist values and limits for validating API input before it
reaches the ingredient engine.
"""

from types import MappingProxyType

# Valid grocery categories (whitelist)
VALID_GROCERY_CATEGORIES = frozenset({
    'produce', 'dairy', 'meat', 'bakery', 'pantry', 'frozen',
    'beverages', 'snacks', 'other',
})

# Valid pantry categories (whitelist)
VALID_PANTRY_CATEGORIES = VALID_GROCERY_CATEGORIES | {'spices', 'condiments'}

# Maximum field lengths
MAX_LENGTHS = MappingProxyType({
    'ingredient_name': 200,
    'ingredient_text': 500,
    'unit': 20,
    'category': 50,
    'notes': 500,
    'instructions': 50000,
    'title': 200,
})

# Default cap on list sizes in a single request (overridable in config)
MAX_ITEMS_PER_REQUEST = 200
