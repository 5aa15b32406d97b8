"""
Ingredient Constants

Contains the keyword lists used for name matching, seasoning detection and
the curated list of common pantry ingredients.
"""

from types import MappingProxyType

# Seasoning/spice keywords - items containing any of these are shown together
SEASONING_KEYWORDS = (
    'salt', 'pepper', 'paprika', 'cumin', 'coriander', 'turmeric', 'cinnamon',
    'nutmeg', 'ginger', 'garlic powder', 'onion powder', 'chili powder',
    'cayenne', 'black pepper', 'white pepper', 'red pepper', 'flakes',
    'oregano', 'basil', 'thyme', 'rosemary', 'sage', 'parsley', 'cilantro',
    'dill', 'bay leaf', 'bay leaves', 'cardamom', 'cloves', 'allspice',
    'curry', 'garam masala', 'herbs', 'spice', 'seasoning', 'seasonings',
)

SEASONINGS_CATEGORY = 'seasonings'
DEFAULT_CATEGORY = 'other'

# Descriptive prefixes stripped when computing a base ingredient name
# (e.g., "Kosher salt" -> "salt"). Applied in order, each at most once.
BASE_NAME_PREFIXES = (
    'kosher', 'sea', 'table', 'iodized', 'himalayan', 'pink',
    'black', 'white', 'red', 'green', 'yellow', 'fresh', 'dried', 'ground',
    'whole', 'organic', 'frozen',
)

# Minimum normalized length for substring (fuzzy) pantry matches
FUZZY_MATCH_MIN_LENGTH = 4

# Minimum length of a shared word for two names to count as similar
SIMILAR_WORD_MIN_LENGTH = 3

# Curated common pantry ingredients: (name, category, requires_quantity, common_units)
# Items that don't require a quantity are simply marked "in pantry".
COMMON_INGREDIENTS = (
    # Produce
    ('Apples', 'produce', True, ('pieces', 'lb')),
    ('Bananas', 'produce', True, ('pieces',)),
    ('Onions', 'produce', True, ('pieces', 'lb')),
    ('Garlic', 'produce', False, ()),
    ('Potatoes', 'produce', True, ('pieces', 'lb')),
    ('Carrots', 'produce', True, ('pieces', 'lb')),
    ('Tomatoes', 'produce', True, ('pieces', 'lb')),
    ('Lettuce', 'produce', False, ()),
    ('Spinach', 'produce', False, ()),
    ('Bell Peppers', 'produce', True, ('pieces',)),
    ('Mushrooms', 'produce', False, ()),
    ('Avocados', 'produce', True, ('pieces',)),
    ('Lemons', 'produce', True, ('pieces',)),
    ('Limes', 'produce', True, ('pieces',)),
    # Dairy
    ('Eggs', 'dairy', True, ('eggs',)),
    ('Milk', 'dairy', True, ('cups', 'oz')),
    ('Butter', 'dairy', True, ('tbsp', 'oz')),
    ('Cheese', 'dairy', True, ('oz', 'lb', 'cups')),
    ('Yogurt', 'dairy', True, ('cups', 'oz')),
    ('Sour Cream', 'dairy', True, ('cups', 'oz')),
    ('Heavy Cream', 'dairy', True, ('cups', 'oz')),
    ('Cream Cheese', 'dairy', True, ('oz',)),
    # Meat & Seafood
    ('Chicken Breast', 'meat', True, ('lb', 'pieces')),
    ('Ground Beef', 'meat', True, ('lb',)),
    ('Bacon', 'meat', True, ('strips', 'oz', 'lb')),
    ('Salmon', 'meat', True, ('lb', 'pieces')),
    ('Shrimp', 'meat', True, ('lb', 'oz')),
    ('Turkey', 'meat', True, ('lb',)),
    # Bakery
    ('Bread', 'bakery', False, ()),
    ('Tortillas', 'bakery', True, ('pieces',)),
    ('Bagels', 'bakery', True, ('pieces',)),
    # Pantry staples
    ('Flour', 'pantry', True, ('cups', 'lb')),
    ('Sugar', 'pantry', True, ('cups', 'lb')),
    ('Brown Sugar', 'pantry', True, ('cups', 'lb')),
    ('Rice', 'pantry', True, ('cups', 'lb')),
    ('Pasta', 'pantry', True, ('oz', 'lb', 'boxes')),
    ('Olive Oil', 'pantry', False, ()),
    ('Vegetable Oil', 'pantry', False, ()),
    ('Chicken Broth', 'pantry', True, ('cups', 'cans')),
    ('Beef Broth', 'pantry', True, ('cups', 'cans')),
    ('Canned Tomatoes', 'pantry', True, ('cans', 'oz')),
    ('Black Beans', 'pantry', True, ('cans', 'oz')),
    ('Kidney Beans', 'pantry', True, ('cans', 'oz')),
    ('Chickpeas', 'pantry', True, ('cans', 'oz')),
    # Spices & seasonings
    ('Salt', 'spices', False, ()),
    ('Black Pepper', 'spices', False, ()),
    ('Garlic Powder', 'spices', False, ()),
    ('Onion Powder', 'spices', False, ()),
    ('Paprika', 'spices', False, ()),
    ('Cumin', 'spices', False, ()),
    ('Oregano', 'spices', False, ()),
    ('Basil', 'spices', False, ()),
    ('Thyme', 'spices', False, ()),
    ('Rosemary', 'spices', False, ()),
    ('Cinnamon', 'spices', False, ()),
    ('Chili Powder', 'spices', False, ()),
    ('Bay Leaves', 'spices', False, ()),
    ('Red Pepper Flakes', 'spices', False, ()),
    # Condiments
    ('Ketchup', 'condiments', False, ()),
    ('Mustard', 'condiments', False, ()),
    ('Mayonnaise', 'condiments', False, ()),
    ('Soy Sauce', 'condiments', False, ()),
    ('Hot Sauce', 'condiments', False, ()),
    ('Worcestershire Sauce', 'condiments', False, ()),
    ('Balsamic Vinegar', 'condiments', False, ()),
    ('Honey', 'condiments', False, ()),
    # Frozen
    ('Frozen Vegetables', 'frozen', True, ('bags', 'oz')),
    ('Ice Cream', 'frozen', True, ('pints', 'quarts')),
    ('Frozen Pizza', 'frozen', True, ('pieces',)),
    # Beverages
    ('Orange Juice', 'beverages', True, ('cups', 'oz')),
    ('Coffee', 'beverages', False, ()),
    ('Tea', 'beverages', False, ()),
    # Snacks
    ('Chips', 'snacks', True, ('bags',)),
    ('Crackers', 'snacks', False, ()),
)

# Pantry category display names
CATEGORY_NAMES = MappingProxyType({
    'produce': 'Produce',
    'dairy': 'Dairy',
    'meat': 'Meat & Seafood',
    'bakery': 'Bakery',
    'pantry': 'Pantry Staples',
    'frozen': 'Frozen',
    'beverages': 'Beverages',
    'snacks': 'Snacks',
    'spices': 'Spices & Herbs',
    'condiments': 'Condiments',
    'other': 'Other',
})
