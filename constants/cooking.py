"""
Cooking Constraint Constants

Keyword lists used to detect equipment capacity limits and baking in recipe
text, plus the thresholds that decide when a portion change is significant.
"""

# Equipment keywords that indicate capacity limitations
CAPACITY_LIMITED_EQUIPMENT = (
    'wok', 'pan', 'pot', 'skillet', 'air fryer', 'airfryer', 'frying pan',
    'saucepan', 'sheet pan', 'roasting pan', 'baking dish', 'baking pan',
    'casserole dish', 'dutch oven', 'sauté pan',
)

# Phrases that indicate a capacity limit regardless of equipment
CONSTRAINT_PHRASES = (
    'single layer', 'in one', 'fit in', 'arrange in', 'in a single',
    'one pan', 'one pot', 'batch', 'batches', 'capacity', 'crowded',
    'overcrowded',
)

# Baked goods - baking is only flagged when one of these is in the title
BAKED_GOOD_NAMES = (
    'cake', 'cakes', 'muffin', 'muffins', 'cookie', 'cookies', 'brownie',
    'brownies', 'pie', 'pies', 'bread', 'loaf', 'loaves', 'pastry', 'pastries',
    'scone', 'scones', 'biscuit', 'biscuits', 'tart', 'tarts', 'cupcake',
    'cupcakes',
)

# Confidence weights
EQUIPMENT_CONFIDENCE = 0.3
BAKING_CONFIDENCE = 0.3
PHRASE_CONFIDENCE = 0.2
MAX_PHRASE_CONFIDENCE = 0.5

# A portion change is significant at 20% or at least 2 servings
SIGNIFICANT_SCALE_CHANGE = 0.2
SIGNIFICANT_SERVINGS_CHANGE = 2
