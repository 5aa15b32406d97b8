"""
Models Package

Plain value types passed in and out of the ingredient engine.
Storage is owned by the calling service.
"""

from .ingredient import ParsedIngredient, RecipeNutrition
from .shopping import GroceryItem, CandidateItem, CategoryGroup, DuplicateResult
from .pantry import PantryItem, PantryMatch
from .recipe import CookingConstraints, ScalingWarning

__all__ = [
    'ParsedIngredient',
    'RecipeNutrition',
    'GroceryItem',
    'CandidateItem',
    'CategoryGroup',
    'DuplicateResult',
    'PantryItem',
    'PantryMatch',
    'CookingConstraints',
    'ScalingWarning',
]
