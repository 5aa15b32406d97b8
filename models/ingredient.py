"""
Ingredient Models

Contains the ParsedIngredient value produced by the ingredient parser and the
RecipeNutrition value used by the nutrition scaling helpers.
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class ParsedIngredient:
    """
    Structured form of one free-text ingredient line.

    quantity defaults to 1 when no number could be read, unit is a canonical
    unit code or '' and name is never empty.
    """
    quantity: float = 1.0
    unit: str = ''
    name: str = 'Unknown'
    notes: str = ''

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class RecipeNutrition:
    """Per-portion nutrition strings as stored on a recipe (e.g., '38g')."""
    calories_per_portion: str = ''
    protein: Optional[str] = None
    carbs: Optional[str] = None
    fat: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = data or {}

        def text(key):
            value = data.get(key)
            return str(value) if value not in (None, '') else None

        return cls(
            calories_per_portion=text('calories_per_portion') or '',
            protein=text('protein'),
            carbs=text('carbs'),
            fat=text('fat'),
        )

    def to_dict(self):
        return {key: value for key, value in asdict(self).items() if value is not None}
