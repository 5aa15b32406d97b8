"""
Nutrition Service

Helpers for reading and scaling the nutrition strings stored on a recipe
("520 kcal", "38g").
"""

import math
import re

from models import RecipeNutrition

_NUMBER = re.compile(r'(\d+(?:\.\d+)?)')
_UNIT_SUFFIX = re.compile(r'\d+(?:\.\d+)?\s*([A-Za-z]+)')


def parse_nutrition_value(value):
    """Numeric part of a nutrition string, 0 when there is none."""
    if not value or not isinstance(value, str):
        return 0.0
    match = _NUMBER.search(value)
    return float(match.group(1)) if match else 0.0


def format_nutrition_value(value, original):
    """Round to one decimal, keeping the unit suffix of the original string."""
    match = _UNIT_SUFFIX.search(original or '')
    unit = match.group(1) if match else ''

    rounded = math.floor(value * 10 + 0.5) / 10
    text = str(int(rounded)) if rounded == int(rounded) else str(rounded)
    return f"{text}{unit}"


def scale_nutrition(nutrition, factor):
    """
    Scale protein, carbs and fat by factor.

    Calories stay per portion. A factor of 1 (or an invalid one) returns the
    same object.
    """
    if isinstance(factor, bool) or not isinstance(factor, (int, float)):
        return nutrition
    if not math.isfinite(factor) or factor <= 0 or factor == 1:
        return nutrition

    def scaled(value):
        if not value:
            return None
        return format_nutrition_value(parse_nutrition_value(value) * factor, value)

    return RecipeNutrition(
        calories_per_portion=nutrition.calories_per_portion,
        protein=scaled(nutrition.protein),
        carbs=scaled(nutrition.carbs),
        fat=scaled(nutrition.fat),
    )


def calculate_meal_nutrition(nutrition, portions):
    """Totals for the number of portions eaten."""
    return {
        'calories': parse_nutrition_value(nutrition.calories_per_portion) * portions,
        'protein': parse_nutrition_value(nutrition.protein) * portions,
        'carbs': parse_nutrition_value(nutrition.carbs) * portions,
        'fat': parse_nutrition_value(nutrition.fat) * portions,
    }
