"""
Services Package

Ingredient and grocery logic: parsing, measurement, scaling, matching,
grouping and pantry checks. Everything here is pure and stateless.
"""

from .parsing import (
    normalize_fractions,
    normalize_ranges,
    parse_fraction,
    parse_ingredient,
    parse_ingredients,
    has_explicit_quantity,
)

from .measurement import (
    canonical_unit,
    unit_class,
    round_for_unit,
    convert_down,
    enforce_minimum,
    pluralize,
    format_quantity,
    format_measure,
)

from .scaling import (
    extract_portion_number,
    calculate_scale_factor,
    scale_ingredient,
    scale_ingredients,
)

from .matching import (
    normalize_name,
    normalize_unit,
    base_name,
    items_identical,
    items_similar,
    similarity,
)

from .grocery import (
    is_seasoning,
    get_category_group,
    combine_notes,
    merge_identical_items,
    group_grocery_items,
    find_duplicates,
    apply_merges,
)

from .pantry import (
    find_pantry_match,
    has_exact_pantry_match,
    has_any_pantry_match,
    filter_owned,
)

from .nutrition import (
    parse_nutrition_value,
    scale_nutrition,
    calculate_meal_nutrition,
)

from .constraints import (
    detect_cooking_constraints,
    check_scaling_constraints,
)

# Library entry points
parse_ingredient_line = parse_ingredient
parse_ingredient_lines = parse_ingredients
scale_ingredient_line = scale_ingredient
merge_identical_grocery_items = merge_identical_items
group_grocery_items_for_display = group_grocery_items
find_duplicate_grocery_items = find_duplicates
match_against_pantry = find_pantry_match

__all__ = [
    # Entry points
    'parse_ingredient_line',
    'parse_ingredient_lines',
    'scale_ingredient_line',
    'merge_identical_grocery_items',
    'group_grocery_items_for_display',
    'find_duplicate_grocery_items',
    'match_against_pantry',
    # Parsing
    'normalize_fractions',
    'normalize_ranges',
    'parse_fraction',
    'parse_ingredient',
    'parse_ingredients',
    'has_explicit_quantity',
    # Measurement
    'canonical_unit',
    'unit_class',
    'round_for_unit',
    'convert_down',
    'enforce_minimum',
    'pluralize',
    'format_quantity',
    'format_measure',
    # Scaling
    'extract_portion_number',
    'calculate_scale_factor',
    'scale_ingredient',
    'scale_ingredients',
    # Matching
    'normalize_name',
    'normalize_unit',
    'base_name',
    'items_identical',
    'items_similar',
    'similarity',
    # Grocery
    'is_seasoning',
    'get_category_group',
    'combine_notes',
    'merge_identical_items',
    'group_grocery_items',
    'find_duplicates',
    'apply_merges',
    # Pantry
    'find_pantry_match',
    'has_exact_pantry_match',
    'has_any_pantry_match',
    'filter_owned',
    # Nutrition
    'parse_nutrition_value',
    'scale_nutrition',
    'calculate_meal_nutrition',
    # Constraints
    'detect_cooking_constraints',
    'check_scaling_constraints',
]
