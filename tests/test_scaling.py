"""Tests for scaling ingredient lines between portion counts."""

import pytest

from services import (
    scale_ingredient, scale_ingredient_line, scale_ingredients,
    extract_portion_number, calculate_scale_factor, parse_ingredient,
)


def test_scaling_up_examples():
    assert '1000 g' in scale_ingredient('500g chicken breast', 4, 8)
    assert '400 ml' in scale_ingredient('200ml tomato puree', 4, 8)
    assert '4 tbsp' in scale_ingredient('2 tbsp garam masala', 4, 8)


def test_scaled_line_is_reassembled():
    assert scale_ingredient('500g chicken breast', 4, 8) == '1000 g chicken breast'
    assert scale_ingredient('2 cups flour, sifted', 4, 2) == '1 cup flour, sifted'
    assert scale_ingredient('2 cloves garlic', 4, 8) == '4 cloves garlic'


@pytest.mark.parametrize('portions', [1, 2, 4, 6.5])
def test_same_portions_returns_line_unchanged(portions):
    line = '1 1/2 cups flour, sifted'
    assert scale_ingredient(line, portions, portions) == line


@pytest.mark.parametrize('from_portions,to_portions', [
    (0, 4), (4, 0), (-2, 4), (4, float('nan')), ('abc', 4), (None, 2),
])
def test_invalid_portions_return_line_unchanged(from_portions, to_portions):
    assert scale_ingredient('2 cups rice', from_portions, to_portions) == '2 cups rice'


def test_lines_without_quantity_are_unchanged():
    assert scale_ingredient('Salt to taste', 4, 8) == 'Salt to taste'
    assert scale_ingredient('', 4, 8) == ''


def test_small_cup_amount_converts_to_tablespoons():
    assert scale_ingredient('1 cup milk', 8, 1) == '2 tbsp milk'
    assert scale_ingredient('0.96 cup milk', 4, 1) == '3.75 tbsp milk'


def test_quarter_cup_stays_in_cups():
    assert scale_ingredient('1 cup milk', 4, 1) == '1/4 cup milk'
    assert scale_ingredient('1.04 cup milk', 4, 1) == '1/4 cup milk'


def test_small_tablespoon_amount_converts_to_teaspoons():
    assert scale_ingredient('1 tbsp oil', 4, 2) == '1 1/2 tsp oil'


def test_scale_down_respects_minimums():
    assert scale_ingredient('1/4 tsp salt', 4, 1) == '1/4 tsp salt'
    assert scale_ingredient('1 clove garlic', 4, 1) == '1 clove garlic'
    assert scale_ingredient('1 g yeast', 100, 1) == '1 g yeast'


@pytest.mark.parametrize('line', [
    '1 g yeast', '1/8 tsp nutmeg', '1 egg', '1 can tomatoes', '0.1 kg rice',
    '1 tbsp oil', '1/4 cup milk', '5 ml vanilla', '1 inch ginger',
])
def test_scale_down_never_reaches_zero(line):
    scaled = scale_ingredient(line, 12, 1)
    assert parse_ingredient(scaled).quantity > 0


def test_scale_ingredients_and_alias():
    lines = ['2 eggs', 'Salt to taste']
    assert scale_ingredients(lines, 2, 4) == ['4 eggs', 'Salt to taste']
    assert scale_ingredients([], 2, 4) == []
    assert scale_ingredient_line is scale_ingredient


def test_extract_portion_number():
    assert extract_portion_number('4 servings') == 4
    assert extract_portion_number('serves 8') == 8
    assert extract_portion_number('6') == 6
    assert extract_portion_number('2.5 portions') == 3
    assert extract_portion_number('a few') == 4
    assert extract_portion_number(None) == 4
    assert extract_portion_number('', default=2) == 2
    assert extract_portion_number(6) == 6


def test_calculate_scale_factor():
    assert calculate_scale_factor(4, 8) == 2.0
    assert calculate_scale_factor(4, 2) == 0.5
    assert calculate_scale_factor(0, 8) == 1.0
    assert calculate_scale_factor(4, -1) == 1.0


def test_eggs_without_unit_scale_to_whole_numbers():
    scaled = scale_ingredient('2 eggs', 4, 1)
    assert scaled == '1 eggs'
    assert parse_ingredient(scaled).quantity == 1

    assert scale_ingredient('3 eggs', 2, 1) == '2 eggs'
    assert scale_ingredient('3 large eggs', 4, 2) == '2 large eggs'


def test_other_unitless_lines_keep_fractions():
    assert scale_ingredient('1 onion', 4, 2) == '1/2 onion'


def test_overlong_fraction_is_not_scaled():
    line = '1 ' + '9' * 400 + '/3 cups flour'
    assert scale_ingredient(line, 4, 8) == line


def test_hyphenated_word_is_not_a_unit():
    assert scale_ingredient('2 T-bone steaks', 4, 8) == '4 T-bone steaks'
