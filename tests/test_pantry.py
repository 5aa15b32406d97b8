"""Tests for matching grocery names against pantry items."""

from models import GroceryItem, PantryItem, PantryMatch
from services import (
    find_pantry_match, match_against_pantry, has_exact_pantry_match,
    has_any_pantry_match, filter_owned,
)


PANTRY = [PantryItem(name='chicken breast', category='meat', id='p1')]


def test_exact_match():
    match = match_against_pantry('chicken breast', PANTRY)
    assert match.match_type == 'exact'
    assert match.item.id == 'p1'


def test_exact_match_ignores_case_and_spacing():
    assert find_pantry_match('  Chicken   Breast ', PANTRY).match_type == 'exact'


def test_no_match():
    match = find_pantry_match('tomato puree', PANTRY)
    assert match == PantryMatch()
    assert match.item is None
    assert match.match_type is None
    assert match.to_dict() == {'item': None, 'matchType': None}


def test_fuzzy_match_by_containment():
    match = find_pantry_match('chicken', PANTRY)
    assert match.match_type == 'fuzzy'
    assert match.item.id == 'p1'

    pantry = [PantryItem(name='Rice')]
    assert find_pantry_match('basmati rice', pantry).match_type == 'fuzzy'


def test_exact_match_preferred_over_earlier_fuzzy():
    pantry = [PantryItem(name='olive oil spray', id='spray'), PantryItem(name='Olive oil', id='oil')]
    match = find_pantry_match('olive oil', pantry)
    assert match.match_type == 'exact'
    assert match.item.id == 'oil'


def test_short_names_never_fuzzy_match():
    pantry = [PantryItem(name='olive oil')]
    assert find_pantry_match('oil', pantry).match_type is None

    pantry = [PantryItem(name='egg')]
    assert find_pantry_match('eggplant', pantry).match_type is None


def test_empty_inputs():
    assert find_pantry_match('', PANTRY) == PantryMatch()
    assert find_pantry_match('rice', []) == PantryMatch()


def test_has_match_helpers():
    assert has_exact_pantry_match('chicken breast', PANTRY)
    assert not has_exact_pantry_match('chicken', PANTRY)
    assert has_any_pantry_match('chicken', PANTRY)
    assert not has_any_pantry_match('tofu', PANTRY)


def test_filter_owned():
    items = [GroceryItem(name='Chicken breast'), GroceryItem(name='Chicken'), GroceryItem(name='Rice')]
    needed, owned = filter_owned(items, PANTRY)
    assert [entry.name for entry in owned] == ['Chicken breast']
    assert [entry.name for entry in needed] == ['Chicken', 'Rice']
