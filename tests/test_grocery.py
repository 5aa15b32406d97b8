"""Tests for merging, grouping and de-duplicating grocery items."""

from models import GroceryItem, CandidateItem
from services import (
    merge_identical_items, merge_identical_grocery_items, group_grocery_items,
    find_duplicates, apply_merges, combine_notes, get_category_group, is_seasoning,
)


def item(name, quantity=1, unit='', category=None, notes='', completed=False, id=''):
    return GroceryItem(name=name, quantity=quantity, unit=unit, category=category,
                       notes=notes, completed=completed, id=id)


def test_merge_sums_quantities():
    merged = merge_identical_grocery_items([item('Salt', 1), item('salt', 2)])
    assert len(merged) == 1
    assert merged[0].quantity == 3
    assert merged[0].name == 'Salt'


def test_merge_does_not_mutate_inputs():
    first = item('Milk', 1, 'cup', notes='whole')
    second = item('milk', 2, 'cups', notes='cold', completed=True)
    merged = merge_identical_items([first, second])

    assert merged[0].quantity == 3
    assert merged[0].notes == 'whole, cold'
    assert merged[0].completed is True
    assert merged[0] is not first
    assert first.quantity == 1
    assert first.notes == 'whole'
    assert first.completed is False


def test_merge_keeps_different_units_and_categories_apart():
    items = [item('Flour', 500, 'g'), item('Flour', 1, 'kg'), item('Flour', 1, 'g', 'bakery')]
    assert len(merge_identical_items(items)) == 3


def test_merge_empty():
    assert merge_identical_items([]) == []


def test_combine_notes():
    assert combine_notes('diced', 'diced, fresh') == 'diced, fresh'
    assert combine_notes('a; b', 'b, c') == 'a, b, c'
    assert combine_notes('', 'fresh') == 'fresh'
    assert combine_notes('fresh', '') == 'fresh'


def test_seasonings_detected_by_keyword():
    assert is_seasoning('Smoked paprika')
    assert is_seasoning('Kosher salt')
    assert not is_seasoning('Apples')
    assert get_category_group(item('Sea salt', category='pantry')) == 'seasonings'
    assert get_category_group(item('Apples', category='produce')) == 'produce'
    assert get_category_group(item('Rice')) == 'other'


def test_group_orders_seasonings_first_then_alphabetical():
    items = [
        item('Apples', category='produce', id='1'),
        item('Milk', category='dairy', id='2'),
        item('Kosher salt', category='pantry', id='3'),
        item('Rice', id='4'),
        item('Sea salt', id='5'),
    ]
    groups = group_grocery_items(items)
    assert [group.category for group in groups] == ['seasonings', 'dairy', 'other', 'produce']


def test_group_clusters_similar_items():
    items = [
        item('Apples', category='produce', id='1'),
        item('Bananas', category='produce', id='2'),
        item('Green apples', category='produce', id='3'),
        item('Kosher salt', id='4'),
        item('Sea salt', id='5'),
    ]
    groups = {group.category: group.groups for group in group_grocery_items(items)}

    produce = [[entry.id for entry in cluster] for cluster in groups['produce']]
    assert produce == [['1', '3'], ['2']]

    seasonings = [[entry.id for entry in cluster] for cluster in groups['seasonings']]
    assert seasonings == [['4', '5']]


def test_group_empty():
    assert group_grocery_items([]) == []


def test_find_duplicates_splits_merge_and_add():
    existing = [item('Milk', 1, 'cup', 'dairy', id='a')]
    incoming = [
        CandidateItem(name='milk', quantity=2, unit='cups', category='dairy'),
        CandidateItem(name='Eggs', quantity=12, category='dairy'),
    ]
    result = find_duplicates(existing, incoming)

    assert [(old.id, new.name) for old, new in result.to_merge] == [('a', 'milk')]
    assert [new.name for new in result.to_add] == ['Eggs']


def test_find_duplicates_first_match_wins():
    existing = [item('Rice', id='first'), item('rice', id='second')]
    result = find_duplicates(existing, [CandidateItem(name='RICE')])
    assert result.to_merge[0][0].id == 'first'


def test_find_duplicates_empty_inputs():
    result = find_duplicates([], [])
    assert result.to_merge == []
    assert result.to_add == []

    result = find_duplicates([], [CandidateItem(name='Rice')])
    assert len(result.to_add) == 1


def test_apply_merges_returns_updated_copies():
    milk = item('Milk', 1, 'cup', 'dairy', notes='whole', id='a')
    incoming = [
        CandidateItem(name='milk', quantity=2, unit='cup', category='dairy', notes='cold'),
        CandidateItem(name='Milk', quantity=0.5, unit='cup', category='dairy'),
    ]
    updated = apply_merges(find_duplicates([milk], incoming))

    assert len(updated) == 1
    assert updated[0].id == 'a'
    assert updated[0].quantity == 3.5
    assert updated[0].notes == 'whole, cold'
    assert milk.quantity == 1


def test_duplicate_result_to_dict():
    result = find_duplicates([item('Milk', id='a')], [CandidateItem(name='milk'), CandidateItem(name='Eggs')])
    data = result.to_dict()
    assert data['toMerge'][0]['existing']['id'] == 'a'
    assert data['toMerge'][0]['new']['name'] == 'milk'
    assert data['toAdd'][0]['name'] == 'Eggs'
