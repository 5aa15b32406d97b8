"""
Pantry Service

Functions for checking grocery items against what a user already has.
"""

from constants import FUZZY_MATCH_MIN_LENGTH
from models import PantryMatch
from .matching import normalize_name


def find_pantry_match(name, pantry_items):
    """
    Find the pantry item matching a grocery item name.

    Exact matches (equal normalized names) are tried first. Failing that, a
    fuzzy match is one name containing the other, and only counts when both
    names are at least 4 characters so "oil" does not match "boiled eggs".
    """
    if not name or not pantry_items:
        return PantryMatch()

    grocery_name = normalize_name(name)
    if not grocery_name:
        return PantryMatch()

    for item in pantry_items:
        if normalize_name(item.name) == grocery_name:
            return PantryMatch(item=item, match_type='exact')

    if len(grocery_name) >= FUZZY_MATCH_MIN_LENGTH:
        for item in pantry_items:
            pantry_name = normalize_name(item.name)
            if len(pantry_name) < FUZZY_MATCH_MIN_LENGTH:
                continue
            if pantry_name in grocery_name or grocery_name in pantry_name:
                return PantryMatch(item=item, match_type='fuzzy')

    return PantryMatch()


def has_exact_pantry_match(name, pantry_items):
    return find_pantry_match(name, pantry_items).match_type == 'exact'


def has_any_pantry_match(name, pantry_items):
    return find_pantry_match(name, pantry_items).match_type is not None


def filter_owned(items, pantry_items):
    """Split grocery items into (needed, already_owned) using exact pantry matches."""
    needed, owned = [], []
    for item in items or []:
        if has_exact_pantry_match(item.name, pantry_items):
            owned.append(item)
        else:
            needed.append(item)
    return needed, owned
