"""
Input Sanitization Module

Cleans and validates request data before it reaches the ingredient engine.
Responses are JSON, so text is not HTML-escaped here; it is stripped of
control characters and capped in length.
"""

import math
import re

from constants import MAX_LENGTHS

# Control characters, except tab and newline
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


class RequestValidationError(ValueError):
    """Raised when a request body is malformed. Reported as HTTP 400."""
    pass


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text for the engine.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = _CONTROL_CHARS.sub('', text).strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_ingredient_text(text):
    """Sanitize a single ingredient line."""
    return re.sub(r'\s+', ' ', sanitize_text(text, MAX_LENGTHS['ingredient_text']))


def sanitize_instructions(instructions):
    """
    Sanitize recipe instructions, given as one string or a list of steps.

    Returns a list of cleaned, non-empty steps.
    """
    if not instructions:
        return []

    if isinstance(instructions, str):
        instructions = [instructions]
    elif not isinstance(instructions, list):
        raise RequestValidationError('instructions must be a string or a list of strings')

    steps = [sanitize_text(step, MAX_LENGTHS['instructions']) for step in instructions]
    return [step for step in steps if step]


def sanitize_category(category, allowed):
    """
    Normalize a category to lowercase and check it against a whitelist.

    Returns None for a missing category.
    """
    if category is None or category == '':
        return None
    category = sanitize_text(category, MAX_LENGTHS['category']).lower()
    if not category:
        return None
    if category not in allowed:
        raise RequestValidationError(f"Unknown category: {category}")
    return category


def sanitize_item(data, allowed_categories):
    """
    Clean the free-text fields of an item object from a request.

    Returns a new dict; unrecognized keys are passed through untouched.
    """
    if not isinstance(data, dict):
        raise RequestValidationError('Each item must be an object')

    name = sanitize_text(data.get('name'), MAX_LENGTHS['ingredient_name'])
    if not name:
        raise RequestValidationError('Each item needs a name')

    cleaned = dict(data)
    cleaned['name'] = name
    cleaned['unit'] = sanitize_text(data.get('unit'), MAX_LENGTHS['unit'])
    cleaned['notes'] = sanitize_text(data.get('notes'), MAX_LENGTHS['notes'])
    cleaned['category'] = sanitize_category(data.get('category'), allowed_categories)
    return cleaned


def require_list(data, key, max_items, required=True):
    """Get a list field from a request body, enforcing the item limit."""
    value = data.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        raise RequestValidationError(f"'{key}' must be a list")
    if len(value) > max_items:
        raise RequestValidationError(f"'{key}' has {len(value)} entries, the limit is {max_items}")
    return value


def require_positive_number(data, key):
    """Get a finite number > 0 from a request body."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise RequestValidationError(f"'{key}' must be a positive number")
    try:
        number = float(value)
    except ValueError:
        raise RequestValidationError(f"'{key}' must be a positive number")
    if not math.isfinite(number) or number <= 0:
        raise RequestValidationError(f"'{key}' must be a positive number")
    return number
