# Utility modules for the ingredient engine API
from .sanitizer import (
    RequestValidationError, sanitize_text, sanitize_ingredient_text,
    sanitize_instructions, sanitize_category, sanitize_item,
    require_list, require_positive_number
)
