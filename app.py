from flask import Flask, request, jsonify
import logging

from config import get_config
from constants import (
    COMMON_INGREDIENTS, CATEGORY_NAMES,
    VALID_GROCERY_CATEGORIES, VALID_PANTRY_CATEGORIES, MAX_LENGTHS,
)
from models import GroceryItem, CandidateItem, PantryItem, RecipeNutrition
from services import (
    parse_ingredient_lines, scale_ingredients, calculate_scale_factor,
    merge_identical_grocery_items, group_grocery_items_for_display,
    find_duplicate_grocery_items, apply_merges, match_against_pantry,
    scale_nutrition, detect_cooking_constraints, check_scaling_constraints,
)
from utils.sanitizer import (
    RequestValidationError, sanitize_text, sanitize_ingredient_text,
    sanitize_instructions, sanitize_item, require_list, require_positive_number,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = app.config['JSON_SORT_KEYS']

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


@app.errorhandler(RequestValidationError)
def handle_validation_error(error):
    logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


def get_json_body():
    """Request body as a dict, or a 400 if it isn't a JSON object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestValidationError('Request body must be a JSON object')
    return data


def get_items(data, key, model, categories, required=True):
    """Clean and convert a list of item objects from the request body."""
    raw_items = require_list(data, key, app.config['MAX_ITEMS_PER_REQUEST'], required=required)
    return [model.from_dict(sanitize_item(raw, categories)) for raw in raw_items]


def get_ingredient_lines(data):
    if 'line' in data and 'lines' not in data:
        lines = [data['line']]
    else:
        lines = require_list(data, 'lines', app.config['MAX_ITEMS_PER_REQUEST'])
    return [sanitize_ingredient_text(line) for line in lines]


# =============================================================================
# Health
# =============================================================================

@app.route('/api/health')
def health():
    return jsonify({'status': 'ok'})


# =============================================================================
# Ingredients
# =============================================================================

@app.route('/api/ingredients/parse', methods=['POST'])
def ingredients_parse():
    lines = get_ingredient_lines(get_json_body())
    parsed = parse_ingredient_lines(lines)
    return jsonify({'items': [item.to_dict() for item in parsed]})


@app.route('/api/ingredients/scale', methods=['POST'])
def ingredients_scale():
    data = get_json_body()
    lines = get_ingredient_lines(data)
    from_portions = require_positive_number(data, 'from')
    to_portions = require_positive_number(data, 'to')

    result = {'lines': scale_ingredients(lines, from_portions, to_portions), 'warnings': []}

    # Warnings need some recipe text to look at
    instructions = sanitize_instructions(data.get('instructions'))
    title = sanitize_text(data.get('title'), MAX_LENGTHS['title'])
    if instructions or title:
        constraints = detect_cooking_constraints(
            instructions, title or None,
            sanitize_text(data.get('description'), MAX_LENGTHS['instructions']) or None)
        warnings = check_scaling_constraints(from_portions, to_portions, constraints)
        result['constraints'] = constraints.to_dict()
        result['warnings'] = [warning.to_dict() for warning in warnings]

    return jsonify(result)


# =============================================================================
# Grocery list
# =============================================================================

@app.route('/api/grocery/merge', methods=['POST'])
def grocery_merge():
    items = get_items(get_json_body(), 'items', GroceryItem, VALID_GROCERY_CATEGORIES)
    merged = merge_identical_grocery_items(items)
    return jsonify({'items': [item.to_dict() for item in merged]})


@app.route('/api/grocery/group', methods=['POST'])
def grocery_group():
    items = get_items(get_json_body(), 'items', GroceryItem, VALID_GROCERY_CATEGORIES)
    groups = group_grocery_items_for_display(items)
    return jsonify({'groups': [group.to_dict() for group in groups]})


@app.route('/api/grocery/duplicates', methods=['POST'])
def grocery_duplicates():
    data = get_json_body()
    existing = get_items(data, 'existing', GroceryItem, VALID_GROCERY_CATEGORIES, required=False)
    incoming = get_items(data, 'items', CandidateItem, VALID_GROCERY_CATEGORIES)

    duplicates = find_duplicate_grocery_items(existing, incoming)
    result = duplicates.to_dict()
    result['updated'] = [item.to_dict() for item in apply_merges(duplicates)]
    result['merged'] = len(duplicates.to_merge)
    result['created'] = len(duplicates.to_add)
    return jsonify(result)


# =============================================================================
# Pantry
# =============================================================================

@app.route('/api/pantry/match', methods=['POST'])
def pantry_match():
    data = get_json_body()
    name = sanitize_text(data.get('name'), MAX_LENGTHS['ingredient_name'])
    if not name:
        raise RequestValidationError("'name' is required")
    pantry = get_items(data, 'pantry', PantryItem, VALID_PANTRY_CATEGORIES, required=False)
    return jsonify(match_against_pantry(name, pantry).to_dict())


@app.route('/api/pantry/common')
def pantry_common():
    ingredients = [{
        'name': name,
        'category': category,
        'categoryName': CATEGORY_NAMES.get(category, category),
        'requiresQuantity': requires_quantity,
        'commonUnits': list(units),
    } for name, category, requires_quantity, units in COMMON_INGREDIENTS]
    return jsonify({'ingredients': ingredients})


# =============================================================================
# Nutrition
# =============================================================================

@app.route('/api/nutrition/scale', methods=['POST'])
def nutrition_scale():
    data = get_json_body()
    if not isinstance(data.get('nutrition'), dict):
        raise RequestValidationError("'nutrition' must be an object")

    if 'factor' in data:
        factor = require_positive_number(data, 'factor')
    else:
        factor = calculate_scale_factor(require_positive_number(data, 'from'),
                                        require_positive_number(data, 'to'))

    nutrition = RecipeNutrition.from_dict(data['nutrition'])
    return jsonify({'nutrition': scale_nutrition(nutrition, factor).to_dict()})


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
