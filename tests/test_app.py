"""Tests for the JSON API."""

import pytest

from app import app
from config import TestingConfig


@pytest.fixture
def client():
    app.config.from_object(TestingConfig)
    with app.test_client() as client:
        yield client


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_parse_lines(client):
    response = client.post('/api/ingredients/parse', json={'lines': ['500g chicken breast', 'Salt to taste']})
    assert response.status_code == 200
    items = response.get_json()['items']
    assert items[0] == {'quantity': 500, 'unit': 'g', 'name': 'chicken breast', 'notes': ''}
    assert items[1]['name'] == 'Salt to taste'


def test_parse_single_line(client):
    response = client.post('/api/ingredients/parse', json={'line': '2 tbsp olive oil (extra virgin)'})
    assert response.get_json()['items'][0]['notes'] == 'extra virgin'


def test_parse_rejects_non_json(client):
    response = client.post('/api/ingredients/parse', data='not json', content_type='text/plain')
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_parse_rejects_too_many_lines(client):
    response = client.post('/api/ingredients/parse', json={'lines': ['1 egg'] * 6})
    assert response.status_code == 400


def test_scale_lines(client):
    response = client.post('/api/ingredients/scale', json={
        'lines': ['500g chicken breast', '200ml tomato puree'], 'from': 4, 'to': 8})
    assert response.status_code == 200
    data = response.get_json()
    assert data['lines'] == ['1000 g chicken breast', '400 ml tomato puree']
    assert data['warnings'] == []


def test_scale_with_warnings(client):
    response = client.post('/api/ingredients/scale', json={
        'lines': ['2 tbsp garam masala'], 'from': 4, 'to': 8,
        'instructions': ['Fry everything in a wok.'], 'title': 'Chicken curry'})
    data = response.get_json()
    assert data['lines'] == ['4 tbsp garam masala']
    assert data['constraints']['equipment'] == ['wok']
    assert [warning['category'] for warning in data['warnings']] == ['timing', 'capacity']


@pytest.mark.parametrize('body', [
    {'lines': ['1 cup rice'], 'from': 0, 'to': 2},
    {'lines': ['1 cup rice'], 'from': 'four', 'to': 2},
    {'lines': ['1 cup rice'], 'to': 2},
    {'lines': '1 cup rice', 'from': 4, 'to': 2},
])
def test_scale_rejects_bad_input(client, body):
    response = client.post('/api/ingredients/scale', json=body)
    assert response.status_code == 400


def test_grocery_merge(client):
    response = client.post('/api/grocery/merge', json={'items': [
        {'id': 'a', 'name': 'Salt', 'quantity': 1},
        {'id': 'b', 'name': 'salt', 'quantity': 2},
    ]})
    items = response.get_json()['items']
    assert len(items) == 1
    assert items[0]['quantity'] == 3
    assert items[0]['id'] == 'a'


def test_grocery_rejects_unknown_category(client):
    response = client.post('/api/grocery/merge', json={'items': [{'name': 'Salt', 'category': 'gadgets'}]})
    assert response.status_code == 400
    assert 'gadgets' in response.get_json()['error']


def test_grocery_rejects_nameless_item(client):
    response = client.post('/api/grocery/group', json={'items': [{'quantity': 2}]})
    assert response.status_code == 400


def test_grocery_group(client):
    response = client.post('/api/grocery/group', json={'items': [
        {'id': '1', 'name': 'Apples', 'category': 'Produce'},
        {'id': '2', 'name': 'Kosher salt'},
        {'id': '3', 'name': 'Sea salt'},
    ]})
    groups = response.get_json()['groups']
    assert [group['category'] for group in groups] == ['seasonings', 'produce']
    assert [[entry['id'] for entry in cluster] for cluster in groups[0]['groups']] == [['2', '3']]


def test_grocery_duplicates(client):
    response = client.post('/api/grocery/duplicates', json={
        'existing': [{'id': 'a', 'name': 'Milk', 'quantity': 1, 'unit': 'cup', 'category': 'dairy'}],
        'items': [
            {'name': 'milk', 'quantity': 2, 'unit': 'cups', 'category': 'dairy'},
            {'name': 'Eggs', 'quantity': 12, 'category': 'dairy'},
        ],
    })
    data = response.get_json()
    assert data['merged'] == 1
    assert data['created'] == 1
    assert data['toMerge'][0]['existing']['id'] == 'a'
    assert data['toAdd'][0]['name'] == 'Eggs'
    assert data['updated'][0]['quantity'] == 3


def test_pantry_match(client):
    pantry = [{'id': 'p1', 'name': 'chicken breast', 'category': 'meat'}]

    exact = client.post('/api/pantry/match', json={'name': 'chicken breast', 'pantry': pantry}).get_json()
    assert exact['matchType'] == 'exact'
    assert exact['item']['id'] == 'p1'

    none = client.post('/api/pantry/match', json={'name': 'tomato puree', 'pantry': pantry}).get_json()
    assert none == {'item': None, 'matchType': None}


def test_pantry_match_requires_name(client):
    response = client.post('/api/pantry/match', json={'pantry': []})
    assert response.status_code == 400


def test_pantry_common(client):
    ingredients = client.get('/api/pantry/common').get_json()['ingredients']
    garlic = next(entry for entry in ingredients if entry['name'] == 'Garlic')
    assert garlic['category'] == 'produce'
    assert garlic['requiresQuantity'] is False
    assert garlic['commonUnits'] == []


def test_nutrition_scale(client):
    response = client.post('/api/nutrition/scale', json={
        'nutrition': {'calories_per_portion': '520 kcal', 'protein': '38g'}, 'factor': 2})
    assert response.get_json()['nutrition'] == {'calories_per_portion': '520 kcal', 'protein': '76g'}


def test_nutrition_scale_from_portions(client):
    response = client.post('/api/nutrition/scale', json={
        'nutrition': {'calories_per_portion': '520 kcal', 'fat': '20g'}, 'from': 4, 'to': 2})
    assert response.get_json()['nutrition']['fat'] == '10g'


def test_nutrition_scale_requires_object(client):
    response = client.post('/api/nutrition/scale', json={'nutrition': '38g', 'factor': 2})
    assert response.status_code == 400
