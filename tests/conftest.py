"""
Shared fixtures: sample recipes, a fake generator and an API client
wired to an in-memory pantry.
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_pantry_service, get_recipe_generator
from app.main import app
from app.models import PantryItem, Recipe
from app.services.pantry import InMemoryPantryStore, PantryService
from app.services.recipe_parser import normalize_recipe_response


RECIPE_DATA = {
    "recipeName": "Tomato Basil Pasta",
    "description": "A quick weeknight pasta with fresh tomatoes and basil.",
    "prepTimeMinutes": 10,
    "cookTimeMinutes": 20,
    "servings": 4,
    "ingredients": [
        {"quantity": "1 1/2 cups", "name": "diced tomatoes"},
        {"quantity": "3/4 tsp", "name": "salt"},
        {"quantity": "2 cups", "name": "penne pasta"},
        {"quantity": "pinch of", "name": "red pepper flakes"},
        {"quantity": "0.5 cup", "name": "fresh basil"},
    ],
    "instructions": [
        {"step": 1, "description": "Bring a large pot of salted water to a boil."},
        {"step": 2, "description": "Cook the penne for 11 minutes until al dente."},
        {"step": 3, "description": "Simmer the tomatoes with salt for 1 hour on low heat."},
        {"step": 4, "description": "Toss the pasta with the sauce and the basil."},
    ],
    "chefTips": ["Save a cup of pasta water to loosen the sauce."],
}


class FakeGenerator:
    """Stands in for RecipeGenerator; replies with canned model text."""

    def __init__(self, raw_text: str = "", substitution: str = "", error: Exception | None = None):
        self.raw_text = raw_text
        self.substitution = substitution
        self.error = error
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return normalize_recipe_response(self.raw_text)

    def suggest_substitution(self, ingredient, restriction):
        if self.error:
            raise self.error
        return self.substitution


class FakeMessages:
    """Records messages.create calls and returns a fixed text block."""

    def __init__(self, text: str):
        self.text = text
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.text)])


@pytest.fixture
def recipe_data():
    return json.loads(json.dumps(RECIPE_DATA))


@pytest.fixture
def recipe(recipe_data):
    return Recipe.model_validate(recipe_data)


@pytest.fixture
def pantry_store():
    return InMemoryPantryStore([
        PantryItem(id="item-1", name="Tomato", category="Vegetables"),
        PantryItem(id="item-2", name="basil", category="Spices"),
    ])


@pytest.fixture
def generator(recipe_data):
    return FakeGenerator(raw_text=f"Here you go:\n```json\n{json.dumps(recipe_data)}\n```")


@pytest.fixture
def client(generator, pantry_store):
    app.dependency_overrides[get_recipe_generator] = lambda: generator
    app.dependency_overrides[get_pantry_service] = lambda: PantryService(pantry_store)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
