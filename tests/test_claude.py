"""Tests for RecipeGenerator with a stubbed Anthropic client."""

import json
from types import SimpleNamespace

import pytest

from app.exceptions import NoJsonFoundError
from app.models import RecipeRequest
from app.services.claude import RecipeGenerator
from tests.conftest import FakeMessages


@pytest.fixture
def request_model():
    return RecipeRequest(
        main_dish="Chicken curry",
        dietary_restrictions=["Gluten-Free", "Dairy-Free"],
        available_ingredients="chicken, rice",
        max_cooking_time=60,
        serving_size=2,
    )


def make_generator(text: str) -> RecipeGenerator:
    return RecipeGenerator(client=SimpleNamespace(messages=FakeMessages(text)))


class TestBuildPrompt:

    def test_includes_constraints(self, request_model):
        prompt = make_generator("").build_prompt(request_model)

        assert "Respect all dietary restrictions: Gluten-Free, Dairy-Free" in prompt
        assert "Prioritize using available ingredients: chicken, rice" in prompt
        assert "<= 60 minutes" in prompt
        assert "Ensure servings = 2" in prompt
        assert "requested main dish: Chicken curry" in prompt
        assert '"recipeName": "string"' in prompt

    def test_defaults_when_empty(self):
        request = RecipeRequest(main_dish="Soup", max_cooking_time=30, serving_size=1)

        prompt = make_generator("").build_prompt(request)

        assert "dietary restrictions: None" in prompt
        assert "available ingredients: None specified" in prompt


class TestGenerate:

    def test_parses_response(self, request_model, recipe_data):
        generator = make_generator(f"```json\n{json.dumps(recipe_data)}\n```")

        recipe = generator.generate(request_model)

        assert recipe.recipe_name == "Tomato Basil Pasta"
        call = generator.client.messages.calls[0]
        assert call["system"] == RecipeGenerator.SYSTEM_PROMPT
        assert call["messages"][0]["role"] == "user"

    def test_parse_errors_are_logged_and_raised(self, request_model, caplog):
        generator = make_generator("I would suggest a curry.")

        with pytest.raises(NoJsonFoundError):
            generator.generate(request_model)

        assert "I would suggest a curry." in caplog.text


class TestSuggestSubstitution:

    def test_returns_trimmed_text(self):
        generator = make_generator("  Use oat milk.  \n")

        assert generator.suggest_substitution("milk", "dairy-free") == "Use oat milk."
        prompt = generator.client.messages.calls[0]["messages"][0]["content"]
        assert 'substitute for "milk" that is dairy-free' in prompt
