"""
Recipe Parser - turns raw model output into a Recipe.

The model is asked for a single minified JSON object, but responses
often arrive wrapped in ```json fences or with a sentence of
commentary. The normalizer strips fences, slices from the first "{" to
the last "}" and parses that. It only checks that the recipe has a
name, ingredients and instructions; value ranges and lengths are left
to validate_recipe().
"""

import json
import re

from pydantic import ValidationError

from app.exceptions import (
    MalformedRecipeError,
    NoJsonFoundError,
    RecipeParseFailure,
    RecipeValidationError,
)
from app.models import Recipe, StrictRecipe

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\s*", re.IGNORECASE)

# Wire names of the fields a usable recipe cannot do without
REQUIRED_FIELDS = ("recipeName", "ingredients", "instructions")


def strip_code_fences(text: str) -> str:
    return CODE_FENCE_PATTERN.sub("", text.strip())


def extract_json_block(text: str) -> str:
    """
    Slice the outermost {...} block out of a response.

    Raises:
        NoJsonFoundError: If there is no "{" or no "}" after it
    """
    cleaned = strip_code_fences(text)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end < start:
        raise NoJsonFoundError()
    return cleaned[start:end + 1]


def normalize_recipe_response(raw_text: str) -> Recipe:
    """
    Parse a model response into a Recipe.

    Args:
        raw_text: The complete text returned by the model

    Returns:
        The parsed Recipe

    Raises:
        NoJsonFoundError: No JSON object in the text
        MalformedRecipeError: Name, ingredients or instructions missing/empty
        RecipeParseFailure: The JSON is invalid or its fields can't be read
    """
    json_text = extract_json_block(raw_text)

    # JSONDecodeError is a ValueError; oversized integers and deep nesting fail too
    try:
        data = json.loads(json_text)
    except (ValueError, RecursionError) as e:
        raise RecipeParseFailure(str(e)) from e

    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise MalformedRecipeError(missing)

    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        raise RecipeParseFailure(str(e)) from e


def validate_recipe(recipe: Recipe) -> Recipe:
    """
    Apply the strict schema on top of a parsed recipe.

    Raises:
        RecipeValidationError: Listing every field that is out of range
    """
    try:
        StrictRecipe.model_validate(recipe.model_dump(by_alias=True))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise RecipeValidationError(errors) from e
    return recipe
