"""
Recipes Controller

Handles recipe generation and everything done with a recipe afterwards:
- Generating a recipe from the user's request
- Scaling to a different number of servings
- Strict validation of a recipe
- Ingredient substitution suggestions
- Pantry availability and shopping lists

Design Decisions:
- Recipes are not stored; the client sends back the recipe it holds
- Endpoints are plain functions so the blocking Claude call runs in
  FastAPI's threadpool
- Parser failures become 502s with a machine-readable error kind
"""

import logging

import anthropic
from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_pantry_service, get_recipe_generator
from app.exceptions import RecipeResponseError, RecipeValidationError
from app.models import (
    AvailabilityResponse,
    Recipe,
    RecipeRequest,
    ScaleRequest,
    ShoppingListRequest,
    ShoppingListResponse,
    SubstitutionRequest,
    SubstitutionResponse,
    ValidationResponse,
)
from app.services.claude import RecipeGenerator
from app.services.pantry import PantryService
from app.services.quantities import scale_recipe
from app.services.recipe_parser import validate_recipe
from app.services.shopping import (
    checklist_metrics,
    missing_ingredients,
    shopping_list_filename,
    shopping_list_text,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/generate", response_model=Recipe)
def generate_recipe(
    request: RecipeRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator)
):
    """
    Generate a recipe with Claude.

    Error responses:
    - 502 when Claude answered but the answer isn't a usable recipe.
      The detail carries "error" (no_json_found, malformed_recipe or
      parse_failure) and "message", so the client can offer a retry.
    - 503 when the Claude API call itself failed
    """
    try:
        return generator.generate(request)
    except RecipeResponseError as e:
        raise HTTPException(
            status_code=502,
            detail={"error": e.kind, "message": str(e)}
        )
    except anthropic.APIError as e:
        logger.error(f"Claude API error: {e}")
        raise HTTPException(status_code=503, detail="Recipe generation service unavailable")


@router.post("/scale", response_model=Recipe)
def scale(request: ScaleRequest):
    """
    Scale a recipe's ingredients and servings.

    The client should always send the recipe as originally generated,
    not a previously scaled copy, so repeated scaling doesn't compound
    rounding.
    """
    return scale_recipe(request.recipe, request.scale)


@router.post("/validate", response_model=ValidationResponse)
def validate(recipe: Recipe):
    """Check a recipe against the strict length and range limits."""
    try:
        validate_recipe(recipe)
    except RecipeValidationError as e:
        return ValidationResponse(valid=False, errors=e.errors)
    return ValidationResponse(valid=True, errors=[])


@router.post("/substitutions", response_model=SubstitutionResponse)
def suggest_substitution(
    request: SubstitutionRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator)
):
    """Ask Claude for a replacement for one ingredient."""
    try:
        suggestion = generator.suggest_substitution(request.ingredient, request.restriction)
    except anthropic.APIError as e:
        logger.error(f"Claude API error: {e}")
        raise HTTPException(status_code=503, detail="Failed to get substitution suggestion")

    return SubstitutionResponse(ingredient=request.ingredient, suggestion=suggestion)


@router.post("/availability", response_model=AvailabilityResponse)
def check_availability(
    recipe: Recipe,
    pantry: PantryService = Depends(get_pantry_service)
):
    """Mark each ingredient as available or missing based on the pantry."""
    items = pantry.check_recipe(recipe)
    available = sum(1 for item in items if item.available)

    return AvailabilityResponse(
        recipe_name=recipe.recipe_name,
        items=items,
        available_count=available,
        missing_count=len(items) - available
    )


@router.post("/shopping-list", response_model=ShoppingListResponse)
def build_shopping_list(
    request: ShoppingListRequest,
    pantry: PantryService = Depends(get_pantry_service)
):
    """
    Build the shopping list for a recipe.

    Ingredients ticked off in the checklist (by index) and ingredients
    found in the pantry are left off. The response includes a plain-text
    version and a filename for downloading it.
    """
    recipe = request.recipe
    items = missing_ingredients(recipe, pantry.list_items(), request.checked)

    return ShoppingListResponse(
        recipe_name=recipe.recipe_name,
        items=items,
        text=shopping_list_text(recipe, items),
        filename=shopping_list_filename(recipe),
        metrics=checklist_metrics(recipe, request.checked)
    )
