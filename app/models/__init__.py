"""
Models Package - Pydantic schemas

Domain models for generated recipes, the pantry and kitchen timers,
plus the request/response bodies of the API.
"""

from app.models.schemas import (
    # Domain models
    Recipe,
    Ingredient,
    Instruction,
    RecipeRequest,
    PantryItem,
    PantryItemCreate,
    Timer,
    StepTiming,
    StrictRecipe,
    # API bodies
    ScaleRequest,
    SubstitutionRequest,
    SubstitutionResponse,
    IngredientAvailability,
    AvailabilityResponse,
    ShoppingListRequest,
    ShoppingListResponse,
    ChecklistMetrics,
    ValidationResponse,
    # Constants
    PANTRY_CATEGORIES,
    DIETARY_RESTRICTIONS,
)

__all__ = [
    # Domain models
    "Recipe",
    "Ingredient",
    "Instruction",
    "RecipeRequest",
    "PantryItem",
    "PantryItemCreate",
    "Timer",
    "StepTiming",
    "StrictRecipe",
    # API bodies
    "ScaleRequest",
    "SubstitutionRequest",
    "SubstitutionResponse",
    "IngredientAvailability",
    "AvailabilityResponse",
    "ShoppingListRequest",
    "ShoppingListResponse",
    "ChecklistMetrics",
    "ValidationResponse",
    # Constants
    "PANTRY_CATEGORIES",
    "DIETARY_RESTRICTIONS",
]
