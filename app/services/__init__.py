"""
Services layer - recipe logic with no HTTP dependencies.
"""

from app.services.claude import RecipeGenerator
from app.services.cooking import (
    CookingProgress,
    create_step_timer,
    extract_minutes,
    reset_timer,
    start_cooking,
    step_timings,
    tick_timer,
    toggle_timer,
)
from app.services.pantry import (
    InMemoryPantryStore,
    JsonFilePantryStore,
    PantryService,
    PantryStore,
    check_recipe_availability,
    is_ingredient_available,
)
from app.services.quantities import clamp_scale_factor, parse_quantity, scale_quantity, scale_recipe
from app.services.recipe_parser import normalize_recipe_response, validate_recipe
from app.services.shopping import (
    checklist_metrics,
    missing_ingredients,
    shopping_list_filename,
    shopping_list_text,
)

__all__ = [
    "RecipeGenerator",
    "CookingProgress",
    "create_step_timer",
    "extract_minutes",
    "reset_timer",
    "start_cooking",
    "step_timings",
    "tick_timer",
    "toggle_timer",
    "InMemoryPantryStore",
    "JsonFilePantryStore",
    "PantryService",
    "PantryStore",
    "check_recipe_availability",
    "is_ingredient_available",
    "clamp_scale_factor",
    "parse_quantity",
    "scale_quantity",
    "scale_recipe",
    "normalize_recipe_response",
    "validate_recipe",
    "checklist_metrics",
    "missing_ingredients",
    "shopping_list_filename",
    "shopping_list_text",
]
