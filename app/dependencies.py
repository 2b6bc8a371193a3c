"""
FastAPI dependencies shared by the controllers.

Tests swap these out through app.dependency_overrides to run without
the Claude API or a pantry file on disk.
"""

from functools import lru_cache

from app.config import get_settings
from app.services.claude import RecipeGenerator
from app.services.pantry import JsonFilePantryStore, PantryService


@lru_cache
def get_recipe_generator() -> RecipeGenerator:
    """One generator (and HTTP connection pool) per process."""
    return RecipeGenerator()


def get_pantry_service() -> PantryService:
    settings = get_settings()
    return PantryService(JsonFilePantryStore(settings.pantry_file))
