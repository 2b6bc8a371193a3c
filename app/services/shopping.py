"""
Shopping List Service - what still needs to be bought for a recipe.

An ingredient goes on the list unless the user ticked it off in the
ingredient checklist or the pantry already covers it.
"""

import math
import re
from collections.abc import Collection, Iterable
from typing import Any

from app.models import ChecklistMetrics, Ingredient, Recipe
from app.services.pantry import is_ingredient_available


def missing_ingredients(
    recipe: Recipe,
    pantry_items: Iterable[Any],
    checked: Collection[int] = ()
) -> list[Ingredient]:
    """
    Ingredients the user still needs.

    Args:
        recipe: The (possibly scaled) recipe
        pantry_items: Current pantry contents
        checked: Indexes of ingredients ticked off in the checklist
    """
    pantry = list(pantry_items)
    checked = set(checked)
    return [
        ingredient
        for index, ingredient in enumerate(recipe.ingredients)
        if index not in checked and not is_ingredient_available(ingredient.name, pantry)
    ]


def shopping_list_lines(ingredients: Iterable[Ingredient]) -> list[str]:
    return [f"{ingredient.quantity} {ingredient.name}".strip() for ingredient in ingredients]


def shopping_list_text(recipe: Recipe, ingredients: Iterable[Ingredient]) -> str:
    """Plain-text list, ready to download or paste."""
    lines = "\n".join(shopping_list_lines(ingredients))
    return f"Shopping List for {recipe.recipe_name}\n\n{lines}"


def shopping_list_filename(recipe: Recipe) -> str:
    # "Mac & Cheese" -> "mac___cheese_shopping_list.txt"
    slug = re.sub(r"[^a-z0-9]", "_", recipe.recipe_name, flags=re.IGNORECASE).lower()
    return f"{slug}_shopping_list.txt"


def checklist_metrics(recipe: Recipe, checked: Collection[int] = ()) -> ChecklistMetrics:
    """Progress through the ingredient checklist."""
    total = len(recipe.ingredients)
    checked_count = len({index for index in checked if 0 <= index < total})
    percent = math.floor(checked_count / total * 100 + 0.5) if total else 0

    return ChecklistMetrics(
        total_time=recipe.total_time_minutes,
        checked_count=checked_count,
        total_ingredients=total,
        progress_percent=percent,
    )
