"""
Pantry Service - what the user already has at home.

Three pieces:
- is_ingredient_available(): the matching heuristic, a pure function
- PantryStore implementations: load/save the item list
- PantryService: add/remove/list operations on top of a store

Matching is deliberately loose. An ingredient counts as available when
its name contains a pantry item's name or the other way round, so
"tomato" matches "diced tomatoes". It will also match "rice" against
"rice vinegar"; there is no stemming or tokenizing.
"""

import json
import logging
import os
import tempfile
import uuid
from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from app.models import IngredientAvailability, PantryItem, Recipe

logger = logging.getLogger(__name__)

_pantry_adapter = TypeAdapter(list[PantryItem])


def _item_name(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("name") or "")
    return str(getattr(item, "name", "") or "")


def is_ingredient_available(ingredient_name: str, pantry_items: Iterable[Any]) -> bool:
    """
    Check whether an ingredient is covered by the pantry.

    Args:
        ingredient_name: Ingredient name from the recipe
        pantry_items: PantryItem models or dicts with a "name" key

    Returns:
        True if either name contains the other (case-insensitive)
    """
    normalized = ingredient_name.strip().lower()
    if not normalized:
        return False

    for item in pantry_items:
        pantry_name = _item_name(item).strip().lower()
        if pantry_name and (pantry_name in normalized or normalized in pantry_name):
            return True
    return False


def check_recipe_availability(
    recipe: Recipe,
    pantry_items: Iterable[Any]
) -> list[IngredientAvailability]:
    """Availability of every ingredient in a recipe, in recipe order."""
    pantry = list(pantry_items)
    return [
        IngredientAvailability(
            index=index,
            quantity=ingredient.quantity,
            name=ingredient.name,
            available=is_ingredient_available(ingredient.name, pantry),
        )
        for index, ingredient in enumerate(recipe.ingredients)
    ]


# ============================================
# Storage
# ============================================

class PantryStore(Protocol):
    """Anything that can load and save the pantry item list."""

    def load(self) -> list[PantryItem]:
        ...

    def save(self, items: list[PantryItem]) -> None:
        ...


class InMemoryPantryStore:
    """Keeps the pantry in a list. Used in tests and as a scratch store."""

    def __init__(self, items: Iterable[PantryItem] = ()):
        self._items = list(items)

    def load(self) -> list[PantryItem]:
        return list(self._items)

    def save(self, items: list[PantryItem]) -> None:
        self._items = list(items)


class JsonFilePantryStore:
    """
    Stores the pantry as a JSON array on disk.

    A missing file is an empty pantry. A file that can't be read back
    is logged and treated as empty too, so one bad write doesn't lock
    the user out of the app. Write errors are raised.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[PantryItem]:
        if not self.path.exists():
            return []

        try:
            return _pantry_adapter.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning(f"Could not read pantry file {self.path}: {e}")
            return []

    def save(self, items: list[PantryItem]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = _pantry_adapter.dump_python(items, by_alias=True)
            # Readers only ever see the old file or the new one
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
            ) as tmp:
                json.dump(data, tmp, indent=2)
            os.replace(tmp.name, self.path)
        except OSError as e:
            logger.error(f"Failed to save pantry items to {self.path}: {e}")
            raise


# ============================================
# Service
# ============================================

class PantryService:
    """Pantry operations on top of an injected store."""

    def __init__(self, store: PantryStore):
        self.store = store

    def list_items(self) -> list[PantryItem]:
        return self.store.load()

    def add_item(self, name: str, category: str) -> PantryItem:
        """Add an item with a fresh id and persist the pantry."""
        item = PantryItem(id=str(uuid.uuid4()), name=name, category=category)
        items = self.store.load()
        items.append(item)
        self.store.save(items)
        logger.info(f"Added pantry item '{item.name}' ({item.category})")
        return item

    def remove_item(self, item_id: str) -> bool:
        """Remove an item by id. Returns False if there was no such item."""
        items = self.store.load()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            return False

        self.store.save(remaining)
        return True

    def items_in_category(self, category: str) -> list[PantryItem]:
        """Items in one category; "All" returns everything."""
        items = self.store.load()
        if category == "All":
            return items
        return [item for item in items if item.category == category]

    def category_counts(self) -> dict[str, int]:
        return dict(Counter(item.category for item in self.store.load()))

    def check_recipe(self, recipe: Recipe) -> list[IngredientAvailability]:
        return check_recipe_availability(recipe, self.store.load())
