"""
Pantry Controller

CRUD for the user's pantry. The pantry lives in a local JSON file (see
JsonFilePantryStore); the recipe endpoints read it for availability
checks and shopping lists.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_pantry_service
from app.models import PANTRY_CATEGORIES, PantryItem, PantryItemCreate
from app.services.pantry import PantryService

router = APIRouter(prefix="/pantry", tags=["pantry"])


@router.get("", response_model=list[PantryItem])
def list_pantry_items(
    category: str = "All",
    pantry: PantryService = Depends(get_pantry_service)
):
    """List pantry items, optionally filtered by category."""
    return pantry.items_in_category(category)


@router.get("/categories")
def list_categories(pantry: PantryService = Depends(get_pantry_service)):
    """Known categories with the number of items in each."""
    counts = pantry.category_counts()
    return [
        {"category": category, "count": counts.get(category, 0)}
        for category in PANTRY_CATEGORIES
    ]


@router.post("", response_model=PantryItem, status_code=201)
def add_pantry_item(
    item: PantryItemCreate,
    pantry: PantryService = Depends(get_pantry_service)
):
    """Add an item to the pantry. The id is generated here."""
    return pantry.add_item(item.name, item.category)


@router.delete("/{item_id}", status_code=204)
def remove_pantry_item(
    item_id: str,
    pantry: PantryService = Depends(get_pantry_service)
):
    if not pantry.remove_item(item_id):
        raise HTTPException(status_code=404, detail="Pantry item not found")
