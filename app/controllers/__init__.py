"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Models (pydantic schemas)
- Services (recipe logic and the Claude client)

Each controller is a FastAPI APIRouter for one feature area.
"""

from app.controllers.recipes import router as recipes_router
from app.controllers.pantry import router as pantry_router
from app.controllers.cooking import router as cooking_router

__all__ = ["recipes_router", "pantry_router", "cooking_router"]
