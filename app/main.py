"""
Recipe Assistant API - Application Entry Point

This is the main FastAPI application. It follows the same MVC layout
as the rest of the package.

Architecture Overview:
=====================
- Models (app/models/): Pydantic schemas for recipes, pantry items,
  timers and API bodies

- Controllers (app/controllers/): Request handlers
  - recipes.py: generation, scaling, validation, substitutions,
    availability and shopping lists
  - pantry.py: pantry item management
  - cooking.py: step timings and timers for cooking mode

- Services (app/services/): Business logic layer
  - claude.py: recipe generation with Claude
  - recipe_parser.py: turns model output into a Recipe
  - quantities.py: quantity parsing and scaling
  - cooking.py: time extraction, timers, step progress
  - pantry.py: pantry matching and storage
  - shopping.py: shopping list building

Request Flow:
============
1. Request arrives at a Controller endpoint
2. Controller validates input using Pydantic Schemas (Models)
3. Controller calls Services for business logic
4. Response is serialized using Pydantic Schemas (Models)
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.controllers import recipes_router, pantry_router, cooking_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Create FastAPI application
app = FastAPI(
    title="Recipe Assistant API",
    description="""
    Recipe generation powered by Claude AI.

    ## Features
    - Recipe generation from a dish, dietary needs, ingredients and time budget
    - Recipe scaling with kitchen-friendly fractions
    - Pantry tracking with ingredient availability checks
    - Shopping lists for missing ingredients
    - Step timings and timers for cooking mode
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware configuration
# Allows the web frontend to communicate with the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register controllers (routers)
app.include_router(recipes_router)   # /recipes endpoints
app.include_router(pantry_router)    # /pantry endpoints
app.include_router(cooking_router)   # /cooking endpoints


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/", tags=["health"])
def root():
    """
    Basic health check endpoint.

    Returns a simple status indicating the API is running.
    """
    return {
        "status": "healthy",
        "service": "Recipe Assistant API",
        "version": "1.0.0"
    }


@app.get("/health", tags=["health"])
def health_check():
    """Status of dependent services."""
    return {
        "status": "healthy",
        "claude": "configured" if settings.anthropic_api_key else "not_configured",
        "pantry_file": settings.pantry_file
    }
