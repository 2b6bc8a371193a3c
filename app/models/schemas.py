"""
Pydantic Schemas (Data Transfer Objects)

These schemas define the structure of data flowing in and out of the API
and between the services.

Two families live here:
- Domain models (Recipe, Ingredient, Instruction, PantryItem, Timer,
  RecipeRequest). These use camelCase aliases on the wire because the
  language model and the browser client both speak camelCase JSON
  ("recipeName", "prepTimeMinutes"). Python code uses snake_case names.
- API bodies (*Request / *Response). Plain snake_case, one per endpoint.

The strict recipe schema at the bottom (StrictRecipe) is an optional
quality gate. The normalizer does not use it; it only checks that the
mandatory fields are present.
"""

import re

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# Categories offered by the pantry manager
PANTRY_CATEGORIES = [
    "Protein",
    "Dairy",
    "Grains",
    "Vegetables",
    "Fruits",
    "Spices",
    "Oils & Vinegar",
    "Canned Goods",
    "Frozen",
    "Baking",
    "Other",
]

# Dietary restrictions offered by the recipe form
DIETARY_RESTRICTIONS = [
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Keto",
    "Paleo",
    "Low-Carb",
    "High-Protein",
    "Nut-Free",
    "Soy-Free",
]

MAIN_DISH_PATTERN = re.compile(r"^[a-zA-Z\s\-',&()]+$")


class CamelModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================
# Recipe Schemas
# ============================================

class Ingredient(CamelModel):
    """
    One line of a recipe's ingredient list.

    The quantity is free text ("1 1/2 cups", "pinch") because the model
    writes quantities the way a person would. Bare numbers are accepted
    and kept as text.
    """
    quantity: str = Field(..., description="Amount needed (e.g., '2', '1 1/2 cups')")
    name: str = Field(..., description="Name of the ingredient")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        coerce_numbers_to_str = True


class Instruction(CamelModel):
    """A numbered preparation step. Time hints live inside the text."""
    step: int = Field(..., description="1-based step number")
    description: str = Field(..., description="The step instruction text")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Recipe(CamelModel):
    """
    A generated recipe.

    Only the name, ingredients and instructions are mandatory; the
    rest default so a sparse model response still yields a Recipe.
    Scaling produces a new instance, the original is never changed.
    """
    recipe_name: str
    description: str = ""
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    servings: int | None = None
    ingredients: list[Ingredient]
    instructions: list[Instruction]
    chef_tips: list[str] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes


class RecipeRequest(CamelModel):
    """
    What the user asked for.

    Mirrors the recipe form: dish, restrictions, what's in the fridge,
    time budget and how many people to feed.
    """
    main_dish: str = Field(..., min_length=2, max_length=100)
    dietary_restrictions: list[str] = Field(default_factory=list, max_length=5)
    available_ingredients: str = Field("", max_length=500)
    max_cooking_time: int = Field(..., ge=15, le=480, description="Minutes")
    serving_size: int = Field(..., ge=1, le=20)

    @field_validator("main_dish")
    @classmethod
    def check_main_dish(cls, value: str) -> str:
        if not MAIN_DISH_PATTERN.match(value):
            raise ValueError(
                "Dish name can only contain letters, spaces, hyphens, apostrophes, "
                "commas, ampersands, and parentheses"
            )
        return value

    @field_validator("dietary_restrictions")
    @classmethod
    def check_restrictions(cls, value: list[str]) -> list[str]:
        unknown = [item for item in value if item not in DIETARY_RESTRICTIONS]
        if unknown:
            raise ValueError(f"Unknown dietary restrictions: {', '.join(unknown)}")
        return value

    @field_validator("available_ingredients")
    @classmethod
    def clean_ingredients(cls, value: str) -> str:
        return sanitize_ingredient_list(value)


def sanitize_ingredient_list(ingredients: str) -> str:
    """Normalize a comma/newline separated list to 'a, b, c'."""
    items = [item.strip() for item in re.split(r"[,\n]", ingredients)]
    return ", ".join(item for item in items if item)


# ============================================
# Pantry Schemas
# ============================================

class PantryItem(CamelModel):
    """Something the user already has at home."""
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=50)


class PantryItemCreate(BaseModel):
    """Request body for adding a pantry item. The id is assigned server side."""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=50)

    @field_validator("name", "category")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


# ============================================
# Cooking Schemas
# ============================================

class Timer(CamelModel):
    """A kitchen timer. Durations are in seconds."""
    id: str
    label: str = Field(..., min_length=1, max_length=50)
    duration: int = Field(..., gt=0)
    remaining: int = Field(..., ge=0)
    is_active: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    @property
    def is_finished(self) -> bool:
        return self.remaining == 0


class StepTiming(BaseModel):
    """An instruction together with the cooking time found in its text."""
    step: int
    description: str
    minutes: int | None


# ============================================
# API Request/Response Schemas
# ============================================

class ScaleRequest(BaseModel):
    """Resize a recipe. The UI moves in half steps between 0.5x and 5x."""
    recipe: Recipe
    scale: float = Field(..., ge=0.5, le=5, multiple_of=0.5)


class SubstitutionRequest(BaseModel):
    ingredient: str = Field(..., min_length=1, max_length=100)
    restriction: str = Field("suitable for my dietary needs", max_length=200)


class SubstitutionResponse(BaseModel):
    ingredient: str
    suggestion: str


class IngredientAvailability(BaseModel):
    index: int
    quantity: str
    name: str
    available: bool


class AvailabilityResponse(BaseModel):
    recipe_name: str
    items: list[IngredientAvailability]
    available_count: int
    missing_count: int


class ShoppingListRequest(BaseModel):
    recipe: Recipe
    checked: list[int] = Field(default_factory=list, description="Indexes of ingredients already ticked off")


class ChecklistMetrics(BaseModel):
    total_time: int
    checked_count: int
    total_ingredients: int
    progress_percent: int


class ShoppingListResponse(BaseModel):
    recipe_name: str
    items: list[Ingredient]
    text: str
    filename: str
    metrics: ChecklistMetrics


class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str]


# ============================================
# Strict Recipe Schema (optional quality gate)
# ============================================

class StrictIngredient(CamelModel):
    quantity: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=100)


class StrictInstruction(CamelModel):
    step: int = Field(..., gt=0)
    description: str = Field(..., min_length=10, max_length=500)


class StrictRecipe(CamelModel):
    """Length and range limits a well-formed recipe should respect."""
    recipe_name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    prep_time_minutes: int = Field(..., ge=0, le=240)
    cook_time_minutes: int = Field(..., ge=0, le=480)
    servings: int = Field(..., ge=1, le=50)
    ingredients: list[StrictIngredient] = Field(..., min_length=1, max_length=30)
    instructions: list[StrictInstruction] = Field(..., min_length=1, max_length=20)
    chef_tips: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("chef_tips")
    @classmethod
    def check_tip_length(cls, tips: list[str]) -> list[str]:
        for tip in tips:
            if len(tip) > 200:
                raise ValueError("Each tip must be less than 200 characters")
        return tips
