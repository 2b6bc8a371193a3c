"""
Quantity Service - parses and rescales free-text ingredient quantities.

Recipes from the model carry human-style quantities ("1 1/2 cups",
"0.5 tsp", "pinch of salt"). This module reads the leading amount and
unit out of such text and rewrites it for a new scale factor.

Rendering rules:
- Quantities written as fractions stay fractions while the scale is
  below 2, rounded to the nearest sixteenth (the finest division on
  common measuring cups and spoons).
- Everything else is rounded to two decimal places.
- Text without a leading number is not scalable and is returned as is.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from app.models import Recipe

FRACTION_DENOMINATOR = 16

MIN_SCALE_FACTOR = 0.5
MAX_SCALE_FACTOR = 5.0
SCALE_STEP = 0.5

FRACTION_PATTERN = re.compile(r"(?:(\d+)\s+)?(\d+)/(\d+)")
DECIMAL_PATTERN = re.compile(r"\d+\.?\d*")
UNIT_PATTERN = re.compile(r"[a-zA-Z]+")


@dataclass
class ParsedQuantity:
    """The numeric part of a quantity string."""
    amount: float
    unit: str
    fraction: Optional[str] = None  # matched fraction text, e.g. "1 1/2"

    @property
    def is_fraction(self) -> bool:
        return self.fraction is not None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return str(value)


def parse_quantity(quantity: str) -> ParsedQuantity:
    """
    Split a quantity string into amount and unit.

    A mixed number or simple fraction wins over a plain decimal. The
    unit is the first run of letters after the number. When no number
    is found the amount is 0.
    """
    amount = 0.0
    fraction = None
    end = 0

    fraction_match = FRACTION_PATTERN.search(quantity)
    if fraction_match and float(fraction_match.group(3)) != 0:
        whole = float(fraction_match.group(1)) if fraction_match.group(1) else 0.0
        numerator = float(fraction_match.group(2))
        denominator = float(fraction_match.group(3))
        amount = whole + numerator / denominator
        fraction = fraction_match.group(0)
        end = fraction_match.end()
    else:
        decimal_match = DECIMAL_PATTERN.search(quantity)
        if decimal_match:
            amount = float(decimal_match.group(0))
            end = decimal_match.end()

    unit_match = UNIT_PATTERN.search(quantity, end)
    unit = unit_match.group(0) if unit_match else ""

    return ParsedQuantity(amount=amount, unit=unit, fraction=fraction)


def _format_fraction(amount: float, unit: str) -> str:
    sixteenths = _round_half_up(amount * FRACTION_DENOMINATOR)
    whole, remainder = divmod(sixteenths, FRACTION_DENOMINATOR)

    if remainder == 0:
        return f"{whole} {unit}".strip() if whole > 0 else unit

    divisor = math.gcd(remainder, FRACTION_DENOMINATOR)
    fraction = f"{remainder // divisor}/{FRACTION_DENOMINATOR // divisor}"
    if whole > 0:
        return f"{whole} {fraction} {unit}".strip()
    return f"{fraction} {unit}".strip()


def scale_quantity(quantity: str, scale: float) -> str:
    """
    Rescale a quantity string by a positive factor.

    Args:
        quantity: Free-text quantity, e.g. "3/4 tsp"
        scale: Multiplier, must be greater than zero

    Returns:
        The rescaled quantity ("3/8 tsp" for a scale of 0.5), or the
        original text when it has no leading amount

    Raises:
        ValueError: If scale is not positive
    """
    if scale <= 0:
        raise ValueError(f"Scale factor must be positive, got {scale}")

    parsed = parse_quantity(quantity)
    if parsed.amount == 0:
        return quantity

    scaled = parsed.amount * scale
    if not math.isfinite(scaled * 100):
        return quantity

    if parsed.is_fraction and scale < 2:
        # Rounds to nothing, e.g. "1/64" with no unit
        return _format_fraction(scaled, parsed.unit) or quantity

    rounded = _round_half_up(scaled * 100) / 100
    return f"{_format_number(rounded)} {parsed.unit}".strip()


def clamp_scale_factor(scale: float) -> float:
    """Snap a requested factor to the nearest half step within 0.5x-5x."""
    snapped = _round_half_up(scale / SCALE_STEP) * SCALE_STEP
    return min(MAX_SCALE_FACTOR, max(MIN_SCALE_FACTOR, snapped))


def scale_recipe(recipe: Recipe, scale: float) -> Recipe:
    """
    Return a rescaled copy of a recipe.

    Every ingredient quantity and the serving count are scaled. The
    recipe passed in is left untouched so the caller can keep the
    original and rescale it again with a different factor.
    """
    if scale <= 0:
        raise ValueError(f"Scale factor must be positive, got {scale}")

    servings = recipe.servings
    if servings is not None:
        servings = _round_half_up(servings * scale)

    return recipe.model_copy(update={
        "servings": servings,
        "ingredients": [
            ingredient.model_copy(update={"quantity": scale_quantity(ingredient.quantity, scale)})
            for ingredient in recipe.ingredients
        ],
    })
