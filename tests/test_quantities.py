"""Tests for quantity parsing and recipe scaling."""

import pytest

from app.models import Recipe
from app.services.quantities import (
    clamp_scale_factor,
    parse_quantity,
    scale_quantity,
    scale_recipe,
)


class TestParseQuantity:

    def test_integer_with_unit(self):
        parsed = parse_quantity("2 cups")
        assert parsed.amount == 2
        assert parsed.unit == "cups"
        assert not parsed.is_fraction

    def test_decimal_without_unit(self):
        parsed = parse_quantity("1.5")
        assert parsed.amount == 1.5
        assert parsed.unit == ""

    def test_simple_fraction(self):
        parsed = parse_quantity("3/4 tsp")
        assert parsed.amount == 0.75
        assert parsed.unit == "tsp"
        assert parsed.fraction == "3/4"

    def test_mixed_number(self):
        parsed = parse_quantity("1 1/2 cups")
        assert parsed.amount == 1.5
        assert parsed.fraction == "1 1/2"

    def test_fraction_without_space_is_not_mixed(self):
        assert parse_quantity("12/16 oz").amount == 0.75

    def test_unit_is_taken_after_the_number(self):
        assert parse_quantity("about 2 cups").unit == "cups"

    def test_no_number(self):
        parsed = parse_quantity("pinch of salt")
        assert parsed.amount == 0

    def test_zero_denominator_falls_back_to_decimal(self):
        parsed = parse_quantity("1/0 cup")
        assert parsed.amount == 1
        assert not parsed.is_fraction


class TestScaleQuantity:

    def test_fraction_halved(self):
        assert scale_quantity("3/4 tsp", 0.5) == "3/8 tsp"

    def test_mixed_number_unchanged_at_scale_one(self):
        assert scale_quantity("1 1/2 cups", 1) == "1 1/2 cups"

    def test_decimal_path_for_whole_numbers(self):
        assert scale_quantity("2 cups", 3) == "6 cups"

    def test_non_scalable_text_is_returned_unchanged(self):
        assert scale_quantity("pinch of salt", 2) == "pinch of salt"

    def test_scale_one_normalizes_decimal(self):
        assert scale_quantity("1.0", 1) == "1"

    def test_fraction_switches_to_decimal_at_scale_two(self):
        assert scale_quantity("3/4 cup", 2) == "1.5 cup"

    def test_fraction_collapses_to_whole_number(self):
        assert scale_quantity("1/2 cup", 1.5) == "3/4 cup"
        assert scale_quantity("2/3 cup", 1.5) == "1 cup"

    def test_fraction_with_whole_part(self):
        assert scale_quantity("3/4 cup", 1.5) == "1 1/8 cup"

    def test_fraction_rounded_to_sixteenths(self):
        # 1/3 = 5.33 sixteenths -> 5/16
        assert scale_quantity("1/3 cup", 1) == "5/16 cup"

    def test_tiny_fraction_keeps_only_unit(self):
        assert scale_quantity("1/64 tsp", 1) == "tsp"

    def test_tiny_fraction_without_unit_is_returned_unchanged(self):
        assert scale_quantity("1/64", 1) == "1/64"

    def test_decimal_rounds_to_two_places(self):
        assert scale_quantity("1 cup", 1 / 3) == "0.33 cup"

    def test_decimal_rounds_half_up(self):
        assert scale_quantity("0.125 cup", 1) == "0.13 cup"

    def test_empty_string(self):
        assert scale_quantity("", 2) == ""

    def test_huge_number_does_not_raise(self):
        quantity = "9" * 400 + " cups"
        assert scale_quantity(quantity, 2) == quantity

    @pytest.mark.parametrize("scale", [0, -1])
    def test_non_positive_scale_rejected(self, scale):
        with pytest.raises(ValueError):
            scale_quantity("2 cups", scale)

    @pytest.mark.parametrize("quantity, amount", [
        ("2", 2),
        ("1.5 cups", 1.5),
        ("3/4 tsp", 0.75),
        ("1 1/2 cups", 1.5),
        ("0.25 lb", 0.25),
    ])
    def test_scale_one_preserves_amount(self, quantity, amount):
        assert parse_quantity(scale_quantity(quantity, 1)).amount == pytest.approx(amount)


class TestClampScaleFactor:

    @pytest.mark.parametrize("requested, expected", [
        (0.1, 0.5),
        (0.5, 0.5),
        (1.2, 1.0),
        (1.3, 1.5),
        (5, 5.0),
        (12, 5.0),
    ])
    def test_clamps_to_half_steps(self, requested, expected):
        assert clamp_scale_factor(requested) == expected


class TestScaleRecipe:

    def test_scales_ingredients_and_servings(self, recipe):
        scaled = scale_recipe(recipe, 1.5)

        assert scaled.servings == 6
        assert [i.quantity for i in scaled.ingredients] == [
            "2 1/4 cups",
            "1 1/8 tsp",
            "3 cups",
            "pinch of",
            "0.75 cup",
        ]

    def test_original_is_not_modified(self, recipe, recipe_data):
        scale_recipe(recipe, 2)
        assert recipe == Recipe.model_validate(recipe_data)

    def test_repeated_scaling_from_original_is_independent(self, recipe):
        scale_recipe(recipe, 3)
        assert scale_recipe(recipe, 0.5).ingredients[1].quantity == "3/8 tsp"

    def test_servings_round_half_up(self, recipe):
        odd = recipe.model_copy(update={"servings": 3})
        assert scale_recipe(odd, 0.5).servings == 2

    def test_missing_servings_stay_missing(self, recipe):
        no_servings = recipe.model_copy(update={"servings": None})
        assert scale_recipe(no_servings, 2).servings is None

    def test_non_positive_scale_rejected(self, recipe):
        with pytest.raises(ValueError):
            scale_recipe(recipe, 0)
