"""
Recipe Errors

Distinct failure types raised while turning a model response into a
Recipe. Controllers map each one to a specific HTTP error so the client
can show a targeted message and offer a retry.

Hierarchy:
    RecipeResponseError (ValueError)
    ├── NoJsonFoundError      - no {...} block in the response text
    ├── MalformedRecipeError  - JSON parsed but mandatory fields missing
    └── RecipeParseFailure    - the sliced text is not usable JSON
    RecipeValidationError (ValueError) - optional strict schema check
"""


class RecipeResponseError(ValueError):
    """Base class for failures while normalizing a generated recipe."""

    kind = "recipe_response_error"


class NoJsonFoundError(RecipeResponseError):
    """The response text contains no JSON object."""

    kind = "no_json_found"

    def __init__(self, message: str = "No valid JSON found in response"):
        super().__init__(message)


class MalformedRecipeError(RecipeResponseError):
    """The JSON object is missing one or more mandatory recipe fields."""

    kind = "malformed_recipe"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Invalid recipe structure: missing required fields: {', '.join(self.missing)}"
        )


class RecipeParseFailure(RecipeResponseError):
    """The JSON text could not be parsed into a recipe."""

    kind = "parse_failure"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse recipe: {detail}")


class RecipeValidationError(ValueError):
    """A recipe failed the strict schema check."""

    kind = "invalid_recipe"

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Recipe failed validation: {'; '.join(self.errors)}")
