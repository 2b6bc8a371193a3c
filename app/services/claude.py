"""
Claude AI Service

Generates recipes and ingredient substitutions with Claude.

Architecture:
- RecipeGenerator wraps one Anthropic client
- The system prompt sets the chef persona and demands bare JSON
- The user prompt carries the JSON shape plus the request constraints
- Raw text goes through the recipe parser, which owns all clean-up

The generator is synchronous. FastAPI runs the calling endpoints in its
threadpool, so the blocking SDK call doesn't stall the event loop.
"""

import logging

import anthropic

from app.config import get_settings
from app.exceptions import RecipeResponseError
from app.models import Recipe, RecipeRequest
from app.services.recipe_parser import normalize_recipe_response

logger = logging.getLogger(__name__)


class RecipeGenerator:
    """
    Produces structured recipes from a user's request.

    Attributes:
        client: Anthropic API client
        model: Claude model name
        max_tokens: Token budget for a full recipe
    """

    SYSTEM_PROMPT = """You are a world-class chef and expert in diverse cuisines, specialized in crafting recipes tailored to individual preferences and dietary needs.
Your task is to generate one high-quality, complete recipe based on the user's request.
You must respond with a single minified JSON object only - no additional text or commentary."""

    RECIPE_PROMPT = """{{
  "recipeName": "string",
  "description": "string",
  "prepTimeMinutes": "number",
  "cookTimeMinutes": "number",
  "servings": "number",
  "ingredients": [ {{ "quantity": "string", "name": "string" }} ],
  "instructions": [ {{ "step": "number", "description": "string" }} ],
  "chefTips": ["string"]
}}

Constraints to follow:
- Respect all dietary restrictions: {restrictions}
- Prioritize using available ingredients: {available}
- Keep total time (prepTimeMinutes + cookTimeMinutes) <= {max_time} minutes
- Ensure servings = {servings}
- Recipe must reflect the requested main dish: {main_dish}

Recipe guidelines:
- Think creatively but practically - assume a home kitchen setup.
- If available ingredients are not sufficient for a coherent dish, supplement minimally with common pantry items.
- Ensure clear, numbered instructions suitable for a moderately skilled home cook.
- Include at least 1 thoughtful "chefTip" to enhance flavor, simplify a step, or offer a pro technique.

Output format rules:
- Return only the JSON object, no pretty-printing or newlines.
- All string values must be properly escaped.
- Do not include comments or explanations.
"""

    SUBSTITUTION_PROMPT = """As a professional chef, suggest a substitute for "{ingredient}" that is {restriction}.
Provide only a brief, practical substitution suggestion in 1-2 sentences."""

    def __init__(self, client: anthropic.Anthropic | None = None):
        settings = get_settings()
        self.client = client or anthropic.Anthropic(api_key=settings.anthropic_api_key)
        self.model = settings.claude_model
        self.max_tokens = settings.max_tokens
        self.substitution_max_tokens = settings.substitution_max_tokens

    def build_prompt(self, request: RecipeRequest) -> str:
        """Fill the recipe prompt with the request's constraints."""
        return self.RECIPE_PROMPT.format(
            restrictions=", ".join(request.dietary_restrictions) or "None",
            available=request.available_ingredients or "None specified",
            max_time=request.max_cooking_time,
            servings=request.serving_size,
            main_dish=request.main_dish,
        )

    def generate(self, request: RecipeRequest) -> Recipe:
        """
        Ask Claude for a recipe and parse the answer.

        Args:
            request: The validated recipe request

        Returns:
            The parsed Recipe

        Raises:
            RecipeResponseError: If the response can't be turned into a recipe
            anthropic.APIError: If the API call itself fails
        """
        logger.info(f"Generating recipe for '{request.main_dish}' with {self.model}")

        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=self.SYSTEM_PROMPT,
            messages=[{"role": "user", "content": self.build_prompt(request)}]
        )
        raw_text = response.content[0].text

        try:
            return normalize_recipe_response(raw_text)
        except RecipeResponseError as e:
            logger.error(f"Error parsing recipe JSON: {e}")
            logger.error(f"Raw response: {raw_text}")
            raise

    def suggest_substitution(self, ingredient: str, restriction: str) -> str:
        """
        Suggest a replacement for one ingredient.

        Args:
            ingredient: The ingredient to replace
            restriction: What the replacement must be, e.g. "dairy-free"

        Returns:
            A one or two sentence suggestion
        """
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.substitution_max_tokens,
            messages=[{
                "role": "user",
                "content": self.SUBSTITUTION_PROMPT.format(
                    ingredient=ingredient,
                    restriction=restriction.strip(),
                ),
            }]
        )

        return response.content[0].text.strip()
