"""Recipe generation from free-text leftover ingredients.

One Gemini text call per invocation, asking for JSON in a fixed response
schema. The returned text is decoded and validated into a :class:`Recipe`.
Any failure (no client, network, undecodable JSON, wrong shape) is logged with
its cause and re-raised as a single :class:`GenerationError` whose message is
safe to show to the user.
"""

import asyncio
import json
from typing import Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from leftover_cookbook.models.models import Recipe
from leftover_cookbook.prompts.prompts import get_recipe_prompt
from leftover_cookbook.services.errors import GenerationError, UserMessage
from leftover_cookbook.services.gemini import get_gemini_client
from leftover_cookbook.utils.config import config
from leftover_cookbook.utils.logger import logger


RECIPE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "title": types.Schema(type=types.Type.STRING, description="The title of the recipe."),
        "description": types.Schema(
            type=types.Type.STRING, description="A short, enticing description of the dish."
        ),
        "ingredients": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="The list of ingredients, including quantities.",
        ),
        "instructions": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="The step-by-step instructions for preparing the dish.",
        ),
    },
    required=["title", "description", "ingredients", "instructions"],
)


def parse_recipe_response(response_text: Optional[str]) -> Recipe:
    """Decode and validate the model's JSON output.

    Unlike lenient free-text parsing, the response is requested as
    ``application/json`` so it must decode as-is once surrounding whitespace
    is stripped.

    Args:
        response_text: Raw ``response.text`` from Gemini (may be None when the
            model returned no text part).

    Returns:
        Recipe: The validated recipe, fields exactly as returned.

    Raises:
        GenerationError: With ``UserMessage.RECIPE_FORMAT`` if the text is not a
            JSON object, a field is missing or empty, or a list field is not a list.
    """
    try:
        data = json.loads((response_text or "").strip())
    except json.JSONDecodeError as e:
        raise GenerationError(UserMessage.RECIPE_FORMAT) from e

    if not isinstance(data, dict):
        raise GenerationError(UserMessage.RECIPE_FORMAT)

    try:
        return Recipe.model_validate(data)
    except ValidationError as e:
        raise GenerationError(UserMessage.RECIPE_FORMAT) from e


async def generate_recipe(ingredients_text: str, client: Optional[genai.Client] = None) -> Recipe:
    """Generate a recipe for the given ingredients (single attempt, no retries).

    Blankness is not checked here; the cookbook workflow rejects blank input
    before calling.

    Args:
        ingredients_text: Raw ingredient text, embedded literally in the prompt.
        client: Gemini client. Defaults to one built from configuration.

    Returns:
        Recipe: Validated recipe.

    Raises:
        GenerationError: With ``UserMessage.RECIPE_FAILED`` on any failure. The
            underlying exception is available as ``__cause__``.
    """
    try:
        if client is None:
            client = get_gemini_client()

        response = await asyncio.to_thread(
            client.models.generate_content,
            model=config.RECIPE_MODEL,
            contents=get_recipe_prompt(ingredients_text),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RECIPE_SCHEMA,
            ),
        )

        recipe = parse_recipe_response(response.text)
    except Exception as e:
        logger.error(f"Error generating recipe: {e}", exc_info=True)
        raise GenerationError(UserMessage.RECIPE_FAILED) from e

    logger.info(
        f"Generated recipe '{recipe.title}' "
        f"({len(recipe.ingredients)} ingredients, {len(recipe.instructions)} steps)"
    )
    return recipe
