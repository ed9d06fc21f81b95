"""Dish image generation for a generated recipe.

Asks the Gemini image model for image-only output and turns the first inline
image part into a ``data:`` URI the page can use directly as an ``<img src>``.
"""

import asyncio
import base64
from typing import Any, Iterable, Optional

from google import genai
from google.genai import types

from leftover_cookbook.prompts.prompts import get_image_prompt
from leftover_cookbook.services.errors import ImageGenerationError, UserMessage
from leftover_cookbook.services.gemini import get_gemini_client
from leftover_cookbook.utils.config import config
from leftover_cookbook.utils.logger import logger


def _response_parts(response: Any) -> Iterable[Any]:
    """Parts of the first candidate, or nothing if any level is missing."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return getattr(content, "parts", None) or []


def to_data_uri(mime_type: str, data: bytes | str) -> str:
    """Encode image bytes as a data URI.

    The Python SDK decodes ``inline_data.data`` to bytes; an already
    base64-encoded string is used unchanged.
    """
    if isinstance(data, (bytes, bytearray)):
        payload = base64.b64encode(data).decode("ascii")
    else:
        payload = data
    return f"data:{mime_type};base64,{payload}"


def extract_image_data_uri(response: Any) -> str:
    """Return the data URI of the first part carrying inline image data.

    Parts are scanned in the order the service returned them and scanning
    stops at the first match.

    Raises:
        ImageGenerationError: With ``UserMessage.NO_IMAGE`` if no part has inline data.
    """
    for part in _response_parts(response):
        inline_data = getattr(part, "inline_data", None)
        if inline_data:
            return to_data_uri(inline_data.mime_type, inline_data.data)
    raise ImageGenerationError(UserMessage.NO_IMAGE)


async def generate_recipe_image(
    title: str, description: str, client: Optional[genai.Client] = None
) -> str:
    """Generate a photograph of the dish (single attempt, no retries).

    Args:
        title: Recipe title, embedded literally in the prompt.
        description: Recipe description, embedded literally in the prompt.
        client: Gemini client. Defaults to one built from configuration.

    Returns:
        str: ``data:<mime_type>;base64,<payload>`` image reference.

    Raises:
        ImageGenerationError: With ``UserMessage.IMAGE_FAILED`` on any failure,
            including a response without image parts.
    """
    try:
        if client is None:
            client = get_gemini_client()

        response = await asyncio.to_thread(
            client.models.generate_content,
            model=config.IMAGE_MODEL,
            contents=types.Content(role="user", parts=[types.Part(text=get_image_prompt(title, description))]),
            config=types.GenerateContentConfig(response_modalities=[types.Modality.IMAGE]),
        )

        image_url = extract_image_data_uri(response)
    except Exception as e:
        logger.error(f"Error generating recipe image: {e}", exc_info=True)
        raise ImageGenerationError(UserMessage.IMAGE_FAILED) from e

    logger.info(f"Generated image for '{title}' ({len(image_url)} chars)")
    return image_url
