"""Gemini client construction."""

from google import genai

from leftover_cookbook.utils.config import config


def get_gemini_client() -> genai.Client:
    """Create a Gemini client for the configured API key.

    The SDK raises ``ValueError`` when no key is available at all, and an
    invalid key only fails on the first ``generate_content`` call. Generators
    call this inside their error boundary so both cases end up as a generation
    error rather than a startup failure.
    """
    return genai.Client(api_key=config.GEMINI_API_KEY or None)
