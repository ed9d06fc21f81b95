"""Configuration management for the Leftover Cookbook.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini API Key: deliberately not checked at startup. A missing or
        # invalid key surfaces as a failed generation call.
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # Recipe Model: text model asked for schema-shaped JSON output
        self.RECIPE_MODEL: str = os.getenv("RECIPE_MODEL", "gemini-2.5-flash")
        # Image Model: must support the IMAGE response modality
        self.IMAGE_MODEL: str = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image")
        # Web server bind address and port
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "7777"))
        # Maximum length of the ingredient text accepted by the web API. Default: 2000
        self.MAX_INGREDIENTS_CHARS: int = int(os.getenv("MAX_INGREDIENTS_CHARS", "2000"))
        # Logging: LOG_LEVEL (DEBUG, INFO, WARNING, ERROR) and LOG_TYPE (text, json)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_TYPE: str = os.getenv("LOG_TYPE", "text").lower()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a model id is empty or a numeric/enum value is out of range.
        """
        if not self.RECIPE_MODEL:
            raise ValueError("RECIPE_MODEL must not be empty")
        if not self.IMAGE_MODEL:
            raise ValueError("IMAGE_MODEL must not be empty")
        if not (1 <= self.PORT <= 65535):
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.PORT}")
        if self.MAX_INGREDIENTS_CHARS < 1:
            raise ValueError(
                f"MAX_INGREDIENTS_CHARS must be at least 1, got: {self.MAX_INGREDIENTS_CHARS}"
            )
        if self.LOG_TYPE not in ("text", "json"):
            raise ValueError(f"LOG_TYPE must be 'text' or 'json', got: {self.LOG_TYPE}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
