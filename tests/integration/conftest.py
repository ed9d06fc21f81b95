"""Pytest configuration and fixtures for integration tests.

Loads .env from the project root and skips the whole directory when no
GEMINI_API_KEY is available. These tests call the live Gemini API.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load environment variables from .env before test collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)


@pytest.fixture(scope="session", autouse=True)
def check_api_key():
    """Skip integration tests if GEMINI_API_KEY is not configured."""
    if not os.getenv("GEMINI_API_KEY"):
        pytest.skip(
            "Integration tests skipped. Missing GEMINI_API_KEY. Please set it in your .env file.",
            allow_module_level=True,
        )
