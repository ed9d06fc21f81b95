"""Shared fixtures for unit tests."""

import json
from unittest.mock import MagicMock

import pytest

from gemini_fakes import image_part, image_response, mock_client, text_response
from leftover_cookbook.models.models import Recipe


@pytest.fixture
def recipe_payload() -> dict:
    return {
        "title": "Chicken Fried Rice",
        "description": "A quick, savory skillet dinner from yesterday's rice.",
        "ingredients": ["2 cups cooked rice", "1 cup diced chicken", "1 tbsp oil"],
        "instructions": ["Heat the oil.", "Brown the chicken.", "Stir in the rice and fry until crisp."],
    }


@pytest.fixture
def recipe(recipe_payload) -> Recipe:
    return Recipe(**recipe_payload)


@pytest.fixture
def text_client(recipe_payload) -> MagicMock:
    return mock_client(text_response(json.dumps(recipe_payload)))


@pytest.fixture
def image_client() -> MagicMock:
    return mock_client(image_response(image_part()))
