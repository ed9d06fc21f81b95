"""Unit tests for Pydantic models validation."""

import pytest
from pydantic import ValidationError

from leftover_cookbook.models.models import CookbookState, GenerateRequest, Phase, Recipe
from leftover_cookbook.utils.config import config


class TestRecipe:
    """Test Recipe model validation."""

    def test_valid_recipe(self, recipe_payload):
        recipe = Recipe(**recipe_payload)
        assert recipe.title == "Chicken Fried Rice"
        assert recipe.ingredients == recipe_payload["ingredients"]
        assert recipe.instructions == recipe_payload["instructions"]

    def test_list_order_is_preserved(self, recipe_payload):
        recipe_payload["instructions"] = ["third", "first", "second"]
        assert Recipe(**recipe_payload).instructions == ["third", "first", "second"]

    def test_values_are_not_stripped(self, recipe_payload):
        recipe_payload["title"] = "  Padded Title  "
        assert Recipe(**recipe_payload).title == "  Padded Title  "

    def test_empty_lists_are_valid(self, recipe_payload):
        recipe_payload["ingredients"] = []
        recipe_payload["instructions"] = []
        recipe = Recipe(**recipe_payload)
        assert recipe.ingredients == []

    @pytest.mark.parametrize("field", ["title", "description", "ingredients", "instructions"])
    def test_missing_field_rejected(self, recipe_payload, field):
        del recipe_payload[field]
        with pytest.raises(ValidationError) as exc:
            Recipe(**recipe_payload)
        assert field in str(exc.value)

    @pytest.mark.parametrize("field", ["title", "description"])
    def test_empty_text_rejected(self, recipe_payload, field):
        recipe_payload[field] = ""
        with pytest.raises(ValidationError):
            Recipe(**recipe_payload)

    @pytest.mark.parametrize("value", ["rice, chicken", {"rice": 1}, 3, None])
    def test_list_fields_must_be_lists(self, recipe_payload, value):
        recipe_payload["ingredients"] = value
        with pytest.raises(ValidationError):
            Recipe(**recipe_payload)

    def test_recipe_is_immutable(self, recipe):
        with pytest.raises(ValidationError):
            recipe.title = "Something else"


class TestGenerateRequest:
    """Test request body validation."""

    def test_ingredients_defaults_to_empty(self):
        assert GenerateRequest().ingredients == ""

    def test_blank_ingredients_accepted(self):
        assert GenerateRequest(ingredients="   ").ingredients == "   "

    def test_too_long_ingredients_rejected(self):
        with pytest.raises(ValidationError) as exc:
            GenerateRequest(ingredients="x" * (config.MAX_INGREDIENTS_CHARS + 1))
        assert "ingredients" in str(exc.value)


class TestCookbookState:
    """Test the page state snapshot."""

    def test_default_state_is_idle(self):
        state = CookbookState()
        assert state.phase == Phase.IDLE
        assert state.recipe is None
        assert state.image_url is None
        assert state.is_loading is False
        assert state.error is None
        assert state.warning is None

    def test_state_is_immutable(self):
        with pytest.raises(ValidationError):
            CookbookState().is_loading = True

    def test_json_uses_phase_values(self, recipe):
        data = CookbookState(phase=Phase.DONE, recipe=recipe).model_dump(mode="json")
        assert data["phase"] == "done"
        assert data["recipe"]["title"] == recipe.title
