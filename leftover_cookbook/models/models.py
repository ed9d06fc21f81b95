"""Data models and schemas for the Leftover Cookbook.

Defines Pydantic models for the generated recipe, the web request body and the
state of a generation cycle. All models use Pydantic v2.
"""

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from leftover_cookbook.utils.config import config


class Recipe(BaseModel):
    """Domain model for a generated recipe.

    Produced by the recipe generator from the model's JSON output. A recipe is
    only valid when all four fields are present, the text fields are non-empty
    and both list fields are real lists. Order of list items is preserved:
    ingredients are displayed as a bulleted list, instructions as numbered steps.
    """

    model_config = ConfigDict(frozen=True)

    title: Annotated[str, Field(min_length=1, description="The title of the recipe.")]
    description: Annotated[
        str, Field(min_length=1, description="A short, enticing description of the dish.")
    ]
    ingredients: Annotated[
        List[str], Field(description="The list of ingredients, including quantities.")
    ]
    instructions: Annotated[
        List[str], Field(description="The step-by-step instructions for preparing the dish.")
    ]


class GenerateRequest(BaseModel):
    """Request body for the generate endpoint.

    Blankness is not rejected here: a blank request is a normal cycle that ends
    in the input error state.
    """

    ingredients: Annotated[
        str,
        Field(
            "",
            max_length=config.MAX_INGREDIENTS_CHARS,
            description="Free-text list of leftover ingredients, separated by commas or new lines",
        ),
    ]


class Phase(str, Enum):
    """Phase of a generation cycle."""

    IDLE = "idle"
    RECIPE_PENDING = "recipe_pending"
    IMAGE_PENDING = "image_pending"
    DONE = "done"
    ERROR = "error"


class CookbookState(BaseModel):
    """Immutable snapshot of everything the page displays.

    Transitions never mutate a snapshot; they return a new one via
    ``model_copy``. ``error`` is blocking (no recipe shown), ``warning`` is the
    softer message shown next to a recipe whose image failed.
    """

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    ingredients: str = ""
    recipe: Optional[Recipe] = None
    image_url: Optional[str] = None
    is_loading: bool = False
    error: Optional[str] = None
    warning: Optional[str] = None
