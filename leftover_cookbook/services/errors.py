"""Error taxonomy for a generation cycle.

Every failure a user can see is one of three exception types, each carrying a
message taken from :class:`UserMessage`. The real cause is chained with
``raise ... from`` and logged by the raising module; it never reaches the page.
"""

from enum import Enum


class UserMessage(str, Enum):
    """Closed set of strings the display layer may show."""

    BLANK_INPUT = "Please enter some ingredients."
    RECIPE_FORMAT = "AI response did not match the expected format."
    RECIPE_FAILED = (
        "Failed to generate recipe. The AI might be busy, or the ingredients might be too unusual. "
        "Please try again."
    )
    NO_IMAGE = "No image was generated."
    IMAGE_FAILED = "Failed to generate an image for the recipe."
    IMAGE_WARNING = "Couldn't generate an image, but here is the recipe!"
    INPUT_TOO_LONG = "That ingredient list is too long. Please shorten it and try again."
    CONNECTION_LOST = "Lost connection to the server. Please try again."


class CookbookError(Exception):
    """Base class for failures with a user-presentable message."""

    def __init__(self, message: UserMessage) -> None:
        super().__init__(message.value)
        self.user_message = message

    @property
    def message(self) -> str:
        return self.user_message.value


class InputError(CookbookError):
    """The ingredient text was blank. Detected locally, before any upstream call."""

    def __init__(self) -> None:
        super().__init__(UserMessage.BLANK_INPUT)


class GenerationError(CookbookError):
    """The recipe could not be produced or did not validate. Aborts the cycle."""


class ImageGenerationError(CookbookError):
    """The dish image could not be produced. Does not abort the cycle."""
