"""Generation cycle workflow: ingredients -> recipe -> dish image.

The page state is a :class:`CookbookState` snapshot. The transition functions
below are pure (snapshot in, snapshot out) and encode the cycle:

    idle -> recipe_pending -> image_pending -> done
                 |                  |
                 v                  v
               error        done + warning (recipe kept, no image)

Blank input goes straight to ``error`` without any upstream call. Every new
cycle starts from a fresh snapshot, so nothing from a previous cycle leaks
into the next one.

:class:`Cookbook` owns the current snapshot, runs the two generators strictly
one after the other and publishes every snapshot to an optional observer.
"""

from typing import AsyncIterator, Awaitable, Callable, Optional

from leftover_cookbook.models.models import CookbookState, Phase, Recipe
from leftover_cookbook.services.errors import (
    GenerationError,
    ImageGenerationError,
    InputError,
    UserMessage,
)
from leftover_cookbook.services.image_generator import generate_recipe_image
from leftover_cookbook.services.recipe_generator import generate_recipe
from leftover_cookbook.utils.logger import logger


RecipeGenerator = Callable[[str], Awaitable[Recipe]]
ImageGenerator = Callable[[str, str], Awaitable[str]]
StateObserver = Callable[[CookbookState], None]


# ============================================================================
# Transitions
# ============================================================================


def start_cycle(ingredients: str) -> CookbookState:
    """Fresh loading snapshot for a new cycle. Previous results are dropped."""
    return CookbookState(phase=Phase.RECIPE_PENDING, ingredients=ingredients, is_loading=True)


def reject_input(ingredients: str, error: InputError) -> CookbookState:
    """Blank input: fresh snapshot in the error phase, never loading."""
    return CookbookState(phase=Phase.ERROR, ingredients=ingredients, error=error.message)


def recipe_ready(state: CookbookState, recipe: Recipe) -> CookbookState:
    """Recipe is visible right away; still loading while the image is pending."""
    return state.model_copy(update={"phase": Phase.IMAGE_PENDING, "recipe": recipe})


def recipe_failed(state: CookbookState, error: GenerationError) -> CookbookState:
    """Blocking failure: no partial recipe is shown."""
    return state.model_copy(
        update={
            "phase": Phase.ERROR,
            "recipe": None,
            "image_url": None,
            "is_loading": False,
            "error": error.message,
        }
    )


def image_ready(state: CookbookState, image_url: str) -> CookbookState:
    return state.model_copy(update={"phase": Phase.DONE, "image_url": image_url, "is_loading": False})


def image_failed(state: CookbookState, error: ImageGenerationError) -> CookbookState:
    """Soft failure: keep the recipe and show a warning in place of the image."""
    return state.model_copy(
        update={
            "phase": Phase.DONE,
            "image_url": None,
            "is_loading": False,
            "warning": UserMessage.IMAGE_WARNING.value,
        }
    )


def skip_image(state: CookbookState) -> CookbookState:
    """Finish a cycle that was asked not to generate an image."""
    return state.model_copy(update={"phase": Phase.DONE, "is_loading": False})


def finish_loading(state: CookbookState) -> CookbookState:
    """Clear the loading flag. Applied whenever a cycle exits, however it exits."""
    if not state.is_loading:
        return state
    return state.model_copy(update={"is_loading": False})


def cycle_interrupted(state: CookbookState) -> CookbookState:
    """Unexpected failure mid-cycle. A recipe already shown is kept with the image warning."""
    if state.recipe is not None:
        return state.model_copy(
            update={
                "phase": Phase.DONE,
                "image_url": None,
                "is_loading": False,
                "warning": UserMessage.IMAGE_WARNING.value,
            }
        )
    return recipe_failed(state, GenerationError(UserMessage.RECIPE_FAILED))


def validate_ingredients(ingredients: str) -> None:
    """Raise :class:`InputError` for empty or whitespace-only ingredient text."""
    if not ingredients or not ingredients.strip():
        raise InputError()


# ============================================================================
# Workflow
# ============================================================================


async def run_cycle(
    ingredients: str,
    recipe_generator: RecipeGenerator,
    image_generator: ImageGenerator,
    with_image: bool = True,
) -> AsyncIterator[CookbookState]:
    """Run one generation cycle, yielding each snapshot as it is reached.

    Only the closed error taxonomy is converted into snapshots; anything else
    propagates to the caller.

    Args:
        ingredients: Raw ingredient text.
        recipe_generator: Coroutine function ``(ingredients) -> Recipe``.
        image_generator: Coroutine function ``(title, description) -> data URI``.
        with_image: If False, finish after the recipe without an image call.

    Yields:
        CookbookState: The starting snapshot, then one snapshot per transition.
    """
    try:
        validate_ingredients(ingredients)
    except InputError as e:
        logger.info("Rejected blank ingredient list")
        yield reject_input(ingredients, e)
        return

    state = start_cycle(ingredients)
    yield state

    try:
        recipe = await recipe_generator(ingredients)
    except GenerationError as e:
        logger.warning(f"Recipe step failed: {e.message}")
        yield recipe_failed(state, e)
        return

    state = recipe_ready(state, recipe)
    yield state

    if not with_image:
        yield skip_image(state)
        return

    try:
        image_url = await image_generator(recipe.title, recipe.description)
    except ImageGenerationError as e:
        logger.warning(f"Image step failed, keeping recipe: {e.message}")
        yield image_failed(state, e)
        return

    yield image_ready(state, image_url)


class Cookbook:
    """Owner of the page state for successive generation cycles.

    Only one cycle runs at a time per instance. Each call to :meth:`stream` or
    :meth:`generate` starts from a fresh snapshot.
    """

    def __init__(
        self,
        recipe_generator: Optional[RecipeGenerator] = None,
        image_generator: Optional[ImageGenerator] = None,
        on_change: Optional[StateObserver] = None,
        with_image: bool = True,
    ) -> None:
        self._recipe_generator = recipe_generator or generate_recipe
        self._image_generator = image_generator or generate_recipe_image
        self._on_change = on_change
        self._with_image = with_image
        self._state = CookbookState()

    @property
    def state(self) -> CookbookState:
        return self._state

    def _publish(self, state: CookbookState) -> None:
        self._state = state
        logger.debug(f"Cookbook state -> {state.phase.value} (loading={state.is_loading})")
        if self._on_change is not None:
            self._on_change(state)

    async def stream(self, ingredients: str) -> AsyncIterator[CookbookState]:
        """Run a cycle and yield every snapshot, recipe before image."""
        try:
            async for snapshot in run_cycle(
                ingredients, self._recipe_generator, self._image_generator, self._with_image
            ):
                self._publish(snapshot)
                yield snapshot
        finally:
            if self._state.is_loading:
                self._publish(finish_loading(self._state))

    async def generate(self, ingredients: str) -> CookbookState:
        """Run a cycle to completion and return the final snapshot."""
        async for _ in self.stream(ingredients):
            pass
        return self._state
