"""FastAPI application serving the single-page cookbook.

Routes:
- GET /              the page (Jinja2 template)
- POST /api/generate one generation cycle, streamed as newline-delimited JSON
                     CookbookState snapshots so the recipe shows before the image
- GET /health        liveness check
"""

import uuid
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.templating import Jinja2Templates

from leftover_cookbook.models.models import CookbookState, GenerateRequest
from leftover_cookbook.services.cookbook import Cookbook, ImageGenerator, RecipeGenerator, cycle_interrupted
from leftover_cookbook.services.errors import UserMessage
from leftover_cookbook.utils.config import config
from leftover_cookbook.utils.logger import logger


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
NDJSON_MEDIA_TYPE = "application/x-ndjson"


def create_app(
    recipe_generator: Optional[RecipeGenerator] = None,
    image_generator: Optional[ImageGenerator] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        recipe_generator: Optional replacement for the Gemini recipe generator.
        image_generator: Optional replacement for the Gemini image generator.

    Returns:
        FastAPI: Configured application.
    """
    app = FastAPI(
        title="AI Leftover Cookbook",
        description="Turns a list of leftover ingredients into a recipe and a photo of the dish",
    )
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.state.recipe_generator = recipe_generator
    app.state.image_generator = image_generator

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": "AI Leftover Cookbook",
                "state": CookbookState(),
                "max_chars": config.MAX_INGREDIENTS_CHARS,
                "messages": {
                    "too_long": UserMessage.INPUT_TOO_LONG.value,
                    "connection_lost": UserMessage.CONNECTION_LOST.value,
                },
            },
        )

    @app.post("/api/generate")
    async def generate(body: GenerateRequest) -> StreamingResponse:
        request_id = uuid.uuid4().hex[:12]
        logger.info("Generation requested", extra={"request_id": request_id})

        cookbook = Cookbook(
            recipe_generator=app.state.recipe_generator,
            image_generator=app.state.image_generator,
        )

        async def snapshots() -> AsyncIterator[str]:
            try:
                async for state in cookbook.stream(body.ingredients):
                    yield state.model_dump_json() + "\n"
            except Exception:
                logger.error(
                    "Generation cycle failed unexpectedly",
                    exc_info=True,
                    extra={"request_id": request_id},
                )
                yield cycle_interrupted(cookbook.state).model_dump_json() + "\n"
            logger.info(
                f"Generation finished in phase '{cookbook.state.phase.value}'",
                extra={"request_id": request_id},
            )

        return StreamingResponse(
            snapshots(),
            media_type=NDJSON_MEDIA_TYPE,
            headers={"X-Request-ID": request_id, "Cache-Control": "no-store"},
        )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app
