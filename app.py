"""Leftover Cookbook web application.

Single entry point for the cookbook page:
- Builds the FastAPI app (page, streaming generate endpoint, health check)
- Serves it with uvicorn on the configured host and port

Run with: python app.py
"""

import uvicorn

from leftover_cookbook.utils.config import config
from leftover_cookbook.utils.logger import logger
from leftover_cookbook.web.server import create_app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Starting Leftover Cookbook on port {config.PORT}")
    logger.info(f"Recipe model: {config.RECIPE_MODEL}, image model: {config.IMAGE_MODEL}")
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; every generation will fail until it is")
    logger.info(f"Open the page at: http://localhost:{config.PORT}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run("app:app", host=config.HOST, port=config.PORT)
