"""
HelpGlobe API — application entry point.

Bootstraps FastAPI, wires up CORS for the globe front-end, and registers the
event routes. Run with:

    uvicorn helpglobe.api.app:app
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import AggregatorConfig
from helpglobe import __version__
from helpglobe.api.routes import router
from helpglobe.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def create_app(config: Optional[AggregatorConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Configuration used for server-level settings (CORS, log level).
            Request handlers build their own per-request configuration.

    Returns:
        Configured FastAPI instance.
    """
    config = config or AggregatorConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(log_level=config.log_level)
        logger.info("Starting HelpGlobe API %s", __version__)
        yield
        logger.info("Shutting down HelpGlobe API")

    app = FastAPI(
        title="HelpGlobe API",
        description="Deduplicated crisis events aggregated from public feeds.",
        version=__version__,
        lifespan=lifespan,
    )

    # The globe front-end fetches from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()
