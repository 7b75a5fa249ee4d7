"""Application factory for the FastAPI app.

Centralizes app construction (metadata, lifespan, middleware, handlers,
routers) so tests can build isolated instances.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.dependencies import close_stats_service
from app.api.routes import health_router, stats_router
from app.core.config import settings
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import request_id_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "app.startup",
        extra={
            "app_env": settings.app_env,
            "api_base": settings.stats_api.api_base,
            "api_key_configured": bool(settings.stats_api.api_key),
            "bot_configured": settings.bot.configured,
        },
    )
    try:
        yield
    finally:
        # Waits for in-flight fetches, then closes the shared HTTP client
        await close_stats_service()
        logger.info("app.shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns:
        Configured FastAPI app with middleware, handlers and routers.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Player Stats API",
        description=(
            "Looks up Free Fire player statistics from an upstream API, "
            "serving repeated lookups from a short-lived cache and spacing "
            "outbound calls with a process-wide throttle."
        ),
        version="0.1.0",
        debug=settings.app.debug,
        lifespan=lifespan,
    )

    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(stats_router, prefix="/v1")
    app.include_router(health_router)

    return app
