"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cachepurge import __version__
from cachepurge.api.routes import health_router, purge_router
from cachepurge.cache.client import AsyncRedisClient
from cachepurge.config import PurgeSettings, get_settings
from cachepurge.hooks import PurgeHooks
from cachepurge.purger import CachePurger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of the Redis connection pool.
    """
    settings: PurgeSettings = app.state.settings
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Initializing Redis client...")
    app.state.redis_client = AsyncRedisClient.from_settings(settings)
    await app.state.redis_client.connect()
    app.state.purger = CachePurger(app.state.redis_client, settings, app.state.hooks)
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if getattr(app.state, "redis_client", None):
        await app.state.redis_client.close()
    app.state.purger = None
    logger.info("Application shutdown complete")


def create_app(
    *,
    settings: PurgeSettings | None = None,
    hooks: PurgeHooks | None = None,
    title: str = "Cachepurge API",
    description: str = "Purge nginx page-cache entries stored in Redis",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Purge settings. If not provided, loaded from environment.
        hooks: Filters and actions handed to the purger
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings or get_settings()
    app.state.hooks = hooks or PurgeHooks()

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(purge_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
