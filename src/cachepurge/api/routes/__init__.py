"""API route modules."""

from cachepurge.api.routes.health import router as health_router
from cachepurge.api.routes.purge import router as purge_router

__all__ = [
    "health_router",
    "purge_router",
]
