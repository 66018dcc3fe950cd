"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from cachepurge import __version__
from cachepurge.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and the cache store.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    # Check Redis
    try:
        redis_client = getattr(request.app.state, "redis_client", None)
        if redis_client:
            await redis_client.ping()
            services["redis"] = "up"
        else:
            services["redis"] = "unknown"
            overall_status = "degraded"
    except Exception:
        services["redis"] = "down"
        overall_status = "unhealthy"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )
