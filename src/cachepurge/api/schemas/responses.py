"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from cachepurge.api.schemas.base import APIBaseSchema
from cachepurge.core.types import PurgeStatus


class PurgeResponse(APIBaseSchema):
    """Outcome of one purge."""

    key: str
    status: PurgeStatus
    deleted: int
    wildcard: bool
    error_message: str | None = None


class PurgeBatchResponse(APIBaseSchema):
    """Outcome of purging several URLs."""

    results: list[PurgeResponse]
    total_deleted: int


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
