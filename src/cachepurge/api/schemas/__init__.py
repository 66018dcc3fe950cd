"""API schema definitions."""

from cachepurge.api.schemas.base import APIBaseSchema
from cachepurge.api.schemas.requests import (
    PurgeAllRequest,
    PurgeCustomRequest,
    PurgeUrlRequest,
)
from cachepurge.api.schemas.responses import (
    HealthResponse,
    PurgeBatchResponse,
    PurgeResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "PurgeAllRequest",
    "PurgeCustomRequest",
    "PurgeUrlRequest",
    # Responses
    "HealthResponse",
    "PurgeBatchResponse",
    "PurgeResponse",
]
