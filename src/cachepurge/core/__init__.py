"""Core types, models, and exceptions."""

from .exceptions import (
    CacheError,
    CachePurgeError,
    ConfigurationError,
    StoreCommandError,
    StoreConnectionError,
)
from .models import PurgeResult
from .types import PurgeScope, PurgeStatus

__all__ = [
    "CacheError",
    "CachePurgeError",
    "ConfigurationError",
    "PurgeResult",
    "PurgeScope",
    "PurgeStatus",
    "StoreCommandError",
    "StoreConnectionError",
]
