"""Cachepurge - purge nginx page-cache entries stored in Redis."""

from cachepurge.cache.client import AsyncRedisClient
from cachepurge.cache.keys import PurgeKeys
from cachepurge.config import PurgeSettings
from cachepurge.core.models import PurgeResult
from cachepurge.core.types import PurgeScope, PurgeStatus
from cachepurge.hooks import PurgeHooks
from cachepurge.purger import CachePurger, purge_url

__version__ = "0.1.0"
__all__ = [
    # Purger
    "CachePurger",
    "purge_url",
    "PurgeHooks",
    # Store
    "AsyncRedisClient",
    "PurgeKeys",
    # Config
    "PurgeSettings",
    # Types
    "PurgeScope",
    "PurgeStatus",
    # Results
    "PurgeResult",
    # Version
    "__version__",
]
