"""Cache store access and purge keys."""

from .client import AsyncRedisClient
from .keys import PurgeKeys

__all__ = [
    "AsyncRedisClient",
    "PurgeKeys",
]
