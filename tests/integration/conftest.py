"""Integration test fixtures for Redis."""

from __future__ import annotations

import os
from typing import AsyncIterator
from urllib.parse import urlsplit

import pytest

from cachepurge.cache.client import AsyncRedisClient
from cachepurge.config import PurgeSettings
from cachepurge.purger import CachePurger


# ============================================================================
# Redis Fixtures (skipped if not available)
# ============================================================================


@pytest.fixture
def redis_url() -> str:
    """Get test Redis URL from environment or use default."""
    return os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture
def redis_settings(redis_url: str) -> PurgeSettings:
    """Settings pointing at the test Redis database."""
    parts = urlsplit(redis_url)
    return PurgeSettings(
        _env_file=None,
        redis_hostname=parts.hostname or "localhost",
        redis_port=parts.port or 6379,
        redis_database=int(parts.path.lstrip("/") or 0),
        redis_prefix="nginx-cache:",
        home_url="http://example.com/",
    )


@pytest.fixture
async def redis_client(redis_settings: PurgeSettings) -> AsyncIterator[AsyncRedisClient]:
    """Create a connected Redis client on a flushed database."""
    client = AsyncRedisClient.from_settings(redis_settings)
    await client.connect()
    try:
        await client.ping()
    except Exception:
        await client.close()
        pytest.skip("Redis not available for integration tests")

    await client._redis.flushdb()
    yield client
    await client._redis.flushdb()
    await client.close()


@pytest.fixture
async def purger(redis_client: AsyncRedisClient, redis_settings: PurgeSettings) -> CachePurger:
    """Create a purger against the test Redis database."""
    return CachePurger(redis_client, redis_settings)


@pytest.fixture
def seed(redis_client: AsyncRedisClient):
    """Factory fixture to write cache entries."""

    async def _seed(*keys: str) -> None:
        for key in keys:
            await redis_client._redis.set(key, "<html></html>")

    return _seed


@pytest.fixture
def remaining_keys(redis_client: AsyncRedisClient):
    """Factory fixture to list every key in the test database."""

    async def _keys() -> set[str]:
        return set(await redis_client._redis.keys("*"))

    return _keys
