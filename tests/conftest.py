"""Shared test fixtures for all tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from cachepurge.cache.client import AsyncRedisClient
from cachepurge.config import PurgeSettings
from cachepurge.hooks import PurgeHooks
from cachepurge.purger import CachePurger


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> PurgeSettings:
    """Create settings for a single site."""
    return PurgeSettings(
        _env_file=None,
        redis_hostname="127.0.0.1",
        redis_port=6379,
        redis_prefix="nginx-cache:",
        home_url="https://example.com/",
        purge_urls=["/feed/", "/category/news/*"],
    )


@pytest.fixture
def subdirectory_settings() -> PurgeSettings:
    """Create settings for a site installed under a path."""
    return PurgeSettings(
        _env_file=None,
        redis_prefix="nginx-cache:",
        home_url="http://example.com/blog",
    )


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> AsyncMock:
    """Create a Redis client mock where every key exists once."""
    client = AsyncMock(spec=AsyncRedisClient)
    client.delete.return_value = 1
    client.delete_by_pattern.return_value = 3
    return client


@pytest.fixture
def hooks() -> PurgeHooks:
    """Create an empty hook registry."""
    return PurgeHooks()


@pytest.fixture
def purger(mock_client: AsyncMock, settings: PurgeSettings, hooks: PurgeHooks) -> CachePurger:
    """Create a purger backed by the mock client."""
    return CachePurger(mock_client, settings, hooks)
