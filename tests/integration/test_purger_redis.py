"""Integration tests for purging against a live Redis."""

from __future__ import annotations

import asyncio

import pytest

from cachepurge.config import PurgeSettings
from cachepurge.core.types import PurgeStatus
from cachepurge.purger import CachePurger


pytestmark = [pytest.mark.integration, pytest.mark.requires_redis]


# ============================================================================
# Store Operation Tests
# ============================================================================


class TestWildcardDelete:
    """Tests for the server-side wildcard deletion script."""

    async def test_deletes_only_matching_keys(self, purger: CachePurger, seed, remaining_keys):
        await seed(
            "prefix:httpGETexample.com/",
            "prefix:httpGETexample.com/a",
            "other:key",
        )

        result = await purger.delete_keys_by_wildcard("prefix:httpGETexample.com*")

        assert result.deleted == 2
        assert await remaining_keys() == {"other:key"}

    async def test_no_matches(self, purger: CachePurger, seed, remaining_keys):
        await seed("other:key")

        result = await purger.delete_keys_by_wildcard("prefix:*")

        assert result.deleted == 0
        assert result.status == PurgeStatus.NOT_FOUND
        assert await remaining_keys() == {"other:key"}

    async def test_concurrent_overlapping_patterns(
        self,
        purger: CachePurger,
        seed,
        remaining_keys,
    ):
        """Overlapping concurrent deletes should count each key exactly once."""
        keys = [f"nginx-cache:httpGETexample.com/post-{i}/" for i in range(200)]
        await seed(*keys, "nginx-cache:httpGETother.org/")

        results = await asyncio.gather(
            purger.delete_keys_by_wildcard("nginx-cache:httpGETexample.com/*"),
            purger.delete_keys_by_wildcard("nginx-cache:httpGETexample.com/post-1*"),
            purger.delete_keys_by_wildcard("nginx-cache:httpGETexample.com/post-*"),
            purger.delete_keys_by_wildcard("nginx-cache:httpGETexample.com*"),
        )

        assert sum(r.deleted for r in results) == len(keys)
        assert await remaining_keys() == {"nginx-cache:httpGETother.org/"}


class TestSingleDelete:
    """Tests for exact key deletion."""

    async def test_existing_key(self, purger: CachePurger, seed, remaining_keys):
        await seed("nginx-cache:httpGETexample.com/a/", "nginx-cache:httpGETexample.com/a/b/")

        result = await purger.delete_single_key("nginx-cache:httpGETexample.com/a/")

        assert result
        assert await remaining_keys() == {"nginx-cache:httpGETexample.com/a/b/"}

    async def test_missing_key(self, purger: CachePurger):
        result = await purger.delete_single_key("nginx-cache:httpGETexample.com/missing/")

        assert not result
        assert result.status == PurgeStatus.NOT_FOUND


# ============================================================================
# Purge Intent Tests
# ============================================================================


class TestPurgeIntents:
    """Tests for purge_all, purge_url and custom lists."""

    async def test_site_purge_leaves_other_hosts(self, purger: CachePurger, seed, remaining_keys):
        await seed(
            "nginx-cache:httpGETexample.com/",
            "nginx-cache:httpGETexample.com/about/",
            "nginx-cache:httpGETother.org/",
            "nginx-cache:httpsGETexample.com/",
        )

        result = await purger.purge_all()

        assert result.deleted == 2
        assert await remaining_keys() == {
            "nginx-cache:httpGETother.org/",
            "nginx-cache:httpsGETexample.com/",
        }

    async def test_network_purge(self, purger: CachePurger, seed, remaining_keys):
        await seed(
            "nginx-cache:httpGETexample.com/",
            "nginx-cache:httpGETother.org/",
            "sessions:abc",
        )

        result = await purger.purge_all(is_network_scope=True)

        assert result.deleted == 2
        assert await remaining_keys() == {"sessions:abc"}

    async def test_purge_url_device_variants(self, purger: CachePurger, seed, remaining_keys):
        await seed(
            "nginx-cache:httpGETexample.com/post/--mobile",
            "nginx-cache:httpGETexample.com/post/--desktop",
            "nginx-cache:httpGETexample.com/other/--mobile",
        )
        purger.hooks.add_url_filter(lambda url: url + "--*")

        result = await purger.purge_url("http://example.com/post/")

        assert result.deleted == 2
        assert await remaining_keys() == {"nginx-cache:httpGETexample.com/other/--mobile"}

    async def test_custom_list(self, purger: CachePurger, seed, remaining_keys):
        await seed(
            "nginx-cache:httpGETexample.com/feed/",
            "nginx-cache:httpGETexample.com/tag/a/",
            "nginx-cache:httpGETexample.com/tag/b/",
            "nginx-cache:httpGETexample.com/keep/",
        )

        results = await purger.purge_custom_list(["/feed/", "/tag/*", "/missing/"])

        assert [r.status for r in results] == [
            PurgeStatus.PURGED,
            PurgeStatus.PURGED,
            PurgeStatus.NOT_FOUND,
        ]
        assert results[1].deleted == 2
        assert await remaining_keys() == {"nginx-cache:httpGETexample.com/keep/"}


async def test_unreachable_store():
    """A store nobody listens on should give error results, not exceptions."""
    settings = PurgeSettings(
        _env_file=None,
        redis_hostname="127.0.0.1",
        redis_port=1,
        redis_socket_timeout=0.5,
    )
    async with CachePurger.from_settings(settings) as purger:
        single = await purger.delete_single_key("nginx-cache:httpGETexample.com/")
        pattern = await purger.delete_keys_by_wildcard("nginx-cache:*")

    assert not single
    assert single.status == PurgeStatus.CONNECTION_ERROR
    assert pattern.deleted == 0
    assert pattern.status == PurgeStatus.CONNECTION_ERROR
