"""Purge cached pages from a Redis-backed nginx cache."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cachepurge.cache.client import AsyncRedisClient
from cachepurge.cache.keys import PurgeKeys
from cachepurge.config import PurgeSettings
from cachepurge.core.exceptions import (
    CachePurgeError,
    StoreConnectionError,
)
from cachepurge.core.models import PurgeResult
from cachepurge.core.types import PurgeScope, PurgeStatus
from cachepurge.hooks import PurgeHooks

logger = logging.getLogger(__name__)


def _error_status(error: CachePurgeError) -> PurgeStatus:
    if isinstance(error, StoreConnectionError):
        return PurgeStatus.CONNECTION_ERROR
    return PurgeStatus.COMMAND_ERROR


class CachePurger:
    """
    Translates purge intents into key deletions against the cache store.

    Keys follow nginx's `<prefix><scheme>GET<host><path>` layout. Backend
    failures never raise: every operation returns a PurgeResult whose status
    tells "nothing matched" apart from "store unreachable".

    Usage:
        async with CachePurger.from_settings(settings) as purger:
            await purger.purge_url("https://example.com/hello-world/")
            await purger.purge_all()
    """

    def __init__(
        self,
        client: AsyncRedisClient,
        settings: PurgeSettings | None = None,
        hooks: PurgeHooks | None = None,
    ) -> None:
        """
        Initialize the purger.

        Args:
            client: Redis client the purger owns for its lifetime
            settings: Purge settings. If not provided, loaded from environment.
            hooks: Filters and actions run around purges
        """
        self._client = client
        self._settings = settings or PurgeSettings()
        self._hooks = hooks or PurgeHooks()

    @classmethod
    def from_settings(
        cls,
        settings: PurgeSettings | None = None,
        hooks: PurgeHooks | None = None,
    ) -> CachePurger:
        """Create a purger with a Redis client built from settings."""
        settings = settings or PurgeSettings()
        return cls(AsyncRedisClient.from_settings(settings), settings, hooks)

    @property
    def hooks(self) -> PurgeHooks:
        return self._hooks

    @property
    def settings(self) -> PurgeSettings:
        return self._settings

    async def __aenter__(self) -> CachePurger:
        await self._client.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._client.close()

    # ------------------------------------------------------------------
    # Purge intents
    # ------------------------------------------------------------------

    async def purge_all(
        self,
        is_network_scope: bool = False,
        prefix: str | None = None,
        site_url: str | None = None,
    ) -> PurgeResult:
        """
        Purge the whole site, or every site under the prefix.

        Args:
            is_network_scope: Purge all sites sharing the prefix
            prefix: Key prefix (defaults to settings.redis_prefix)
            site_url: Site to purge in site scope (defaults to settings.home_url)

        Returns:
            Result of the wildcard deletion
        """
        prefix = (self._settings.redis_prefix if prefix is None else prefix).strip()
        site_url = site_url or self._settings.home_url
        scope = PurgeScope.NETWORK if is_network_scope else PurgeScope.SITE

        logger.info("* * * * *")

        if scope == PurgeScope.NETWORK:
            result = await self.delete_keys_by_wildcard(PurgeKeys.network_pattern(prefix))
            logger.info("* Purged Everything! * ")
        else:
            try:
                pattern = PurgeKeys.site_pattern(site_url, prefix)
            except CachePurgeError as e:
                logger.error(e.message)
                result = PurgeResult(
                    key=site_url,
                    status=PurgeStatus.COMMAND_ERROR,
                    wildcard=True,
                    error_message=e.message,
                )
            else:
                result = await self.delete_keys_by_wildcard(pattern)
                logger.info(f"* {site_url} Purged! * ")

        logger.info("* * * * *")

        await self._hooks.fire_after_purge_all()
        return result

    async def purge_url(self, url: str, prefix: str | None = None) -> PurgeResult:
        """
        Purge the cached copy of one URL.

        URL filters run first, so a filter appending `--*` purges every
        device variant of the page through the wildcard path.
        """
        prefix = self._settings.redis_prefix if prefix is None else prefix
        try:
            url = self._hooks.apply_url_filters(url)
        except Exception as e:
            logger.error(f"- URL filter failed | {url} | {e}")
            return PurgeResult(key=url, status=PurgeStatus.COMMAND_ERROR, error_message=str(e))

        logger.info(f"- Purging URL | {url}")

        try:
            key = PurgeKeys.url(url, prefix)
        except CachePurgeError as e:
            logger.error(e.message)
            return PurgeResult(key=url, status=PurgeStatus.COMMAND_ERROR, error_message=e.message)

        return await self._dispatch(key)

    async def purge_custom_list(
        self,
        urls: Sequence[str] | None = None,
        prefix: str | None = None,
        base: str | None = None,
    ) -> list[PurgeResult]:
        """
        Purge configured URL suffixes relative to a site.

        Args:
            urls: Suffixes such as `/feed/` or `/category/*` (defaults to settings.purge_urls)
            prefix: Key prefix (defaults to settings.redis_prefix)
            base: Site URL the suffixes hang off (defaults to settings.home_url)

        Returns:
            One result per non-blank suffix, in order
        """
        prefix = self._settings.redis_prefix if prefix is None else prefix
        base = base or self._settings.home_url
        urls = list(self._settings.purge_urls if urls is None else urls)
        try:
            urls = self._hooks.apply_urls_filters(urls, True)
        except Exception as e:
            # Unfiltered list still gets purged
            logger.error(f"- URL list filter failed | {e}")

        if not urls:
            return []

        try:
            key_base = PurgeKeys.base(base, prefix)
        except CachePurgeError as e:
            logger.error(e.message)
            return [
                PurgeResult(key=url, status=PurgeStatus.COMMAND_ERROR, error_message=e.message)
                for url in urls
                if url.strip()
            ]

        results = []
        for url in urls:
            url = url.strip()
            if not url:
                continue
            results.append(await self._dispatch(key_base + url))
        return results

    async def _dispatch(self, key: str) -> PurgeResult:
        if PurgeKeys.is_wildcard(key):
            result = await self.delete_keys_by_wildcard(key)
            if result:
                logger.info(f"- Purge Wild Card URL | {key} | {result.deleted} url purged")
        else:
            result = await self.delete_single_key(key)
            if result:
                logger.info(f"- Purge URL | {key}")
        return result

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------

    async def delete_single_key(self, key: str) -> PurgeResult:
        """
        Delete one key, e.g. `nginx-cache:httpGETexample.com/`.

        Returns:
            PURGED when a key was removed, NOT_FOUND otherwise, or an error status
        """
        try:
            deleted = await self._client.delete(key)
        except CachePurgeError as e:
            logger.error(f"- Purge failed | {key} | {e.message}")
            return PurgeResult(key=key, status=_error_status(e), error_message=e.message)

        if deleted:
            return PurgeResult(key=key, status=PurgeStatus.PURGED, deleted=deleted)

        logger.info(f"- Cache Not Found | {key}")
        return PurgeResult(key=key, status=PurgeStatus.NOT_FOUND)

    async def delete_keys_by_wildcard(self, pattern: str) -> PurgeResult:
        """
        Delete every key matching a pattern, e.g. `nginx-cache:httpGETexample.com*`.

        Matching and deletion run as one script on the server, so keys written
        concurrently are either deleted and counted or left alone.

        Returns:
            Result whose `deleted` is the number of keys removed (0 when none matched)
        """
        try:
            deleted = await self._client.delete_by_pattern(pattern)
        except CachePurgeError as e:
            logger.error(f"- Purge failed | {pattern} | {e.message}")
            return PurgeResult(
                key=pattern,
                status=_error_status(e),
                wildcard=True,
                error_message=e.message,
            )

        if deleted:
            return PurgeResult(key=pattern, status=PurgeStatus.PURGED, deleted=deleted, wildcard=True)

        logger.info(f"- Cache Not Found | {pattern}")
        return PurgeResult(key=pattern, status=PurgeStatus.NOT_FOUND, wildcard=True)


# Convenience function for one-off purges
async def purge_url(
    url: str,
    *,
    settings: PurgeSettings | None = None,
    hooks: PurgeHooks | None = None,
) -> PurgeResult:
    """
    Purge a single URL (convenience function).

    For multiple purges, use CachePurger so the connection pool is reused.
    """
    async with CachePurger.from_settings(settings, hooks) as purger:
        return await purger.purge_url(url)
