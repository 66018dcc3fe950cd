"""Extension points around purging.

Filters rewrite what gets purged, actions are notified after a full purge.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

UrlFilter = Callable[[str], str]
UrlsFilter = Callable[[list[str], bool], list[str]]
PurgeAction = Callable[[], Awaitable[None] | None]


@dataclass
class PurgeHooks:
    """
    Registered filters and actions.

    Usage:
        hooks = PurgeHooks()
        # Also purge device variants such as `<url>--mobile`
        hooks.add_url_filter(lambda url: url + "--*")
    """

    url_filters: list[UrlFilter] = field(default_factory=list)
    urls_filters: list[UrlsFilter] = field(default_factory=list)
    after_purge_all: list[PurgeAction] = field(default_factory=list)

    def add_url_filter(self, fn: UrlFilter) -> UrlFilter:
        self.url_filters.append(fn)
        return fn

    def add_urls_filter(self, fn: UrlsFilter) -> UrlsFilter:
        self.urls_filters.append(fn)
        return fn

    def add_after_purge_all(self, fn: PurgeAction) -> PurgeAction:
        self.after_purge_all.append(fn)
        return fn

    def apply_url_filters(self, url: str) -> str:
        """Rewrite a URL before its purge key is derived."""
        for fn in self.url_filters:
            url = fn(url)
        return url

    def apply_urls_filters(self, urls: list[str], wildcard: bool = True) -> list[str]:
        """Rewrite the list of custom URLs to purge."""
        for fn in self.urls_filters:
            urls = fn(urls, wildcard)
        return urls

    async def fire_after_purge_all(self) -> None:
        """Notify every action. A failing action does not stop the rest."""
        for fn in self.after_purge_all:
            try:
                result = fn()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"After-purge action {fn!r} failed: {e}")
