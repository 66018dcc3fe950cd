"""Cache key builders matching nginx's `$scheme$request_method$host$request_uri` layout."""

from urllib.parse import urlsplit

from cachepurge.core.exceptions import ConfigurationError

WILDCARD = "*"
METHOD = "GET"


class PurgeKeys:
    """Purge key builders for consistent key formatting."""

    @staticmethod
    def _split(url: str) -> tuple[str, str, str]:
        parts = urlsplit(url.strip())
        if not parts.scheme or not parts.hostname:
            raise ConfigurationError(
                f"Cannot derive a purge key from URL without scheme and host: {url!r}",
                details={"url": url},
            )
        return parts.scheme, parts.hostname, parts.path

    @classmethod
    def base(cls, url: str, prefix: str) -> str:
        """Key base for a site: prefix, scheme, method and host."""
        scheme, host, _ = cls._split(url)
        return f"{prefix}{scheme}{METHOD}{host}"

    @classmethod
    def url(cls, url: str, prefix: str) -> str:
        """Exact key for a URL. A missing path stays empty."""
        scheme, host, path = cls._split(url)
        return f"{prefix}{scheme}{METHOD}{host}{path}"

    @classmethod
    def site_pattern(cls, url: str, prefix: str) -> str:
        """Pattern matching every key under a site's host and path."""
        scheme, host, path = cls._split(url)
        return f"{prefix}{scheme}{METHOD}{host}{path or '/'}{WILDCARD}"

    @staticmethod
    def network_pattern(prefix: str) -> str:
        """Pattern matching every key under the prefix."""
        return f"{prefix}{WILDCARD}"

    @staticmethod
    def is_wildcard(key: str) -> bool:
        return WILDCARD in key
