"""Custom exception hierarchy for cachepurge."""

from typing import Any


class CachePurgeError(Exception):
    """Base exception for all cachepurge errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(CachePurgeError):
    """Purge input or settings are unusable."""

    pass


class CacheError(CachePurgeError):
    """Cache store operation failed."""

    pass


class StoreConnectionError(CacheError):
    """Cache store cannot be reached."""

    pass


class StoreCommandError(CacheError):
    """Cache store rejected a command."""

    def __init__(
        self,
        message: str,
        command: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.command = command
