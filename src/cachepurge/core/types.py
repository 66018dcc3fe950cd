"""Core enums and type definitions."""

from enum import StrEnum


class PurgeStatus(StrEnum):
    """Outcome of a purge attempt."""

    PURGED = "purged"
    NOT_FOUND = "not_found"
    CONNECTION_ERROR = "connection_error"
    COMMAND_ERROR = "command_error"


class PurgeScope(StrEnum):
    """How much of the cache a full purge touches."""

    SITE = "site"  # Keys under the current site's host and path
    NETWORK = "network"  # Every key under the prefix
