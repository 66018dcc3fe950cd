"""Domain models for purge outcomes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import PurgeStatus


class PurgeResult(BaseModel):
    """Result of deleting one key or one wildcard pattern."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Exact key or wildcard pattern that was purged")
    status: PurgeStatus = Field(..., description="Outcome of the purge")
    deleted: int = Field(default=0, ge=0, description="Number of keys removed")
    wildcard: bool = Field(default=False, description="Whether the key was a pattern")
    error_message: str | None = Field(default=None, description="Backend error, if any")

    @property
    def success(self) -> bool:
        return self.status == PurgeStatus.PURGED

    @property
    def is_error(self) -> bool:
        """Check if the backend failed, as opposed to nothing matching."""
        return self.status in (PurgeStatus.CONNECTION_ERROR, PurgeStatus.COMMAND_ERROR)

    def __bool__(self) -> bool:
        return self.success
