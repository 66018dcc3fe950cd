"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class PurgeSettings(BaseSettings):
    """Purger configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CACHEPURGE_",
    )

    # Redis connection
    redis_hostname: str = Field(
        default="127.0.0.1",
        description="Redis host (ignored when a unix socket is set)",
    )
    redis_port: int = Field(
        default=6379,
        ge=1,
        le=65535,
        description="Redis port",
    )
    redis_unix_socket: str | None = Field(
        default=None,
        description="Path to the Redis unix socket (optional)",
    )
    redis_username: str | None = Field(
        default=None,
        description="Redis ACL username (sent only together with a password)",
    )
    redis_password: str | None = Field(
        default=None,
        description="Redis ACL password (sent only together with a username)",
    )
    redis_database: int = Field(
        default=0,
        ge=0,
        le=15,
        description="Logical Redis database index",
    )
    redis_socket_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Socket connect and read timeout in seconds",
    )

    # Cache keys
    redis_prefix: str = Field(
        default="nginx-cache:",
        description="Prefix nginx prepends to every cache key",
    )
    home_url: str = Field(
        default="http://localhost/",
        description="Site URL used for site-scoped and custom-URL purges",
    )
    purge_urls: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Extra URL suffixes to purge, may contain '*' wildcards",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("purge_urls", mode="before")
    @classmethod
    def _split_purge_urls(cls, value: object) -> object:
        # Stored as one URL per line
        if isinstance(value, str):
            return [line for line in value.splitlines() if line.strip()]
        return value


@lru_cache
def get_settings() -> PurgeSettings:
    """Get cached settings instance."""
    return PurgeSettings()
