"""Async Redis client wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from cachepurge.core.exceptions import StoreCommandError, StoreConnectionError

if TYPE_CHECKING:
    from redis.commands.core import AsyncScript

    from cachepurge.config import PurgeSettings

# Runs server-side so listing and deleting happen in one atomic step.
# Returns the number of keys deleted, 0 when nothing matched.
DELETE_BY_PATTERN_LUA = """
local k = 0
for i, name in ipairs(redis.call('KEYS', KEYS[1])) do
    redis.call('DEL', name)
    k = k + 1
end
return k
"""


class AsyncRedisClient:
    """Async Redis client wrapper for cache purging."""

    def __init__(
        self,
        *,
        host: str = "127.0.0.1",
        port: int = 6379,
        unix_socket: str | None = None,
        username: str | None = None,
        password: str | None = None,
        db: int = 0,
        socket_timeout: float = 5.0,
        max_connections: int = 20,
    ) -> None:
        self._host = host
        self._port = port
        self._unix_socket = unix_socket
        self._username = username
        self._password = password
        self._db = db
        self._socket_timeout = socket_timeout
        self._max_connections = max_connections
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None
        self._delete_script: AsyncScript | None = None

    @classmethod
    def from_settings(cls, settings: PurgeSettings) -> AsyncRedisClient:
        """Create a client from purge settings."""
        return cls(
            host=settings.redis_hostname,
            port=settings.redis_port,
            unix_socket=settings.redis_unix_socket,
            username=settings.redis_username,
            password=settings.redis_password,
            db=settings.redis_database,
            socket_timeout=settings.redis_socket_timeout,
        )

    @property
    def connected(self) -> bool:
        return self._redis is not None

    def _pool_kwargs(self) -> dict:
        kwargs: dict = {
            "db": self._db,
            "max_connections": self._max_connections,
            "socket_timeout": self._socket_timeout,
            "decode_responses": True,
        }
        if self._unix_socket:
            kwargs["connection_class"] = aioredis.UnixDomainSocketConnection
            kwargs["path"] = self._unix_socket
        else:
            kwargs["host"] = self._host
            kwargs["port"] = self._port
            kwargs["socket_connect_timeout"] = self._socket_timeout
        # ACL credentials are only sent as a pair
        if self._username and self._password:
            kwargs["username"] = self._username
            kwargs["password"] = self._password
        return kwargs

    async def connect(self) -> None:
        """Create the connection pool and register the deletion script."""
        self._pool = aioredis.ConnectionPool(**self._pool_kwargs())
        self._redis = aioredis.Redis(connection_pool=self._pool)
        self._delete_script = self._redis.register_script(DELETE_BY_PATTERN_LUA)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None
        self._delete_script = None

    def _require_redis(self) -> aioredis.Redis:
        if self._redis is None:
            raise StoreConnectionError("Redis client is not connected")
        return self._redis

    async def ping(self) -> bool:
        """Check the server answers."""
        redis = self._require_redis()
        try:
            return bool(await redis.ping())
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise StoreConnectionError(str(e)) from e
        except RedisError as e:
            raise StoreCommandError(str(e), command="PING") from e

    async def delete(self, key: str) -> int:
        """Delete a single key. Returns the number of keys removed."""
        redis = self._require_redis()
        try:
            return int(await redis.delete(key))
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise StoreConnectionError(str(e), details={"key": key}) from e
        except RedisError as e:
            raise StoreCommandError(str(e), command="DEL", details={"key": key}) from e

    async def delete_by_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern in one server-side script."""
        self._require_redis()
        try:
            return int(await self._delete_script(keys=[pattern]))
        except (RedisConnectionError, RedisTimeoutError) as e:
            raise StoreConnectionError(str(e), details={"pattern": pattern}) from e
        except RedisError as e:
            raise StoreCommandError(
                str(e), command="EVALSHA", details={"pattern": pattern}
            ) from e

    async def __aenter__(self) -> "AsyncRedisClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
