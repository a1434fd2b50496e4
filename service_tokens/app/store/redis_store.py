"""
Redis storage layer for the token service.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.config import DEFAULT_KEY_PREFIX
from shared.errors import StoreUnavailableError
from shared.logging import get_logger


# Replies of the Redis TTL command
TTL_KEY_MISSING = -2
TTL_NO_EXPIRY = -1

DEFAULT_TTL_SKEW_SECONDS = 4


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RedisTokenStore:
    """Redis adapter storing one token value per id under a prefixed key."""

    def __init__(
        self,
        client: redis.Redis,
        prefix: Optional[str] = None,
        *,
        ttl_skew_seconds: int = DEFAULT_TTL_SKEW_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.redis = client
        self.prefix = prefix or DEFAULT_KEY_PREFIX
        self.ttl_skew_seconds = ttl_skew_seconds
        self.clock = clock
        self.logger = get_logger("tokens.store.redis")

    async def start(self):
        """Verify the Redis connection is usable."""
        try:
            await self.redis.ping()
        except RedisError as e:
            self.logger.error("Failed to start Redis token store", error=str(e))
            raise StoreUnavailableError(str(e), details={"prefix": self.prefix}) from e

        self.logger.info("Redis token store started", prefix=self.prefix)

    async def close(self):
        """Release the Redis connection pool."""
        await self.redis.aclose()
        self.logger.info("Redis token store stopped")

    async def set(self, id: str, value: str, expire_at: datetime) -> None:
        """Store the value for id and expire the key at expire_at.

        SET and EXPIREAT run inside one MULTI/EXEC so the key is never
        observable without an expiry.
        """
        key = self._make_key(id)

        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.set(key, value)
            pipe.expireat(key, int(expire_at.timestamp()))
            await pipe.execute()

        self.logger.debug("Stored token", key=key, expire_at=expire_at.isoformat())

    async def get(self, id: str) -> Optional[str]:
        """Return the stored value for id, or None when no record exists."""
        value = await self.redis.get(self._make_key(id))
        if value is None:
            return None

        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def delete(self, id: str) -> None:
        """Remove the record for id. Missing keys are not an error."""
        key = self._make_key(id)
        removed = await self.redis.delete(key)
        self.logger.debug("Deleted token", key=key, removed=removed)

    async def remaining_ttl(self, id: str) -> Optional[int]:
        """Return seconds until the record for id expires.

        None when the key does not exist, 0 when it exists without an expiry.
        """
        ttl = int(await self.redis.ttl(self._make_key(id)))

        if ttl == TTL_KEY_MISSING:
            return None
        if ttl == TTL_NO_EXPIRY:
            return 0

        return ttl

    async def get_expire_at(self, id: str) -> Optional[datetime]:
        """Return the absolute expiry of the record for id, or None if absent.

        The TTL reply reads a few seconds high, so ttl_skew_seconds is taken
        off before adding it to the current time. The result is approximate.
        """
        ttl = await self.remaining_ttl(id)
        if ttl is None:
            return None

        remaining = max(ttl - self.ttl_skew_seconds, 0)
        return self.clock() + timedelta(seconds=remaining)

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            await self.redis.ping()
            return True
        except RedisError:
            return False

    def _make_key(self, id: str) -> str:
        """Generate the namespaced key for a token id."""
        return f"{self.prefix}:{id}"
