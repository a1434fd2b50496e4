"""
Lifecycle entrypoint for the token service.

The token service has no network API of its own; a host service opens a
TokenManager here and exposes whatever surface it needs.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import redis.asyncio as redis

from shared.config import TokenServiceConfig, get_config
from shared.logging import get_logger
from .store.redis_store import RedisTokenStore
from .tokens.manager import TokenManager


logger = get_logger("tokens.main")


def create_redis_client(config: TokenServiceConfig) -> redis.Redis:
    """Build a Redis client from configuration. No I/O happens here."""
    return redis.from_url(
        config.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=config.redis_socket_timeout,
        socket_timeout=config.redis_socket_timeout,
    )


@asynccontextmanager
async def open_token_manager(config: Optional[TokenServiceConfig] = None) -> AsyncIterator[TokenManager]:
    """Yield a TokenManager bound to a live Redis connection.

    The connection is verified before yielding and closed on exit, including
    when startup fails.
    """
    config = config or get_config()
    store = RedisTokenStore(
        create_redis_client(config),
        config.key_prefix,
        ttl_skew_seconds=config.ttl_skew_seconds,
    )

    try:
        await store.start()
        logger.info(
            "Token manager ready",
            redis_host=config.redis_host,
            redis_db=config.redis_db,
            ttl_seconds=config.token_ttl_seconds,
        )
        yield TokenManager(store, config.token_ttl)
    finally:
        await store.close()
