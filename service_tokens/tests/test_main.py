"""
Tests for the token service lifecycle helper.
"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch
from redis.exceptions import ConnectionError as RedisConnectionError

from shared.config import TokenServiceConfig
from shared.errors import StoreUnavailableError
from service_tokens.app.main import create_redis_client, open_token_manager
from service_tokens.app.tokens import TokenManager


@pytest.fixture
def config():
    return TokenServiceConfig(
        _env_file=None,
        redis_host="redis.internal",
        redis_port=6380,
        redis_db=2,
        key_prefix="svc",
        token_ttl_seconds=900,
        ttl_skew_seconds=3,
        redis_socket_timeout=5.0,
    )


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


def test_create_redis_client_uses_config(config):
    with patch("service_tokens.app.main.redis.from_url") as mock_from_url:
        create_redis_client(config)

    mock_from_url.assert_called_once_with(
        "redis://redis.internal:6380/2",
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5.0,
        socket_timeout=5.0,
    )


@pytest.mark.asyncio
async def test_open_token_manager_yields_configured_manager(config, redis_client):
    with patch("service_tokens.app.main.create_redis_client", return_value=redis_client):
        async with open_token_manager(config) as manager:
            assert isinstance(manager, TokenManager)
            assert manager.ttl == timedelta(minutes=15)
            assert manager.store.prefix == "svc"
            assert manager.store.ttl_skew_seconds == 3
            redis_client.aclose.assert_not_awaited()

    redis_client.ping.assert_awaited_once()
    redis_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_open_token_manager_closes_on_error(config, redis_client):
    with patch("service_tokens.app.main.create_redis_client", return_value=redis_client):
        with pytest.raises(RuntimeError):
            async with open_token_manager(config):
                raise RuntimeError("boom")

    redis_client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_open_token_manager_unreachable_store(config, redis_client):
    redis_client.ping.side_effect = RedisConnectionError("refused")

    with patch("service_tokens.app.main.create_redis_client", return_value=redis_client):
        with pytest.raises(StoreUnavailableError):
            async with open_token_manager(config):
                pass

    redis_client.aclose.assert_awaited_once()
