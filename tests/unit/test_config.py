"""
Tests for shared configuration.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError
from redis.connection import parse_url

from shared.config import TokenServiceConfig, get_config


def test_defaults(monkeypatch):
    for name in ("TOKENS_REDIS_HOST", "TOKENS_REDIS_PORT", "TOKENS_REDIS_DB", "TOKENS_REDIS_PASSWORD",
                 "TOKENS_KEY_PREFIX", "TOKENS_TOKEN_TTL_SECONDS", "TOKENS_TTL_SKEW_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    config = TokenServiceConfig(_env_file=None)

    assert config.redis_url == "redis://localhost:6379/0"
    assert config.key_prefix == "access-token"
    assert config.token_ttl == timedelta(hours=1)
    assert config.ttl_skew_seconds == 4


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TOKENS_REDIS_HOST", "192.169.59.103")
    monkeypatch.setenv("TOKENS_REDIS_PORT", "6380")
    monkeypatch.setenv("TOKENS_REDIS_DB", "3")
    monkeypatch.setenv("TOKENS_TOKEN_TTL_SECONDS", "60")

    config = TokenServiceConfig(_env_file=None)

    assert config.redis_url == "redis://192.169.59.103:6380/3"
    assert config.token_ttl == timedelta(minutes=1)


def test_password_in_url():
    config = TokenServiceConfig(_env_file=None, redis_password="s3cret")

    assert config.redis_url == "redis://:s3cret@localhost:6379/0"


def test_get_config_is_cached():
    get_config.cache_clear()

    assert get_config() is get_config()


@pytest.mark.parametrize("password", ["a/b", "p#ss", "50%off", "q?x@y:z"])
def test_password_with_reserved_characters_round_trips(password):
    config = TokenServiceConfig(_env_file=None, redis_password=password, redis_host="cache", redis_db=3)

    parsed = parse_url(config.redis_url)

    assert parsed["password"] == password
    assert parsed["host"] == "cache"
    assert parsed["port"] == 6379
    assert parsed["db"] == 3


@pytest.mark.parametrize("ttl", [0, 29, 59])
def test_token_ttl_below_one_minute_is_rejected(ttl):
    with pytest.raises(ValidationError):
        TokenServiceConfig(_env_file=None, token_ttl_seconds=ttl)


def test_token_ttl_of_one_minute_is_accepted():
    assert TokenServiceConfig(_env_file=None, token_ttl_seconds=60).token_ttl == timedelta(minutes=1)
