"""
Shared configuration management for the Access Layer token service.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Optional
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_KEY_PREFIX = "access-token"


class TokenServiceConfig(BaseSettings):
    """Configuration for the token service and its Redis store."""

    model_config = SettingsConfigDict(
        env_prefix="TOKENS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Redis store
    redis_host: str = Field(default="localhost")
    redis_port: int = Field(default=6379)
    redis_db: int = Field(default=0, ge=0)
    redis_password: Optional[str] = Field(default=None)
    redis_socket_timeout: float = Field(default=5.0, gt=0)
    key_prefix: str = Field(default=DEFAULT_KEY_PREFIX)

    # Tokens
    # Expiry is rounded to the minute; shorter TTLs can round to "now"
    token_ttl_seconds: int = Field(default=3600, ge=60)
    # Redis TTL replies have been observed to run a few seconds high
    ttl_skew_seconds: int = Field(default=4, ge=0)

    @property
    def redis_url(self) -> str:
        """Connection URL assembled from host, port, db and password."""
        auth = f":{quote(self.redis_password, safe='')}@" if self.redis_password else ""
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(seconds=self.token_ttl_seconds)


@lru_cache()
def get_config() -> TokenServiceConfig:
    """Return a cached configuration object."""
    return TokenServiceConfig()
