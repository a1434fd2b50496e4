"""
Token lifecycle manager for the token service.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from shared.logging import get_logger
from ..store.redis_store import RedisTokenStore
from .errors import (
    IdNotSetError,
    InvalidTokenError,
    TokenNotFoundError,
    ValueNotSetError,
)
from .models import Token, round_to_minute


def generate_token_value() -> str:
    """Create a random version 4 UUID string."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """Creates, looks up, authenticates and invalidates tokens.

    All validation happens before any store call. Redis errors propagate
    unchanged; only "key absent" is translated into domain errors.
    """

    def __init__(
        self,
        store: RedisTokenStore,
        ttl: timedelta,
        *,
        value_factory: Callable[[], str] = generate_token_value,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.ttl = ttl
        self.value_factory = value_factory
        self.clock = clock
        self.logger = get_logger("tokens.manager")

    async def create(self, id: str) -> Token:
        """Issue a new token for id.

        Not idempotent: every call replaces the stored value and expiry, so
        previously issued tokens for id stop authenticating immediately.
        """
        if not id:
            raise IdNotSetError()

        value = self.value_factory()
        expire_at = round_to_minute(self.clock() + self.ttl)

        await self.store.set(id, value, expire_at)

        self.logger.info("Token issued", token_id=id, expire_at=expire_at.isoformat())
        return Token(id=id, value=value, expire_at=expire_at)

    async def get(self, id: str) -> Token:
        """Return the current token for id, or raise TokenNotFoundError."""
        if not id:
            raise IdNotSetError()

        value = await self.store.get(id)
        if not value:
            raise TokenNotFoundError(details={"id": id})

        # Expired or deleted between the two reads
        expire_at = await self.store.get_expire_at(id)
        if expire_at is None:
            raise TokenNotFoundError(details={"id": id})

        return Token(id=id, value=value, expire_at=round_to_minute(expire_at))

    async def get_or_create(self, id: str) -> Token:
        """Return the existing token for id, creating one only if none exists.

        An existing token's expiry is never extended.
        """
        if not id:
            raise IdNotSetError()

        try:
            return await self.get(id)
        except TokenNotFoundError:
            return await self.create(id)

    async def authenticate(self, token: Token) -> None:
        """Raise unless token matches the stored value for token.id.

        A missing record and a wrong value both raise InvalidTokenError.
        """
        if not token.id:
            raise IdNotSetError()
        if not token.value:
            raise ValueNotSetError()

        try:
            current = await self.get(token.id)
        except TokenNotFoundError:
            self.logger.warning("Authentication failed", token_id=token.id)
            raise InvalidTokenError() from None

        if current.value != token.value:
            self.logger.warning("Authentication failed", token_id=token.id)
            raise InvalidTokenError()

    async def invalidate(self, id: str) -> None:
        """Delete the token for id. Succeeds when none exists."""
        if not id:
            raise IdNotSetError()

        await self.store.delete(id)
        self.logger.info("Token invalidated", token_id=id)
