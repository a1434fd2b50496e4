"""
Tokens package for the token service.

Holds the Token value object, the closed set of token errors, and the
TokenManager that drives the token lifecycle on top of the Redis store.
"""

from .errors import (
    IdNotSetError,
    InvalidTokenError,
    TokenError,
    TokenErrorCode,
    TokenNotFoundError,
    ValueNotSetError,
)
from .manager import TokenManager, generate_token_value
from .models import Token, round_to_minute

__all__ = [
    "IdNotSetError",
    "InvalidTokenError",
    "Token",
    "TokenError",
    "TokenErrorCode",
    "TokenManager",
    "TokenNotFoundError",
    "ValueNotSetError",
    "generate_token_value",
    "round_to_minute",
]
