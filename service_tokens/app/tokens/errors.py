"""
Domain errors for the token service.
"""

from enum import Enum
from typing import Any, Dict, Optional

from shared.errors import TokenServiceException


class TokenErrorCode(str, Enum):
    """Token error kinds."""
    ID_NOT_SET = "ID_NOT_SET"
    VALUE_NOT_SET = "VALUE_NOT_SET"
    NOT_FOUND = "NOT_FOUND"
    INVALID_TOKEN = "INVALID_TOKEN"


class TokenError(TokenServiceException):
    """Base class for token domain errors."""

    code: TokenErrorCode

    def __init__(self, code: TokenErrorCode, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, details)


class IdNotSetError(TokenError):
    """The subject id was empty."""

    def __init__(self, message: str = "id is not set", details: Optional[Dict[str, Any]] = None):
        super().__init__(TokenErrorCode.ID_NOT_SET, message, details)


class ValueNotSetError(TokenError):
    """The token value was empty."""

    def __init__(self, message: str = "token value is not set", details: Optional[Dict[str, Any]] = None):
        super().__init__(TokenErrorCode.VALUE_NOT_SET, message, details)


class TokenNotFoundError(TokenError):
    """No token record exists for the id."""

    def __init__(self, message: str = "not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(TokenErrorCode.NOT_FOUND, message, details)


class InvalidTokenError(TokenError):
    """The presented value does not match a stored token."""

    def __init__(self, message: str = "invalid token", details: Optional[Dict[str, Any]] = None):
        super().__init__(TokenErrorCode.INVALID_TOKEN, message, details)
