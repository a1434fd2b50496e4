"""
Shared error handling for the Access Layer token service.
"""

from enum import Enum
from typing import Dict, Any, Optional, Union
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class TokenServiceException(Exception):
    """Base exception for the token service."""

    def __init__(self, code: Union[str, Enum], message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code.value if isinstance(self.code, Enum) else self.code,
            message=self.message,
            details=self.details
        )


class StoreUnavailableError(TokenServiceException):
    """The backing key-value store could not be reached."""

    def __init__(self, message: str = "Token store unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__("STORE_UNAVAILABLE", message, details)
