"""
Shared error handling for the Pokedex service.
"""

from datetime import datetime, timezone
from enum import Enum
from http import HTTPStatus
from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Classification carried by every domain failure."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UNEXPECTED = "UNEXPECTED"


class ErrorResponse(BaseModel):
    """Standard error response format."""

    timestamp: str
    status: int
    error: str
    message: str


def build_error_response(status_code: int, message: str) -> ErrorResponse:
    """Build the error envelope for an HTTP status."""
    status = HTTPStatus(status_code)
    return ErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        status=status.value,
        error=status.phrase,
        message=message
    )


class PokedexError(Exception):
    """Base exception for Pokedex lookups."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.value

    def to_response(self, status_code: int) -> ErrorResponse:
        """Convert to error response."""
        return build_error_response(status_code, self.message)


class InvalidInputError(PokedexError):
    """Identifier rejected before any lookup happens."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class NotFoundError(PokedexError):
    """Upstream does not know the identifier (any 4xx)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, identifier: str, details: Optional[Dict[str, Any]] = None):
        self.identifier = identifier
        super().__init__(f"Pokémon '{identifier}' was not found", details)


class UpstreamUnavailableError(PokedexError):
    """Upstream answered 5xx or could not be reached."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE

    def __init__(self, service: str, message: str = "Upstream service unavailable", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__(f"{service}: {message}", details)


class UnexpectedError(PokedexError):
    """Anything that could not be classified, e.g. a malformed body."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str = "Unexpected error occurred", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
