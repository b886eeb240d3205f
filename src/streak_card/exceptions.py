"""Exceptions for Streak Card.

Exception Hierarchy:
    StreakCardError (base)
    ├── ConfigurationError (missing token, raised before any request)
    ├── TransportError (connection, DNS, TLS or timeout failure)
    ├── ParseError (response body is not JSON or has an unexpected shape)
    └── RemoteError (GitHub reported errors in the response)

None of these are retried; each one ends the run.
"""

from typing import Any

__all__ = [
    "StreakCardError",
    "ConfigurationError",
    "TransportError",
    "ParseError",
    "RemoteError",
]


class StreakCardError(Exception):
    """Base exception for all Streak Card errors."""

    pass


class ConfigurationError(StreakCardError):
    """Raised when required configuration (the GitHub token) is missing."""

    pass


class TransportError(StreakCardError):
    """Raised when the HTTP request could not be completed."""

    pass


class ParseError(StreakCardError):
    """Raised when the response body cannot be decoded or is malformed."""

    pass


class RemoteError(StreakCardError):
    """Raised when the GraphQL API returns an error payload."""

    def __init__(
        self,
        message: str,
        errors: list[Any] | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.errors = errors or []
        self.status_code = status_code
