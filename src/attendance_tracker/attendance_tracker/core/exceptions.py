from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or out of range."""


class NotFoundError(DomainError):
    """Raised when the target of an operation does not exist."""


class OriginNotAllowedError(DomainError):
    """Raised when a cross-origin request comes from an origin outside the CORS policy."""

    def __init__(self, origin: str):
        super().__init__(f"The CORS policy for this site does not allow access from the specified Origin: {origin}")
        self.origin = origin


class PersistenceError(DomainError):
    """Storage engine failure (constraint violation, lost connection, ...).

    The driver exception is kept on ``cause`` and chained via ``raise ... from``.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DatabaseUnavailableError(PersistenceError):
    """The database refused the connection or could not be reached."""
