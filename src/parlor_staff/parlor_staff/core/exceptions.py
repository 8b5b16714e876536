from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name (``startTime``, ``breaks[0].endTime``...) to
    its message so callers can report problems per field.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        merged: dict[str, str] = dict(errors or {})
        if field:
            merged.setdefault(field, message)
        self.errors = merged

    @classmethod
    def from_errors(cls, errors: Mapping[str, str]) -> "ValidationError":
        first = next(iter(errors.values()), "Invalid input")
        return cls(first, errors=errors)


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ImmutableRecordError(DomainError):
    """Raised when trying to edit or delete a settled (final) record."""
