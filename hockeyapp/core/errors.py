"""Base exception types shared by repositories and services."""

from __future__ import annotations


class HockeyError(Exception):
    """Base class for every error raised by the storage layer."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class StorageError(HockeyError):
    """Raised when the durable store cannot be read or written."""


class ValidationError(HockeyError):
    """Raised when an operation receives a malformed id or missing field."""


class UnauthorizedError(HockeyError):
    """Raised when the acting user's role does not allow the operation."""


def require_id(value, field: str = "id") -> str:
    """Return ``value`` stripped, or raise ValidationError for blank/non-string ids."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()
