from __future__ import annotations


class TrackerError(Exception):
    """Base class for failures reported back to the caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Raised when request fields are missing or malformed."""


class ConflictError(TrackerError):
    """Raised when the caller already tracks the same job."""


class AuthenticationError(TrackerError):
    """Raised when the caller's token is absent or rejected."""


class AuthorizationError(TrackerError):
    """Raised when the caller does not own the targeted record."""


class NotFoundError(TrackerError):
    """Raised when no record exists for a tracker id."""


__all__ = [
    "TrackerError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
]
