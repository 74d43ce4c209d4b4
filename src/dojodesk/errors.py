"""Exception types raised by DojoDesk services."""

from __future__ import annotations


class DojoDeskError(Exception):
    """Base class for errors the presentation layer turns into user messages."""


class ValidationError(DojoDeskError, ValueError):
    """Raised when user supplied input is missing or malformed."""


class InvalidAmount(ValidationError):
    """Raised when a payment amount is zero or negative."""


class NotFound(DojoDeskError, LookupError):
    """Raised when a referenced record does not exist."""

    def __init__(self, kind: str, identifier: object) -> None:
        super().__init__(f"{kind} {identifier} not found")
        self.kind = kind
        self.identifier = identifier


class RecordInUse(DojoDeskError, ValueError):
    """Raised when payments reference a record that is about to change."""


class AuthenticationError(DojoDeskError):
    """Raised when an otherwise valid login belongs to a disabled account."""
