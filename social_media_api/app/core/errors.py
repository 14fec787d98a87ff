"""
Exception types shared by the persistence, service and API layers.

Services raise ``ValidationFailed`` or ``AuthenticationFailed`` when a
business rule rejects a request; the application maps them to 400 and
401 responses with an empty body (see ``main.py``).  Repositories wrap
driver errors in ``StoreError`` so that callers can tell a failed
statement apart from a missing row, which is reported as ``None``.
"""

from typing import Optional


class SocialMediaError(Exception):
    """Base class for all application errors."""


class ValidationFailed(SocialMediaError):
    """A request violated a business rule or was malformed."""


class AuthenticationFailed(SocialMediaError):
    """Login credentials did not match a stored account."""


class StoreError(SocialMediaError):
    """A statement against the relational store failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class DuplicateUsername(StoreError):
    """The username UNIQUE constraint rejected an insert."""
