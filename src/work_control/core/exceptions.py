from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a request carries no usable bearer token."""


class AuthorizationError(DomainError):
    """Raised when the current view lacks the capability for an action."""


class ApiError(DomainError):
    """Raised when the backend cannot be reached or reports a failure."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
