"""
Error taxonomy for the auth flow.

Each error carries the HTTP status it maps to; ``api.middleware``
translates them into ``{"detail": ...}`` responses in one place.
"""

from __future__ import annotations

from fastapi import status


class AuthFlowError(Exception):
    """Base class for terminal, non-retryable auth failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AuthFlowError):
    """Malformed email or empty password, raised before the flow runs."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictError(AuthFlowError):
    """Email already registered."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(AuthFlowError):
    """Bad login credentials. The message never says which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AuthFlowError):
    """Refresh token absent, stale, or the subject is unknown."""

    status_code = status.HTTP_403_FORBIDDEN


class TokenError(AuthFlowError):
    """Bearer token failed signature, expiry, or type checks."""

    status_code = status.HTTP_401_UNAUTHORIZED
