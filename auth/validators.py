"""
Boundary validation for credential payloads.

Called by the routes before any ``AuthService`` operation runs.
"""

from __future__ import annotations

from typing import Tuple

import email_validator
from email_validator import EmailNotValidError

from auth.errors import ValidationError

_MAX_EMAIL_LENGTH = 255
# bcrypt ignores (newer releases reject) input beyond 72 bytes.
_MAX_PASSWORD_BYTES = 72


def validate_email(email: str) -> str:
    """Return the normalized (trimmed, lower-cased) email or raise."""
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("email must not be empty")
    try:
        info = email_validator.validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError(f"email must be a valid email address: {exc}") from exc
    email = info.normalized.lower()
    if len(email) > _MAX_EMAIL_LENGTH:
        raise ValidationError("email must be a valid email address")
    return email


def validate_password(password: str) -> str:
    if not isinstance(password, str) or password == "":
        raise ValidationError("password must not be empty")
    if len(password.encode("utf-8")) > _MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"password must be at most {_MAX_PASSWORD_BYTES} bytes"
        )
    return password


def validate_credentials(email: str, password: str) -> Tuple[str, str]:
    """Validate an ``{email, password}`` pair, returning normalized values."""
    return validate_email(email), validate_password(password)
