"""
Password and refresh-token hashing.

Uses bcrypt for hashing with automatic salting and a configurable
work factor. Refresh tokens are JWTs longer than bcrypt's 72-byte input
limit, so they are reduced with SHA-256 before hashing.
"""

from __future__ import annotations

import hashlib

import bcrypt

from config.settings import config


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    return bcrypt.hashpw(
        password.encode(), bcrypt.gensalt(rounds=config.bcrypt_rounds)
    ).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False


def _digest(token: str) -> bytes:
    return hashlib.sha256(token.encode("utf-8")).hexdigest().encode()


def hash_refresh_token(token: str) -> str:
    return bcrypt.hashpw(
        _digest(token), bcrypt.gensalt(rounds=config.bcrypt_rounds)
    ).decode()


def verify_refresh_token(token: str, token_hash: str | None) -> bool:
    if not token_hash:
        return False
    try:
        return bcrypt.checkpw(_digest(token), token_hash.encode())
    except (ValueError, TypeError):
        return False
