"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_auth_service`` and the bearer-token
dependencies that verify tokens before an ``AuthService`` operation runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import TokenError
from auth.jwt import TokenClaims, TokenSigner
from auth.service import AuthService
from auth.store import SqlUserStore
from database.session import get_db_session

_bearer_scheme = HTTPBearer(auto_error=False)
_signer: Optional[TokenSigner] = None


@dataclass(frozen=True)
class RefreshCredentials:
    claims: TokenClaims
    token: str


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_token_signer() -> TokenSigner:
    global _signer
    if _signer is None:
        _signer = TokenSigner()
    return _signer


def get_auth_service(
    session: AsyncSession = Depends(db_session),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(SqlUserStore(session), signer)


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise TokenError("Missing Bearer token")
    return credentials.credentials


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    signer: TokenSigner = Depends(get_token_signer),
) -> TokenClaims:
    """Verify the Bearer access token and return its claims."""
    return signer.verify_access(_bearer_token(credentials))


async def get_refresh_credentials(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    signer: TokenSigner = Depends(get_token_signer),
) -> RefreshCredentials:
    """
    Verify the Bearer refresh token, returning its claims together with
    the raw token so the service can match it against the stored hash.
    """
    token = _bearer_token(credentials)
    return RefreshCredentials(claims=signer.verify_refresh(token), token=token)
