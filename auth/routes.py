"""
Auth API routes — signup, login, logout, refresh.

Route prefix: /api/v1/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from auth.dependencies import (
    RefreshCredentials,
    get_auth_service,
    get_current_user,
    get_refresh_credentials,
)
from auth.jwt import TokenClaims
from auth.service import AuthService
from auth.validators import validate_credentials

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class AuthPayload(BaseModel):
    email: str
    password: str


class TokensResponse(BaseModel):
    access_token: str
    refresh_token: str


class LogoutResponse(BaseModel):
    detail: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/signup",
    response_model=TokensResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def signup(
    req: AuthPayload,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user and return its first token pair."""
    email, password = validate_credentials(req.email, req.password)
    tokens = await service.sign_up(email, password)
    return tokens.as_dict()


@router.post("/login", response_model=TokensResponse)
async def login(
    req: AuthPayload,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    email, password = validate_credentials(req.email, req.password)
    tokens = await service.sign_in(email, password)
    return tokens.as_dict()


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    user: TokenClaims = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Invalidate the caller's refresh token."""
    await service.sign_out(user.user_id)
    return {"detail": "Logged out"}


@router.post("/refresh", response_model=TokensResponse)
async def refresh(
    creds: RefreshCredentials = Depends(get_refresh_credentials),
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Exchange the current refresh token for a new token pair."""
    tokens = await service.refresh_tokens(creds.claims.user_id, creds.token)
    return tokens.as_dict()
