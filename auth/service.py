"""
AuthService — signup, login, logout and refresh-token rotation.

The service only orchestrates its two collaborators: a
``CredentialStore`` for user rows and a ``TokenSigner`` for JWTs.
Each user holds at most one live refresh token; every login or refresh
overwrites its stored hash and logout clears it.
"""

from __future__ import annotations

import logging

from auth.errors import AuthError, ForbiddenError
from auth.jwt import TokenPair, TokenSigner
from auth.password import (
    hash_password,
    hash_refresh_token,
    verify_password,
    verify_refresh_token,
)
from auth.store import CredentialStore

logger = logging.getLogger(__name__)

ACCESS_DENIED = "Access denied"


class AuthService:
    def __init__(self, store: CredentialStore, signer: TokenSigner) -> None:
        self.store = store
        self.signer = signer

    async def _issue(self, user_id: int, email: str) -> TokenPair:
        tokens = self.signer.issue_pair(user_id, email)
        await self.store.set_refresh_hash(user_id, hash_refresh_token(tokens.refresh_token))
        return tokens

    async def sign_up(self, email: str, password: str) -> TokenPair:
        """Create a user and return its first token pair."""
        user = await self.store.create_user(email, hash_password(password))
        tokens = await self._issue(user.id, user.email)
        logger.info("Signed up user %s", user.id)
        return tokens

    async def sign_in(self, email: str, password: str) -> TokenPair:
        """
        Verify email + password and return a fresh token pair.

        Unknown email and wrong password raise the same ``AuthError``.
        """
        user = await self.store.get_by_email(email)
        if user is None or not verify_password(password, user.hash):
            logger.warning("Login denied")
            raise AuthError(ACCESS_DENIED)

        tokens = await self._issue(user.id, user.email)
        logger.info("Login: user %s", user.id)
        return tokens

    async def sign_out(self, user_id: int) -> None:
        await self.store.set_refresh_hash(user_id, None)
        logger.info("Logout: user %s", user_id)

    async def refresh_tokens(self, user_id: int, refresh_token: str) -> TokenPair:
        """
        Rotate the refresh token for *user_id*.

        Raises ``ForbiddenError`` if the user is unknown, has no stored
        refresh token, or *refresh_token* is not the one last issued.
        """
        user = await self.store.get_by_id(user_id)
        if user is None or not verify_refresh_token(refresh_token, user.hashed_rt):
            logger.warning("Refresh denied for user %s", user_id)
            raise ForbiddenError(ACCESS_DENIED)

        tokens = await self._issue(user.id, user.email)
        logger.info("Refreshed tokens for user %s", user.id)
        return tokens
