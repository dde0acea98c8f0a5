"""
Credential store — user lookups and refresh-token hash updates.

``CredentialStore`` is the interface ``AuthService`` depends on;
``SqlUserStore`` implements it on top of an ``AsyncSession``.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import ConflictError
from database.models import User

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    async def create_user(self, email: str, password_hash: str) -> User: ...

    async def get_by_email(self, email: str) -> Optional[User]: ...

    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    async def set_refresh_hash(self, user_id: int, token_hash: Optional[str]) -> None: ...


class SqlUserStore:
    """``CredentialStore`` backed by the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_user(self, email: str, password_hash: str) -> User:
        """
        Insert a new user row.

        Raises ``ConflictError`` if the email is already registered,
        whether caught by the pre-check or by the unique constraint.
        """
        if await self.get_by_email(email) is not None:
            raise ConflictError("Email already registered")

        user = User(email=email, hash=password_hash)
        try:
            async with self.session.begin_nested():
                self.session.add(user)
                await self.session.flush()
        except IntegrityError as exc:
            logger.debug("Unique violation on signup for %s: %s", email, exc)
            raise ConflictError("Email already registered") from exc
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def set_refresh_hash(self, user_id: int, token_hash: Optional[str]) -> None:
        """Overwrite (or clear, with ``None``) the stored refresh-token hash."""
        await self.session.execute(
            update(User)
            .where(User.id == user_id)
            .values(hashed_rt=token_hash)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
