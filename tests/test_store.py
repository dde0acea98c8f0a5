"""
Tests for the SQLAlchemy-backed credential store, against a mocked session.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import IntegrityError

from auth.errors import ConflictError
from auth.store import SqlUserStore
from database.models import User


def _session(existing=None) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = existing
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    session.flush = AsyncMock()
    nested = MagicMock()
    nested.__aenter__ = AsyncMock(return_value=None)
    nested.__aexit__ = AsyncMock(return_value=False)
    session.begin_nested.return_value = nested
    return session


class TestSqlUserStore:
    @pytest.mark.asyncio
    async def test_create_user(self):
        session = _session()
        user = await SqlUserStore(session).create_user("a@b.com", "hash")

        assert user.email == "a@b.com"
        assert user.hash == "hash"
        session.add.assert_called_once_with(user)
        session.flush.assert_awaited()

    @pytest.mark.asyncio
    async def test_create_user_existing_email(self):
        session = _session(existing=User(id=1, email="a@b.com", hash="h"))
        with pytest.raises(ConflictError):
            await SqlUserStore(session).create_user("a@b.com", "hash")
        session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_user_unique_violation(self):
        session = _session()
        session.flush = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("dup")))
        with pytest.raises(ConflictError):
            await SqlUserStore(session).create_user("a@b.com", "hash")

    @pytest.mark.asyncio
    async def test_set_refresh_hash_issues_update(self):
        session = _session()
        await SqlUserStore(session).set_refresh_hash(3, None)

        stmt = session.execute.await_args.args[0]
        assert stmt.is_update
        assert str(stmt).startswith("UPDATE users SET hashed_rt")
        session.flush.assert_awaited()
