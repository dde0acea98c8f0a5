"""
Shared fixtures: test settings, an in-memory credential store and a
FastAPI client wired to it.
"""

import os

os.environ.setdefault("AT_SECRET", "test-access-secret-0123456789abcdef0123")
os.environ.setdefault("RT_SECRET", "test-refresh-secret-0123456789abcdef012")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from typing import Dict, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from auth.errors import ConflictError  # noqa: E402
from auth.jwt import TokenSigner  # noqa: E402
from auth.service import AuthService  # noqa: E402
from database.models import User  # noqa: E402


class InMemoryUserStore:
    """``CredentialStore`` keeping users in a dict, keyed by id."""

    def __init__(self) -> None:
        self.users: Dict[int, User] = {}
        self._next_id = 1

    async def create_user(self, email: str, password_hash: str) -> User:
        if any(u.email == email for u in self.users.values()):
            raise ConflictError("Email already registered")
        user = User(id=self._next_id, email=email, hash=password_hash)
        self.users[user.id] = user
        self._next_id += 1
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def set_refresh_hash(self, user_id: int, token_hash: Optional[str]) -> None:
        user = self.users.get(user_id)
        if user is not None:
            user.hashed_rt = token_hash


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def signer() -> TokenSigner:
    return TokenSigner()


@pytest.fixture
def service(store, signer) -> AuthService:
    return AuthService(store, signer)


@pytest.fixture
def client(service, signer):
    from auth.dependencies import get_auth_service, get_token_signer
    from main import app

    app.dependency_overrides[get_auth_service] = lambda: service
    app.dependency_overrides[get_token_signer] = lambda: signer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
