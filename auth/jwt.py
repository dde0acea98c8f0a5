"""
JWT creation and verification.

Access and refresh tokens are signed with two different secrets
(``config.at_secret`` / ``config.rt_secret``, env vars ``AT_SECRET`` /
``RT_SECRET``) and carry a ``typ`` claim, so neither kind can be replayed
as the other.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt

from auth.errors import TokenError
from config.settings import config

ACCESS = "access"
REFRESH = "refresh"


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str

    def as_dict(self) -> Dict[str, str]:
        return {"access_token": self.access_token, "refresh_token": self.refresh_token}


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str
    typ: str
    jti: str
    exp: int


class TokenSigner:
    """Issues and verifies signed, time-bounded tokens for a subject."""

    def __init__(
        self,
        at_secret: Optional[str] = None,
        rt_secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_ttl_seconds: Optional[int] = None,
        refresh_ttl_seconds: Optional[int] = None,
    ) -> None:
        self._secrets = {
            ACCESS: at_secret or config.at_secret,
            REFRESH: rt_secret or config.rt_secret,
        }
        self._ttl = {
            ACCESS: access_ttl_seconds or config.access_token_expire_minutes * 60,
            REFRESH: refresh_ttl_seconds or config.refresh_token_expire_days * 86400,
        }
        self._algorithm = algorithm or config.jwt_algorithm

    def _sign(self, typ: str, user_id: int, email: str) -> str:
        now = int(time.time())
        payload: Dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "typ": typ,
            "iat": now,
            "exp": now + self._ttl[typ],
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secrets[typ], algorithm=self._algorithm)

    def issue_pair(self, user_id: int, email: str) -> TokenPair:
        """Sign an access/refresh pair with the same ``{sub, email}`` claims."""
        return TokenPair(
            access_token=self._sign(ACCESS, user_id, email),
            refresh_token=self._sign(REFRESH, user_id, email),
        )

    def verify(self, token: str, typ: str) -> TokenClaims:
        """
        Verify signature, expiry and ``typ`` of *token*.

        Raises ``TokenError`` on any failure.
        """
        try:
            data = jwt.decode(
                token,
                self._secrets[typ],
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "typ"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenError("Token expired")
        except jwt.InvalidTokenError:
            raise TokenError("Invalid token")

        if data.get("typ") != typ:
            raise TokenError("Invalid token type")
        try:
            user_id = int(data["sub"])
        except (TypeError, ValueError):
            raise TokenError("Invalid token subject")

        return TokenClaims(
            user_id=user_id,
            email=str(data.get("email") or ""),
            typ=typ,
            jti=str(data.get("jti") or ""),
            exp=int(data["exp"]),
        )

    def verify_access(self, token: str) -> TokenClaims:
        return self.verify(token, ACCESS)

    def verify_refresh(self, token: str) -> TokenClaims:
        return self.verify(token, REFRESH)
