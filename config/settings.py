"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Token Secrets ────────────────────────────────────────────────────
    at_secret: str                       # HMAC secret for access tokens
    rt_secret: str                       # HMAC secret for refresh tokens
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 7

    # ── Password Hashing ─────────────────────────────────────────────────
    bcrypt_rounds: int = 12

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "postgresql+asyncpg://localhost:5432/auth"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    create_tables_on_startup: bool = True

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    def validate_secrets(self) -> None:
        """Refuse to start when access and refresh tokens would share a key."""
        if not self.at_secret or not self.rt_secret:
            raise RuntimeError("AT_SECRET and RT_SECRET must both be set")
        if self.at_secret == self.rt_secret:
            raise RuntimeError("AT_SECRET and RT_SECRET must differ")


config = Settings()
