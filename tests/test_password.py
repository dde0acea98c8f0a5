"""
Tests for password and refresh-token hashing.
"""

from auth.password import (
    hash_password,
    hash_refresh_token,
    verify_password,
    verify_refresh_token,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("pw1")
        assert hashed != "pw1"
        assert hashed.startswith("$2")

    def test_verify_roundtrip(self):
        hashed = hash_password("pw1")
        assert verify_password("pw1", hashed)
        assert not verify_password("pw2", hashed)

    def test_salted(self):
        assert hash_password("pw1") != hash_password("pw1")

    def test_garbage_hash_does_not_raise(self):
        assert verify_password("pw1", "not-a-bcrypt-hash") is False


class TestRefreshTokenHashing:
    def test_long_tokens_are_distinguished(self):
        # Tokens sharing their first 72 bytes must still hash differently.
        prefix = "x" * 100
        hashed = hash_refresh_token(prefix + "a")
        assert verify_refresh_token(prefix + "a", hashed)
        assert not verify_refresh_token(prefix + "b", hashed)

    def test_missing_hash(self):
        assert verify_refresh_token("token", None) is False
        assert verify_refresh_token("token", "") is False
