"""
Tests for credential payload validation.
"""

import pytest

from auth.errors import ValidationError
from auth.validators import validate_credentials


class TestValidateCredentials:
    def test_normalizes_email(self):
        email, password = validate_credentials("  A@B.com ", "pw1")
        assert email == "a@b.com"
        assert password == "pw1"

    @pytest.mark.parametrize("email", ["", "   ", "no-at-sign", "a@b", "a b@c.com", "@b.com"])
    def test_rejects_bad_email(self, email):
        with pytest.raises(ValidationError):
            validate_credentials(email, "pw1")

    @pytest.mark.parametrize("email", ["a@b..com", "a@b.c.", "a@-b.com", "a..b@c.com"])
    def test_rejects_malformed_domain_and_local_part(self, email):
        with pytest.raises(ValidationError, match="valid email"):
            validate_credentials(email, "pw1")

    def test_rejects_empty_password(self):
        with pytest.raises(ValidationError, match="password"):
            validate_credentials("a@b.com", "")

    def test_rejects_password_over_bcrypt_limit(self):
        with pytest.raises(ValidationError, match="72"):
            validate_credentials("a@b.com", "é" * 40)
