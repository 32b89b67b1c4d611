"""Tests for auth models and exceptions."""

import pytest
from pydantic import ValidationError

from modules.auth.exceptions import EmailMismatchError, InvalidTokenError, MissingTokenError
from modules.auth.models import JWTPayload


class TestJWTPayload:
    def test_keeps_extra_claims(self):
        payload = JWTPayload(sub="u1", email="a@example.com", exp=2, iat=1, role="authenticated")
        assert payload.model_extra == {"role": "authenticated"}

    def test_requires_subject(self):
        with pytest.raises(ValidationError):
            JWTPayload(email="a@example.com", exp=2, iat=1)


class TestAuthExceptions:
    def test_missing_token_is_401(self):
        error = MissingTokenError()
        assert error.status_code == 401
        assert error.message == "unauthorized access"

    def test_invalid_token_is_403(self):
        error = InvalidTokenError("bad signature")
        assert error.status_code == 403
        assert error.details == {"reason": "bad signature"}

    def test_email_mismatch_is_403(self):
        error = EmailMismatchError("other@example.com", "me@example.com")
        assert error.status_code == 403
        assert error.details["requested_email"] == "other@example.com"
