"""
Identity verifier implementation.

Verifies HS256-signed bearer tokens with PyJWT and turns their claims
into an AuthenticatedUser.
"""

from datetime import datetime, timezone
from typing import Optional
import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .interfaces import IIdentityVerifier
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    VerifierNotConfiguredError,
)


class JWTIdentityVerifier(IIdentityVerifier):
    """
    Verifies bearer tokens signed with a shared secret.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    async def verify_token(self, token: str) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        if not self._settings.jwt_secret:
            raise VerifierNotConfiguredError()

        try:
            claims = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=self._settings.jwt_algorithms,
                audience=self._settings.jwt_audience,
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            payload = JWTPayload(**claims)
        except PydanticValidationError as e:
            raise InvalidTokenError(f"Malformed claims: {e.error_count()} error(s)")

        if not payload.email:
            raise InvalidTokenError("Token has no email claim")

        email_verified = bool(payload.email_verified) or payload.email_confirmed_at is not None

        try:
            return AuthenticatedUser(
                id=payload.sub,
                email=payload.email,
                email_verified=email_verified,
                last_sign_in=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
                claims=claims,
            )
        except PydanticValidationError:
            raise InvalidTokenError("Token email claim is not a valid address")


# Module-level instance getter
_verifier_instance: Optional[JWTIdentityVerifier] = None


def get_identity_verifier() -> JWTIdentityVerifier:
    """Get the identity verifier singleton."""
    global _verifier_instance
    if _verifier_instance is None:
        _verifier_instance = JWTIdentityVerifier()
    return _verifier_instance


def reset_identity_verifier() -> None:
    """Reset the identity verifier singleton (for testing)."""
    global _verifier_instance
    _verifier_instance = None
