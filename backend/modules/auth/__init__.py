"""
Identity verification module.

Verifies bearer credentials and produces the principal (email + claims)
used to gate privileged endpoints.

Public API:
- IIdentityVerifier: Interface for token verification
- JWTPayload: Decoded token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IIdentityVerifier
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    VerifierNotConfiguredError,
    EmailMismatchError,
)

__all__ = [
    # Interface
    "IIdentityVerifier",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "VerifierNotConfiguredError",
    "EmailMismatchError",
]
