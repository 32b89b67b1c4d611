"""
Identity verifier interface.

The API layer depends on IIdentityVerifier, not the concrete implementation.
This enables testing with mocks and swapping the token issuer later.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IIdentityVerifier(Protocol):
    """
    Interface for bearer credential verification.
    """

    async def verify_token(self, token: str) -> AuthenticatedUser:
        """
        Verify a bearer token and return the principal it identifies.

        Args:
            token: Raw bearer token (without the "Bearer " prefix)

        Returns:
            AuthenticatedUser with the verified email and claims

        Raises:
            MissingTokenError: If the token is empty
            InvalidTokenError: If the signature, audience or claims are invalid
            ExpiredTokenError: If the token has expired
        """
        ...
