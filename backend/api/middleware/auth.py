"""
Bearer token authentication.

Extracts the bearer token and hands it to the identity verifier.
Missing tokens are rejected with 401; tokens that fail verification
with 403.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IIdentityVerifier
from shared.models import AuthenticatedUser

from ..dependencies import get_identity_verifier

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: IIdentityVerifier = Depends(get_identity_verifier),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}

    Raises:
        MissingTokenError: If no bearer token was sent
        InvalidTokenError: If the token fails verification
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    return await verifier.verify_token(credentials.credentials)

