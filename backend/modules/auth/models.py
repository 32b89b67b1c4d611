"""
Identity verification data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class JWTPayload(BaseModel):
    """
    Decoded bearer token payload.

    Only the claims the verifier relies on are declared; anything else
    the issuer adds is kept and passed through as principal claims.
    """

    model_config = ConfigDict(extra="allow")

    sub: str = Field(..., description="Subject (issuer's user ID)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    email_verified: Optional[bool] = Field(None, description="Issuer's verification flag")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
