"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, EmailStr, Field

T = TypeVar("T")


class AuthenticatedUser(BaseModel):
    """
    Represents a verified principal.

    This model is populated from the bearer token's claims and made
    available to route handlers via dependency injection.
    """

    id: str = Field(..., description="Subject of the verified token")
    email: EmailStr = Field(..., description="Verified email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")
    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")
    claims: dict[str, Any] = Field(default_factory=dict, description="All verified claims")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class DocumentModel(BaseModel):
    """Base for models mapped from stored documents."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., description="Store-generated identifier")


class RequestModel(BaseModel):
    """
    Base for request bodies.

    Accepts both snake_case field names and the camelCase aliases
    the web client sends.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SuccessResponse(BaseModel):
    """Plain success envelope."""

    success: bool = True
    message: Optional[str] = None


class InsertedResponse(SuccessResponse):
    """Envelope returned after creating a document."""

    inserted_id: str


class ItemResponse(SuccessResponse, Generic[T]):
    """Envelope wrapping a single document."""

    data: T


class ListResponse(SuccessResponse, Generic[T]):
    """Envelope wrapping a list of documents."""

    count: int
    data: list[T]

    @classmethod
    def of(cls, items: list[Any], message: Optional[str] = None) -> "ListResponse":
        return cls(count=len(items), data=items, message=message)
