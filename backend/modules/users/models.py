"""
User data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union
from pydantic import AliasChoices, BaseModel, Field, field_validator

from shared.models import DocumentModel, RequestModel, SuccessResponse


class UserRole(str, Enum):
    """Role of a user within the building."""

    USER = "user"
    MEMBER = "member"  # Tenant with an accepted agreement or active membership
    ADMIN = "admin"


DEFAULT_ROLE = UserRole.USER


class RentedApartment(BaseModel):
    """Apartment assigned to a user when their agreement is accepted."""

    floor: Optional[Union[int, str]] = None
    block: Optional[str] = None
    room_no: Optional[str] = None


class User(DocumentModel):
    """A user, created on first sign-in."""

    email: str
    name: Optional[str] = "Anonymous"
    photo_url: Optional[str] = None
    role: UserRole = DEFAULT_ROLE
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    agreement_accept_date: Optional[datetime] = None
    rented_apartment: Optional[RentedApartment] = Field(default_factory=RentedApartment)

    @field_validator("role", mode="before")
    @classmethod
    def _default_role(cls, value):
        # Documents saved before roles existed have no role
        return value or DEFAULT_ROLE


class SaveUserRequest(RequestModel):
    """Body of POST /users, sent by the client after sign-in."""

    email: Optional[str] = None
    name: Optional[str] = None
    photo_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("photo_url", "photoURL"),
    )


class UpdateRoleRequest(RequestModel):
    """Body of PATCH /users/{id}."""

    role: Optional[str] = None


class SaveUserResponse(SuccessResponse):
    """Result of saving a user on sign-in."""

    inserted_id: Optional[str] = None
    user: Optional[User] = None


class RoleResponse(BaseModel):
    """Role lookup result for GET /user/{email}/role."""

    email: str
    role: UserRole


class StoredRoleResponse(SuccessResponse):
    """Role of a stored user, for GET /users/{email}."""

    role: UserRole


class UserResponse(SuccessResponse):
    """Full user document."""

    data: User
