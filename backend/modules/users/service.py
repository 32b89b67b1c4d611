"""
User service implementation.

Handles sign-in saving, role lookups and the administrative role
override endpoints.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.store import parse_document_id

from .interfaces import IUserService
from .models import (
    DEFAULT_ROLE,
    RentedApartment,
    RoleResponse,
    SaveUserRequest,
    SaveUserResponse,
    User,
    UserRole,
)
from .exceptions import InvalidRoleError, RoleNotChangedError, UserNotFoundError
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service over the ``users`` collection.
    """

    def __init__(self, repository: UserRepository):
        self._users = repository

    async def save_user(self, request: SaveUserRequest) -> SaveUserResponse:
        if not request.email:
            raise ValidationError("Email is required", code="EMAIL_REQUIRED")

        now = datetime.now(timezone.utc)
        existing = self._users.get_by_email(request.email)
        if existing:
            self._users.touch_last_login(request.email, now)
            return SaveUserResponse(message="User already exists", user=existing)

        settings = get_settings()
        new_user = {
            "name": request.name or "Anonymous",
            "email": request.email,
            "photo_url": request.photo_url or settings.default_photo_url,
            "role": DEFAULT_ROLE.value,
            "created_at": now,
            "last_login": now,
            "agreement_accept_date": None,
            "rented_apartment": RentedApartment().model_dump(),
        }
        inserted_id = self._users.create(new_user)
        logger.info("Created user %s", request.email)

        return SaveUserResponse(
            message="New user created successfully",
            inserted_id=inserted_id,
        )

    async def get_role(self, email: str) -> RoleResponse:
        if not email:
            raise ValidationError("Email is required", code="EMAIL_REQUIRED")

        user = self._users.get_by_email(email)
        if not user:
            return RoleResponse(email=email, role=DEFAULT_ROLE)
        return RoleResponse(email=user.email, role=user.role)

    async def get_stored_role(self, email: str) -> UserRole:
        user = self._users.get_by_email(email)
        if not user:
            raise UserNotFoundError(email)
        return user.role

    async def search(self, email: Optional[str]) -> User:
        if not email:
            raise ValidationError("Email is required", code="EMAIL_REQUIRED")

        user = self._users.get_by_email(email)
        if not user:
            raise UserNotFoundError(email)
        return user

    async def list_members(self) -> list[User]:
        return self._users.list_by_role(UserRole.MEMBER)

    async def set_role(self, user_id: str, role: Optional[str]) -> int:
        if not role:
            raise InvalidRoleError(role)
        try:
            new_role = UserRole(role)
        except ValueError:
            raise InvalidRoleError(role)

        user_id = parse_document_id(user_id, "user")
        modified = self._users.set_role(user_id, new_role)
        if modified == 0:
            raise RoleNotChangedError(user_id, new_role.value)

        logger.info("Role of user %s set to %s by override", user_id, new_role.value)
        return modified

    async def remove_member(self, user_id: str) -> int:
        user_id = parse_document_id(user_id, "user")
        modified = self._users.set_role(user_id, UserRole.USER)
        if modified == 0:
            raise RoleNotChangedError(user_id, UserRole.USER.value)

        logger.info("User %s removed from members", user_id)
        return modified
