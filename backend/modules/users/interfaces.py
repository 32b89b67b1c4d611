"""
Users module interface.
"""

from typing import Protocol, runtime_checkable

from .models import RoleResponse, SaveUserRequest, SaveUserResponse, User, UserRole


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user and role operations.
    """

    async def save_user(self, request: SaveUserRequest) -> SaveUserResponse:
        """
        Save a user on first sign-in.

        Existing users are returned as-is with their last_login refreshed.

        Raises:
            ValidationError: If email is missing
        """
        ...

    async def get_role(self, email: str) -> RoleResponse:
        """
        Get a user's role, defaulting to "user" for unknown emails.

        Never creates a record.
        """
        ...

    async def get_stored_role(self, email: str) -> UserRole:
        """
        Get the role of a stored user.

        Raises:
            UserNotFoundError: If no user has this email
        """
        ...

    async def search(self, email: str | None) -> User:
        """
        Find a user by email.

        Raises:
            ValidationError: If email is missing
            UserNotFoundError: If no user has this email
        """
        ...

    async def list_members(self) -> list[User]:
        """List users whose role is member."""
        ...

    async def set_role(self, user_id: str, role: str | None) -> int:
        """
        Administrative role override.

        Raises:
            InvalidIdentifierError: If user_id is malformed
            InvalidRoleError: If role is missing or unknown
            RoleNotChangedError: If no user was modified
        """
        ...

    async def remove_member(self, user_id: str) -> int:
        """
        Administrative override that demotes a member back to "user".

        Raises:
            InvalidIdentifierError: If user_id is malformed
            RoleNotChangedError: If no user was modified
        """
        ...
