"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when no user matches an email or id."""

    def __init__(self, key: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user": key},
        )


class RoleNotChangedError(NotFoundError):
    """Raised when a role update matched no user, or the role was already set."""

    def __init__(self, user_id: str, role: str):
        super().__init__(
            "User not found or role already set",
            code="ROLE_NOT_CHANGED",
            details={"user_id": user_id, "role": role},
        )


class InvalidRoleError(ValidationError):
    """Raised when a role is missing or not one of the known roles."""

    def __init__(self, role: str | None):
        message = "Role is required" if not role else f"Invalid role: {role}"
        super().__init__(message, code="INVALID_ROLE", details={"role": role})
