"""
Users module.

Users are created on first sign-in. Their role is changed by lifecycle
transitions (agreement acceptance, member activation) or by the explicit
administrative override endpoints.

Public API:
- IUserService: Interface for user operations
- User, UserRole: User document and role enum
"""

from .interfaces import IUserService
from .models import (
    User,
    UserRole,
    RentedApartment,
    DEFAULT_ROLE,
    SaveUserRequest,
    RoleResponse,
)
from .exceptions import UserNotFoundError, RoleNotChangedError, InvalidRoleError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserRole",
    "RentedApartment",
    "DEFAULT_ROLE",
    "SaveUserRequest",
    "RoleResponse",
    # Exceptions
    "UserNotFoundError",
    "RoleNotChangedError",
    "InvalidRoleError",
]
