"""
User repository for document store access.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from shared.store import Ne

from .models import User, UserRole


class UserRepository(BaseRepository[User]):
    """
    Repository for the ``users`` collection.

    ``role`` is written here only for the explicit admin override;
    lifecycle transitions write it through their own plans.
    """

    collection_name = "users"
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self._find_one({"email": email})

    def list_by_role(self, role: UserRole) -> list[User]:
        return self._find_many({"role": role.value}, sort="created_at")

    def touch_last_login(self, email: str, when: datetime) -> int:
        return self._collection.update_one({"email": email}, {"last_login": when})

    def set_role(self, user_id: str, role: UserRole) -> int:
        """
        Set a user's role.

        Returns:
            Modified count; 0 if the user doesn't exist or already has the role.
        """
        return self._collection.update_one(
            {"id": user_id, "role": Ne(role.value)},
            {"role": role.value},
        )

    def create(self, data: dict[str, Any]) -> str:
        return self.insert(data)
