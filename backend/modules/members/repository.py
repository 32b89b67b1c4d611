"""
Member repository for document store access.
"""

from shared.repository import BaseRepository

from .models import Member, MemberStatus


class MemberRepository(BaseRepository[Member]):
    collection_name = "members"
    model = Member

    def list_by_status(self, status: MemberStatus) -> list[Member]:
        return self._find_many({"status": status.value}, sort="created_at")
