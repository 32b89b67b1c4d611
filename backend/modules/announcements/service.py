"""
Announcement service.
"""

from datetime import datetime, timezone

from shared.exceptions import ValidationError
from shared.repository import BaseRepository

from .models import Announcement, CreateAnnouncementRequest


class AnnouncementRepository(BaseRepository[Announcement]):
    collection_name = "announcements"
    model = Announcement


class AnnouncementService:
    def __init__(self, repository: AnnouncementRepository):
        self._announcements = repository

    async def list_announcements(self) -> list[Announcement]:
        return self._announcements.list_all(sort="date", descending=True)

    async def create_announcement(self, request: CreateAnnouncementRequest) -> str:
        if not request.title:
            raise ValidationError("Title is required", code="MISSING_FIELDS")

        # The posting time is always set server-side
        return self._announcements.insert({
            "title": request.title,
            "description": request.description,
            "date": datetime.now(timezone.utc),
        })
