"""
Announcement data models.
"""

from datetime import datetime
from typing import Optional

from shared.models import DocumentModel, RequestModel


class Announcement(DocumentModel):
    title: str
    description: Optional[str] = None
    date: Optional[datetime] = None


class CreateAnnouncementRequest(RequestModel):
    title: Optional[str] = None
    description: Optional[str] = None
