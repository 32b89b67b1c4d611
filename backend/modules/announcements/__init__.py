"""
Announcements module: building notices posted by administrators.
"""

from .models import Announcement, CreateAnnouncementRequest

__all__ = ["Announcement", "CreateAnnouncementRequest"]
