"""
Member data models.

A member record is a user's membership application. It is approved
separately from agreements, but activation also makes the user a member.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from shared.models import DocumentModel, RequestModel


class MemberStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"


class Member(DocumentModel):
    name: Optional[str] = None
    email: Optional[str] = None
    status: MemberStatus = MemberStatus.PENDING
    created_at: Optional[datetime] = None


class CreateMemberRequest(RequestModel):
    """Body of POST /members."""

    name: Optional[str] = None
    email: Optional[str] = None


class UpdateMemberStatusRequest(RequestModel):
    """
    Body of PATCH /members/{id}.

    ``email`` is accepted for compatibility with existing clients; the
    member's own stored email takes precedence when activating.
    """

    status: Optional[str] = None
    email: Optional[str] = None
