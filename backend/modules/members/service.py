"""
Member service: listing and applications.

Status changes go through the lifecycle service because activation
also updates the user's role.
"""

import logging
from datetime import datetime, timezone

from shared.exceptions import ValidationError

from .models import CreateMemberRequest, Member, MemberStatus
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    def __init__(self, repository: MemberRepository):
        self._members = repository

    async def list_members(self) -> list[Member]:
        return self._members.list_all(sort="created_at")

    async def list_pending(self) -> list[Member]:
        return self._members.list_by_status(MemberStatus.PENDING)

    async def apply(self, request: CreateMemberRequest) -> str:
        """
        Record a membership application. New members always start pending.

        Raises:
            ValidationError: If name or email is missing
        """
        if not request.name or not request.email:
            raise ValidationError("Name and Email are required", code="MISSING_FIELDS")

        inserted_id = self._members.insert({
            "name": request.name,
            "email": request.email,
            "status": MemberStatus.PENDING.value,
            "created_at": datetime.now(timezone.utc),
        })
        logger.info("Membership application from %s", request.email)
        return inserted_id
