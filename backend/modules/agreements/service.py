"""
Agreement query service.
"""

import logging
from typing import Optional

from shared.exceptions import ValidationError
from shared.store import parse_document_id

from .interfaces import IAgreementService
from .models import Agreement, AgreementStatus
from .exceptions import AgreementNotFoundError
from .repository import AgreementRepository

logger = logging.getLogger(__name__)


class AgreementService(IAgreementService):
    def __init__(self, repository: AgreementRepository):
        self._agreements = repository

    async def list_for_email(self, email: Optional[str]) -> list[Agreement]:
        if not email:
            raise ValidationError(
                "Email query parameter is required",
                code="EMAIL_REQUIRED",
            )
        return self._agreements.list_by_email(email)

    async def list_all(self) -> list[Agreement]:
        return self._agreements.list_latest()

    async def list_pending(self) -> list[Agreement]:
        return self._agreements.list_by_status(AgreementStatus.PENDING)

    async def get(self, agreement_id: str) -> Agreement:
        agreement_id = parse_document_id(agreement_id, "agreement")
        agreement = self._agreements.get_by_id(agreement_id)
        if agreement is None:
            raise AgreementNotFoundError(agreement_id)
        return agreement

    async def delete(self, agreement_id: str) -> None:
        agreement_id = parse_document_id(agreement_id, "agreement")
        if self._agreements.delete_by_id(agreement_id) == 0:
            raise AgreementNotFoundError(agreement_id)
        logger.info("Deleted agreement %s", agreement_id)
