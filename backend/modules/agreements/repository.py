"""
Agreement repository for document store access.

"Latest first" ordering uses ``created_at`` descending.
"""

from typing import Optional

from shared.repository import BaseRepository

from .models import Agreement, AgreementStatus


class AgreementRepository(BaseRepository[Agreement]):
    """
    Repository for the ``agreements`` collection.

    Status changes are not made here: they go through the lifecycle
    service so the related user/payment writes stay consistent.
    """

    collection_name = "agreements"
    model = Agreement

    def list_by_email(self, email: str) -> list[Agreement]:
        return self._find_many({"user_email": email}, sort="created_at", descending=True)

    def list_latest(self) -> list[Agreement]:
        return self.list_all(sort="created_at", descending=True)

    def list_by_status(self, status: AgreementStatus) -> list[Agreement]:
        return self._find_many({"status": status.value}, sort="created_at", descending=True)

    def find_pending(self, user_email: str, apartment_no: str) -> Optional[Agreement]:
        """Find the pending agreement for a (user, apartment) pair, if any."""
        return self._find_one({
            "user_email": user_email,
            "apartment_no": apartment_no,
            "status": AgreementStatus.PENDING.value,
        })
