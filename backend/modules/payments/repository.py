"""
Payment repository for document store access.

Payments are only inserted by the lifecycle service.
"""

from shared.repository import BaseRepository

from .models import Payment


class PaymentRepository(BaseRepository[Payment]):
    collection_name = "payments"
    model = Payment

    def list_by_email(self, email: str) -> list[Payment]:
        return self._find_many({"user_email": email}, sort="date", descending=True)
