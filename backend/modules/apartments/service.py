"""
Apartment service.

Apartments are reference data: created by an administrator and read by
everyone else.
"""

from datetime import datetime, timezone

from shared.exceptions import ValidationError
from shared.repository import BaseRepository

from .models import Apartment, ApartmentStatus, CreateApartmentRequest


class ApartmentRepository(BaseRepository[Apartment]):
    collection_name = "apartments"
    model = Apartment


class ApartmentService:
    def __init__(self, repository: ApartmentRepository):
        self._apartments = repository

    async def list_apartments(self) -> list[Apartment]:
        return self._apartments.list_all(sort="created_at")

    async def create_apartment(self, request: CreateApartmentRequest) -> str:
        """
        Add an apartment. Status defaults to pending.

        Raises:
            ValidationError: If apartment number, floor, block or rent is missing
        """
        if not all([request.apartment_no, request.floor, request.block, request.rent]):
            raise ValidationError(
                "Missing required apartment fields",
                code="MISSING_FIELDS",
            )

        try:
            rent = float(request.rent)
        except (TypeError, ValueError):
            raise ValidationError("Rent must be a number", code="INVALID_RENT")

        return self._apartments.insert({
            "apartment_no": str(request.apartment_no),
            "floor": request.floor,
            "block": request.block,
            "rent": rent,
            "status": (request.status or ApartmentStatus.PENDING).value,
            "image": request.image,
            "created_at": datetime.now(timezone.utc),
        })
