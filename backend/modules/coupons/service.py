"""
Coupon service.
"""

from datetime import datetime, timezone

from shared.exceptions import ValidationError
from shared.repository import BaseRepository

from .models import Coupon, CreateCouponRequest


class CouponRepository(BaseRepository[Coupon]):
    collection_name = "coupons"
    model = Coupon


class CouponService:
    def __init__(self, repository: CouponRepository):
        self._coupons = repository

    async def list_coupons(self) -> list[Coupon]:
        return self._coupons.list_all(sort="created_at", descending=True)

    async def create_coupon(self, request: CreateCouponRequest) -> str:
        if not request.code or not request.discount or not request.description:
            raise ValidationError("Missing coupon fields", code="MISSING_FIELDS")

        try:
            discount = float(request.discount)
        except (TypeError, ValueError):
            raise ValidationError("Discount must be a number", code="INVALID_DISCOUNT")

        return self._coupons.insert({
            "code": request.code,
            "discount": discount,
            "description": request.description,
            "created_at": datetime.now(timezone.utc),
        })
