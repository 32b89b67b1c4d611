"""
Coupon API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_coupon_service
from shared.models import InsertedResponse, ListResponse

from .models import Coupon, CreateCouponRequest
from .service import CouponService

router = APIRouter()


@router.get("/coupons", response_model=ListResponse[Coupon])
async def list_coupons(
    service: CouponService = Depends(get_coupon_service),
) -> ListResponse[Coupon]:
    return ListResponse[Coupon].of(await service.list_coupons())


@router.post("/coupons", response_model=InsertedResponse)
async def create_coupon(
    request: CreateCouponRequest,
    service: CouponService = Depends(get_coupon_service),
) -> InsertedResponse:
    inserted_id = await service.create_coupon(request)
    return InsertedResponse(message="Coupon added successfully", inserted_id=inserted_id)
