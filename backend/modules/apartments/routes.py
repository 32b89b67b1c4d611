"""
Apartment API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_apartment_service
from shared.models import InsertedResponse, ListResponse

from .models import Apartment, CreateApartmentRequest
from .service import ApartmentService

router = APIRouter()


@router.get("/apartments", response_model=ListResponse[Apartment])
async def list_apartments(
    service: ApartmentService = Depends(get_apartment_service),
) -> ListResponse[Apartment]:
    return ListResponse[Apartment].of(await service.list_apartments())


@router.post("/apartments", response_model=InsertedResponse)
async def create_apartment(
    request: CreateApartmentRequest,
    service: ApartmentService = Depends(get_apartment_service),
) -> InsertedResponse:
    inserted_id = await service.create_apartment(request)
    return InsertedResponse(message="Apartment added successfully", inserted_id=inserted_id)
