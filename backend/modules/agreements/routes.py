"""
Agreement API endpoints.

Reads and deletion go to the agreement service; submission, acceptance
and rejection are lifecycle transitions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_agreement_service, get_lifecycle_service
from api.middleware.auth import get_current_user
from modules.lifecycle.interfaces import ILifecycleService
from modules.lifecycle.models import TransitionResult
from shared.models import AuthenticatedUser, InsertedResponse, ItemResponse, ListResponse, SuccessResponse

from .interfaces import IAgreementService
from .models import Agreement, CreateAgreementRequest

router = APIRouter()


@router.get("/agreements", response_model=ListResponse[Agreement])
async def list_agreements_for_email(
    email: Optional[str] = Query(default=None),
    service: IAgreementService = Depends(get_agreement_service),
) -> ListResponse[Agreement]:
    """
    Get the agreements of one user, most recent first.
    """
    return ListResponse[Agreement].of(await service.list_for_email(email))


@router.get("/agreements/pending", response_model=ListResponse[Agreement])
async def list_pending_agreements(
    service: IAgreementService = Depends(get_agreement_service),
) -> ListResponse[Agreement]:
    return ListResponse[Agreement].of(await service.list_pending())


@router.get("/agreements/all", response_model=ListResponse[Agreement])
async def list_all_agreements(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAgreementService = Depends(get_agreement_service),
) -> ListResponse[Agreement]:
    """
    Get all agreements, most recent first.

    Requires authentication.
    """
    return ListResponse[Agreement].of(await service.list_all())


@router.get("/agreements/{agreement_id}", response_model=ItemResponse[Agreement])
async def get_agreement(
    agreement_id: str,
    service: IAgreementService = Depends(get_agreement_service),
) -> ItemResponse[Agreement]:
    return ItemResponse[Agreement](data=await service.get(agreement_id))


@router.post("/agreements", response_model=InsertedResponse)
async def submit_agreement(
    request: CreateAgreementRequest,
    lifecycle: ILifecycleService = Depends(get_lifecycle_service),
) -> InsertedResponse:
    """
    Submit an agreement request.

    Returns 409 if the user already has a pending request for this apartment.
    """
    result = await lifecycle.submit_agreement(request)
    return InsertedResponse(message=result.message, inserted_id=result.inserted_id)


@router.patch("/agreements/accept/{agreement_id}", response_model=TransitionResult)
async def accept_agreement(
    agreement_id: str,
    lifecycle: ILifecycleService = Depends(get_lifecycle_service),
) -> TransitionResult:
    """
    Accept a pending agreement; the agreement's user becomes a member.

    ``role_updated`` is false (with a warning) when the agreement or its
    user could not be found.
    """
    return await lifecycle.accept_agreement(agreement_id)


@router.patch("/agreements/reject/{agreement_id}", response_model=TransitionResult)
async def reject_agreement(
    agreement_id: str,
    lifecycle: ILifecycleService = Depends(get_lifecycle_service),
) -> TransitionResult:
    return await lifecycle.reject_agreement(agreement_id)


@router.delete("/agreements/{agreement_id}", response_model=SuccessResponse)
async def delete_agreement(
    agreement_id: str,
    service: IAgreementService = Depends(get_agreement_service),
) -> SuccessResponse:
    await service.delete(agreement_id)
    return SuccessResponse(message="Agreement deleted successfully")
