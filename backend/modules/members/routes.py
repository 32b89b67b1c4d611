"""
Member API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_lifecycle_service, get_member_service
from modules.lifecycle.interfaces import ILifecycleService
from modules.lifecycle.models import TransitionResult
from shared.models import InsertedResponse, ListResponse

from .models import CreateMemberRequest, Member, UpdateMemberStatusRequest
from .service import MemberService

router = APIRouter()


@router.get("/members", response_model=ListResponse[Member])
async def list_members(
    service: MemberService = Depends(get_member_service),
) -> ListResponse[Member]:
    return ListResponse[Member].of(await service.list_members())


@router.get("/members/pending", response_model=ListResponse[Member])
async def list_pending_members(
    service: MemberService = Depends(get_member_service),
) -> ListResponse[Member]:
    return ListResponse[Member].of(await service.list_pending())


@router.post("/members", response_model=InsertedResponse)
async def apply_for_membership(
    request: CreateMemberRequest,
    service: MemberService = Depends(get_member_service),
) -> InsertedResponse:
    inserted_id = await service.apply(request)
    return InsertedResponse(message="Member added successfully", inserted_id=inserted_id)


@router.patch("/members/{member_id}", response_model=TransitionResult)
async def update_member_status(
    member_id: str,
    request: UpdateMemberStatusRequest,
    lifecycle: ILifecycleService = Depends(get_lifecycle_service),
) -> TransitionResult:
    """
    Update a member's status. Activating makes the member's user a member.
    """
    return await lifecycle.update_member_status(member_id, request.status, request.email)
