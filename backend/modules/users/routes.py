"""
User API endpoints.

Sign-in saving, role lookups and the administrative role overrides.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service
from shared.models import ListResponse, SuccessResponse

from .interfaces import IUserService
from .models import (
    RoleResponse,
    SaveUserRequest,
    SaveUserResponse,
    StoredRoleResponse,
    UpdateRoleRequest,
    User,
    UserResponse,
)

router = APIRouter()


@router.post("/users", response_model=SaveUserResponse)
async def save_user(
    request: SaveUserRequest,
    service: IUserService = Depends(get_user_service),
) -> SaveUserResponse:
    """
    Save a user after sign-in if they don't exist yet.
    """
    return await service.save_user(request)


@router.get("/users/search", response_model=UserResponse)
async def search_user(
    email: Optional[str] = Query(default=None),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.search(email)
    return UserResponse(data=user)


@router.get("/users/members", response_model=ListResponse[User])
async def list_member_users(
    service: IUserService = Depends(get_user_service),
) -> ListResponse[User]:
    """List users whose role is member."""
    return ListResponse[User].of(await service.list_members())


@router.get("/users/{email}", response_model=StoredRoleResponse)
async def get_stored_role(
    email: str,
    service: IUserService = Depends(get_user_service),
) -> StoredRoleResponse:
    return StoredRoleResponse(role=await service.get_stored_role(email))


@router.get("/user/{email}/role", response_model=RoleResponse)
async def get_role(
    email: str,
    service: IUserService = Depends(get_user_service),
) -> RoleResponse:
    """
    Get a user's role (user / member / admin).

    Unknown emails get the default "user" role; nothing is created.
    """
    return await service.get_role(email)


@router.patch("/users/remove-member/{user_id}", response_model=SuccessResponse)
async def remove_member(
    user_id: str,
    service: IUserService = Depends(get_user_service),
) -> SuccessResponse:
    """Administrative override: demote a member back to user."""
    await service.remove_member(user_id)
    return SuccessResponse(message="Member removed")


@router.patch("/users/{user_id}", response_model=SuccessResponse)
async def update_role(
    user_id: str,
    request: UpdateRoleRequest,
    service: IUserService = Depends(get_user_service),
) -> SuccessResponse:
    """Administrative override: make or remove admin."""
    await service.set_role(user_id, request.role)
    return SuccessResponse(message=f"Role updated to {request.role}")
