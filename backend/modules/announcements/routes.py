"""
Announcement API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_announcement_service
from shared.models import InsertedResponse, ListResponse

from .models import Announcement, CreateAnnouncementRequest
from .service import AnnouncementService

router = APIRouter()


@router.get("/announcements", response_model=ListResponse[Announcement])
async def list_announcements(
    service: AnnouncementService = Depends(get_announcement_service),
) -> ListResponse[Announcement]:
    """Get all announcements, newest first."""
    return ListResponse[Announcement].of(await service.list_announcements())


@router.post("/announcements", response_model=InsertedResponse)
async def create_announcement(
    request: CreateAnnouncementRequest,
    service: AnnouncementService = Depends(get_announcement_service),
) -> InsertedResponse:
    inserted_id = await service.create_announcement(request)
    return InsertedResponse(message="Announcement posted", inserted_id=inserted_id)
