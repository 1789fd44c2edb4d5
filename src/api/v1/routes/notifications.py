"""Notification API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_notification_service
from api.v1.schemas.notification import NotificationListResponse, NotificationResponse
from domain.services.notification_service import NotificationService

router = APIRouter(
    prefix="/notifications",
    tags=["notifications"],
)


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="List unread notifications",
)
async def list_notifications(
    user: CurrentUser,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """Get the current user's unread notifications."""
    notifications = await service.get_unread_notifications(user.id)
    data = [NotificationResponse.model_validate(n) for n in notifications]
    return NotificationListResponse(data=data, meta={"unread_count": len(data)})
