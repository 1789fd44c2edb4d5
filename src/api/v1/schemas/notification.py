"""Pydantic schemas for Notification API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationResponse(BaseModel):
    """Schema for a single notification."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    key: str
    template_key: str
    message_opts: dict[str, Any]
    is_read: bool
    created_at: datetime
    expires_at: datetime | None = None


class NotificationListResponse(BaseModel):
    """Schema for the current user's unread notifications."""

    data: list[NotificationResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
