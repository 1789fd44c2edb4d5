"""Notification domain entity and template constants."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4


class NotificationTemplates:
    """Template keys understood by the notification UI."""

    PROJECT_INVITE = "notification_project_invite"


def project_invite_key(invite_id: UUID) -> str:
    """Correlation key of the notification slot for an invite."""
    return f"project-invite-{invite_id}"


@dataclass
class Notification:
    """Domain entity for an in-app notification addressed to one user."""

    user_id: UUID
    key: str
    template_key: str
    id: UUID = field(default_factory=uuid4)
    message_opts: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    expires_at: datetime | None = None
