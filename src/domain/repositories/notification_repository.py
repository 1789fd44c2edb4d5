"""Notification repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.notification import Notification


class INotificationRepository(Protocol):
    """Repository interface for Notification entities."""

    async def upsert(self, notification: Notification) -> Notification:
        """Create the notification, or refresh the existing one for (user_id, key)."""
        ...

    async def get_unread_for_user(self, user_id: UUID) -> list[Notification]:
        """Get unread, unexpired notifications for a user."""
        ...

    async def mark_read_by_key(self, key: str) -> int:
        """Mark every notification with the key as read. Returns count updated."""
        ...

    async def delete_expired(self) -> int:
        """Delete notifications past their expiry. Returns count deleted."""
        ...
