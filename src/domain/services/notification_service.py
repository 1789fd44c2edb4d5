"""Notification service layer for invite notifications."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

import structlog

from core.config import settings
from core.exceptions import NotificationError, StoreError
from domain.entities.notification import (
    Notification,
    NotificationTemplates,
    project_invite_key,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class InviteNotification:
    """Handle on the single notification slot correlated with one invite.

    Building a handle does no I/O. ``create`` needs a target user;
    ``cancel`` works from the key alone and affects every user.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        key: str,
        user_id: UUID | None = None,
        expiry_days: int = 30,
    ) -> None:
        self._uow_factory = uow_factory
        self.key = key
        self.user_id = user_id
        self._expiry_days = expiry_days

    async def create(self, message_opts: dict[str, Any]) -> Notification:
        """Show the notification to the target user.

        Creating again for the same user refreshes the message and marks it unread.

        Raises:
            ValueError: If the handle was built without a target user.
            NotificationError: If the notification could not be stored.
        """
        if self.user_id is None:
            raise ValueError("Cannot create an invite notification without a target user")

        now = datetime.utcnow()
        notification = Notification(
            user_id=self.user_id,
            key=self.key,
            template_key=NotificationTemplates.PROJECT_INVITE,
            message_opts=message_opts,
            created_at=now,
            expires_at=now + timedelta(days=self._expiry_days),
        )
        try:
            async with self._uow_factory() as uow:
                created = await uow.notifications.upsert(notification)
                await uow.commit()
        except StoreError as exc:
            raise NotificationError(self.key, exc.message) from exc

        logger.debug("notification_created", key=self.key, user_id=str(self.user_id))
        return created

    async def cancel(self) -> None:
        """Mark the notification read for everyone. No-op if it does not exist.

        Raises:
            NotificationError: If the notification store could not be updated.
        """
        try:
            async with self._uow_factory() as uow:
                count = await uow.notifications.mark_read_by_key(self.key)
                await uow.commit()
        except StoreError as exc:
            raise NotificationError(self.key, exc.message) from exc

        logger.debug("notification_cancelled", key=self.key, updated_count=count)


class NotificationService:
    """Service layer for building and reading in-app notifications."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        expiry_days: int | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        if expiry_days is None:
            expiry_days = settings.notification_expiry_days
        self._expiry_days = expiry_days

    def build_invite_notification(
        self, invite_id: UUID, target_user_id: UUID | None = None
    ) -> InviteNotification:
        """Resolve the notification handle for an invite, optionally for one user."""
        return InviteNotification(
            self._uow_factory,
            key=project_invite_key(invite_id),
            user_id=target_user_id,
            expiry_days=self._expiry_days,
        )

    async def get_unread_notifications(self, user_id: UUID) -> list[Notification]:
        """Get the unread, unexpired notifications for a user."""
        try:
            async with self._uow_factory() as uow:
                return await uow.notifications.get_unread_for_user(user_id)
        except StoreError as exc:
            raise NotificationError(f"user:{user_id}", exc.message) from exc

    async def cleanup_expired(self) -> int:
        """Delete expired notifications. Called by the scheduled cleanup task."""
        async with self._uow_factory() as uow:
            count = await uow.notifications.delete_expired()
            await uow.commit()
        return count
