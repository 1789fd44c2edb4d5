"""SQLAlchemy implementation of Notification repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.notification import Notification
from infrastructure.database.errors import store_errors
from infrastructure.database.models import NotificationModel


class SQLAlchemyNotificationRepository:
    """SQLAlchemy implementation of INotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert(self, notification: Notification) -> Notification:
        """Create the notification, or refresh the existing one for (user_id, key)."""
        stmt = select(NotificationModel).where(
            NotificationModel.user_id == notification.user_id,
            NotificationModel.key == notification.key,
        )
        with store_errors("upsert notification"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

            if model is None:
                model = self._to_model(notification)
                self._session.add(model)
            else:
                model.template_key = notification.template_key
                model.message_opts = dict(notification.message_opts)
                model.is_read = False
                model.read_at = None
                model.created_at = notification.created_at
                model.expires_at = notification.expires_at

            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def get_unread_for_user(self, user_id: UUID) -> list[Notification]:
        """Get unread, unexpired notifications for a user, newest first."""
        now = datetime.utcnow()
        stmt = (
            select(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
                or_(
                    NotificationModel.expires_at.is_(None),
                    NotificationModel.expires_at > now,
                ),
            )
            .order_by(NotificationModel.created_at.desc())
        )
        with store_errors("list notifications"):
            result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def mark_read_by_key(self, key: str) -> int:
        """Mark every notification with the key as read. Returns count updated."""
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.key == key,
                NotificationModel.is_read.is_(False),
            )
            .values(is_read=True, read_at=datetime.utcnow())
        )
        with store_errors("mark notification read"):
            result = await self._session.execute(stmt)
            await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    async def delete_expired(self) -> int:
        """Delete notifications past their expiry. Returns count deleted."""
        stmt = (
            delete(NotificationModel)
            .where(
                NotificationModel.expires_at.is_not(None),
                NotificationModel.expires_at < datetime.utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        with store_errors("delete expired notifications"):
            result = await self._session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    def _to_entity(self, model: NotificationModel) -> Notification:
        """Convert ORM model to domain entity."""
        return Notification(
            id=model.id,
            user_id=model.user_id,
            key=model.key,
            template_key=model.template_key,
            message_opts=model.message_opts or {},
            is_read=model.is_read,
            read_at=model.read_at,
            created_at=model.created_at,
            expires_at=model.expires_at,
        )

    def _to_model(self, entity: Notification) -> NotificationModel:
        """Convert domain entity to ORM model."""
        return NotificationModel(
            id=entity.id,
            user_id=entity.user_id,
            key=entity.key,
            template_key=entity.template_key,
            message_opts=dict(entity.message_opts),
            is_read=entity.is_read,
            read_at=entity.read_at,
            created_at=entity.created_at,
            expires_at=entity.expires_at,
        )
