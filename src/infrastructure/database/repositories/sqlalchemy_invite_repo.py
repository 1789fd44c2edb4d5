"""SQLAlchemy implementation of Invite repository."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.invite import Invite, PrivilegeLevel
from infrastructure.database.errors import store_errors
from infrastructure.database.models import ProjectInviteModel


class SQLAlchemyInviteRepository:
    """SQLAlchemy implementation of IInviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self, project_id: UUID) -> int:
        """Count pending invites for a project."""
        stmt = (
            select(func.count())
            .select_from(ProjectInviteModel)
            .where(ProjectInviteModel.project_id == project_id)
        )
        with store_errors("count invites"):
            result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(self, project_id: UUID) -> list[Invite]:
        """Get all pending invites for a project, newest first."""
        stmt = (
            select(ProjectInviteModel)
            .where(ProjectInviteModel.project_id == project_id)
            .order_by(ProjectInviteModel.created_at.desc())
        )
        with store_errors("list invites"):
            result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, invite: Invite) -> Invite:
        """Persist a new invite."""
        model = self._to_model(invite)
        with store_errors("create invite"):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def get_by_id(self, project_id: UUID, invite_id: UUID) -> Invite | None:
        """Get an invite by project and primary key."""
        stmt = select(ProjectInviteModel).where(
            ProjectInviteModel.id == invite_id,
            ProjectInviteModel.project_id == project_id,
        )
        with store_errors("get invite"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_token(self, project_id: UUID, token: str) -> Invite | None:
        """Get an invite by project and token."""
        stmt = select(ProjectInviteModel).where(
            ProjectInviteModel.project_id == project_id,
            ProjectInviteModel.token == token,
        )
        with store_errors("get invite by token"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, project_id: UUID, invite_id: UUID) -> bool:
        """Delete an invite scoped to a project."""
        stmt = delete(ProjectInviteModel).where(
            ProjectInviteModel.id == invite_id,
            ProjectInviteModel.project_id == project_id,
        )
        with store_errors("delete invite"):
            result = await self._session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def delete_by_id_only(self, invite_id: UUID) -> bool:
        """Delete an invite by primary key alone."""
        stmt = delete(ProjectInviteModel).where(ProjectInviteModel.id == invite_id)
        with store_errors("delete invite"):
            result = await self._session.execute(stmt)
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _to_entity(self, model: ProjectInviteModel) -> Invite:
        """Convert ORM model to domain entity."""
        return Invite(
            id=model.id,
            project_id=model.project_id,
            email=model.email,
            token=model.token,
            sending_user_id=model.sending_user_id,
            privileges=PrivilegeLevel(model.privileges),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Invite) -> ProjectInviteModel:
        """Convert domain entity to ORM model."""
        return ProjectInviteModel(
            id=entity.id,
            project_id=entity.project_id,
            email=entity.email,
            token=entity.token,
            sending_user_id=entity.sending_user_id,
            privileges=entity.privileges.value,
            created_at=entity.created_at,
        )
