"""SQLAlchemy implementation of Project repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.invite import PrivilegeLevel
from domain.entities.project import Project, ProjectMember
from infrastructure.database.errors import store_errors
from infrastructure.database.models import ProjectMemberModel, ProjectModel


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        stmt = select(ProjectModel).where(ProjectModel.id == id)
        with store_errors("get project"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_member(self, project_id: UUID, user_id: UUID) -> ProjectMember | None:
        """Get a collaborator record by project and user IDs."""
        stmt = select(ProjectMemberModel).where(
            ProjectMemberModel.project_id == project_id,
            ProjectMemberModel.user_id == user_id,
        )
        with store_errors("get project member"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._member_to_entity(model) if model else None

    async def add_member(self, member: ProjectMember) -> ProjectMember:
        """Add a collaborator to a project."""
        model = ProjectMemberModel(
            project_id=member.project_id,
            user_id=member.user_id,
            privileges=member.privileges.value,
            added_by=member.added_by,
            created_at=member.created_at,
        )
        with store_errors("add project member"):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return self._member_to_entity(model)

    def _to_entity(self, model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return Project(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

    def _member_to_entity(self, model: ProjectMemberModel) -> ProjectMember:
        """Convert ORM model to domain entity."""
        return ProjectMember(
            project_id=model.project_id,
            user_id=model.user_id,
            privileges=PrivilegeLevel(model.privileges),
            added_by=model.added_by,
            created_at=model.created_at,
        )
