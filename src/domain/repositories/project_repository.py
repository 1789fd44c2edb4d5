"""Project repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.project import Project, ProjectMember


class IProjectRepository(Protocol):
    """Repository interface for Project entities and their collaborators."""

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        ...

    async def get_member(self, project_id: UUID, user_id: UUID) -> ProjectMember | None:
        """Get a collaborator record by project and user IDs."""
        ...

    async def add_member(self, member: ProjectMember) -> ProjectMember:
        """Add a collaborator to a project."""
        ...
