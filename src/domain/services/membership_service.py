"""Project membership grants."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import AlreadyACollaboratorError, ProjectNotFoundError
from domain.entities.invite import PrivilegeLevel
from domain.entities.project import ProjectMember
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class MembershipService:
    """Implementation of IMembershipService storing collaborators alongside projects."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def add_user(
        self,
        project_id: UUID,
        granting_user_id: UUID,
        grantee_user_id: UUID,
        privileges: PrivilegeLevel,
    ) -> None:
        """Add a collaborator to a project.

        Args:
            project_id: The project to grant access to.
            granting_user_id: The user on whose behalf access is granted.
            grantee_user_id: The user receiving access.
            privileges: The access level to grant.

        Raises:
            ProjectNotFoundError: If the project does not exist.
            AlreadyACollaboratorError: If the grantee owns or already collaborates on the project.
            StoreError: If the grant could not be stored.
        """
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))

            if project.owner_id == grantee_user_id:
                raise AlreadyACollaboratorError(str(grantee_user_id))
            existing = await uow.projects.get_member(project_id, grantee_user_id)
            if existing:
                raise AlreadyACollaboratorError(str(grantee_user_id))

            await uow.projects.add_member(
                ProjectMember(
                    project_id=project_id,
                    user_id=grantee_user_id,
                    privileges=PrivilegeLevel(privileges),
                    added_by=granting_user_id,
                )
            )
            await uow.commit()

        logger.info(
            "collaborator_added",
            project_id=str(project_id),
            user_id=str(grantee_user_id),
            privileges=str(privileges),
        )
