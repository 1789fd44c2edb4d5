"""Unit tests for MembershipService."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import AlreadyACollaboratorError, ProjectNotFoundError, StoreError
from domain.entities.invite import PrivilegeLevel
from domain.entities.project import Project, ProjectMember
from domain.services.membership_service import MembershipService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> MembershipService:
    return MembershipService(lambda: uow)


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()


@pytest.fixture
def project(project_id: UUID, owner_id: UUID) -> Project:
    return Project(id=project_id, name="Thesis", owner_id=owner_id)


class TestAddUser:
    @pytest.mark.asyncio
    async def test_adds_member(
        self,
        service: MembershipService,
        uow: FakeUnitOfWork,
        project: Project,
        project_id: UUID,
        owner_id: UUID,
        user_id: UUID,
    ) -> None:
        uow.projects.get.return_value = project
        uow.projects.get_member.return_value = None

        await service.add_user(project_id, owner_id, user_id, PrivilegeLevel.READ_AND_WRITE)

        uow.projects.add_member.assert_awaited_once()
        member = uow.projects.add_member.call_args[0][0]
        assert member.project_id == project_id
        assert member.user_id == user_id
        assert member.privileges == PrivilegeLevel.READ_AND_WRITE
        assert member.added_by == owner_id
        assert uow.committed

    @pytest.mark.asyncio
    async def test_project_not_found(
        self,
        service: MembershipService,
        uow: FakeUnitOfWork,
        project_id: UUID,
        user_id: UUID,
    ) -> None:
        uow.projects.get.return_value = None

        with pytest.raises(ProjectNotFoundError):
            await service.add_user(project_id, uuid4(), user_id, PrivilegeLevel.READ_ONLY)

        uow.projects.add_member.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owner_cannot_be_added(
        self,
        service: MembershipService,
        uow: FakeUnitOfWork,
        project: Project,
        project_id: UUID,
        owner_id: UUID,
    ) -> None:
        uow.projects.get.return_value = project

        with pytest.raises(AlreadyACollaboratorError):
            await service.add_user(project_id, owner_id, owner_id, PrivilegeLevel.READ_ONLY)

        uow.projects.add_member.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_existing_member_rejected(
        self,
        service: MembershipService,
        uow: FakeUnitOfWork,
        project: Project,
        project_id: UUID,
        owner_id: UUID,
        user_id: UUID,
    ) -> None:
        uow.projects.get.return_value = project
        uow.projects.get_member.return_value = ProjectMember(project_id=project_id, user_id=user_id)

        with pytest.raises(AlreadyACollaboratorError):
            await service.add_user(project_id, owner_id, user_id, PrivilegeLevel.READ_ONLY)

        uow.projects.add_member.assert_not_awaited()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_store_error_propagates(
        self,
        service: MembershipService,
        uow: FakeUnitOfWork,
        project: Project,
        project_id: UUID,
        owner_id: UUID,
        user_id: UUID,
    ) -> None:
        uow.projects.get.return_value = project
        uow.projects.get_member.return_value = None
        uow.projects.add_member.side_effect = StoreError()

        with pytest.raises(StoreError):
            await service.add_user(project_id, owner_id, user_id, PrivilegeLevel.READ_ONLY)
