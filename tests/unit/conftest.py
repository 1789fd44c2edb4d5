"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.user import User


class FakeUnitOfWork:
    """Fake Unit of Work with all 4 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.invites = AsyncMock()
        self.notifications = AsyncMock()
        self.users = AsyncMock()
        self.projects = AsyncMock()
        self.commit_count = 0
        self.rolled_back = False

    @property
    def committed(self) -> bool:
        return self.commit_count > 0

    async def commit(self) -> None:
        self.commit_count += 1

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def project_id() -> UUID:
    """A random project ID."""
    return uuid4()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def sending_user() -> User:
    """The user issuing invites."""
    return User(id=uuid4(), email="bob@example.com", first_name="Bob")
