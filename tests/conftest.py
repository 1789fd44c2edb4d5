"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.user import User
from infrastructure.database.models import Base, ProjectModel, UserModel


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(
    engine: AsyncEngine,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create session factory."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield factory


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def owner() -> User:
    """Project owner who sends invites."""
    return User(email="owner@example.com", first_name="Olive", last_name="Owner")


@pytest.fixture
def invitee() -> User:
    """Registered account that receives invites."""
    return User(email="invitee@example.com", first_name="Ian")


@pytest.fixture
async def seeded(
    session_factory: async_sessionmaker[AsyncSession], owner: User, invitee: User
) -> ProjectModel:
    """Insert both users and a project owned by ``owner``."""
    async with session_factory() as session:
        for user in (owner, invitee):
            session.add(
                UserModel(
                    id=user.id,
                    email=user.email,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    created_at=user.created_at,
                )
            )
        project = ProjectModel(name="Thesis", owner_id=owner.id)
        session.add(project)
        await session.commit()
    return project


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth, no database)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def app_client(
    session_factory: async_sessionmaker[AsyncSession],
    seeded: ProjectModel,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory database.

    This client:
    - Uses an in-memory SQLite database seeded with two users and a project
    - Overrides the UoW factory so ``X-User-Id`` resolves against that database
    - Overrides the services to use the same UoW factory
    """
    from api.v1.dependencies import (
        get_invite_service,
        get_membership_service,
        get_notification_service,
        get_uow_factory,
    )
    from domain.services.invite_service import InviteService
    from domain.services.membership_service import MembershipService
    from domain.services.notification_service import NotificationService
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from infrastructure.email.mailer import LoggingInviteMailer
    from infrastructure.security.token_generator import SecureTokenGenerator
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    notification_service = NotificationService(test_uow_factory)
    membership_service = MembershipService(test_uow_factory)
    invite_service = InviteService(
        test_uow_factory,
        notification_service=notification_service,
        membership_service=membership_service,
        mailer=LoggingInviteMailer(),
        token_generator=SecureTokenGenerator(),
    )

    app.dependency_overrides[get_uow_factory] = lambda: test_uow_factory
    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_notification_service] = lambda: notification_service
    app.dependency_overrides[get_membership_service] = lambda: membership_service
    app.dependency_overrides[get_invite_service] = lambda: invite_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


def auth(user: User) -> dict[str, str]:
    """Identity header for a user."""
    return {"X-User-Id": str(user.id)}
