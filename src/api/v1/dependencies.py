"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.invite_service import InviteService
from domain.services.membership_service import MembershipService
from domain.services.notification_service import NotificationService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.email.mailer import LoggingInviteMailer
from infrastructure.security.token_generator import SecureTokenGenerator


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_notification_service() -> NotificationService:
    """Get Notification service instance."""
    return NotificationService(get_uow_factory())


@lru_cache
def get_membership_service() -> MembershipService:
    """Get Membership service instance."""
    return MembershipService(get_uow_factory())


@lru_cache
def get_invite_service() -> InviteService:
    """Get Invite service instance."""
    return InviteService(
        get_uow_factory(),
        notification_service=get_notification_service(),
        membership_service=get_membership_service(),
        mailer=LoggingInviteMailer(),
        token_generator=SecureTokenGenerator(),
    )
