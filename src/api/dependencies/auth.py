"""Current-user resolution for FastAPI.

Authentication happens upstream; the gateway forwards the authenticated
account id in the ``X-User-Id`` header.
"""

from typing import Annotated, Callable
from uuid import UUID

from fastapi import Depends, Header

from api.v1.dependencies import get_uow_factory
from core.exceptions import AuthenticationError
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork


async def get_current_user(
    x_user_id: Annotated[str | None, Header()] = None,
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> User:
    """
    Dependency to get the current user.

    Raises:
        AuthenticationError: If the header is missing, malformed, or names no account
    """
    if not x_user_id:
        raise AuthenticationError("X-User-Id header required")

    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise AuthenticationError("Invalid user id") from None

    async with uow_factory() as uow:
        user = await uow.users.get(user_id)

    if not user:
        raise AuthenticationError("Unknown user")

    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[User, Depends(get_current_user)]
