"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Read-only repository interface for registered accounts."""

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Get the user registered with an email address."""
        ...
