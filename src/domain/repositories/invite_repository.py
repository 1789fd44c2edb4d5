"""Invite repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.invite import Invite


class IInviteRepository(Protocol):
    """Repository interface for Invite entities.

    Lookups return None when nothing matches; deletes return whether a
    record was removed and never raise for a missing record.
    """

    async def count(self, project_id: UUID) -> int:
        """Count pending invites for a project."""
        ...

    async def list_all(self, project_id: UUID) -> list[Invite]:
        """Get all pending invites for a project."""
        ...

    async def create(self, invite: Invite) -> Invite:
        """Persist a new invite."""
        ...

    async def get_by_id(self, project_id: UUID, invite_id: UUID) -> Invite | None:
        """Get an invite by project and primary key."""
        ...

    async def get_by_token(self, project_id: UUID, token: str) -> Invite | None:
        """Get an invite by project and token."""
        ...

    async def delete(self, project_id: UUID, invite_id: UUID) -> bool:
        """Delete an invite scoped to a project."""
        ...

    async def delete_by_id_only(self, invite_id: UUID) -> bool:
        """Delete an invite by primary key alone."""
        ...
