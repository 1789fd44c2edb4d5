"""Protocols for the collaborators the invite workflow consumes."""

from typing import Protocol
from uuid import UUID

from domain.entities.invite import Invite, PrivilegeLevel


class ITokenGenerator(Protocol):
    """Protocol for invite token generators."""

    def generate(self) -> str:
        """Return a fresh, unguessable token."""
        ...


class IInviteMailer(Protocol):
    """Protocol for sending the invite email to the invitee."""

    async def notify_user_of_invite(self, project_id: UUID, email: str, invite: Invite) -> None:
        """Email the invitee a link to accept the invite. Raises on delivery failure."""
        ...


class IMembershipService(Protocol):
    """Protocol for granting project access."""

    async def add_user(
        self,
        project_id: UUID,
        granting_user_id: UUID,
        grantee_user_id: UUID,
        privileges: PrivilegeLevel,
    ) -> None:
        """Record a user as a collaborator on a project. Raises on any failure."""
        ...
