"""Project invite domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class PrivilegeLevel(StrEnum):
    """Access level granted to a collaborator when an invite is accepted."""

    READ_ONLY = "readOnly"
    READ_AND_WRITE = "readAndWrite"


@dataclass(frozen=True)
class Invite:
    """Domain entity for a pending project invite.

    Invites are never updated in place: resending re-reads the record,
    and accepting or revoking deletes it.
    """

    project_id: UUID
    email: str
    token: str
    sending_user_id: UUID
    privileges: PrivilegeLevel
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
