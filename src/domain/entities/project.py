"""Project domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.invite import PrivilegeLevel


@dataclass
class Project:
    """Domain entity for a Project."""

    name: str
    owner_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class ProjectMember:
    """Domain entity for a project collaborator."""

    project_id: UUID
    user_id: UUID
    privileges: PrivilegeLevel = PrivilegeLevel.READ_ONLY
    added_by: UUID | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
