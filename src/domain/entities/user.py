"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for a registered account."""

    email: str
    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email address."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email
