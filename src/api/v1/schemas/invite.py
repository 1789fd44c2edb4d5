"""Pydantic schemas for Invite API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities.invite import Invite, PrivilegeLevel


class CreateInviteRequest(BaseModel):
    """Schema for inviting a collaborator to a project."""

    email: str = Field(..., min_length=3, max_length=255)
    privileges: PrivilegeLevel = Field(PrivilegeLevel.READ_ONLY)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        v = v.strip().lower()
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Invalid email address")
        return v


class InviteResponse(BaseModel):
    """Schema for Invite response. The token is never listed."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "project_id": "456e4567-e89b-12d3-a456-426614174000",
                "email": "user@example.com",
                "privileges": "readAndWrite",
                "sending_user_id": "789e4567-e89b-12d3-a456-426614174000",
                "created_at": "2026-02-01T10:00:00",
            }
        },
    )

    id: UUID
    project_id: UUID
    email: str
    privileges: PrivilegeLevel
    sending_user_id: UUID
    created_at: datetime

    @classmethod
    def from_entity(cls, invite: Invite) -> "InviteResponse":
        return cls(
            id=invite.id,
            project_id=invite.project_id,
            email=invite.email,
            privileges=invite.privileges,
            sending_user_id=invite.sending_user_id,
            created_at=invite.created_at,
        )


class InviteListResponse(BaseModel):
    """Schema for list of Invites response."""

    data: list[InviteResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class InviteCountResponse(BaseModel):
    """Schema for pending invite count response."""

    count: int


class InviteCreatedResponse(BaseModel):
    """Schema for invite creation response (includes the token)."""

    data: InviteResponse
    token: str = Field(
        ...,
        description="Invite token. Only returned when the invite is created.",
    )


class AcceptInviteResponse(BaseModel):
    """Schema for accepting an invite response."""

    project_id: UUID
    message: str = "Invite accepted successfully"
