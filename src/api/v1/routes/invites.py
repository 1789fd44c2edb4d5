"""Project invite API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_invite_service
from api.v1.schemas.invite import (
    AcceptInviteResponse,
    CreateInviteRequest,
    InviteCountResponse,
    InviteCreatedResponse,
    InviteListResponse,
    InviteResponse,
)
from core.exceptions import InviteNotFoundError
from domain.services.invite_service import InviteService

router = APIRouter(
    prefix="/projects/{project_id}/invites",
    tags=["invites"],
)


@router.post(
    "",
    response_model=InviteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Invite a collaborator",
    responses={
        201: {"description": "Invite created and sent"},
        500: {"description": "Invite stored but email or notification failed"},
    },
)
async def send_invite(
    project_id: UUID,
    body: CreateInviteRequest,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> InviteCreatedResponse:
    """Invite an email address to collaborate on a project."""
    invite = await service.send_invite(
        project_id=project_id,
        sending_user=user,
        email=body.email,
        privileges=body.privileges,
    )
    return InviteCreatedResponse(data=InviteResponse.from_entity(invite), token=invite.token)


@router.get(
    "",
    response_model=InviteListResponse,
    summary="List pending invites",
)
async def list_invites(
    project_id: UUID,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> InviteListResponse:
    """List all pending invites of a project."""
    invites = await service.get_all_invites(project_id)
    data = [InviteResponse.from_entity(invite) for invite in invites]
    return InviteListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/count",
    response_model=InviteCountResponse,
    summary="Count pending invites",
)
async def count_invites(
    project_id: UUID,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> InviteCountResponse:
    """Count the pending invites of a project."""
    return InviteCountResponse(count=await service.get_invite_count(project_id))


@router.post(
    "/{invite_id}/resend",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Resend invite",
)
async def resend_invite(
    project_id: UUID,
    invite_id: UUID,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> None:
    """Send the invite email and notification again. Unknown invites are ignored."""
    await service.resend_invite(project_id, user, invite_id)
    return None


@router.delete(
    "/{invite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke invite",
)
async def revoke_invite(
    project_id: UUID,
    invite_id: UUID,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> None:
    """Revoke a pending invite and cancel its notification."""
    await service.revoke_invite(project_id, invite_id)
    return None


@router.get(
    "/token/{token}",
    response_model=InviteResponse,
    summary="View invite by token",
    responses={404: {"description": "Invite not found"}},
)
async def get_invite_by_token(
    project_id: UUID,
    token: str,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> InviteResponse:
    """Look up a pending invite by the token from the invite link."""
    invite = await service.get_invite_by_token(project_id, token)
    if invite is None:
        raise InviteNotFoundError(str(project_id))
    return InviteResponse.from_entity(invite)


@router.post(
    "/token/{token}/accept",
    response_model=AcceptInviteResponse,
    summary="Accept invite",
    responses={
        404: {"description": "Invite not found"},
        500: {"description": "Membership grant, invite removal or notification cancel failed"},
    },
)
async def accept_invite(
    project_id: UUID,
    token: str,
    user: CurrentUser,
    service: InviteService = Depends(get_invite_service),
) -> AcceptInviteResponse:
    """Accept an invite and join the project as the current user."""
    await service.accept_invite(project_id, token, user)
    return AcceptInviteResponse(project_id=project_id)
