"""Invite email delivery."""

from uuid import UUID

import structlog

from core.config import settings
from domain.entities.invite import Invite

logger = structlog.get_logger()


def build_accept_url(project_id: UUID, token: str, site_url: str | None = None) -> str:
    """Build the link an invitee follows to accept an invite."""
    base = (site_url or settings.site_url).rstrip("/")
    return f"{base}/project/{project_id}/invite/token/{token}"


class LoggingInviteMailer:
    """Implementation of IInviteMailer that records the accept link instead of sending mail.

    Used when no mail transport is wired in (local development, tests).
    """

    def __init__(self, site_url: str | None = None) -> None:
        self._site_url = site_url

    async def notify_user_of_invite(self, project_id: UUID, email: str, invite: Invite) -> None:
        """Log the invite email that would have been sent."""
        logger.info(
            "invite_email_queued",
            project_id=str(project_id),
            invite_id=str(invite.id),
            email=email,
            accept_url=build_accept_url(project_id, invite.token, self._site_url),
        )
