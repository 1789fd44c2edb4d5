"""Unit tests for invite email delivery."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from domain.entities.invite import Invite, PrivilegeLevel
from infrastructure.email import mailer as mailer_module
from infrastructure.email.mailer import LoggingInviteMailer, build_accept_url


class TestBuildAcceptUrl:
    def test_builds_project_invite_link(self) -> None:
        project_id = uuid4()

        url = build_accept_url(project_id, "tok", site_url="https://example.com")

        assert url == f"https://example.com/project/{project_id}/invite/token/tok"

    def test_strips_trailing_slash(self) -> None:
        project_id = uuid4()

        url = build_accept_url(project_id, "tok", site_url="https://example.com/")

        assert url == f"https://example.com/project/{project_id}/invite/token/tok"


class TestLoggingInviteMailer:
    @pytest.mark.asyncio
    async def test_logs_accept_link(self, monkeypatch: pytest.MonkeyPatch) -> None:
        logger = MagicMock()
        monkeypatch.setattr(mailer_module, "logger", logger)
        project_id = uuid4()
        invite = Invite(
            project_id=project_id,
            email="user@example.com",
            token="tok",
            sending_user_id=uuid4(),
            privileges=PrivilegeLevel.READ_ONLY,
        )
        mailer = LoggingInviteMailer(site_url="https://example.com")

        await mailer.notify_user_of_invite(project_id, invite.email, invite)

        logger.info.assert_called_once()
        event, kwargs = logger.info.call_args[0][0], logger.info.call_args[1]
        assert event == "invite_email_queued"
        assert kwargs["email"] == "user@example.com"
        assert kwargs["accept_url"] == (
            f"https://example.com/project/{project_id}/invite/token/tok"
        )
