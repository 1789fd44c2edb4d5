"""Project invite service layer with business logic.

Failure policy per operation. Store writes are commit points: a failure in a
later step is raised to the caller but never rolls the write back.

    operation  failing step             outcome
    ---------  -----------------------  -----------------------------------------
    send       store create             raised, nothing persisted
    send       email / notification     raised, invite stays persisted
    resend     store read               raised, nothing sent
    revoke     store delete             raised, no cancel attempted
    revoke     notification cancel      raised, invite already deleted
    accept     unknown token            InviteNotFoundError, no grant, no delete
    accept     membership grant         raised, invite kept for retry
    accept     store delete             raised, membership already granted
    accept     notification cancel      raised, invite deleted, membership granted
"""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import InviteNotFoundError, ProjectNotFoundError
from domain.entities.invite import Invite, PrivilegeLevel
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.interfaces import IInviteMailer, IMembershipService, ITokenGenerator
from domain.services.notification_service import NotificationService

logger = structlog.get_logger()


class InviteService:
    """Service layer for the project invite lifecycle."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        notification_service: NotificationService,
        membership_service: IMembershipService,
        mailer: IInviteMailer,
        token_generator: ITokenGenerator,
    ) -> None:
        self._uow_factory = uow_factory
        self._notifications = notification_service
        self._membership = membership_service
        self._mailer = mailer
        self._tokens = token_generator

    async def get_invite_count(self, project_id: UUID) -> int:
        """Count the pending invites of a project."""
        async with self._uow_factory() as uow:
            return await uow.invites.count(project_id)

    async def get_all_invites(self, project_id: UUID) -> list[Invite]:
        """Get all pending invites of a project."""
        async with self._uow_factory() as uow:
            return await uow.invites.list_all(project_id)

    async def send_invite(
        self,
        project_id: UUID,
        sending_user: User,
        email: str,
        privileges: PrivilegeLevel | str,
    ) -> Invite:
        """Create an invite and notify the invitee.

        Args:
            project_id: The project to invite to.
            sending_user: The user issuing the invite.
            email: The invitee's email address.
            privileges: The access level granted on acceptance.

        Returns:
            The persisted Invite, including its freshly generated token.

        Raises:
            StoreError: If the invite could not be persisted.
            Exception: Any email or notification failure. The invite has
                already been persisted when this happens.
        """
        invite = Invite(
            project_id=project_id,
            email=email,
            token=self._tokens.generate(),
            sending_user_id=sending_user.id,
            privileges=PrivilegeLevel(privileges),
        )

        async with self._uow_factory() as uow:
            created = await uow.invites.create(invite)
            await uow.commit()

        logger.info(
            "invite_created",
            project_id=str(project_id),
            invite_id=str(created.id),
            privileges=str(created.privileges),
        )

        try:
            await self._send_messages(project_id, sending_user, created)
        except Exception as exc:
            logger.warning(
                "invite_messages_failed",
                project_id=str(project_id),
                invite_id=str(created.id),
                error=str(exc),
            )
            raise

        return created

    async def resend_invite(self, project_id: UUID, sending_user: User, invite_id: UUID) -> None:
        """Send the email and in-app notification of an invite again.

        Resending an invite that does not exist is a no-op.
        """
        async with self._uow_factory() as uow:
            invite = await uow.invites.get_by_id(project_id, invite_id)

        if invite is None:
            logger.debug(
                "invite_resend_skipped",
                project_id=str(project_id),
                invite_id=str(invite_id),
            )
            return

        await self._send_messages(project_id, sending_user, invite)
        logger.info("invite_resent", project_id=str(project_id), invite_id=str(invite_id))

    async def revoke_invite(self, project_id: UUID, invite_id: UUID) -> None:
        """Delete an invite and cancel its notification.

        Revoking an invite that does not exist still cancels the notification.

        Raises:
            StoreError: If the invite could not be deleted.
            NotificationError: If the notification could not be cancelled.
                The invite is already deleted when this happens.
        """
        async with self._uow_factory() as uow:
            deleted = await uow.invites.delete(project_id, invite_id)
            await uow.commit()

        await self._try_cancel_invite_notification(invite_id)
        logger.info(
            "invite_revoked",
            project_id=str(project_id),
            invite_id=str(invite_id),
            deleted=deleted,
        )

    async def get_invite_by_token(self, project_id: UUID, token: str) -> Invite | None:
        """Get a pending invite by its token, or None."""
        async with self._uow_factory() as uow:
            return await uow.invites.get_by_token(project_id, token)

    async def accept_invite(self, project_id: UUID, token: str, accepting_user: User) -> None:
        """Turn an invite into project membership for the accepting user.

        Args:
            project_id: The project the invite belongs to.
            token: The invite token presented by the invitee.
            accepting_user: The user accepting the invite.

        Raises:
            InviteNotFoundError: If no pending invite matches the token.
            Exception: Any membership grant failure; the invite is kept.
            StoreError: If the invite could not be deleted after the grant.
            NotificationError: If the notification could not be cancelled.
        """
        invite = await self.get_invite_by_token(project_id, token)
        if invite is None:
            raise InviteNotFoundError(str(project_id))

        await self._membership.add_user(
            project_id,
            invite.sending_user_id,
            accepting_user.id,
            invite.privileges,
        )

        async with self._uow_factory() as uow:
            deleted = await uow.invites.delete_by_id_only(invite.id)
            await uow.commit()

        if not deleted:
            # Another request accepted or revoked the invite after our lookup.
            logger.warning(
                "invite_already_removed",
                project_id=str(project_id),
                invite_id=str(invite.id),
            )

        await self._try_cancel_invite_notification(invite.id)
        logger.info(
            "invite_accepted",
            project_id=str(project_id),
            invite_id=str(invite.id),
            user_id=str(accepting_user.id),
        )

    # --- Internal helpers ---

    async def _send_messages(self, project_id: UUID, sending_user: User, invite: Invite) -> None:
        """Email the invitee, then add the in-app notification. Email failure stops both."""
        await self._mailer.notify_user_of_invite(project_id, invite.email, invite)
        await self._try_send_invite_notification(project_id, sending_user, invite)

    async def _try_send_invite_notification(
        self, project_id: UUID, sending_user: User, invite: Invite
    ) -> None:
        """Notify the invitee in-app when the email belongs to a registered account."""
        async with self._uow_factory() as uow:
            existing_user = await uow.users.find_by_email(invite.email)
            if existing_user is None:
                logger.debug(
                    "invite_notification_skipped",
                    project_id=str(project_id),
                    invite_id=str(invite.id),
                    reason="no_account",
                )
                return

            project = await uow.projects.get(project_id)

        if project is None:
            raise ProjectNotFoundError(str(project_id))

        notification = self._notifications.build_invite_notification(invite.id, existing_user.id)
        await notification.create(
            {
                "user_name": sending_user.display_name,
                "project_name": project.name,
                "project_id": str(project_id),
                "token": invite.token,
            }
        )

    async def _try_cancel_invite_notification(self, invite_id: UUID) -> None:
        """Cancel the notification of an invite for whoever received it."""
        notification = self._notifications.build_invite_notification(invite_id)
        await notification.cancel()
