"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not found errors (404)
    INVITE_NOT_FOUND = "INVITE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORE_ERROR = "STORE_ERROR"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    ALREADY_A_COLLABORATOR = "ALREADY_A_COLLABORATOR"
    NOTIFICATION_ERROR = "NOTIFICATION_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(
            error_code=ErrorCode.UNAUTHORIZED,
            message=message,
            status_code=401,
        )


class StoreError(AppException):
    """Invite or membership storage failed (connectivity, constraint, query)."""

    def __init__(self, message: str = "Storage operation failed") -> None:
        super().__init__(
            error_code=ErrorCode.STORE_ERROR,
            message=message,
            status_code=500,
        )


class NotificationError(AppException):
    """The notification subsystem failed to create or cancel a notification."""

    def __init__(self, key: str, message: str = "Notification operation failed") -> None:
        super().__init__(
            error_code=ErrorCode.NOTIFICATION_ERROR,
            message=message,
            status_code=500,
            details={"key": key},
        )


class InviteNotFoundError(AppException):
    """Invite not found."""

    def __init__(self, project_id: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.INVITE_NOT_FOUND,
            message="Invite not found",
            status_code=404,
            details={"project_id": project_id} if project_id else None,
        )


class ProjectNotFoundError(AppException):
    """Project not found while granting membership or notifying an invitee.

    A server-side failure: the invite already names the project.
    """

    def __init__(self, project_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROJECT_NOT_FOUND,
            message=f"Project not found: {project_id}",
            status_code=500,
            details={"project_id": project_id},
        )


class AlreadyACollaboratorError(AppException):
    """Membership grant refused because the user already collaborates on the project."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_A_COLLABORATOR,
            message="User is already a collaborator on this project",
            status_code=500,
            details={"user_id": user_id},
        )
