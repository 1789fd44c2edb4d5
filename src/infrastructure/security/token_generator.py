"""Invite token generation."""

import secrets

from core.config import settings

MIN_TOKEN_BYTES = 16


class SecureTokenGenerator:
    """Implementation of ITokenGenerator backed by the OS CSPRNG."""

    def __init__(self, nbytes: int | None = None) -> None:
        if nbytes is None:
            nbytes = settings.invite_token_bytes
        if nbytes < MIN_TOKEN_BYTES:
            raise ValueError(f"Invite tokens need at least {MIN_TOKEN_BYTES} random bytes")
        self._nbytes = nbytes

    def generate(self) -> str:
        """Return a URL-safe token carrying ``nbytes`` of entropy."""
        return secrets.token_urlsafe(self._nbytes)
