"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from core.config import Settings


class TestInviteTokenBytes:
    def test_default(self) -> None:
        assert Settings().invite_token_bytes == 32

    def test_accepts_upper_bound(self) -> None:
        assert Settings(invite_token_bytes=128).invite_token_bytes == 128

    @pytest.mark.parametrize("nbytes", [8, 192])
    def test_rejects_out_of_range(self, nbytes: int) -> None:
        with pytest.raises(ValidationError):
            Settings(invite_token_bytes=nbytes)


class TestDatabaseUrl:
    def test_plain_postgres_url_gets_asyncpg_driver(self) -> None:
        settings = Settings(database_url="postgresql://db:5432/invites")

        assert settings.async_database_url == "postgresql+asyncpg://db:5432/invites"
