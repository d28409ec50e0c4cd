"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from crowdmap_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_database_dsn_wins(self):
        settings = Settings(database_dsn="sqlite+aiosqlite:///./crowdmap.db")

        assert settings.database_url == "sqlite+aiosqlite:///./crowdmap.db"

    def test_postgres_url_from_components(self):
        settings = Settings(
            database_dsn=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="crowd",
            postgres_password="s3cret",
            postgres_db="maps",
        )

        assert settings.database_url == "postgresql+asyncpg://crowd:s3cret@db:5433/maps"

    def test_reset_token_ttl_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(reset_token_ttl_seconds=0)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "6")
        monkeypatch.setenv("RESET_TOKEN_TTL_SECONDS", "600")

        settings = Settings()

        assert settings.bcrypt_rounds == 6
        assert settings.reset_token_ttl_seconds == 600

    def test_get_settings_is_cached(self):
        clear_settings_cache()

        assert get_settings() is get_settings()

        clear_settings_cache()
