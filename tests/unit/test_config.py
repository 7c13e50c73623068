"""
Unit tests for environment-driven settings.
"""
from dataclasses import FrozenInstanceError

import pytest

from src.core.config import _get_env, build_database_url, get_settings


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test that changes the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


class TestDatabaseUrl:
    """Test build_database_url."""

    def test_database_url_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/tours")
        assert build_database_url() == "postgresql://u:p@db:5432/tours"

    def test_legacy_scheme_is_rewritten(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/tours")
        assert build_database_url() == "postgresql://u:p@db:5432/tours"

    def test_built_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_HOST", "pg")
        monkeypatch.setenv("POSTGRES_PORT", "6543")
        monkeypatch.setenv("POSTGRES_DB", "fleet")
        monkeypatch.setenv("POSTGRES_USER", "admin")
        monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
        assert build_database_url() == "postgresql://admin:secret@pg:6543/fleet"


class TestSettings:
    """Test get_settings."""

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("SOME_UNSET_VARIABLE", raising=False)
        with pytest.raises(ValueError):
            _get_env("SOME_UNSET_VARIABLE")

    def test_mongo_uris_default_to_shared_uri(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("MONGODB_URI", "mongodb://cluster:27017")
        monkeypatch.delenv("MONGODB_URI_ADMIN", raising=False)
        monkeypatch.delenv("MONGODB_URI_EMPLOYEE", raising=False)

        settings = fresh_settings()

        assert settings.mongodb_uri_admin == "mongodb://cluster:27017"
        assert settings.same_mongo_cluster() is True

    def test_separate_clusters(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("MONGODB_URI_ADMIN", "mongodb://admin:27017")
        monkeypatch.setenv("MONGODB_URI_EMPLOYEE", "mongodb://emp:27017")

        assert fresh_settings().same_mongo_cluster() is False

    def test_flags_and_numbers(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("AUTO_INIT_DB", "yes")
        monkeypatch.setenv("LLM_TEMPERATURE", "0.7")
        monkeypatch.setenv("APP_ENV", "Production")

        settings = fresh_settings()

        assert settings.auto_init_db is True
        assert settings.llm_temperature == 0.7
        assert settings.is_production() is True
        assert settings.is_development() is False

    def test_settings_are_frozen(self, fresh_settings):
        settings = fresh_settings()
        with pytest.raises(FrozenInstanceError):
            settings.app_name = "other"
