"""Unit tests for environment-based settings."""

import pytest
from pydantic import ValidationError

# Import directly from settings module to avoid package-level side effects
from table_gateway.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    """Settings load without any TG_ environment variables."""
    for name in ("TG_LOG_LEVEL", "TG_LOG_SQL", "TG_LOG_TO_FILE", "TG_DAO_DEFINITIONS_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.log_sql is False
    assert settings.log_to_file is False
    assert settings.log_file_dir == "logs"
    assert settings.dao_definitions_file is None


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TG_LOG_LEVEL", "debug")
    monkeypatch.setenv("TG_LOG_SQL", "1")
    monkeypatch.setenv("TG_DAO_DEFINITIONS_FILE", "config/daos.yml")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_sql is True
    assert settings.dao_definitions_file == "config/daos.yml"


@pytest.mark.unit
def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("TG_LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "log_level" in str(exc_info.value)


@pytest.mark.unit
def test_get_settings_is_cached(monkeypatch):
    """get_settings returns one instance until the cache is cleared."""
    monkeypatch.setenv("TG_LOG_SQL", "false")
    first = get_settings()

    monkeypatch.setenv("TG_LOG_SQL", "true")
    assert get_settings() is first
    assert get_settings().log_sql is False

    get_settings.cache_clear()
    assert get_settings().log_sql is True
