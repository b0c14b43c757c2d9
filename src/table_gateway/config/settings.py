"""
Runtime settings for table_gateway.

This module provides environment-based configuration using Pydantic
BaseSettings. Settings cover the ambient concerns of the library (logging and
the location of DAO definition files); the per-table DAO configuration is
validated separately by ``table_gateway.dao.configuration``.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TG_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Environment variables are loaded with the TG_ prefix. For example,
    TG_LOG_LEVEL=DEBUG lowers the log level and TG_LOG_SQL=1 makes every
    DAO operation log the SQL text it executes.
    """

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")
    log_sql: bool = Field(
        default=False,
        description="Log generated SQL text at DEBUG level (bound values never logged)",
    )
    dao_definitions_file: Optional[str] = Field(
        default=None,
        description="Default YAML file with DAO definitions (table, columns, configuration)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_prefix="TG_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; tests that monkeypatch the
    environment should call ``get_settings.cache_clear()`` first.

    Returns:
        Settings instance
    """
    return Settings()
