"""Pytest configuration and shared fixtures for table_gateway tests."""

from __future__ import annotations

import os
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection

# Keep a developer's .env from leaking into the test run.
os.environ.setdefault("TG_ENV_FILE", os.devnull)

from table_gateway.config.settings import get_settings  # noqa: E402
from table_gateway.io.connectors import SQLAlchemyConnection  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Settings are cached; every test starts from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_connection() -> Generator[Connection, None, None]:
    """Open a connection to a fresh in-memory SQLite database."""
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        yield conn
    engine.dispose()


@pytest.fixture
def gateway_connection(sqlite_connection: Connection) -> SQLAlchemyConnection:
    """Gateway connection over the in-memory SQLite database."""
    return SQLAlchemyConnection(sqlite_connection)
