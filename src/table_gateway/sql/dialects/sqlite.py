"""
SQLite-specific SQL dialect implementation.
"""

from .base import AnsiDialect


class SQLiteDialect(AnsiDialect):
    """SQLite SQL dialect implementation (double quotes, DEFAULT VALUES)."""

    name = "sqlite"
    supports_default_values = True
