"""
SQL dialects.

Usage:
    >>> from table_gateway.sql.dialects import get_dialect
    >>> get_dialect("mysql").quote("users.name")
    '`users`.`name`'
"""

from typing import Dict, Type

from .base import AnsiDialect
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .sqlite import SQLiteDialect

_DIALECTS: Dict[str, Type[AnsiDialect]] = {
    "sqlite": SQLiteDialect,
    "postgresql": PostgreSQLDialect,
    "postgres": PostgreSQLDialect,
    "pgsql": PostgreSQLDialect,
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
}


def get_dialect(name: str) -> AnsiDialect:
    """
    Resolve a dialect from a driver/dialect name.

    Unknown names fall back to the ANSI dialect.

    Args:
        name: Dialect name as reported by the connection (case-insensitive)

    Returns:
        Dialect instance
    """
    dialect_cls = _DIALECTS.get((name or "").strip().lower(), AnsiDialect)
    return dialect_cls()


__all__ = [
    "AnsiDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "get_dialect",
]
