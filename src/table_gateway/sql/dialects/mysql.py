"""
MySQL/MariaDB-specific SQL dialect implementation.

MySQL quotes identifiers with backticks and has no ``DEFAULT VALUES`` form;
an all-defaults row is inserted with ``INSERT INTO t () VALUES ()``.
"""

from .base import AnsiDialect


class MySQLDialect(AnsiDialect):
    """MySQL SQL dialect implementation."""

    name = "mysql"
    supports_default_values = False
