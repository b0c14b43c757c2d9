"""
PostgreSQL-specific SQL dialect implementation.
"""

from ..core.types import ColumnType
from .base import AnsiDialect


class PostgreSQLDialect(AnsiDialect):
    """PostgreSQL SQL dialect implementation (double quotes, DEFAULT VALUES, RETURNING)."""

    name = "postgresql"
    supports_default_values = True
    supports_returning = True

    def flag_literal(self, value: int, column_type: ColumnType) -> str:
        """
        Render a flag sentinel; boolean columns need TRUE/FALSE.

        Examples:
            >>> PostgreSQLDialect().flag_literal(0, ColumnType.BOOLEAN)
            'FALSE'
        """
        if column_type is ColumnType.BOOLEAN:
            return "TRUE" if value else "FALSE"
        return super().flag_literal(value, column_type)
