"""
ANSI SQL dialect implementation.

The ANSI dialect is the fallback for any engine without a dedicated dialect:
double-quoted identifiers and no ``DEFAULT VALUES`` insert form. Engine
dialects subclass it and override the class attributes they differ on.
"""

from typing import Sequence

from ..core.identifier import quote_identifier
from ..core.parameters import POSITIONAL_PLACEHOLDER
from ..core.types import ColumnType


class AnsiDialect:
    """ANSI SQL dialect implementation."""

    name = "ansi"
    supports_default_values = False
    supports_returning = False
    placeholder = POSITIONAL_PLACEHOLDER

    def quote(self, identifier: str) -> str:
        """Quote a (possibly dotted) identifier."""
        return quote_identifier(identifier, dialect=self.name)

    def flag_literal(self, value: int, column_type: ColumnType) -> str:
        """
        Render a soft-delete flag sentinel as an inline SQL literal.

        String-typed flag columns get a quoted literal, every other type a
        bare number.

        Examples:
            >>> AnsiDialect().flag_literal(1, ColumnType.STRING)
            "'1'"
            >>> AnsiDialect().flag_literal(0, ColumnType.INTEGER)
            '0'
        """
        literal = str(int(value))
        if column_type is ColumnType.STRING:
            return f"'{literal}'"
        return literal

    def build_insert(self, table: str, columns: Sequence[str]) -> str:
        """
        Build an INSERT statement with one positional placeholder per column.

        Args:
            table: Table name
            columns: Column names, in binding order

        Returns:
            INSERT SQL statement
        """
        quoted_cols = ", ".join(self.quote(c) for c in columns)
        values = ", ".join(self.placeholder for _ in columns)
        return f"INSERT INTO {self.quote(table)} ({quoted_cols}) VALUES ({values})"

    def build_default_values_insert(self, table: str) -> str:
        """Build an INSERT that relies on column defaults for every column."""
        if not self.supports_default_values:
            # Engines without DEFAULT VALUES accept an empty column list
            return self.build_insert(table, [])
        return f"INSERT INTO {self.quote(table)} DEFAULT VALUES"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
