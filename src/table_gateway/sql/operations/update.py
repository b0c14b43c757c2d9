"""
SQL UPDATE statement builders.

Assignments are bound first, in column order; the key used in the WHERE
clause is always the last bound value.
"""

from typing import Any, Sequence

from ..core.parameters import bind_positional
from ..core.statement import Statement
from ..core.types import ColumnType
from ..dialects.base import AnsiDialect
from .insert import ColumnValue


class UpdateBuilder:
    """Builder for UPDATE statements keyed by a single column."""

    def __init__(self, dialect: AnsiDialect):
        self.dialect = dialect

    def _where_key(self, key: str) -> str:
        return f"WHERE {self.dialect.quote(key)} = {self.dialect.placeholder}"

    def update(
        self,
        table: str,
        assignments: Sequence[ColumnValue],
        key: str,
        key_value: Any,
        key_type: ColumnType,
    ) -> Statement:
        """
        Build ``UPDATE <table> SET a = ?, b = ? WHERE <key> = ?``.

        Args:
            table: Table name
            assignments: (column, value, declared type) triples, key excluded
            key: Key column
            key_value: Key of the row to update
            key_type: Declared type of the key column

        Returns:
            Statement binding the assignments then the key
        """
        set_list = ", ".join(
            f"{self.dialect.quote(name)} = {self.dialect.placeholder}"
            for name, _, _ in assignments
        )
        sql = f"UPDATE {self.dialect.quote(table)} SET {set_list} {self._where_key(key)}"
        values = [(value, ctype) for _, value, ctype in assignments]
        values.append((key_value, key_type))
        return Statement(sql=sql, parameters=bind_positional(values))

    def update_key(
        self, table: str, key: str, old_key: Any, new_key: Any, key_type: ColumnType
    ) -> Statement:
        """Build ``UPDATE <table> SET <key> = ? WHERE <key> = ?`` binding new then old."""
        sql = (
            f"UPDATE {self.dialect.quote(table)} "
            f"SET {self.dialect.quote(key)} = {self.dialect.placeholder} "
            f"{self._where_key(key)}"
        )
        return Statement(
            sql=sql,
            parameters=bind_positional([(new_key, key_type), (old_key, key_type)]),
        )

    def set_flag(
        self,
        table: str,
        flag_column: str,
        flag_literal: str,
        key: str,
        key_value: Any,
        key_type: ColumnType,
    ) -> Statement:
        """
        Build ``UPDATE <table> SET <flag> = <literal> WHERE <key> = ?``.

        ``flag_literal`` must come from ``AnsiDialect.flag_literal``.
        """
        sql = (
            f"UPDATE {self.dialect.quote(table)} "
            f"SET {self.dialect.quote(flag_column)} = {flag_literal} "
            f"{self._where_key(key)}"
        )
        return Statement(sql=sql, parameters=bind_positional([(key_value, key_type)]))
