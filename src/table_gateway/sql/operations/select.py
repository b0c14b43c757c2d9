"""
SQL SELECT statement builders (count, get by key, list).
"""

from typing import Any

from ..core.parameters import bind_positional
from ..core.statement import Clause, Statement
from ..core.types import ColumnType
from ..dialects.base import AnsiDialect


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


class SelectBuilder:
    """Builder for SELECT statements over a single table."""

    def __init__(self, dialect: AnsiDialect):
        self.dialect = dialect

    def count(self, table: str, where: Clause = Clause()) -> Statement:
        """
        Build ``SELECT count(*) FROM <table> [WHERE ...]``.

        Examples:
            >>> from table_gateway.sql.dialects import AnsiDialect
            >>> SelectBuilder(AnsiDialect()).count("users").sql
            'SELECT count(*) FROM "users"'
        """
        sql = _join(f"SELECT count(*) FROM {self.dialect.quote(table)}", where.text)
        return Statement(sql=sql, parameters=where.parameters)

    def select(self, table: str, where: Clause = Clause(), order_by: str = "") -> Statement:
        """Build ``SELECT * FROM <table> [WHERE ...] [ORDER BY ...]``."""
        sql = _join(f"SELECT * FROM {self.dialect.quote(table)}", where.text, order_by)
        return Statement(sql=sql, parameters=where.parameters)

    def by_key(self, table: str, key: str, key_value: Any, key_type: ColumnType) -> Statement:
        """Build ``SELECT * FROM <table> WHERE <key> = ?``."""
        sql = (
            f"SELECT * FROM {self.dialect.quote(table)} "
            f"WHERE {self.dialect.quote(key)} = {self.dialect.placeholder}"
        )
        return Statement(sql=sql, parameters=bind_positional([(key_value, key_type)]))
