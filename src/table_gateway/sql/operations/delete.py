"""
SQL DELETE statement builders.
"""

from typing import Any

from ..core.parameters import bind_positional
from ..core.statement import Statement
from ..core.types import ColumnType
from ..dialects.base import AnsiDialect


class DeleteBuilder:
    """Builder for DELETE statements keyed by a single column."""

    def __init__(self, dialect: AnsiDialect):
        self.dialect = dialect

    def delete(self, table: str, key: str, key_value: Any, key_type: ColumnType) -> Statement:
        """Build ``DELETE FROM <table> WHERE <key> = ?``."""
        sql = (
            f"DELETE FROM {self.dialect.quote(table)} "
            f"WHERE {self.dialect.quote(key)} = {self.dialect.placeholder}"
        )
        return Statement(sql=sql, parameters=bind_positional([(key_value, key_type)]))
