"""
SQL INSERT statement builders.
"""

from typing import Any, Optional, Sequence, Tuple

from ..core.parameters import bind_positional
from ..core.statement import Statement
from ..core.types import ColumnType
from ..dialects.base import AnsiDialect

ColumnValue = Tuple[str, Any, ColumnType]


class InsertBuilder:
    """
    Builder for INSERT statements.

    Example:
        >>> from table_gateway.sql.dialects import SQLiteDialect
        >>> builder = InsertBuilder(SQLiteDialect())
        >>> builder.insert("users", [("name", "x", ColumnType.STRING)]).sql
        'INSERT INTO "users" ("name") VALUES (?)'
    """

    def __init__(self, dialect: AnsiDialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def insert(
        self,
        table: str,
        columns: Sequence[ColumnValue],
        returning: Optional[str] = None,
    ) -> Statement:
        """
        Build an INSERT of the given columns.

        Args:
            table: Table name
            columns: (column, value, declared type) triples in binding order
            returning: Column to return from the inserted row; ignored when
                the dialect has no RETURNING clause

        Returns:
            Statement with one parameter per column; an all-defaults insert
            when ``columns`` is empty
        """
        if not columns:
            statement = self.insert_defaults(table)
        else:
            sql = self.dialect.build_insert(table, [name for name, _, _ in columns])
            statement = Statement(
                sql=sql,
                parameters=bind_positional((value, ctype) for _, value, ctype in columns),
            )
        if returning and self.dialect.supports_returning:
            statement = Statement(
                sql=f"{statement.sql} RETURNING {self.dialect.quote(returning)}",
                parameters=statement.parameters,
            )
        return statement

    def insert_defaults(self, table: str) -> Statement:
        """Build an INSERT that fills every column from its default."""
        return Statement(sql=self.dialect.build_default_values_insert(table))
