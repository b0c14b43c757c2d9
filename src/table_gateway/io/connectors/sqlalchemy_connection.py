"""
SQLAlchemy implementation of the gateway connection contract.

Positional ``?`` placeholders are rewritten into indexed named parameters
(``:p_0``, ``:p_1``, ...) and bound through ``bindparam`` with the SQLAlchemy
type matching each declared column type, so the same generated SQL runs on
any driver regardless of its DB-API paramstyle.

The caller owns the transaction lifecycle (commit/rollback).

Example:
    >>> from sqlalchemy import create_engine
    >>> engine = create_engine("sqlite://")
    >>> with engine.connect() as conn:
    ...     gateway = TableGateway(SQLAlchemyConnection(conn), "users", columns, {"key": "id"})
    ...     gateway.create({"name": "x"})
    ...     conn.commit()
"""

from typing import Any, Dict, Optional

from sqlalchemy import (
    Boolean,
    Connection,
    CursorResult,
    Float,
    Integer,
    LargeBinary,
    String,
    bindparam,
    text,
)
from sqlalchemy.engine import MappingResult
from sqlalchemy.types import NullType, TypeEngine

from table_gateway.sql.core.parameters import to_indexed_placeholders
from table_gateway.sql.core.types import ColumnType
from table_gateway.utils.logging import get_logger

logger = get_logger(__name__)

_SQLALCHEMY_TYPES: Dict[ColumnType, TypeEngine] = {
    ColumnType.INTEGER: Integer(),
    ColumnType.STRING: String(),
    ColumnType.BOOLEAN: Boolean(),
    ColumnType.FLOAT: Float(),
    ColumnType.BINARY: LargeBinary(),
    ColumnType.NULL: NullType(),
}


def sqlalchemy_type_for(column_type: ColumnType) -> TypeEngine:
    """Return the SQLAlchemy type used to bind values of ``column_type``."""
    return _SQLALCHEMY_TYPES[column_type]


class SQLAlchemyStatement:
    """Prepared statement handle over ``sqlalchemy.text``."""

    def __init__(self, owner: "SQLAlchemyConnection", sql: str):
        self._owner = owner
        self.sql, self._names = to_indexed_placeholders(sql)
        self._bound: Dict[str, Any] = {}
        self._result: Optional[CursorResult] = None
        self._rows: Optional[MappingResult] = None

    def bind(self, position: int, value: Any, column_type: ColumnType) -> None:
        if not 1 <= position <= len(self._names):
            raise IndexError(
                f"Bind position {position} out of range for {len(self._names)} placeholder(s)"
            )
        name = self._names[position - 1]
        self._bound[name] = bindparam(name, value=value, type_=sqlalchemy_type_for(column_type))

    def execute(self) -> None:
        missing = [name for name in self._names if name not in self._bound]
        if missing:
            raise ValueError(f"Unbound parameters: {', '.join(missing)}")

        statement = text(self.sql)
        if self._bound:
            statement = statement.bindparams(*self._bound.values())
        self._result = self._owner.connection.execute(statement)
        self._owner._remember(self._result)
        if self._result.returns_rows:
            self._rows = self._result.mappings()

    def fetch_row(self) -> Optional[Dict[str, Any]]:
        if self._result is None:
            raise RuntimeError("Statement has not been executed")
        if self._rows is None:
            return None
        row = self._rows.fetchone()
        return dict(row) if row is not None else None


class SQLAlchemyConnection:
    """
    Gateway connection backed by a SQLAlchemy ``Connection``.

    Attributes:
        connection: SQLAlchemy Connection. Caller owns transaction lifecycle.
    """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection
        self._last_result: Optional[CursorResult] = None

    def _remember(self, result: CursorResult) -> None:
        self._last_result = result

    def prepare(self, sql: str) -> SQLAlchemyStatement:
        return SQLAlchemyStatement(self, sql)

    def dialect_name(self) -> str:
        return self.connection.dialect.name

    def last_generated_key(self) -> Any:
        """
        Return the key generated by the most recent INSERT.

        Uses ``CursorResult.lastrowid`` (SQLite, MySQL). PostgreSQL has no
        usable lastrowid; the gateway reads the key from ``RETURNING`` there,
        and this method falls back to ``lastval()`` for other callers.
        """
        if self.dialect_name() == "postgresql":
            return self.connection.execute(text("SELECT lastval()")).scalar()
        if self._last_result is None:
            logger.warning("sqlalchemy_connection.last_generated_key.no_statement")
            return None
        return self._last_result.lastrowid
