"""
Connection contract consumed by the gateway.

The gateway never opens connections itself. It is handed an object that can
prepare a statement, bind positional values with a declared column type,
execute, fetch rows as mappings, report the last generated key and name its
dialect. ``table_gateway.io.connectors.sqlalchemy_connection`` provides the
implementation over a SQLAlchemy ``Connection``.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from table_gateway.sql.core.types import ColumnType


@runtime_checkable
class PreparedStatement(Protocol):
    """A statement handle returned by ``DaoConnection.prepare``."""

    def bind(self, position: int, value: Any, column_type: ColumnType) -> None:
        """Bind ``value`` to the 1-based placeholder ``position``."""
        ...

    def execute(self) -> None: ...

    def fetch_row(self) -> Optional[Dict[str, Any]]:
        """Return the next row as a column → value mapping, or None when exhausted."""
        ...


@runtime_checkable
class DaoConnection(Protocol):
    """An open database session usable for the duration of a gateway call."""

    def prepare(self, sql: str) -> PreparedStatement: ...

    def last_generated_key(self) -> Any: ...

    def dialect_name(self) -> str: ...
