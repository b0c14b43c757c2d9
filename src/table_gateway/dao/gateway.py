"""
Table gateway: CRUD operations over a single table.

A ``TableGateway`` is built once from a connection, a table name, a column
schema and a configuration bag. Its configuration is validated at
construction and never changes; every operation compiles its SQL, prepares
one statement on the connection, binds the values in placeholder order with
their declared column types, executes and shapes the result.

Example:
    >>> gateway = TableGateway(
    ...     connection,
    ...     "users",
    ...     {"id": "integer", "name": "string", "active": "string"},
    ...     {"key": "id", "deleteMethod": "deactivate", "deactivateColumn": "active"},
    ... )
    >>> new_id = gateway.create({"name": "x"})
    >>> gateway.delete(new_id)
    True
    >>> gateway.exists(new_id)
    False
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from table_gateway.config.settings import get_settings
from table_gateway.errors import MissingKeyError
from table_gateway.sql.core.statement import Statement
from table_gateway.sql.core.types import ColumnSchema, ColumnType
from table_gateway.sql.dialects import AnsiDialect, get_dialect
from table_gateway.sql.operations import (
    ColumnValue,
    DeleteBuilder,
    InsertBuilder,
    SelectBuilder,
    UpdateBuilder,
)
from table_gateway.sql.predicates import (
    Filter,
    FilterSpec,
    Operator,
    OrderBySpec,
    compile_filters,
    compile_order_by,
)
from table_gateway.utils.logging import get_logger

from .configuration import DaoConfiguration, build_configuration
from .connection import DaoConnection, PreparedStatement

logger = get_logger(__name__)

Record = Dict[str, Any]


class TableGateway:
    """
    Data access object for one table.

    Attributes:
        table: Table name (may be schema-qualified, e.g. ``"app.users"``)
        columns: Immutable column schema
        configuration: Validated, frozen configuration
        dialect: Dialect resolved once from the connection
    """

    def __init__(
        self,
        connection: DaoConnection,
        table: str,
        columns: Union[ColumnSchema, Mapping[str, Any]],
        configuration: Optional[Mapping[str, Any]],
    ) -> None:
        """
        Initialize the gateway.

        Args:
            connection: Open connection. Caller owns transaction lifecycle.
            table: Table name
            columns: Column name → declared type (ColumnType or type name)
            configuration: Configuration bag, see ``table_gateway.dao.configuration``

        Raises:
            ConfigurationError: If the schema or configuration is invalid
        """
        self._connection = connection
        self.table = table
        self.columns = columns if isinstance(columns, ColumnSchema) else ColumnSchema(columns)
        self.configuration: DaoConfiguration = build_configuration(self.columns, configuration)
        self.dialect: AnsiDialect = get_dialect(connection.dialect_name())

        self._select = SelectBuilder(self.dialect)
        self._insert = InsertBuilder(self.dialect)
        self._update = UpdateBuilder(self.dialect)
        self._delete = DeleteBuilder(self.dialect)
        self._log_sql = get_settings().log_sql
        self._logger = logger.bind(table=table, dialect=self.dialect.name)

    @classmethod
    def from_definition(cls, connection: DaoConnection, definition: Any) -> "TableGateway":
        """
        Build a gateway from a loaded DAO definition.

        Args:
            connection: Open connection
            definition: ``DaoDefinition`` from ``table_gateway.config.dao_loader``
        """
        return cls(
            connection,
            definition.table,
            definition.columns,
            definition.configuration,
        )

    # ------------------------------------------------------------------ helpers

    @property
    def key(self) -> str:
        return self.configuration.key

    @property
    def _key_type(self) -> ColumnType:
        return self.columns[self.key]

    def escape(self, name: str) -> str:
        """Quote a table/column name for this gateway's dialect."""
        return self.dialect.quote(name)

    def _run(self, operation: str, statement: Statement) -> PreparedStatement:
        if self._log_sql:
            self._logger.debug(
                f"dao.{operation}.sql",
                sql=statement.sql,
                parameter_count=len(statement.parameters),
            )
        prepared = self._connection.prepare(statement.sql)
        for parameter in statement.parameters:
            prepared.bind(parameter.position, parameter.value, parameter.column_type)
        prepared.execute()
        return prepared

    def _flag_value(self, value: int) -> Any:
        """Sentinel as a bindable value matching the flag column type."""
        column_type = self.columns[self.configuration.deactivate_column]
        if column_type is ColumnType.STRING:
            return str(value)
        if column_type is ColumnType.BOOLEAN:
            return bool(value)
        return value

    # --------------------------------------------------------------- operations

    def count(self, filters: Optional[Sequence[FilterSpec]] = None) -> int:
        """
        Count rows matching ``filters``.

        Args:
            filters: Filter list, or None. With None and soft deletes only
                active rows are counted; a non-null list is used as given.

        Returns:
            Number of matching rows

        Raises:
            QueryBuildError: If a filter is invalid
        """
        where = compile_filters(
            filters,
            self.columns,
            self.dialect,
            deactivate_column=self._soft_delete_column(),
            active_value=self.configuration.active_value,
        )
        prepared = self._run("count", self._select.count(self.table, where))
        row = prepared.fetch_row()
        if not row:
            return 0
        return int(next(iter(row.values())))

    def create(self, record: Mapping[str, Any]) -> Any:
        """
        Insert a row.

        Only schema columns present in ``record`` are inserted; with an
        autogenerated key, any key value in ``record`` is ignored. A record
        with no insertable column inserts a row of column defaults.

        Args:
            record: Property → value mapping

        Returns:
            The generated key when the key is autogenerated, else the supplied key

        Raises:
            MissingKeyError: If the key is caller-supplied and absent
        """
        config = self.configuration
        if not config.key_is_autogenerated and record.get(self.key) is None:
            raise MissingKeyError(self.key, "create")

        columns: List[ColumnValue] = [
            (name, record[name], ctype)
            for name, ctype in self.columns.items()
            if name in record and not (name == self.key and config.key_is_autogenerated)
        ]
        returning = (
            self.key
            if config.key_is_autogenerated and self.dialect.supports_returning
            else None
        )
        prepared = self._run(
            "create", self._insert.insert(self.table, columns, returning=returning)
        )

        if returning:
            row = prepared.fetch_row()
            new_key = row[self.key] if row else None
        elif config.key_is_autogenerated:
            new_key = self._connection.last_generated_key()
        else:
            new_key = record[self.key]
        self._logger.debug("dao.create.completed", column_count=len(columns))
        return new_key

    def get(self, key: Any) -> Optional[Record]:
        """
        Fetch one row by key.

        Returns:
            The row, or None when no row has this key
        """
        statement = self._select.by_key(self.table, self.key, key, self._key_type)
        return self._run("get", statement).fetch_row()

    def list(
        self,
        keyed: bool = True,
        filters: Optional[Sequence[FilterSpec]] = None,
        order_by: Optional[Sequence[OrderBySpec]] = None,
    ) -> Union[Dict[Any, Record], List[Record]]:
        """
        List rows.

        Args:
            keyed: Return a dict keyed by each row's key value (True) or a
                list in query order (False)
            filters: Filter list, or None (see ``count``)
            order_by: Order specifications, or None

        Returns:
            Dict of key → row, or list of rows

        Raises:
            QueryBuildError: If a filter or order specification is invalid
        """
        where = compile_filters(
            filters,
            self.columns,
            self.dialect,
            deactivate_column=self._soft_delete_column(),
            active_value=self.configuration.active_value,
        )
        ordering = compile_order_by(order_by, self.columns, self.dialect)
        prepared = self._run("list", self._select.select(self.table, where, ordering))

        rows: List[Record] = []
        row = prepared.fetch_row()
        while row is not None:
            rows.append(row)
            row = prepared.fetch_row()

        self._logger.debug("dao.list.completed", row_count=len(rows), keyed=keyed)
        if keyed:
            return {row[self.key]: row for row in rows}
        return rows

    def update(self, record: Mapping[str, Any]) -> bool:
        """
        Update the columns present in ``record`` on the row with its key.

        A record holding only the key changes nothing.

        Raises:
            MissingKeyError: If the key is absent from ``record``
        """
        key_value = record.get(self.key)
        if key_value is None:
            raise MissingKeyError(self.key, "update")

        assignments: List[ColumnValue] = [
            (name, record[name], ctype)
            for name, ctype in self.columns.items()
            if name != self.key and name in record
        ]
        if not assignments:
            self._logger.info("dao.update.skipped", reason="no_columns")
            return True

        statement = self._update.update(
            self.table, assignments, self.key, key_value, self._key_type
        )
        self._run("update", statement)
        return True

    def delete(self, key: Any) -> bool:
        """
        Delete the row with ``key``: physically, or by setting the flag
        column to the inactive sentinel when the gateway soft-deletes.
        """
        config = self.configuration
        if config.soft_deletes:
            flag_column = config.deactivate_column
            literal = self.dialect.flag_literal(
                config.inactive_value, self.columns[flag_column]
            )
            statement = self._update.set_flag(
                self.table, flag_column, literal, self.key, key, self._key_type
            )
        else:
            statement = self._delete.delete(self.table, self.key, key, self._key_type)
        self._run("delete", statement)
        self._logger.debug("dao.delete.completed", method=config.delete_method.value)
        return True

    # ``del`` is reserved in Python
    del_ = delete

    def exists(self, key: Any) -> bool:
        """Whether an (active, when soft-deleting) row with ``key`` exists."""
        filters = [Filter(self.key, Operator.EQ, key)]
        if self.configuration.soft_deletes:
            filters.append(
                Filter(
                    self.configuration.deactivate_column,
                    Operator.EQ,
                    self._flag_value(self.configuration.active_value),
                )
            )
        return self.count(filters) > 0

    def update_key(self, old_key: Any, new_key: Any) -> bool:
        """Change the key of the row ``old_key`` to ``new_key``."""
        statement = self._update.update_key(
            self.table, self.key, old_key, new_key, self._key_type
        )
        self._run("update_key", statement)
        return True

    def _soft_delete_column(self) -> Optional[str]:
        if self.configuration.soft_deletes:
            return self.configuration.deactivate_column
        return None
