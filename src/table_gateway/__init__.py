"""
table_gateway: parameterized CRUD SQL for a single relational table.

Usage:
    >>> from sqlalchemy import create_engine
    >>> from table_gateway import SQLAlchemyConnection, TableGateway
    >>> engine = create_engine("sqlite://")
    >>> with engine.connect() as conn:
    ...     users = TableGateway(
    ...         SQLAlchemyConnection(conn),
    ...         "users",
    ...         {"id": "integer", "name": "string"},
    ...         {"key": "id"},
    ...     )
"""

from table_gateway.dao import DaoConfiguration, DeleteMethod, TableGateway
from table_gateway.errors import (
    ConfigurationError,
    DaoError,
    MissingKeyError,
    QueryBuildError,
)
from table_gateway.io.connectors import SQLAlchemyConnection
from table_gateway.sql import ColumnType, Direction, Filter, Operator, OrderSpec

__version__ = "0.1.0"

__all__ = [
    "ColumnType",
    "ConfigurationError",
    "DaoConfiguration",
    "DaoError",
    "DeleteMethod",
    "Direction",
    "Filter",
    "MissingKeyError",
    "Operator",
    "OrderSpec",
    "QueryBuildError",
    "SQLAlchemyConnection",
    "TableGateway",
]
