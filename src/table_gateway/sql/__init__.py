"""
SQL module for table gateway statement generation.

This module provides the building blocks used by the gateway: identifier
quoting per dialect, positional parameter binding, filter and order-by
compilation, and per-operation statement builders.
"""

from .core import (
    BoundParameter,
    Clause,
    ColumnSchema,
    ColumnType,
    Statement,
    quote_identifier,
)
from .dialects import AnsiDialect, MySQLDialect, PostgreSQLDialect, SQLiteDialect, get_dialect
from .operations import DeleteBuilder, InsertBuilder, SelectBuilder, UpdateBuilder
from .predicates import (
    Direction,
    Filter,
    Operator,
    OrderSpec,
    compile_filters,
    compile_order_by,
)

__all__ = [
    "BoundParameter",
    "Clause",
    "ColumnSchema",
    "ColumnType",
    "Statement",
    "quote_identifier",
    "AnsiDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "get_dialect",
    "DeleteBuilder",
    "InsertBuilder",
    "SelectBuilder",
    "UpdateBuilder",
    "Direction",
    "Filter",
    "Operator",
    "OrderSpec",
    "compile_filters",
    "compile_order_by",
]
