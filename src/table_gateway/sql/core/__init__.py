"""Core SQL utilities package."""

from .identifier import quote_identifier
from .parameters import (
    BoundParameter,
    bind_positional,
    build_indexed_params,
    to_indexed_placeholders,
)
from .statement import Clause, Statement
from .types import ColumnSchema, ColumnType

__all__ = [
    "quote_identifier",
    "BoundParameter",
    "bind_positional",
    "build_indexed_params",
    "to_indexed_placeholders",
    "Clause",
    "Statement",
    "ColumnSchema",
    "ColumnType",
]
