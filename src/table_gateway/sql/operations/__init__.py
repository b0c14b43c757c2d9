"""Per-operation SQL statement builders."""

from .delete import DeleteBuilder
from .insert import ColumnValue, InsertBuilder
from .select import SelectBuilder
from .update import UpdateBuilder

__all__ = [
    "ColumnValue",
    "DeleteBuilder",
    "InsertBuilder",
    "SelectBuilder",
    "UpdateBuilder",
]
