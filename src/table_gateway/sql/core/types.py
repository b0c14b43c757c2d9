"""
Column type declarations and the immutable column schema.

A column schema maps each property (column) name of a table to its declared
scalar type. The declared type drives parameter binding and the rendering of
the soft-delete flag literal.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union

from table_gateway.errors import ConfigurationError


class ColumnType(str, Enum):
    """Declared scalar type of a column."""

    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"
    BINARY = "binary"
    NULL = "null"

    @classmethod
    def parse(cls, value: Union["ColumnType", str], column: str = "") -> "ColumnType":
        """
        Resolve a declared type from an enum member or its name.

        Args:
            value: ColumnType member or case-insensitive type name ("int" and
                "str" are accepted as aliases)
            column: Column name, used in the error message

        Returns:
            ColumnType member

        Raises:
            ConfigurationError: If the type name is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            name = _TYPE_ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        raise ConfigurationError(
            f"Invalid column type {value!r} for column '{column}'. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )


_TYPE_ALIASES = {
    "int": "integer",
    "str": "string",
    "text": "string",
    "bool": "boolean",
    "real": "float",
    "blob": "binary",
    "lob": "binary",
}


class ColumnSchema(Mapping[str, ColumnType]):
    """
    Ordered, read-only mapping of column name to declared type.

    Example:
        >>> schema = ColumnSchema({"id": "integer", "name": "string"})
        >>> schema["id"]
        <ColumnType.INTEGER: 'integer'>
        >>> list(schema)
        ['id', 'name']
    """

    def __init__(self, columns: Mapping[str, Any]):
        if not isinstance(columns, Mapping) or not columns:
            raise ConfigurationError("Column schema must be a non-empty mapping")

        parsed = {}
        for name, declared in columns.items():
            if not isinstance(name, str) or not name:
                raise ConfigurationError(
                    f"Column names must be non-empty strings, got {name!r}"
                )
            parsed[name] = ColumnType.parse(declared, column=name)
        self._columns = MappingProxyType(parsed)

    def __getitem__(self, name: str) -> ColumnType:
        return self._columns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v.value}" for k, v in self._columns.items())
        return f"ColumnSchema({body})"
