"""
SQL parameter binding utilities.

Statements are built with positional ``?`` placeholders. Each placeholder is
paired with a ``BoundParameter`` carrying its 1-based position, the value and
the declared column type. Drivers that need named parameters (SQLAlchemy
``text()``) get indexed names (p_0, p_1, ...) through
``to_indexed_placeholders``.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from .types import ColumnType

POSITIONAL_PLACEHOLDER = "?"

# Characters that open a quoted section in generated SQL
_QUOTES = {'"', "`", "'"}


@dataclass(frozen=True)
class BoundParameter:
    """A value bound to a positional placeholder with its declared type."""

    position: int
    value: Any
    column_type: ColumnType


def bind_positional(values: Iterable[Tuple[Any, ColumnType]]) -> Tuple[BoundParameter, ...]:
    """
    Number (value, type) pairs in placeholder order, starting at 1.

    Examples:
        >>> bind_positional([("x", ColumnType.STRING)])[0].position
        1
    """
    return tuple(
        BoundParameter(position=i, value=value, column_type=column_type)
        for i, (value, column_type) in enumerate(values, start=1)
    )


def build_indexed_params(count: int) -> List[str]:
    """
    Build indexed parameter names for a statement with ``count`` placeholders.

    Examples:
        >>> build_indexed_params(2)
        ['p_0', 'p_1']
    """
    return [f"p_{i}" for i in range(count)]


def to_indexed_placeholders(sql: str) -> Tuple[str, List[str]]:
    """
    Rewrite positional ``?`` placeholders into named ``:p_N`` placeholders.

    Question marks inside quoted identifiers or string literals are left
    untouched.

    Args:
        sql: SQL text with positional placeholders

    Returns:
        Tuple of (rewritten SQL, parameter names in placeholder order)

    Examples:
        >>> to_indexed_placeholders('SELECT * FROM "t" WHERE "a" = ? AND "b" = ?')
        ('SELECT * FROM "t" WHERE "a" = :p_0 AND "b" = :p_1', ['p_0', 'p_1'])
    """
    out: List[str] = []
    count = 0
    quote = None
    for ch in sql:
        if quote is not None:
            if ch == quote:
                quote = None
            out.append(ch)
        elif ch in _QUOTES:
            quote = ch
            out.append(ch)
        elif ch == POSITIONAL_PLACEHOLDER:
            out.append(f":p_{count}")
            count += 1
        else:
            out.append(ch)
    return "".join(out), build_indexed_params(count)
