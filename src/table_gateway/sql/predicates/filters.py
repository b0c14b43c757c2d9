"""
Filter compilation: declarative filters to a parameterized WHERE clause.

A filter is ``{property, operator, value}``. Filters are validated in list
order and compiled to ``"<column>" <operator> ?`` (or ``"<column>" IS [NOT]
NULL`` without a placeholder), joined with ``AND``. Values are bound in
filter order with the declared type of the filtered column.

When no filter list is given and the gateway soft-deletes, an implicit
``"<flag>" = <active>`` condition is emitted with the sentinel inlined as a
literal. A non-null filter list never gets that condition added; callers
that want only active rows must include it themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from table_gateway.errors import QueryBuildError

from ..core.parameters import bind_positional
from ..core.statement import Clause
from ..core.types import ColumnSchema, ColumnType
from ..dialects.base import AnsiDialect

CLAUSE_NAME = "filter"


class Operator(str, Enum):
    """Comparison operators accepted in filters."""

    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    NE = "<>"
    NE_ALT = "!="
    LIKE = "LIKE"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"

    @property
    def takes_value(self) -> bool:
        return self not in (Operator.IS_NULL, Operator.IS_NOT_NULL)

    @classmethod
    def parse(cls, raw: Any) -> Optional["Operator"]:
        """Return the matching operator, or None when ``raw`` is not one."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        normalized = " ".join(raw.split()).upper()
        for member in cls:
            if member.value == normalized:
                return member
        return None


@dataclass(frozen=True)
class Filter:
    """
    A single filter condition.

    Example:
        >>> Filter("name", Operator.LIKE, "a%")
        Filter(property='name', operator=<Operator.LIKE: 'LIKE'>, value='a%')
    """

    property: str
    operator: Union[Operator, str]
    value: Any = None


FilterSpec = Union[Filter, Mapping[str, Any]]


def _fields_of(spec: FilterSpec, position: int) -> Tuple[Any, Any, Any]:
    if isinstance(spec, Filter):
        return spec.property, spec.operator, spec.value
    if isinstance(spec, Mapping):
        return spec.get("property"), spec.get("operator"), spec.get("value")
    raise QueryBuildError(
        f"Filter must be a Filter or a mapping, got {type(spec).__name__}",
        clause=CLAUSE_NAME,
        position=position,
    )


def parse_filter(spec: FilterSpec, position: int, schema: ColumnSchema) -> Filter:
    """
    Validate one filter specification.

    Checks run in this order: operator present, operator legal, property
    present, property known, value present when the operator needs one.
    A ``None`` value counts as absent.

    Args:
        spec: Filter instance or mapping with property/operator/value keys
        position: Index of the filter in its list (for error messages)
        schema: Column schema of the table

    Returns:
        Filter with a resolved Operator; the value is dropped for NULL checks

    Raises:
        QueryBuildError: If the filter is invalid
    """
    prop, raw_operator, value = _fields_of(spec, position)

    if raw_operator is None:
        raise QueryBuildError(
            "Operator not specified for filter", clause=CLAUSE_NAME, position=position
        )
    operator = Operator.parse(raw_operator)
    if operator is None:
        raise QueryBuildError(
            f"Invalid or unimplemented operator {raw_operator!r}",
            clause=CLAUSE_NAME,
            position=position,
        )
    if not prop:
        raise QueryBuildError(
            "Missing 'property' for filter", clause=CLAUSE_NAME, position=position
        )
    if prop not in schema:
        raise QueryBuildError(
            f"The property {prop!r} is not defined in the column schema",
            clause=CLAUSE_NAME,
            position=position,
        )
    if operator.takes_value and value is None:
        raise QueryBuildError(
            "Missing 'value' for filter", clause=CLAUSE_NAME, position=position
        )

    return Filter(prop, operator, value if operator.takes_value else None)


def compile_filters(
    filters: Optional[Sequence[FilterSpec]],
    schema: ColumnSchema,
    dialect: AnsiDialect,
    deactivate_column: Optional[str] = None,
    active_value: int = 1,
) -> Clause:
    """
    Compile a filter list into a WHERE clause and its bound parameters.

    Args:
        filters: Filter specifications, or None for "no filtering"
        schema: Column schema of the table
        dialect: Dialect used to quote identifiers
        deactivate_column: Soft-delete flag column; only set when the gateway
            deletes by deactivation
        active_value: Sentinel marking an active row

    Returns:
        Clause with text ``WHERE ...`` (empty when nothing to filter) and the
        parameters numbered in placeholder order

    Raises:
        QueryBuildError: If any filter is invalid

    Examples:
        >>> schema = ColumnSchema({"id": "integer", "active": "string"})
        >>> compile_filters(None, schema, AnsiDialect(), deactivate_column="active").text
        'WHERE "active" = \\'1\\''
    """
    if filters is None:
        if deactivate_column is None:
            return Clause()
        literal = dialect.flag_literal(active_value, schema[deactivate_column])
        return Clause(text=f"WHERE {dialect.quote(deactivate_column)} = {literal}")

    conditions = []
    values: list[Tuple[Any, ColumnType]] = []
    for position, spec in enumerate(filters):
        parsed = parse_filter(spec, position, schema)
        column = dialect.quote(parsed.property)
        if parsed.operator.takes_value:
            conditions.append(f"{column} {parsed.operator.value} {dialect.placeholder}")
            values.append((parsed.value, schema[parsed.property]))
        else:
            conditions.append(f"{column} {parsed.operator.value}")

    if not conditions:
        return Clause()
    return Clause(
        text="WHERE " + " AND ".join(conditions),
        parameters=bind_positional(values),
    )
