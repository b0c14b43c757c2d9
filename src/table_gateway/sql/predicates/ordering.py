"""
ORDER BY compilation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from table_gateway.errors import QueryBuildError

from ..core.types import ColumnSchema
from ..dialects.base import AnsiDialect

CLAUSE_NAME = "orderBy"


class Direction(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, raw: Any) -> Optional["Direction"]:
        """Case-insensitive lookup; None when ``raw`` is not a direction."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().upper())
            except ValueError:
                return None
        return None


@dataclass(frozen=True)
class OrderSpec:
    """Sort by ``property``; ``direction`` defaults to ascending."""

    property: str
    direction: Union[Direction, str, None] = None


OrderBySpec = Union[OrderSpec, Mapping[str, Any]]


def _fields_of(spec: OrderBySpec, position: int) -> Tuple[Any, Any]:
    if isinstance(spec, OrderSpec):
        return spec.property, spec.direction
    if isinstance(spec, Mapping):
        return spec.get("property"), spec.get("direction")
    raise QueryBuildError(
        f"Order specification must be an OrderSpec or a mapping, got {type(spec).__name__}",
        clause=CLAUSE_NAME,
        position=position,
    )


def parse_order_spec(spec: OrderBySpec, position: int, schema: ColumnSchema) -> OrderSpec:
    """
    Validate one order specification.

    Raises:
        QueryBuildError: If the property is missing or unknown, or the
            direction is not asc/desc
    """
    prop, raw_direction = _fields_of(spec, position)

    if not prop:
        raise QueryBuildError(
            "Missing 'property' for orderBy", clause=CLAUSE_NAME, position=position
        )
    if prop not in schema:
        raise QueryBuildError(
            f"The property {prop!r} is not defined in the column schema",
            clause=CLAUSE_NAME,
            position=position,
        )
    if raw_direction is None:
        return OrderSpec(prop, Direction.ASC)

    direction = Direction.parse(raw_direction)
    if direction is None:
        raise QueryBuildError(
            f"Invalid 'direction' {raw_direction!r}", clause=CLAUSE_NAME, position=position
        )
    return OrderSpec(prop, direction)


def compile_order_by(
    order_by: Optional[Sequence[OrderBySpec]],
    schema: ColumnSchema,
    dialect: AnsiDialect,
) -> str:
    """
    Compile order specifications into an ORDER BY clause.

    Args:
        order_by: Order specifications, or None for "no ordering"
        schema: Column schema of the table
        dialect: Dialect used to quote identifiers

    Returns:
        ``ORDER BY "a" ASC, "b" DESC`` or an empty string

    Raises:
        QueryBuildError: If any specification is invalid
    """
    if not order_by:
        return ""

    terms = []
    for position, spec in enumerate(order_by):
        parsed = parse_order_spec(spec, position, schema)
        terms.append(f"{dialect.quote(parsed.property)} {parsed.direction.value}")
    return "ORDER BY " + ", ".join(terms)
