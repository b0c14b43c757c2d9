"""Predicate (WHERE) and ORDER BY compilers."""

from .filters import Filter, FilterSpec, Operator, compile_filters, parse_filter
from .ordering import Direction, OrderBySpec, OrderSpec, compile_order_by, parse_order_spec

__all__ = [
    "Filter",
    "FilterSpec",
    "Operator",
    "compile_filters",
    "parse_filter",
    "Direction",
    "OrderBySpec",
    "OrderSpec",
    "compile_order_by",
    "parse_order_spec",
]
