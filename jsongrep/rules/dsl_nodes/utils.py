"""
DSL Utility Functions for the jsongrep specification format.

This module provides utility functions for working with DSL nodes:
- get_referenced_pointers: Extract all JSON pointers a query reads
- Serialization functions: Convert nodes back to the wire format
"""

from __future__ import annotations

from ..types import InternalInvariantError, ValueType
from .base import ScalarValue
from .condition import Equal, GreaterThan, LessThan, Match
from .boolean import AllCond, AnyCond, NotCond
from .query import RawQuery, AllQuery, AnyQuery, NotQuery, Query
from .types import Condition, QueryCondition


_COMPARISON_TAGS = {
    Equal: "eq",
    GreaterThan: "gt",
    LessThan: "lt",
}


# =============================================================================
# Reference Extraction
# =============================================================================

def get_referenced_pointers(node: Query | QueryCondition) -> list[str]:
    """
    Extract the JSON pointers read by a query, in first-use order.

    Args:
        node: Query or query condition to analyze.

    Returns:
        List of unique pointers.
    """
    pointers: list[str] = []

    def visit(n: QueryCondition) -> None:
        if isinstance(n, RawQuery):
            if n.pointer not in pointers:
                pointers.append(n.pointer)
        elif isinstance(n, (AllQuery, AnyQuery)):
            for child in n.children:
                visit(child)
        elif isinstance(n, NotQuery):
            visit(n.child)

    visit(node.root if isinstance(node, Query) else node)
    return pointers


# =============================================================================
# Serialization
# =============================================================================

def value_to_dict(value: ScalarValue) -> dict:
    """Serialize a ScalarValue to a Value document."""
    if value.value_type == ValueType.NULL:
        return {"type": "null"}
    if value.value_type == ValueType.BOOL:
        return {"type": "bool", "value": value.value}
    if value.value_type in (ValueType.INT, ValueType.FLOAT):
        return {"type": "number", "value": value.value}
    return {"type": "string", "value": value.value}


def condition_to_dict(cond: Condition) -> dict:
    """
    Serialize a condition tree to the wire format.

    The resulting dict can be dumped to JSON and parsed back
    by the dsl_parser module.
    """
    if isinstance(cond, (Equal, GreaterThan, LessThan)):
        return {"type": _COMPARISON_TAGS[type(cond)], "value": value_to_dict(cond.value)}

    elif isinstance(cond, Match):
        return {
            "type": "match",
            "value": value_to_dict(cond.value),
            "mtype": cond.mtype.value,
        }

    elif isinstance(cond, NotCond):
        return {"type": "not", "value": condition_to_dict(cond.child)}

    elif isinstance(cond, AllCond):
        return {"type": "and", "value": [condition_to_dict(c) for c in cond.children]}

    elif isinstance(cond, AnyCond):
        return {"type": "or", "value": [condition_to_dict(c) for c in cond.children]}

    raise InternalInvariantError(f"Unknown condition type: {type(cond).__name__}")


def query_condition_to_dict(node: QueryCondition) -> dict:
    """Serialize a query condition tree to the wire format."""
    if isinstance(node, RawQuery):
        return {
            "type": "raw",
            "pair": {"p": node.pointer, "cond": condition_to_dict(node.condition)},
        }

    elif isinstance(node, NotQuery):
        return {"type": "not", "pair": query_condition_to_dict(node.child)}

    elif isinstance(node, AllQuery):
        return {"type": "and", "pair": [query_condition_to_dict(c) for c in node.children]}

    elif isinstance(node, AnyQuery):
        return {"type": "or", "pair": [query_condition_to_dict(c) for c in node.children]}

    raise InternalInvariantError(f"Unknown query condition type: {type(node).__name__}")


def query_to_dict(query: Query) -> dict:
    """Serialize a Query to a query document."""
    return {"query": query_condition_to_dict(query.root)}


__all__ = [
    "get_referenced_pointers",
    "value_to_dict",
    "condition_to_dict",
    "query_condition_to_dict",
    "query_to_dict",
]
