"""
DSL Node Types for the jsongrep specification format.

This module defines the node types a query document decodes into.
Nodes are frozen dataclasses for immutability.

Node Categories:
- Value nodes: ScalarValue, MatchType
- Condition nodes (scalar domain): Equal, GreaterThan, LessThan, Match
- Boolean condition nodes: AllCond, AnyCond, NotCond
- Query nodes (document domain): RawQuery, AllQuery, AnyQuery, NotQuery, Query

Type Hierarchy:
    Condition = Equal | GreaterThan | LessThan | Match | AllCond | AnyCond | NotCond
    QueryCondition = RawQuery | AllQuery | AnyQuery | NotQuery

Usage:
    # /i > 10 and /s contains "dwarf"
    query = Query(AllQuery((
        RawQuery("/i", GreaterThan(ScalarValue.from_literal(10))),
        RawQuery("/s", Match(ScalarValue.from_literal("dwarf"), MatchType.CONTAIN)),
    )))
"""

# Constants
from .constants import (
    VALUE_TYPES,
    COMPARISON_OPERATORS,
    MATCH_OPERATOR,
    BOOLEAN_OPERATORS,
    CONDITION_TYPES,
    RAW_QUERY,
    QUERY_TYPES,
    MATCH_TYPES,
    SORT_ORDERS,
    DEFAULT_SORT_ORDER,
)

# Base value nodes
from .base import (
    ScalarValue,
    MatchType,
)

# Condition nodes
from .condition import (
    Equal,
    GreaterThan,
    LessThan,
    Match,
)

# Boolean condition nodes
from .boolean import (
    AllCond,
    AnyCond,
    NotCond,
)

# Query nodes
from .query import (
    RawQuery,
    AllQuery,
    AnyQuery,
    NotQuery,
    Query,
)

# Type aliases
from .types import Comparison, Condition, QueryCondition

# Utility functions
from .utils import (
    get_referenced_pointers,
    value_to_dict,
    condition_to_dict,
    query_condition_to_dict,
    query_to_dict,
)


__all__ = [
    # Constants
    "VALUE_TYPES",
    "COMPARISON_OPERATORS",
    "MATCH_OPERATOR",
    "BOOLEAN_OPERATORS",
    "CONDITION_TYPES",
    "RAW_QUERY",
    "QUERY_TYPES",
    "MATCH_TYPES",
    "SORT_ORDERS",
    "DEFAULT_SORT_ORDER",
    # Base value nodes
    "ScalarValue",
    "MatchType",
    # Condition nodes
    "Equal",
    "GreaterThan",
    "LessThan",
    "Match",
    # Boolean condition nodes
    "AllCond",
    "AnyCond",
    "NotCond",
    # Query nodes
    "RawQuery",
    "AllQuery",
    "AnyQuery",
    "NotQuery",
    "Query",
    # Type aliases
    "Comparison",
    "Condition",
    "QueryCondition",
    # Utility functions
    "get_referenced_pointers",
    "value_to_dict",
    "condition_to_dict",
    "query_condition_to_dict",
    "query_to_dict",
]
