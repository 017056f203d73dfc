"""
DSL Constants for the jsongrep specification format.

This module defines the tag values of the specification wire format:
- Value tags
- Condition tags (comparison, match, boolean)
- Query condition tags
- Match types and sort orders
"""

from __future__ import annotations

# =============================================================================
# Value Tags
# =============================================================================

VALUE_TYPES = frozenset({
    "null",         # {"type": "null"}
    "bool",         # {"type": "bool", "value": true}
    "number",       # {"type": "number", "value": 1.5}
    "string",       # {"type": "string", "value": "sirius"}
})

# =============================================================================
# Condition Tags
# =============================================================================

COMPARISON_OPERATORS = frozenset({
    "eq",           # Equal: value == literal
    "gt",           # Greater than: value > literal
    "lt",           # Less than: value < literal
})

MATCH_OPERATOR = "match"

BOOLEAN_OPERATORS = frozenset({
    "not",
    "and",
    "or",
})

CONDITION_TYPES = COMPARISON_OPERATORS | {MATCH_OPERATOR} | BOOLEAN_OPERATORS

# =============================================================================
# Query Condition Tags
# =============================================================================

RAW_QUERY = "raw"

QUERY_TYPES = frozenset({RAW_QUERY}) | BOOLEAN_OPERATORS

# =============================================================================
# Match Types / Sort Orders
# =============================================================================

MATCH_TYPES = frozenset({
    "contain",      # Substring containment
    "regex",        # Regular expression search
})

SORT_ORDERS = frozenset({
    "asc",
    "desc",
})

DEFAULT_SORT_ORDER = "asc"


__all__ = [
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
]
