"""
DSL Type Aliases for the jsongrep specification format.

This module defines type aliases used across the DSL modules.
Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from .condition import Equal, GreaterThan, LessThan, Match
from .boolean import AllCond, AnyCond, NotCond
from .query import RawQuery, AllQuery, AnyQuery, NotQuery


# =============================================================================
# Type Aliases
# =============================================================================

# Comparison nodes carrying a scalar literal
Comparison = Equal | GreaterThan | LessThan

# All node types that can appear in a condition tree (scalar domain)
Condition = Equal | GreaterThan | LessThan | Match | AllCond | AnyCond | NotCond

# All node types that can appear in a query tree (document domain)
QueryCondition = RawQuery | AllQuery | AnyQuery | NotQuery


__all__ = [
    "Comparison",
    "Condition",
    "QueryCondition",
]
