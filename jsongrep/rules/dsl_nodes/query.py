"""
DSL Query Nodes for the jsongrep specification format.

This module defines nodes evaluated against whole documents:
- RawQuery: Extracts a scalar at a JSON pointer and applies a Condition
- AllQuery / AnyQuery / NotQuery: Boolean combinators over documents
- Query: Top-level owner of one query condition tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Condition, QueryCondition


# =============================================================================
# Leaf Query Node
# =============================================================================

@dataclass(frozen=True)
class RawQuery:
    """
    Test the value at a JSON pointer.

    Attributes:
        pointer: JSON pointer into the document (e.g. "/d/i")
        condition: Condition applied to the extracted scalar

    Examples:
        # /s matches [sS]irius
        RawQuery(
            pointer="/s",
            condition=Match(ScalarValue.from_literal("[sS]irius"), MatchType.REGEX),
        )
    """
    pointer: str
    condition: "Condition"

    def __repr__(self) -> str:
        return f"Raw({self.pointer!r}, {self.condition!r})"


# =============================================================================
# Boolean Query Nodes
# =============================================================================

@dataclass(frozen=True)
class AllQuery:
    """AND over documents. Short-circuits on first false or error."""
    children: tuple["QueryCondition", ...]

    def __repr__(self) -> str:
        children_str = ", ".join(repr(c) for c in self.children)
        return f"All({children_str})"


@dataclass(frozen=True)
class AnyQuery:
    """OR over documents. Short-circuits on first true or error."""
    children: tuple["QueryCondition", ...]

    def __repr__(self) -> str:
        children_str = ", ".join(repr(c) for c in self.children)
        return f"Any({children_str})"


@dataclass(frozen=True)
class NotQuery:
    """NOT over documents. Errors propagate unchanged."""
    child: "QueryCondition"

    def __repr__(self) -> str:
        return f"Not({self.child!r})"


# =============================================================================
# Top-level Query
# =============================================================================

@dataclass(frozen=True)
class Query:
    """
    A parsed query document: {"query": <QueryCondition>}.

    Attributes:
        root: The root query condition
    """
    root: "QueryCondition"

    def __repr__(self) -> str:
        return f"Query({self.root!r})"


__all__ = [
    "RawQuery",
    "AllQuery",
    "AnyQuery",
    "NotQuery",
    "Query",
]
