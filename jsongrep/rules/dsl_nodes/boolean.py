"""
DSL Boolean Condition Nodes for the jsongrep specification format.

This module defines boolean nodes over a single scalar value:
- AllCond: AND (all children must be true)
- AnyCond: OR (any child must be true)
- NotCond: NOT (negates child)

Empty AllCond/AnyCond are accepted at construction time; evaluating them
fails with NO_CHILDREN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Condition


# =============================================================================
# Boolean Condition Nodes
# =============================================================================

@dataclass(frozen=True)
class AllCond:
    """
    AND condition: All children must be true.

    Short-circuit evaluation: first false or first error stops evaluation.

    Attributes:
        children: Tuple of child conditions

    Examples:
        AllCond((Gt(Int(0)), Lt(Int(10))))  # 0 < value < 10
    """
    children: tuple["Condition", ...]

    def __repr__(self) -> str:
        children_str = ", ".join(repr(c) for c in self.children)
        return f"All({children_str})"


@dataclass(frozen=True)
class AnyCond:
    """
    OR condition: Any child must be true.

    Short-circuit evaluation: first true or first error stops evaluation.

    Attributes:
        children: Tuple of child conditions
    """
    children: tuple["Condition", ...]

    def __repr__(self) -> str:
        children_str = ", ".join(repr(c) for c in self.children)
        return f"Any({children_str})"


@dataclass(frozen=True)
class NotCond:
    """
    NOT condition: Negates the child condition.

    Errors from the child propagate unchanged.
    """
    child: "Condition"

    def __repr__(self) -> str:
        return f"Not({self.child!r})"


__all__ = [
    "AllCond",
    "AnyCond",
    "NotCond",
]
