"""
DSL Condition Nodes for the jsongrep specification format.

This module defines the leaf conditions applied to a single scalar value:
- Equal: value == literal
- GreaterThan: value > literal
- LessThan: value < literal
- Match: string matching (substring or regex)
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import MatchType, ScalarValue


# =============================================================================
# Comparison Nodes
# =============================================================================

@dataclass(frozen=True)
class Equal:
    """
    Passes if the tested value equals the literal.

    Both operands must be the same variant (TYPE_MISMATCH otherwise).

    Examples:
        Equal(ScalarValue.from_literal(1))
        Equal(ScalarValue.null())
    """
    value: ScalarValue

    def __repr__(self) -> str:
        return f"Eq({self.value!r})"


@dataclass(frozen=True)
class GreaterThan:
    """
    Passes if the tested value is greater than the literal.

    Bool: false < true. Int/Float: numeric. String: code point order.
    """
    value: ScalarValue

    def __repr__(self) -> str:
        return f"Gt({self.value!r})"


@dataclass(frozen=True)
class LessThan:
    """
    Passes if the tested value is less than the literal.

    Strict mirror of GreaterThan.
    """
    value: ScalarValue

    def __repr__(self) -> str:
        return f"Lt({self.value!r})"


# =============================================================================
# Match Node
# =============================================================================

@dataclass(frozen=True)
class Match:
    """
    String matching against the tested value.

    Attributes:
        value: Pattern literal (must be a String)
        mtype: CONTAIN (substring) or REGEX

    Examples:
        # "white dwarf" contains "dwarf"
        Match(ScalarValue.from_literal("dwarf"), MatchType.CONTAIN)

        # /s matches [sS]irius
        Match(ScalarValue.from_literal("[sS]irius"), MatchType.REGEX)
    """
    value: ScalarValue
    mtype: MatchType

    def __repr__(self) -> str:
        return f"Match({self.mtype.value}, {self.value!r})"


__all__ = [
    "Equal",
    "GreaterThan",
    "LessThan",
    "Match",
]
