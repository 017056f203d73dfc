"""
DSL Base Node Types for the jsongrep specification format.

This module defines the foundational node types:
- ScalarValue: Typed scalar (literal from the specification, or a value
  extracted from a document)
- MatchType: String matching strategy for Match conditions
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..types import ValueType


# =============================================================================
# Value Nodes
# =============================================================================

@dataclass(frozen=True, eq=False)
class ScalarValue:
    """
    A typed scalar value: Null, Bool, Int, Float or String.

    Attributes:
        value: The Python value (None, bool, int, float or str)
        value_type: Variant of the value

    Equality is same-variant only. Floats are equal when
    abs(abs(x) - abs(y)) <= machine epsilon, so -5.0 == 5.0.

    Examples:
        ScalarValue.from_literal(50)        # Int(50)
        ScalarValue.from_literal(1.5)       # Float(1.5)
        ScalarValue.from_json("sirius")     # String('sirius')
    """
    value: None | bool | int | float | str
    value_type: ValueType

    @classmethod
    def null(cls) -> "ScalarValue":
        return cls(value=None, value_type=ValueType.NULL)

    @classmethod
    def from_json(cls, value: Any) -> "ScalarValue | None":
        """
        Classify a decoded document value.

        JSON integers decode to int and become Int; every other number
        becomes Float.

        Returns:
            ScalarValue, or None for arrays and objects
        """
        value_type = ValueType.from_value(value)
        if value_type is None:
            return None
        return cls(value=value, value_type=value_type)

    @classmethod
    def from_literal(cls, value: Any) -> "ScalarValue":
        """
        Classify a literal from the specification.

        Numbers with no fractional part become Int, the rest Float.

        Raises:
            ValueError: If the literal is an array or object
        """
        if isinstance(value, float) and value.is_integer():
            return cls(value=int(value), value_type=ValueType.INT)
        scalar = cls.from_json(value)
        if scalar is None:
            raise ValueError(
                f"ScalarValue: literal must be a scalar, got {type(value).__name__}"
            )
        return scalar

    def same_variant(self, other: "ScalarValue") -> bool:
        return self.value_type == other.value_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        if self.value_type != other.value_type:
            return False
        if self.value_type == ValueType.FLOAT:
            return abs(abs(self.value) - abs(other.value)) <= sys.float_info.epsilon
        return self.value == other.value

    def __hash__(self) -> int:
        # Float equality is tolerance based; all floats share a bucket
        if self.value_type == ValueType.FLOAT:
            return hash(self.value_type)
        return hash((self.value_type, self.value))

    def __repr__(self) -> str:
        if self.value_type == ValueType.NULL:
            return "Null"
        return f"{self.value_type.label}({self.value!r})"


class MatchType(str, Enum):
    """
    String matching strategy.

    CONTAIN tests substring containment of the pattern in the candidate.
    REGEX searches the candidate with the pattern compiled as a regex.
    """

    CONTAIN = "contain"
    REGEX = "regex"


__all__ = [
    "ScalarValue",
    "MatchType",
]
