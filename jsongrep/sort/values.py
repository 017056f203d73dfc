"""
Sortable value type for the ordering engine.

A SortableValue is the comparison key extracted from one document for one
sort criterion. Variants order as:

    Null < Array < Object < Bool < Number < String

Arrays and objects carry no payload: two arrays (or two objects) always
compare equal regardless of their contents.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class SortKind(IntEnum):
    """Variant of a sortable value, in ascending sort order."""

    NULL = 0
    ARRAY = 1
    OBJECT = 2
    BOOL = 3
    NUMBER = 4
    STRING = 5


@dataclass(frozen=True, eq=False)
class SortableValue:
    """
    A typed sort key.

    Attributes:
        kind: Variant of the key
        value: bool/int/float/str payload (None for Null, Array, Object)
    """
    kind: SortKind
    value: None | bool | int | float | str = None

    @classmethod
    def null(cls) -> "SortableValue":
        return cls(SortKind.NULL)

    @classmethod
    def from_json(cls, value: Any) -> "SortableValue":
        """Classify a decoded JSON value. Unknown Python types raise TypeError."""
        if value is None:
            return cls(SortKind.NULL)
        if isinstance(value, list):
            return cls(SortKind.ARRAY)
        if isinstance(value, dict):
            return cls(SortKind.OBJECT)
        # bool is a subclass of int
        if isinstance(value, bool):
            return cls(SortKind.BOOL, value)
        if isinstance(value, (int, float)):
            return cls(SortKind.NUMBER, value)
        if isinstance(value, str):
            return cls(SortKind.STRING, value)
        raise TypeError(f"Not a JSON value: {type(value).__name__}")

    def compare(self, other: "SortableValue") -> int:
        """
        Three-way comparison.

        Returns:
            -1, 0 or 1 as self sorts before, equal to, or after other
        """
        if self.kind != other.kind:
            return -1 if self.kind < other.kind else 1
        if self.kind == SortKind.NUMBER:
            if self.value == other.value:
                return 0
            try:
                close = abs(self.value - other.value) <= sys.float_info.epsilon
            except OverflowError:
                # int beyond float range against a float
                close = False
            if close:
                return 0
            return -1 if self.value < other.value else 1
        if self.kind in (SortKind.BOOL, SortKind.STRING):
            if self.value == other.value:
                return 0
            return -1 if self.value < other.value else 1
        # Null, Array, Object
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortableValue):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "SortableValue") -> bool:
        return self.compare(other) < 0

    # Number equality is tolerance based
    __hash__ = None

    def __repr__(self) -> str:
        if self.value is None:
            return self.kind.name.capitalize()
        return f"{self.kind.name.capitalize()}({self.value!r})"


def compare_values(a: SortableValue, b: SortableValue) -> int:
    """cmp-style comparison function for functools.cmp_to_key."""
    return a.compare(b)


__all__ = [
    "SortKind",
    "SortableValue",
    "compare_values",
]
