"""
Rule evaluation type definitions.

Enums and dataclasses for query/condition evaluation with strict typing.
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Any


class ReasonCode(IntEnum):
    """
    Reason codes for query evaluation outcomes.

    Every evaluation returns a ReasonCode to explain why it succeeded or failed.
    These are machine-readable for logging/debugging.
    """

    # Success
    OK = 0  # Condition evaluated cleanly to true/false

    # Input errors
    MALFORMED_INPUT = auto()  # Record is not valid JSON

    # Path errors
    INVALID_POINTER = auto()  # Pointer has no target in the document
    INVALID_TARGET = auto()  # Pointer targets an array or object

    # Type errors
    TYPE_MISMATCH = auto()  # eq/gt/lt operands are different variants
    MATCHER_TYPE_MISMATCH = auto()  # match operands are not both strings

    # Tree errors
    NO_CHILDREN = auto()  # and/or node with zero children

    # Pattern errors
    INVALID_REGEX = auto()  # Pattern text failed to compile

    # Not an error - document evaluated to false
    FILTERED_BY_QUERY = auto()


class ValueType(IntEnum):
    """
    Variants of a scalar value extracted for condition evaluation.

    Arrays and objects are not scalar values; a pointer that targets one
    fails with INVALID_TARGET.
    """

    NULL = 0
    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()

    @classmethod
    def from_value(cls, value: Any) -> "ValueType | None":
        """
        Determine ValueType from a decoded JSON value.

        Args:
            value: Any Python value produced by a JSON decoder

        Returns:
            Matching ValueType, or None for arrays, objects and unknown types
        """
        if value is None:
            return cls.NULL
        # bool is a subclass of int
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        return None

    @property
    def label(self) -> str:
        """Display name used in error messages (e.g. 'Int')."""
        return self.name.capitalize()


class InternalInvariantError(RuntimeError):
    """
    A tree node reached a handler that does not apply to it.

    Only raised for trees that were not built by the specification decoder.
    Never converted into a per-record EvalResult.
    """


@dataclass(frozen=True)
class EvalResult:
    """
    Result of a query or condition evaluation.

    Contains:
    - ok: Whether the condition evaluated to true
    - reason: Why it evaluated this way
    - debug: Structured context for error reporting
    """

    ok: bool  # True if condition is satisfied
    reason: ReasonCode  # Reason code explaining outcome
    pointer: str | None = None  # JSON pointer of the tested value
    rhs_repr: str | None = None  # Literal the value was tested against
    operator: str | None = None  # Node type that produced the result
    message: str | None = None  # Human-readable explanation

    @classmethod
    def success(
        cls,
        ok: bool,
        pointer: str | None = None,
        rhs_repr: str | None = None,
        operator: str | None = None,
    ) -> "EvalResult":
        """Create a clean evaluation result (true or false)."""
        return cls(
            ok=ok,
            reason=ReasonCode.OK,
            pointer=pointer,
            rhs_repr=rhs_repr,
            operator=operator,
        )

    @classmethod
    def failure(
        cls,
        reason: ReasonCode,
        message: str,
        pointer: str | None = None,
        rhs_repr: str | None = None,
        operator: str | None = None,
    ) -> "EvalResult":
        """Create a failure result."""
        return cls(
            ok=False,
            reason=reason,
            pointer=pointer,
            rhs_repr=rhs_repr,
            operator=operator,
            message=message,
        )

    @classmethod
    def filtered(cls) -> "EvalResult":
        """Sentinel for a document that evaluated cleanly to false."""
        return cls(
            ok=False,
            reason=ReasonCode.FILTERED_BY_QUERY,
            message="Filtered by query",
        )

    @property
    def is_error(self) -> bool:
        """True for genuine evaluation failures (not clean false, not filtered)."""
        return self.reason not in (ReasonCode.OK, ReasonCode.FILTERED_BY_QUERY)

    @property
    def is_filtered(self) -> bool:
        return self.reason == ReasonCode.FILTERED_BY_QUERY

    def with_pointer(self, pointer: str) -> "EvalResult":
        """Return a copy carrying the pointer, keeping an existing one."""
        if self.pointer is not None:
            return self
        return EvalResult(
            ok=self.ok,
            reason=self.reason,
            pointer=pointer,
            rhs_repr=self.rhs_repr,
            operator=self.operator,
            message=self.message,
        )

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "ok": self.ok,
            "reason": self.reason.name,
            "pointer": self.pointer,
            "rhs_repr": self.rhs_repr,
            "operator": self.operator,
            "message": self.message,
        }

    def __str__(self) -> str:
        if self.message:
            return self.message
        return f"{self.operator or 'query'} = {'PASS' if self.ok else 'FAIL'}"
