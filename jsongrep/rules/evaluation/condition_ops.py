"""
Condition evaluation for scalar values.

Handles Equal, GreaterThan, LessThan and Match evaluation.

Strict type contracts:
- eq: both operands must be the same variant (Null == Null is true)
- gt, lt: same variant, and not Null
- match: both operands must be String
"""

from __future__ import annotations

from ..dsl_nodes import (
    Comparison,
    Equal,
    GreaterThan,
    LessThan,
    Match,
    ScalarValue,
)
from ..matcher import PatternCache, test_pattern
from ..types import EvalResult, ReasonCode, ValueType


def _type_mismatch(cond: Comparison, value: ScalarValue) -> EvalResult:
    by = type(cond).__name__
    return EvalResult.failure(
        ReasonCode.TYPE_MISMATCH,
        f"Type mismatch (want {cond.value.value_type.label!r}, got {value!r}, by {by!r})",
        rhs_repr=repr(cond.value),
        operator=by,
    )


def _check_ordered(cond: Comparison, value: ScalarValue) -> EvalResult | None:
    """
    Check operands of gt/lt. Returns failure EvalResult if they cannot be ordered.

    Returns:
        EvalResult if type check failed, None if the operands are comparable
    """
    if not cond.value.same_variant(value):
        return _type_mismatch(cond, value)
    if value.value_type == ValueType.NULL:
        return _type_mismatch(cond, value)
    return None


def eval_equal(cond: Equal, value: ScalarValue) -> EvalResult:
    """Evaluate value == literal (same variant only)."""
    if not cond.value.same_variant(value):
        return _type_mismatch(cond, value)
    return EvalResult.success(value == cond.value, rhs_repr=repr(cond.value), operator="eq")


def eval_greater_than(cond: GreaterThan, value: ScalarValue) -> EvalResult:
    """Evaluate value > literal. Bool orders false < true."""
    check = _check_ordered(cond, value)
    if check:
        return check

    result = value.value > cond.value.value
    return EvalResult.success(result, rhs_repr=repr(cond.value), operator="gt")


def eval_less_than(cond: LessThan, value: ScalarValue) -> EvalResult:
    """Evaluate value < literal. Bool orders false < true."""
    check = _check_ordered(cond, value)
    if check:
        return check

    result = value.value < cond.value.value
    return EvalResult.success(result, rhs_repr=repr(cond.value), operator="lt")


def eval_match(
    cond: Match,
    value: ScalarValue,
    cache: PatternCache | None = None,
) -> EvalResult:
    """
    Evaluate a Match condition.

    Both the pattern literal and the tested value must be strings.
    """
    if cond.value.value_type != ValueType.STRING or value.value_type != ValueType.STRING:
        by = type(cond).__name__
        return EvalResult.failure(
            ReasonCode.MATCHER_TYPE_MISMATCH,
            f"Matcher type mismatch (matcher_type {cond.mtype.value!r}, "
            f"matcher_value {cond.value!r}, target {value!r}, by {by!r})",
            rhs_repr=repr(cond.value),
            operator=by,
        )
    return test_pattern(cond.mtype, cond.value.value, value.value, cache)
