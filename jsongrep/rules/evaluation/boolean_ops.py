"""
Boolean operators for conditions and queries.

Handles All/Any/Not evaluation with short-circuit semantics. The same
handlers serve both node families: AllCond/AnyCond/NotCond over a scalar
value and AllQuery/AnyQuery/NotQuery over a whole document.
"""

from __future__ import annotations

from typing import Any

from ..dsl_nodes import (
    AllCond,
    AnyCond,
    NotCond,
    AllQuery,
    AnyQuery,
    NotQuery,
)
from ..types import EvalResult, ReasonCode
from .protocols import EvaluatorProtocol


def _no_children(node: Any) -> EvalResult:
    by = type(node).__name__
    return EvalResult.failure(
        ReasonCode.NO_CHILDREN,
        f"No children (by: {by!r})",
        operator=by,
    )


def eval_all(
    node: AllCond | AllQuery,
    target: Any,
    evaluator: EvaluatorProtocol,
) -> EvalResult:
    """
    Evaluate AND with short-circuit.

    Returns the first error or the first false child result.
    """
    if not node.children:
        return _no_children(node)
    for child in node.children:
        result = evaluator.evaluate(child, target)
        if not result.ok:
            return result  # Short-circuit: first false or error wins
    # All passed
    return EvalResult.success(True, operator="all")


def eval_any(
    node: AnyCond | AnyQuery,
    target: Any,
    evaluator: EvaluatorProtocol,
) -> EvalResult:
    """
    Evaluate OR with short-circuit.

    Returns the first error or the first true child result.
    """
    if not node.children:
        return _no_children(node)
    for child in node.children:
        result = evaluator.evaluate(child, target)
        if result.ok or result.is_error:
            return result  # Short-circuit: first true or error wins
    # None passed
    return EvalResult.success(False, operator="any")


def eval_not(
    node: NotCond | NotQuery,
    target: Any,
    evaluator: EvaluatorProtocol,
) -> EvalResult:
    """
    Evaluate negation.

    Clean results are inverted. Errors propagate unchanged; a missing
    value or a type error cannot meaningfully be inverted.
    """
    result = evaluator.evaluate(node.child, target)
    if result.is_error:
        return result
    return EvalResult.success(
        not result.ok,
        pointer=result.pointer,
        rhs_repr=result.rhs_repr,
        operator="not",
    )
