"""
Query and condition evaluators.

Evaluates node trees against decoded JSON documents.

Key Features:
- Short-circuit evaluation for All/Any nodes
- Strict same-variant type contracts for comparisons
- Shared, lock-protected regex cache for Match nodes

Usage:
    evaluator = QueryEvaluator()
    result = evaluator.evaluate(query, document)
    # result is EvalResult with ok=True/False and reason code
"""

from __future__ import annotations

from typing import Any

from ..dsl_nodes import (
    Condition,
    Equal,
    GreaterThan,
    LessThan,
    Match,
    AllCond,
    AnyCond,
    NotCond,
    QueryCondition,
    RawQuery,
    AllQuery,
    AnyQuery,
    NotQuery,
    Query,
    ScalarValue,
)
from ..matcher import PatternCache, get_pattern_cache
from ..types import EvalResult, InternalInvariantError

from .boolean_ops import eval_all, eval_any, eval_not
from .condition_ops import (
    eval_equal,
    eval_greater_than,
    eval_less_than,
    eval_match,
)
from .resolve import resolve_scalar


class ConditionEvaluator:
    """
    Evaluates condition trees against a single ScalarValue.

    Stateless apart from the pattern cache, which is shared and
    lock-protected; instances can be reused across evaluations.

    Attributes:
        cache: Pattern cache used by Match nodes

    Example:
        evaluator = ConditionEvaluator()
        cond = AllCond((
            GreaterThan(ScalarValue.from_literal(0)),
            LessThan(ScalarValue.from_literal(10)),
        ))
        result = evaluator.evaluate(cond, ScalarValue.from_json(5))
    """

    def __init__(self, cache: PatternCache | None = None):
        self.cache = cache if cache is not None else get_pattern_cache()

    def evaluate(self, cond: Condition, value: ScalarValue) -> EvalResult:
        """
        Evaluate a condition tree against a value.

        Raises:
            InternalInvariantError: If the tree contains an unknown node
        """
        if isinstance(cond, Equal):
            return eval_equal(cond, value)
        elif isinstance(cond, GreaterThan):
            return eval_greater_than(cond, value)
        elif isinstance(cond, LessThan):
            return eval_less_than(cond, value)
        elif isinstance(cond, Match):
            return eval_match(cond, value, self.cache)
        elif isinstance(cond, AllCond):
            return eval_all(cond, value, self)
        elif isinstance(cond, AnyCond):
            return eval_any(cond, value, self)
        elif isinstance(cond, NotCond):
            return eval_not(cond, value, self)
        raise InternalInvariantError(f"Unknown condition type: {type(cond).__name__}")


class QueryEvaluator:
    """
    Evaluates query trees against a decoded JSON document.

    Each RawQuery leaf resolves its pointer into a ScalarValue and hands
    it to the ConditionEvaluator.

    Example:
        evaluator = QueryEvaluator()
        query = Query(RawQuery(
            "/s",
            Match(ScalarValue.from_literal("[sS]irius"), MatchType.REGEX),
        ))
        result = evaluator.evaluate(query, {"s": "Sirius"})
    """

    def __init__(self, cache: PatternCache | None = None):
        self.conditions = ConditionEvaluator(cache)

    def evaluate(self, node: Query | QueryCondition, document: Any) -> EvalResult:
        """
        Evaluate a query (or query condition) against a document.

        Raises:
            InternalInvariantError: If the tree contains an unknown node
        """
        if isinstance(node, Query):
            return self.evaluate(node.root, document)
        elif isinstance(node, RawQuery):
            return self._eval_raw(node, document)
        elif isinstance(node, AllQuery):
            return eval_all(node, document, self)
        elif isinstance(node, AnyQuery):
            return eval_any(node, document, self)
        elif isinstance(node, NotQuery):
            return eval_not(node, document, self)
        raise InternalInvariantError(f"Unknown query type: {type(node).__name__}")

    def _eval_raw(self, node: RawQuery, document: Any) -> EvalResult:
        value = resolve_scalar(document, node.pointer)
        if isinstance(value, EvalResult):
            return value
        return self.conditions.evaluate(node.condition, value).with_pointer(node.pointer)


_default_evaluator: QueryEvaluator | None = None


def evaluate(query: Query | QueryCondition, document: Any) -> EvalResult:
    """
    Convenience function to evaluate a query against a document.

    Uses a module-level QueryEvaluator bound to the process-wide pattern cache.
    """
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = QueryEvaluator()
    return _default_evaluator.evaluate(query, document)
