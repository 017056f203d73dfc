"""
Query Evaluation Package.

This package provides the evaluators for query and condition trees:

- core.py: ConditionEvaluator / QueryEvaluator classes and evaluate() dispatch
- boolean_ops.py: All, Any, Not evaluation (both node families)
- condition_ops.py: Equal, GreaterThan, LessThan, Match evaluation
- resolve.py: Pointer to ScalarValue resolution

Usage:
    from jsongrep.rules.evaluation import QueryEvaluator, evaluate

    evaluator = QueryEvaluator()
    result = evaluator.evaluate(query, document)
"""

from .core import ConditionEvaluator, QueryEvaluator, evaluate
from .resolve import resolve_scalar

__all__ = [
    "ConditionEvaluator",
    "QueryEvaluator",
    "evaluate",
    "resolve_scalar",
]
