"""
Query evaluation module for JSON records.

Design principles:
- Specification documents are decoded once into immutable node trees
- Strict same-variant type checking with actionable error messages
- ReasonCode for every evaluation outcome
- Data problems return EvalResult failures; exceptions only at the edges
"""

from .types import (
    ReasonCode,
    ValueType,
    EvalResult,
    InternalInvariantError,
)
from .matcher import (
    PatternCache,
    get_pattern_cache,
    test_pattern,
)
from .evaluation import (
    ConditionEvaluator,
    QueryEvaluator,
    evaluate,
)
from .dsl_parser import (
    SpecError,
    parse_query,
    parse_sort,
    load_query_text,
    load_query_file,
    load_sort_text,
    load_sort_file,
)

__all__ = [
    # Types
    "ReasonCode",
    "ValueType",
    "EvalResult",
    "InternalInvariantError",
    # Matching
    "PatternCache",
    "get_pattern_cache",
    "test_pattern",
    # Evaluation
    "ConditionEvaluator",
    "QueryEvaluator",
    "evaluate",
    # Parsing
    "SpecError",
    "parse_query",
    "parse_sort",
    "load_query_text",
    "load_query_file",
    "load_sort_text",
    "load_sort_file",
]
