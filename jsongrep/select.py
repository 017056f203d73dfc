"""
Record selection.

Parses one input line as JSON and decides whether it is selected by the
query. Three outcomes:
- selected: the query evaluated to true (or there is no query)
- not selected: the query evaluated cleanly to false (FILTERED_BY_QUERY)
- failed: the line is not valid JSON, or evaluation failed
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .rules.dsl_nodes import Query
from .rules.evaluation import QueryEvaluator
from .rules.matcher import PatternCache
from .rules.types import EvalResult, ReasonCode


def _reject_constant(token: str) -> None:
    """NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid number: {token}")


def _check_utf8(line: str) -> None:
    # Undecodable input bytes arrive as lone surrogates
    try:
        line.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"Invalid UTF-8 at column {e.start + 1}") from None


@dataclass(frozen=True)
class SelectResult:
    """
    Outcome of selecting one line.

    Attributes:
        result: Evaluation outcome (ok=True when selected)
        document: Decoded document (None when the line is not valid JSON)
    """
    result: EvalResult
    document: Any = None

    @property
    def selected(self) -> bool:
        return self.result.ok

    @property
    def is_filtered(self) -> bool:
        return self.result.is_filtered

    @property
    def is_error(self) -> bool:
        return self.result.is_error


class Selector:
    """
    Applies an optional query to input lines.

    Example:
        selector = Selector(load_query_text(text))
        outcome = selector.select('{"s": "Sirius"}')
        if outcome.selected:
            print(outcome.document)
    """

    def __init__(self, query: Query | None = None, cache: PatternCache | None = None):
        self.query = query
        self._evaluator = QueryEvaluator(cache)

    @classmethod
    def all(cls) -> "Selector":
        """Selector that accepts every valid JSON line."""
        return cls(None)

    def select(self, line: str) -> SelectResult:
        try:
            _check_utf8(line)
            document = json.loads(line, parse_constant=_reject_constant)
        except ValueError as e:
            return SelectResult(
                EvalResult.failure(ReasonCode.MALFORMED_INPUT, str(e))
            )

        if self.query is None:
            return SelectResult(EvalResult.success(True, operator="all"), document)

        result = self._evaluator.evaluate(self.query, document)
        if result.is_error:
            return SelectResult(result, document)
        if not result.ok:
            return SelectResult(EvalResult.filtered(), document)
        return SelectResult(result, document)
