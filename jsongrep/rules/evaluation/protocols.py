"""
Shared protocols for query evaluation.

Provides Protocol classes to avoid circular imports between evaluation modules.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..types import EvalResult


class EvaluatorProtocol(Protocol):
    """Protocol for condition and query evaluators to avoid circular imports."""

    def evaluate(self, node: Any, target: Any) -> EvalResult: ...
