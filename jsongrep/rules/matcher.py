"""
String pattern matching for Match conditions.

Two strategies:
- CONTAIN: substring containment of the pattern in the candidate
- REGEX: unanchored regex search of the candidate

Compiled regexes live in a PatternCache shared by every evaluator in the
process. Lookup, compilation and insertion happen under one lock; entries
are never evicted.
"""

from __future__ import annotations

import re
import threading

from ..utils.logger import get_logger
from .dsl_nodes import MatchType
from .types import EvalResult, ReasonCode


logger = get_logger()


class PatternCache:
    """
    Thread-safe cache of compiled regex patterns keyed by pattern text.

    A hit never recompiles. Invalid patterns are not cached, so each use
    of a bad pattern reports INVALID_REGEX again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._patterns: dict[str, re.Pattern] = {}
        self._compile_count = 0

    def get(self, pattern: str) -> re.Pattern:
        """
        Return the compiled pattern, compiling it on first use.

        Raises:
            re.error: If the pattern does not compile
        """
        with self._lock:
            compiled = self._patterns.get(pattern)
            if compiled is None:
                compiled = re.compile(pattern)
                self._compile_count += 1
                self._patterns[pattern] = compiled
                logger.debug(f"Compiled regex pattern {pattern!r}")
            return compiled

    @property
    def compile_count(self) -> int:
        """Number of successful compilations since creation or clear()."""
        with self._lock:
            return self._compile_count

    def clear(self) -> None:
        with self._lock:
            self._patterns.clear()
            self._compile_count = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._patterns)

    def __contains__(self, pattern: str) -> bool:
        with self._lock:
            return pattern in self._patterns


# ==============================================================================
# Process-wide Instance
# ==============================================================================

_pattern_cache = PatternCache()


def get_pattern_cache() -> PatternCache:
    """Get the process-wide pattern cache."""
    return _pattern_cache


def test_pattern(
    mtype: MatchType,
    pattern: str,
    candidate: str,
    cache: PatternCache | None = None,
) -> EvalResult:
    """
    Test a candidate string against a pattern.

    Args:
        mtype: CONTAIN or REGEX
        pattern: Pattern text from the Match literal
        candidate: String extracted from the document
        cache: Pattern cache (defaults to the process-wide cache)

    Returns:
        EvalResult with ok=True when the candidate matches, or an
        INVALID_REGEX failure naming the pattern
    """
    if mtype == MatchType.CONTAIN:
        return EvalResult.success(pattern in candidate, rhs_repr=pattern, operator="contain")

    cache = cache if cache is not None else _pattern_cache
    try:
        compiled = cache.get(pattern)
    except re.error:
        return EvalResult.failure(
            ReasonCode.INVALID_REGEX,
            f"Invalid regex ({pattern})",
            rhs_repr=pattern,
            operator="regex",
        )
    return EvalResult.success(
        compiled.search(candidate) is not None,
        rhs_repr=pattern,
        operator="regex",
    )


# Not a test function
test_pattern.__test__ = False


__all__ = [
    "PatternCache",
    "get_pattern_cache",
    "test_pattern",
]
