"""
Tests for pattern matching and the compiled-pattern cache.
"""

import threading

import pytest

from jsongrep.rules.dsl_nodes import MatchType
from jsongrep.rules.matcher import PatternCache, get_pattern_cache, test_pattern
from jsongrep.rules.types import ReasonCode


class TestContain:
    """Substring matching."""

    @pytest.mark.parametrize("pattern,candidate,expected", [
        ("dwarf", "dwarf", True),
        ("dwarf", "giant", False),
        ("dwarf", "white dwarf", True),
        ("", "anything", True),
        ("white dwarf", "dwarf", False),
    ])
    def test_contain(self, cache, pattern, candidate, expected):
        result = test_pattern(MatchType.CONTAIN, pattern, candidate, cache)
        assert result.reason == ReasonCode.OK
        assert result.ok is expected

    def test_contain_never_compiles(self, cache):
        test_pattern(MatchType.CONTAIN, "[", "x", cache)
        assert len(cache) == 0


class TestRegex:
    """Regex matching (unanchored search)."""

    @pytest.mark.parametrize("pattern,candidate,expected", [
        ("s.*e", "slice", True),
        ("^dwarf", "brown dwarf", False),
        ("dwarf$", "brown dwarf", True),
        ("[sS]irius", "Sirius B", True),
        ("[sS]irius", "Vega", False),
    ])
    def test_regex(self, cache, pattern, candidate, expected):
        result = test_pattern(MatchType.REGEX, pattern, candidate, cache)
        assert result.reason == ReasonCode.OK
        assert result.ok is expected

    def test_invalid_regex(self, cache):
        result = test_pattern(MatchType.REGEX, "([a-z", "abc", cache)
        assert not result.ok
        assert result.reason == ReasonCode.INVALID_REGEX
        assert result.message == "Invalid regex (([a-z)"
        assert result.is_error


class TestPatternCache:
    """Compiled pattern cache behavior."""

    def test_repeated_pattern_compiles_once(self, cache):
        for candidate in ("slice", "stone", "sun", "moon"):
            test_pattern(MatchType.REGEX, "s.*e", candidate, cache)
        assert cache.compile_count == 1
        assert len(cache) == 1
        assert "s.*e" in cache

    def test_get_returns_same_object(self, cache):
        assert cache.get("a+") is cache.get("a+")

    def test_distinct_patterns(self, cache):
        cache.get("a")
        cache.get("b")
        assert cache.compile_count == 2
        assert len(cache) == 2

    def test_invalid_pattern_not_cached(self, cache):
        test_pattern(MatchType.REGEX, "(", "x", cache)
        test_pattern(MatchType.REGEX, "(", "x", cache)
        assert len(cache) == 0
        assert cache.compile_count == 0

    def test_clear(self, cache):
        cache.get("a")
        cache.clear()
        assert len(cache) == 0
        assert cache.compile_count == 0

    def test_concurrent_use_compiles_once(self):
        cache = PatternCache()
        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(test_pattern(MatchType.REGEX, "^a.c$", "abc", cache).ok)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [True] * 8
        assert cache.compile_count == 1

    def test_process_wide_cache_is_shared(self):
        assert get_pattern_cache() is get_pattern_cache()
        assert isinstance(get_pattern_cache(), PatternCache)
