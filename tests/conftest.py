"""
Pytest configuration for jsongrep tests.
"""

import pytest

from jsongrep.config.config import reset_config
from jsongrep.utils.logger import setup_logger
from jsongrep.rules.evaluation import ConditionEvaluator, QueryEvaluator
from jsongrep.rules.matcher import PatternCache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Fresh config per test, without picking up a developer .env file."""
    for name in ("JSONGREP_LOG_LEVEL", "JSONGREP_LOG_DIR", "JSONGREP_STATS", "JSONGREP_ERROR_STYLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
    # Drop handlers bound to this test's captured stderr
    setup_logger()


@pytest.fixture
def cache() -> PatternCache:
    """Isolated pattern cache."""
    return PatternCache()


@pytest.fixture
def cond_evaluator(cache) -> ConditionEvaluator:
    """Condition evaluator bound to the isolated cache."""
    return ConditionEvaluator(cache)


@pytest.fixture
def evaluator(cache) -> QueryEvaluator:
    """Query evaluator bound to the isolated cache."""
    return QueryEvaluator(cache)

