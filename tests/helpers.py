"""
Shared builders for jsongrep tests.
"""

from jsongrep.rules.dsl_nodes import ScalarValue


SAMPLE = {"n": None, "d": {"i": 1, "f": 1.2, "a": ["one", "two", "three"]}}


def lit(value) -> ScalarValue:
    """Literal ScalarValue (integral numbers become Int)."""
    return ScalarValue.from_literal(value)


def doc(value) -> ScalarValue:
    """Document ScalarValue (ints are Int, floats are Float)."""
    return ScalarValue.from_json(value)
