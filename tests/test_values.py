"""
Tests for ScalarValue classification and equality.

Validates that:
1. Document integers are Int, other numbers Float
2. Integral literals from a specification are Int
3. Equality is same-variant only, with the float tolerance rule
4. Arrays and objects are not scalar values
"""

import pytest

from jsongrep.rules.dsl_nodes import ScalarValue
from jsongrep.rules.evaluation import resolve_scalar
from jsongrep.rules.types import EvalResult, ReasonCode, ValueType

from tests.helpers import SAMPLE, doc, lit


class TestClassification:
    """Test variant assignment."""

    @pytest.mark.parametrize("value,expected", [
        (None, ValueType.NULL),
        (True, ValueType.BOOL),
        (False, ValueType.BOOL),
        (0, ValueType.INT),
        (-12, ValueType.INT),
        (1.0, ValueType.FLOAT),
        (1.5, ValueType.FLOAT),
        ("", ValueType.STRING),
    ])
    def test_document_values(self, value, expected):
        assert doc(value).value_type == expected

    def test_document_containers_are_not_scalars(self):
        assert ScalarValue.from_json([1]) is None
        assert ScalarValue.from_json({"a": 1}) is None

    def test_integral_literal_is_int(self):
        value = lit(10.0)
        assert value.value_type == ValueType.INT
        assert value.value == 10

    def test_fractional_literal_is_float(self):
        assert lit(1.5).value_type == ValueType.FLOAT

    def test_container_literal_raises(self):
        with pytest.raises(ValueError, match="must be a scalar"):
            lit([1, 2])


class TestEquality:
    """Test ScalarValue equality semantics."""

    def test_same_variant_equal(self):
        assert doc(1) == lit(1)
        assert doc("moon") == lit("moon")
        assert ScalarValue.null() == doc(None)

    def test_no_cross_variant_equality(self):
        assert doc(1) != doc(1.0)
        assert doc(True) != doc(1)
        assert doc(None) != doc("")

    def test_float_tolerance(self):
        assert doc(0.1 + 0.2) == doc(0.3)
        assert doc(1.5) != doc(1.6)

    def test_float_equality_ignores_sign(self):
        assert doc(-5.0) == doc(5.0)

    def test_reflexive(self):
        for value in (None, True, 3, 2.5, "x"):
            assert doc(value) == doc(value)

    def test_repr(self):
        assert repr(ScalarValue.null()) == "Null"
        assert repr(doc(1)) == "Int(1)"
        assert repr(doc("a")) == "String('a')"


class TestResolveScalar:
    """Test pointer to ScalarValue resolution."""

    @pytest.mark.parametrize("pointer,expected", [
        ("/n", ScalarValue.null()),
        ("/d/i", ScalarValue(1, ValueType.INT)),
        ("/d/f", ScalarValue(1.2, ValueType.FLOAT)),
        ("/d/a/1", ScalarValue("two", ValueType.STRING)),
    ])
    def test_resolves(self, pointer, expected):
        value = resolve_scalar(SAMPLE, pointer)
        assert isinstance(value, ScalarValue)
        assert value == expected

    def test_missing_pointer(self):
        result = resolve_scalar(SAMPLE, "/X")
        assert isinstance(result, EvalResult)
        assert result.reason == ReasonCode.INVALID_POINTER
        assert result.pointer == "/X"
        assert "Invalid pointer" in result.message

    @pytest.mark.parametrize("pointer", ["/d/a", "/d"])
    def test_container_target(self, pointer):
        result = resolve_scalar(SAMPLE, pointer)
        assert isinstance(result, EvalResult)
        assert result.reason == ReasonCode.INVALID_TARGET
        assert "Invalid target" in result.message
