"""Test class EvaluationResult and number formatting."""
from pydantic import ValidationError
import pytest

from arithmetic_interpreter.common.models import EvaluationResult, format_number


def test_evaluation_result_with_result() -> None:
    """A successful result renders as an equation."""
    res = EvaluationResult(expression="2 + 2 * 3", result=8.0)
    assert res.ok
    assert isinstance(res.result, float)
    assert res.render() == "2 + 2 * 3 = 8"


def test_evaluation_result_with_error() -> None:
    """A failed result renders the error message."""
    res = EvaluationResult(expression="1/0", error="Can not divide by 0")
    assert not res.ok
    assert res.render() == "1/0 -> ERROR: Can not divide by 0"


def test_evaluation_result_requires_one_outcome() -> None:
    """Exactly one of result and error must be provided."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression="1")
    with pytest.raises(ValidationError):
        EvaluationResult(expression="1", result=1.0, error="boom")


def test_evaluation_result_invalid_types() -> None:
    """Invalid field types raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression=42, result=1.0)
    with pytest.raises(ValidationError):
        EvaluationResult(expression="2 + 2", result="not a float")


def test_evaluation_result_is_immutable() -> None:
    """Results are frozen."""
    res = EvaluationResult(expression="1", result=1.0)
    with pytest.raises(ValidationError):
        res.result = 2.0


@pytest.mark.parametrize("value,expected", [
    (2.0, "2"),
    (-3.0, "-3"),
    (0.0, "0"),
    (0.5, "0.5"),
    (318.5, "318.5"),
    (1e20, "1e+20"),
])
def test_format_number(value, expected) -> None:
    """Integral values drop the trailing .0; others keep full precision."""
    assert format_number(value) == expected
