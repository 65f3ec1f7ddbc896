"""
Tests for bfhl/utils/validation.py
"""

import pytest

from bfhl.utils.validation import (
    is_integer,
    validate_fibonacci,
    validate_positive_integers,
    validate_prime,
    validate_question,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, 7, -3, 7.0, 10**30])
def test_is_integer_accepts(value):
    assert is_integer(value)


@pytest.mark.unit
@pytest.mark.parametrize("value", [True, False, 2.5, "3", None, [1], float("inf"), float("nan")])
def test_is_integer_rejects(value):
    assert not is_integer(value)


@pytest.mark.unit
def test_validate_fibonacci():
    assert validate_fibonacci(0, 100)
    assert validate_fibonacci(100, 100)

    result = validate_fibonacci(-1, 100)
    assert not result
    assert result.errors == ["fibonacci must be a non-negative integer"]

    assert not validate_fibonacci("5", 100)
    assert not validate_fibonacci(True, 100)
    assert not validate_fibonacci(2.5, 100)

    too_big = validate_fibonacci(101, 100)
    assert not too_big
    assert too_big.errors == ["fibonacci must not exceed 100"]


@pytest.mark.unit
def test_validate_prime_checks_container_only():
    assert validate_prime([])
    assert validate_prime([1, "x", None])

    result = validate_prime("2,3")
    assert not result
    assert result.errors == ["prime must be an array of integers"]
    assert not validate_prime({"a": 2})


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [[], [3, -2], [0, 5], [1, 2.5], [1, "2"], [True], 12, None],
)
def test_validate_positive_integers_rejects(value):
    result = validate_positive_integers(value, "lcm")
    assert not result
    assert result.errors == ["lcm must be an array of positive integers"]


@pytest.mark.unit
def test_validate_positive_integers_accepts():
    assert validate_positive_integers([1], "hcf")
    assert validate_positive_integers([12, 18, 6.0], "hcf")


@pytest.mark.unit
def test_validate_question():
    assert validate_question("Who wrote Hamlet?")

    for bad in ["", "   ", "\n\t", None, 42, ["q"]]:
        result = validate_question(bad)
        assert not result
        assert result.errors == ["AI must be a non-empty string"]
