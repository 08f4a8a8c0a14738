import math

import pytest

from tool_agent.calculator.service import MAX_FACTORIAL_INPUT, CalculatorService
from tool_agent.errors import (
    DivisionByZero,
    InvalidCharacterLength,
    NegativeInput,
    NonIntegerInput,
    Overflow,
    UndefinedResult,
)


@pytest.fixture
def calculator() -> CalculatorService:
    return CalculatorService()


@pytest.mark.parametrize("a, b", [(2, 3), (-7, 4), (0.1, 0.2), (1e10, -3.5)])
def test_add_is_inverted_by_subtract(calculator, a, b):
    assert calculator.subtract(calculator.add(a, b), b) == pytest.approx(a)


def test_multiply(calculator):
    assert calculator.multiply(6, 7) == 42
    assert calculator.multiply(-1.5, 2) == -3.0


def test_divide(calculator):
    assert calculator.divide(10, 4) == 2.5
    for a, b in [(1, 3), (-9.5, 0.25), (7, -2)]:
        assert calculator.divide(a, b) * b == pytest.approx(a)


@pytest.mark.parametrize("b", [0, 0.0, -0.0])
def test_divide_by_zero(calculator, b):
    with pytest.raises(DivisionByZero, match="Division by zero"):
        calculator.divide(10, b)


def test_power(calculator):
    assert calculator.power(2, 10) == 1024
    assert isinstance(calculator.power(2, 10), int)
    assert calculator.power(2, -2) == 0.25
    assert calculator.power(9, 0.5) == 3.0
    assert calculator.power(-2, 3) == -8


def test_power_zero_to_zero_is_one(calculator):
    assert calculator.power(0, 0) == 1
    assert calculator.power(0.0, 0.0) == 1


def test_power_without_real_result(calculator):
    with pytest.raises(UndefinedResult):
        calculator.power(-8, 1 / 3)
    with pytest.raises(UndefinedResult):
        calculator.power(0, -1)


def test_power_overflow(calculator):
    with pytest.raises(Overflow):
        calculator.power(10, 400)


def test_power_huge_exponent_on_unit_base(calculator):
    assert calculator.power(1, 10**400) == 1
    assert calculator.power(-1, 10**400 + 1) == -1
    assert calculator.power(0, 10**400) == 0


@pytest.mark.parametrize("base, exponent", [(2, 5000), (3, 10**400), (-2, 1025)])
def test_integer_power_overflow_is_rejected_early(calculator, base, exponent):
    with pytest.raises(Overflow):
        calculator.power(base, exponent)


@pytest.mark.parametrize(
    "operation, a, b",
    [("add", 10**400, 1), ("subtract", -(10**400), 1), ("multiply", 10**200, 10**200)],
)
def test_integer_results_beyond_double_range(calculator, operation, a, b):
    with pytest.raises(Overflow):
        getattr(calculator, operation)(a, b)


def test_sqrt(calculator):
    assert calculator.sqrt(16) == 4.0
    assert calculator.sqrt(0) == 0.0
    with pytest.raises(NegativeInput):
        calculator.sqrt(-1)


def test_percentage(calculator):
    assert calculator.percentage(15, 200) == 30.0
    assert calculator.percentage(0, 50) == 0


def test_factorial_base_cases(calculator):
    assert calculator.factorial(0) == 1
    assert calculator.factorial(1) == 1
    assert calculator.factorial(5.0) == 120


@pytest.mark.parametrize("n", [2, 5, 10, 20, MAX_FACTORIAL_INPUT])
def test_factorial_recurrence(calculator, n):
    assert calculator.factorial(n) == n * calculator.factorial(n - 1)


def test_factorial_bound_matches_double_range(calculator):
    assert math.factorial(MAX_FACTORIAL_INPUT) <= 1.7976931348623157e308
    assert math.factorial(MAX_FACTORIAL_INPUT + 1) > 1.7976931348623157e308
    with pytest.raises(Overflow):
        calculator.factorial(MAX_FACTORIAL_INPUT + 1)


def test_factorial_rejects_bad_input(calculator):
    with pytest.raises(NegativeInput):
        calculator.factorial(-1)
    with pytest.raises(NonIntegerInput):
        calculator.factorial(2.5)


def test_count_character(calculator):
    assert calculator.count_character("a", "banana") == 3
    assert calculator.count_character("z", "banana") == 0
    assert calculator.count_character("A", "banana") == 0


@pytest.mark.parametrize("character", ["", "ab"])
def test_count_character_requires_single_character(calculator, character):
    with pytest.raises(InvalidCharacterLength):
        calculator.count_character(character, "banana")


def test_float_overflow_is_reported(calculator):
    with pytest.raises(Overflow):
        calculator.multiply(1e308, 10)


def test_repeated_calls_are_identical(calculator):
    results = {calculator.divide(1, 3) for _ in range(5)}
    assert len(results) == 1
