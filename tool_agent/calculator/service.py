"""Arithmetic operations behind the calculator tools."""

import math
import sys

from tool_agent.errors import (
    DivisionByZero,
    InvalidCharacterLength,
    NegativeInput,
    NonIntegerInput,
    Overflow,
    UndefinedResult,
)

Number = int | float


def _max_factorial_input() -> int:
    """Largest n whose n! still fits in a double, the type JSON readers use."""
    n, value = 1, 1
    while value * (n + 1) <= sys.float_info.max:
        n += 1
        value *= n
    return n


MAX_FACTORIAL_INPUT = _max_factorial_input()

_MAX_LOG2 = math.log2(sys.float_info.max)


def _finite(value: Number, operation: str) -> Number:
    if isinstance(value, float):
        representable = math.isfinite(value)
    else:
        representable = abs(value) <= sys.float_info.max
    if not representable:
        raise Overflow(f"Result of {operation} is too large to represent")
    return value


class CalculatorService:
    """Mathematical operations for the calculator tools."""

    def add(self, a: Number, b: Number) -> Number:
        return _finite(a + b, "addition")

    def subtract(self, a: Number, b: Number) -> Number:
        return _finite(a - b, "subtraction")

    def multiply(self, a: Number, b: Number) -> Number:
        return _finite(a * b, "multiplication")

    def divide(self, a: Number, b: Number) -> float:
        """
        Divide a by b.

        Raises:
            DivisionByZero: If b is zero
        """
        if b == 0:
            raise DivisionByZero()
        return _finite(a / b, "division")

    def power(self, base: Number, exponent: Number) -> Number:
        """
        Raise base to exponent with real-number semantics.

        ``power(0, 0)`` is 1. Integer inputs with a non-negative exponent
        give an exact integer result.

        Raises:
            UndefinedResult: If the result is not a real number
            Overflow: If the result is too large to represent
        """
        if isinstance(base, int) and isinstance(exponent, int) and exponent >= 0:
            # bound the exponent before computing so huge powers never materialize
            if abs(base) > 1 and exponent > (_MAX_LOG2 + 1) / math.log2(abs(base)):
                raise Overflow("Result of exponentiation is too large to represent")
            return _finite(base**exponent, "exponentiation")

        if base == 0 and exponent < 0:
            raise UndefinedResult(
                "Zero cannot be raised to a negative power",
                details=f"{base}^{exponent}",
            )
        try:
            result = math.pow(base, exponent)
        except ValueError as e:
            raise UndefinedResult(
                "Result is not a real number",
                details=f"{base}^{exponent}",
            ) from e
        except OverflowError as e:
            raise Overflow("Result of exponentiation is too large to represent") from e

        return _finite(result, "exponentiation")

    def sqrt(self, number: Number) -> float:
        """
        Raises:
            NegativeInput: If number is negative
        """
        if number < 0:
            raise NegativeInput("Cannot calculate square root of negative number")
        return math.sqrt(number)

    def percentage(self, percentage: Number, of: Number) -> Number:
        return _finite((percentage / 100) * of, "percentage")

    def factorial(self, number: Number) -> int:
        """
        Exact factorial of a non-negative whole number.

        Raises:
            NegativeInput: If number is negative
            NonIntegerInput: If number is not a whole number
            Overflow: If the result would exceed the double-precision range
        """
        if number < 0:
            raise NegativeInput("Factorial is only defined for non-negative numbers")
        if isinstance(number, float):
            if not number.is_integer():
                raise NonIntegerInput("Factorial is only defined for integers")
            number = int(number)
        if number > MAX_FACTORIAL_INPUT:
            raise Overflow(
                f"Factorial too large (max: {MAX_FACTORIAL_INPUT})",
                details=f"{number}! exceeds the double-precision range",
            )
        return math.factorial(number)

    def count_character(self, character: str, text: str) -> int:
        """
        Count occurrences of a single character in text.

        Raises:
            InvalidCharacterLength: If character is not exactly one character
        """
        if len(character) != 1:
            raise InvalidCharacterLength(character)
        return text.count(character)
