"""Tools: calculator operations (public, no authentication)."""

import logging
from abc import abstractmethod
from typing import Any

from tool_agent.calculator.service import CalculatorService, Number
from tool_agent.constants import OPERATION_TEXT_PREVIEW, TOOL_TYPE_CALCULATOR
from tool_agent.errors import InvalidCharacterLength, Overflow
from tool_agent.tools.base import BaseTool

logger = logging.getLogger(__name__)


def format_number(value: Any) -> str:
    """Render numbers the way agents expect to read them (``5`` not ``5.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CalculatorTool(BaseTool):
    """Shared result shape for calculator tools."""

    def __init__(self, calculator: CalculatorService):
        self.calculator = calculator

    @abstractmethod
    def compute(self, **params: Any) -> tuple[str, Number]:
        """Return the operation label and its result."""

    async def execute(self, credential: str | None, **params: Any) -> dict[str, Any]:
        try:
            operation, result = self.compute(**params)
        except OverflowError as e:
            raise Overflow("Result is too large to represent", details=str(e)) from e

        logger.debug(f"{self.name}: {operation} = {result}")
        return {
            "operation": operation,
            "result": result,
            "message": f"Calculated {operation} = {format_number(result)}",
            "tool_type": TOOL_TYPE_CALCULATOR,
        }


class AddTool(CalculatorTool):
    name = "add"
    reads = ("a", "b")

    def compute(self, a: Number, b: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"{format_number(a)} + {format_number(b)}", self.calculator.add(a, b)


class SubtractTool(CalculatorTool):
    name = "subtract"
    reads = ("a", "b")

    def compute(self, a: Number, b: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"{format_number(a)} - {format_number(b)}", self.calculator.subtract(a, b)


class MultiplyTool(CalculatorTool):
    name = "multiply"
    reads = ("a", "b")

    def compute(self, a: Number, b: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"{format_number(a)} × {format_number(b)}", self.calculator.multiply(a, b)


class DivideTool(CalculatorTool):
    name = "divide"
    reads = ("a", "b")

    def compute(self, a: Number, b: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"{format_number(a)} ÷ {format_number(b)}", self.calculator.divide(a, b)


class PowerTool(CalculatorTool):
    name = "power"
    reads = ("base", "exponent")

    def compute(self, base: Number, exponent: Number, **kwargs: Any) -> tuple[str, Number]:
        operation = f"{format_number(base)}^{format_number(exponent)}"
        return operation, self.calculator.power(base, exponent)


class SqrtTool(CalculatorTool):
    name = "sqrt"
    reads = ("number",)

    def compute(self, number: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"√{format_number(number)}", self.calculator.sqrt(number)


class PercentageTool(CalculatorTool):
    name = "percentage"
    reads = ("percentage", "of")

    def compute(self, percentage: Number, of: Number, **kwargs: Any) -> tuple[str, Number]:
        operation = f"{format_number(percentage)}% of {format_number(of)}"
        return operation, self.calculator.percentage(percentage, of)


class FactorialTool(CalculatorTool):
    name = "factorial"
    reads = ("number",)

    def compute(self, number: Number, **kwargs: Any) -> tuple[str, Number]:
        return f"{format_number(number)}!", self.calculator.factorial(number)


class CountCharacterTool(CalculatorTool):
    name = "countCharacter"
    reads = ("character", "text")

    def refine(self, character: str, **kwargs: Any) -> None:
        if len(character) != 1:
            raise InvalidCharacterLength(character)

    def compute(self, character: str, text: str, **kwargs: Any) -> tuple[str, Number]:
        preview = text
        if len(text) > OPERATION_TEXT_PREVIEW:
            preview = text[:OPERATION_TEXT_PREVIEW] + "..."
        operation = f"Count '{character}' in \"{preview}\""
        return operation, self.calculator.count_character(character, text)


def create_calculator_tools(calculator: CalculatorService | None = None) -> list[CalculatorTool]:
    calculator = calculator or CalculatorService()
    return [
        AddTool(calculator),
        SubtractTool(calculator),
        MultiplyTool(calculator),
        DivideTool(calculator),
        PowerTool(calculator),
        SqrtTool(calculator),
        PercentageTool(calculator),
        FactorialTool(calculator),
        CountCharacterTool(calculator),
    ]
