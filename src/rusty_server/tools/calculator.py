"""Calculator tools implementation."""

import logging
import math
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..errors import InvalidParametersError
from .counter import RequestCounter

logger = logging.getLogger(__name__)

DIVISION_BY_ZERO = "Division by zero is not allowed"
UNKNOWN_OPERATION = "Unknown operation. Supported operations: add, subtract, multiply, divide"


class Operation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def parse(cls, text: str) -> Optional["Operation"]:
        """Map any accepted spelling to its operation, ignoring case."""
        return _SYNONYMS.get(text.lower())


_SYNONYMS = {
    "add": Operation.ADD,
    "addition": Operation.ADD,
    "+": Operation.ADD,
    "subtract": Operation.SUBTRACT,
    "subtraction": Operation.SUBTRACT,
    "-": Operation.SUBTRACT,
    "multiply": Operation.MULTIPLY,
    "multiplication": Operation.MULTIPLY,
    "*": Operation.MULTIPLY,
    "divide": Operation.DIVIDE,
    "division": Operation.DIVIDE,
    "/": Operation.DIVIDE,
}


class CalculatorRequest(BaseModel):
    operation: str = Field(description="The operation to perform: add, subtract, multiply, divide")
    a: float = Field(description="The first number")
    b: float = Field(description="The second number")


def format_number(value: float) -> str:
    """Render a float in shortest round-trip form, never in exponent notation.

    Integral values drop the fractional part, so ``5.0`` renders as ``5``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    digits = Decimal(repr(value))
    if value.is_integer():
        digits = digits.to_integral_value()
    return format(digits, "f")


class CalculatorTools:
    """Calculator operations for the MCP server."""

    def __init__(self, counter: RequestCounter):
        self.counter = counter

    def calculate(self, request: CalculatorRequest) -> str:
        """Perform one arithmetic operation and describe it.

        The request is counted before the operation is checked, so rejected
        operations and divisions by zero still show up in the statistics.

        Raises:
            InvalidParametersError: unknown operation or division by zero.
        """
        logger.info(
            f"Calculator tool called - operation: {request.operation}, a: {request.a}, b: {request.b}"
        )
        self.counter.increment()

        a, b = request.a, request.b
        operation = Operation.parse(request.operation)

        if operation is Operation.ADD:
            result = a + b
            logger.debug(f"Addition result: {a} + {b} = {result}")
        elif operation is Operation.SUBTRACT:
            result = a - b
            logger.debug(f"Subtraction result: {a} - {b} = {result}")
        elif operation is Operation.MULTIPLY:
            result = a * b
            logger.debug(f"Multiplication result: {a} * {b} = {result}")
        elif operation is Operation.DIVIDE:
            if b == 0:
                logger.warning("Division by zero attempted")
                raise InvalidParametersError(DIVISION_BY_ZERO)
            result = a / b
            logger.debug(f"Division result: {a} / {b} = {result}")
        else:
            logger.error(f"Unknown operation requested: {request.operation}")
            raise InvalidParametersError(UNKNOWN_OPERATION)

        return f"{format_number(a)} {request.operation} {format_number(b)} = {format_number(result)}"
