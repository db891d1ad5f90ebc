"""
Kids calculator component.

Two numbers and one of four operations, with friendly error messages.
Validation runs in a fixed order and stops at the first failure.
"""

from __future__ import annotations

import math

from .models import OPERATION_SYMBOLS, CalculateInput, CalculateOutput, CalculationError

MSG_MISSING_NUMBERS = "Please enter both numbers! 📝"
MSG_FIRST_INVALID = "First number is not valid! Please enter numbers only. 🔢"
MSG_SECOND_INVALID = "Second number is not valid! Please enter numbers only. 🔢"
MSG_MISSING_OPERATION = "Please select an operation! ➕➖✖️➗"
MSG_DIVIDE_BY_ZERO = "Cannot divide by zero! 🤔"
MSG_INVALID_OPERATION = "Invalid operation selected! 😅"


def is_valid_number(text: str | None) -> bool:
    if text is None:
        return False
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return False
    try:
        value = float(cleaned)
    except ValueError:
        return False
    return math.isfinite(value)


def calculate(num1: float, num2: float, operation: str) -> float:
    if operation == "add":
        return num1 + num2
    if operation == "subtract":
        return num1 - num2
    if operation == "multiply":
        return num1 * num2
    if operation == "divide":
        if num2 == 0:
            raise CalculationError(MSG_DIVIDE_BY_ZERO)
        return num1 / num2
    raise CalculationError(MSG_INVALID_OPERATION)


def round_result(value: float) -> float:
    """Fractional results are kept to two decimals."""
    if value % 1 != 0:
        return round(value, 2)
    return value


def format_number(value: float) -> str:
    """Whole numbers print without a decimal point (12.0 -> "12")."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def run_calculate(inp: CalculateInput) -> CalculateOutput:
    if not inp.number1 or not inp.number2:
        return CalculateOutput(success=False, error=MSG_MISSING_NUMBERS)
    if not is_valid_number(inp.number1):
        return CalculateOutput(success=False, error=MSG_FIRST_INVALID)
    if not is_valid_number(inp.number2):
        return CalculateOutput(success=False, error=MSG_SECOND_INVALID)
    if not inp.operation:
        return CalculateOutput(success=False, error=MSG_MISSING_OPERATION)

    try:
        result = calculate(float(inp.number1), float(inp.number2), inp.operation)
    except CalculationError as e:
        return CalculateOutput(success=False, error=str(e))

    result = round_result(result)
    symbol = OPERATION_SYMBOLS[inp.operation]
    expression = f"{inp.number1} {symbol} {inp.number2} = {format_number(result)}"
    return CalculateOutput(success=True, result=result, symbol=symbol, expression=expression)
