"""Kids calculator models."""

from __future__ import annotations

from dataclasses import dataclass

OPERATION_SYMBOLS = {
    "add": "+",
    "subtract": "-",
    "multiply": "×",
    "divide": "÷",
}


class CalculationError(Exception):
    """Raised by calculate() with a child-friendly message."""


@dataclass(frozen=True)
class CalculateInput:
    number1: str | None
    number2: str | None
    operation: str | None


@dataclass(frozen=True)
class CalculateOutput:
    success: bool
    result: float | None = None
    symbol: str = ""
    expression: str = ""
    error: str | None = None
