"""Kids calculator component."""

from practicals.components.kids_calculator.component import (
    MSG_DIVIDE_BY_ZERO,
    MSG_FIRST_INVALID,
    MSG_INVALID_OPERATION,
    MSG_MISSING_NUMBERS,
    MSG_MISSING_OPERATION,
    MSG_SECOND_INVALID,
    calculate,
    format_number,
    is_valid_number,
    round_result,
    run_calculate,
)
from practicals.components.kids_calculator.models import (
    OPERATION_SYMBOLS,
    CalculateInput,
    CalculateOutput,
    CalculationError,
)

__all__ = [
    "run_calculate",
    "calculate",
    "format_number",
    "is_valid_number",
    "round_result",
    "OPERATION_SYMBOLS",
    "CalculateInput",
    "CalculateOutput",
    "CalculationError",
    "MSG_DIVIDE_BY_ZERO",
    "MSG_FIRST_INVALID",
    "MSG_INVALID_OPERATION",
    "MSG_MISSING_NUMBERS",
    "MSG_MISSING_OPERATION",
    "MSG_SECOND_INVALID",
]
