"""
Keypad calculator component.

A pure state machine: each key press maps one KeypadState to the next.
Operators chain, so "2 + 3 *" shows 5 before the next operand is typed.
"""

from __future__ import annotations

import math
from dataclasses import replace

from .models import InvalidStateError, KeypadState, UnknownKeyError

DIGITS = frozenset("0123456789")
OPERATORS = frozenset("+-*/")
ERROR_DISPLAY = "Error"


def format_value(value: float) -> str:
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def apply_operation(left: float, right: float, operation: str) -> float | None:
    """None when dividing by zero."""
    if operation == "+":
        return left + right
    if operation == "-":
        return left - right
    if operation == "*":
        return left * right
    if operation == "/":
        return None if right == 0 else left / right
    return right


def _error_state() -> KeypadState:
    return KeypadState(display=ERROR_DISPLAY, waiting_for_operand=True)


def input_digit(state: KeypadState, digit: str) -> KeypadState:
    if state.waiting_for_operand:
        return replace(state, display=digit, waiting_for_operand=False)
    display = digit if state.display == "0" else state.display + digit
    return replace(state, display=display)


def input_decimal(state: KeypadState) -> KeypadState:
    if state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def perform_operation(state: KeypadState, next_operation: str) -> KeypadState:
    if state.display == ERROR_DISPLAY:
        return state
    # Operator pressed twice in a row: the second one wins
    if state.waiting_for_operand and state.operation:
        return replace(state, operation=next_operation)

    input_value = float(state.display)
    if state.previous_value is None or state.operation is None:
        return KeypadState(
            display=state.display,
            previous_value=input_value,
            operation=next_operation,
            waiting_for_operand=True,
        )

    result = apply_operation(state.previous_value, input_value, state.operation)
    if result is None:
        return _error_state()
    return KeypadState(
        display=format_value(result),
        previous_value=result,
        operation=next_operation,
        waiting_for_operand=True,
    )


def equals(state: KeypadState) -> KeypadState:
    if state.operation is None or state.previous_value is None or state.display == ERROR_DISPLAY:
        return state
    result = apply_operation(state.previous_value, float(state.display), state.operation)
    if result is None:
        return _error_state()
    return KeypadState(display=format_value(result), waiting_for_operand=True)


def backspace(state: KeypadState) -> KeypadState:
    if state.waiting_for_operand:
        return state
    display = state.display[:-1]
    if display in ("", "-"):
        display = "0"
    return replace(state, display=display)


def _check_display(state: KeypadState) -> None:
    if state.display == ERROR_DISPLAY:
        return
    try:
        float(state.display)
    except ValueError:
        raise InvalidStateError(f"Invalid display: {state.display}") from None


def press(state: KeypadState, key: str) -> KeypadState:
    """Apply one key. Raises UnknownKeyError for anything else and
    InvalidStateError when the display is not a number.
    """
    _check_display(state)
    if key in DIGITS:
        return input_digit(state, key)
    if key == ".":
        return input_decimal(state)
    if key in OPERATORS:
        return perform_operation(state, key)
    if key == "=":
        return equals(state)
    if key == "C":
        return KeypadState()
    if key == "backspace":
        return backspace(state)
    raise UnknownKeyError(f"Unknown key: {key}")


def press_sequence(keys: list[str], state: KeypadState | None = None) -> KeypadState:
    current = state or KeypadState()
    for key in keys:
        current = press(current, key)
    return current
