"""Keypad calculator component."""

from practicals.components.keypad.component import (
    ERROR_DISPLAY,
    apply_operation,
    format_value,
    press,
    press_sequence,
)
from practicals.components.keypad.models import InvalidStateError, KeypadState, UnknownKeyError

__all__ = [
    "press",
    "press_sequence",
    "apply_operation",
    "format_value",
    "ERROR_DISPLAY",
    "InvalidStateError",
    "KeypadState",
    "UnknownKeyError",
]
