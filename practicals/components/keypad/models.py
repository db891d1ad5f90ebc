"""Keypad calculator models."""

from __future__ import annotations

from dataclasses import dataclass


class UnknownKeyError(ValueError):
    """Raised for a key the keypad does not have."""


@dataclass(frozen=True)
class KeypadState:
    display: str = "0"
    previous_value: float | None = None
    operation: str | None = None
    waiting_for_operand: bool = False


class InvalidStateError(ValueError):
    """Raised when a posted state has a display that is not a number."""
