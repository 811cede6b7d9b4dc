"""Errors raised when the keypad is driven with input it has no button for.

Arithmetic itself never raises; these only surface programming errors in
the layer that feeds button presses in.
"""

from typing import Any


class CalculatorError(Exception):
    """Root of the keypad errors; carries the offending input as ``value``."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Zero divisor reaching ``divide_strict``; the keypad path shows 0 instead."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """A digit, operator symbol, key label or display text the keypad cannot use."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
