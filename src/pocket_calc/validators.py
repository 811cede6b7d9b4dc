"""Input validation for keypad events and display text."""

from __future__ import annotations

from pocket_calc.exceptions import InvalidInputError
from pocket_calc.state import Operation

DIGITS = frozenset("0123456789")


def validate_digit(digit: str) -> str:
    """
    Validate a single decimal digit.

    Args:
        digit: The character produced by a digit button

    Returns:
        The validated digit

    Raises:
        InvalidInputError: If digit is not exactly one of "0"-"9"
    """
    if not isinstance(digit, str):
        raise InvalidInputError(digit, f"Expected digit string, got {type(digit).__name__}")

    if len(digit) != 1 or digit not in DIGITS:
        raise InvalidInputError(digit, "Expected a single digit 0-9")

    return digit


def validate_operation(operation: Operation | str) -> Operation:
    """
    Resolve an operator given as an ``Operation`` or its symbol.

    Raises:
        InvalidInputError: If the symbol names no known operator
    """
    if isinstance(operation, Operation):
        return operation

    try:
        return Operation(operation)
    except ValueError as e:
        raise InvalidInputError(operation, "Unknown operator") from e


def parse_display(display: str) -> float:
    """
    Parse display text the way the calculator reads its operand.

    Transient entries such as ``"3."`` parse to their numeric prefix.
    ``"NaN"`` and ``"Infinity"`` parse to the matching float values.

    Raises:
        InvalidInputError: If the text is not a number
    """
    try:
        return float(display)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(display, "Display is not a number") from e
