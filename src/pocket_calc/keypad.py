"""The button grid and the dispatch from button labels to transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from pocket_calc import engine
from pocket_calc.exceptions import InvalidInputError
from pocket_calc.state import CalculatorState, Operation

logger = logging.getLogger(__name__)


class KeyKind(Enum):
    """Which transition a button triggers."""

    DIGIT = "digit"
    DECIMAL = "decimal"
    BINARY = "binary"
    UNARY = "unary"
    EQUALS = "equals"
    CLEAR = "clear"
    CLEAR_ENTRY = "clear_entry"


@dataclass(frozen=True)
class Key:
    """One button: its face label, its action and how many columns it spans."""

    label: str
    kind: KeyKind
    argument: str | Operation | None = None
    span: int = 1


def _digit(d: str, span: int = 1) -> Key:
    return Key(d, KeyKind.DIGIT, d, span)


KEYPAD_COLUMNS = 4

KEYPAD_LAYOUT: tuple[tuple[Key, ...], ...] = (
    (
        Key("AC", KeyKind.CLEAR, span=2),
        Key("%", KeyKind.BINARY, Operation.MODULO),
        Key("÷", KeyKind.BINARY, Operation.DIVIDE),
    ),
    (_digit("7"), _digit("8"), _digit("9"), Key("×", KeyKind.BINARY, Operation.MULTIPLY)),
    (_digit("4"), _digit("5"), _digit("6"), Key("-", KeyKind.BINARY, Operation.SUBTRACT)),
    (_digit("1"), _digit("2"), _digit("3"), Key("+", KeyKind.BINARY, Operation.ADD)),
    (_digit("0", span=2), Key(".", KeyKind.DECIMAL), Key("=", KeyKind.EQUALS)),
    (
        Key("√", KeyKind.UNARY, Operation.SQRT),
        # x² queues POWER; the exponent is typed next.
        Key("x²", KeyKind.BINARY, Operation.POWER),
        Key("÷/", KeyKind.BINARY, Operation.INTEGER_DIVIDE),
        Key("C", KeyKind.CLEAR_ENTRY),
    ),
)

KEY_ALIASES = {
    "*": "×",
    "/": "÷",
    "//": "÷/",
    "**": "x²",
    "sqrt": "√",
    "Enter": "=",
    "Escape": "AC",
}

KEYS: dict[str, Key] = {key.label: key for row in KEYPAD_LAYOUT for key in row}


def lookup(label: str) -> Key:
    """
    Find the button for a face label or keyboard alias.

    Raises:
        InvalidInputError: If no button matches
    """
    key = KEYS.get(KEY_ALIASES.get(label, label))
    if key is None:
        raise InvalidInputError(label, "Unknown key")
    return key


def press(state: CalculatorState, label: str) -> CalculatorState:
    """
    Apply one button press.

    Args:
        state: Current state
        label: Button face label, or an alias from ``KEY_ALIASES``

    Returns:
        The next state

    Raises:
        InvalidInputError: If the label names no button
    """
    key = lookup(label)
    logger.debug("Pressed %s", key.label)

    if key.kind is KeyKind.DIGIT:
        return engine.input_digit(state, key.argument)
    if key.kind is KeyKind.DECIMAL:
        return engine.input_decimal(state)
    if key.kind is KeyKind.BINARY:
        return engine.perform_binary_operation(state, key.argument)
    if key.kind is KeyKind.UNARY:
        return engine.perform_unary_operation(state, key.argument)
    if key.kind is KeyKind.EQUALS:
        return engine.perform_equals(state)
    if key.kind is KeyKind.CLEAR:
        return engine.clear(state)
    return engine.clear_entry(state)
