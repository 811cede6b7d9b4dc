"""
Pocket calculator: the arithmetic state machine behind a keypad widget.

A presentation layer binds buttons to ``Calculator.press`` and renders
``Calculator.display``. The transitions themselves are pure functions in
``pocket_calc.engine`` working on immutable ``CalculatorState`` records.
"""

import logging

from pocket_calc.config import DEFAULT_CONFIG, DisplayConfig
from pocket_calc.core import Calculator
from pocket_calc.engine import (
    clear,
    clear_entry,
    input_decimal,
    input_digit,
    perform_binary_operation,
    perform_equals,
    perform_unary_operation,
)
from pocket_calc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
)
from pocket_calc.formatting import format_display, number_to_display
from pocket_calc.keypad import KEYPAD_LAYOUT, KEYS, Key, KeyKind, press
from pocket_calc.operations import (
    add,
    compute,
    divide,
    divide_strict,
    integer_divide,
    modulo,
    multiply,
    power,
    sqrt,
    subtract,
)
from pocket_calc.state import INITIAL_STATE, CalculatorState, Operation
from pocket_calc.validators import parse_display, validate_digit, validate_operation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "INITIAL_STATE",
    "KEYPAD_LAYOUT",
    "KEYS",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "DisplayConfig",
    "DivisionByZeroError",
    "InvalidInputError",
    "Key",
    "KeyKind",
    "Operation",
    "add",
    "clear",
    "clear_entry",
    "compute",
    "divide",
    "divide_strict",
    "format_display",
    "input_decimal",
    "input_digit",
    "integer_divide",
    "modulo",
    "multiply",
    "number_to_display",
    "parse_display",
    "perform_binary_operation",
    "perform_equals",
    "perform_unary_operation",
    "power",
    "press",
    "sqrt",
    "subtract",
    "validate_digit",
    "validate_operation",
]

__version__ = "0.1.0"
