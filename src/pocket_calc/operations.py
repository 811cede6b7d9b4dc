"""Arithmetic behind the operator buttons.

None of these functions raise for float inputs: the keypad has no error
state, so undefined results collapse to 0, inf or nan instead.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from pocket_calc.exceptions import DivisionByZeroError
from pocket_calc.state import Operation
from pocket_calc.validators import validate_operation

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Value shown in place of a quotient or remainder with a zero divisor.
ZERO_DIVISOR_RESULT = 0.0


def add(a: float, b: float) -> float:
    """Add two numbers."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Subtract b from a."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Multiply two numbers."""
    return a * b


def divide_strict(a: float, b: float) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def divide(a: float, b: float) -> float:
    """
    Divide a by b, showing 0 when b is zero.

    Properties:
        - Identity: divide(a, 1) == a
        - Zero divisor: divide(a, 0) == 0

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b, or 0 if b is zero
    """
    try:
        return divide_strict(a, b)
    except DivisionByZeroError as e:
        logger.info("Suppressed division by zero of %r", e.numerator)
        return ZERO_DIVISOR_RESULT


def integer_divide(a: float, b: float) -> float:
    """
    Floor of a / b, showing 0 when b is zero.

    Properties:
        - Floor: integer_divide(-7, 2) == -4
        - Zero divisor: integer_divide(a, 0) == 0
    """
    quotient = divide(a, b)
    if not math.isfinite(quotient):
        return quotient

    return float(math.floor(quotient))


def modulo(a: float, b: float) -> float:
    """
    Calculate a modulo b with Python's floored remainder.

    Properties:
        - Sign: the result takes the sign of b
        - Reconstruction: a == (a // b) * b + modulo(a, b)
        - Zero divisor: modulo(a, 0) == 0

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Remainder of a divided by b
    """
    if b == 0:
        logger.info("Suppressed modulo by zero of %r", a)
        return ZERO_DIVISOR_RESULT

    return a % b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Overflow gives a signed infinity, zero to a negative power gives
    infinity, and a result with no real value (negative base with a
    fractional exponent) gives nan.

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent
    """
    if base == 0 and exponent < 0:
        return math.inf

    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd_exponent = float(exponent).is_integer() and exponent % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf
    except ValueError:
        return math.nan


def sqrt(a: float, _ignored: float = 0.0) -> float:
    """Square root of a; negative input gives 0."""
    if a < 0:
        return 0.0

    return math.sqrt(a)


_OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.MODULO: modulo,
    Operation.POWER: power,
    Operation.INTEGER_DIVIDE: integer_divide,
    Operation.SQRT: sqrt,
}


def compute(a: float, b: float, operation: Operation | str) -> float:
    """
    Apply a keypad operator to two operands.

    Args:
        a: Left operand (the stored previous value)
        b: Right operand (the display value); ignored by SQRT
        operation: The operator or its symbol

    Returns:
        The result as a float

    Raises:
        InvalidInputError: If the operator symbol is unknown
    """
    op = validate_operation(operation)
    return float(_OPERATIONS[op](a, b))
