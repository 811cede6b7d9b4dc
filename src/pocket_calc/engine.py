"""
State transitions driven by keypad input.

Every function takes the current ``CalculatorState`` and returns the next
one. States are immutable, so a transition never changes its input.

Example:
    >>> from pocket_calc.state import INITIAL_STATE, Operation
    >>> state = input_digit(INITIAL_STATE, "3")
    >>> state = perform_binary_operation(state, Operation.ADD)
    >>> state = input_digit(state, "4")
    >>> perform_equals(state).display
    '7'
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from pocket_calc.formatting import number_to_display
from pocket_calc.operations import compute, sqrt
from pocket_calc.state import INITIAL_STATE, CalculatorState, Operation
from pocket_calc.validators import validate_digit, validate_operation

logger = logging.getLogger(__name__)


def input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    """
    Enter one digit.

    After an operator or result the digit starts a new number; otherwise it
    is appended, replacing a lone "0".

    Raises:
        InvalidInputError: If digit is not a single character 0-9
    """
    validate_digit(digit)

    if state.waiting_for_operand:
        return replace(state, display=digit, waiting_for_operand=False)

    display = digit if state.display == "0" else state.display + digit
    return replace(state, display=display)


def input_decimal(state: CalculatorState) -> CalculatorState:
    """Enter the decimal point; a second point in the same number is ignored."""
    if state.waiting_for_operand:
        return replace(state, display="0.", waiting_for_operand=False)

    if "." in state.display:
        return state

    return replace(state, display=state.display + ".")


def clear(state: CalculatorState | None = None) -> CalculatorState:
    """All clear: back to the initial state whatever came before."""
    logger.debug("All clear from %s", state)
    return INITIAL_STATE


def clear_entry(state: CalculatorState) -> CalculatorState:
    """Clear the display only, keeping any pending operation."""
    logger.debug("Clear entry from %s", state)
    return replace(state, display="0")


def perform_binary_operation(
    state: CalculatorState, operation: Operation | str
) -> CalculatorState:
    """
    Queue a binary operator.

    With nothing pending the display value becomes the left operand. With an
    operation already pending it is evaluated first and its result becomes
    the left operand of the new operator, so ``3 + 4 *`` shows 7.

    Args:
        state: Current state
        operation: Operator to queue, or its symbol

    Returns:
        The next state, waiting for the right operand

    Raises:
        InvalidInputError: If the operator symbol is unknown
    """
    op = validate_operation(operation)
    value = state.operand

    if state.previous_value is None:
        logger.debug("Queued %s with left operand %r", op, value)
        return replace(
            state,
            previous_value=value,
            operation=op,
            waiting_for_operand=True,
        )

    if state.operation is None:
        return state

    # A NaN left operand restarts the chain from 0.
    left = 0.0 if math.isnan(state.previous_value) else state.previous_value
    result = compute(left, value, state.operation)
    logger.debug(
        "Chained %r %s %r = %r, queued %s",
        left,
        state.operation,
        value,
        result,
        op,
    )
    return replace(
        state,
        display=number_to_display(result),
        previous_value=result,
        operation=op,
        waiting_for_operand=True,
    )


def perform_unary_operation(
    state: CalculatorState, operation: Operation | str = Operation.SQRT
) -> CalculatorState:
    """
    Apply a one-operand operator to the display immediately.

    Only SQRT acts on the value; a negative radicand gives 0. Any pending
    binary operation is left in place.
    """
    op = validate_operation(operation)
    value = state.operand
    result = sqrt(value) if op is Operation.SQRT else value

    logger.debug("Applied %s to %r = %r", op, value, result)
    return replace(state, display=number_to_display(result), waiting_for_operand=True)


def perform_equals(state: CalculatorState) -> CalculatorState:
    """Evaluate the pending operation; with none pending the state is returned as is."""
    if not state.pending:
        return state

    value = state.operand
    result = compute(state.previous_value, value, state.operation)
    logger.debug("Evaluated %r %s %r = %r", state.previous_value, state.operation, value, result)
    return replace(
        state,
        display=number_to_display(result),
        previous_value=None,
        operation=None,
        waiting_for_operand=True,
    )
