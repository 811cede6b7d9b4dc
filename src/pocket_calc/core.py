"""Calculator class owning the state of one keypad session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pocket_calc import engine, keypad
from pocket_calc.config import DEFAULT_CONFIG, DisplayConfig
from pocket_calc.formatting import format_display
from pocket_calc.state import INITIAL_STATE, CalculatorState, Operation

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class Calculator:
    """
    A keypad calculator holding a single state record.

    Each input replaces the state with the result of an engine transition.
    Methods return ``self`` so inputs can be chained.

    Example:
        >>> calc = Calculator()
        >>> calc.press_many("3 + 4 × 2 =".split()).display
        '14'
        >>> calc.digit("9").unary("sqrt").display
        '3'
    """

    def __init__(
        self,
        state: CalculatorState = INITIAL_STATE,
        config: DisplayConfig = DEFAULT_CONFIG,
    ) -> None:
        self._state = state
        self._config = config

    @property
    def state(self) -> CalculatorState:
        """The current state record."""
        return self._state

    @property
    def config(self) -> DisplayConfig:
        return self._config

    @property
    def raw_display(self) -> str:
        """Display text before formatting."""
        return self._state.display

    @property
    def display(self) -> str:
        """Display text as it should be rendered."""
        return format_display(self._state.display, self._config)

    def _advance(self, state: CalculatorState) -> Calculator:
        self._state = state
        return self

    def digit(self, digit: str) -> Calculator:
        return self._advance(engine.input_digit(self._state, digit))

    def decimal(self) -> Calculator:
        return self._advance(engine.input_decimal(self._state))

    def operation(self, operation: Operation | str) -> Calculator:
        """Queue a binary operator, evaluating any pending one first."""
        return self._advance(engine.perform_binary_operation(self._state, operation))

    def unary(self, operation: Operation | str = Operation.SQRT) -> Calculator:
        return self._advance(engine.perform_unary_operation(self._state, operation))

    def equals(self) -> Calculator:
        return self._advance(engine.perform_equals(self._state))

    def clear(self) -> Calculator:
        """Reset everything (AC)."""
        return self._advance(engine.clear(self._state))

    def clear_entry(self) -> Calculator:
        """Reset the display only (C)."""
        return self._advance(engine.clear_entry(self._state))

    def press(self, label: str) -> Calculator:
        """Press the button with this label."""
        return self._advance(keypad.press(self._state, label))

    def press_many(self, labels: Iterable[str]) -> Calculator:
        """
        Press a sequence of buttons in order.

        Raises:
            InvalidInputError: On the first unknown label; earlier presses stay applied
        """
        for label in labels:
            self.press(label)
        logger.debug("Display after sequence: %s", self._state.display)
        return self

    def copy(self) -> Calculator:
        """Create an independent copy of this calculator."""
        return Calculator(self._state, self._config)

    def __repr__(self) -> str:
        return f"Calculator(state={self._state!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash(self._state)
