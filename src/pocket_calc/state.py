"""Calculator state record and the operator enum."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Operators the keypad can queue, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    POWER = "**"
    INTEGER_DIVIDE = "//"
    SQRT = "sqrt"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of the calculator between two input events.

    ``previous_value`` and ``operation`` are set together when a binary
    operation is pending and are both ``None`` otherwise.
    """

    display: str = "0"
    previous_value: float | None = None
    operation: Operation | None = None
    waiting_for_operand: bool = False

    @property
    def pending(self) -> bool:
        """True when a binary operation is waiting for its right operand."""
        return self.previous_value is not None and self.operation is not None

    @property
    def operand(self) -> float:
        """The display parsed as a number."""
        from pocket_calc.validators import parse_display

        return parse_display(self.display)

    def __str__(self) -> str:
        if self.pending:
            return f"{self.previous_value} {self.operation} [{self.display}]"
        return f"[{self.display}]"


INITIAL_STATE = CalculatorState()
