"""Display formatting settings."""

from __future__ import annotations

from dataclasses import dataclass

from pocket_calc.exceptions import InvalidInputError


@dataclass(frozen=True)
class DisplayConfig:
    """
    How numbers are rendered on the display.

    Attributes:
        exponent_threshold: Magnitudes at or above this use exponential notation
        exponent_digits: Fractional digits shown in exponential notation
        decimal_places: Decimals kept before trailing zeros are stripped
    """

    exponent_threshold: float = 1e10
    exponent_digits: int = 6
    decimal_places: int = 8

    def __post_init__(self) -> None:
        if not self.exponent_threshold > 0:
            raise InvalidInputError(self.exponent_threshold, "Threshold must be positive")
        if self.exponent_digits < 0:
            raise InvalidInputError(self.exponent_digits, "Digit count must be non-negative")
        if self.decimal_places < 0:
            raise InvalidInputError(self.decimal_places, "Digit count must be non-negative")


DEFAULT_CONFIG = DisplayConfig()
