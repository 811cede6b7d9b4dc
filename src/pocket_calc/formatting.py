"""Turning numbers into display text."""

from __future__ import annotations

import math

from pocket_calc.config import DEFAULT_CONFIG, DisplayConfig

# Integral floats below this render as plain integers.
_PLAIN_INTEGER_LIMIT = 1e21


def number_to_display(value: float) -> str:
    """
    Stringify a result for the display.

    Integral values drop the fractional part ("14", not "14.0") and negative
    zero shows as "0". Non-finite values use the spellings ``float()`` reads
    back: "NaN", "Infinity" and "-Infinity".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def format_display(value: str, config: DisplayConfig = DEFAULT_CONFIG) -> str:
    """
    Render display text for presentation.

    Large magnitudes switch to exponential notation and everything else is
    rounded to ``config.decimal_places`` with trailing zeros removed.

    Args:
        value: Raw display text
        config: Formatting thresholds

    Returns:
        The text to show; input that is not a number comes back unchanged

    Example:
        >>> format_display("12345678901")
        '1.234568e+10'
        >>> format_display("0.30000000000000004")
        '0.3'
        >>> format_display("5e-05")
        '0.00005'
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return value

    if math.isnan(number):
        return value
    if math.isinf(number):
        return number_to_display(number)

    if abs(number) >= config.exponent_threshold:
        mantissa, exponent = f"{number:.{config.exponent_digits}e}".split("e")
        return f"{mantissa}e{int(exponent):+d}"

    text = f"{number:.{config.decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Rounded-away values such as -0.000000001 leave a bare sign.
    if text in ("", "-", "-0"):
        return "0"
    return text
