"""Unit tests for arithmetic operations."""

import math

import pytest

from pocket_calc import (
    DivisionByZeroError,
    InvalidInputError,
    Operation,
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


class TestBasicArithmetic:
    """Tests for add, subtract and multiply."""

    def test_add(self):
        assert add(2, 3) == 5

    def test_add_floats(self):
        assert abs(add(0.1, 0.2) - 0.3) < 1e-10

    def test_subtract_resulting_negative(self):
        assert subtract(3, 5) == -2

    def test_multiply_two_negatives(self):
        assert multiply(-3, -4) == 12

    def test_multiply_overflow_is_infinite(self):
        assert multiply(1e308, 10) == math.inf


class TestDivide:
    """Tests for the divide functions."""

    def test_divide_with_remainder(self):
        assert divide(7, 2) == 3.5

    def test_divide_by_zero_returns_zero(self):
        assert divide(10, 0) == 0

    def test_divide_zero_by_zero_returns_zero(self):
        assert divide(0, 0) == 0

    def test_divide_by_zero_logs(self, caplog):
        with caplog.at_level("INFO", logger="pocket_calc.operations"):
            divide(10, 0)
        assert "division by zero" in caplog.text

    def test_divide_strict_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide_strict(10, 0)
        assert exc_info.value.numerator == 10
        assert str(exc_info.value) == "Division by zero: 10"


class TestIntegerDivide:
    """Tests for integer_divide."""

    def test_floors_positive(self):
        assert integer_divide(7, 2) == 3

    def test_floors_toward_negative_infinity(self):
        assert integer_divide(-7, 2) == -4

    def test_by_zero_returns_zero(self):
        assert integer_divide(7, 0) == 0

    def test_returns_float(self):
        assert isinstance(integer_divide(9, 3), float)


class TestModulo:
    """Tests for modulo."""

    def test_positive(self):
        assert modulo(7, 3) == 1

    def test_result_takes_divisor_sign(self):
        assert modulo(-7, 3) == 2
        assert modulo(7, -3) == -2

    def test_by_zero_returns_zero(self):
        assert modulo(7, 0) == 0


class TestPower:
    """Tests for power."""

    def test_integer_exponent(self):
        assert power(2, 10) == 1024

    def test_fractional_exponent(self):
        assert power(9, 0.5) == 3

    def test_zero_exponent(self):
        assert power(0, 0) == 1

    def test_overflow_is_infinite(self):
        assert power(10, 400) == math.inf

    def test_negative_base_odd_overflow_is_negative_infinity(self):
        assert power(-10, 401) == -math.inf

    def test_zero_to_negative_power_is_infinite(self):
        assert power(0, -1) == math.inf

    def test_negative_base_fractional_exponent_is_nan(self):
        assert math.isnan(power(-8, 0.5))


class TestSqrt:
    """Tests for sqrt."""

    def test_perfect_square(self):
        assert sqrt(16) == 4

    def test_negative_returns_zero(self):
        assert sqrt(-4) == 0

    def test_second_operand_ignored(self):
        assert sqrt(25, 99) == 5


class TestCompute:
    """Tests for the operator dispatch."""

    @pytest.mark.parametrize(
        ("operation", "expected"),
        [
            (Operation.ADD, 8),
            (Operation.SUBTRACT, 4),
            (Operation.MULTIPLY, 12),
            (Operation.DIVIDE, 3),
            (Operation.MODULO, 0),
            (Operation.POWER, 36),
            (Operation.INTEGER_DIVIDE, 3),
            (Operation.SQRT, math.sqrt(6)),
        ],
    )
    def test_each_operation(self, operation, expected):
        assert compute(6, 2, operation) == pytest.approx(expected)

    def test_accepts_symbol(self):
        assert compute(6, 2, "**") == 36

    def test_divide_by_zero_returns_zero(self):
        assert compute(5, 0, Operation.DIVIDE) == 0

    def test_unknown_symbol_raises(self):
        with pytest.raises(InvalidInputError):
            compute(1, 2, "^")
