"""
Тесты для модели FixedPoint56Q8

Проверяет:
1. Конструирование value_of(int / float) и валидацию raw_bits
2. Сложение и вычитание над raw bits (включая int операнды)
3. Масштабированные умножение, деление и возведение в степень
4. Целую и дробную части (включая отрицательные значения)
5. Побитовые операции, сдвиги, сравнение и операторы
6. Wrap по signed 64-bit
"""

import pytest
from pydantic import ValidationError

from tinybignumbers.core.domain import FRACTION_SCALE, FixedPoint56Q8
from tinybignumbers.core.math import DivideByZero

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def fp(value: int | float) -> FixedPoint56Q8:
    return FixedPoint56Q8.value_of(value)


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestValueOf:
    """Тесты value_of и модели"""

    def test_from_int(self) -> None:
        """raw = value << 8"""
        assert fp(3).raw_bits == 768
        assert fp(-2).raw_bits == -512

    def test_from_float_rounds(self) -> None:
        """raw = round(value * 256)"""
        assert fp(1.5).raw_bits == 384
        assert fp(0.001).raw_bits == 0
        assert fp(0.003).raw_bits == 1

    def test_non_finite_float_raises(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            fp(float("nan"))

        with pytest.raises(ValueError, match="finite"):
            fp(float("inf"))

    def test_invalid_type_raises(self) -> None:
        with pytest.raises(ValueError, match="int or float"):
            FixedPoint56Q8.value_of("1.5")

        with pytest.raises(ValueError, match="int or float"):
            FixedPoint56Q8.value_of(True)

    def test_raw_bits_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            FixedPoint56Q8(raw_bits=1 << 63)

    def test_immutability(self) -> None:
        value = fp(1)
        with pytest.raises(ValidationError):
            value.raw_bits = 0

    def test_bounds(self) -> None:
        assert FixedPoint56Q8.MAX_VALUE.raw_bits == INT64_MAX
        assert FixedPoint56Q8.MIN_VALUE.raw_bits == -INT64_MAX


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestAddSubtract:
    """Тесты add / subtract"""

    def test_add(self) -> None:
        assert fp(1.5).add(fp(2.25)) == fp(3.75)

    def test_add_int_scaled(self) -> None:
        assert fp(1.5).add(2) == fp(3.5)

    def test_subtract(self) -> None:
        assert fp(1.5).subtract(fp(2.25)) == fp(-0.75)
        assert fp(1.5).subtract(1) == fp(0.5)

    def test_add_wraps(self) -> None:
        assert FixedPoint56Q8.MAX_VALUE.add(FixedPoint56Q8(raw_bits=1)).raw_bits == INT64_MIN


class TestMultiplyDivide:
    """Тесты масштабированных multiply / divide"""

    def test_multiply_rescales(self) -> None:
        """1.5 * 2.0 == 3.0, а не 3.0 * 256"""
        assert fp(1.5).multiply(fp(2.0)) == fp(3.0)
        assert fp(-1.5).multiply(fp(2.0)) == fp(-3.0)
        assert fp(0.5).multiply(fp(0.5)) == fp(0.25)

    def test_multiply_int(self) -> None:
        assert fp(1.5).multiply(3) == fp(4.5)

    def test_divide_rescales(self) -> None:
        assert fp(3.0).divide(fp(2.0)) == fp(1.5)
        assert fp(-3.0).divide(fp(2.0)) == fp(-1.5)
        assert fp(1).divide(fp(4)) == fp(0.25)

    def test_divide_int(self) -> None:
        assert fp(3).divide(2) == fp(1.5)

    def test_divide_truncates_toward_zero(self) -> None:
        """-1/256 / 2 → 0"""
        assert FixedPoint56Q8(raw_bits=-1).divide(2).raw_bits == 0

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(DivideByZero, match="Divide by zero"):
            fp(1).divide(fp(0))

        with pytest.raises(DivideByZero):
            fp(1).divide(0)

    def test_pow(self) -> None:
        assert fp(1.5).pow(2) == fp(2.25)
        assert fp(2).pow(10) == fp(1024)
        assert fp(7.25).pow(0) == fp(1)
        assert fp(-2).pow(3) == fp(-8)

    def test_pow_negative_exponent_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            fp(2).pow(-1)


# =============================================================================
# ТЕСТЫ ЦЕЛОЙ И ДРОБНОЙ ЧАСТЕЙ
# =============================================================================


class TestParts:
    """Тесты get_whole_part / get_fractional_part"""

    def test_positive(self) -> None:
        value = fp(2.75)
        assert value.get_whole_part() == 2
        assert value.get_fractional_part() == 0.75

    def test_whole_part_floors(self) -> None:
        """raw >> 8 — арифметический сдвиг"""
        assert fp(-1.5).get_whole_part() == -2
        assert fp(-2).get_whole_part() == -2

    def test_negative_fraction_signed(self) -> None:
        assert fp(-1.5).get_fractional_part() == -0.5
        assert fp(-0.25).get_fractional_part() == -0.25
        assert FixedPoint56Q8(raw_bits=-1).get_fractional_part() == -1 / FRACTION_SCALE

    def test_negative_integral_has_zero_fraction(self) -> None:
        assert fp(-2).get_fractional_part() == 0.0

    def test_to_float_and_str(self) -> None:
        assert fp(1.5).to_float() == 1.5
        assert float(fp(-0.25)) == -0.25
        assert str(fp(1.5)) == "1.5"


# =============================================================================
# ТЕСТЫ ПОБИТОВЫХ ОПЕРАЦИЙ И ОПЕРАТОРОВ
# =============================================================================


class TestBitwiseAndOperators:
    """Тесты сдвигов, побитовых операций, compare и операторов"""

    def test_shifts(self) -> None:
        assert fp(1).shift_left(1) == fp(2)
        assert fp(-2).shift_right(1) == fp(-1)

    def test_negative_shift_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            fp(1).shift_left(-1)

    def test_bitwise(self) -> None:
        a = FixedPoint56Q8(raw_bits=0b1100)
        b = FixedPoint56Q8(raw_bits=0b1010)
        assert a.and_(b).raw_bits == 0b1000
        assert a.or_(b).raw_bits == 0b1110
        assert a.xor(b).raw_bits == 0b0110

    def test_compare(self) -> None:
        assert fp(1).compare(fp(2)) == -1
        assert fp(2).compare(fp(2)) == 0
        assert fp(-1).compare(fp(-2)) == 1

    def test_operators(self) -> None:
        assert fp(1.5) + fp(1) == fp(2.5)
        assert fp(1.5) - 1 == fp(0.5)
        assert fp(1.5) * fp(2) == fp(3)
        assert fp(3) / fp(2) == fp(1.5)
        assert -fp(1.5) == fp(-1.5)
        assert fp(1) < fp(1.5)
        assert fp(2) >= fp(2)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            fp(1) + 1.5
