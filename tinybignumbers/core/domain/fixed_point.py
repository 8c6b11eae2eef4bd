"""
FixedPoint56Q8 — 64-bit fixed-point с 8 дробными битами

Immutable Pydantic модель над одним signed 64-bit полем raw_bits:
- младшие 8 бит — дробная часть (разрешение 1/256)
- остальные 56 бит (со знаком) — целая часть

Все результаты приводятся к signed 64-bit (wrap по модулю 2^64).
multiply/divide над двумя fixed-point значениями масштабируются обратно
на 2^8, иначе произведение двух Q8 получило бы масштаб 2^16.
"""

import math
from typing import ClassVar, Final

from pydantic import BaseModel, Field, field_validator

from tinybignumbers.core.math.errors import DivideByZero
from tinybignumbers.core.math.limbs import INT64_MAX, to_signed64, validate_int64


# =============================================================================
# ПАРАМЕТРЫ ФОРМАТА Q8
# =============================================================================

# Количество дробных бит
FRACTION_BITS: Final[int] = 8

# Знаменатель дробной части
FRACTION_SCALE: Final[int] = 1 << FRACTION_BITS

# Маски дробной и целой частей (signed 64-bit паттерны)
FRACTION_MASK: Final[int] = 0xFF
WHOLE_MASK: Final[int] = ~FRACTION_MASK


# =============================================================================
# FIXED POINT MODEL
# =============================================================================


class FixedPoint56Q8(BaseModel):
    """
    Fixed-point число: 56 бит целой части, 8 бит дробной.

    Immutable модель (frozen=True). Сложение и вычитание работают
    напрямую над raw_bits, умножение и деление — с масштабированием.
    """

    raw_bits: int = Field(..., description="Сырой signed 64-bit паттерн (value * 256)")

    model_config = {"frozen": True, "strict": True}  # Immutable

    MAX_VALUE: ClassVar["FixedPoint56Q8"]
    MIN_VALUE: ClassVar["FixedPoint56Q8"]

    @field_validator("raw_bits")
    @classmethod
    def validate_raw_bits(cls, v: int) -> int:
        validate_int64(v, "raw_bits")
        return v

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def value_of(cls, value: int | float) -> "FixedPoint56Q8":
        """
        Fixed-point из int или float.

        int: raw = value << 8
        float: raw = round(value * 256)

        Raises:
            ValueError: Если value не int/float или float не конечный
        """
        if isinstance(value, bool):
            raise ValueError(f"value must be int or float, got {value!r}")
        if isinstance(value, int):
            return cls(raw_bits=to_signed64(value << FRACTION_BITS))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"value must be a finite float, got {value}")
            return cls(raw_bits=to_signed64(round(value * FRACTION_SCALE)))
        raise ValueError(f"value must be int or float, got {value!r}")

    @classmethod
    def _of(cls, raw: int) -> "FixedPoint56Q8":
        return cls(raw_bits=to_signed64(raw))

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "FixedPoint56Q8 | int") -> "FixedPoint56Q8":
        """self + other; int операнд масштабируется на 2^8."""
        return self._of(self.raw_bits + _scaled(other))

    def subtract(self, other: "FixedPoint56Q8 | int") -> "FixedPoint56Q8":
        """self - other; int операнд масштабируется на 2^8."""
        return self._of(self.raw_bits - _scaled(other))

    def multiply(self, other: "FixedPoint56Q8 | int") -> "FixedPoint56Q8":
        """
        self * other.

        FixedPoint56Q8: (a.raw * b.raw) >> 8 — произведение возвращается в Q8.
        int: raw * n.
        """
        if isinstance(other, FixedPoint56Q8):
            return self._of((self.raw_bits * other.raw_bits) >> FRACTION_BITS)
        return self._of(self.raw_bits * _plain_int(other))

    def divide(self, other: "FixedPoint56Q8 | int") -> "FixedPoint56Q8":
        """
        self / other, частное усекается к нулю.

        FixedPoint56Q8: (a.raw << 8) / b.raw — делимое масштабируется заранее.
        int: raw / n.

        Raises:
            DivideByZero: Если other равен нулю
        """
        if isinstance(other, FixedPoint56Q8):
            if other.raw_bits == 0:
                raise DivideByZero("Divide by zero")
            return self._of(_truncating_div(self.raw_bits << FRACTION_BITS, other.raw_bits))

        divisor = _plain_int(other)
        if divisor == 0:
            raise DivideByZero("Divide by zero")
        return self._of(_truncating_div(self.raw_bits, divisor))

    def pow(self, exponent: int) -> "FixedPoint56Q8":
        """
        self ** exponent для целого неотрицательного показателя.

        Возведение в квадрат с масштабированием на каждом умножении.

        Raises:
            ValueError: Если exponent отрицательный или не int
        """
        exponent = _plain_int(exponent)
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")

        result = FixedPoint56Q8.value_of(1)
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    # =========================================================================
    # ПОБИТОВЫЕ ОПЕРАЦИИ НАД RAW BITS
    # =========================================================================

    def shift_left(self, n: int) -> "FixedPoint56Q8":
        return self._of(self.raw_bits << _shift_distance(n))

    def shift_right(self, n: int) -> "FixedPoint56Q8":
        """Арифметический сдвиг raw_bits (с расширением знака)."""
        return self._of(self.raw_bits >> _shift_distance(n))

    def and_(self, other: "FixedPoint56Q8") -> "FixedPoint56Q8":
        return self._of(self.raw_bits & other.raw_bits)

    def or_(self, other: "FixedPoint56Q8") -> "FixedPoint56Q8":
        return self._of(self.raw_bits | other.raw_bits)

    def xor(self, other: "FixedPoint56Q8") -> "FixedPoint56Q8":
        return self._of(self.raw_bits ^ other.raw_bits)

    # =========================================================================
    # ИЗВЛЕЧЕНИЕ И СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "FixedPoint56Q8") -> int:
        if self.raw_bits == other.raw_bits:
            return 0
        return -1 if self.raw_bits < other.raw_bits else 1

    def get_whole_part(self) -> int:
        """Целая часть: raw >> 8 (арифметический сдвиг, округление вниз)."""
        return self.raw_bits >> FRACTION_BITS

    def get_fractional_part(self) -> float:
        """
        Дробная часть как доля 1/256.

        Для отрицательных значений дробь знаковая, в (-1, 0]: младшие 8 бит
        накладываются на маску целой части перед делением.

        Examples:
            >>> FixedPoint56Q8.value_of(2.75).get_fractional_part()
            0.75
            >>> FixedPoint56Q8.value_of(-1.5).get_fractional_part()
            -0.5
        """
        fraction = self.raw_bits & FRACTION_MASK
        if self.raw_bits < 0 and fraction:
            return (self.raw_bits | WHOLE_MASK) / FRACTION_SCALE
        return fraction / FRACTION_SCALE

    def to_float(self) -> float:
        return self.raw_bits / FRACTION_SCALE

    # =========================================================================
    # ОПЕРАТОРЫ PYTHON
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, (FixedPoint56Q8, int)) or isinstance(other, bool):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (FixedPoint56Q8, int)) or isinstance(other, bool):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, (FixedPoint56Q8, int)) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (FixedPoint56Q8, int)) or isinstance(other, bool):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "FixedPoint56Q8":
        return self._of(-self.raw_bits)

    def __lt__(self, other) -> bool:
        if not isinstance(other, FixedPoint56Q8):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, FixedPoint56Q8):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, FixedPoint56Q8):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, FixedPoint56Q8):
            return NotImplemented
        return self.compare(other) >= 0

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return str(self.to_float())


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _plain_int(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"operand must be an int or FixedPoint56Q8, got {value!r}")
    return value


def _scaled(other: "FixedPoint56Q8 | int") -> int:
    if isinstance(other, FixedPoint56Q8):
        return other.raw_bits
    return _plain_int(other) << FRACTION_BITS


def _shift_distance(n: int) -> int:
    n = _plain_int(n)
    if n < 0:
        raise ValueError(f"shift distance must be non-negative, got {n}")
    return n


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


# =============================================================================
# ГРАНИЧНЫЕ ЗНАЧЕНИЯ
# =============================================================================

FixedPoint56Q8.MAX_VALUE = FixedPoint56Q8(raw_bits=INT64_MAX)
FixedPoint56Q8.MIN_VALUE = FixedPoint56Q8(raw_bits=-INT64_MAX)
