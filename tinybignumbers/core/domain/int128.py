"""
Int128 — 128-bit знаковое целое из двух 64-bit limbs

Immutable Pydantic модель. Значение хранится как two's-complement пара:

    value = (high << 64) | (low & 0xFFFF_FFFF_FFFF_FFFF)

high содержит старшие 64 бита (включая знаковый бит), low — младшие 64 бита.
Оба limbs хранятся как signed 64-bit int (two's-complement битовый паттерн).

Политика переполнения:
- add, subtract, negate, multiply, shift_left — wrap по модулю 2^128 молча
- to_long_exact — ArithmeticOverflow, если значение не помещается в 64 бита
- divide / remainder — DivideByZero при нулевом делителе
"""

import logging
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from tinybignumbers.core.math.errors import ArithmeticOverflow, DivideByZero
from tinybignumbers.core.math.limbs import (
    INT64_MAX,
    INT64_MIN,
    SIGN_EXTEND,
    add_limbs,
    compare_limbs,
    multiply_limbs,
    not_limbs,
    shift_left_limbs,
    shift_right_limbs,
    split_int128,
    validate_int64,
)
from tinybignumbers.core.math.long_division import divmod_limbs

logger = logging.getLogger(__name__)

# Диапазон значений Int128
INT128_MIN_VALUE = -(1 << 127)
INT128_MAX_VALUE = (1 << 127) - 1


# =============================================================================
# INT128 MODEL
# =============================================================================


class Int128(BaseModel):
    """
    128-bit two's-complement знаковое целое.

    Immutable модель (frozen=True): каждая операция возвращает новый
    экземпляр. Равенство структурное по (high, low), модель hashable.
    """

    high: int = Field(..., description="Старшие 64 бита, включая знаковый бит")
    low: int = Field(..., description="Младшие 64 бита (беззнаковый паттерн как signed 64-bit)")

    model_config = {"frozen": True, "strict": True}  # Immutable

    # Кэшированные значения (присваиваются после объявления класса)
    ZERO: ClassVar["Int128"]
    ONE: ClassVar["Int128"]
    NEGATIVE_ONE: ClassVar["Int128"]
    TEN: ClassVar["Int128"]
    MAX_VALUE: ClassVar["Int128"]
    MIN_VALUE: ClassVar["Int128"]

    @field_validator("high", "low")
    @classmethod
    def validate_limb(cls, v: int) -> int:
        """Каждый limb обязан лежать в диапазоне signed 64-bit."""
        validate_int64(v, "limb")
        return v

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def from_long(cls, value: int) -> "Int128":
        """
        Int128 из signed 64-bit int.

        Отрицательные значения расширяются знаком: high = 0xFFFF_FFFF_FFFF_FFFF.
        Для 0, 1, -1 и 10 возвращаются кэшированные экземпляры.

        Raises:
            ValueError: Если value не помещается в signed 64-bit
        """
        validate_int64(value, "value")

        if value == 0:
            return cls.ZERO
        if value == 1:
            return cls.ONE
        if value == -1:
            return cls.NEGATIVE_ONE
        if value == 10:
            return cls.TEN

        if value < 0:
            return cls(high=SIGN_EXTEND, low=value)
        return cls(high=0, low=value)

    @classmethod
    def from_big_int(cls, value: int) -> "Int128":
        """
        Int128 из int произвольной точности (сужающее преобразование).

        Сохраняются младшие 128 бит two's-complement представления value.
        Если value не помещается в 128 бит, старшие биты теряются молча,
        но для |value| < 2^127 преобразование точное, включая -2^127.

        Raises:
            ValueError: Если value не int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"value must be an int, got {value!r}")

        if not INT128_MIN_VALUE <= value <= INT128_MAX_VALUE:
            logger.debug("Narrowing %d to the low 128 bits", value)

        high, low = split_int128(value)
        return cls(high=high, low=low)

    # =========================================================================
    # ИЗВЛЕЧЕНИЕ
    # =========================================================================

    def to_big_int(self) -> int:
        """
        Точное значение как int произвольной точности.

        16 байт (high, low) собираются в big-endian порядке и читаются как
        two's-complement. Точная обратная операция к представлению.
        """
        raw = self.high.to_bytes(8, "big", signed=True) + self.low.to_bytes(8, "big", signed=True)
        return int.from_bytes(raw, "big", signed=True)

    def to_long(self) -> int:
        """
        Младшие 64 бита как signed 64-bit int.

        Аналог сужающего примитивного преобразования: high отбрасывается
        целиком, результат может потерять величину и сменить знак.
        """
        return self.low

    def to_long_exact(self) -> int:
        """
        Значение как signed 64-bit int с проверкой потери информации.

        Raises:
            ArithmeticOverflow: Если значение вне диапазона signed 64-bit
        """
        if self.high == 0 and self.low >= 0:
            return self.low
        if self.high == SIGN_EXTEND and self.low < 0:
            # high является чистым расширением знака low
            return self.low
        raise ArithmeticOverflow("Int128 out of long range")

    # =========================================================================
    # ЗНАК
    # =========================================================================

    def is_zero(self) -> bool:
        return self.high == 0 and self.low == 0

    def is_negative(self) -> bool:
        """Знак читается только из старшего бита high."""
        return self.high < 0

    def signum(self) -> int:
        """
        Returns:
            -1, 0 или 1 для отрицательного, нулевого и положительного значения
        """
        if self.is_zero():
            return 0
        if self.is_negative():
            return -1
        return 1

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Int128") -> "Int128":
        """
        self + other с переносом через четыре 32-bit sub-limbs.

        Прибавление нуля возвращает другой операнд без вычислений.
        """
        if other.is_zero():
            return self
        if self.is_zero():
            return other

        high, low = add_limbs(self.high, self.low, other.high, other.low)
        return Int128(high=high, low=low)

    def subtract(self, other: "Int128") -> "Int128":
        """self - other == self + (-other)"""
        return self.add(other.negate())

    def negate(self) -> "Int128":
        """
        Two's-complement отрицание: one's complement + 1.

        MIN_VALUE.negate() == MIN_VALUE (wrap).
        """
        high, low = not_limbs(self.high, self.low)
        return Int128(high=high, low=low).add(Int128.ONE)

    def abs(self) -> "Int128":
        return self.negate() if self.is_negative() else self

    def multiply(self, other: "Int128") -> "Int128":
        """
        self * other по модулю 2^128.

        Перемножаются модули, знак результата — XOR знаков операндов.
        Нулевой операнд всегда даёт ZERO (не отрицательный ноль).
        """
        magnitude = Int128._multiply_positive(self.abs(), other.abs())
        sig_a = self.signum()
        sig_b = other.signum()
        if sig_a == sig_b or sig_a == 0 or sig_b == 0:
            return magnitude
        return magnitude.negate()

    @staticmethod
    def _multiply_positive(x: "Int128", y: "Int128") -> "Int128":
        # Операнды неотрицательны; биты за 128-м отбрасываются
        if x.is_zero() or y.is_zero():
            return Int128.ZERO
        if x == Int128.ONE:
            return y
        if y == Int128.ONE:
            return x

        high, low = multiply_limbs(x.high, x.low, y.high, y.low)
        return Int128(high=high, low=low)

    def divide(self, other: "Int128") -> "Int128":
        """
        self / other, частное усекается к нулю.

        Деление делегируется int произвольной точности; отдельный путь
        двоичного деления столбиком — long_divide().

        Raises:
            DivideByZero: Если other равен нулю
        """
        if other.is_zero():
            raise DivideByZero("Divide by zero")
        if other == Int128.ONE:
            return self

        logger.debug("Dividing %s by %s through arbitrary-precision int", self, other)
        quotient, _ = _truncating_divmod(self.to_big_int(), other.to_big_int())
        return Int128.from_big_int(quotient)

    def remainder(self, other: "Int128") -> "Int128":
        """
        Остаток от усекающего деления, знак совпадает со знаком self.

        Raises:
            DivideByZero: Если other равен нулю
        """
        if other.is_zero():
            raise DivideByZero("Divide by zero")

        logger.debug("Remainder of %s by %s through arbitrary-precision int", self, other)
        _, remainder = _truncating_divmod(self.to_big_int(), other.to_big_int())
        return Int128.from_big_int(remainder)

    def long_divide(self, other: "Int128") -> "Int128":
        """
        self / other двоичным делением столбиком над limbs.

        Результат совпадает с divide() для любых операндов.

        Raises:
            DivideByZero: Если other равен нулю
        """
        return self.long_divmod(other)[0]

    def long_divmod(self, other: "Int128") -> tuple["Int128", "Int128"]:
        """
        (частное, остаток) двоичным делением столбиком над limbs.

        Raises:
            DivideByZero: Если other равен нулю
        """
        (q_high, q_low), (r_high, r_low) = divmod_limbs(self.high, self.low, other.high, other.low)
        return Int128(high=q_high, low=q_low), Int128(high=r_high, low=r_low)

    # =========================================================================
    # СДВИГИ
    # =========================================================================

    def shift_left(self, n: int) -> "Int128":
        """
        Сдвиг влево на n бит с wrap по 128 битам.

        Биты, вышедшие за 127-й, теряются; n >= 128 даёт ZERO.

        Raises:
            ValueError: Если n отрицательный
        """
        high, low = shift_left_limbs(self.high, self.low, n)
        if n == 0:
            return self
        return Int128(high=high, low=low)

    def shift_right(self, n: int) -> "Int128":
        """
        Арифметический сдвиг вправо (с расширением знака).

        Эквивалентен floor(self / 2^n), как >> для int в Python.

        Raises:
            ValueError: Если n отрицательный
        """
        high, low = shift_right_limbs(self.high, self.low, n, arithmetic=True)
        if n == 0:
            return self
        return Int128(high=high, low=low)

    def shift_right_unsigned(self, n: int) -> "Int128":
        """
        Логический сдвиг вправо: освободившиеся старшие биты заполняются нулями.

        Raises:
            ValueError: Если n отрицательный
        """
        high, low = shift_right_limbs(self.high, self.low, n, arithmetic=False)
        if n == 0:
            return self
        return Int128(high=high, low=low)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "Int128") -> int:
        """
        Полный порядок, согласованный со знаковой 128-bit семантикой.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        return compare_limbs(self.high, self.low, other.high, other.low)

    # =========================================================================
    # ОПЕРАТОРЫ PYTHON
    # =========================================================================

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> "Int128":
        return self.negate()

    def __abs__(self) -> "Int128":
        return self.abs()

    def __lshift__(self, n: int) -> "Int128":
        return self.shift_left(n)

    def __rshift__(self, n: int) -> "Int128":
        return self.shift_right(n)

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.compare(other) >= 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_big_int()

    def __str__(self) -> str:
        return str(self.to_big_int())


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _coerce(value):
    """Операнд оператора → Int128; int приводится через from_big_int."""
    if isinstance(value, Int128):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Int128.from_big_int(value)
    return NotImplemented


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """
    Деление int с усечением к нулю (divmod в Python округляет вниз).

    Returns:
        (q, r) такие что a == q * b + r и знак r совпадает со знаком a
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


# =============================================================================
# КЭШИРОВАННЫЕ ЗНАЧЕНИЯ
# =============================================================================

Int128.ZERO = Int128(high=0, low=0)
Int128.ONE = Int128(high=0, low=1)
Int128.NEGATIVE_ONE = Int128(high=SIGN_EXTEND, low=SIGN_EXTEND)
Int128.TEN = Int128(high=0, low=10)
Int128.MAX_VALUE = Int128(high=INT64_MAX, low=SIGN_EXTEND)
Int128.MIN_VALUE = Int128(high=INT64_MIN, low=0)

ZERO = Int128.ZERO
ONE = Int128.ONE
NEGATIVE_ONE = Int128.NEGATIVE_ONE
TEN = Int128.TEN
MAX_VALUE = Int128.MAX_VALUE
MIN_VALUE = Int128.MIN_VALUE
