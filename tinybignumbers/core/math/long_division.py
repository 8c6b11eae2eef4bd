"""
Long Division — двоичное деление столбиком над парами limbs

Опциональная альтернатива делению через произвольную точность (Python int).
Алгоритм restoring division: 128 итераций, на каждой остаток сдвигается
влево на один бит, в него вносится очередной бит делимого, и если остаток
не меньше делителя, делитель вычитается и в частное пишется 1.

Семантика знакового варианта совпадает с делением в C99:
- частное усекается к нулю
- знак остатка совпадает со знаком делимого
- MIN_VALUE / -1 переполняется в MIN_VALUE (wrap)
"""

import logging

from tinybignumbers.core.math.errors import DivideByZero
from tinybignumbers.core.math.limbs import (
    INT128_BITS,
    LIMB_BITS,
    add_limbs,
    compare_limbs_unsigned,
    not_limbs,
    shift_left_limbs,
    to_unsigned64,
)

logger = logging.getLogger(__name__)

Limbs = tuple[int, int]


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ОПЕРАЦИИ
# =============================================================================


def _negate(high: int, low: int) -> Limbs:
    inv_high, inv_low = not_limbs(high, low)
    return add_limbs(inv_high, inv_low, 0, 1)


def _subtract(a: Limbs, b: Limbs) -> Limbs:
    neg_high, neg_low = _negate(*b)
    return add_limbs(a[0], a[1], neg_high, neg_low)


def _bit_at(high: int, low: int, index: int) -> int:
    if index >= LIMB_BITS:
        return (to_unsigned64(high) >> (index - LIMB_BITS)) & 1
    return (to_unsigned64(low) >> index) & 1


# =============================================================================
# БЕЗЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_unsigned_limbs(
    n_high: int,
    n_low: int,
    d_high: int,
    d_low: int,
) -> tuple[Limbs, Limbs]:
    """
    Беззнаковое деление 128-bit паттернов.

    Args:
        n_high, n_low: Делимое (беззнаковый паттерн)
        d_high, d_low: Делитель (беззнаковый паттерн)

    Returns:
        ((q_high, q_low), (r_high, r_low))

    Raises:
        DivideByZero: Если делитель равен нулю
    """
    if d_high == 0 and d_low == 0:
        raise DivideByZero("Divide by zero")

    divisor = (d_high, d_low)
    if compare_limbs_unsigned(n_high, n_low, d_high, d_low) < 0:
        return (0, 0), (n_high, n_low)

    quotient: Limbs = (0, 0)
    remainder: Limbs = (0, 0)

    for index in range(INT128_BITS - 1, -1, -1):
        # Старший бит остатка уходит за 128 бит при сдвиге: тогда остаток
        # заведомо не меньше делителя
        overflow = remainder[0] < 0

        remainder = shift_left_limbs(remainder[0], remainder[1], 1)
        if _bit_at(n_high, n_low, index):
            remainder = (remainder[0], remainder[1] | 1)

        quotient = shift_left_limbs(quotient[0], quotient[1], 1)
        if overflow or compare_limbs_unsigned(*remainder, *divisor) >= 0:
            remainder = _subtract(remainder, divisor)
            quotient = (quotient[0], quotient[1] | 1)

    return quotient, remainder


# =============================================================================
# ЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_limbs(
    n_high: int,
    n_low: int,
    d_high: int,
    d_low: int,
) -> tuple[Limbs, Limbs]:
    """
    Знаковое деление 128-bit two's-complement значений.

    Частное усекается к нулю, остаток имеет знак делимого:
        n == q * d + r,  |r| < |d|

    Raises:
        DivideByZero: Если делитель равен нулю
    """
    if d_high == 0 and d_low == 0:
        raise DivideByZero("Divide by zero")

    logger.debug("Long division of (%d, %d) by (%d, %d)", n_high, n_low, d_high, d_low)

    n_negative = n_high < 0
    d_negative = d_high < 0

    # abs(MIN_VALUE) == MIN_VALUE, как беззнаковый паттерн это ровно 2^127
    n_mag = _negate(n_high, n_low) if n_negative else (n_high, n_low)
    d_mag = _negate(d_high, d_low) if d_negative else (d_high, d_low)

    quotient, remainder = divmod_unsigned_limbs(*n_mag, *d_mag)

    if n_negative != d_negative:
        quotient = _negate(*quotient)
    if n_negative:
        remainder = _negate(*remainder)

    return quotient, remainder
