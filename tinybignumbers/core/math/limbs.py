"""
Limbs — арифметика над 64-bit limbs фиксированной ширины

Модуль содержит чистые функции над парами limbs (high, low), которые вместе
образуют 128-bit two's-complement целое:

    value = (high << 64) | (low & 0xFFFF_FFFF_FFFF_FFFF)

Каждый limb хранится как signed 64-bit int (two's-complement битовый паттерн).
Для переносов каждый limb делится на два 32-bit sub-limbs, перенос
детектируется по выходу суммы за 32 бита.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результирующий limb лежит в [INT64_MIN, INT64_MAX]
2. Сложение, умножение и сдвиги переполняются молча (wrap по модулю 2^128)
3. Знак читается только из старшего бита high, никогда из low
4. Все операции детерминированы и не имеют побочных эффектов
"""

from typing import Final

# =============================================================================
# ШИРИНА И МАСКИ
# =============================================================================

# Ширина одного limb и sub-limb
LIMB_BITS: Final[int] = 64
SUB_LIMB_BITS: Final[int] = 32

# Полная ширина пары limbs
INT128_BITS: Final[int] = 128

# Маски беззнаковых паттернов
MASK_32: Final[int] = 0xFFFF_FFFF
MASK_64: Final[int] = 0xFFFF_FFFF_FFFF_FFFF
MASK_128: Final[int] = (1 << INT128_BITS) - 1

# Диапазон signed 64-bit
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Расширение знака: 0xFFFF_FFFF_FFFF_FFFF как signed 64-bit
SIGN_EXTEND: Final[int] = -1

# Количество sub-limbs в паре limbs
SUB_LIMB_COUNT: Final[int] = INT128_BITS // SUB_LIMB_BITS


# =============================================================================
# ПРЕОБРАЗОВАНИЯ БИТОВЫХ ПАТТЕРНОВ
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, что значение является signed 64-bit int.

    bool отклоняется явно: True/False не являются limbs.
    """
    return isinstance(value, int) and not isinstance(value, bool) and INT64_MIN <= value <= INT64_MAX


def validate_int64(value: int, name: str) -> None:
    """
    Валидация, что значение помещается в signed 64-bit.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или вне [INT64_MIN, INT64_MAX]
    """
    if not is_int64(value):
        raise ValueError(
            f"{name} must be a signed 64-bit integer in [{INT64_MIN}, {INT64_MAX}], got {value!r}"
        )


def to_unsigned64(value: int) -> int:
    """
    Signed 64-bit → беззнаковый паттерн в [0, 2^64).

    Examples:
        >>> to_unsigned64(-1)
        18446744073709551615
        >>> to_unsigned64(5)
        5
    """
    return value & MASK_64


def to_signed64(bits: int) -> int:
    """
    Беззнаковый паттерн → signed 64-bit (лишние старшие биты отбрасываются).

    Examples:
        >>> to_signed64(0xFFFF_FFFF_FFFF_FFFF)
        -1
        >>> to_signed64(1 << 64)
        0
    """
    bits &= MASK_64
    if bits >> (LIMB_BITS - 1):
        return bits - (1 << LIMB_BITS)
    return bits


def split_sub_limbs(high: int, low: int) -> tuple[int, int, int, int]:
    """
    Разбиение пары limbs на четыре 32-bit sub-limbs.

    Порядок: от младшего к старшему (low.lo, low.hi, high.lo, high.hi).
    """
    return (
        low & MASK_32,
        (low >> SUB_LIMB_BITS) & MASK_32,
        high & MASK_32,
        (high >> SUB_LIMB_BITS) & MASK_32,
    )


def join_sub_limbs(parts: tuple[int, int, int, int] | list[int]) -> tuple[int, int]:
    """
    Сборка пары limbs из четырёх 32-bit sub-limbs (младший первым).

    Returns:
        (high, low) как signed 64-bit
    """
    low = ((parts[1] & MASK_32) << SUB_LIMB_BITS) | (parts[0] & MASK_32)
    high = ((parts[3] & MASK_32) << SUB_LIMB_BITS) | (parts[2] & MASK_32)
    return to_signed64(high), to_signed64(low)


def split_int128(value: int) -> tuple[int, int]:
    """
    Младшие 128 бит произвольного int → пара limbs.

    Берётся two's-complement паттерн value напрямую (value & MASK_128),
    без промежуточного abs(): -2^127 не требует отдельной обработки.
    """
    bits = value & MASK_128
    return to_signed64(bits >> LIMB_BITS), to_signed64(bits)


# =============================================================================
# СЛОЖЕНИЕ И ПОБИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add_limbs(a_high: int, a_low: int, b_high: int, b_low: int) -> tuple[int, int]:
    """
    Сложение двух пар limbs с явным переносом через 32-bit sub-limbs.

    Перенос из старшего sub-limb отбрасывается (wrap по модулю 2^128).

    Examples:
        >>> add_limbs(0, -1, 0, 1)  # 0xFFFF_FFFF_FFFF_FFFF + 1
        (1, 0)
        >>> add_limbs(-1, -1, 0, 1)  # -1 + 1
        (0, 0)
    """
    a_parts = split_sub_limbs(a_high, a_low)
    b_parts = split_sub_limbs(b_high, b_low)

    result = []
    carry = 0
    for x, y in zip(a_parts, b_parts):
        column = x + y + carry
        result.append(column & MASK_32)
        carry = column >> SUB_LIMB_BITS

    return join_sub_limbs(result)


def not_limbs(high: int, low: int) -> tuple[int, int]:
    """One's complement обоих limbs."""
    return ~high, ~low


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_limbs(a_high: int, a_low: int, b_high: int, b_low: int) -> tuple[int, int]:
    """
    Школьное умножение пар limbs как беззнаковых 128-bit паттернов.

    Каждое произведение sub-limbs x[i] * y[j] с i + j < 4 прибавляется в
    колонку i + j, перенос распространяется в следующую колонку. Всё, что
    выходит за 128 бит, отбрасывается.

    Для пар, которые являются неотрицательными magnitudes, результат
    совпадает с точным произведением по модулю 2^128.
    """
    x = split_sub_limbs(a_high, a_low)
    y = split_sub_limbs(b_high, b_low)

    columns = [0] * SUB_LIMB_COUNT
    for i in range(SUB_LIMB_COUNT):
        if x[i] == 0:
            continue
        carry = 0
        for j in range(SUB_LIMB_COUNT - i):
            column = columns[i + j] + x[i] * y[j] + carry
            columns[i + j] = column & MASK_32
            carry = column >> SUB_LIMB_BITS
        # перенос за 128-й бит отбрасывается

    return join_sub_limbs(columns)


# =============================================================================
# СДВИГИ
# =============================================================================


def _validate_shift(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"shift distance must be an int, got {n!r}")
    if n < 0:
        raise ValueError(f"shift distance must be non-negative, got {n}")


def shift_left_limbs(high: int, low: int, n: int) -> tuple[int, int]:
    """
    Сдвиг влево на n бит с wrap по 128 битам.

    - n == 0: без изменений
    - n == 64: (low, 0)
    - 64 < n < 128: (low << (n - 64), 0), биты за 63-м отбрасываются
    - 0 < n < 64: старшие n бит low переходят в младшие n бит high
    - n >= 128: (0, 0)

    Raises:
        ValueError: Если n отрицательный или не int
    """
    _validate_shift(n)

    if n == 0:
        return high, low
    if n >= INT128_BITS:
        return 0, 0
    if n == LIMB_BITS:
        return low, 0
    if n > LIMB_BITS:
        return to_signed64(to_unsigned64(low) << (n - LIMB_BITS)), 0

    carried = to_unsigned64(low) >> (LIMB_BITS - n)
    new_high = to_signed64((to_unsigned64(high) << n) | carried)
    new_low = to_signed64(to_unsigned64(low) << n)
    return new_high, new_low


def shift_right_limbs(high: int, low: int, n: int, arithmetic: bool = True) -> tuple[int, int]:
    """
    Сдвиг вправо на n бит.

    Args:
        high: Старший limb
        low: Младший limb
        n: Дистанция сдвига (>= 0)
        arithmetic: True — знаковый сдвиг (освободившиеся биты заполняются
            знаковым битом high), False — логический (заполнение нулями)

    Returns:
        (high, low) после сдвига

    Raises:
        ValueError: Если n отрицательный или не int
    """
    _validate_shift(n)

    if n == 0:
        return high, low

    fill = SIGN_EXTEND if arithmetic and high < 0 else 0

    if n >= INT128_BITS:
        return fill, fill

    if n >= LIMB_BITS:
        distance = n - LIMB_BITS
        if arithmetic:
            new_low = high >> distance
        else:
            new_low = to_signed64(to_unsigned64(high) >> distance)
        return fill, new_low

    borrowed = to_unsigned64(high) << (LIMB_BITS - n)
    new_low = to_signed64((to_unsigned64(low) >> n) | borrowed)
    if arithmetic:
        new_high = high >> n
    else:
        new_high = to_signed64(to_unsigned64(high) >> n)
    return new_high, new_low


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def compare_limbs(a_high: int, a_low: int, b_high: int, b_low: int) -> int:
    """
    Знаковое сравнение двух 128-bit значений.

    high сравнивается как signed, low как unsigned.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a_high != b_high:
        return -1 if a_high < b_high else 1
    return compare_limbs_unsigned(0, a_low, 0, b_low)


def compare_limbs_unsigned(a_high: int, a_low: int, b_high: int, b_low: int) -> int:
    """Беззнаковое сравнение двух 128-bit паттернов."""
    a_key = (to_unsigned64(a_high), to_unsigned64(a_low))
    b_key = (to_unsigned64(b_high), to_unsigned64(b_low))
    if a_key == b_key:
        return 0
    return -1 if a_key < b_key else 1
