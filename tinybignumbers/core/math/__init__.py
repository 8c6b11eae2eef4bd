"""
Core math modules для tinybignumbers

Арифметика над 64-bit limbs, деление столбиком и таксономия ошибок.
"""

# Errors
from tinybignumbers.core.math.errors import ArithmeticOverflow, DivideByZero

# Limbs
from tinybignumbers.core.math.limbs import (
    # Constants
    INT64_MAX,
    INT64_MIN,
    INT128_BITS,
    LIMB_BITS,
    MASK_32,
    MASK_64,
    MASK_128,
    SIGN_EXTEND,
    SUB_LIMB_BITS,
    # Conversions
    is_int64,
    join_sub_limbs,
    split_int128,
    split_sub_limbs,
    to_signed64,
    to_unsigned64,
    validate_int64,
    # Arithmetic
    add_limbs,
    multiply_limbs,
    not_limbs,
    shift_left_limbs,
    shift_right_limbs,
    # Comparisons
    compare_limbs,
    compare_limbs_unsigned,
)

# Long Division
from tinybignumbers.core.math.long_division import divmod_limbs, divmod_unsigned_limbs

__all__ = [
    # Errors
    "ArithmeticOverflow",
    "DivideByZero",
    # Limbs — Constants
    "INT64_MAX",
    "INT64_MIN",
    "INT128_BITS",
    "LIMB_BITS",
    "MASK_32",
    "MASK_64",
    "MASK_128",
    "SIGN_EXTEND",
    "SUB_LIMB_BITS",
    # Limbs — Conversions
    "is_int64",
    "join_sub_limbs",
    "split_int128",
    "split_sub_limbs",
    "to_signed64",
    "to_unsigned64",
    "validate_int64",
    # Limbs — Arithmetic
    "add_limbs",
    "multiply_limbs",
    "not_limbs",
    "shift_left_limbs",
    "shift_right_limbs",
    # Limbs — Comparisons
    "compare_limbs",
    "compare_limbs_unsigned",
    # Long Division
    "divmod_limbs",
    "divmod_unsigned_limbs",
]
