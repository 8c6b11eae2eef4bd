"""
Domain value types.

Immutable numeric value objects: Int128 and FixedPoint56Q8.
"""

from tinybignumbers.core.domain.fixed_point import (
    FRACTION_BITS,
    FRACTION_MASK,
    FRACTION_SCALE,
    WHOLE_MASK,
    FixedPoint56Q8,
)
from tinybignumbers.core.domain.int128 import (
    INT128_MAX_VALUE,
    INT128_MIN_VALUE,
    MAX_VALUE,
    MIN_VALUE,
    NEGATIVE_ONE,
    ONE,
    TEN,
    ZERO,
    Int128,
)

__all__ = [
    # Int128 model
    "Int128",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "TEN",
    "MAX_VALUE",
    "MIN_VALUE",
    "INT128_MAX_VALUE",
    "INT128_MIN_VALUE",
    # FixedPoint56Q8 model
    "FixedPoint56Q8",
    "FRACTION_BITS",
    "FRACTION_SCALE",
    "FRACTION_MASK",
    "WHOLE_MASK",
]
