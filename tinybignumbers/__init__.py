"""
tinybignumbers — fixed-width numeric value types

- Int128: 128-bit two's-complement signed integer from two 64-bit limbs
- FixedPoint56Q8: 64-bit fixed-point decimal with 8 fractional bits
"""

from tinybignumbers.core.domain import FixedPoint56Q8, Int128
from tinybignumbers.core.math import ArithmeticOverflow, DivideByZero

__all__ = [
    "Int128",
    "FixedPoint56Q8",
    "ArithmeticOverflow",
    "DivideByZero",
]
