"""
Property-тесты Int128 (hypothesis)

Каждое свойство сверяется с эталоном на int произвольной точности,
приведённым к 128 битам по модулю 2^128.
"""

import pytest
from hypothesis import example, given, settings
from hypothesis import strategies as st

from tinybignumbers.core.domain import ZERO, Int128
from tinybignumbers.core.math import DivideByZero

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
INT128_MIN = -(1 << 127)
INT128_MAX = (1 << 127) - 1

int64s = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)
int128s = st.integers(min_value=INT128_MIN, max_value=INT128_MAX)
values = int128s.map(Int128.from_big_int)


def wrap128(value: int) -> int:
    """Эталон: int → знаковое 128-bit значение по модулю 2^128."""
    return ((value - INT128_MIN) % (1 << 128)) + INT128_MIN


# =============================================================================
# ROUND-TRIP
# =============================================================================


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(v=int64s)
@example(v=INT64_MIN)
@example(v=INT64_MAX)
@example(v=0)
def test_long_round_trip(v: int) -> None:
    value = Int128.from_long(v)
    assert value.to_long() == v
    assert value.to_long_exact() == v
    assert value.to_big_int() == v


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(b=st.integers(min_value=INT128_MIN + 1, max_value=INT128_MAX))
@example(b=INT128_MAX)
def test_big_int_round_trip(b: int) -> None:
    assert Int128.from_big_int(b).to_big_int() == b


@pytest.mark.fuzzing
@settings(max_examples=100)
@given(b=st.integers(min_value=-(1 << 200), max_value=1 << 200))
def test_big_int_narrowing_keeps_low_bits(b: int) -> None:
    assert Int128.from_big_int(b).to_big_int() == wrap128(b)


# =============================================================================
# NEGATION
# =============================================================================


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(x=values)
@example(x=Int128.from_big_int(INT128_MIN))
def test_negation_involution(x: Int128) -> None:
    assert x.negate().negate() == x


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(v=st.integers(min_value=0, max_value=INT64_MAX))
def test_negation_of_long(v: int) -> None:
    assert Int128.from_long(v).negate().to_long() == -v


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(x=values)
def test_negate_matches_reference(x: Int128) -> None:
    assert x.negate().to_big_int() == wrap128(-x.to_big_int())


# =============================================================================
# ADDITION / MULTIPLICATION
# =============================================================================


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(x=values)
def test_additive_identity(x: Int128) -> None:
    assert x.add(ZERO) == x
    assert ZERO.add(x) == x


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(a=int128s, b=int128s)
def test_add_and_subtract_wrap(a: int, b: int) -> None:
    x = Int128.from_big_int(a)
    y = Int128.from_big_int(b)
    assert x.add(y).to_big_int() == wrap128(a + b)
    assert x.subtract(y).to_big_int() == wrap128(a - b)


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(p=int64s, q=int64s)
@example(p=7, q=-3)
@example(p=INT64_MIN, q=INT64_MIN)
def test_multiply_longs(p: int, q: int) -> None:
    product = Int128.from_long(p).multiply(Int128.from_long(q))
    assert product.to_big_int() == p * q


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(a=int128s, b=int128s)
def test_multiply_wraps(a: int, b: int) -> None:
    product = Int128.from_big_int(a).multiply(Int128.from_big_int(b))
    assert product.to_big_int() == wrap128(a * b)


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(x=values)
def test_zero_absorption(x: Int128) -> None:
    assert x.multiply(ZERO) == ZERO
    assert ZERO.multiply(x) == ZERO


# =============================================================================
# DIVISION
# =============================================================================


@pytest.mark.fuzzing
@settings(max_examples=100)
@given(x=values)
def test_divide_by_zero(x: Int128) -> None:
    with pytest.raises(DivideByZero):
        x.divide(ZERO)


@pytest.mark.fuzzing
@settings(max_examples=100)
@given(a=int128s, b=int128s.filter(lambda v: v != 0))
def test_long_division_matches_fallback(a: int, b: int) -> None:
    x = Int128.from_big_int(a)
    y = Int128.from_big_int(b)
    quotient, remainder = x.long_divmod(y)
    assert quotient == x.divide(y)
    assert remainder == x.remainder(y)
    assert wrap128(quotient.to_big_int() * b + remainder.to_big_int()) == a


# =============================================================================
# SHIFTS / ORDERING
# =============================================================================


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(a=int128s, n=st.integers(min_value=0, max_value=140))
def test_shifts_match_reference(a: int, n: int) -> None:
    x = Int128.from_big_int(a)
    assert x.shift_left(n).to_big_int() == wrap128(a << n)
    assert x.shift_right(n).to_big_int() == a >> n
    assert x.shift_right_unsigned(n).to_big_int() == wrap128((a % (1 << 128)) >> n)


@pytest.mark.fuzzing
@settings(max_examples=200)
@given(a=int128s, b=int128s)
def test_compare_matches_reference(a: int, b: int) -> None:
    expected = (a > b) - (a < b)
    assert Int128.from_big_int(a).compare(Int128.from_big_int(b)) == expected
