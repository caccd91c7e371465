"""
Property-based tests for tower dispatch.

Integer arithmetic through the tower must equal Python's unbounded integer
arithmetic no matter where the operands start or how often the result is
promoted, and every integer result must come back in its narrowest variant.
"""

from fractions import Fraction

import numpy as np
from hypothesis import assume, given
from hypothesis import strategies as st

from numtower import BigInt, Ratio
from numtower import tower
from numtower.tower import Variant

int32s = st.integers(min_value=-(2 ** 31), max_value=2 ** 31 - 1)
int64s = st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)
edges = st.sampled_from([2 ** 31 - 1, -(2 ** 31), 2 ** 63 - 1, -(2 ** 63), 0, 1, -1])
wide = st.integers(min_value=-(2 ** 130), max_value=2 ** 130)
ints = st.one_of(int32s, int64s, edges, wide)


def as_python(value) -> int:
    return int(value)


def expected_variant(value: int) -> Variant:
    if -(2 ** 31) <= value < 2 ** 31:
        return Variant.INT32
    if -(2 ** 63) <= value < 2 ** 63:
        return Variant.INT64
    return Variant.BIGINT


def machine(value: int):
    """Host int as the narrowest numpy/BigInt value, so operands start typed."""
    return tower.coerce(value)


class TestIntegerArithmetic:
    """Promotion never loses information."""

    @given(ints, ints)
    def test_add_multiply_subtract(self, a, b):
        x, y = machine(a), machine(b)
        for op, expected in ((tower.add, a + b), (tower.multiply, a * b), (tower.subtract, a - b)):
            result = op(x, y)
            assert as_python(result) == expected
            assert tower.variant(result) is expected_variant(expected)

    @given(ints)
    def test_negate_inc_dec(self, a):
        x = machine(a)
        assert as_python(tower.negate(x)) == -a
        assert as_python(tower.inc(x)) == a + 1
        assert as_python(tower.dec(x)) == a - 1
        assert as_python(tower.abs(x)) == abs(a)

    @given(ints, ints)
    def test_divide_is_exact_fraction(self, a, b):
        assume(b != 0)
        result = tower.divide(a, b)
        expected = Fraction(a, b)
        if expected.denominator == 1:
            assert as_python(result) == expected.numerator
        else:
            assert isinstance(result, Ratio)
            assert Fraction(result.numerator.to_int(), result.denominator.to_int()) == expected

    @given(ints, ints)
    def test_quotient_remainder_identity(self, a, b):
        assume(b != 0)
        q = as_python(tower.quotient(a, b))
        r = as_python(tower.remainder(a, b))
        assert q * b + r == a
        assert abs(r) < abs(b)

    @given(ints, ints)
    def test_ordering(self, a, b):
        assert tower.lt(a, b) == (a < b)
        assert tower.equiv(a, b) == (a == b)
        assert tower.compare(a, b) == (a > b) - (a < b)


class TestBitOperations:
    """Bit operations agree with Python integers at every width."""

    @given(ints, ints)
    def test_logical(self, a, b):
        assert as_python(tower.bit_and(a, b)) == a & b
        assert as_python(tower.bit_or(a, b)) == a | b
        assert as_python(tower.bit_xor(a, b)) == a ^ b
        assert as_python(tower.bit_and_not(a, b)) == a & ~b
        assert as_python(tower.bit_not(a)) == ~a

    @given(ints, st.integers(min_value=0, max_value=140))
    def test_shifts_and_bits(self, a, n):
        assert as_python(tower.shift_left(a, n)) == a << n
        assert as_python(tower.shift_right(a, n)) == a >> n
        assert tower.test_bit(a, n) == bool((a >> n) & 1)
        assert as_python(tower.set_bit(a, n)) == a | (1 << n)
        assert as_python(tower.clear_bit(a, n)) == a & ~(1 << n)
        assert as_python(tower.flip_bit(a, n)) == a ^ (1 << n)

    @given(ints, st.integers(min_value=0, max_value=140))
    def test_results_are_reduced(self, a, n):
        result = tower.shift_left(a, n)
        assert tower.variant(result) is expected_variant(a << n)


class TestFloatOperations:
    """Float results follow IEEE arithmetic in the widest float present."""

    @given(st.floats(allow_nan=False, allow_infinity=False, width=32), int32s)
    def test_float32_with_int(self, f, i):
        result = tower.add(np.float32(f), i)
        assert isinstance(result, np.float32)
        with np.errstate(all="ignore"):
            assert result == np.float32(f) + np.float32(i)

    @given(st.floats(allow_nan=False, allow_infinity=False), wide)
    def test_float64_with_bigint(self, f, i):
        result = tower.multiply(f, BigInt.from_int(i))
        assert isinstance(result, np.float64)
