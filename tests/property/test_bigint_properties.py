"""
Property-based tests for BigInt.

Python's own integers serve as the oracle: every BigInt operation must
agree with the corresponding int operation across random inputs, including
multi-word magnitudes and negative values.
"""

import math

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from numtower import BigInt

# Strategies for generating test data
wide_ints = st.integers(min_value=-(2 ** 300), max_value=2 ** 300)
word_edges = st.sampled_from([0, 1, -1, 2 ** 31, 2 ** 32 - 1, 2 ** 32, -(2 ** 32), 2 ** 63, 2 ** 64 - 1, -(2 ** 64)])
any_int = st.one_of(wide_ints, word_edges)
radixes = st.integers(min_value=2, max_value=36)
small_counts = st.integers(min_value=0, max_value=200)


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


class TestArithmeticProperties:
    """Arithmetic agrees with Python integers."""

    @given(any_int, any_int)
    def test_add_subtract_multiply(self, a, b):
        assert big(a).add(big(b)).to_int() == a + b
        assert big(a).subtract(big(b)).to_int() == a - b
        assert big(a).multiply(big(b)).to_int() == a * b

    @given(any_int, any_int)
    def test_division_identity(self, a, b):
        """q*b + r == a with |r| < |b| and r carrying a's sign."""
        assume(b != 0)
        q, r = big(a).div_rem(big(b))
        assert q.multiply(big(b)).add(r).to_int() == a
        assert abs(r.to_int()) < abs(b)
        assert r.is_zero or (r.sign == (1 if a > 0 else -1))

    @given(any_int, any_int)
    def test_gcd(self, a, b):
        g = big(a).gcd(big(b))
        assert g.to_int() == math.gcd(a, b)

    @given(any_int, any_int)
    def test_gcd_cofactors_coprime(self, a, b):
        assume(a != 0 or b != 0)
        g = big(a).gcd(big(b))
        x = big(a).divide(g)
        y = big(b).divide(g)
        assert x.gcd(y).is_one

    @settings(max_examples=50)
    @given(wide_ints, st.integers(min_value=0, max_value=300), st.integers(min_value=1, max_value=2 ** 128))
    def test_mod_pow(self, base, exponent, modulus):
        expected = pow(abs(base), exponent, modulus)
        assert big(abs(base)).mod_pow(exponent, modulus).to_int() == expected

    @given(any_int, any_int)
    def test_compare_matches(self, a, b):
        assert big(a).compare_to(big(b)) == (a > b) - (a < b)
        assert (big(a) == big(b)) == (a == b)


class TestRepresentationProperties:
    """Canonical form and radix round-trips."""

    @given(any_int, radixes)
    def test_radix_round_trip(self, value, radix):
        text = big(value).to_string(radix)
        assert BigInt.parse(text, radix) == big(value)
        assert text == text.lower()

    @given(any_int)
    def test_decimal_string_matches_python(self, value):
        assert str(big(value)) == str(value)

    @given(any_int)
    def test_canonical_magnitude(self, value):
        x = big(value)
        assert not x.magnitude or x.magnitude[0] != 0
        assert (x.sign == 0) == (value == 0)
        assert all(0 <= d <= 0xFFFFFFFF for d in x.magnitude)

    @given(any_int)
    def test_equal_values_hash_equal(self, value):
        assert hash(big(value)) == hash(BigInt.parse(str(value)))


class TestBitProperties:
    """Two's-complement semantics agree with Python integers."""

    @given(any_int, any_int)
    def test_logical(self, a, b):
        assert big(a).bit_and(big(b)).to_int() == a & b
        assert big(a).bit_or(big(b)).to_int() == a | b
        assert big(a).bit_xor(big(b)).to_int() == a ^ b
        assert big(a).bit_and_not(big(b)).to_int() == a & ~b
        assert big(a).bit_not().to_int() == ~a

    @given(any_int, small_counts)
    def test_shifts(self, a, n):
        assert big(a).shift_left(n).to_int() == a << n
        assert big(a).shift_right(n).to_int() == a >> n

    @given(any_int, st.integers(min_value=0, max_value=400))
    def test_single_bits(self, a, n):
        assert big(a).test_bit(n) == bool((a >> n) & 1)
        assert big(a).set_bit(n).to_int() == a | (1 << n)
        assert big(a).clear_bit(n).to_int() == a & ~(1 << n)
        assert big(a).flip_bit(n).to_int() == a ^ (1 << n)
