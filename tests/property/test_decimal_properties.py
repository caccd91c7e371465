"""
Property-based tests for ScaledDecimal.

``decimal.Decimal`` with a large enough context is used as an exact oracle
for addition, multiplication and ordering; rounding is checked for its
digit-count and error bounds rather than against a second implementation.
"""

import decimal
from decimal import Decimal

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from numtower import Context, RoundingMode, ScaledDecimal

coefficients = st.integers(min_value=-(10 ** 40), max_value=10 ** 40)
exponents = st.integers(min_value=-30, max_value=30)
decimals = st.builds(ScaledDecimal, coefficients, exponents)
nonzero_decimals = decimals.filter(lambda d: not d.is_zero)
precisions = st.integers(min_value=1, max_value=30)
modes = st.sampled_from([m for m in RoundingMode if m is not RoundingMode.UNNECESSARY])


# wide enough that no oracle operation below ever rounds
ORACLE = decimal.Context(prec=500, Emax=10 ** 6, Emin=-(10 ** 6))


def exact(x: ScaledDecimal) -> Decimal:
    coeff = x.coefficient.to_int()
    digits = tuple(int(ch) for ch in str(abs(coeff)))
    return Decimal((1 if coeff < 0 else 0, digits, x.exponent))


def unit(exponent: int) -> Decimal:
    return Decimal((0, (1,), exponent))


class TestExactArithmetic:
    """Unrounded arithmetic is exact."""

    @given(decimals, decimals)
    def test_add_and_multiply(self, x, y):
        assert exact(x.add(y)) == ORACLE.add(exact(x), exact(y))
        assert exact(x.subtract(y)) == ORACLE.subtract(exact(x), exact(y))
        assert exact(x.multiply(y)) == ORACLE.multiply(exact(x), exact(y))

    @given(decimals, decimals)
    def test_add_exponent_is_min(self, x, y):
        assert x.add(y).exponent == min(x.exponent, y.exponent)

    @given(decimals, decimals)
    def test_compare_matches_value(self, x, y):
        a, b = exact(x), exact(y)
        assert x.compare_to(y) == (a > b) - (a < b)


class TestParseFormat:
    """Text round-trips."""

    @given(decimals)
    def test_scientific_round_trip(self, x):
        """Parsing the scientific string restores the exact representation."""
        assert ScaledDecimal.parse(x.to_scientific_string()) == x

    @given(decimals)
    def test_matches_decimal_string(self, x):
        assert x.to_scientific_string() == str(exact(x))

    @given(decimals)
    def test_plain_string_value(self, x):
        assert Decimal(x.to_plain_string()) == exact(x)


class TestRoundingProperties:
    """Rounding keeps at most ``precision`` digits and stays within one unit."""

    @given(decimals, precisions, modes)
    def test_round_digit_count(self, x, precision, mode):
        r = x.round(Context(precision, mode))
        assert r.precision <= precision

    @given(decimals, precisions, modes)
    def test_round_error_bound(self, x, precision, mode):
        r = x.round(Context(precision, mode))
        assert ORACLE.subtract(exact(r), exact(x)).copy_abs() <= unit(r.exponent)

    @given(decimals, precisions)
    def test_down_never_grows(self, x, precision):
        r = x.round(Context(precision, RoundingMode.DOWN))
        assert exact(r).copy_abs() <= exact(x).copy_abs()

    @given(decimals, precisions)
    def test_floor_ceiling_bracket(self, x, precision):
        lo = x.round(Context(precision, RoundingMode.FLOOR))
        hi = x.round(Context(precision, RoundingMode.CEILING))
        assert exact(lo) <= exact(x) <= exact(hi)

    @given(decimals, exponents, modes)
    def test_rescale_sets_exponent(self, x, exponent, mode):
        assert x.rescale(exponent, mode).exponent == exponent


class TestDivisionProperties:
    """Quotients honour precision and the remainder identity."""

    @settings(max_examples=60)
    @given(decimals, nonzero_decimals, precisions)
    def test_divide_precision(self, x, y, precision):
        q = x.divide(y, Context(precision, RoundingMode.HALF_EVEN))
        assert q.precision <= precision

    @settings(max_examples=60)
    @given(decimals, nonzero_decimals, precisions)
    def test_divide_half_even_within_half_unit(self, x, y, precision):
        q = x.divide(y, Context(precision, RoundingMode.HALF_EVEN))
        half_unit = Decimal((0, (5,), q.exponent - 1))
        error = ORACLE.subtract(ORACLE.multiply(exact(q), exact(y)), exact(x)).copy_abs()
        assert error <= ORACLE.multiply(half_unit, exact(y).copy_abs())

    @settings(max_examples=60)
    @given(decimals, nonzero_decimals)
    def test_div_rem_identity(self, x, y):
        assume(abs(x.exponent - y.exponent) < 40)
        q, r = x.div_rem(y)
        assert q.exponent == 0
        assert exact(q.multiply(y).add(r)) == exact(x)
        assert exact(r).copy_abs() < exact(y).copy_abs()
