"""Unit tests for BigInt division (single-digit and Knuth Algorithm D paths)."""

import pytest

from numtower import BigInt, DivisionByZeroError
from numtower.core.digits import divmod_magnitudes


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


def trunc_divmod(a: int, b: int):
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


class TestDivRem:
    """Test truncating division."""

    @pytest.mark.parametrize("a,b", [
        (7, 2),
        (-7, 2),
        (7, -2),
        (-7, -2),
        (1, 3),
        (2 ** 64 + 5, 7),
        (2 ** 64 + 5, 2 ** 32),
        (2 ** 96 - 1, 2 ** 64 - 1),
        (-(10 ** 40) - 17, 10 ** 20 + 3),
        (3 ** 200, -(7 ** 50)),
    ])
    def test_matches_truncating_oracle(self, a, b):
        q, r = big(a).div_rem(big(b))
        eq, er = trunc_divmod(a, b)
        assert q.to_int() == eq
        assert r.to_int() == er

    def test_remainder_takes_dividend_sign(self):
        assert big(-7).mod(big(2)).to_int() == -1
        assert big(7).mod(big(-2)).to_int() == 1

    def test_dividend_smaller_than_divisor(self):
        q, r = big(5).div_rem(big(2 ** 70))
        assert q.is_zero
        assert r.to_int() == 5

    def test_zero_dividend(self):
        q, r = big(0).div_rem(big(-9))
        assert q.is_zero and r.is_zero

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            big(1).div_rem(big(0))
        with pytest.raises(ZeroDivisionError):
            big(1).divide(big(0))

    def test_high_bit_patterns(self):
        """Dividends with long runs of set high bits stress the qhat estimate."""
        a = 0x7FFF800000000000 << 64
        b = 0x800000000001 << 32
        q, r = big(a).div_rem(big(b))
        assert q.to_int() == a // b
        assert r.to_int() == a % b

    def test_exact_quotient(self):
        a = (2 ** 127 - 1) * (2 ** 89 - 1)
        q, r = big(a).div_rem(big(2 ** 89 - 1))
        assert q.to_int() == 2 ** 127 - 1
        assert r.is_zero


class TestMagnitudeDivision:
    """Test divmod_magnitudes directly."""

    def test_single_digit_divisor(self):
        q, r = divmod_magnitudes([1, 0], [3])
        assert list(q) == [0x55555555]
        assert list(r) == [1]

    def test_equal_magnitudes(self):
        q, r = divmod_magnitudes([5, 6], [5, 6])
        assert list(q) == [1]
        assert list(r) == []

    def test_multiword_divisor(self):
        x = 2 ** 100 + 12345
        y = 2 ** 40 + 3
        xm = [(x >> 96) & 0xFFFFFFFF, (x >> 64) & 0xFFFFFFFF, (x >> 32) & 0xFFFFFFFF, x & 0xFFFFFFFF]
        ym = [(y >> 32) & 0xFFFFFFFF, y & 0xFFFFFFFF]
        q, r = divmod_magnitudes(xm, ym)
        qv = 0
        for d in q:
            qv = (qv << 32) | d
        rv = 0
        for d in r:
            rv = (rv << 32) | d
        assert qv == x // y
        assert rv == x % y
