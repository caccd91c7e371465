"""Unit tests for the hybrid GCD."""

import math

import pytest

from numtower import BigInt
from numtower.core.gcd import binary_gcd, gcd_magnitudes, word_gcd


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


class TestBigIntGcd:
    """Test BigInt.gcd."""

    def test_small(self):
        assert big(48).gcd(big(18)).to_int() == 6

    def test_result_is_non_negative(self):
        assert big(-48).gcd(big(18)).to_int() == 6
        assert big(-48).gcd(big(-18)).to_int() == 6

    def test_zero_operands(self):
        assert big(0).gcd(big(-7)).to_int() == 7
        assert big(9).gcd(big(0)).to_int() == 9
        assert big(0).gcd(big(0)).is_zero

    @pytest.mark.parametrize("a,b", [
        (2 ** 64, 2 ** 40 * 3),
        (3 ** 100, 3 ** 60 * 2 ** 7),
        (2 ** 200 + 1, 2 ** 40 + 1),
        ((2 ** 89 - 1) * 12345, (2 ** 89 - 1) * 678),
        (10 ** 50 + 7, 13),
    ])
    def test_matches_math_gcd(self, a, b):
        """Covers Euclidean steps (lengths far apart) and binary steps."""
        assert big(a).gcd(big(b)).to_int() == math.gcd(a, b)


class TestMagnitudeGcd:
    """Test the word and magnitude helpers."""

    @pytest.mark.parametrize("u,v", [(0, 5), (12, 0), (48, 18), (0xFFFFFFFF, 0xFFFF), (1 << 31, 1 << 20)])
    def test_word_gcd(self, u, v):
        assert word_gcd(u, v) == math.gcd(u, v)

    def test_binary_gcd_with_empty(self):
        assert binary_gcd([], [7]) == [7]
        assert binary_gcd([7], []) == [7]

    def test_gcd_magnitudes_multiword(self):
        # gcd(2**64, 2**33) = 2**33
        assert gcd_magnitudes([1, 0, 0], [2, 0]) == [2, 0]
