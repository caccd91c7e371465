"""Unit tests for BigInt two's-complement bit operations and shifts."""

import pytest

from numtower import BigInt, DomainError
from numtower.core import twos_complement


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


VALUES = [0, 1, -1, 5, -6, 2 ** 32, -(2 ** 32), 2 ** 64 - 1, -(2 ** 70) + 12345, 0x123456789ABCDEF0123]


class TestLogicalOps:
    """Bitwise results agree with Python's infinite two's complement."""

    @pytest.mark.parametrize("a", VALUES)
    @pytest.mark.parametrize("b", VALUES)
    def test_binary_ops(self, a, b):
        x, y = big(a), big(b)
        assert x.bit_and(y).to_int() == a & b
        assert x.bit_or(y).to_int() == a | b
        assert x.bit_xor(y).to_int() == a ^ b
        assert x.bit_and_not(y).to_int() == a & ~b

    @pytest.mark.parametrize("a", VALUES)
    def test_not(self, a):
        assert big(a).bit_not().to_int() == ~a

    def test_xor_of_negatives_is_positive(self):
        """The sign of xor follows the two's-complement result."""
        assert big(-1).bit_xor(big(-2)).to_int() == 1

    def test_operators(self):
        assert (big(12) & 10).to_int() == 8
        assert (big(12) | 3).to_int() == 15
        assert (big(12) ^ 4).to_int() == 8
        assert (~big(0)).to_int() == -1


class TestSingleBitOps:
    """Test test/set/clear/flip bit."""

    @pytest.mark.parametrize("a", VALUES)
    @pytest.mark.parametrize("n", [0, 1, 31, 32, 33, 64, 100])
    def test_bit_ops_match_python(self, a, n):
        x = big(a)
        assert x.test_bit(n) == bool((a >> n) & 1)
        assert x.set_bit(n).to_int() == a | (1 << n)
        assert x.clear_bit(n).to_int() == a & ~(1 << n)
        assert x.flip_bit(n).to_int() == a ^ (1 << n)

    def test_negative_reads_sign_beyond_length(self):
        assert big(-1).test_bit(10_000)
        assert not big(1).test_bit(10_000)

    def test_negative_index_rejected(self):
        for op in ("test_bit", "set_bit", "clear_bit", "flip_bit"):
            with pytest.raises(DomainError):
                getattr(big(5), op)(-1)


class TestShifts:
    """Test shift_left and arithmetic shift_right."""

    @pytest.mark.parametrize("a", VALUES)
    @pytest.mark.parametrize("n", [0, 1, 5, 31, 32, 33, 95])
    def test_shifts_match_python(self, a, n):
        assert big(a).shift_left(n).to_int() == a << n
        assert big(a).shift_right(n).to_int() == a >> n

    def test_right_shift_floors_negatives(self):
        assert big(-5).shift_right(1).to_int() == -3
        assert big(-1).shift_right(200).to_int() == -1
        assert big(5).shift_right(200).is_zero

    def test_negative_count_reverses_direction(self):
        assert big(3).shift_left(-1).to_int() == 1
        assert big(3).shift_right(-2).to_int() == 12

    def test_operators(self):
        assert (big(1) << 100).to_int() == 2 ** 100
        assert (big(-(2 ** 100)) >> 99).to_int() == -2


class TestTwosComplementHelpers:
    """Test the word-level helpers directly."""

    def test_digit_at_negative(self):
        # -1 is all ones at every index
        assert twos_complement.digit_at(-1, (1,), 0) == 0xFFFFFFFF
        assert twos_complement.digit_at(-1, (1,), 5) == 0xFFFFFFFF
        # -(2**32): low word zero, next word is ~1 + 1
        assert twos_complement.digit_at(-1, (1, 0), 0) == 0
        assert twos_complement.digit_at(-1, (1, 0), 1) == 0xFFFFFFFF

    def test_from_twos_complement(self):
        assert twos_complement.from_twos_complement([0xFFFFFFFE]) == (-1, [2])
        assert twos_complement.from_twos_complement([5, 0]) == (1, [5])
        assert twos_complement.from_twos_complement([0, 0]) == (0, [])
