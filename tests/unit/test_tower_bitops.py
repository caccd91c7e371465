"""Unit tests for tower bit operations across integer widths."""

import numpy as np
import pytest

from numtower import BigInt, DomainError, Ratio, ScaledDecimal
from numtower import tower
from numtower.tower import BitOp, Variant


class TestLogical:
    """Test and/or/xor/not/and_not."""

    def test_small_values(self):
        assert tower.bit_and(12, 10) == 8
        assert tower.bit_or(12, 10) == 14
        assert tower.bit_xor(-1, 5) == -6
        assert tower.bit_and_not(15, 5) == 10
        assert tower.bit_not(0) == -1

    def test_result_type_follows_wider_operand(self):
        assert isinstance(tower.bit_and(np.int32(7), np.int32(3)), np.int32)
        big = BigInt.from_int(2 ** 70 + 3)
        result = tower.bit_and(big, 0xFF)
        assert isinstance(result, np.int32)
        assert result == 3

    def test_int64_result_narrows(self):
        result = tower.bit_and(np.int64(2 ** 40 + 5), np.int64(7))
        assert isinstance(result, np.int32)
        assert result == 5

    def test_bigint_xor(self):
        a = 2 ** 100 + 12345
        b = -(2 ** 90) + 99
        assert tower.bit_xor(BigInt.from_int(a), BigInt.from_int(b)) == BigInt.from_int(a ^ b)

    def test_non_integers_rejected(self):
        for bad in (1.5, np.float32(1), Ratio(1, 2), ScaledDecimal.parse("1")):
            with pytest.raises(DomainError):
                tower.bit_and(bad, 1)
            with pytest.raises(DomainError):
                tower.bit_not(bad)


class TestShifts:
    """Shifts promote instead of wrapping."""

    def test_shift_left_promotes_to_int64(self):
        result = tower.shift_left(np.int32(1), 31)
        assert isinstance(result, np.int64)
        assert result == 2 ** 31

    def test_shift_left_promotes_to_bigint(self):
        assert tower.shift_left(1, 100) == BigInt.from_int(2 ** 100)
        assert tower.shift_left(np.int64(-3), 63) == BigInt.from_int(-3 * 2 ** 63)

    def test_shift_left_in_range(self):
        result = tower.shift_left(np.int32(3), 4)
        assert isinstance(result, np.int32)
        assert result == 48

    def test_int64_shift_results_narrow(self):
        """Zero operands and full-width right shifts still come back as int32."""
        for result in (tower.shift_right(np.int64(5), 64), tower.shift_right(np.int64(-5), 70),
                       tower.shift_left(np.int64(0), 3), tower.shift_left(np.int64(0), 0)):
            assert isinstance(result, np.int32)
        assert tower.shift_right(np.int64(-5), 64) == -1
        assert tower.shift_left(np.int64(0), 3) == 0

    def test_shift_right_is_arithmetic(self):
        assert tower.shift_right(-5, 1) == -3
        assert tower.shift_right(np.int32(-1), 40) == -1
        assert tower.shift_right(np.int32(7), 40) == 0
        assert tower.shift_right(BigInt.from_int(-(2 ** 80)), 79) == -2

    def test_negative_count_reverses(self):
        assert tower.shift_left(16, -2) == 4
        assert tower.shift_right(1, -3) == 8

    def test_count_must_be_integer(self):
        with pytest.raises(DomainError):
            tower.shift_left(1, 2.0)


class TestSingleBit:
    """Test test_bit / set_bit / clear_bit / flip_bit."""

    def test_read_bits(self):
        assert tower.test_bit(5, 0)
        assert not tower.test_bit(5, 1)
        assert tower.test_bit(-1, 100)
        assert not tower.test_bit(np.int64(1), 64)

    def test_set_bit_promotes(self):
        result = tower.set_bit(0, 31)
        assert isinstance(result, np.int64)
        assert result == 2 ** 31
        assert tower.set_bit(0, 63) == BigInt.from_int(2 ** 63)
        assert tower.set_bit(np.int32(1), 4) == 17

    def test_clear_and_flip(self):
        assert tower.clear_bit(7, 1) == 5
        assert tower.flip_bit(5, 1) == 7
        assert tower.clear_bit(-1, 31) == -(2 ** 31) - 1
        assert tower.flip_bit(np.int32(-1), 0) == -2

    def test_negative_index(self):
        for op in (tower.test_bit, tower.set_bit, tower.clear_bit, tower.flip_bit):
            with pytest.raises(DomainError):
                op(5, -1)


class TestApplyBit:
    """Operation-code dispatch for bit operations."""

    def test_binary_and_index_ops(self):
        assert tower.apply_bit(BitOp.OR, 1, 2) == 3
        assert tower.apply_bit("shift_left", 1, 3) == 8
        assert tower.apply_bit(BitOp.TEST_BIT, 4, 2)

    def test_unary_not(self):
        assert tower.apply_bit(BitOp.NOT, 5) == -6

    def test_missing_operand(self):
        with pytest.raises(TypeError):
            tower.apply_bit(BitOp.AND, 1)

    def test_opcode_metadata(self):
        assert BitOp.NOT.is_unary
        assert BitOp.FLIP_BIT.takes_index
        assert not BitOp.XOR.takes_index
        assert Variant.FLOAT32.is_float and Variant.FLOAT64.is_float
        assert not Variant.INT64.is_float and not Variant.RATIO.is_float
