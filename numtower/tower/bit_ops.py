"""
Bit-operation strategies.

Only integer variants support bit operations. Two operands of different
widths use the wider strategy (int32 < int64 < BigInt). The machine-width
strategies use numpy's bitwise kernels; a left shift, ``set_bit`` or
``flip_bit`` whose result no longer fits the width is re-executed by the
next wider strategy instead of wrapping.
"""

import numpy as np

from ..core.bigint import BigInt
from ..core.exceptions import DomainError
from .machine import log_promotion, reduce_integer, to_bigint, variant_of
from .opcodes import Variant


def _check_index(n: int) -> int:
    if n < 0:
        raise DomainError(f"Bit index must be non-negative, got {n}")
    return n


class BitOps:
    """Two's-complement bit contract every integer strategy implements."""

    variant: Variant

    def coerce(self, x):
        raise NotImplementedError

    def bit_and(self, x, y):
        raise NotImplementedError

    def bit_or(self, x, y):
        raise NotImplementedError

    def bit_xor(self, x, y):
        raise NotImplementedError

    def bit_not(self, x):
        raise NotImplementedError

    def bit_and_not(self, x, y):
        raise NotImplementedError

    def shift_left(self, x, n: int):
        raise NotImplementedError

    def shift_right(self, x, n: int):
        raise NotImplementedError

    def test_bit(self, x, n: int) -> bool:
        raise NotImplementedError

    def set_bit(self, x, n: int):
        raise NotImplementedError

    def clear_bit(self, x, n: int):
        raise NotImplementedError

    def flip_bit(self, x, n: int):
        raise NotImplementedError


class MachineBitOps(BitOps):
    """Fixed-width strategy over numpy integer scalars."""

    def __init__(self, variant: Variant, dtype, wider: BitOps):
        self.variant = variant
        self.dtype = dtype
        self.bits = np.iinfo(dtype).bits
        self.wider = wider

    def coerce(self, x):
        return self.dtype(x)

    def _reduce(self, result):
        return reduce_integer(result) if self.variant is not Variant.INT32 else result

    def bit_and(self, x, y):
        return self._reduce(np.bitwise_and(x, y))

    def bit_or(self, x, y):
        return self._reduce(np.bitwise_or(x, y))

    def bit_xor(self, x, y):
        return self._reduce(np.bitwise_xor(x, y))

    def bit_not(self, x):
        return self._reduce(np.invert(x))

    def bit_and_not(self, x, y):
        return self._reduce(np.bitwise_and(x, np.invert(y)))

    def shift_left(self, x, n: int):
        if n < 0:
            return self.shift_right(x, -n)
        if x == 0:
            return self._reduce(x)
        if n < self.bits:
            shifted = np.left_shift(x, self.dtype(n))
            if np.right_shift(shifted, self.dtype(n)) == x:
                return self._reduce(shifted)
        log_promotion("shift_left", x, n, self.wider.variant.name.lower())
        return self.wider.shift_left(self.wider.coerce(x), n)

    def shift_right(self, x, n: int):
        if n < 0:
            return self.shift_left(x, -n)
        if n >= self.bits:
            return self._reduce(self.dtype(-1) if x < 0 else self.dtype(0))
        # arithmetic shift for signed dtypes
        return self._reduce(np.right_shift(x, self.dtype(n)))

    def test_bit(self, x, n: int) -> bool:
        _check_index(n)
        if n >= self.bits:
            return bool(x < 0)
        return bool(np.bitwise_and(np.right_shift(x, self.dtype(n)), self.dtype(1)))

    def _mask(self, n: int):
        return np.left_shift(self.dtype(1), self.dtype(n))

    def set_bit(self, x, n: int):
        if _check_index(n) >= self.bits - 1:
            return self.wider.set_bit(self.wider.coerce(x), n)
        return self._reduce(np.bitwise_or(x, self._mask(n)))

    def clear_bit(self, x, n: int):
        if _check_index(n) >= self.bits - 1:
            return self.wider.clear_bit(self.wider.coerce(x), n)
        return self._reduce(np.bitwise_and(x, np.invert(self._mask(n))))

    def flip_bit(self, x, n: int):
        if _check_index(n) >= self.bits - 1:
            return self.wider.flip_bit(self.wider.coerce(x), n)
        return self._reduce(np.bitwise_xor(x, self._mask(n)))


class BigIntBitOps(BitOps):
    variant = Variant.BIGINT

    def coerce(self, x):
        return to_bigint(x)

    def bit_and(self, x, y):
        return reduce_integer(x.bit_and(y))

    def bit_or(self, x, y):
        return reduce_integer(x.bit_or(y))

    def bit_xor(self, x, y):
        return reduce_integer(x.bit_xor(y))

    def bit_not(self, x):
        return reduce_integer(x.bit_not())

    def bit_and_not(self, x, y):
        return reduce_integer(x.bit_and_not(y))

    def shift_left(self, x, n: int):
        return reduce_integer(x.shift_left(n))

    def shift_right(self, x, n: int):
        return reduce_integer(x.shift_right(n))

    def test_bit(self, x, n: int) -> bool:
        return x.test_bit(n)

    def set_bit(self, x, n: int):
        return reduce_integer(x.set_bit(n))

    def clear_bit(self, x, n: int):
        return reduce_integer(x.clear_bit(n))

    def flip_bit(self, x, n: int):
        return reduce_integer(x.flip_bit(n))


BIGINT_BIT_OPS = BigIntBitOps()
INT64_BIT_OPS = MachineBitOps(Variant.INT64, np.int64, BIGINT_BIT_OPS)
INT32_BIT_OPS = MachineBitOps(Variant.INT32, np.int32, INT64_BIT_OPS)

BIT_OPS_BY_VARIANT = {
    Variant.INT32: INT32_BIT_OPS,
    Variant.INT64: INT64_BIT_OPS,
    Variant.BIGINT: BIGINT_BIT_OPS,
}


def bit_ops_for(x) -> BitOps:
    """
    Bit strategy for one value.

    Raises:
        DomainError: If ``x`` is a float, Ratio or ScaledDecimal
    """
    variant = variant_of(x)
    if not variant.is_integer:
        raise DomainError(f"Bit operation not supported for {variant.name.lower()}")
    return BIT_OPS_BY_VARIANT[variant]


def bit_combine(x, y) -> BitOps:
    """Wider of two integer values' bit strategies."""
    bx = bit_ops_for(x)
    by = bit_ops_for(y)
    return bx if bx.variant.value >= by.variant.value else by


def bit_index(n) -> int:
    """
    Shift count or bit index as a Python int.

    Raises:
        DomainError: If ``n`` is not an integer value
    """
    bit_ops_for(n)
    return int(to_bigint(n))
