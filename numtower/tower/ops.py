"""
Operation strategies, one per tower variant.

Each strategy implements the arithmetic contract for operands that have
already been converted into its own domain (:meth:`Ops.coerce`). Mixed
operands are resolved by :func:`combine`, which picks the strategy of the
more general variant:

    float64 > float32 > Ratio > ScaledDecimal > BigInt > int64 > int32

Integer results pass through reduction so they come back in the narrowest
variant that holds them exactly.
"""

from typing import Optional, Tuple

import numpy as np

from ..core.bigint import BigInt, ONE as BI_ONE, NEGATIVE_ONE as BI_NEGATIVE_ONE
from ..core.context import Context
from ..core.ratio import Ratio
from ..core.scaled_decimal import ONE as SD_ONE, ScaledDecimal, ten_pow
from .machine import (
    checked_add,
    checked_multiply,
    checked_negate,
    float_quotient,
    float_remainder,
    log_promotion,
    reduce_integer,
    to_bigint,
    to_float32,
    to_float64,
    variant_of,
)
from .opcodes import Variant


class Ops:
    """Arithmetic contract every variant strategy implements."""

    variant: Variant

    def coerce(self, x):
        raise NotImplementedError

    def is_zero(self, x) -> bool:
        raise NotImplementedError

    def is_pos(self, x) -> bool:
        raise NotImplementedError

    def is_neg(self, x) -> bool:
        raise NotImplementedError

    def add(self, x, y, context: Optional[Context] = None):
        raise NotImplementedError

    def multiply(self, x, y, context: Optional[Context] = None):
        raise NotImplementedError

    def divide(self, x, y, context: Optional[Context] = None):
        raise NotImplementedError

    def quotient(self, x, y, context: Optional[Context] = None):
        raise NotImplementedError

    def remainder(self, x, y, context: Optional[Context] = None):
        raise NotImplementedError

    def equiv(self, x, y) -> bool:
        raise NotImplementedError

    def lt(self, x, y) -> bool:
        raise NotImplementedError

    def negate(self, x, context: Optional[Context] = None):
        raise NotImplementedError

    def inc(self, x, context: Optional[Context] = None):
        raise NotImplementedError

    def dec(self, x, context: Optional[Context] = None):
        raise NotImplementedError

    def abs(self, x, context: Optional[Context] = None):
        return self.negate(x, context) if self.is_neg(x) else x

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _divide_integers(x: BigInt, y: BigInt):
    # Exact integer division: an integer when it divides evenly, else a
    # reduced Ratio.
    result = Ratio.of(x, y)
    if isinstance(result, BigInt):
        return reduce_integer(result)
    return result


class MachineIntOps(Ops):
    """Overflow-checked fixed-width integer strategy."""

    def __init__(self, variant: Variant, dtype, wider: Ops):
        self.variant = variant
        self.dtype = dtype
        self.wider = wider

    def coerce(self, x):
        return self.dtype(x)

    def is_zero(self, x) -> bool:
        return bool(x == 0)

    def is_pos(self, x) -> bool:
        return bool(x > 0)

    def is_neg(self, x) -> bool:
        return bool(x < 0)

    def _reduce(self, result):
        return reduce_integer(result) if self.variant is not Variant.INT32 else result

    def add(self, x, y, context=None):
        result = checked_add(x, y)
        if result is None:
            log_promotion("add", x, y, self.wider.variant.name.lower())
            return self.wider.add(self.wider.coerce(x), self.wider.coerce(y))
        return self._reduce(result)

    def multiply(self, x, y, context=None):
        result = checked_multiply(x, y)
        if result is None:
            log_promotion("multiply", x, y, self.wider.variant.name.lower())
            return self.wider.multiply(self.wider.coerce(x), self.wider.coerce(y))
        return self._reduce(result)

    def divide(self, x, y, context=None):
        return _divide_integers(to_bigint(x), to_bigint(y))

    def quotient(self, x, y, context=None):
        return reduce_integer(to_bigint(x).divide(to_bigint(y)))

    def remainder(self, x, y, context=None):
        return reduce_integer(to_bigint(x).mod(to_bigint(y)))

    def equiv(self, x, y) -> bool:
        return bool(x == y)

    def lt(self, x, y) -> bool:
        return bool(x < y)

    def negate(self, x, context=None):
        result = checked_negate(x)
        if result is None:
            log_promotion("negate", x, None, self.wider.variant.name.lower())
            return self.wider.negate(self.wider.coerce(x))
        return self._reduce(result)

    def inc(self, x, context=None):
        return self.add(x, self.dtype(1))

    def dec(self, x, context=None):
        return self.add(x, self.dtype(-1))


class BigIntOps(Ops):
    variant = Variant.BIGINT

    def coerce(self, x):
        return to_bigint(x)

    def is_zero(self, x) -> bool:
        return x.is_zero

    def is_pos(self, x) -> bool:
        return x.is_positive

    def is_neg(self, x) -> bool:
        return x.is_negative

    def add(self, x, y, context=None):
        return reduce_integer(x.add(y))

    def multiply(self, x, y, context=None):
        return reduce_integer(x.multiply(y))

    def divide(self, x, y, context=None):
        return _divide_integers(x, y)

    def quotient(self, x, y, context=None):
        return reduce_integer(x.divide(y))

    def remainder(self, x, y, context=None):
        return reduce_integer(x.mod(y))

    def equiv(self, x, y) -> bool:
        return x == y

    def lt(self, x, y) -> bool:
        return x.compare_to(y) < 0

    def negate(self, x, context=None):
        return reduce_integer(x.negate())

    def inc(self, x, context=None):
        return reduce_integer(x.add(BI_ONE))

    def dec(self, x, context=None):
        return reduce_integer(x.add(BI_NEGATIVE_ONE))


class ScaledDecimalOps(Ops):
    """Decimal strategy; every operation honours the supplied context."""

    variant = Variant.SCALED_DECIMAL

    def coerce(self, x):
        if isinstance(x, ScaledDecimal):
            return x
        return ScaledDecimal.from_bigint(to_bigint(x))

    def is_zero(self, x) -> bool:
        return x.is_zero

    def is_pos(self, x) -> bool:
        return x.is_positive

    def is_neg(self, x) -> bool:
        return x.is_negative

    def add(self, x, y, context=None):
        return x.add(y, context)

    def multiply(self, x, y, context=None):
        return x.multiply(y, context)

    def divide(self, x, y, context=None):
        return x.divide(y, context)

    def quotient(self, x, y, context=None):
        return x.divide_integer(y, context)

    def remainder(self, x, y, context=None):
        return x.mod(y, context)

    def equiv(self, x, y) -> bool:
        return x.compare_to(y) == 0

    def lt(self, x, y) -> bool:
        return x.compare_to(y) < 0

    def negate(self, x, context=None):
        return x.negate(context)

    def inc(self, x, context=None):
        return x.add(SD_ONE, context)

    def dec(self, x, context=None):
        return x.subtract(SD_ONE, context)

    def abs(self, x, context=None):
        return x.abs(context)


FractionParts = Tuple[BigInt, BigInt]


class RatioOps(Ops):
    """
    Exact rational strategy.

    Operands are handled as ``(numerator, denominator)`` pairs so integers
    and decimals can join without first being forced into a canonical
    Ratio; every result is rebuilt through :meth:`Ratio.of`.
    """

    variant = Variant.RATIO

    def coerce(self, x) -> FractionParts:
        if isinstance(x, Ratio):
            return x.numerator, x.denominator
        if isinstance(x, ScaledDecimal):
            coeff = x.coefficient
            if x.exponent >= 0:
                return coeff.multiply(ten_pow(x.exponent)), BI_ONE
            return coeff, ten_pow(-x.exponent)
        if isinstance(x, tuple):
            return x
        return to_bigint(x), BI_ONE

    @staticmethod
    def _result(n: BigInt, d: BigInt):
        result = Ratio.of(n, d)
        if isinstance(result, BigInt):
            return reduce_integer(result)
        return result

    def is_zero(self, x) -> bool:
        return x[0].is_zero

    def is_pos(self, x) -> bool:
        return x[0].is_positive

    def is_neg(self, x) -> bool:
        return x[0].is_negative

    def add(self, x, y, context=None):
        xn, xd = x
        yn, yd = y
        return self._result(xn.multiply(yd).add(yn.multiply(xd)), xd.multiply(yd))

    def multiply(self, x, y, context=None):
        return self._result(x[0].multiply(y[0]), x[1].multiply(y[1]))

    def divide(self, x, y, context=None):
        return self._result(x[0].multiply(y[1]), x[1].multiply(y[0]))

    def _quotient(self, x, y) -> BigInt:
        return x[0].multiply(y[1]).divide(x[1].multiply(y[0]))

    def quotient(self, x, y, context=None):
        return reduce_integer(self._quotient(x, y))

    def remainder(self, x, y, context=None):
        # x - q*y over the common denominator
        q = self._quotient(x, y)
        xn, xd = x
        yn, yd = y
        n = xn.multiply(yd).subtract(q.multiply(yn).multiply(xd))
        return self._result(n, xd.multiply(yd))

    def _compare(self, x, y) -> int:
        return x[0].multiply(y[1]).compare_to(y[0].multiply(x[1]))

    def equiv(self, x, y) -> bool:
        return self._compare(x, y) == 0

    def lt(self, x, y) -> bool:
        return self._compare(x, y) < 0

    def negate(self, x, context=None):
        return self._result(x[0].negate(), x[1])

    def inc(self, x, context=None):
        return self._result(x[0].add(x[1]), x[1])

    def dec(self, x, context=None):
        return self._result(x[0].subtract(x[1]), x[1])

    def abs(self, x, context=None):
        return self._result(x[0].abs(), x[1])


class FloatOps(Ops):
    """IEEE-754 strategy in a fixed float width."""

    def __init__(self, variant: Variant, converter):
        self.variant = variant
        self.converter = converter

    def coerce(self, x):
        return self.converter(x)

    def is_zero(self, x) -> bool:
        return bool(x == 0)

    def is_pos(self, x) -> bool:
        return bool(x > 0)

    def is_neg(self, x) -> bool:
        return bool(x < 0)

    def add(self, x, y, context=None):
        with np.errstate(all="ignore"):
            return x + y

    def multiply(self, x, y, context=None):
        with np.errstate(all="ignore"):
            return x * y

    def divide(self, x, y, context=None):
        with np.errstate(all="ignore"):
            return x / y

    def quotient(self, x, y, context=None):
        return float_quotient(x, y)

    def remainder(self, x, y, context=None):
        return float_remainder(x, y)

    def equiv(self, x, y) -> bool:
        return bool(x == y)

    def lt(self, x, y) -> bool:
        return bool(x < y)

    def negate(self, x, context=None):
        return -x

    def inc(self, x, context=None):
        with np.errstate(all="ignore"):
            return x + self.converter(1.0)

    def dec(self, x, context=None):
        with np.errstate(all="ignore"):
            return x - self.converter(1.0)

    def abs(self, x, context=None):
        return np.abs(x)


BIGINT_OPS = BigIntOps()
INT64_OPS = MachineIntOps(Variant.INT64, np.int64, BIGINT_OPS)
INT32_OPS = MachineIntOps(Variant.INT32, np.int32, INT64_OPS)
SCALED_DECIMAL_OPS = ScaledDecimalOps()
RATIO_OPS = RatioOps()
FLOAT32_OPS = FloatOps(Variant.FLOAT32, to_float32)
FLOAT64_OPS = FloatOps(Variant.FLOAT64, to_float64)

OPS_BY_VARIANT = {
    Variant.INT32: INT32_OPS,
    Variant.INT64: INT64_OPS,
    Variant.BIGINT: BIGINT_OPS,
    Variant.SCALED_DECIMAL: SCALED_DECIMAL_OPS,
    Variant.RATIO: RATIO_OPS,
    Variant.FLOAT32: FLOAT32_OPS,
    Variant.FLOAT64: FLOAT64_OPS,
}


def ops_for(x) -> Ops:
    """Strategy for a single tower value."""
    return OPS_BY_VARIANT[variant_of(x)]


def combine(x, y) -> Ops:
    """Strategy for the more general of two tower values' variants."""
    vx = variant_of(x)
    vy = variant_of(y)
    return OPS_BY_VARIANT[vx if vx.value >= vy.value else vy]
