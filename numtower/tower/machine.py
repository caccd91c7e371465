"""
Machine-width numerics for the tower.

The fixed-width variants are numpy scalars: ``np.int32``, ``np.int64``,
``np.float32`` and ``np.float64``. Integer add, multiply and negate run in
numpy's wrapping arithmetic and are then checked for overflow (sign
inconsistency for add, division-based reconstruction for multiply); a
detected overflow is reported as ``None`` so the caller can re-execute at a
wider width. Nothing here ever returns a wrapped value.
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Union

import numpy as np

from ..core.bigint import BigInt
from ..core.exceptions import DomainError
from ..core.ratio import Ratio
from ..core.scaled_decimal import ScaledDecimal
from .opcodes import Variant

logger = logging.getLogger(__name__)

INT32_INFO = np.iinfo(np.int32)
INT64_INFO = np.iinfo(np.int64)

MachineInt = Union[np.int32, np.int64]
TowerValue = Union[np.int32, np.int64, np.float32, np.float64, Ratio, BigInt, ScaledDecimal]


def variant_of(x) -> Variant:
    """
    Variant of a tower value.

    Raises:
        DomainError: If ``x`` is not one of the seven tower variants
    """
    if isinstance(x, np.generic):
        if isinstance(x, np.bool_):
            raise DomainError("bool is not a number")
        if x.dtype == np.int32:
            return Variant.INT32
        if x.dtype == np.int64:
            return Variant.INT64
        if x.dtype == np.float32:
            return Variant.FLOAT32
        if x.dtype == np.float64:
            return Variant.FLOAT64
    elif isinstance(x, BigInt):
        return Variant.BIGINT
    elif isinstance(x, ScaledDecimal):
        return Variant.SCALED_DECIMAL
    elif isinstance(x, Ratio):
        return Variant.RATIO
    raise DomainError(f"Not a tower value: {type(x).__name__}")


def coerce(x) -> TowerValue:
    """
    Convert a host or numpy value into a tower value.

    Python ints become the narrowest integer variant that holds them,
    Python floats become float64, ``Decimal`` becomes ScaledDecimal and
    ``Fraction`` becomes a Ratio (or an integer when it is integral).

    Raises:
        DomainError: For bools, non-finite Decimals and non-numbers
    """
    if isinstance(x, (BigInt, ScaledDecimal, Ratio)):
        return x
    if isinstance(x, np.generic):
        if isinstance(x, np.bool_):
            raise DomainError("bool is not a number")
        if isinstance(x, np.integer):
            if x.dtype == np.int32:
                return x
            if x.dtype == np.int64:
                return np.int64(x)
            return reduce_integer(int(x))
        if isinstance(x, np.floating):
            if x.dtype == np.float32 or x.dtype == np.float16:
                return np.float32(x)
            return np.float64(x)
        raise DomainError(f"Unsupported numpy scalar: {x.dtype}")
    if isinstance(x, bool):
        raise DomainError("bool is not a number")
    if isinstance(x, int):
        return reduce_integer(x)
    if isinstance(x, float):
        return np.float64(x)
    if isinstance(x, Decimal):
        return ScaledDecimal.from_decimal(x)
    if isinstance(x, Fraction):
        result = Ratio.of(x.numerator, x.denominator)
        return reduce_integer(result) if isinstance(result, BigInt) else result
    raise DomainError(f"Not a number: {type(x).__name__}")


def reduce_integer(value: Union[BigInt, int, np.integer]) -> Union[np.int32, np.int64, BigInt]:
    """Narrowest of int32, int64 and BigInt that holds ``value`` exactly."""
    if isinstance(value, BigInt):
        small = value.try_as_int64()
        if small is None:
            return value
        value = small
    value = int(value)
    if INT32_INFO.min <= value <= INT32_INFO.max:
        return np.int32(value)
    if INT64_INFO.min <= value <= INT64_INFO.max:
        return np.int64(value)
    return BigInt.from_int(value)


def to_bigint(x) -> BigInt:
    """Exact BigInt of an integer-variant value."""
    if isinstance(x, BigInt):
        return x
    return BigInt.from_int(int(x))


def to_float64(x) -> np.float64:
    if isinstance(x, (BigInt, ScaledDecimal, Ratio)):
        return np.float64(x.to_float())
    return np.float64(x)


def to_float32(x) -> np.float32:
    if isinstance(x, np.float32):
        return x
    return np.float32(to_float64(x))


def log_promotion(op: str, x, y, width: str) -> None:
    logger.debug("%s(%r, %r) overflowed; re-executing as %s", op, x, y, width)


# ----------------------------------------------------------------------
# Overflow-checked integer kernels
# ----------------------------------------------------------------------

def checked_add(x: MachineInt, y: MachineInt) -> Optional[MachineInt]:
    """``x + y`` in the operands' width, or ``None`` on overflow."""
    with np.errstate(over="ignore"):
        result = x + y
    # overflow iff the result's sign differs from both operands' signs
    if ((result ^ x) & (result ^ y)) < 0:
        return None
    return result


def checked_multiply(x: MachineInt, y: MachineInt) -> Optional[MachineInt]:
    """``x * y`` in the operands' width, or ``None`` on overflow."""
    info = np.iinfo(x.dtype)
    if x == info.min and y < 0:
        return None
    with np.errstate(over="ignore"):
        result = x * y
        if y != 0 and result // y != x:
            return None
    return result


def checked_negate(x: MachineInt) -> Optional[MachineInt]:
    if x == np.iinfo(x.dtype).min:
        return None
    return -x


# ----------------------------------------------------------------------
# Float kernels
# ----------------------------------------------------------------------

def float_quotient(x: np.floating, y: np.floating) -> np.floating:
    """Truncated quotient ``trunc(x / y)`` in the operands' float type."""
    with np.errstate(all="ignore"):
        return np.trunc(x / y)


def float_remainder(x: np.floating, y: np.floating) -> np.floating:
    """``x - trunc(x / y) * y`` in the operands' float type."""
    with np.errstate(all="ignore"):
        return x - np.trunc(x / y) * y


def is_nan(x) -> bool:
    return isinstance(x, np.floating) and bool(np.isnan(x))
