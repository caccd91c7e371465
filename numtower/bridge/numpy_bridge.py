"""
NumPy bridge for the numeric tower.

This module converts between NumPy scalars and arrays and tower values.
Narrowing conversions are checked: an exact value that does not fit the
requested integer dtype raises :class:`ConversionOverflowError` instead of
wrapping.
"""

from typing import Iterable, List, Optional

import numpy as np

from ..core.bigint import BigInt
from ..core.exceptions import ConversionOverflowError, DomainError
from ..core.ratio import Ratio
from ..core.scaled_decimal import ScaledDecimal
from ..tower.machine import coerce, to_float64, variant_of
from ..tower.opcodes import Variant

_INTEGER_DTYPES = (np.dtype(np.int32), np.dtype(np.int64))
_FLOAT_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))

_DTYPE_BY_VARIANT = {
    Variant.INT32: np.dtype(np.int32),
    Variant.INT64: np.dtype(np.int64),
    Variant.FLOAT32: np.dtype(np.float32),
    Variant.FLOAT64: np.dtype(np.float64),
}


def to_tower(value):
    """
    Convert a host or NumPy scalar into a tower value.

    Args:
        value: int, float, Decimal, Fraction, NumPy scalar or tower value

    Returns:
        The corresponding tower value
    """
    return coerce(value)


def _integral_part(value) -> BigInt:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, ScaledDecimal):
        return value.to_bigint()
    if isinstance(value, Ratio):
        return value.to_bigint()
    if variant_of(value).is_float:
        if not np.isfinite(value):
            raise DomainError("Infinity or NaN cannot be converted to an integer")
        return BigInt.from_float(float(value))
    return BigInt.from_int(int(value))


def to_numpy_scalar(value, dtype) -> np.generic:
    """
    Narrow a tower value to a NumPy scalar of ``dtype``.

    Exact values are truncated toward zero when ``dtype`` is an integer
    type.

    Args:
        value: Tower or host value
        dtype: One of int32, int64, float32, float64

    Returns:
        NumPy scalar of the requested type

    Raises:
        ConversionOverflowError: If the integer part does not fit ``dtype``
        ValueError: If ``dtype`` is not supported
    """
    dtype = np.dtype(dtype)
    value = coerce(value)
    if dtype in _FLOAT_DTYPES:
        return dtype.type(to_float64(value))
    if dtype not in _INTEGER_DTYPES:
        raise ValueError(f"Unsupported dtype: {dtype}")

    integral = _integral_part(value)
    narrowed = integral.try_as_int32() if dtype == np.int32 else integral.try_as_int64()
    if narrowed is None:
        raise ConversionOverflowError(f"Value does not fit in {dtype}", target=str(dtype))
    return dtype.type(narrowed)


def from_numpy_array(arr) -> List:
    """
    Convert a NumPy array into a flat list of tower values.

    Args:
        arr: Array of integers, floats or tower/host objects

    Returns:
        List of tower values in C order

    Raises:
        DomainError: If the array holds booleans or non-numeric data
    """
    arr = np.asarray(arr)
    if arr.dtype.kind == "b":
        raise DomainError("Boolean arrays are not numeric")
    if arr.dtype.kind not in "iufO":
        raise DomainError(f"Unsupported array dtype: {arr.dtype}")
    return [coerce(v) for v in arr.ravel()]


def common_variant(values: Iterable) -> Optional[Variant]:
    """Most general variant among ``values`` (``None`` when empty)."""
    best = None
    for v in values:
        current = variant_of(coerce(v))
        if best is None or current.value > best.value:
            best = current
    return best


def to_numpy_array(values, dtype=None) -> np.ndarray:
    """
    Build a NumPy array from tower values.

    Without ``dtype`` the array takes the dtype of the most general machine
    variant present; if any exact value (BigInt, Ratio, ScaledDecimal) is
    present and no float variant dominates, an object array is returned so
    nothing is lost.

    Args:
        values: Iterable of tower or host values
        dtype: Optional target dtype; elements are narrowed with
            :func:`to_numpy_scalar`

    Returns:
        One-dimensional NumPy array
    """
    values = [coerce(v) for v in values]
    if dtype is not None:
        dtype = np.dtype(dtype)
        return np.array([to_numpy_scalar(v, dtype) for v in values], dtype=dtype)

    best = common_variant(values)
    if best is None:
        return np.array([], dtype=np.float64)
    target = _DTYPE_BY_VARIANT.get(best)
    if target is None:
        out = np.empty(len(values), dtype=object)
        for i, v in enumerate(values):
            out[i] = v
        return out
    return np.array([to_numpy_scalar(v, target) for v in values], dtype=target)
