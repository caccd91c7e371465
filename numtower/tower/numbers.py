"""
Public numeric-tower dispatch.

Every function accepts tower values or plain host numbers (see
:func:`~numtower.tower.machine.coerce`), resolves the operation against the
pair of operand variants and returns a tower value. Decimal arithmetic uses
the ``context`` argument when one is given and is exact otherwise; no
ambient context is consulted here.

Example:
    >>> from numtower.tower import numbers
    >>> numbers.divide(7, 2)
    Ratio(7, 2)
    >>> numbers.add(np.int32(2**31 - 1), 1)
    np.int64(2147483648)
"""

from typing import Optional

from ..core.context import Context
from ..core.exceptions import DivisionByZeroError
from .bit_ops import bit_combine, bit_index, bit_ops_for
from .machine import coerce, is_nan, variant_of
from .opcodes import BinaryOp, BinaryPredicate, BitOp, UnaryOp, UnaryPredicate, Variant
from .ops import combine, ops_for


# ----------------------------------------------------------------------
# Unary operations and predicates
# ----------------------------------------------------------------------

def negate(x, context: Optional[Context] = None):
    x = coerce(x)
    ops = ops_for(x)
    return ops.negate(ops.coerce(x), context)


def inc(x, context: Optional[Context] = None):
    x = coerce(x)
    ops = ops_for(x)
    return ops.inc(ops.coerce(x), context)


def dec(x, context: Optional[Context] = None):
    x = coerce(x)
    ops = ops_for(x)
    return ops.dec(ops.coerce(x), context)


def abs(x, context: Optional[Context] = None):
    x = coerce(x)
    ops = ops_for(x)
    return ops.abs(ops.coerce(x), context)


def is_zero(x) -> bool:
    x = coerce(x)
    ops = ops_for(x)
    return ops.is_zero(ops.coerce(x))


def is_pos(x) -> bool:
    x = coerce(x)
    ops = ops_for(x)
    return ops.is_pos(ops.coerce(x))


def is_neg(x) -> bool:
    x = coerce(x)
    ops = ops_for(x)
    return ops.is_neg(ops.coerce(x))


# ----------------------------------------------------------------------
# Binary operations
# ----------------------------------------------------------------------

def _pair(x, y):
    x = coerce(x)
    y = coerce(y)
    ops = combine(x, y)
    return ops, ops.coerce(x), ops.coerce(y)


def add(x, y, context: Optional[Context] = None):
    ops, a, b = _pair(x, y)
    return ops.add(a, b, context)


def subtract(x, y, context: Optional[Context] = None):
    return add(x, negate(y), context)


def multiply(x, y, context: Optional[Context] = None):
    ops, a, b = _pair(x, y)
    return ops.multiply(a, b, context)


def divide(x, y, context: Optional[Context] = None):
    """
    Exact division.

    Two integers that do not divide evenly produce a reduced Ratio; a float
    operand produces a float; decimals divide under ``context``.

    Raises:
        DivisionByZeroError: If ``y`` is zero (a NaN operand yields NaN)
    """
    ops, a, b = _pair(x, y)
    if is_nan(a):
        return a
    if is_nan(b):
        return b
    if ops.is_zero(b):
        raise DivisionByZeroError("Divide by zero")
    return ops.divide(a, b, context)


def quotient(x, y, context: Optional[Context] = None):
    """
    Truncated quotient.

    Raises:
        DivisionByZeroError: If ``y`` is zero
    """
    ops, a, b = _pair(x, y)
    if ops.is_zero(b):
        raise DivisionByZeroError("Divide by zero")
    return ops.quotient(a, b, context)


def remainder(x, y, context: Optional[Context] = None):
    """
    Remainder of the truncated quotient; takes the dividend's sign.

    Raises:
        DivisionByZeroError: If ``y`` is zero
    """
    ops, a, b = _pair(x, y)
    if ops.is_zero(b):
        raise DivisionByZeroError("Divide by zero")
    return ops.remainder(a, b, context)


# ----------------------------------------------------------------------
# Comparison
# ----------------------------------------------------------------------

def equiv(x, y) -> bool:
    """Numeric equality across variants (``1 == 1.0 == 1.00``)."""
    ops, a, b = _pair(x, y)
    return ops.equiv(a, b)


def lt(x, y) -> bool:
    ops, a, b = _pair(x, y)
    return ops.lt(a, b)


def lte(x, y) -> bool:
    ops, a, b = _pair(x, y)
    return ops.lt(a, b) or ops.equiv(a, b)


def gt(x, y) -> bool:
    return lt(y, x)


def gte(x, y) -> bool:
    return lte(y, x)


def compare(x, y) -> int:
    """-1, 0 or 1 by numeric value."""
    ops, a, b = _pair(x, y)
    if ops.lt(a, b):
        return -1
    if ops.lt(b, a):
        return 1
    return 0


# ----------------------------------------------------------------------
# Bit operations
# ----------------------------------------------------------------------

def _bit_pair(x, y):
    x = coerce(x)
    y = coerce(y)
    ops = bit_combine(x, y)
    return ops, ops.coerce(x), ops.coerce(y)


def _bit_unary(x):
    x = coerce(x)
    ops = bit_ops_for(x)
    return ops, ops.coerce(x)


def bit_and(x, y):
    ops, a, b = _bit_pair(x, y)
    return ops.bit_and(a, b)


def bit_or(x, y):
    ops, a, b = _bit_pair(x, y)
    return ops.bit_or(a, b)


def bit_xor(x, y):
    ops, a, b = _bit_pair(x, y)
    return ops.bit_xor(a, b)


def bit_and_not(x, y):
    ops, a, b = _bit_pair(x, y)
    return ops.bit_and_not(a, b)


def bit_not(x):
    ops, a = _bit_unary(x)
    return ops.bit_not(a)


def shift_left(x, n):
    ops, a = _bit_unary(x)
    return ops.shift_left(a, bit_index(coerce(n)))


def shift_right(x, n):
    ops, a = _bit_unary(x)
    return ops.shift_right(a, bit_index(coerce(n)))


def test_bit(x, n) -> bool:
    ops, a = _bit_unary(x)
    return ops.test_bit(a, bit_index(coerce(n)))


def set_bit(x, n):
    ops, a = _bit_unary(x)
    return ops.set_bit(a, bit_index(coerce(n)))


def clear_bit(x, n):
    ops, a = _bit_unary(x)
    return ops.clear_bit(a, bit_index(coerce(n)))


def flip_bit(x, n):
    ops, a = _bit_unary(x)
    return ops.flip_bit(a, bit_index(coerce(n)))


# pytest would otherwise collect this as a test when imported by name
test_bit.__test__ = False


# ----------------------------------------------------------------------
# Generic entry points
# ----------------------------------------------------------------------

_UNARY = {
    UnaryOp.NEGATE: negate,
    UnaryOp.INC: inc,
    UnaryOp.DEC: dec,
    UnaryOp.ABS: abs,
}

_PREDICATES = {
    UnaryPredicate.IS_ZERO: is_zero,
    UnaryPredicate.IS_POS: is_pos,
    UnaryPredicate.IS_NEG: is_neg,
}

_BINARY = {
    BinaryOp.ADD: add,
    BinaryOp.MULTIPLY: multiply,
    BinaryOp.DIVIDE: divide,
    BinaryOp.QUOTIENT: quotient,
    BinaryOp.REMAINDER: remainder,
}

_BINARY_PREDICATES = {
    BinaryPredicate.EQUIV: equiv,
    BinaryPredicate.LESS_THAN: lt,
}

_BIT = {
    BitOp.AND: bit_and,
    BitOp.OR: bit_or,
    BitOp.XOR: bit_xor,
    BitOp.NOT: bit_not,
    BitOp.AND_NOT: bit_and_not,
    BitOp.SHIFT_LEFT: shift_left,
    BitOp.SHIFT_RIGHT: shift_right,
    BitOp.TEST_BIT: test_bit,
    BitOp.SET_BIT: set_bit,
    BitOp.CLEAR_BIT: clear_bit,
    BitOp.FLIP_BIT: flip_bit,
}


def apply_unary(op: UnaryOp, x, context: Optional[Context] = None):
    return _UNARY[UnaryOp(op)](x, context)


def apply_predicate(op: UnaryPredicate, x) -> bool:
    return _PREDICATES[UnaryPredicate(op)](x)


def apply_binary(op: BinaryOp, x, y, context: Optional[Context] = None):
    return _BINARY[BinaryOp(op)](x, y, context)


def apply_binary_predicate(op: BinaryPredicate, x, y) -> bool:
    return _BINARY_PREDICATES[BinaryPredicate(op)](x, y)


def apply_bit(op: BitOp, x, y=None):
    """
    Apply a bit operation; ``y`` is the second value or the bit index.

    Raises:
        DomainError: If an operand is not an integer value
        TypeError: If a binary bit operation is missing its second operand
    """
    op = BitOp(op)
    if op.is_unary:
        return _BIT[op](x)
    if y is None:
        raise TypeError(f"{op.value} requires two operands")
    return _BIT[op](x, y)


def variant(x) -> Variant:
    """Variant of a value after host coercion."""
    return variant_of(coerce(x))
