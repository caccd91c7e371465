"""
Rounding division.

Every rounding decision in the decimal engine reduces to dividing one
integer by another and resolving the remainder according to a
:class:`RoundingMode`. :func:`rounding_divide` is that single table.
"""

from .bigint import BigInt, ONE
from .context import RoundingMode
from .exceptions import RoundingRequiredError


def rounding_divide(x: BigInt, y: BigInt, mode: RoundingMode) -> BigInt:
    """
    Divide ``x`` by ``y`` and round the quotient per ``mode``.

    Args:
        x: Dividend
        y: Non-zero divisor
        mode: Rounding mode applied to a non-zero remainder

    Returns:
        The rounded integer quotient

    Raises:
        DivisionByZeroError: If ``y`` is zero
        RoundingRequiredError: If ``mode`` is UNNECESSARY and the division
            is inexact
    """
    q, r = x.div_rem(y)
    if r.is_zero:
        return q

    # sign of the exact quotient; q may be zero while x/y is not
    negative = x.sign * y.sign < 0

    if mode is RoundingMode.UNNECESSARY:
        raise RoundingRequiredError("Rounding is required")
    if mode is RoundingMode.UP:
        increment = True
    elif mode is RoundingMode.DOWN:
        increment = False
    elif mode is RoundingMode.CEILING:
        increment = not negative
    elif mode is RoundingMode.FLOOR:
        increment = negative
    else:
        cmp = r.abs().shift_left(1).compare_to(y.abs())
        if mode is RoundingMode.HALF_UP:
            increment = cmp >= 0
        elif mode is RoundingMode.HALF_DOWN:
            increment = cmp > 0
        else:
            increment = cmp > 0 or (cmp == 0 and q.is_odd)

    if not increment:
        return q
    return q.subtract(ONE) if negative else q.add(ONE)
