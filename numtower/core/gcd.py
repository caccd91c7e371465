"""
Greatest common divisor of magnitudes.

Hybrid scheme: Euclidean remainder steps while the operands differ in length
by two words or more, then binary GCD (Knuth 4.5.5, Algorithm B) once the
lengths converge. Single-word operands use a word-level binary GCD driven by
the byte trailing-zero table.
"""

from typing import List, Sequence

from .digits import (
    compare_magnitudes,
    divmod_magnitudes,
    shift_left_magnitude,
    shift_right_magnitude,
    subtract_magnitudes,
    trailing_zero_bits,
    trailing_zero_count,
)


def gcd_magnitudes(x: Sequence[int], y: Sequence[int]) -> List[int]:
    """GCD of two canonical magnitudes (``gcd(0, 0)`` is zero)."""
    a = list(x)
    b = list(y)
    if compare_magnitudes(a, b) < 0:
        a, b = b, a
    while b:
        if len(a) - len(b) < 2:
            return binary_gcd(a, b)
        _, rem = divmod_magnitudes(a, b)
        a, b = b, rem
    return a


def binary_gcd(x: Sequence[int], y: Sequence[int]) -> List[int]:
    """Knuth Algorithm B over canonical magnitudes."""
    if not x:
        return list(y)
    if not y:
        return list(x)

    tx = trailing_zero_bits(x)
    ty = trailing_zero_bits(y)
    shift = min(tx, ty)
    u = shift_right_magnitude(x, tx)
    v = shift_right_magnitude(y, ty)

    # u and v are odd from here on
    while True:
        if len(u) == 1 and len(v) == 1:
            result = [word_gcd(u[0], v[0])]
            break
        cmp = compare_magnitudes(u, v)
        if cmp == 0:
            result = u
            break
        if cmp < 0:
            u, v = v, u
        u = subtract_magnitudes(u, v)
        u = shift_right_magnitude(u, trailing_zero_bits(u))
    return shift_left_magnitude(result, shift)


def word_gcd(u: int, v: int) -> int:
    """Binary GCD of two unsigned 32-bit words."""
    if u == 0:
        return v
    if v == 0:
        return u
    shift = trailing_zero_count(u | v)
    u >>= trailing_zero_count(u)
    while v:
        v >>= trailing_zero_count(v)
        if u > v:
            u, v = v, u
        v -= u
    return u << shift
