"""
Two's-complement bit operations over sign-magnitude integers.

Values are passed around as ``(sign, magnitude)`` pairs. No two's-complement
form is ever stored: :func:`digit_at` synthesizes the word an infinite
two's-complement representation would hold at a given index, and every
operation below is written in terms of it. Results are turned back into
sign-magnitude by inspecting the top (sign-extension) word.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .digits import (
    DIGIT_BITS,
    HIGH_BIT,
    MASK,
    add_magnitudes,
    shift_left_magnitude,
    shift_right_magnitude,
    strip_leading_zeros,
    subtract_magnitudes,
)
from .exceptions import DomainError

SignMagnitude = Tuple[int, List[int]]


def lowest_nonzero_index(mag: Sequence[int]) -> int:
    """Word index (0 = least significant) of the lowest non-zero digit."""
    n = len(mag)
    for index in range(n):
        if mag[n - 1 - index] != 0:
            return index
    return n


def digit_at(sign: int, mag: Sequence[int], index: int, lowest: Optional[int] = None) -> int:
    """
    Two's-complement word at ``index`` (0 = least significant).

    Args:
        sign: -1, 0 or 1
        mag: Canonical magnitude, most significant digit first
        index: Non-negative word index; may exceed the stored length
        lowest: Precomputed :func:`lowest_nonzero_index`, if known

    Returns:
        The 32-bit word, with ``0`` or ``0xFFFFFFFF`` sign extension beyond
        the stored length
    """
    n = len(mag)
    if index >= n:
        return MASK if sign < 0 else 0
    digit = mag[n - 1 - index]
    if sign >= 0:
        return digit
    if lowest is None:
        lowest = lowest_nonzero_index(mag)
    if index < lowest:
        return 0
    if index == lowest:
        return (~digit + 1) & MASK
    return ~digit & MASK


def _words(sign: int, mag: Sequence[int], count: int) -> List[int]:
    lowest = lowest_nonzero_index(mag) if sign < 0 else None
    return [digit_at(sign, mag, i, lowest) for i in range(count)]


def from_twos_complement(words: Sequence[int]) -> SignMagnitude:
    """Sign-magnitude value of little-endian two's-complement words."""
    if not words or not (words[-1] & HIGH_BIT):
        mag = strip_leading_zeros(list(reversed(words)))
        return (1 if mag else 0), mag
    carry = 1
    out = []
    for word in words:
        total = (~word & MASK) + carry
        out.append(total & MASK)
        carry = total >> DIGIT_BITS
    return -1, strip_leading_zeros(list(reversed(out)))


def _combine(x: SignMagnitude, y: SignMagnitude, fn: Callable[[int, int], int]) -> SignMagnitude:
    # One extra word keeps the top word a pure sign extension.
    count = max(len(x[1]), len(y[1])) + 1
    xw = _words(x[0], x[1], count)
    yw = _words(y[0], y[1], count)
    return from_twos_complement([fn(a, b) & MASK for a, b in zip(xw, yw)])


def bit_and(x: SignMagnitude, y: SignMagnitude) -> SignMagnitude:
    return _combine(x, y, lambda a, b: a & b)


def bit_or(x: SignMagnitude, y: SignMagnitude) -> SignMagnitude:
    return _combine(x, y, lambda a, b: a | b)


def bit_xor(x: SignMagnitude, y: SignMagnitude) -> SignMagnitude:
    return _combine(x, y, lambda a, b: a ^ b)


def bit_and_not(x: SignMagnitude, y: SignMagnitude) -> SignMagnitude:
    return _combine(x, y, lambda a, b: a & ~b)


def bit_not(x: SignMagnitude) -> SignMagnitude:
    words = _words(x[0], x[1], len(x[1]) + 1)
    return from_twos_complement([~w & MASK for w in words])


def _check_bit_index(n: int) -> None:
    if n < 0:
        raise DomainError(f"Bit index must be non-negative, got {n}")


def test_bit(x: SignMagnitude, n: int) -> bool:
    """Whether bit ``n`` of the two's-complement form is set."""
    _check_bit_index(n)
    word = digit_at(x[0], x[1], n // DIGIT_BITS)
    return bool((word >> (n % DIGIT_BITS)) & 1)


def _update_bit(x: SignMagnitude, n: int, fn: Callable[[int, int], int]) -> SignMagnitude:
    _check_bit_index(n)
    index = n // DIGIT_BITS
    words = _words(x[0], x[1], max(len(x[1]), index + 1) + 1)
    words[index] = fn(words[index], 1 << (n % DIGIT_BITS)) & MASK
    return from_twos_complement(words)


def set_bit(x: SignMagnitude, n: int) -> SignMagnitude:
    return _update_bit(x, n, lambda w, bit: w | bit)


def clear_bit(x: SignMagnitude, n: int) -> SignMagnitude:
    return _update_bit(x, n, lambda w, bit: w & ~bit)


def flip_bit(x: SignMagnitude, n: int) -> SignMagnitude:
    return _update_bit(x, n, lambda w, bit: w ^ bit)


def shift_left(x: SignMagnitude, n: int) -> SignMagnitude:
    """``x * 2**n``; a negative ``n`` shifts right instead."""
    if n < 0:
        return shift_right(x, -n)
    if x[0] == 0 or n == 0:
        return x
    return x[0], shift_left_magnitude(x[1], n)


def shift_right(x: SignMagnitude, n: int) -> SignMagnitude:
    """Arithmetic shift, ``floor(x / 2**n)``; a negative ``n`` shifts left."""
    if n < 0:
        return shift_left(x, -n)
    if x[0] == 0 or n == 0:
        return x
    if x[0] > 0:
        mag = shift_right_magnitude(x[1], n)
        return (1 if mag else 0), mag
    # floor(-m / 2**n) == -(((m - 1) >> n) + 1)
    reduced = shift_right_magnitude(subtract_magnitudes(x[1], [1]), n)
    return -1, add_magnitudes(reduced, [1])
