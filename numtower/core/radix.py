"""
Radix conversion for 32-bit digit magnitudes.

Digits are consumed and produced in groups: for each radix the *super-radix*
is the largest power of the radix that still fits in one 32-bit digit, so a
group of ``digits_per_word(radix)`` characters converts to a single machine
digit. Parsing folds groups into the accumulator with a multiply-by-super-
radix-and-add (Knuth 4.4, Method 1b); formatting repeatedly divides by the
super-radix and emits each remainder as a zero-padded group.
"""

from typing import List, Sequence, Tuple

from .digits import MASK, divide_in_place, multiply_add_in_place
from .exceptions import DomainError, NumberFormatError

MIN_RADIX = 2
MAX_RADIX = 36

DIGIT_SYMBOLS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    digits = [0, 0]
    supers = [0, 0]
    for radix in range(MIN_RADIX, MAX_RADIX + 1):
        count = 0
        power = 1
        while power * radix <= MASK:
            power *= radix
            count += 1
        digits.append(count)
        supers.append(power)
    return tuple(digits), tuple(supers)


RADIX_DIGITS_PER_WORD, SUPER_RADIX = _build_tables()


def _build_char_values() -> dict:
    values = {}
    for i, ch in enumerate(DIGIT_SYMBOLS):
        values[ch] = i
        values[ch.upper()] = i
    return values


_CHAR_VALUES = _build_char_values()


def check_radix(radix: int) -> None:
    """Raise ``DomainError`` unless ``radix`` lies in [2, 36]."""
    if not isinstance(radix, int) or isinstance(radix, bool) or not MIN_RADIX <= radix <= MAX_RADIX:
        raise DomainError(f"Radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix!r}")


def digits_per_word(radix: int) -> int:
    """Number of radix digits that always fit in one 32-bit digit."""
    check_radix(radix)
    return RADIX_DIGITS_PER_WORD[radix]


def super_radix(radix: int) -> int:
    """Largest power of ``radix`` representable in one 32-bit digit."""
    check_radix(radix)
    return SUPER_RADIX[radix]


def parse_magnitude(chars: Sequence[str], offset: int, length: int, radix: int) -> Tuple[int, List[int]]:
    """
    Parse ``[+-]?digits+`` from a character buffer.

    Args:
        chars: String or sequence of single characters
        offset: Index of the first character to read
        length: Number of characters to read
        radix: Radix in [2, 36]

    Returns:
        Tuple of (sign, canonical magnitude)

    Raises:
        DomainError: If the radix or the buffer window is invalid
        NumberFormatError: If the text is not a well-formed integer
    """
    check_radix(radix)
    if offset < 0 or length < 0 or offset + length > len(chars):
        raise DomainError("Buffer window out of range")

    text = chars[offset:offset + length]
    if length == 0:
        raise NumberFormatError("Zero length BigInteger", text)

    end = offset + length
    index = offset
    sign = 1
    if chars[index] == "-":
        sign = -1
        index += 1
    elif chars[index] == "+":
        index += 1
    if index == end:
        raise NumberFormatError("Zero length BigInteger", text)

    while index < end and chars[index] == "0":
        index += 1
    if index == end:
        return 0, []

    group = RADIX_DIGITS_PER_WORD[radix]
    base = SUPER_RADIX[radix]
    num_digits = end - index
    first = num_digits % group or group
    buf = [0] * ((num_digits + group - 1) // group)

    group_end = index + first
    while index < end:
        value = 0
        while index < group_end:
            digit = _CHAR_VALUES.get(chars[index], MAX_RADIX)
            if digit >= radix:
                raise NumberFormatError(
                    f"Illegal digit {chars[index]!r} for radix {radix}", text
                )
            value = value * radix + digit
            index += 1
        multiply_add_in_place(buf, base, value)
        group_end = index + group

    i = 0
    while buf[i] == 0:
        i += 1
    return sign, buf[i:]


def format_magnitude(mag: Sequence[int], radix: int) -> str:
    """Render a canonical magnitude in ``radix`` with lowercase symbols."""
    check_radix(radix)
    if not mag:
        return "0"

    group = RADIX_DIGITS_PER_WORD[radix]
    base = SUPER_RADIX[radix]
    buf = list(mag)
    start = 0
    groups = []
    while start < len(buf):
        groups.append(divide_in_place(buf, start, base))
        while start < len(buf) and buf[start] == 0:
            start += 1

    parts = [_format_word(groups[-1], radix)]
    for value in reversed(groups[:-1]):
        parts.append(_format_word(value, radix).rjust(group, "0"))
    return "".join(parts)


def _format_word(value: int, radix: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, radix)
        out.append(DIGIT_SYMBOLS[digit])
    return "".join(reversed(out))
