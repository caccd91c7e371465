"""
Magnitude kernels over sequences of unsigned 32-bit digits.

A magnitude is a sequence of ints in ``[0, 2**32)`` stored most-significant
digit first. Canonical magnitudes carry no leading zero digit, and zero is
the empty sequence. Functions here accept any sequence and return fresh
lists; scratch buffers never escape a call.

The division routine follows Knuth, TAOCP vol. 2, section 4.3.1,
Algorithm D.
"""

from typing import List, Sequence, Tuple

DIGIT_BITS = 32
BASE = 1 << DIGIT_BITS
MASK = BASE - 1
HIGH_BIT = 1 << (DIGIT_BITS - 1)

Magnitude = Sequence[int]


def _build_trailing_zeros_table() -> Tuple[int, ...]:
    table = [8]
    for i in range(1, 256):
        count = 0
        while not (i >> count) & 1:
            count += 1
        table.append(count)
    return tuple(table)


# Trailing zero count of every byte value (0 maps to 8).
TRAILING_ZEROS_TABLE = _build_trailing_zeros_table()


def strip_leading_zeros(mag: Magnitude) -> List[int]:
    """Return ``mag`` without leading zero digits (possibly empty)."""
    i = 0
    n = len(mag)
    while i < n and mag[i] == 0:
        i += 1
    return list(mag[i:])


def leading_zero_count(digit: int) -> int:
    """Number of leading zero bits in a 32-bit digit."""
    return DIGIT_BITS - digit.bit_length()


def trailing_zero_count(digit: int) -> int:
    """Number of trailing zero bits in a 32-bit digit (32 for zero)."""
    if digit == 0:
        return DIGIT_BITS
    count = 0
    while (digit & 0xFF) == 0:
        digit >>= 8
        count += 8
    return count + TRAILING_ZEROS_TABLE[digit & 0xFF]


def trailing_zero_bits(mag: Magnitude) -> int:
    """Number of trailing zero bits in a non-zero magnitude."""
    count = 0
    for i in range(len(mag) - 1, -1, -1):
        if mag[i] != 0:
            return count + trailing_zero_count(mag[i])
        count += DIGIT_BITS
    return count


def compare_magnitudes(x: Magnitude, y: Magnitude) -> int:
    """Compare canonical magnitudes by length, then digit by digit."""
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    for a, b in zip(x, y):
        if a != b:
            return -1 if a < b else 1
    return 0


def add_magnitudes(x: Magnitude, y: Magnitude) -> List[int]:
    """Magnitude sum with carry propagation."""
    if len(x) < len(y):
        x, y = y, x
    result = [0] * len(x)
    i = len(x) - 1
    j = len(y) - 1
    carry = 0
    while j >= 0:
        total = x[i] + y[j] + carry
        result[i] = total & MASK
        carry = total >> DIGIT_BITS
        i -= 1
        j -= 1
    while carry and i >= 0:
        total = x[i] + carry
        result[i] = total & MASK
        carry = total >> DIGIT_BITS
        i -= 1
    while i >= 0:
        result[i] = x[i]
        i -= 1
    if carry:
        # grow by one word only when a final carry remains
        result.insert(0, carry)
    return result


def subtract_magnitudes(x: Magnitude, y: Magnitude) -> List[int]:
    """Magnitude difference ``x - y``; requires ``x >= y``."""
    result = [0] * len(x)
    i = len(x) - 1
    j = len(y) - 1
    borrow = 0
    while j >= 0:
        diff = x[i] - y[j] - borrow
        result[i] = diff & MASK
        borrow = 1 if diff < 0 else 0
        i -= 1
        j -= 1
    while borrow and i >= 0:
        diff = x[i] - borrow
        result[i] = diff & MASK
        borrow = 1 if diff < 0 else 0
        i -= 1
    while i >= 0:
        result[i] = x[i]
        i -= 1
    if borrow:
        raise ArithmeticError("subtract_magnitudes requires x >= y")
    return strip_leading_zeros(result)


def multiply_magnitudes(x: Magnitude, y: Magnitude) -> List[int]:
    """Schoolbook product over 64-bit partial products."""
    if not x or not y:
        return []
    xlen = len(x)
    ylen = len(y)
    result = [0] * (xlen + ylen)
    for i in range(xlen - 1, -1, -1):
        xi = x[i]
        if xi == 0:
            continue
        carry = 0
        k = i + ylen
        for j in range(ylen - 1, -1, -1):
            product = xi * y[j] + result[k] + carry
            result[k] = product & MASK
            carry = product >> DIGIT_BITS
            k -= 1
        result[k] = carry
    return strip_leading_zeros(result)


def multiply_add_in_place(buf: List[int], mult: int, addend: int) -> int:
    """Replace ``buf`` with ``buf * mult + addend``; return the outgoing carry."""
    carry = addend
    for i in range(len(buf) - 1, -1, -1):
        product = buf[i] * mult + carry
        buf[i] = product & MASK
        carry = product >> DIGIT_BITS
    return carry


def divide_in_place(buf: List[int], start: int, divisor: int) -> int:
    """Divide ``buf[start:]`` by a single digit in place; return the remainder."""
    rem = 0
    for i in range(start, len(buf)):
        current = (rem << DIGIT_BITS) | buf[i]
        buf[i] = current // divisor
        rem = current % divisor
    return rem


def divrem_digit(x: Magnitude, divisor: int) -> Tuple[List[int], int]:
    """Quotient and remainder of a magnitude by a single non-zero digit."""
    quotient = list(x)
    rem = divide_in_place(quotient, 0, divisor)
    return strip_leading_zeros(quotient), rem


def shift_left_magnitude(x: Magnitude, count: int) -> List[int]:
    """Magnitude shifted left by ``count >= 0`` bits."""
    if not x:
        return []
    words, bits = divmod(count, DIGIT_BITS)
    if bits == 0:
        return list(x) + [0] * words
    result = [0] * (len(x) + 1 + words)
    carry = 0
    back = DIGIT_BITS - bits
    for i in range(len(x) - 1, -1, -1):
        result[i + 1] = ((x[i] << bits) & MASK) | carry
        carry = x[i] >> back
    result[0] = carry
    return strip_leading_zeros(result)


def shift_right_magnitude(x: Magnitude, count: int) -> List[int]:
    """Magnitude shifted right by ``count >= 0`` bits (bits fall off)."""
    words, bits = divmod(count, DIGIT_BITS)
    keep = len(x) - words
    if keep <= 0:
        return []
    if bits == 0:
        return list(x[:keep])
    result = [0] * keep
    back = DIGIT_BITS - bits
    high = 0
    for i in range(keep):
        result[i] = ((high << back) & MASK) | (x[i] >> bits)
        high = x[i]
    return strip_leading_zeros(result)


def divmod_magnitudes(x: Magnitude, y: Magnitude) -> Tuple[List[int], List[int]]:
    """Quotient and remainder of canonical magnitudes.

    Args:
        x: Dividend magnitude
        y: Non-empty divisor magnitude

    Returns:
        Tuple of (quotient, remainder) canonical magnitudes

    Raises:
        ZeroDivisionError: If ``y`` is empty
    """
    if not y:
        raise ZeroDivisionError("magnitude division by zero")
    cmp = compare_magnitudes(x, y)
    if cmp < 0:
        return [], list(x)
    if cmp == 0:
        return [1], []
    if len(y) == 1:
        quotient, rem = divrem_digit(x, y[0])
        return quotient, ([rem] if rem else [])
    return _knuth_divmod(x, y)


def _knuth_divmod(x: Magnitude, y: Magnitude) -> Tuple[List[int], List[int]]:
    # Algorithm D; len(y) >= 2 and x > y.
    n = len(y)
    m = len(x) - n
    shift = leading_zero_count(y[0])
    back = DIGIT_BITS - shift

    # D1: normalize so the divisor's leading digit has its high bit set.
    if shift:
        yn = [0] * n
        for i in range(n - 1):
            yn[i] = ((y[i] << shift) & MASK) | (y[i + 1] >> back)
        yn[n - 1] = (y[n - 1] << shift) & MASK
        xn = [0] * (len(x) + 1)
        xn[0] = x[0] >> back
        for i in range(1, len(x)):
            xn[i] = ((x[i - 1] << shift) & MASK) | (x[i] >> back)
        xn[len(x)] = (x[len(x) - 1] << shift) & MASK
    else:
        yn = list(y)
        xn = [0] + list(x)

    y0 = yn[0]
    y1 = yn[1]
    quotient = [0] * (m + 1)

    for j in range(m + 1):
        # D3: estimate qhat from the two leading digits.
        top = (xn[j] << DIGIT_BITS) | xn[j + 1]
        qhat, rhat = divmod(top, y0)
        while qhat >= BASE or qhat * y1 > ((rhat << DIGIT_BITS) | xn[j + 2]):
            qhat -= 1
            rhat += y0
            if rhat >= BASE:
                break

        # D4: multiply and subtract.
        borrow = 0
        carry = 0
        for i in range(n - 1, -1, -1):
            product = qhat * yn[i] + carry
            carry = product >> DIGIT_BITS
            diff = xn[j + i + 1] - (product & MASK) - borrow
            xn[j + i + 1] = diff & MASK
            borrow = 1 if diff < 0 else 0
        diff = xn[j] - carry - borrow
        xn[j] = diff & MASK

        # D6: add back when the trial subtraction went negative.
        if diff < 0:
            qhat -= 1
            carry = 0
            for i in range(n - 1, -1, -1):
                total = xn[j + i + 1] + yn[i] + carry
                xn[j + i + 1] = total & MASK
                carry = total >> DIGIT_BITS
            xn[j] = (xn[j] + carry) & MASK

        quotient[j] = qhat

    # D8: unnormalize the remainder held in the low n digits.
    remainder = [0] * n
    if shift:
        for i in range(n):
            remainder[i] = (xn[m + 1 + i] >> shift) | ((xn[m + i] << back) & MASK)
    else:
        remainder = xn[m + 1:]
    return strip_leading_zeros(quotient), strip_leading_zeros(remainder)
