"""
Immutable arbitrary-precision integer.

A :class:`BigInt` is stored in sign-magnitude form: ``sign`` in {-1, 0, 1}
and a tuple of unsigned 32-bit digits, most significant first. Every
factory canonicalizes (no leading zero digits, sign 0 iff the magnitude is
empty), so each integer has exactly one representation and structural
equality coincides with numeric equality.
"""

import math
import numbers
import warnings
from decimal import Decimal
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from . import twos_complement
from .digits import (
    DIGIT_BITS,
    MASK,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from .exceptions import (
    ConversionOverflowError,
    DivisionByZeroError,
    DomainError,
    NumberFormatError,
)
from .gcd import gcd_magnitudes
from .radix import format_magnitude, parse_magnitude

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1

MAX_POWER_EXPONENT = 999_999_999

IntLike = Union["BigInt", int]


class BigInt:
    """
    Arbitrary-precision signed integer.

    Arithmetic never mutates an operand; every operation returns a new
    instance (or one of the shared constants).
    """

    __slots__ = ("_sign", "_mag")

    def __init__(self, sign: int, magnitude: Sequence[int] = ()):
        """
        Build a BigInt from a raw sign and magnitude.

        Args:
            sign: -1, 0 or 1
            magnitude: 32-bit digits, most significant first; leading zeros
                are stripped

        Raises:
            DomainError: If the sign is not in {-1, 0, 1}, a digit is out of
                range, or sign 0 is paired with a non-zero magnitude
        """
        if sign not in (-1, 0, 1):
            raise DomainError(f"Sign must be -1, 0 or 1, got {sign!r}")
        digits = []
        for d in magnitude:
            d = int(d)
            if not 0 <= d <= MASK:
                raise DomainError(f"Digit {d} does not fit in 32 bits")
            digits.append(d)
        i = 0
        while i < len(digits) and digits[i] == 0:
            i += 1
        digits = digits[i:]
        if sign == 0 and digits:
            raise DomainError("Zero sign with non-zero magnitude")
        self._sign = sign if digits else 0
        self._mag = tuple(digits)

    @classmethod
    def _create(cls, sign: int, mag: Sequence[int]) -> "BigInt":
        # Trusted path: mag is canonical already.
        obj = object.__new__(cls)
        obj._sign = sign if mag else 0
        obj._mag = tuple(mag)
        return obj

    @classmethod
    def _from_pair(cls, pair: Tuple[int, Sequence[int]]) -> "BigInt":
        return cls._create(pair[0], pair[1])

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Exact conversion of any Python (or numpy) integer."""
        if isinstance(value, bool):
            raise DomainError("bool is not an integer value")
        value = int(value)
        if value == 0:
            return ZERO
        sign = 1 if value > 0 else -1
        value = abs(value)
        mag = []
        while value:
            mag.append(value & MASK)
            value >>= DIGIT_BITS
        mag.reverse()
        return cls._create(sign, mag)

    @classmethod
    def _from_ranged(cls, value, low: int, high: int, kind: str) -> "BigInt":
        if isinstance(value, bool) or not isinstance(value, (numbers.Integral, np.integer)):
            raise DomainError(f"Expected an integer for {kind}, got {type(value).__name__}")
        value = int(value)
        if not low <= value <= high:
            raise DomainError(f"{value} is outside the {kind} range")
        return cls.from_int(value)

    @classmethod
    def from_int32(cls, value: int) -> "BigInt":
        return cls._from_ranged(value, INT32_MIN, INT32_MAX, "int32")

    @classmethod
    def from_int64(cls, value: int) -> "BigInt":
        return cls._from_ranged(value, INT64_MIN, INT64_MAX, "int64")

    @classmethod
    def from_uint64(cls, value: int) -> "BigInt":
        return cls._from_ranged(value, 0, UINT64_MAX, "uint64")

    @classmethod
    def from_float(cls, value: float) -> "BigInt":
        """
        Integer part of a binary floating-point value, truncated toward zero.

        Raises:
            DomainError: If ``value`` is NaN or infinite
        """
        if isinstance(value, np.float32):
            warnings.warn(
                "Converting a float32 to BigInt uses its exact binary value",
                stacklevel=2,
            )
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise DomainError("Infinity or NaN cannot be converted to BigInt")
        return cls.from_int(int(value))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "BigInt":
        """Integer part of a ``decimal.Decimal``, truncated toward zero."""
        if not value.is_finite():
            raise DomainError("Infinity or NaN cannot be converted to BigInt")
        return cls.from_int(int(value))

    @classmethod
    def parse(cls, text: str, radix: int = 10) -> "BigInt":
        """
        Parse ``[+-]?digits+`` in the given radix.

        Raises:
            DomainError: If the radix is outside [2, 36]
            NumberFormatError: If the text is malformed
        """
        return cls._from_pair(parse_magnitude(text, 0, len(text), radix))

    @classmethod
    def parse_buffer(cls, chars: Sequence[str], offset: int, length: int, radix: int = 10) -> "BigInt":
        """Parse ``length`` characters of ``chars`` starting at ``offset``."""
        return cls._from_pair(parse_magnitude(chars, offset, length, radix))

    @classmethod
    def try_parse(cls, text: str, radix: int = 10) -> Optional["BigInt"]:
        """Like :meth:`parse` but returns ``None`` on malformed input."""
        try:
            return cls.parse(text, radix)
        except NumberFormatError:
            return None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def magnitude(self) -> Tuple[int, ...]:
        return self._mag

    def signum(self) -> int:
        return self._sign

    @property
    def is_zero(self) -> bool:
        return self._sign == 0

    @property
    def is_positive(self) -> bool:
        return self._sign > 0

    @property
    def is_negative(self) -> bool:
        return self._sign < 0

    @property
    def is_odd(self) -> bool:
        return bool(self._mag) and bool(self._mag[-1] & 1)

    @property
    def is_even(self) -> bool:
        return not self.is_odd

    @property
    def is_one(self) -> bool:
        return self._sign == 1 and self._mag == (1,)

    def bit_length(self) -> int:
        """Bits needed for the magnitude."""
        if not self._mag:
            return 0
        return (len(self._mag) - 1) * DIGIT_BITS + self._mag[0].bit_length()

    def precision(self) -> int:
        """Number of decimal digits in the magnitude (1 for zero)."""
        if not self._mag:
            return 1
        return len(format_magnitude(self._mag, 10))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        value = 0
        for d in self._mag:
            value = (value << DIGIT_BITS) | d
        return -value if self._sign < 0 else value

    def _as_ranged(self, low: int, high: int, kind: str) -> int:
        value = self.to_int()
        if not low <= value <= high:
            raise ConversionOverflowError(f"Value does not fit in {kind}", target=kind)
        return value

    def as_int32(self) -> int:
        return self._as_ranged(INT32_MIN, INT32_MAX, "int32")

    def as_int64(self) -> int:
        return self._as_ranged(INT64_MIN, INT64_MAX, "int64")

    def as_uint32(self) -> int:
        return self._as_ranged(0, UINT32_MAX, "uint32")

    def as_uint64(self) -> int:
        return self._as_ranged(0, UINT64_MAX, "uint64")

    def try_as_int32(self) -> Optional[int]:
        value = self.to_int()
        return value if INT32_MIN <= value <= INT32_MAX else None

    def try_as_int64(self) -> Optional[int]:
        value = self.to_int()
        return value if INT64_MIN <= value <= INT64_MAX else None

    def to_float(self) -> float:
        """Nearest double; magnitudes beyond the double range give +/-inf."""
        try:
            return float(self.to_int())
        except OverflowError:
            return math.copysign(math.inf, self._sign)

    def to_string(self, radix: int = 10) -> str:
        text = format_magnitude(self._mag, radix)
        return "-" + text if self._sign < 0 else text

    def __int__(self) -> int:
        return self.to_int()

    def __index__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._sign != 0

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"BigInt({self.to_string(10)})"

    # ------------------------------------------------------------------
    # Equality, hashing, ordering
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._sign == other._sign and self._mag == other._mag

    def __hash__(self) -> int:
        h = 0
        for d in self._mag:
            h = (31 * h + d) & MASK
        return h * self._sign

    def compare_to(self, other: "BigInt") -> int:
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        if self._sign == 0:
            return 0
        return self._sign * compare_magnitudes(self._mag, other._mag)

    def __lt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self) -> "BigInt":
        return BigInt._create(-self._sign, self._mag)

    def abs(self) -> "BigInt":
        return self.negate() if self._sign < 0 else self

    def add(self, other: "BigInt") -> "BigInt":
        if self._sign == 0:
            return other
        if other._sign == 0:
            return self
        if self._sign == other._sign:
            return BigInt._create(self._sign, add_magnitudes(self._mag, other._mag))
        cmp = compare_magnitudes(self._mag, other._mag)
        if cmp == 0:
            return ZERO
        if cmp > 0:
            return BigInt._create(self._sign, subtract_magnitudes(self._mag, other._mag))
        return BigInt._create(other._sign, subtract_magnitudes(other._mag, self._mag))

    def subtract(self, other: "BigInt") -> "BigInt":
        return self.add(other.negate())

    def multiply(self, other: "BigInt") -> "BigInt":
        if self._sign == 0 or other._sign == 0:
            return ZERO
        return BigInt._create(self._sign * other._sign, multiply_magnitudes(self._mag, other._mag))

    def div_rem(self, other: "BigInt") -> Tuple["BigInt", "BigInt"]:
        """
        Truncating division.

        Returns:
            Tuple of (quotient, remainder); the quotient is rounded toward
            zero and the remainder takes the dividend's sign

        Raises:
            DivisionByZeroError: If ``other`` is zero
        """
        if other._sign == 0:
            raise DivisionByZeroError("BigInt division by zero")
        if self._sign == 0:
            return ZERO, ZERO
        q, r = divmod_magnitudes(self._mag, other._mag)
        return (
            BigInt._create(self._sign * other._sign, q),
            BigInt._create(self._sign, r),
        )

    def divide(self, other: "BigInt") -> "BigInt":
        return self.div_rem(other)[0]

    def mod(self, other: "BigInt") -> "BigInt":
        return self.div_rem(other)[1]

    def power(self, exponent: int) -> "BigInt":
        """
        ``self ** exponent`` by repeated squaring.

        Raises:
            DomainError: If ``exponent`` is outside [0, 999999999]
        """
        exponent = int(exponent)
        if exponent < 0:
            raise DomainError("Exponent must be non-negative")
        if exponent > MAX_POWER_EXPONENT:
            raise DomainError("Exponent too large")
        result = ONE
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            exponent >>= 1
            if exponent:
                base = base.multiply(base)
        return result

    def mod_pow(self, exponent: IntLike, modulus: IntLike) -> "BigInt":
        """
        ``self ** exponent`` reduced by ``modulus`` after every multiply.

        The reduction is the truncating remainder, so a negative base can
        produce a negative result.

        Raises:
            DomainError: If ``exponent`` is negative
            DivisionByZeroError: If ``modulus`` is zero
        """
        exponent = _coerce(exponent)
        modulus = _coerce(modulus)
        if exponent.is_negative:
            raise DomainError("Exponent must be non-negative")
        result = ONE.mod(modulus)
        base = self.mod(modulus)
        while not exponent.is_zero:
            if exponent.is_odd:
                result = result.multiply(base).mod(modulus)
            exponent = exponent.shift_right(1)
            if not exponent.is_zero:
                base = base.multiply(base).mod(modulus)
        return result

    def gcd(self, other: "BigInt") -> "BigInt":
        """Non-negative greatest common divisor (``gcd(0, 0) == 0``)."""
        return BigInt._create(1, gcd_magnitudes(self._mag, other._mag))

    # ------------------------------------------------------------------
    # Bit operations (two's-complement semantics)
    # ------------------------------------------------------------------

    def _pair(self):
        return self._sign, self._mag

    def bit_and(self, other: "BigInt") -> "BigInt":
        return BigInt._from_pair(twos_complement.bit_and(self._pair(), other._pair()))

    def bit_or(self, other: "BigInt") -> "BigInt":
        return BigInt._from_pair(twos_complement.bit_or(self._pair(), other._pair()))

    def bit_xor(self, other: "BigInt") -> "BigInt":
        return BigInt._from_pair(twos_complement.bit_xor(self._pair(), other._pair()))

    def bit_and_not(self, other: "BigInt") -> "BigInt":
        return BigInt._from_pair(twos_complement.bit_and_not(self._pair(), other._pair()))

    def bit_not(self) -> "BigInt":
        return BigInt._from_pair(twos_complement.bit_not(self._pair()))

    def test_bit(self, n: int) -> bool:
        return twos_complement.test_bit(self._pair(), n)

    def set_bit(self, n: int) -> "BigInt":
        return BigInt._from_pair(twos_complement.set_bit(self._pair(), n))

    def clear_bit(self, n: int) -> "BigInt":
        return BigInt._from_pair(twos_complement.clear_bit(self._pair(), n))

    def flip_bit(self, n: int) -> "BigInt":
        return BigInt._from_pair(twos_complement.flip_bit(self._pair(), n))

    def shift_left(self, n: int) -> "BigInt":
        return BigInt._from_pair(twos_complement.shift_left(self._pair(), n))

    def shift_right(self, n: int) -> "BigInt":
        return BigInt._from_pair(twos_complement.shift_right(self._pair(), n))

    # ------------------------------------------------------------------
    # Operator sugar
    # ------------------------------------------------------------------

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __add__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.multiply(other)

    __rmul__ = __mul__

    def __pow__(self, exponent, modulus=None):
        if modulus is None:
            return self.power(exponent)
        return self.mod_pow(exponent, modulus)

    def __and__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.bit_and(other)

    def __or__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.bit_or(other)

    def __xor__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.bit_xor(other)

    def __invert__(self):
        return self.bit_not()

    def __lshift__(self, n):
        return self.shift_left(int(n))

    def __rshift__(self, n):
        return self.shift_right(int(n))


def _coerce(value: IntLike) -> BigInt:
    if isinstance(value, BigInt):
        return value
    return BigInt.from_int(value)


def _coerce_or_none(value) -> Optional[BigInt]:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


ZERO = BigInt._create(0, ())
ONE = BigInt._create(1, (1,))
TWO = BigInt._create(1, (2,))
FIVE = BigInt._create(1, (5,))
TEN = BigInt._create(1, (10,))
NEGATIVE_ONE = BigInt._create(-1, (1,))
