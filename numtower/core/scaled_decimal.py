"""
Immutable arbitrary-precision decimal.

A :class:`ScaledDecimal` is ``coefficient * 10**exponent`` with a
:class:`~numtower.core.bigint.BigInt` coefficient and a signed 32-bit
exponent. Trailing zeros are significant: ``1.0`` and ``1.00`` are
different values under ``==`` (structural equality) while
:meth:`ScaledDecimal.compare_to` orders purely by numeric value.

Every arithmetic method accepts an optional :class:`Context`. Without one
(or with an unlimited context) results are exact; division that cannot be
represented exactly raises :class:`RoundingRequiredError`.
"""

import math
import warnings
from decimal import Decimal
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .bigint import BigInt, FIVE, ONE as BI_ONE, TEN as BI_TEN, ZERO as BI_ZERO
from .context import Context, RoundingMode
from .exceptions import (
    DivisionByZeroError,
    DomainError,
    ExponentOverflowError,
    ExponentUnderflowError,
    NumberFormatError,
    RoundingRequiredError,
)
from .rounding import rounding_divide

EXPONENT_MIN = -(1 << 31)
EXPONENT_MAX = (1 << 31) - 1
MAX_POWER = 999_999_999

_POWER_CACHE_SIZE = 12
_TEN_POWERS = tuple(BI_TEN.power(i) for i in range(_POWER_CACHE_SIZE))

Coefficient = Union[BigInt, int]


def ten_pow(n: int) -> BigInt:
    """``10**n`` as a BigInt, cached for small ``n``."""
    if n < _POWER_CACHE_SIZE:
        return _TEN_POWERS[n]
    return BI_TEN.power(n)


def check_exponent(value: int, is_zero: bool) -> int:
    """
    Validate an exponent computed with unbounded arithmetic.

    Args:
        value: The true exponent
        is_zero: Whether the coefficient it belongs to is zero

    Returns:
        ``value`` if it fits in 32 bits; for a zero coefficient, the nearest
        32-bit extreme

    Raises:
        ExponentOverflowError: If a non-zero value's exponent is too large
        ExponentUnderflowError: If a non-zero value's exponent is too small
    """
    if EXPONENT_MIN <= value <= EXPONENT_MAX:
        return value
    if is_zero:
        return EXPONENT_MAX if value > 0 else EXPONENT_MIN
    if value > 0:
        raise ExponentOverflowError("Overflow in scale")
    raise ExponentUnderflowError("Underflow in scale")


def _clamp_exponent(value: int) -> int:
    return max(EXPONENT_MIN, min(EXPONENT_MAX, value))


class ScaledDecimal:
    """Arbitrary-precision decimal value ``coefficient * 10**exponent``."""

    __slots__ = ("_coeff", "_exp", "_precision")

    def __init__(self, coefficient: Coefficient, exponent: int = 0):
        """
        Args:
            coefficient: Signed integer coefficient (BigInt or int)
            exponent: Power of ten, within the signed 32-bit range

        Raises:
            ExponentOverflowError: If the exponent of a non-zero value does
                not fit in 32 bits; a zero coefficient clamps to the nearest
                32-bit extreme instead
        """
        if not isinstance(coefficient, BigInt):
            coefficient = BigInt.from_int(coefficient)
        exponent = check_exponent(int(exponent), coefficient.is_zero)
        self._coeff = coefficient
        self._exp = exponent
        self._precision = 0

    @classmethod
    def _create(cls, coeff: BigInt, exp: int, precision: int = 0) -> "ScaledDecimal":
        obj = object.__new__(cls)
        obj._coeff = coeff
        obj._exp = exp
        obj._precision = precision
        return obj

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int, context: Optional[Context] = None) -> "ScaledDecimal":
        return cls._create(BigInt.from_int(value), 0).round(context)

    @classmethod
    def from_bigint(cls, coefficient: BigInt, exponent: int = 0,
                    context: Optional[Context] = None) -> "ScaledDecimal":
        return cls(coefficient, exponent).round(context)

    @classmethod
    def from_float(cls, value: float, context: Optional[Context] = None) -> "ScaledDecimal":
        """
        Exact decimal expansion of a binary floating-point value.

        ``from_float(0.1)`` is not ``parse("0.1")``: the double nearest to one
        tenth has a long but finite decimal expansion, and that expansion is
        what is returned (then rounded if a context is given).

        Raises:
            DomainError: If ``value`` is NaN or infinite
        """
        if isinstance(value, np.float32):
            warnings.warn(
                "Converting a float32 to ScaledDecimal uses its exact binary value",
                stacklevel=2,
            )
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise DomainError("Infinity/NaN not supported in ScaledDecimal")
        numerator, denominator = value.as_integer_ratio()
        coeff = BigInt.from_int(numerator)
        if denominator == 1:
            return cls._create(coeff, 0).round(context)
        # denominator is 2**k; n / 2**k == n * 5**k / 10**k
        k = denominator.bit_length() - 1
        return cls._create(coeff.multiply(FIVE.power(k)), -k).round(context)

    @classmethod
    def from_decimal(cls, value: Decimal, context: Optional[Context] = None) -> "ScaledDecimal":
        """Exact conversion of a finite ``decimal.Decimal``."""
        if not value.is_finite():
            raise DomainError("Infinity/NaN not supported in ScaledDecimal")
        sign, digits, exponent = value.as_tuple()
        coeff = BigInt.from_int(int("".join(map(str, digits)) or "0"))
        if sign:
            coeff = coeff.negate()
        return cls(coeff, exponent).round(context)

    @classmethod
    def parse(cls, text: str, context: Optional[Context] = None) -> "ScaledDecimal":
        """
        Parse ``[+-]?digit*(.digit*)?([eE][+-]?digit+)?``.

        At least one digit must appear before or after the decimal point.

        Raises:
            NumberFormatError: If the text is malformed
            ExponentOverflowError: If the resulting exponent does not fit
        """
        return cls.parse_buffer(text, 0, len(text), context)

    @classmethod
    def parse_buffer(cls, chars: Sequence[str], offset: int, length: int,
                     context: Optional[Context] = None) -> "ScaledDecimal":
        """Parse ``length`` characters of ``chars`` starting at ``offset``."""
        coeff, exp = _parse_parts(chars, offset, length)
        return cls._create(coeff, exp).round(context)

    @classmethod
    def try_parse(cls, text: str) -> Optional["ScaledDecimal"]:
        """Like :meth:`parse` but returns ``None`` on malformed input."""
        try:
            return cls.parse(text)
        except (NumberFormatError, ExponentOverflowError):
            return None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def coefficient(self) -> BigInt:
        return self._coeff

    @property
    def exponent(self) -> int:
        return self._exp

    @property
    def precision(self) -> int:
        """Significant digits in the coefficient (1 for zero), cached."""
        if self._precision == 0:
            self._precision = self._coeff.precision()
        return self._precision

    @property
    def is_zero(self) -> bool:
        return self._coeff.is_zero

    @property
    def is_positive(self) -> bool:
        return self._coeff.is_positive

    @property
    def is_negative(self) -> bool:
        return self._coeff.is_negative

    def signum(self) -> int:
        return self._coeff.sign

    # ------------------------------------------------------------------
    # Formatting and conversion
    # ------------------------------------------------------------------

    def to_scientific_string(self) -> str:
        digits = self._coeff.abs().to_string()
        sign = "-" if self._coeff.is_negative else ""
        exp = self._exp
        adjusted = exp + len(digits) - 1

        if exp <= 0 and adjusted >= -6:
            if exp == 0:
                return sign + digits
            point = len(digits) + exp
            if point > 0:
                return sign + digits[:point] + "." + digits[point:]
            return sign + "0." + "0" * (-point) + digits

        text = digits[0]
        if len(digits) > 1:
            text += "." + digits[1:]
        text += "E"
        if adjusted >= 0:
            text += "+"
        return sign + text + str(adjusted)

    def to_plain_string(self) -> str:
        """Positional notation without an exponent."""
        digits = self._coeff.abs().to_string()
        sign = "-" if self._coeff.is_negative else ""
        if self._exp >= 0:
            if self._coeff.is_zero:
                return "0"
            return sign + digits + "0" * self._exp
        point = len(digits) + self._exp
        if point > 0:
            return sign + digits[:point] + "." + digits[point:]
        return sign + "0." + "0" * (-point) + digits

    def to_bigint(self) -> BigInt:
        """Integer part, truncated toward zero."""
        return self.rescale(0, RoundingMode.DOWN)._coeff

    def to_float(self) -> float:
        return float(self.to_scientific_string())

    def to_decimal(self) -> Decimal:
        return Decimal(self.to_scientific_string())

    def __str__(self) -> str:
        return self.to_scientific_string()

    def __repr__(self) -> str:
        return f"ScaledDecimal('{self.to_scientific_string()}')"

    def __int__(self) -> int:
        return self.to_bigint().to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero

    # ------------------------------------------------------------------
    # Equality and ordering
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        return self._exp == other._exp and self._coeff == other._coeff

    def __hash__(self) -> int:
        return 31 * hash(self._coeff) + self._exp

    def compare_to(self, other: "ScaledDecimal") -> int:
        """Numeric comparison, ignoring representation (scale)."""
        if self._coeff.sign != other._coeff.sign:
            return -1 if self._coeff.sign < other._coeff.sign else 1
        x, y, _ = _align(self, other)
        return x.compare_to(y)

    def __lt__(self, other):
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        return self.compare_to(other) >= 0

    def min(self, other: "ScaledDecimal") -> "ScaledDecimal":
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: "ScaledDecimal") -> "ScaledDecimal":
        return self if self.compare_to(other) >= 0 else other

    # ------------------------------------------------------------------
    # Rounding, rescaling
    # ------------------------------------------------------------------

    def _round_if(self, context: Optional[Context]) -> "ScaledDecimal":
        if context is None or not context.rounds:
            return self
        return self.round(context)

    def round(self, context: Optional[Context]) -> "ScaledDecimal":
        """
        Round to ``context.precision`` significant digits.

        A missing context, or precision 0, leaves the value unchanged, as
        does a value that already has few enough digits.

        Raises:
            RoundingRequiredError: If the mode is UNNECESSARY and digits
                would be discarded
            ExponentOverflowError: If the adjusted exponent overflows for a
                non-zero result
        """
        if context is None or context.precision == 0:
            return self
        p = self.precision
        if p <= context.precision:
            return self
        drop = p - context.precision
        q = rounding_divide(self._coeff, ten_pow(drop), context.rounding_mode)
        exp = check_exponent(self._exp + drop, q.is_zero)
        # a carry (999 -> 1000) can add a digit; round again
        return ScaledDecimal._create(q, exp).round(context)

    def plus(self, context: Optional[Context] = None) -> "ScaledDecimal":
        return self.round(context)

    def rescale(self, exponent: int, mode: Union[RoundingMode, str] = RoundingMode.UNNECESSARY) -> "ScaledDecimal":
        """
        Return the value with the given exponent.

        Increasing precision multiplies the coefficient by a power of ten;
        decreasing it rounds away digits with ``mode``.

        Raises:
            RoundingRequiredError: If ``mode`` is UNNECESSARY and non-zero
                digits would be discarded
        """
        mode = RoundingMode.from_name(mode)
        exponent = check_exponent(int(exponent), False)
        delta = self._exp - exponent
        if delta == 0:
            return self
        if self._coeff.is_zero:
            return ScaledDecimal._create(BI_ZERO, exponent, 1)
        if delta > 0:
            coeff = self._coeff.multiply(ten_pow(delta))
            return ScaledDecimal._create(coeff, exponent, self.precision + delta)

        decrease = -delta
        p = self.precision
        if p <= decrease:
            # every digit is discarded; only the rounding direction survives
            q = rounding_divide(self._coeff, ten_pow(decrease), mode)
            return ScaledDecimal._create(q, exponent)

        result = self.round(Context(p - decrease, mode))
        if result._exp != exponent:
            # rounding carried into a new digit, e.g. 9.9999 -> 10.0
            return result.rescale(exponent, mode)
        return result

    def quantize(self, other: "ScaledDecimal", mode: Union[RoundingMode, str] = RoundingMode.HALF_UP) -> "ScaledDecimal":
        """Rescale to ``other``'s exponent."""
        return self.rescale(other._exp, mode)

    def strip_zeros_to_match_exponent(self, preferred: float) -> "ScaledDecimal":
        """Drop trailing zeros while the exponent is below ``preferred``."""
        coeff = self._coeff
        exp = self._exp
        precision = self._precision
        while exp < preferred and coeff.abs().compare_to(BI_TEN) >= 0:
            q, r = coeff.div_rem(BI_TEN)
            if not r.is_zero:
                break
            coeff = q
            exp += 1
            if precision:
                precision -= 1
        if exp == self._exp:
            return self
        return ScaledDecimal._create(coeff, exp, precision)

    def strip_trailing_zeros(self) -> "ScaledDecimal":
        return self.strip_zeros_to_match_exponent(math.inf)

    def move_point_left(self, n: int) -> "ScaledDecimal":
        return ScaledDecimal._create(self._coeff, check_exponent(self._exp - n, self.is_zero), self._precision)

    def move_point_right(self, n: int) -> "ScaledDecimal":
        return ScaledDecimal._create(self._coeff, check_exponent(self._exp + n, self.is_zero), self._precision)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self, context: Optional[Context] = None) -> "ScaledDecimal":
        result = ScaledDecimal._create(self._coeff.negate(), self._exp, self._precision)
        return result._round_if(context)

    def abs(self, context: Optional[Context] = None) -> "ScaledDecimal":
        if self._coeff.is_negative:
            return self.negate(context)
        return self._round_if(context)

    def add(self, other: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        x, y, exp = _align(self, other)
        return ScaledDecimal._create(x.add(y), exp)._round_if(context)

    def subtract(self, other: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        x, y, exp = _align(self, other)
        return ScaledDecimal._create(x.subtract(y), exp)._round_if(context)

    def multiply(self, other: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        coeff = self._coeff.multiply(other._coeff)
        exp = check_exponent(self._exp + other._exp, coeff.is_zero)
        return ScaledDecimal._create(coeff, exp)._round_if(context)

    def _check_divisor(self, divisor: "ScaledDecimal") -> None:
        if divisor.is_zero:
            if self.is_zero:
                raise DivisionByZeroError("Division undefined")
            raise DivisionByZeroError("Division by zero")

    def divide(self, divisor: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        """
        Quotient, exact without a context or rounded to the context.

        Without a context (or with precision 0) the quotient must have a
        terminating decimal expansion; it is returned at the preferred
        exponent ``self.exponent - divisor.exponent`` when that is possible.

        Raises:
            DivisionByZeroError: If ``divisor`` is zero
            RoundingRequiredError: If the exact quotient does not terminate,
                or the context mode is UNNECESSARY and rounding is needed
        """
        if context is None or context.precision == 0:
            return self._divide_exact(divisor)
        return self._divide_rounded(divisor, context)

    def _divide_exact(self, divisor: "ScaledDecimal") -> "ScaledDecimal":
        self._check_divisor(divisor)
        preferred = _clamp_exponent(self._exp - divisor._exp)
        if self.is_zero:
            return ScaledDecimal._create(BI_ZERO, preferred, 1)

        working = min(
            self.precision + math.ceil(10 * divisor.precision / 3),
            EXPONENT_MAX,
        )
        try:
            quotient = self._divide_rounded(divisor, Context(working, RoundingMode.UNNECESSARY))
        except RoundingRequiredError:
            raise RoundingRequiredError(
                "Non-terminating decimal expansion; no exact representable decimal result"
            ) from None

        if preferred < quotient._exp:
            return quotient.rescale(preferred, RoundingMode.UNNECESSARY)
        return quotient

    def _divide_rounded(self, divisor: "ScaledDecimal", context: Context) -> "ScaledDecimal":
        self._check_divisor(divisor)
        preferred = _clamp_exponent(self._exp - divisor._exp)
        if self.is_zero:
            return ScaledDecimal._create(BI_ZERO, preferred, 1)

        xprec = self.precision
        yprec = divisor.precision
        x = self._coeff
        y = divisor._coeff

        # Scale both to the same digit count so the leading-digit ratio
        # lands in a known band; one extra divisor digit keeps the quotient
        # at exactly context.precision digits.
        xtest = x.abs()
        ytest = y.abs()
        if xprec > yprec:
            ytest = ytest.multiply(ten_pow(xprec - yprec))
        elif yprec > xprec:
            xtest = xtest.multiply(ten_pow(yprec - xprec))
        adjust = 0
        if ytest.compare_to(xtest) < 0:
            y = y.multiply(BI_TEN)
            adjust = 1

        delta = context.precision - (xprec - yprec)
        if delta > 0:
            x = x.multiply(ten_pow(delta))
        elif delta < 0:
            y = y.multiply(ten_pow(-delta))

        q = rounding_divide(x, y, context.rounding_mode)
        exp = check_exponent(preferred - delta + adjust, q.is_zero)
        result = ScaledDecimal._create(q, exp).round(context)

        if result.multiply(divisor).compare_to(self) == 0:
            return result.strip_zeros_to_match_exponent(preferred)
        return result

    def divide_integer(self, divisor: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        """
        Integer part of the quotient, truncated toward zero, at exponent 0.

        Raises:
            DivisionByZeroError: If ``divisor`` is zero
            RoundingRequiredError: If the integer part needs more digits
                than ``context.precision`` ("division impossible")
        """
        if (context is None or context.precision == 0
                or self.abs().compare_to(divisor.abs()) < 0):
            return self._divide_integer_exact(divisor)

        self._check_divisor(divisor)
        preferred = 0
        result = self._divide_rounded(divisor, Context(context.precision, RoundingMode.DOWN))
        if result._exp > 0:
            product = result.multiply(divisor)
            if self.subtract(product).abs().compare_to(divisor.abs()) >= 0:
                raise RoundingRequiredError("Division impossible")
        elif result._exp < 0:
            result = result.rescale(0, RoundingMode.DOWN)

        if preferred < result._exp and context.precision - result.precision > 0:
            return result.rescale(0, RoundingMode.UNNECESSARY)
        return result.strip_zeros_to_match_exponent(preferred)

    def _divide_integer_exact(self, divisor: "ScaledDecimal") -> "ScaledDecimal":
        self._check_divisor(divisor)
        preferred = 0
        if self.abs().compare_to(divisor.abs()) < 0:
            return ScaledDecimal._create(BI_ZERO, preferred, 1)

        max_digits = min(
            self.precision
            + math.ceil(10 * divisor.precision / 3)
            + abs(self._exp - divisor._exp)
            + 2,
            EXPONENT_MAX,
        )
        quotient = self._divide_rounded(divisor, Context(max_digits, RoundingMode.DOWN))
        if quotient._exp < 0:
            quotient = quotient.rescale(0, RoundingMode.DOWN).strip_zeros_to_match_exponent(preferred)
        if quotient._exp > preferred:
            quotient = quotient.rescale(preferred, RoundingMode.UNNECESSARY)
        return quotient

    def div_rem(self, divisor: "ScaledDecimal",
                context: Optional[Context] = None) -> Tuple["ScaledDecimal", "ScaledDecimal"]:
        """Truncated quotient and remainder with ``self == q*divisor + r``."""
        if context is None or context.rounding_mode is RoundingMode.UNNECESSARY:
            q = self.divide_integer(divisor)
        else:
            q = self.divide_integer(divisor, context)
        return q, self.subtract(q.multiply(divisor))

    def mod(self, divisor: "ScaledDecimal", context: Optional[Context] = None) -> "ScaledDecimal":
        return self.div_rem(divisor, context)[1]

    def power(self, n: int, context: Optional[Context] = None) -> "ScaledDecimal":
        """
        Integral power.

        Without a context ``n`` must lie in [0, 999999999] and the result is
        exact. With a context the X3.274 algorithm is used: repeated
        squaring at a working precision of ``precision + digits(n) + 1``,
        a reciprocal for negative ``n``, and a final rounding.

        Raises:
            DomainError: If ``n`` is out of range, or has more digits than
                the context precision
        """
        n = int(n)
        if context is None or context.precision == 0:
            if n < 0 or n > MAX_POWER:
                raise DomainError("Invalid operation")
            coeff = self._coeff.power(n)
            return ScaledDecimal._create(coeff, check_exponent(self._exp * n, coeff.is_zero))

        if n < -MAX_POWER or n > MAX_POWER:
            raise DomainError("Invalid operation")
        if n == 0:
            return ONE
        mag = abs(n)
        elength = len(str(mag))
        if elength > context.precision:
            raise DomainError("Invalid operation")
        work = Context(context.precision + elength + 1, context.rounding_mode)

        acc = ONE
        seen = False
        for bit in bin(mag)[2:]:
            if seen:
                acc = acc.multiply(acc, work)
            if bit == "1":
                seen = True
                acc = acc.multiply(self, work)
        if n < 0:
            acc = ONE.divide(acc, work)
        return acc.round(context)

    # ------------------------------------------------------------------
    # Operator sugar (unrounded)
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

    def __truediv__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce_or_none(other)
        return NotImplemented if other is None else other.divide(self)


def _align(x: ScaledDecimal, y: ScaledDecimal) -> Tuple[BigInt, BigInt, int]:
    # Bring both coefficients to the smaller exponent.
    if x._exp == y._exp:
        return x._coeff, y._coeff, x._exp
    if x._exp > y._exp:
        return x._coeff.multiply(ten_pow(x._exp - y._exp)), y._coeff, y._exp
    return x._coeff, y._coeff.multiply(ten_pow(y._exp - x._exp)), x._exp


def _coerce_or_none(value) -> Optional[ScaledDecimal]:
    if isinstance(value, ScaledDecimal):
        return value
    if isinstance(value, BigInt):
        return ScaledDecimal._create(value, 0)
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return ScaledDecimal.from_int(value)
    return None


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _parse_parts(chars: Sequence[str], offset: int, length: int) -> Tuple[BigInt, int]:
    if length == 0:
        raise NumberFormatError("Empty string", "")
    if offset < 0 or length < 0 or offset + length > len(chars):
        raise NumberFormatError("offset+len past the end of the char array")

    text = "".join(chars[offset:offset + length])
    end = offset + length
    index = offset

    sign_text = ""
    if chars[index] in ("-", "+"):
        sign_text = chars[index]
        index += 1

    int_start = index
    while index < end and _is_digit(chars[index]):
        index += 1
    int_digits = "".join(chars[int_start:index])

    frac_digits = ""
    if index < end and chars[index] == ".":
        index += 1
        frac_start = index
        while index < end and _is_digit(chars[index]):
            index += 1
        frac_digits = "".join(chars[frac_start:index])

    exponent = 0
    if index < end and chars[index] in ("e", "E"):
        index += 1
        exp_start = index
        if index < end and chars[index] in ("-", "+"):
            index += 1
        digit_start = index
        while index < end and _is_digit(chars[index]):
            index += 1
        if index == digit_start:
            raise NumberFormatError("Missing exponent", text)
        exponent = int("".join(chars[exp_start:index]))
        if not EXPONENT_MIN <= exponent <= EXPONENT_MAX:
            raise ExponentOverflowError("Exponent out of range")

    if index != end:
        raise NumberFormatError("Unused characters at end", text)
    if not int_digits and not frac_digits:
        raise NumberFormatError("No digits in coefficient", text)

    coeff = BigInt.parse(sign_text + int_digits + frac_digits)
    return coeff, check_exponent(exponent - len(frac_digits), coeff.is_zero)


ZERO = ScaledDecimal._create(BI_ZERO, 0, 1)
ONE = ScaledDecimal._create(BI_ONE, 0, 1)
TEN = ScaledDecimal._create(BI_TEN, 0, 2)
