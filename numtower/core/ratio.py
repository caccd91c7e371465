"""
Exact rational numbers.

A :class:`Ratio` is always stored reduced with a positive denominator
greater than one; integral quotients are represented as :class:`BigInt`
instead, which is why :meth:`Ratio.of` may return either type.
"""

from typing import Optional, Union

from .bigint import BigInt, ONE
from .context import Context, DECIMAL64
from .exceptions import DivisionByZeroError, DomainError
from .scaled_decimal import ScaledDecimal


class Ratio:
    """Reduced fraction ``numerator / denominator``."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: Union[BigInt, int], denominator: Union[BigInt, int]):
        """
        Args:
            numerator: Any integer
            denominator: Integer greater than one, coprime to the numerator

        Raises:
            DomainError: If the pair is not in reduced canonical form
        """
        if not isinstance(numerator, BigInt):
            numerator = BigInt.from_int(numerator)
        if not isinstance(denominator, BigInt):
            denominator = BigInt.from_int(denominator)
        if denominator.compare_to(ONE) <= 0:
            raise DomainError("Ratio denominator must be greater than one")
        if not numerator.abs().gcd(denominator).is_one:
            raise DomainError("Ratio must be stored in lowest terms")
        self._num = numerator
        self._den = denominator

    @classmethod
    def _create(cls, numerator: BigInt, denominator: BigInt) -> "Ratio":
        obj = object.__new__(cls)
        obj._num = numerator
        obj._den = denominator
        return obj

    @classmethod
    def of(cls, numerator: Union[BigInt, int], denominator: Union[BigInt, int]) -> Union["Ratio", BigInt]:
        """
        Reduce ``numerator / denominator``.

        Returns:
            A BigInt when the reduced denominator is one, else a Ratio

        Raises:
            DivisionByZeroError: If ``denominator`` is zero
        """
        if not isinstance(numerator, BigInt):
            numerator = BigInt.from_int(numerator)
        if not isinstance(denominator, BigInt):
            denominator = BigInt.from_int(denominator)
        if denominator.is_zero:
            raise DivisionByZeroError("Divide by zero")
        g = numerator.gcd(denominator)
        if g.is_zero:
            return numerator
        n = numerator.divide(g)
        d = denominator.divide(g)
        if d.is_one:
            return n
        if d.negate().is_one:
            return n.negate()
        if d.is_negative:
            n = n.negate()
            d = d.negate()
        return cls._create(n, d)

    @property
    def numerator(self) -> BigInt:
        return self._num

    @property
    def denominator(self) -> BigInt:
        return self._den

    def signum(self) -> int:
        return self._num.sign

    def compare_to(self, other: "Ratio") -> int:
        # denominators are positive, so cross-multiplying keeps the order
        return self._num.multiply(other._den).compare_to(other._num.multiply(self._den))

    def to_bigint(self) -> BigInt:
        """Integer part, truncated toward zero."""
        return self._num.divide(self._den)

    def to_scaled_decimal(self, context: Optional[Context] = None) -> ScaledDecimal:
        """
        Decimal value of the fraction.

        Raises:
            RoundingRequiredError: Without a context, when the decimal
                expansion does not terminate
        """
        n = ScaledDecimal.from_bigint(self._num)
        d = ScaledDecimal.from_bigint(self._den)
        return n.divide(d, context)

    def to_float(self) -> float:
        return self.to_scaled_decimal(DECIMAL64).to_float()

    def __float__(self) -> float:
        return self.to_float()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __hash__(self) -> int:
        return hash(self._num) ^ hash(self._den)

    def __lt__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Ratio({self._num}, {self._den})"
