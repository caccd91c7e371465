"""
Rounding context for decimal arithmetic.

A :class:`Context` pairs a precision (number of significant digits, with 0
meaning unlimited) and a :class:`RoundingMode`. Named presets mirror the
IEEE 754 decimal interchange formats.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import DomainError

MAX_CONTEXT_PRECISION = (1 << 32) - 1


class RoundingMode(Enum):
    """How a discarded fraction is resolved."""
    UP = "up"
    DOWN = "down"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    UNNECESSARY = "unnecessary"

    @classmethod
    def from_name(cls, name: Union["RoundingMode", str]) -> "RoundingMode":
        """
        Resolve a mode from an enum member or a name such as ``"HalfEven"``,
        ``"half_even"`` or ``"HALF_EVEN"``.

        Raises:
            ValueError: If the name is not a rounding mode
        """
        if isinstance(name, RoundingMode):
            return name
        key = str(name).replace("-", "_")
        if "_" in key or key.isupper() or key.islower():
            snake = key.lower()
        else:
            # CamelCase -> snake_case
            snake = "".join(
                "_" + ch.lower() if ch.isupper() and i > 0 else ch.lower()
                for i, ch in enumerate(key)
            )
        try:
            return cls(snake)
        except ValueError:
            raise ValueError(f"Unsupported rounding mode: {name}") from None

    @property
    def display_name(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))


@dataclass(frozen=True)
class Context:
    """
    Immutable (precision, rounding mode) pair.

    Attributes:
        precision: Significant digits kept by rounding; 0 means unlimited
        rounding_mode: Mode applied when digits are discarded
    """

    precision: int = 0
    rounding_mode: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise DomainError(f"Context precision must be an integer, got {self.precision!r}")
        if not 0 <= self.precision <= MAX_CONTEXT_PRECISION:
            raise DomainError(f"Context precision out of range: {self.precision}")
        if not isinstance(self.rounding_mode, RoundingMode):
            object.__setattr__(self, "rounding_mode", RoundingMode.from_name(self.rounding_mode))

    @property
    def is_unlimited(self) -> bool:
        return self.precision == 0

    @property
    def rounds(self) -> bool:
        """Whether arithmetic under this context applies rounding at all."""
        return self.precision > 0 and self.rounding_mode is not RoundingMode.UNNECESSARY

    def with_precision(self, precision: int) -> "Context":
        return Context(precision, self.rounding_mode)

    def with_rounding_mode(self, mode: Union[RoundingMode, str]) -> "Context":
        return Context(self.precision, RoundingMode.from_name(mode))

    @classmethod
    def extended_default(cls, precision: int) -> "Context":
        """Context with the given precision and half-even rounding."""
        return cls(precision, RoundingMode.HALF_EVEN)

    def __str__(self) -> str:
        return f"precision={self.precision} roundingMode={self.rounding_mode.display_name}"


DECIMAL32 = Context(7, RoundingMode.HALF_EVEN)
DECIMAL64 = Context(16, RoundingMode.HALF_EVEN)
DECIMAL128 = Context(34, RoundingMode.HALF_EVEN)
UNLIMITED = Context(0, RoundingMode.HALF_UP)
BASIC_DEFAULT = Context(9, RoundingMode.HALF_UP)

PRESETS = {
    "decimal32": DECIMAL32,
    "decimal64": DECIMAL64,
    "decimal128": DECIMAL128,
    "unlimited": UNLIMITED,
    "basic_default": BASIC_DEFAULT,
}
