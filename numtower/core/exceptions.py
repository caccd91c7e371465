"""
Exception types for numtower.

Every failure in the engines and the dispatch layer is raised as one of the
classes below. Each class also derives from the closest builtin exception so
that generic handlers (``except ZeroDivisionError``, ``except ValueError``)
keep working for callers that do not know about this library.
"""

__all__ = [
    "NumericError",
    "DivisionByZeroError",
    "NumberFormatError",
    "DomainError",
    "ExponentOverflowError",
    "ExponentUnderflowError",
    "RoundingRequiredError",
    "ConversionOverflowError",
]


class NumericError(ArithmeticError):
    """Base class for all numtower errors."""
    pass


class DivisionByZeroError(NumericError, ZeroDivisionError):
    """Raised for x/0, including 0/0 which has no defined result."""
    pass


class NumberFormatError(NumericError, ValueError):
    """Raised when parse input is malformed.

    Attributes
    ----------
    text : str | None
        The offending input, when available.
    """

    def __init__(self, message: str, text=None):
        super().__init__(message)
        self.text = text


class DomainError(NumericError, ValueError):
    """Raised when an argument lies outside the operation's domain.

    Examples: radix outside [2, 36], a negative exponent to ``power``,
    NaN or infinity converted to an integer, a negative bit index, or a bit
    operation applied to a non-integer.
    """
    pass


class ExponentOverflowError(NumericError, OverflowError):
    """Raised when exponent arithmetic leaves the signed 32-bit range."""
    pass


class ExponentUnderflowError(ExponentOverflowError):
    """Raised when exponent arithmetic falls below the signed 32-bit range."""
    pass


class RoundingRequiredError(NumericError):
    """Raised when an exact result is required but the operation is inexact.

    This covers rounding mode ``UNNECESSARY`` with a non-zero remainder,
    non-terminating decimal expansions, and "division impossible" integer
    quotients.
    """
    pass


class ConversionOverflowError(NumericError, OverflowError):
    """Raised when narrowing a value to a machine type that cannot hold it."""

    def __init__(self, message: str, target=None):
        super().__init__(message)
        self.target = target
