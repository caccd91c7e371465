"""Core numeric engines: BigInt, ScaledDecimal, Ratio and rounding context."""

from .exceptions import (
    NumericError,
    DivisionByZeroError,
    NumberFormatError,
    DomainError,
    ExponentOverflowError,
    ExponentUnderflowError,
    RoundingRequiredError,
    ConversionOverflowError,
)

from .bigint import BigInt
from .context import (
    Context,
    RoundingMode,
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    UNLIMITED,
    BASIC_DEFAULT,
)
from .rounding import rounding_divide
from .scaled_decimal import ScaledDecimal, check_exponent
from .ratio import Ratio
from .context_config import MathContextConfig, ambient_context, math_context

__all__ = [
    # Errors
    "NumericError",
    "DivisionByZeroError",
    "NumberFormatError",
    "DomainError",
    "ExponentOverflowError",
    "ExponentUnderflowError",
    "RoundingRequiredError",
    "ConversionOverflowError",

    # Values
    "BigInt",
    "ScaledDecimal",
    "Ratio",

    # Rounding context
    "Context",
    "RoundingMode",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "UNLIMITED",
    "BASIC_DEFAULT",
    "rounding_divide",
    "check_exponent",

    # Ambient context
    "MathContextConfig",
    "ambient_context",
    "math_context",
]
