# MIT License
# See LICENSE file in the project root for full license text.
"""
numtower: an arbitrary-precision numeric tower.

This library provides an exact big-integer engine, a scaled decimal engine
with specification-level rounding control, exact rationals, and a dispatch
layer that mixes them with machine integers and floats, promoting on
overflow instead of wrapping.
"""

__version__ = "0.1.0"

from .core import (
    BASIC_DEFAULT,
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    UNLIMITED,
    BigInt,
    Context,
    ConversionOverflowError,
    DivisionByZeroError,
    DomainError,
    ExponentOverflowError,
    ExponentUnderflowError,
    MathContextConfig,
    NumberFormatError,
    NumericError,
    Ratio,
    RoundingMode,
    RoundingRequiredError,
    ScaledDecimal,
    ambient_context,
    math_context,
)
from .tower import (
    BinaryOp,
    BinaryPredicate,
    BitOp,
    UnaryOp,
    UnaryPredicate,
    Variant,
    add,
    compare,
    dec,
    divide,
    equiv,
    gt,
    gte,
    inc,
    is_neg,
    is_pos,
    is_zero,
    lt,
    lte,
    multiply,
    negate,
    quotient,
    remainder,
    subtract,
)
from .bridge import from_numpy_array, to_numpy_array, to_numpy_scalar, to_tower

__all__ = [
    # Version info
    "__version__",

    # Values
    "BigInt",
    "ScaledDecimal",
    "Ratio",

    # Context
    "Context",
    "RoundingMode",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "UNLIMITED",
    "BASIC_DEFAULT",
    "MathContextConfig",
    "ambient_context",
    "math_context",

    # Errors
    "NumericError",
    "DivisionByZeroError",
    "NumberFormatError",
    "DomainError",
    "ExponentOverflowError",
    "ExponentUnderflowError",
    "RoundingRequiredError",
    "ConversionOverflowError",

    # Tower dispatch (bit operations live in numtower.tower)
    "Variant",
    "UnaryOp",
    "UnaryPredicate",
    "BinaryOp",
    "BinaryPredicate",
    "BitOp",
    "add",
    "subtract",
    "multiply",
    "divide",
    "quotient",
    "remainder",
    "negate",
    "inc",
    "dec",
    "equiv",
    "lt",
    "lte",
    "gt",
    "gte",
    "compare",
    "is_zero",
    "is_pos",
    "is_neg",

    # NumPy bridge
    "to_tower",
    "to_numpy_scalar",
    "from_numpy_array",
    "to_numpy_array",
]
