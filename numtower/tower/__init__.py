"""Numeric-tower dispatch over machine, exact and decimal values."""

from .opcodes import Variant, UnaryOp, UnaryPredicate, BinaryOp, BinaryPredicate, BitOp
from .machine import coerce, reduce_integer, variant_of
from .ops import Ops, combine, ops_for
from .bit_ops import BitOps, bit_combine, bit_ops_for
from .numbers import (
    add,
    subtract,
    multiply,
    divide,
    quotient,
    remainder,
    negate,
    inc,
    dec,
    abs,
    is_zero,
    is_pos,
    is_neg,
    equiv,
    lt,
    lte,
    gt,
    gte,
    compare,
    bit_and,
    bit_or,
    bit_xor,
    bit_not,
    bit_and_not,
    shift_left,
    shift_right,
    test_bit,
    set_bit,
    clear_bit,
    flip_bit,
    apply_unary,
    apply_predicate,
    apply_binary,
    apply_binary_predicate,
    apply_bit,
    variant,
)

__all__ = [
    # Operation codes
    "Variant",
    "UnaryOp",
    "UnaryPredicate",
    "BinaryOp",
    "BinaryPredicate",
    "BitOp",

    # Strategies
    "Ops",
    "BitOps",
    "combine",
    "ops_for",
    "bit_combine",
    "bit_ops_for",
    "coerce",
    "reduce_integer",
    "variant_of",
    "variant",

    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "quotient",
    "remainder",
    "negate",
    "inc",
    "dec",
    "abs",

    # Predicates and comparison
    "is_zero",
    "is_pos",
    "is_neg",
    "equiv",
    "lt",
    "lte",
    "gt",
    "gte",
    "compare",

    # Bit operations
    "bit_and",
    "bit_or",
    "bit_xor",
    "bit_not",
    "bit_and_not",
    "shift_left",
    "shift_right",
    "test_bit",
    "set_bit",
    "clear_bit",
    "flip_bit",

    # Generic entry points
    "apply_unary",
    "apply_predicate",
    "apply_binary",
    "apply_binary_predicate",
    "apply_bit",
]
