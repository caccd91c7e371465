"""Operation codes understood by the tower dispatch."""

from enum import Enum


class Variant(Enum):
    """Tower value variants, in promotion order (lowest first)."""
    INT32 = 0
    INT64 = 1
    BIGINT = 2
    SCALED_DECIMAL = 3
    RATIO = 4
    FLOAT32 = 5
    FLOAT64 = 6

    @property
    def is_integer(self) -> bool:
        return self in (Variant.INT32, Variant.INT64, Variant.BIGINT)

    @property
    def is_float(self) -> bool:
        return self in (Variant.FLOAT32, Variant.FLOAT64)


class UnaryOp(Enum):
    NEGATE = "negate"
    INC = "inc"
    DEC = "dec"
    ABS = "abs"


class UnaryPredicate(Enum):
    IS_ZERO = "is_zero"
    IS_POS = "is_pos"
    IS_NEG = "is_neg"


class BinaryOp(Enum):
    ADD = "add"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    QUOTIENT = "quotient"
    REMAINDER = "remainder"


class BinaryPredicate(Enum):
    EQUIV = "equiv"
    LESS_THAN = "lt"


class BitOp(Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    AND_NOT = "and_not"
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"
    TEST_BIT = "test_bit"
    SET_BIT = "set_bit"
    CLEAR_BIT = "clear_bit"
    FLIP_BIT = "flip_bit"

    @property
    def is_unary(self) -> bool:
        return self is BitOp.NOT

    @property
    def takes_index(self) -> bool:
        """Second operand is a shift count or bit index, not a value."""
        return self in (
            BitOp.SHIFT_LEFT,
            BitOp.SHIFT_RIGHT,
            BitOp.TEST_BIT,
            BitOp.SET_BIT,
            BitOp.CLEAR_BIT,
            BitOp.FLIP_BIT,
        )
