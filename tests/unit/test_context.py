"""Unit tests for the rounding Context and presets."""

import dataclasses

import pytest

from numtower import (
    BASIC_DEFAULT,
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    UNLIMITED,
    Context,
    DomainError,
    RoundingMode,
)


class TestContext:
    """Test Context construction and helpers."""

    def test_defaults(self):
        ctx = Context()
        assert ctx.precision == 0
        assert ctx.rounding_mode is RoundingMode.HALF_UP
        assert ctx.is_unlimited
        assert not ctx.rounds

    def test_mode_from_string(self):
        ctx = Context(5, "HalfEven")
        assert ctx.rounding_mode is RoundingMode.HALF_EVEN

    def test_invalid_precision(self):
        with pytest.raises(DomainError):
            Context(-1)
        with pytest.raises(DomainError):
            Context(1 << 32)
        with pytest.raises(DomainError):
            Context(2.5)

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            Context(5, "sideways")

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DECIMAL64.precision = 3

    def test_with_helpers(self):
        ctx = DECIMAL32.with_precision(3)
        assert ctx == Context(3, RoundingMode.HALF_EVEN)
        assert ctx.with_rounding_mode("floor").rounding_mode is RoundingMode.FLOOR
        assert DECIMAL32.precision == 7

    def test_unnecessary_does_not_round(self):
        assert not Context(5, RoundingMode.UNNECESSARY).rounds
        assert Context(5, RoundingMode.DOWN).rounds

    def test_extended_default(self):
        assert Context.extended_default(12) == Context(12, RoundingMode.HALF_EVEN)

    def test_str(self):
        assert str(Context(9, RoundingMode.HALF_UP)) == "precision=9 roundingMode=HalfUp"


class TestPresets:
    """Test the named presets."""

    def test_values(self):
        assert DECIMAL32 == Context(7, RoundingMode.HALF_EVEN)
        assert DECIMAL64 == Context(16, RoundingMode.HALF_EVEN)
        assert DECIMAL128 == Context(34, RoundingMode.HALF_EVEN)
        assert UNLIMITED == Context(0, RoundingMode.HALF_UP)
        assert BASIC_DEFAULT == Context(9, RoundingMode.HALF_UP)

    def test_hashable(self):
        assert len({DECIMAL64, Context(16, "half_even")}) == 1
