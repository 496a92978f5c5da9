"""Tests for the bounds layer."""

from __future__ import annotations

import dataclasses

import pytest

from bounds import (
    DEFAULT_LIMITS,
    TINY_LIMITS,
    BoundsError,
    InvalidBase,
    InvalidDigit,
    Limits,
    OperandTooLong,
)


class TestLimitsConstruction:

    def test_defaults(self):
        assert DEFAULT_LIMITS.max_digits == 100
        assert DEFAULT_LIMITS.min_base == 2
        assert DEFAULT_LIMITS.max_base == 10

    def test_tiny_preset(self):
        assert TINY_LIMITS.max_digits == 4

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LIMITS.max_digits = 5

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            Limits(max_digits=0)

    @pytest.mark.parametrize("lo,hi", [(1, 10), (2, 11), (8, 4)])
    def test_bad_base_range_rejected(self, lo, hi):
        with pytest.raises(ValueError):
            Limits(min_base=lo, max_base=hi)

    def test_narrow_base_range(self):
        limits = Limits(min_base=8, max_base=8)
        assert limits.contains_base(8)
        assert not limits.contains_base(7)


class TestBaseValidation:

    @pytest.mark.parametrize("base", range(2, 11))
    def test_supported_bases(self, base):
        assert DEFAULT_LIMITS.validate_base(base) == base

    @pytest.mark.parametrize("base", [-1, 0, 1, 11, 16])
    def test_unsupported_bases(self, base):
        with pytest.raises(InvalidBase):
            DEFAULT_LIMITS.validate_base(base)


class TestDigitValidation:

    def test_hundred_digits_accepted(self):
        digits = (9,) * 100
        assert DEFAULT_LIMITS.validate_digits(digits, 10) == digits

    def test_hundred_and_one_digits_rejected(self):
        with pytest.raises(OperandTooLong):
            DEFAULT_LIMITS.validate_digits((1,) * 101, 10)

    def test_digit_equal_to_base_rejected(self):
        with pytest.raises(InvalidDigit):
            DEFAULT_LIMITS.validate_digits((1, 2), 2)

    def test_custom_length_limit(self):
        with pytest.raises(OperandTooLong):
            TINY_LIMITS.validate_digits((1,) * 5, 10)

    def test_errors_share_a_base_class(self):
        for exc in (InvalidBase, InvalidDigit, OperandTooLong):
            assert issubclass(exc, BoundsError)
            assert issubclass(exc, ValueError)
