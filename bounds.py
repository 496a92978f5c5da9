"""
Bounds layer for the radix calculator.

Bounds define the *domain* the arithmetic core is allowed to see:
operands of at most ``max_digits`` digits, each digit valid for the
chosen base, and a base in ``[min_base, max_base]``.  The core itself
never checks any of this - callers run their inputs through a
``Limits`` before handing them over.  Outside the bounds behaviour is
explicitly undefined.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class BoundsError(ValueError):
    """An input falls outside the configured domain."""


class InvalidBase(BoundsError):
    pass


class InvalidDigit(BoundsError):
    pass


class OperandTooLong(BoundsError):
    pass


@dataclass(frozen=True)
class Limits:
    """
    The admissible input domain.

    ``max_digits`` caps operand length; the public algorithms may grow
    results by one carry digit beyond it.
    """

    max_digits: int = 100
    min_base: int = 2
    max_base: int = 10

    def __post_init__(self):
        if self.max_digits < 1:
            raise ValueError(f"max_digits ({self.max_digits}) must be >= 1")
        if not 2 <= self.min_base <= self.max_base <= 10:
            raise ValueError(
                f"base range [{self.min_base}, {self.max_base}] must lie in [2, 10]"
            )

    def contains_base(self, base: int) -> bool:
        return self.min_base <= base <= self.max_base

    def validate_base(self, base: int) -> int:
        if not self.contains_base(base):
            raise InvalidBase(
                f"base {base} is outside [{self.min_base}, {self.max_base}]"
            )
        return base

    def validate_digits(self, digits: Sequence[int], base: int) -> Sequence[int]:
        """Reject operands that are too long or hold digits >= base."""
        if len(digits) > self.max_digits:
            raise OperandTooLong(
                f"{len(digits)} digits exceeds the limit of {self.max_digits}"
            )
        for d in digits:
            if not 0 <= d < base:
                raise InvalidDigit(f"digit {d} is not valid in base {base}")
        return digits


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

DEFAULT_LIMITS = Limits()

# Small operands, useful for exhaustive checking
TINY_LIMITS = Limits(max_digits=4)
