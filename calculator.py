"""
Radix calculator facade.

Binds a base and a set of ``Limits`` to the arithmetic core and works on
text operands: every input is parsed and checked against the bounds
before it reaches the core, and every result comes back as canonical
text.  The factory (see factory.py) hands these out only after proving
them against the properties in spec.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

import arithmetic
from bounds import DEFAULT_LIMITS, Limits
from digits import Digits, from_string, is_zero, to_string


class Results(NamedTuple):
    """Everything the calculator reports for one pair of operands."""

    sum: str
    product: str
    quotient: str | None    # None when the divisor is zero
    remainder: str | None


@dataclass(frozen=True)
class RadixCalculator:
    """
    A calculator for non-negative integers written in ``base``.
    """

    base: int
    limits: Limits = DEFAULT_LIMITS

    def __post_init__(self):
        self.limits.validate_base(self.base)

    # -- conversion -------------------------------------------------------

    def parse(self, text: str) -> Digits:
        """Text to a bounds-checked digit vector."""
        digits = from_string(text.strip())
        self.limits.validate_digits(digits, self.base)
        return digits

    def format(self, digits: Sequence[int]) -> str:
        return to_string(digits)

    # -- digit-level operations -------------------------------------------

    def add_digits(self, a: Sequence[int], b: Sequence[int]) -> Digits:
        return arithmetic.add(a, b, self.base)

    def sub_digits(self, a: Sequence[int], b: Sequence[int]) -> Digits:
        return arithmetic.sub(a, b, self.base)

    def mul_digits(self, a: Sequence[int], b: Sequence[int]) -> Digits:
        return arithmetic.multiply(a, b, self.base)

    def divmod_digits(
        self, a: Sequence[int], b: Sequence[int]
    ) -> tuple[Digits, Digits]:
        return arithmetic.divmod_digits(a, b, self.base)

    # -- text operations --------------------------------------------------

    def add(self, a: str, b: str) -> str:
        return self.format(self.add_digits(self.parse(a), self.parse(b)))

    def sub(self, a: str, b: str) -> str:
        return self.format(self.sub_digits(self.parse(a), self.parse(b)))

    def mul(self, a: str, b: str) -> str:
        return self.format(self.mul_digits(self.parse(a), self.parse(b)))

    def divmod(self, a: str, b: str) -> tuple[str, str]:
        q, r = self.divmod_digits(self.parse(a), self.parse(b))
        return self.format(q), self.format(r)

    def div(self, a: str, b: str) -> str:
        return self.divmod(a, b)[0]

    # -- convenience ------------------------------------------------------

    def evaluate(self, a: str, b: str) -> Results:
        """Sum, product and (when defined) quotient and remainder."""
        da, db = self.parse(a), self.parse(b)
        quotient = remainder = None
        if not is_zero(db):
            q, r = self.divmod_digits(da, db)
            quotient, remainder = self.format(q), self.format(r)
        return Results(
            sum=self.format(self.add_digits(da, db)),
            product=self.format(self.mul_digits(da, db)),
            quotient=quotient,
            remainder=remainder,
        )
