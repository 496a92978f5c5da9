"""
Specification layer for the radix calculator.

A Spec defines the *contract* a digit-level operation must satisfy.
It is purely declarative - it says WHAT must be true, not HOW.

Each spec is a named property with:
  - a human-readable description
  - a callable predicate that returns True if the property holds
  - the base under which the property is stated

Predicates receive the operation under test first, followed by digit
vectors.  Values are compared as integers via ``to_int`` so that
un-normalized results (trailing zeros) still compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Sequence

from digits import Digits, from_int, is_zero, to_int


# ---------------------------------------------------------------------------
# Core spec primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Property:
    """A single verifiable property of an operation."""

    name: str
    description: str
    predicate: Callable[..., bool]
    base: int

    def check(self, *args: Any) -> bool:
        """Evaluate the property predicate with the given arguments."""
        return self.predicate(*args)


@dataclass
class Spec:
    """An ordered collection of properties that together form a contract."""

    name: str
    properties: list[Property] = field(default_factory=list)

    def add(self, prop: Property) -> None:
        self.properties.append(prop)

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)


class DigitOp(Protocol):
    """Shape of a binary digit-level operation."""

    def __call__(self, a: Sequence[int], b: Sequence[int]) -> Any: ...


# ---------------------------------------------------------------------------
# Spec builders
# ---------------------------------------------------------------------------

def addition_spec(base: int) -> Spec:
    """Build the full specification for digit-vector addition."""
    v = lambda d: to_int(d, base)
    zero = from_int(0, base)

    spec = Spec(name="addition")

    spec.add(Property(
        name="correctness",
        description="value(a + b) == value(a) + value(b)",
        predicate=lambda add, a, b: v(add(a, b)) == v(a) + v(b),
        base=base,
    ))

    spec.add(Property(
        name="digits_in_range",
        description="every result digit lies in [0, base)",
        predicate=lambda add, a, b: all(0 <= d < base for d in add(a, b)),
        base=base,
    ))

    spec.add(Property(
        name="length",
        description="len(a + b) == max(len(a), len(b)) + 1",
        predicate=lambda add, a, b: len(add(a, b)) == max(len(a), len(b)) + 1,
        base=base,
    ))

    spec.add(Property(
        name="commutativity",
        description="a + b == b + a",
        predicate=lambda add, a, b: v(add(a, b)) == v(add(b, a)),
        base=base,
    ))

    spec.add(Property(
        name="identity",
        description="a + 0 == a",
        predicate=lambda add, a: v(add(a, zero)) == v(a),
        base=base,
    ))

    spec.add(Property(
        name="associativity",
        description="(a + b) + c == a + (b + c)",
        predicate=lambda add, a, b, c: (
            v(add(add(a, b), c)) == v(add(a, add(b, c)))
        ),
        base=base,
    ))

    return spec


def subtraction_spec(base: int) -> Spec:
    """Build the full specification for digit-vector subtraction.

    Subtraction is only defined for a >= b, so every predicate that
    takes two values orders them first.
    """
    v = lambda d: to_int(d, base)
    zero = from_int(0, base)

    def ordered(a: Digits, b: Digits) -> tuple[Digits, Digits]:
        return (a, b) if v(a) >= v(b) else (b, a)

    def correct(sub, a, b):
        a, b = ordered(a, b)
        return v(sub(a, b)) == v(a) - v(b)

    def add_inverse(sub, a, b):
        a, b = ordered(a, b)
        return v(sub(a, b)) + v(b) == v(a)

    spec = Spec(name="subtraction")

    spec.add(Property(
        name="correctness",
        description="value(a - b) == value(a) - value(b)  for a >= b",
        predicate=correct,
        base=base,
    ))

    spec.add(Property(
        name="add_inverse",
        description="(a - b) + b == a  for a >= b",
        predicate=add_inverse,
        base=base,
    ))

    spec.add(Property(
        name="identity",
        description="a - 0 == a",
        predicate=lambda sub, a: v(sub(a, zero)) == v(a),
        base=base,
    ))

    spec.add(Property(
        name="self_inverse",
        description="a - a == 0",
        predicate=lambda sub, a: is_zero(sub(a, a)),
        base=base,
    ))

    return spec


def multiplication_spec(base: int) -> Spec:
    """Build the full specification for digit-vector multiplication."""
    v = lambda d: to_int(d, base)
    zero = from_int(0, base)
    one = from_int(1, base)

    spec = Spec(name="multiplication")

    spec.add(Property(
        name="correctness",
        description="value(a * b) == value(a) * value(b)",
        predicate=lambda mul, a, b: v(mul(a, b)) == v(a) * v(b),
        base=base,
    ))

    spec.add(Property(
        name="digits_in_range",
        description="every result digit lies in [0, base)",
        predicate=lambda mul, a, b: all(0 <= d < base for d in mul(a, b)),
        base=base,
    ))

    spec.add(Property(
        name="length",
        description="len(a * b) <= len(a) + len(b)",
        predicate=lambda mul, a, b: len(mul(a, b)) <= len(a) + len(b),
        base=base,
    ))

    spec.add(Property(
        name="commutativity",
        description="a * b == b * a",
        predicate=lambda mul, a, b: v(mul(a, b)) == v(mul(b, a)),
        base=base,
    ))

    spec.add(Property(
        name="identity",
        description="a * 1 == a",
        predicate=lambda mul, a: v(mul(a, one)) == v(a),
        base=base,
    ))

    spec.add(Property(
        name="zero",
        description="a * 0 == 0",
        predicate=lambda mul, a: is_zero(mul(a, zero)),
        base=base,
    ))

    return spec


def division_spec(base: int) -> Spec:
    """Build the full specification for digit-vector division.

    The operation under test returns ``(quotient, remainder)``.
    Predicates skip a zero divisor; that case is an error condition,
    not a property.
    """
    v = lambda d: to_int(d, base)
    one = from_int(1, base)

    def euclid(divmod_, a, b):
        if is_zero(b):
            return True
        q, r = divmod_(a, b)
        return v(a) == v(q) * v(b) + v(r) and 0 <= v(r) < v(b)

    spec = Spec(name="division")

    spec.add(Property(
        name="euclidean",
        description="a == q * b + r  with  0 <= r < b  (for b != 0)",
        predicate=euclid,
        base=base,
    ))

    spec.add(Property(
        name="identity",
        description="a / 1 == a  remainder 0",
        predicate=lambda divmod_, a: (
            v(divmod_(a, one)[0]) == v(a) and is_zero(divmod_(a, one)[1])
        ),
        base=base,
    ))

    spec.add(Property(
        name="self",
        description="a / a == 1  (for a != 0)",
        predicate=lambda divmod_, a: is_zero(a) or v(divmod_(a, a)[0]) == 1,
        base=base,
    ))

    spec.add(Property(
        name="zero_numerator",
        description="0 / b == 0  (for b != 0)",
        predicate=lambda divmod_, b: (
            is_zero(b) or is_zero(divmod_(from_int(0, base), b)[0])
        ),
        base=base,
    ))

    return spec
