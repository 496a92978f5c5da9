"""
Digit-vector model.

A number is held as a tuple of base-B digits, least-significant first:

    (3, 2, 1)  ->  1*B**2 + 2*B + 3

Tuples keep every digit vector an immutable value.  Functions in this
module accept any sequence of ints and always hand back a fresh tuple,
so nothing a caller passes in is ever modified.

Canonical form has no trailing (most-significant) zeros.  Zero itself
is ``(0,)``, never the empty tuple.
"""

from __future__ import annotations

from typing import Sequence

from bounds import InvalidDigit

Digits = tuple[int, ...]

ZERO: Digits = (0,)


# ---------------------------------------------------------------------------
# Shape helpers
# ---------------------------------------------------------------------------

def align(
    a: Sequence[int], b: Sequence[int], extra: int = 0
) -> tuple[int, Digits, Digits]:
    """Zero-pad two digit vectors to a common length.

    Returns ``(n, a', b')`` with ``n = max(len(a), len(b)) + extra``.
    """
    n = max(len(a), len(b)) + extra
    return (
        n,
        tuple(a) + (0,) * (n - len(a)),
        tuple(b) + (0,) * (n - len(b)),
    )


def shift(d: Sequence[int], k: int) -> Digits:
    """Multiply by B**k by prepending k zero digits."""
    if k < 0:
        raise ValueError(f"shift amount must be >= 0, got {k}")
    return (0,) * k + tuple(d)


def normalize(d: Sequence[int]) -> Digits:
    """Strip trailing zero digits, keeping ``(0,)`` for zero."""
    end = len(d)
    while end > 1 and d[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO
    return tuple(d[:end])


def is_zero(d: Sequence[int]) -> bool:
    return all(x == 0 for x in d)


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """Three-way comparison of the values of two digit vectors.

    Trailing zeros are ignored.  Returns -1, 0 or 1.
    """
    a, b = normalize(a), normalize(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def from_string(text: str) -> Digits:
    """Parse decimal digit characters, most-significant first.

    ``"123"`` becomes ``(3, 2, 1)``.  Each character is one digit; the
    base is not checked here (see ``bounds.Limits.validate_digits``).
    """
    if not text:
        raise InvalidDigit("empty operand")
    digits = []
    for ch in reversed(text):
        if not "0" <= ch <= "9":
            raise InvalidDigit(f"not a decimal digit: {ch!r}")
        digits.append(ord(ch) - ord("0"))
    return tuple(digits)


def to_string(d: Sequence[int]) -> str:
    """Render a digit vector most-significant first, without leading zeros."""
    return "".join(str(x) for x in reversed(normalize(d)))


def from_int(value: int, base: int) -> Digits:
    if value < 0:
        raise ValueError("negative values are not representable")
    if value == 0:
        return ZERO
    digits = []
    while value:
        value, r = divmod(value, base)
        digits.append(r)
    return tuple(digits)


def to_int(d: Sequence[int], base: int) -> int:
    value = 0
    for x in reversed(d):
        value = value * base + x
    return value
