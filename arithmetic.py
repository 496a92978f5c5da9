"""
Digit-vector arithmetic core.

Every operation here is a pure function over little-endian digit
tuples (see ``digits``) and an integer base.  Nothing is validated:
callers are expected to have run operands through ``bounds.Limits``.

    add / sub              schoolbook carry and borrow propagation
    scale                  product with a single digit
    schoolbook_multiply    O(n**2) reference product
    karatsuba_multiply     O(n**1.585) divide-and-conquer product
    divmod_digits          schoolbook long division

``add`` and ``sub`` return un-normalized results of length
``max(len(a), len(b)) + 1``.  The multiplication and division entry
points return canonical (normalized) vectors.
"""

from __future__ import annotations

from typing import Sequence

from digits import Digits, ZERO, align, compare, is_zero, normalize, shift

# Operands of at most this many digits are multiplied directly.
SCHOOLBOOK_CUTOFF = 4


class ArithmeticCoreError(ArithmeticError):
    """Base class for failures raised by the arithmetic core."""


class DivisionByZero(ArithmeticCoreError, ZeroDivisionError):
    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class SubtractionUnderflow(ArithmeticCoreError):
    """``sub`` was asked for a negative result."""


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

def add(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    """Schoolbook addition.

    The operands are padded with one extra zero digit so the final
    carry always lands inside the result.
    """
    n, a, b = align(a, b, 1)
    carry = [0] * (n + 1)
    s = [0] * n
    for i in range(n):
        t = a[i] + b[i] + carry[i]
        s[i] = t % base
        carry[i + 1] = t // base
    return tuple(s)


def sub(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    """Schoolbook subtraction, defined only for ``value(a) >= value(b)``.

    Raises SubtractionUnderflow when a borrow is left over past the
    most-significant digit.
    """
    n, a, b = align(a, b, 1)
    borrow = [0] * (n + 1)
    d = [0] * n
    for i in range(n):
        diff = a[i] - b[i] - borrow[i]
        if diff < 0:
            diff += base
            borrow[i + 1] = 1
        d[i] = diff
    if borrow[n]:
        raise SubtractionUnderflow("subtrahend is larger than minuend")
    return tuple(d)


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

def scale(d: Sequence[int], k: int, base: int) -> Digits:
    """Multiply a digit vector by a single digit ``0 <= k < base``."""
    out = []
    carry = 0
    for x in d:
        carry, r = divmod(x * k + carry, base)
        out.append(r)
    while carry:
        carry, r = divmod(carry, base)
        out.append(r)
    return normalize(out)


def _schoolbook(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    # Raw accumulation may exceed base until the carry pass below.
    p = [0] * (len(a) + len(b) + 1)
    for i, y in enumerate(b):
        for j, x in enumerate(a):
            p[i + j] += x * y
    for i in range(len(p) - 1):
        if p[i] >= base:
            p[i + 1] += p[i] // base
            p[i] %= base
    return tuple(p)


def schoolbook_multiply(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    """Plain O(n**2) long multiplication."""
    if not a or not b:
        return ZERO
    return normalize(_schoolbook(a, b, base))


def karatsuba_multiply(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    """
    Karatsuba multiplication.

    With both operands split at k = n // 2 into low and high halves,

        p0 = lo_a * lo_b
        p2 = hi_a * hi_b
        p1 = (lo_a + hi_a) * (lo_b + hi_b)

    and the product is  p2 * B**2k + (p1 - p0 - p2) * B**k + p0.
    The middle term is never negative because p1 - p0 - p2 equals
    lo_a*hi_b + hi_a*lo_b.
    """
    n, a, b = align(a, b)

    if n == 0:
        return ZERO

    if n == 1:
        # Single digits: the product is below base**2, so two digits suffice.
        return normalize(divmod(a[0] * b[0], base)[::-1])

    if n <= SCHOOLBOOK_CUTOFF:
        return normalize(_schoolbook(a, b, base))

    k = n // 2
    a0, a1 = a[:k], a[k:]
    b0, b1 = b[:k], b[k:]

    p0 = karatsuba_multiply(a0, b0, base)
    p2 = karatsuba_multiply(a1, b1, base)
    p1 = karatsuba_multiply(add(a0, a1, base), add(b0, b1, base), base)

    middle = sub(p1, add(p0, p2, base), base)
    t0 = shift(p2, 2 * k)
    t1 = shift(middle, k)
    return normalize(add(add(t0, t1, base), p0, base))


def multiply(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    return karatsuba_multiply(a, b, base)


# ---------------------------------------------------------------------------
# Division
# ---------------------------------------------------------------------------

def _quotient_digit(r: Digits, b: Digits, base: int) -> int:
    """Largest q in [0, base) with b * q <= r (binary search)."""
    lo, hi = 0, base - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if compare(scale(b, mid, base), r) <= 0:
            lo = mid
        else:
            hi = mid - 1
    return lo


def divmod_digits(
    a: Sequence[int], b: Sequence[int], base: int
) -> tuple[Digits, Digits]:
    """Schoolbook long division returning ``(quotient, remainder)``.

    ``value(a) == value(q) * value(b) + value(r)`` with
    ``0 <= value(r) < value(b)``.
    """
    if is_zero(b):
        raise DivisionByZero()
    a, b = normalize(a), normalize(b)
    if compare(a, b) < 0:
        return ZERO, a

    q = []
    r = ZERO
    # Invariant: value(r) < value(b) at the top of each step.
    for digit in reversed(a):
        r = normalize((digit,) + r)
        qd = _quotient_digit(r, b, base)
        if qd:
            r = normalize(sub(r, scale(b, qd, base), base))
        q.append(qd)
    return normalize(q[::-1]), r


def divide(a: Sequence[int], b: Sequence[int], base: int) -> Digits:
    return divmod_digits(a, b, base)[0]
