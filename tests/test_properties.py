"""
Property-based tests using Hypothesis.

These extend the factory's built-in verification with Hypothesis's
shrinking and strategy machinery, across every base from 2 to 10 and
operands of up to twenty digits.
"""

from __future__ import annotations

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from arithmetic import (
    add,
    divmod_digits,
    karatsuba_multiply,
    multiply,
    schoolbook_multiply,
    sub,
)
from digits import from_int, is_zero, normalize, to_int


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

bases = st.integers(min_value=2, max_value=10)


@st.composite
def operands(draw, count: int = 2, max_size: int = 20):
    """A base followed by ``count`` digit vectors valid in that base."""
    base = draw(bases)
    digit = st.integers(min_value=0, max_value=base - 1)
    vectors = [
        tuple(draw(st.lists(digit, min_size=1, max_size=max_size)))
        for _ in range(count)
    ]
    return (base, *vectors)


def value(d, base):
    return to_int(d, base)


# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

class TestRepresentation:

    @given(v=st.integers(min_value=0, max_value=10 ** 120), base=bases)
    def test_round_trip(self, v, base):
        assert to_int(from_int(v, base), base) == v

    @given(v=st.integers(min_value=0, max_value=10 ** 120), base=bases)
    def test_from_int_is_canonical(self, v, base):
        d = from_int(v, base)
        assert normalize(d) == d
        assert all(0 <= x < base for x in d)


# ---------------------------------------------------------------------------
# Addition / subtraction
# ---------------------------------------------------------------------------

class TestAdditionProperties:

    @given(args=operands())
    def test_correctness(self, args):
        base, a, b = args
        assert value(add(a, b, base), base) == value(a, base) + value(b, base)

    @given(args=operands())
    def test_commutativity(self, args):
        base, a, b = args
        assert value(add(a, b, base), base) == value(add(b, a, base), base)

    @given(args=operands(count=3))
    @settings(max_examples=200)
    def test_associativity(self, args):
        base, a, b, c = args
        lhs = add(add(a, b, base), c, base)
        rhs = add(a, add(b, c, base), base)
        assert value(lhs, base) == value(rhs, base)

    @given(args=operands(count=1))
    def test_identity(self, args):
        base, a = args
        assert value(add(a, (0,), base), base) == value(a, base)

    @given(args=operands())
    def test_digits_in_range(self, args):
        base, a, b = args
        assert all(0 <= d < base for d in add(a, b, base))


class TestSubtractionProperties:

    @given(args=operands())
    def test_difference(self, args):
        base, a, b = args
        if value(a, base) < value(b, base):
            a, b = b, a
        assert value(sub(a, b, base), base) == value(a, base) - value(b, base)

    @given(args=operands())
    def test_add_inverts_sub(self, args):
        base, a, b = args
        assume(value(a, base) >= value(b, base))
        assert value(add(sub(a, b, base), b, base), base) == value(a, base)

    @given(args=operands(count=1))
    def test_self_inverse(self, args):
        base, a = args
        assert is_zero(sub(a, a, base))


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

class TestMultiplicationProperties:

    @given(args=operands())
    @settings(max_examples=300)
    def test_correctness(self, args):
        base, a, b = args
        assert value(multiply(a, b, base), base) == value(a, base) * value(b, base)

    @given(args=operands())
    @settings(max_examples=300)
    def test_karatsuba_matches_schoolbook(self, args):
        base, a, b = args
        assert karatsuba_multiply(a, b, base) == schoolbook_multiply(a, b, base)

    @given(args=operands())
    def test_commutativity(self, args):
        base, a, b = args
        assert multiply(a, b, base) == multiply(b, a, base)

    @given(args=operands(count=1))
    def test_zero(self, args):
        base, a = args
        assert multiply(a, (0,), base) == (0,)

    @given(args=operands(count=1))
    def test_identity(self, args):
        base, a = args
        assert multiply(a, (1,), base) == normalize(a)

    @given(args=operands())
    def test_result_is_canonical(self, args):
        base, a, b = args
        p = multiply(a, b, base)
        assert normalize(p) == p
        assert all(0 <= d < base for d in p)
        assert len(p) <= len(a) + len(b)

    @given(args=operands(max_size=60))
    @settings(max_examples=50)
    def test_long_operands(self, args):
        base, a, b = args
        assert value(multiply(a, b, base), base) == value(a, base) * value(b, base)


# ---------------------------------------------------------------------------
# Division
# ---------------------------------------------------------------------------

class TestDivisionProperties:

    @given(args=operands())
    @settings(max_examples=300)
    def test_euclidean(self, args):
        base, a, b = args
        assume(not is_zero(b))
        q, r = divmod_digits(a, b, base)
        assert value(a, base) == value(q, base) * value(b, base) + value(r, base)
        assert 0 <= value(r, base) < value(b, base)

    @given(args=operands())
    def test_matches_integer_division(self, args):
        base, a, b = args
        assume(not is_zero(b))
        q, r = divmod_digits(a, b, base)
        assert (value(q, base), value(r, base)) == divmod(value(a, base), value(b, base))

    @given(args=operands(count=1))
    def test_self(self, args):
        base, a = args
        assume(not is_zero(a))
        q, r = divmod_digits(a, a, base)
        assert q == (1,)
        assert r == (0,)
