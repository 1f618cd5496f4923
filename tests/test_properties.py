"""Property-based tests using Hypothesis.

Python's own ``int`` and ``fractions.Fraction`` serve as oracles.  The
strategies mix uniformly drawn values with values pinned to limb
boundaries, where carry and borrow bugs live.
"""
from __future__ import annotations

import math
from fractions import Fraction

from hypothesis import given, settings
from hypothesis import strategies as st

from biginteger import BASE, BigInteger, gcd
from conftest import assert_canonical
from rational import Rational

# ---------------------------------------------------------------------------
# Shared configuration
# ---------------------------------------------------------------------------

LIMIT = 10 ** 45

boundary = st.builds(
    lambda power, offset, negative: (-1 if negative else 1) * (BASE ** power + offset),
    st.integers(min_value=0, max_value=4),
    st.integers(min_value=-2, max_value=2),
    st.booleans(),
)
ints = st.one_of(st.integers(min_value=-LIMIT, max_value=LIMIT), boundary)
nonzero = ints.filter(lambda v: v != 0)
positive = st.integers(min_value=1, max_value=LIMIT)

small = st.integers(min_value=-10 ** 12, max_value=10 ** 12)
small_nonzero = small.filter(lambda v: v != 0)


def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division)."""
    q, r = divmod(a, b)
    # divmod rounds toward -inf; adjust when the result is negative
    # and there is a remainder.
    if r != 0 and (a < 0) != (b < 0):
        q += 1
    return q


def fraction_of(value: Rational) -> Fraction:
    sign = -1 if value.is_negative() else 1
    return Fraction(sign * int(value.numerator), int(value.denominator))


# ===================================================================
# BigInteger against int
# ===================================================================

class TestIntegerOracle:

    @given(a=ints)
    def test_construction_and_string(self, a):
        x = BigInteger(a)
        assert_canonical(x)
        assert int(x) == a
        assert str(x) == str(a)

    @given(a=ints)
    def test_string_round_trip(self, a):
        text = str(a)
        assert BigInteger(text).to_string() == text

    @given(a=ints, b=ints)
    def test_add(self, a, b):
        result = BigInteger(a) + BigInteger(b)
        assert_canonical(result)
        assert int(result) == a + b

    @given(a=ints, b=ints)
    def test_sub(self, a, b):
        result = BigInteger(a) - BigInteger(b)
        assert_canonical(result)
        assert int(result) == a - b

    @given(a=ints, delta=st.integers(min_value=-(BASE - 1), max_value=BASE - 1))
    def test_add_small(self, a, delta):
        result = BigInteger(a).add_small(delta)
        assert_canonical(result)
        assert int(result) == a + delta

    @given(a=ints, b=ints)
    def test_mul(self, a, b):
        result = BigInteger(a) * BigInteger(b)
        assert_canonical(result)
        assert int(result) == a * b

    @given(a=ints, k=st.integers(min_value=-2 * BASE, max_value=2 * BASE))
    def test_mul_small(self, a, k):
        result = BigInteger(a).mul_small(k)
        assert_canonical(result)
        assert int(result) == a * k

    @given(a=ints, b=nonzero)
    def test_div_mod(self, a, b):
        q, r = divmod(BigInteger(a), BigInteger(b))
        assert_canonical(q)
        assert_canonical(r)
        assert int(q) == truncdiv(a, b)
        assert int(r) == a - b * truncdiv(a, b)

    @given(a=ints, b=ints)
    def test_ordering(self, a, b):
        x, y = BigInteger(a), BigInteger(b)
        assert (x < y) == (a < b)
        assert (x == y) == (a == b)
        assert (x >= y) == (a >= b)

    @given(a=positive, b=positive)
    @settings(max_examples=50)
    def test_gcd(self, a, b):
        assert int(gcd(a, b)) == math.gcd(a, b)


# ===================================================================
# Algebraic laws
# ===================================================================

class TestIntegerLaws:

    @given(a=ints, b=ints)
    def test_add_commutative(self, a, b):
        assert BigInteger(a) + BigInteger(b) == BigInteger(b) + BigInteger(a)

    @given(a=ints, b=ints, c=ints)
    def test_add_associative(self, a, b, c):
        x, y, z = BigInteger(a), BigInteger(b), BigInteger(c)
        assert (x + y) + z == x + (y + z)

    @given(a=ints, b=ints)
    def test_mul_commutative(self, a, b):
        assert BigInteger(a) * BigInteger(b) == BigInteger(b) * BigInteger(a)

    @given(a=ints, b=nonzero)
    def test_division_identity(self, a, b):
        x, y = BigInteger(a), BigInteger(b)
        assert x == y * (x / y) + x % y
        assert abs(x % y) < abs(y)

    @given(a=positive, b=positive)
    @settings(max_examples=50)
    def test_gcd_divides_both(self, a, b):
        g = gcd(a, b)
        assert (BigInteger(a) % g).is_zero()
        assert (BigInteger(b) % g).is_zero()

    @given(a=positive, b=positive)
    @settings(max_examples=50)
    def test_gcd_is_greatest(self, a, b):
        g = gcd(a, b)
        larger = g + 1
        assert not ((BigInteger(a) % larger).is_zero() and (BigInteger(b) % larger).is_zero())


# ===================================================================
# Rational against Fraction
# ===================================================================

class TestRationalOracle:

    @given(p=small, q=small_nonzero)
    def test_construction_reduces(self, p, q):
        r = Rational(p, q)
        assert fraction_of(r) == Fraction(p, q)
        if r.is_zero():
            assert r.denominator == 1
        else:
            assert gcd(r.numerator, r.denominator) == 1

    @given(p=small, q=small_nonzero, s=small, t=small_nonzero)
    def test_add(self, p, q, s, t):
        result = Rational(p, q) + Rational(s, t)
        assert fraction_of(result) == Fraction(p, q) + Fraction(s, t)

    @given(p=small, q=small_nonzero, s=small, t=small_nonzero)
    def test_sub(self, p, q, s, t):
        result = Rational(p, q) - Rational(s, t)
        assert fraction_of(result) == Fraction(p, q) - Fraction(s, t)

    @given(p=small, q=small_nonzero, s=small, t=small_nonzero)
    def test_mul(self, p, q, s, t):
        result = Rational(p, q) * Rational(s, t)
        assert fraction_of(result) == Fraction(p, q) * Fraction(s, t)

    @given(p=small, q=small_nonzero, s=small_nonzero, t=small_nonzero)
    def test_div(self, p, q, s, t):
        result = Rational(p, q) / Rational(s, t)
        assert fraction_of(result) == Fraction(p, q) / Fraction(s, t)

    @given(p=small, q=small_nonzero, s=small, t=small_nonzero)
    def test_ordering(self, p, q, s, t):
        assert (Rational(p, q) < Rational(s, t)) == (Fraction(p, q) < Fraction(s, t))

    @given(p=small, q=small_nonzero)
    def test_to_string(self, p, q):
        assert Rational(p, q).to_string() == str(Fraction(p, q))

    @given(p=small, q=small_nonzero, precision=st.integers(min_value=0, max_value=40))
    def test_as_decimal(self, p, q, precision):
        f = Fraction(p, q)
        scaled = abs(f.numerator) * 10 ** precision // f.denominator
        digits = str(scaled).zfill(precision + 1)
        expected = digits if precision == 0 else (
            digits[:-precision] + "." + digits[-precision:]
        )
        if f < 0:
            expected = "-" + expected
        assert Rational(p, q).as_decimal(precision) == expected

    @given(p=small, q=small_nonzero)
    def test_float(self, p, q):
        assert float(Rational(p, q)) == float(Fraction(p, q))


class TestRationalLaws:

    @given(p=small_nonzero, q=small_nonzero)
    def test_reciprocal(self, p, q):
        assert Rational(p, q) * Rational(q, p) == 1

    @given(a=small, b=small_nonzero)
    def test_additive_inverse(self, a, b):
        assert (Rational(a, b) + (-Rational(a, b))).is_zero()

    @given(p=small, q=small_nonzero, s=small, t=small_nonzero)
    def test_results_stay_reduced(self, p, q, s, t):
        x, y = Rational(p, q), Rational(s, t)
        results = [x + y, x - y, x * y]
        if not y.is_zero():
            results.append(x / y)
        for r in results:
            assert r.denominator.is_positive()
            if r.is_zero():
                assert r.denominator == 1
            else:
                assert gcd(r.numerator, r.denominator) == 1
