"""
Algebraic laws of BigInteger and Rational as executable data.

A Law is purely declarative: a name, a description, how many sample
values it needs, and a predicate over those values.  LawSuites group the
laws of one operation family so verification tools can iterate over them
without knowing anything about the implementation.

Predicates return True when the law holds for the given inputs.  Laws
with a precondition (a nonzero divisor, positive gcd operands) return
True vacuously for inputs outside it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from biginteger import BigInteger, gcd
from rational import Rational


# ---------------------------------------------------------------------------
# Core primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Law:
    """A single verifiable law."""

    name: str
    description: str
    arity: int
    predicate: Callable[..., bool]

    def check(self, *args: Any) -> bool:
        if len(args) != self.arity:
            raise TypeError(f"law {self.name!r} takes {self.arity} values, got {len(args)}")
        return self.predicate(*args)


@dataclass
class LawSuite:
    """An ordered collection of laws that together form a contract."""

    name: str
    laws: list[Law] = field(default_factory=list)

    def add(self, law: Law) -> None:
        self.laws.append(law)

    def __iter__(self):
        return iter(self.laws)

    def __len__(self):
        return len(self.laws)


# ---------------------------------------------------------------------------
# Helpers used inside the predicates
# ---------------------------------------------------------------------------

def _divides(divisor: BigInteger, value: BigInteger) -> bool:
    return (value % divisor).is_zero()


def _is_reduced(value: Rational) -> bool:
    if value.is_zero():
        return value.denominator == 1
    return value.denominator.is_positive() and gcd(value.numerator, value.denominator) == 1


def _division_identity(a: BigInteger, b: BigInteger) -> bool:
    if b.is_zero():
        return True
    q, r = divmod(a, b)
    return a == b * q + r and abs(r) < abs(b)


def _remainder_sign(a: BigInteger, b: BigInteger) -> bool:
    if b.is_zero():
        return True
    r = a % b
    return r.is_zero() or r.sign is a.sign


def _truncates_toward_zero(a: BigInteger, b: BigInteger) -> bool:
    if b.is_zero():
        return True
    q = a / b
    # |b * q| never exceeds |a|
    return abs(b * q) <= abs(a)


def _gcd_divides_both(a: BigInteger, b: BigInteger) -> bool:
    if not (a.is_positive() and b.is_positive()):
        return True
    g = gcd(a, b)
    return _divides(g, a) and _divides(g, b)


def _gcd_is_greatest(a: BigInteger, b: BigInteger) -> bool:
    if not (a.is_positive() and b.is_positive()):
        return True
    g = gcd(a, b)
    cofactor_gcd = gcd(a / g, b / g)
    return cofactor_gcd == 1


def _reciprocal(p: BigInteger, q: BigInteger) -> bool:
    if p.is_zero() or q.is_zero():
        return True
    return Rational(p, q) * Rational(q, p) == 1


# ---------------------------------------------------------------------------
# BigInteger suites
# ---------------------------------------------------------------------------

def integer_addition_laws() -> LawSuite:
    suite = LawSuite(name="integer addition")

    suite.add(Law(
        name="commutativity",
        description="a + b == b + a",
        arity=2,
        predicate=lambda a, b: a + b == b + a,
    ))

    suite.add(Law(
        name="associativity",
        description="(a + b) + c == a + (b + c)",
        arity=3,
        predicate=lambda a, b, c: (a + b) + c == a + (b + c),
    ))

    suite.add(Law(
        name="identity",
        description="a + 0 == a",
        arity=1,
        predicate=lambda a: a + 0 == a,
    ))

    suite.add(Law(
        name="inverse",
        description="a + (-a) == 0 and a - a == 0",
        arity=1,
        predicate=lambda a: (a + (-a)).is_zero() and (a - a).is_zero(),
    ))

    suite.add(Law(
        name="subtraction_undoes_addition",
        description="(a + b) - b == a",
        arity=2,
        predicate=lambda a, b: (a + b) - b == a,
    ))

    return suite


def integer_multiplication_laws() -> LawSuite:
    suite = LawSuite(name="integer multiplication")

    suite.add(Law(
        name="commutativity",
        description="a * b == b * a",
        arity=2,
        predicate=lambda a, b: a * b == b * a,
    ))

    suite.add(Law(
        name="associativity",
        description="(a * b) * c == a * (b * c)",
        arity=3,
        predicate=lambda a, b, c: (a * b) * c == a * (b * c),
    ))

    suite.add(Law(
        name="distributivity",
        description="a * (b + c) == a * b + a * c",
        arity=3,
        predicate=lambda a, b, c: a * (b + c) == a * b + a * c,
    ))

    suite.add(Law(
        name="zero",
        description="a * 0 == 0",
        arity=1,
        predicate=lambda a: (a * BigInteger(0)).is_zero(),
    ))

    suite.add(Law(
        name="sign_rule",
        description="sign(a * b) == sign(a) * sign(b)",
        arity=2,
        predicate=lambda a, b: (a * b).sign is a.sign * b.sign,
    ))

    return suite


def integer_division_laws() -> LawSuite:
    suite = LawSuite(name="integer division")

    suite.add(Law(
        name="division_identity",
        description="a == b * (a / b) + a % b and |a % b| < |b|  (b != 0)",
        arity=2,
        predicate=_division_identity,
    ))

    suite.add(Law(
        name="remainder_sign",
        description="a % b is zero or carries the sign of a  (b != 0)",
        arity=2,
        predicate=_remainder_sign,
    ))

    suite.add(Law(
        name="truncation",
        description="|b * (a / b)| <= |a|  (b != 0)",
        arity=2,
        predicate=_truncates_toward_zero,
    ))

    suite.add(Law(
        name="self",
        description="a / a == 1  (a != 0)",
        arity=1,
        predicate=lambda a: a.is_zero() or a / a == 1,
    ))

    return suite


def gcd_laws() -> LawSuite:
    suite = LawSuite(name="gcd")

    suite.add(Law(
        name="common_divisor",
        description="gcd(a, b) divides a and b  (a, b > 0)",
        arity=2,
        predicate=_gcd_divides_both,
    ))

    suite.add(Law(
        name="greatest",
        description="a / gcd(a, b) and b / gcd(a, b) are coprime  (a, b > 0)",
        arity=2,
        predicate=_gcd_is_greatest,
    ))

    suite.add(Law(
        name="symmetry",
        description="gcd(a, b) == gcd(b, a)  (a, b > 0)",
        arity=2,
        predicate=lambda a, b: (
            not (a.is_positive() and b.is_positive()) or gcd(a, b) == gcd(b, a)
        ),
    ))

    return suite


def string_laws() -> LawSuite:
    suite = LawSuite(name="string conversion")

    suite.add(Law(
        name="round_trip",
        description="BigInteger(str(a)) == a",
        arity=1,
        predicate=lambda a: BigInteger(str(a)) == a,
    ))

    suite.add(Law(
        name="matches_int",
        description="str(a) == str(int(a))",
        arity=1,
        predicate=lambda a: str(a) == str(int(a)),
    ))

    return suite


# ---------------------------------------------------------------------------
# Rational suite
# ---------------------------------------------------------------------------

def rational_laws() -> LawSuite:
    """Laws over rationals built from integer samples p/q."""
    suite = LawSuite(name="rational")

    suite.add(Law(
        name="reduced_after_arithmetic",
        description="every result of +, -, *, / is reduced with denominator > 0",
        arity=2,
        predicate=lambda p, q: q.is_zero() or all(
            _is_reduced(r) for r in (
                Rational(p, q) + Rational(q),
                Rational(p, q) - Rational(q, p) if p else Rational(p),
                Rational(p, q) * Rational(q, 7),
                Rational(p, q) / Rational(3, q),
            )
        ),
    ))

    suite.add(Law(
        name="reciprocal",
        description="(p/q) * (q/p) == 1  (p, q != 0)",
        arity=2,
        predicate=_reciprocal,
    ))

    suite.add(Law(
        name="additive_inverse",
        description="p/q + (-p/q) == 0  (q != 0)",
        arity=2,
        predicate=lambda p, q: q.is_zero() or (Rational(p, q) + (-Rational(p, q))).is_zero(),
    ))

    suite.add(Law(
        name="ordering_matches_cross_product",
        description="p/q < q/1 exactly when p < q*q  (q > 0)",
        arity=2,
        predicate=lambda p, q: not q.is_positive() or (
            (Rational(p, q) < Rational(q)) == (p < q * q)
        ),
    ))

    return suite


def all_suites() -> list[LawSuite]:
    return [
        integer_addition_laws(),
        integer_multiplication_laws(),
        integer_division_laws(),
        gcd_laws(),
        string_laws(),
        rational_laws(),
    ]
