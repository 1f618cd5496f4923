"""
Exact rational numbers built on BigInteger.

A Rational keeps its own sign tag and two non-negative BigInteger
magnitudes.  After every mutation the fraction is fully reduced, the
denominator is at least one, and zero is stored as 0/1.
"""

from __future__ import annotations

from typing import Union

from biginteger import BASE_DIGITS, BigInteger, Sign
from errors import DivisionByZeroError, Outcome
from policy import current_policy, resolve_fault

RationalLike = Union["Rational", BigInteger, int]


class Rational:
    """Reduced fraction with a sign tag."""

    def __init__(
        self,
        numerator: RationalLike = 0,
        denominator: BigInteger | int | None = None,
    ) -> None:
        self._sign = Sign.ZERO
        self._numerator = BigInteger()
        self._denominator = BigInteger(1)

        if isinstance(numerator, Rational):
            if denominator is not None:
                raise TypeError("a Rational numerator takes no denominator")
            self._assign(numerator)
            return

        value = _integer(numerator)
        self._sign = value.sign
        self._numerator = abs(value)
        if denominator is None:
            return

        divisor = _integer(denominator)
        if divisor.is_zero():                                     # RAT-ZERO-DENOMINATOR
            fault = DivisionByZeroError(f"{value}/0 has a zero denominator")
            self._assign(resolve_fault(fault, Rational()))
            return
        self._sign = self._sign * divisor.sign
        self._denominator = abs(divisor)
        self._reduce()

    # -- invariants ---------------------------------------------------------

    def _reduce(self) -> None:
        if self._numerator.is_zero():                             # REDUCE-ZERO
            self._sign = Sign.ZERO
            self._denominator = BigInteger(1)
            return
        divisor = BigInteger.gcd(self._numerator, self._denominator)
        if divisor != 1:                                          # REDUCE-DIVIDE
            self._numerator /= divisor
            self._denominator /= divisor

    def _assign(self, other: Rational) -> None:
        self._sign = other._sign
        self._numerator = BigInteger(other._numerator)
        self._denominator = BigInteger(other._denominator)

    def _set_zero(self) -> None:
        self._sign = Sign.ZERO
        self._numerator = BigInteger()
        self._denominator = BigInteger(1)

    # -- accessors ----------------------------------------------------------

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def numerator(self) -> BigInteger:
        """Numerator magnitude (never negative)."""
        return BigInteger(self._numerator)

    @property
    def denominator(self) -> BigInteger:
        return BigInteger(self._denominator)

    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def is_positive(self) -> bool:
        return self._sign is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def is_integer(self) -> bool:
        return self._denominator == 1

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    def copy(self) -> Rational:
        return Rational(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Rational:
        return Rational(self)

    # -- rendering ----------------------------------------------------------

    def to_string(self) -> str:
        if self._sign is Sign.ZERO:
            return "0"
        text = str(self._numerator)
        if self._denominator != 1:
            text += f"/{self._denominator}"
        return ("-" if self._sign is Sign.NEGATIVE else "") + text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational('{self.to_string()}')"

    def as_decimal(self, precision: int = 0) -> str:
        """Render with exactly ``precision`` fractional digits, truncated.

        The numerator is shifted left by whole limbs (9 decimal digits
        each) so that one long division yields at least ``precision``
        fractional digits; the digit string is then split at the point.
        """
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")

        if self._sign is Sign.ZERO:
            return "0." + "0" * precision if precision else "0"

        prefix = "-" if self._sign is Sign.NEGATIVE else ""
        if precision == 0:
            return prefix + str(self._numerator / self._denominator)

        shift = (precision + BASE_DIGITS) // BASE_DIGITS
        fraction_width = shift * BASE_DIGITS
        scaled = BigInteger(self._numerator).shift_limbs(shift)
        digits = str(scaled / self._denominator)

        if len(digits) > fraction_width:                          # DEC-WHOLE-PART
            integer_part = digits[:-fraction_width]
        else:                                                     # DEC-PURE-FRACTION
            integer_part = "0"
            digits = digits.zfill(fraction_width)
        fraction = digits[-fraction_width:][:precision]
        return f"{prefix}{integer_part}.{fraction}"

    def __float__(self) -> float:
        return float(self.as_decimal(current_policy().float_digits))

    # -- comparison ---------------------------------------------------------

    def _compare(self, other: Rational) -> int:
        if self._sign is not other._sign:
            return -1 if self._sign.value < other._sign.value else 1
        if self._sign is Sign.ZERO:
            return 0
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        order = (left > right) - (left < right)
        return order if self._sign is Sign.POSITIVE else -order

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (
            self._sign is other._sign
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: RationalLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0

    # -- sign ---------------------------------------------------------------

    def negate(self) -> Rational:
        self._sign = self._sign.flipped()
        return self

    def __neg__(self) -> Rational:
        return Rational(self).negate()

    def __pos__(self) -> Rational:
        return Rational(self)

    def __abs__(self) -> Rational:
        result = Rational(self)
        if result._sign is Sign.NEGATIVE:
            result._sign = Sign.POSITIVE
        return result

    # -- arithmetic ---------------------------------------------------------

    def __iadd__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other._sign is Sign.ZERO:                              # RADD-OTHER-ZERO
            return self
        if self._sign is Sign.ZERO:                               # RADD-SELF-ZERO
            self._assign(other)
            return self

        # a/b + c/d = (a*d + c*b) / (b*d), computed before any mutation
        # so that ``x += x`` reads consistent operands.
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        denominator = self._denominator * other._denominator

        if self._sign is other._sign:                             # RADD-SAME-SIGN
            numerator = left + right
        elif left == right:                                       # RADD-CANCEL
            self._set_zero()
            return self
        elif left > right:                                        # RADD-SELF-LARGER
            numerator = left - right
        else:                                                     # RADD-OTHER-LARGER
            numerator = right - left
            self._sign = other._sign

        self._numerator = numerator
        self._denominator = denominator
        self._reduce()
        return self

    def __isub__(self, other: RationalLike) -> Rational:
        if other is self:
            self._set_zero()
            return self
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self += -other
        return self

    def __imul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self._sign is Sign.ZERO or other._sign is Sign.ZERO:   # RMUL-ZERO
            self._set_zero()
            return self
        sign = self._sign * other._sign
        self._numerator = self._numerator * other._numerator
        self._denominator = self._denominator * other._denominator
        self._sign = sign
        self._reduce()
        return self

    def _divide(self, other: Rational) -> Rational:
        if other._sign is Sign.ZERO:                              # RDIV-ZERO
            raise DivisionByZeroError(f"{self} divided by zero")
        if self._sign is Sign.ZERO:
            return Rational()
        result = Rational()
        result._sign = self._sign * other._sign
        result._numerator = self._numerator * other._denominator
        result._denominator = self._denominator * other._numerator
        result._reduce()
        return result

    def checked_div(self, other: RationalLike) -> Outcome[Rational]:
        other = _require(other)
        try:
            return Outcome(self._divide(other))
        except DivisionByZeroError as fault:
            return Outcome(Rational(), fault)

    def __itruediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        try:
            quotient = self._divide(other)
        except DivisionByZeroError as fault:
            quotient = resolve_fault(fault, Rational())
        self._assign(quotient)
        return self

    def __add__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (Rational, BigInteger, int)):
            return NotImplemented
        result = Rational(self)
        result += other
        return result

    def __radd__(self, other: RationalLike) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (Rational, BigInteger, int)):
            return NotImplemented
        result = Rational(self)
        result -= other
        return result

    def __rsub__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return Rational(other) - self

    def __mul__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (Rational, BigInteger, int)):
            return NotImplemented
        result = Rational(self)
        result *= other
        return result

    def __rmul__(self, other: RationalLike) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (Rational, BigInteger, int)):
            return NotImplemented
        result = Rational(self)
        result /= other
        return result

    def __rtruediv__(self, other: RationalLike) -> Rational:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return Rational(other) / self


def _integer(value: object) -> BigInteger:
    if isinstance(value, BigInteger):
        return BigInteger(value)
    if isinstance(value, int):
        return BigInteger(value)
    raise TypeError(f"expected BigInteger or int, got {type(value).__name__}")


def _coerce(value: object) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, (BigInteger, int)):
        return Rational(value)
    return NotImplemented


def _require(value: object) -> Rational:
    result = _coerce(value)
    if result is NotImplemented:
        raise TypeError(
            f"expected Rational, BigInteger or int, got {type(value).__name__}"
        )
    return result
