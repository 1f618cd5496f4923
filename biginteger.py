"""
Arbitrary-precision signed integers.

A BigInteger is a sign tag plus a list of base-10**9 limbs, least
significant first.  Invariants restored before any public method returns:

  - sign is ZERO exactly when the limb list is empty
  - the most significant limb of a nonzero value is nonzero
  - every limb lies in [0, BASE)

Compound operators (``+=``, ``-=``, ``*=``, ``/=``, ``%=``) mutate the
receiver in place; the binary operators copy and then delegate to them.
Decision branches are tagged with IDs (``# ADD-SAME-SIGN``) that the
white-box tests trace back to.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TextIO, Union

from errors import (
    DivisionByZeroError,
    InvalidGCDOperandsError,
    MalformedLiteralError,
    Outcome,
)
from policy import resolve_fault

BASE = 10 ** 9
BASE_DIGITS = 9

_LITERAL = re.compile(r"-?(0|[1-9][0-9]*)")
_DIGITS = frozenset("0123456789")


class Sign(Enum):
    """Tri-state sign tag.  Values order NEGATIVE < ZERO < POSITIVE."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    def __mul__(self, other: "Sign") -> "Sign":
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign(self.value * other.value)

    def flipped(self) -> "Sign":
        return Sign(-self.value)

    @classmethod
    def of(cls, value: int) -> "Sign":
        return cls((value > 0) - (value < 0))


# ---------------------------------------------------------------------------
# Limb helpers (magnitudes only, list[int] least significant first)
# ---------------------------------------------------------------------------

def _trim(limbs: list[int]) -> None:
    """Drop superfluous leading zero limbs."""
    while limbs and limbs[-1] == 0:
        limbs.pop()


def _compare_limbs(first: list[int], second: list[int]) -> int:
    """Order two normalised magnitudes: limb count first, then limb by limb."""
    if len(first) != len(second):
        return -1 if len(first) < len(second) else 1
    for a, b in zip(reversed(first), reversed(second)):
        if a != b:
            return -1 if a < b else 1
    return 0


def _propagate_carry(limbs: list[int], index: int) -> None:
    """Push an overflowing limb upward.  Each step carries at most one."""
    while limbs[index] >= BASE:
        limbs[index] -= BASE
        if index + 1 == len(limbs):
            limbs.append(1)
            return
        index += 1
        limbs[index] += 1


def _propagate_borrow(limbs: list[int], index: int) -> None:
    """Repay a negative limb from the next nonzero limb above it.

    The caller guarantees the whole magnitude stays non-negative, so a
    nonzero limb always exists further up.
    """
    while limbs[index] < 0:
        limbs[index] += BASE
        index += 1
        limbs[index] -= 1


def _add_magnitude(limbs: list[int], addend: list[int]) -> None:
    if addend is limbs:
        addend = list(addend)
    if len(addend) > len(limbs):
        limbs.extend([0] * (len(addend) - len(limbs)))
    for index, limb in enumerate(addend):
        limbs[index] += limb
        _propagate_carry(limbs, index)


def _sub_magnitude(limbs: list[int], subtrahend: list[int]) -> None:
    """limbs -= subtrahend, requires |limbs| >= |subtrahend|."""
    for index, limb in enumerate(subtrahend):
        limbs[index] -= limb
        _propagate_borrow(limbs, index)
    _trim(limbs)


def _mul_magnitude(first: list[int], second: list[int]) -> list[int]:
    """Schoolbook product with one carry pass per multiplier limb."""
    result = [0] * (len(first) + len(second))
    for offset, multiplier in enumerate(second):
        if multiplier == 0:
            continue
        carry = 0
        for index, limb in enumerate(first):
            carry, result[index + offset] = divmod(
                result[index + offset] + limb * multiplier + carry, BASE
            )
        result[offset + len(first)] += carry
    _trim(result)
    return result


def _mul_limbs_small(limbs: list[int], factor: int) -> list[int]:
    """Product of a magnitude and a non-negative machine integer."""
    if factor == 0:
        return []
    result = []
    carry = 0
    for limb in limbs:
        carry, low = divmod(limb * factor + carry, BASE)
        result.append(low)
    while carry:
        carry, low = divmod(carry, BASE)
        result.append(low)
    return result


def _quotient_digit(window: list[int], divisor: list[int]) -> int:
    """Largest q in [0, BASE] with divisor * q <= window, by binary search."""
    if _compare_limbs(window, divisor) < 0:
        return 0
    low, high = 1, BASE
    while low < high:
        mid = (low + high + 1) // 2
        if _compare_limbs(_mul_limbs_small(divisor, mid), window) <= 0:
            low = mid
        else:
            high = mid - 1
    return low


def _divmod_magnitude(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """Long division of magnitudes in base BASE.

    The window starts with the top ``len(divisor)`` dividend limbs; each
    step finds one quotient limb, subtracts ``divisor * q`` and brings the
    next dividend limb down.  Returns (quotient, remainder).
    """
    width = len(divisor)
    if len(dividend) < width:
        return [], list(dividend)

    index = len(dividend) - width
    window = dividend[index:]
    quotient: list[int] = []                # most significant first

    while True:
        digit = _quotient_digit(window, divisor)
        if digit:
            _sub_magnitude(window, _mul_limbs_small(divisor, digit))
        quotient.append(digit)
        if index == 0:
            break
        index -= 1
        window.insert(0, dividend[index])
        _trim(window)

    quotient.reverse()
    _trim(quotient)
    return quotient, window


def _limbs_of(value: int) -> list[int]:
    limbs = []
    magnitude = abs(value)
    while magnitude:
        magnitude, limb = divmod(magnitude, BASE)
        limbs.append(limb)
    return limbs


def _diagnose_literal(text: str) -> str:
    body = text[1:] if text.startswith("-") else text
    if not body:
        return "no digits"
    if not set(body) <= _DIGITS:
        return "unexpected character"
    return "leading zero"


# ---------------------------------------------------------------------------
# BigInteger
# ---------------------------------------------------------------------------

IntegerLike = Union["BigInteger", int]


class BigInteger:
    """Unbounded signed integer with truncating division."""

    def __init__(self, value: BigInteger | int | str = 0) -> None:
        self._sign = Sign.ZERO
        self._limbs: list[int] = []
        if isinstance(value, BigInteger):
            self._sign = value._sign
            self._limbs = list(value._limbs)
        elif isinstance(value, int):
            self._sign = Sign.of(value)
            self._limbs = _limbs_of(value)
        elif isinstance(value, str):
            self._parse_into(value)
        else:
            raise TypeError(
                f"cannot build BigInteger from {type(value).__name__}"
            )

    @classmethod
    def _from_parts(cls, sign: Sign, limbs: list[int]) -> BigInteger:
        result = cls()
        _trim(limbs)
        if limbs:
            result._sign = sign
            result._limbs = limbs
        return result

    # -- construction from text ---------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> BigInteger:
        """Parse ``-?[0-9]+`` with no leading zero unless the value is 0."""
        return cls(text)

    @classmethod
    def parse(cls, text: str) -> Outcome[BigInteger]:
        try:
            return Outcome(cls(text))
        except MalformedLiteralError as fault:
            return Outcome(cls(), fault)

    def _parse_into(self, text: str) -> None:
        if not _LITERAL.fullmatch(text):
            raise MalformedLiteralError(text, _diagnose_literal(text))

        negative = text.startswith("-")
        body = text[1:] if negative else text
        if body == "0":
            return

        # Chunk from the least significant end, one limb per 9 digits.
        for end in range(len(body), 0, -BASE_DIGITS):
            self._limbs.append(int(body[max(0, end - BASE_DIGITS):end]))
        self._sign = Sign.NEGATIVE if negative else Sign.POSITIVE

    # -- accessors ----------------------------------------------------------

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def limbs(self) -> list[int]:
        return list(self._limbs)

    @property
    def limb_count(self) -> int:
        return len(self._limbs)

    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def is_positive(self) -> bool:
        return self._sign is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    def __int__(self) -> int:
        magnitude = 0
        for limb in reversed(self._limbs):
            magnitude = magnitude * BASE + limb
        return self._sign.value * magnitude

    def copy(self) -> BigInteger:
        return BigInteger(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> BigInteger:
        return BigInteger(self)

    def _assign(self, other: BigInteger) -> None:
        self._sign = other._sign
        self._limbs = list(other._limbs)

    def _set_zero(self) -> None:
        self._sign = Sign.ZERO
        self._limbs = []

    # -- string conversion --------------------------------------------------

    def to_string(self) -> str:
        if self._sign is Sign.ZERO:
            return "0"
        parts = [str(self._limbs[-1])]
        parts.extend(f"{limb:0{BASE_DIGITS}d}" for limb in reversed(self._limbs[:-1]))
        prefix = "-" if self._sign is Sign.NEGATIVE else ""
        return prefix + "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    # -- comparison ---------------------------------------------------------

    def _compare(self, other: BigInteger) -> int:
        if self._sign is not other._sign:                         # CMP-SIGN
            return -1 if self._sign.value < other._sign.value else 1
        if self._sign is Sign.ZERO:                               # CMP-ZERO
            return 0
        order = _compare_limbs(self._limbs, other._limbs)         # CMP-MAGNITUDE
        return order if self._sign is Sign.POSITIVE else -order

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._sign is other._sign and self._limbs == other._limbs

    def __lt__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: IntegerLike) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0

    # -- sign ---------------------------------------------------------------

    def negate(self) -> BigInteger:
        self._sign = self._sign.flipped()
        return self

    def __neg__(self) -> BigInteger:
        return BigInteger(self).negate()

    def __pos__(self) -> BigInteger:
        return BigInteger(self)

    def __abs__(self) -> BigInteger:
        result = BigInteger(self)
        if result._sign is Sign.NEGATIVE:
            result._sign = Sign.POSITIVE
        return result

    # -- addition / subtraction ---------------------------------------------

    def _add_signed(self, sign: Sign, limbs: list[int]) -> None:
        if sign is Sign.ZERO:                                     # ADD-OTHER-ZERO
            return
        if self._sign is Sign.ZERO:                               # ADD-SELF-ZERO
            self._sign = sign
            self._limbs = list(limbs)
            return
        if self._sign is sign:                                    # ADD-SAME-SIGN
            _add_magnitude(self._limbs, limbs)
            return

        order = _compare_limbs(self._limbs, limbs)
        if order == 0:                                            # ADD-CANCEL
            self._set_zero()
        elif order > 0:                                           # ADD-SELF-LARGER
            _sub_magnitude(self._limbs, limbs)
        else:                                                     # ADD-OTHER-LARGER
            larger = list(limbs)
            _sub_magnitude(larger, self._limbs)
            self._limbs = larger
            self._sign = sign

    def add_small(self, delta: int) -> BigInteger:
        """In-place ``self += delta`` for ``abs(delta) < BASE``.

        Touches the lowest limb and walks the carry or borrow upward
        without building a second BigInteger.
        """
        if not -BASE < delta < BASE:
            self._add_signed(Sign.of(delta), _limbs_of(delta))
            return self
        if delta == 0:                                            # SMALL-NOOP
            return self
        if self._sign is Sign.ZERO:                               # SMALL-FROM-ZERO
            self._sign = Sign.of(delta)
            self._limbs = [abs(delta)]
            return self

        magnitude = abs(delta)
        if Sign.of(delta) is self._sign:                          # SMALL-CARRY
            self._limbs[0] += magnitude
            _propagate_carry(self._limbs, 0)
        elif len(self._limbs) == 1:                               # SMALL-ONE-LIMB
            difference = self._limbs[0] - magnitude
            if difference == 0:
                self._set_zero()
            elif difference < 0:
                self._limbs[0] = -difference
                self._sign = self._sign.flipped()
            else:
                self._limbs[0] = difference
        else:                                                     # SMALL-BORROW
            self._limbs[0] -= magnitude
            _propagate_borrow(self._limbs, 0)
            _trim(self._limbs)
        return self

    def increment(self) -> BigInteger:
        return self.add_small(1)

    def decrement(self) -> BigInteger:
        return self.add_small(-1)

    def __iadd__(self, other: IntegerLike) -> BigInteger:
        if isinstance(other, int):
            return self.add_small(other)
        if not isinstance(other, BigInteger):
            return NotImplemented
        self._add_signed(other._sign, other._limbs)
        return self

    def __isub__(self, other: IntegerLike) -> BigInteger:
        if other is self:                                         # SUB-SELF
            self._set_zero()
            return self
        if isinstance(other, int):
            return self.add_small(-other)
        if not isinstance(other, BigInteger):
            return NotImplemented
        self._add_signed(other._sign.flipped(), other._limbs)
        return self

    def __add__(self, other: IntegerLike) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        result = BigInteger(self)
        result += other
        return result

    def __radd__(self, other: int) -> BigInteger:
        return self.__add__(other)

    def __sub__(self, other: IntegerLike) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        result = BigInteger(self)
        result -= other
        return result

    def __rsub__(self, other: int) -> BigInteger:
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger(other) - self

    # -- multiplication -----------------------------------------------------

    def mul_small(self, factor: int) -> BigInteger:
        """In-place ``self *= factor`` for a machine integer."""
        if self._sign is Sign.ZERO or factor == 0:                # MUL-ZERO
            self._set_zero()
            return self
        self._limbs = _mul_limbs_small(self._limbs, abs(factor))
        self._sign = self._sign * Sign.of(factor)
        return self

    def shift_limbs(self, count: int) -> BigInteger:
        """In-place multiplication by ``BASE ** count``."""
        if count < 0:
            raise ValueError(f"shift count must be >= 0, got {count}")
        if self._sign is not Sign.ZERO and count:
            self._limbs[:0] = [0] * count
        return self

    def __imul__(self, other: IntegerLike) -> BigInteger:
        if isinstance(other, int):
            return self.mul_small(other)
        if not isinstance(other, BigInteger):
            return NotImplemented
        if self._sign is Sign.ZERO or other._sign is Sign.ZERO:   # MUL-ZERO
            self._set_zero()
            return self
        self._limbs = _mul_magnitude(self._limbs, other._limbs)   # MUL-SCHOOLBOOK
        self._sign = self._sign * other._sign
        return self

    def __mul__(self, other: IntegerLike) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        result = BigInteger(self)
        result *= other
        return result

    def __rmul__(self, other: int) -> BigInteger:
        return self.__mul__(other)

    # -- division / remainder -----------------------------------------------

    def _divmod(self, other: BigInteger) -> tuple[BigInteger, BigInteger]:
        """Truncating (quotient, remainder); raises on a zero divisor.

        Works on magnitudes, then signs the quotient with the product of
        the operand signs and the remainder with the dividend's sign, so
        that ``self == other * q + r`` and ``|r| < |other|``.
        """
        if other._sign is Sign.ZERO:                              # DIV-ZERO
            raise DivisionByZeroError(f"{self} divided by zero")
        if self._sign is Sign.ZERO:                               # DIV-ZERO-DIVIDEND
            return BigInteger(), BigInteger()
        quotient, remainder = _divmod_magnitude(self._limbs, other._limbs)
        return (
            BigInteger._from_parts(self._sign * other._sign, quotient),
            BigInteger._from_parts(self._sign, remainder),
        )

    def checked_divmod(self, other: IntegerLike) -> Outcome[tuple[BigInteger, BigInteger]]:
        other = _require(other)
        try:
            return Outcome(self._divmod(other))
        except DivisionByZeroError as fault:
            return Outcome((BigInteger(), BigInteger()), fault)

    def checked_div(self, other: IntegerLike) -> Outcome[BigInteger]:
        result = self.checked_divmod(other)
        return Outcome(result.value[0], result.fault)

    def checked_mod(self, other: IntegerLike) -> Outcome[BigInteger]:
        result = self.checked_divmod(other)
        return Outcome(result.value[1], result.fault)

    def __itruediv__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        try:
            quotient, _ = self._divmod(other)
        except DivisionByZeroError as fault:
            quotient = resolve_fault(fault, BigInteger())
        self._assign(quotient)
        return self

    def __imod__(self, other: IntegerLike) -> BigInteger:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        try:
            _, remainder = self._divmod(other)
        except DivisionByZeroError as fault:
            remainder = resolve_fault(fault, BigInteger())
        self._assign(remainder)
        return self

    def __truediv__(self, other: IntegerLike) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        result = BigInteger(self)
        result /= other
        return result

    def __rtruediv__(self, other: int) -> BigInteger:
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger(other) / self

    def __mod__(self, other: IntegerLike) -> BigInteger:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        result = BigInteger(self)
        result %= other
        return result

    def __rmod__(self, other: int) -> BigInteger:
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger(other) % self

    def __divmod__(self, other: IntegerLike) -> tuple[BigInteger, BigInteger]:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        try:
            return self._divmod(other)
        except DivisionByZeroError as fault:
            return resolve_fault(fault, (BigInteger(), BigInteger()))

    # -- gcd ----------------------------------------------------------------

    @staticmethod
    def gcd(first: IntegerLike, second: IntegerLike) -> BigInteger:
        """Euclid's algorithm; both operands must be strictly positive."""
        outcome = BigInteger.checked_gcd(first, second)
        if outcome.fault is not None:
            return resolve_fault(outcome.fault, outcome.value)
        return outcome.value

    @staticmethod
    def checked_gcd(first: IntegerLike, second: IntegerLike) -> Outcome[BigInteger]:
        first, second = BigInteger(_require(first)), BigInteger(_require(second))
        if not (first.is_positive() and second.is_positive()):   # GCD-INVALID
            return Outcome(BigInteger(), InvalidGCDOperandsError(first, second))
        while second:
            _, remainder = _divmod_magnitude(first._limbs, second._limbs)
            first, second = second, BigInteger._from_parts(Sign.POSITIVE, remainder)
        return Outcome(first)


def _coerce(value: object) -> BigInteger:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return NotImplemented


def _require(value: object) -> BigInteger:
    result = _coerce(value)
    if result is NotImplemented:
        raise TypeError(f"expected BigInteger or int, got {type(value).__name__}")
    return result


# ---------------------------------------------------------------------------
# Module-level conveniences
# ---------------------------------------------------------------------------

def gcd(first: IntegerLike, second: IntegerLike) -> BigInteger:
    return BigInteger.gcd(first, second)


def compare_magnitude(first: IntegerLike, second: IntegerLike) -> int:
    """-1, 0 or 1 as ``abs(first)`` is below, equal to or above ``abs(second)``."""
    return _compare_limbs(_require(first)._limbs, _require(second)._limbs)


def bi(literal: str) -> BigInteger:
    """Literal helper for large constants in code: ``bi("123456789012")``."""
    return BigInteger.from_string(literal)


def _read_token(stream: TextIO) -> str:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_integer(stream: TextIO) -> BigInteger:
    """Consume one whitespace-delimited token and parse it.

    Raises EOFError when the stream holds no further token.
    """
    token = _read_token(stream)
    if not token:
        raise EOFError("no integer token left in stream")
    return BigInteger.from_string(token)


def write_integer(stream: TextIO, value: BigInteger) -> None:
    stream.write(value.to_string())
