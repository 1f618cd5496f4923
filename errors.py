"""Fault kinds and the explicit error channel for arithmetic operations.

Every failure an arithmetic operation can hit is one of three kinds.  Each
kind has an exception class, so callers that prefer exceptions can catch
them, and every fallible operation also has a ``checked_*`` form that
returns an :class:`Outcome` instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FaultKind(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_GCD_OPERANDS = "invalid_gcd_operands"
    MALFORMED_LITERAL = "malformed_literal"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ArithmeticFault(ArithmeticError):
    """Base class for every fault reported by the arithmetic core."""

    kind: FaultKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DivisionByZeroError(ArithmeticFault, ZeroDivisionError):
    """Raised when a division or remainder has a zero divisor."""

    kind = FaultKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class InvalidGCDOperandsError(ArithmeticFault, ValueError):
    """Raised when gcd() is given an operand that is not strictly positive."""

    kind = FaultKind.INVALID_GCD_OPERANDS

    def __init__(self, first: object, second: object) -> None:
        self.operands = (first, second)
        super().__init__(
            f"gcd requires strictly positive operands, got {first} and {second}"
        )


class MalformedLiteralError(ArithmeticFault, ValueError):
    """Raised when a string does not match the integer literal grammar."""

    kind = FaultKind.MALFORMED_LITERAL

    def __init__(self, text: object, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"malformed integer literal {text!r}: {reason}")


# ---------------------------------------------------------------------------
# Outcome: value plus optional fault
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a checked operation.

    ``value`` is always populated.  When ``fault`` is set the value is the
    deterministic zero the operation falls back to.
    """

    value: T
    fault: ArithmeticFault | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    @property
    def kind(self) -> FaultKind | None:
        return None if self.fault is None else self.fault.kind

    def unwrap(self) -> T:
        if self.fault is not None:
            raise self.fault
        return self.value

    def value_or(self, default: T) -> T:
        return self.value if self.fault is None else default

    def __repr__(self) -> str:
        if self.fault is None:
            return f"Outcome(ok, value={self.value})"
        return f"Outcome({self.fault.kind.value}, value={self.value})"
