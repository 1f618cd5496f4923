"""
Policy layer: how the arithmetic core reacts to faults.

A policy decides what a plain operator (``a / b``, ``a % b``, ``gcd``) does
when it hits a fault.  It either raises the fault, or logs it and yields
the deterministic zero result.  The ``checked_*`` operations ignore the
policy and always hand the fault back inside an ``Outcome``.

Literal parsing is not governed by the policy: a malformed literal always
raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeVar

from errors import ArithmeticFault

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fractional digits rendered before parsing a Rational as a float.
# Enough to exhaust double precision for any magnitude a double can hold.
FLOAT_DIGITS = 310


class FaultMode(Enum):
    """What a plain operator does on a fault."""

    RAISE = auto()       # Raise the ArithmeticFault subclass
    ZERO = auto()        # Log a warning and return zero


@dataclass(frozen=True)
class ArithmeticPolicy:
    """Process-wide arithmetic configuration."""

    fault_mode: FaultMode = FaultMode.RAISE
    float_digits: int = FLOAT_DIGITS

    def __post_init__(self):
        if not isinstance(self.fault_mode, FaultMode):
            raise TypeError(f"fault_mode must be a FaultMode, got {self.fault_mode!r}")
        if self.float_digits < 1:
            raise ValueError(f"float_digits ({self.float_digits}) must be >= 1")

    def resolve(self, fault: ArithmeticFault, zero: T) -> T:
        """Raise ``fault`` or return ``zero`` depending on the fault mode."""
        if self.fault_mode == FaultMode.RAISE:
            raise fault
        logger.warning("%s: %s (yielding zero)", fault.kind.value, fault.message)
        return zero


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

STRICT = ArithmeticPolicy(fault_mode=FaultMode.RAISE)
LENIENT = ArithmeticPolicy(fault_mode=FaultMode.ZERO)

# Module-level configuration, replaced through configure().
_policy: ArithmeticPolicy = STRICT


def configure(policy: ArithmeticPolicy) -> ArithmeticPolicy:
    """Install ``policy`` and return the one it replaces."""
    global _policy
    if not isinstance(policy, ArithmeticPolicy):
        raise TypeError(f"expected ArithmeticPolicy, got {type(policy).__name__}")
    previous = _policy
    _policy = policy
    logger.debug("arithmetic policy set to %s", policy)
    return previous


def current_policy() -> ArithmeticPolicy:
    return _policy


def reset_policy() -> None:
    configure(STRICT)


def resolve_fault(fault: ArithmeticFault, zero: T) -> T:
    """Apply the active policy to ``fault``."""
    return _policy.resolve(fault, zero)
