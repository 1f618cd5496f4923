"""Shared fixtures for bigrational tests."""
from __future__ import annotations

import pytest
from hypothesis import settings

from biginteger import BASE, BigInteger, Sign
from policy import LENIENT, STRICT, configure, reset_policy

# Long division and gcd are pure Python; individual examples can take
# longer than hypothesis' default deadline on a slow runner.
settings.register_profile("bigrational", deadline=None)
settings.load_profile("bigrational")


@pytest.fixture(autouse=True)
def _strict_policy():
    """Every test starts and ends under the strict policy."""
    configure(STRICT)
    yield
    reset_policy()


@pytest.fixture
def lenient():
    previous = configure(LENIENT)
    yield LENIENT
    configure(previous)


def assert_canonical(value: BigInteger) -> None:
    """Representation invariants of a BigInteger."""
    limbs = value.limbs
    assert (value.sign is Sign.ZERO) == (limbs == [])
    assert value.limb_count == len(limbs)
    if limbs:
        assert limbs[-1] != 0
    assert all(0 <= limb < BASE for limb in limbs)
