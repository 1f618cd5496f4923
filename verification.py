"""
Law verification.

Runs every law of a LawSuite against combinations of sample values and
collects a report.  The default samples concentrate on the places long
arithmetic goes wrong: limb boundaries (BASE - 1, BASE, BASE + 1 and
their powers), carries that ripple through several limbs, borrows that
cross zero limbs, both signs, and zero.

Run directly for a summary::

    python verification.py
"""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field

from biginteger import BASE, BigInteger
from laws import Law, LawSuite, all_suites

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one law."""

    law_name: str
    passed: bool
    counterexample: tuple | None = None
    checks_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.law_name} ({self.checks_run} checks){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying a suite."""

    suite_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    def summary(self) -> str:
        lines = [f"--- {self.suite_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when a law fails for some sample."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# Samples
# ---------------------------------------------------------------------------

def edge_integers() -> list[BigInteger]:
    """Signed samples straddling limb boundaries."""
    magnitudes = [0, 1, 2, 7, BASE - 1, BASE, BASE + 1, 2 * BASE - 1]
    magnitudes += [BASE ** 2 - 1, BASE ** 2, BASE ** 2 + BASE, BASE ** 3 + 1]
    magnitudes += [123456789123456789, 10 ** 30 + 12345]
    values = []
    for m in magnitudes:
        values.append(BigInteger(m))
        if m:
            values.append(BigInteger(-m))
    return values


def random_integers(count: int, max_limbs: int = 4, seed: int = 0) -> list[BigInteger]:
    rng = random.Random(seed)
    values = []
    for _ in range(count):
        magnitude = rng.randrange(BASE ** rng.randint(1, max_limbs))
        values.append(BigInteger(magnitude if rng.random() < 0.5 else -magnitude))
    return values


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------

def verify_law(
    law: Law, samples: list[BigInteger], limit: int | None = None
) -> VerificationResult:
    checks = 0
    combos = itertools.product(samples, repeat=law.arity)
    for combo in itertools.islice(combos, limit):
        checks += 1
        if not law.check(*combo):
            logger.debug("law %s failed for %s", law.name, combo)
            return VerificationResult(
                law_name=law.name,
                passed=False,
                counterexample=tuple(str(v) for v in combo),
                checks_run=checks,
            )
    return VerificationResult(law_name=law.name, passed=True, checks_run=checks)


def verify_suite(
    suite: LawSuite,
    samples: list[BigInteger] | None = None,
    limit: int | None = None,
) -> VerificationReport:
    if samples is None:
        samples = edge_integers()
    report = VerificationReport(suite_name=suite.name)
    for law in suite:
        report.results.append(verify_law(law, samples, limit))
    logger.debug("verified %s: %s", suite.name, "pass" if report.passed else "FAIL")
    return report


def verify_all(
    samples: list[BigInteger] | None = None, limit: int | None = 5_000
) -> list[VerificationReport]:
    """Verify every suite; raise VerificationError on the first failure."""
    reports = []
    for suite in all_suites():
        report = verify_suite(suite, samples, limit)
        if not report.passed:
            raise VerificationError(report)
        reports.append(report)
    return reports


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    for suite in all_suites():
        print(verify_suite(suite, limit=5_000).summary())
