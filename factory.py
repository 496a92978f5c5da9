"""
The radix calculator factory.

The factory does NOT just construct calculators - it *verifies* them
against their specs before releasing them.

Flow:
  1. Caller requests a calculator for a given base.
  2. Factory builds the RadixCalculator.
  3. Factory runs every spec property against its digit-level operations.
  4. If verification passes  -> return the calculator.
     If verification fails   -> raise, never hand out a broken instance.

The verification domain is every integer with at most ``digits`` digits
in the requested base.  Small domains are checked exhaustively; larger
ones with edge cases plus seeded random samples.  The default digit
count is large enough that Karatsuba's recursive split is exercised,
not only the schoolbook cutoff.
"""

from __future__ import annotations

import inspect
import itertools
import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from arithmetic import SCHOOLBOOK_CUTOFF, DivisionByZero
from bounds import DEFAULT_LIMITS, Limits
from calculator import RadixCalculator
from digits import Digits, from_int, to_string
from spec import (
    DigitOp,
    Spec,
    Property,
    addition_spec,
    subtraction_spec,
    multiplication_spec,
    division_spec,
)

logger = logging.getLogger("radix_bignum.factory")


class CheckMode(Enum):
    """How a property's input domain was covered."""

    EXHAUSTIVE = "exhaustive"
    SAMPLED = "sampled"


@dataclass
class VerificationResult:
    """Outcome of verifying one property over digit-vector operands."""

    property_name: str
    passed: bool
    counterexample: tuple[Digits, ...] | None = None
    tests_run: int = 0

    def counterexample_text(self) -> str:
        """Operands rendered most-significant digit first, e.g. ``9, 9``."""
        if self.counterexample is None:
            return ""
        return ", ".join(to_string(d) for d in self.counterexample)

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  operands=({self.counterexample_text()})" if self.counterexample else ""
        return f"[{status}] {self.property_name} ({self.tests_run} cases){ce}"


@dataclass
class VerificationReport:
    """All property results of one spec, with the domain they ran over."""

    spec_name: str
    base: int
    digits: int
    mode: CheckMode
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[VerificationResult]:
        return [r for r in self.results if not r.passed]

    @property
    def cases_run(self) -> int:
        return sum(r.tests_run for r in self.results)

    def summary(self) -> str:
        lines = [
            f"--- {self.spec_name}: base {self.base}, operands up to "
            f"{self.digits} digits, {self.mode.value} ---"
        ]
        lines.extend(f"  {r}" for r in self.results)
        if self.passed:
            lines.append(f"  => ALL PASSED ({self.cases_run} cases)")
        else:
            names = ", ".join(r.property_name for r in self.failures)
            lines.append(f"  => FAILED: {names}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when a calculator fails its spec; carries the failing report."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(
            f"base {report.base} calculator rejected:\n{report.summary()}"
        )


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class RadixFactory:
    """
    Produces RadixCalculator instances that are proven against their specs.
    """

    EXHAUSTIVE_THRESHOLD = 32   # max domain size for brute-force check
    SAMPLE_COUNT = 100          # random combinations per property
    VERIFY_DIGITS = 8           # operand length of the verification domain

    @classmethod
    def create(
        cls,
        base: int,
        limits: Limits = DEFAULT_LIMITS,
        digits: int | None = None,
        seed: int = 0,
    ) -> RadixCalculator:
        """Build, verify, and return a RadixCalculator."""
        calc = RadixCalculator(base=base, limits=limits)
        if digits is None:
            digits = min(cls.VERIFY_DIGITS, limits.max_digits)
        cls._verify_all(calc, digits, seed)
        logger.info("base %d calculator verified over %d-digit operands", base, digits)
        return calc

    @classmethod
    def verify_spec(
        cls, spec: Spec, op: DigitOp, base: int, digits: int, seed: int = 0
    ) -> VerificationReport:
        report = VerificationReport(
            spec_name=spec.name,
            base=base,
            digits=digits,
            mode=cls.check_mode(base, digits),
        )
        rng = random.Random(seed)
        for prop in spec:
            result = cls._verify_property(prop, op, base, digits, rng)
            report.results.append(result)
        logger.debug("%s", report.summary())
        return report

    @classmethod
    def check_mode(cls, base: int, digits: int) -> CheckMode:
        """Exhaustive when every operand of up to ``digits`` digits fits the threshold."""
        if base ** digits <= cls.EXHAUSTIVE_THRESHOLD:
            return CheckMode.EXHAUSTIVE
        return CheckMode.SAMPLED

    # -- internal ---------------------------------------------------------

    @classmethod
    def _verify_all(cls, calc: RadixCalculator, digits: int, seed: int) -> None:
        specs_and_ops = [
            (addition_spec(calc.base), calc.add_digits),
            (subtraction_spec(calc.base), calc.sub_digits),
            (multiplication_spec(calc.base), calc.mul_digits),
            (division_spec(calc.base), calc.divmod_digits),
        ]
        for spec, op in specs_and_ops:
            report = cls.verify_spec(spec, op, calc.base, digits, seed)
            if not report.passed:
                logger.error("verification of %s failed for base %d", spec.name, calc.base)
                raise VerificationError(report)

    @classmethod
    def _verify_property(
        cls,
        prop: Property,
        op: DigitOp,
        base: int,
        digits: int,
        rng: random.Random,
    ) -> VerificationResult:
        arity = _predicate_arity(prop)

        if cls.check_mode(base, digits) is CheckMode.EXHAUSTIVE:
            domain = [from_int(v, base) for v in range(base ** digits)]
            combos = itertools.product(domain, repeat=arity)
        else:
            combos = _generate_samples(base, digits, arity, cls.SAMPLE_COUNT, rng)

        tests_run = 0
        for combo in combos:
            tests_run += 1
            try:
                if not prop.check(op, *combo):
                    return VerificationResult(
                        property_name=prop.name,
                        passed=False,
                        counterexample=combo,
                        tests_run=tests_run,
                    )
            except DivisionByZero:
                # Zero divisors are an error condition, not a violation
                pass

        return VerificationResult(
            property_name=prop.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _predicate_arity(prop: Property) -> int:
    """
    Infer how many *value* arguments a property predicate expects
    (excluding the operation callable which is always the first arg).
    """
    sig = inspect.signature(prop.predicate)
    return len(sig.parameters) - 1


def _edge_values(base: int, digits: int) -> list[Digits]:
    top = base ** digits - 1
    values = {0, 1, base - 1, base, top}
    # All-(base-1) operands maximise carries; one just past the cutoff
    # forces a recursive split.
    values.add(base ** min(digits, SCHOOLBOOK_CUTOFF + 1) - 1)
    return [from_int(v, base) for v in sorted(values) if v <= top]


def _generate_samples(
    base: int, digits: int, arity: int, count: int, rng: random.Random
) -> list[tuple[Digits, ...]]:
    """Every edge-case combination followed by ``count`` random ones."""
    edges = _edge_values(base, digits)
    samples: list[tuple[Digits, ...]] = list(itertools.product(edges, repeat=arity))

    for _ in range(count):
        # Random length first so short operands are not drowned out
        combo = tuple(
            from_int(rng.randint(0, base ** rng.randint(1, digits) - 1), base)
            for _ in range(arity)
        )
        samples.append(combo)

    return samples
