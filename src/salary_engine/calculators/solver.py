"""Monotonic function inversion by bisection."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from salary_engine.calculators.errors import NumericDivergence

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = Decimal("0.01")
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_MAX_DOUBLINGS = 32

TWO = Decimal("2")

MonotonicFn = Callable[[Decimal], Decimal]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a bisection search."""

    value: Decimal
    iterations: int
    residual: Decimal  # f(value) - target
    divergence: NumericDivergence | None = None

    @property
    def converged(self) -> bool:
        return self.divergence is None


def bisect(
    f: MonotonicFn,
    target: Decimal,
    low: Decimal,
    high: Decimal,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SearchResult:
    """Find x in [low, high] with |f(x) - target| < tolerance.

    f must be non-decreasing over the bracket. Returns early on the first
    midpoint within tolerance; otherwise the last midpoint is returned and
    the result carries a NumericDivergence record.
    """
    mid = low
    residual: Decimal | None = None

    for iteration in range(1, max_iterations + 1):
        mid = (low + high) / TWO
        value = f(mid)
        residual = value - target
        if abs(residual) < tolerance:
            return SearchResult(value=mid, iterations=iteration, residual=residual)
        if value > target:
            high = mid
        else:
            low = mid

    if residual is None:
        residual = f(mid) - target

    divergence = NumericDivergence(
        target=target,
        value=mid,
        residual=residual,
        iterations=max_iterations,
    )
    logger.warning("Bisection did not converge: %s", divergence)
    return SearchResult(
        value=mid,
        iterations=max_iterations,
        residual=residual,
        divergence=divergence,
    )


def solve_monotonic(
    f: MonotonicFn,
    target: Decimal,
    low: Decimal,
    high: Decimal,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Decimal:
    """Best-effort inverse of a non-decreasing f; never raises on divergence."""
    return bisect(f, target, low, high, tolerance, max_iterations).value


def expand_bracket(
    f: MonotonicFn,
    target: Decimal,
    low: Decimal,
    high: Decimal,
    max_doublings: int = DEFAULT_MAX_DOUBLINGS,
) -> tuple[Decimal, Decimal]:
    """Grow high until f(high) >= target.

    Each doubling moves the previous high into low, since f(old high) was
    still below target. A zero upper bound is left alone: the only target
    it can bracket is f(0).
    """
    for _ in range(max_doublings):
        if high <= 0 or f(high) >= target:
            return low, high
        low, high = high, high * TWO

    if f(high) < target:
        logger.warning(
            "Could not bracket target %s after %d doublings; searching up to %s",
            target,
            max_doublings,
            high,
        )
    return low, high
