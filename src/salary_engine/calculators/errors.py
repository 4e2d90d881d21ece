"""Errors raised by the salary calculators."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


class SalaryEngineError(Exception):
    """Base class for salary engine domain errors."""

    code = "SALARY_ENGINE_ERROR"


class InvalidInputError(SalaryEngineError, ValueError):
    """Raised when an amount or payment count is outside its domain."""

    code = "INVALID_INPUT"

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class UnsupportedCombinationError(SalaryEngineError, LookupError):
    """Raised when no rule is registered for a jurisdiction/profile pair."""

    code = "UNSUPPORTED_COMBINATION"

    def __init__(self, jurisdiction: Any, profile: Any):
        self.jurisdiction = jurisdiction
        self.profile = profile
        super().__init__(
            f"No tax rule registered for jurisdiction {jurisdiction!r} "
            f"and profile {profile!r}"
        )


@dataclass(frozen=True)
class NumericDivergence:
    """A bisection search that ran out of iterations.

    Recorded on the search result and logged, never raised: the best
    approximation is still usable at currency precision.
    """

    target: Decimal
    value: Decimal
    residual: Decimal
    iterations: int

    def __str__(self) -> str:
        return (
            f"Search for target {self.target} stopped after {self.iterations} "
            f"iterations at {self.value} (residual {self.residual})"
        )
