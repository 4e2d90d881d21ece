"""Type definitions for the salary calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from salary_engine.calculators.errors import InvalidInputError


class Jurisdiction(str, Enum):
    """Supported countries, in display order."""

    BULGARIA = "Bulgaria"
    ESTONIA = "Estonia"
    GREECE = "Greece"


class EmploymentProfile(str, Enum):
    """Employment profiles scoping which rule set applies."""

    EMPLOYEE = "Employee"
    SELF_EMPLOYED = "Self-Employed"
    SMALL_BUSINESS = "Small Business"


class TargetMode(str, Enum):
    """Quantity a caller supplies when resolving a salary."""

    GROSS = "gross"
    NET = "net"
    TOTAL_COST = "total_cost"


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """Coerce a numeric input to Decimal via its string form."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidInputError(field_name, value, "must be a number")
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidInputError(field_name, value, "must be a number") from exc

    if not result.is_finite():
        raise InvalidInputError(field_name, value, "must be finite")
    return result


@dataclass(frozen=True)
class TaxBracket:
    """Tax bracket for progressive taxation."""

    min_amount: Decimal
    max_amount: Decimal | None  # None = no upper limit
    rate: Decimal  # As decimal, e.g., 0.22 for 22%


@dataclass(frozen=True)
class JurisdictionInfo:
    """Static facts about a jurisdiction's payroll conventions."""

    jurisdiction: Jurisdiction
    default_payments_per_year: int
    variable_payments: bool = False  # True when rules annualize by the payment count


@dataclass(frozen=True)
class CompensationInput:
    """Validated input to a forward calculation.

    payments_per_year must already be resolved to a concrete count; the
    registry fills in the jurisdiction default before building one.
    """

    monthly_gross: Decimal
    expenses: Decimal = Decimal("0")
    payments_per_year: int = 12

    def __post_init__(self) -> None:
        if self.monthly_gross < 0:
            raise InvalidInputError("income", self.monthly_gross, "must be non-negative")
        if self.expenses < 0:
            raise InvalidInputError("expenses", self.expenses, "must be non-negative")
        if isinstance(self.payments_per_year, bool) or not isinstance(
            self.payments_per_year, int
        ):
            raise InvalidInputError(
                "payments_per_year", self.payments_per_year, "must be an integer"
            )
        if self.payments_per_year < 1:
            raise InvalidInputError(
                "payments_per_year", self.payments_per_year, "must be at least 1"
            )


@dataclass(frozen=True)
class TaxBreakdown:
    """Result of a forward calculation.

    All money fields are monthly figures. breakdown keeps insertion order
    for display.
    """

    jurisdiction: Jurisdiction
    profile: EmploymentProfile
    gross: Decimal
    payments_per_year: int
    total_tax: Decimal
    net: Decimal
    total_cost: Decimal
    breakdown: dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "jurisdiction": self.jurisdiction.value,
            "profile": self.profile.value,
            "gross": str(self.gross),
            "payments_per_year": self.payments_per_year,
            "total_tax": str(self.total_tax),
            "net": str(self.net),
            "total_cost": str(self.total_cost),
            "breakdown": {name: str(value) for name, value in self.breakdown.items()},
        }
