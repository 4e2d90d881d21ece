"""Salary engine - resolves a target quantity to a full breakdown."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from salary_engine.calculators import rates
from salary_engine.calculators.inversion import InversionResult, invert
from salary_engine.calculators.registry import (
    calculate,
    list_jurisdictions,
    parse_jurisdiction,
)
from salary_engine.calculators.types import (
    EmploymentProfile,
    Jurisdiction,
    TargetMode,
    TaxBreakdown,
)
from salary_engine.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonRow:
    """One jurisdiction's line in a side-by-side comparison."""

    jurisdiction: Jurisdiction
    payments_per_year: int
    resolution: InversionResult

    @property
    def gross(self) -> Decimal:
        return self.resolution.gross

    @property
    def net(self) -> Decimal:
        return self.resolution.result.net

    @property
    def total_cost(self) -> Decimal:
        return self.resolution.result.total_cost

    def to_dict(self) -> dict[str, Any]:
        return {
            "jurisdiction": self.jurisdiction.value,
            "payments_per_year": self.payments_per_year,
            **self.resolution.to_dict(),
        }


class SalaryEngine:
    """Main salary calculation entry point.

    Resolution pipeline (stable order):
    1) If the target is not gross, derive gross via the inversion layer
    2) Re-run the forward rules at the resolved gross
    3) Report residual against the target (idempotence check)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def calculate(
        self,
        jurisdiction: Jurisdiction | str,
        profile: EmploymentProfile | str,
        gross: Decimal | float | int | str,
        expenses: Decimal | float | int | str = 0,
        payments_per_year: int | None = None,
    ) -> TaxBreakdown:
        return calculate(jurisdiction, profile, gross, expenses, payments_per_year)

    def resolve(
        self,
        jurisdiction: Jurisdiction | str,
        mode: TargetMode | str,
        value: Decimal | float | int | str,
        payments_per_year: int | None = None,
        profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
        expenses: Decimal | float | int | str = 0,
    ) -> InversionResult:
        """Resolve gross for a target and return the full breakdown."""
        resolution = invert(
            jurisdiction,
            mode,
            value,
            payments_per_year=payments_per_year,
            profile=profile,
            expenses=expenses,
            tolerance=self.settings.solver_tolerance,
            max_iterations=self.settings.solver_max_iterations,
        )
        logger.debug(
            "Resolved %s %s=%s to gross %s in %d iterations (residual %s)",
            resolution.result.jurisdiction.value,
            resolution.mode.value,
            resolution.target,
            resolution.gross,
            resolution.iterations,
            resolution.residual,
        )
        if not resolution.within_tolerance:
            logger.warning(
                "Approximate gross for %s %s=%s: residual %s exceeds tolerance %s",
                resolution.result.jurisdiction.value,
                resolution.mode.value,
                resolution.target,
                resolution.residual,
                self.settings.solver_tolerance,
            )
        return resolution

    def compare(
        self,
        mode: TargetMode | str,
        value: Decimal | float | int | str,
        payments_per_year: int | None = None,
        profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
        expenses: Decimal | float | int | str = 0,
        jurisdictions: list[Jurisdiction | str] | None = None,
    ) -> list[ComparisonRow]:
        """Resolve the same target in several jurisdictions.

        payments_per_year only overrides jurisdictions whose rules annualize
        by a variable payment count; the others keep their convention.
        """
        selected = (
            [parse_jurisdiction(j, profile) for j in jurisdictions]
            if jurisdictions
            else list(list_jurisdictions())
        )

        rows: list[ComparisonRow] = []
        for jurisdiction in selected:
            info = rates.JURISDICTIONS[jurisdiction]
            payments = (
                payments_per_year
                if payments_per_year is not None and info.variable_payments
                else info.default_payments_per_year
            )
            resolution = self.resolve(
                jurisdiction,
                mode,
                value,
                payments_per_year=payments,
                profile=profile,
                expenses=expenses,
            )
            rows.append(
                ComparisonRow(
                    jurisdiction=jurisdiction,
                    payments_per_year=payments,
                    resolution=resolution,
                )
            )
        return rows
