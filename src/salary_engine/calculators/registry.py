"""Rule table and the forward-calculation entry point."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal
from itertools import product
from types import MappingProxyType
from typing import Any

from salary_engine.calculators import rates
from salary_engine.calculators.errors import UnsupportedCombinationError
from salary_engine.calculators.tax_calculator import (
    bulgaria_employee,
    estonia_employee,
    flat_rate,
    greece_employee,
)
from salary_engine.calculators.types import (
    CompensationInput,
    EmploymentProfile,
    Jurisdiction,
    JurisdictionInfo,
    TaxBreakdown,
    to_decimal,
)

TaxCalc = Callable[[CompensationInput], TaxBreakdown]
RuleKey = tuple[Jurisdiction, EmploymentProfile]

_EMPLOYEE_RULES: dict[Jurisdiction, TaxCalc] = {
    Jurisdiction.BULGARIA: bulgaria_employee,
    Jurisdiction.ESTONIA: estonia_employee,
    Jurisdiction.GREECE: greece_employee,
}


def _build_rule_table() -> Mapping[RuleKey, TaxCalc]:
    """Build the read-only rule table and check it covers every pair."""
    table: dict[RuleKey, TaxCalc] = {}
    for jurisdiction, calc in _EMPLOYEE_RULES.items():
        table[(jurisdiction, EmploymentProfile.EMPLOYEE)] = calc
    for (jurisdiction, profile), rate in rates.FLAT_RATES.items():
        table[(jurisdiction, profile)] = flat_rate(jurisdiction, profile, rate)

    missing = [key for key in product(Jurisdiction, EmploymentProfile) if key not in table]
    if missing:
        raise RuntimeError(f"Rule table is missing combinations: {missing}")

    return MappingProxyType(table)


RULE_TABLE: Mapping[RuleKey, TaxCalc] = _build_rule_table()


def list_jurisdictions() -> tuple[Jurisdiction, ...]:
    """Supported jurisdictions in display order."""
    return tuple(Jurisdiction)


def list_profiles() -> tuple[EmploymentProfile, ...]:
    """Supported employment profiles in display order."""
    return tuple(EmploymentProfile)


def parse_jurisdiction(value: Any, profile: Any = None) -> Jurisdiction:
    """Accept a Jurisdiction or its string value."""
    try:
        return Jurisdiction(value)
    except ValueError:
        raise UnsupportedCombinationError(value, profile) from None


def parse_profile(value: Any, jurisdiction: Any = None) -> EmploymentProfile:
    """Accept an EmploymentProfile or its string value."""
    try:
        return EmploymentProfile(value)
    except ValueError:
        raise UnsupportedCombinationError(jurisdiction, value) from None


def jurisdiction_info(jurisdiction: Jurisdiction | str) -> JurisdictionInfo:
    return rates.JURISDICTIONS[parse_jurisdiction(jurisdiction)]


def resolve_payments(jurisdiction: Jurisdiction, payments_per_year: int | None) -> int:
    """Fall back to the jurisdiction's payment convention when unset."""
    if payments_per_year is None:
        return rates.JURISDICTIONS[jurisdiction].default_payments_per_year
    return payments_per_year


def get_rule(
    jurisdiction: Jurisdiction | str, profile: EmploymentProfile | str
) -> TaxCalc:
    """Look up the forward function for a pair.

    Raises:
        UnsupportedCombinationError: If either value is unknown or the pair
            has no registered rule
    """
    j = parse_jurisdiction(jurisdiction, profile)
    p = parse_profile(profile, jurisdiction)
    try:
        return RULE_TABLE[(j, p)]
    except KeyError:
        raise UnsupportedCombinationError(j, p) from None


def calculate(
    jurisdiction: Jurisdiction | str,
    profile: EmploymentProfile | str,
    income: Decimal | float | int | str,
    expenses: Decimal | float | int | str = 0,
    payments_per_year: int | None = None,
) -> TaxBreakdown:
    """Run the forward calculation for one jurisdiction and profile.

    Args:
        jurisdiction: Country whose rules apply
        profile: Employment profile within that country
        income: Monthly gross compensation, non-negative
        expenses: Deductible expenses (flat-rate profiles only)
        payments_per_year: Salary payments per year; defaults to the
            jurisdiction's convention

    Returns:
        The full TaxBreakdown

    Raises:
        InvalidInputError: Negative income or expenses, payments < 1
        UnsupportedCombinationError: Unknown jurisdiction/profile pair
    """
    rule = get_rule(jurisdiction, profile)
    j = parse_jurisdiction(jurisdiction)

    comp = CompensationInput(
        monthly_gross=to_decimal(income, "income"),
        expenses=to_decimal(expenses, "expenses"),
        payments_per_year=resolve_payments(j, payments_per_year),
    )
    return rule(comp)
