"""Solve for gross salary given a target net salary or total cost.

Bulgaria's employee rules are linear in gross and invert algebraically.
Estonia's allowance phase-out and Greece's progressive schedules have no
closed form on the net side, so net targets are found by bisecting the
forward function. Employer add-ons are flat everywhere, so total cost
always inverts in one division.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from salary_engine.calculators import rates
from salary_engine.calculators.errors import InvalidInputError
from salary_engine.calculators.registry import (
    calculate,
    get_rule,
    parse_jurisdiction,
    parse_profile,
    resolve_payments,
)
from salary_engine.calculators.solver import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    SearchResult,
    bisect,
    expand_bracket,
)
from salary_engine.calculators.types import (
    CompensationInput,
    EmploymentProfile,
    Jurisdiction,
    TargetMode,
    TaxBreakdown,
    to_decimal,
)

BULGARIA_NET_RATIO = (1 - rates.BG_EMPLOYEE_SOCIAL_SECURITY) * (1 - rates.BG_INCOME_TAX)

CLOSED_FORM_NET = frozenset({Jurisdiction.BULGARIA})


@dataclass(frozen=True)
class InversionResult:
    """Resolved gross together with the forward breakdown at that gross."""

    mode: TargetMode
    target: Decimal
    gross: Decimal
    result: TaxBreakdown
    iterations: int  # 0 for closed-form solutions
    residual: Decimal  # achieved - target
    within_tolerance: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "target": str(self.target),
            "gross": str(self.gross),
            "iterations": self.iterations,
            "residual": str(self.residual),
            "within_tolerance": self.within_tolerance,
            "result": self.result.to_dict(),
        }


def _validate_target(value: Any, field_name: str) -> Decimal:
    target = to_decimal(value, field_name)
    if target < 0:
        raise InvalidInputError(field_name, value, "must be non-negative")
    return target


def search_gross_for_net(
    jurisdiction: Jurisdiction | str,
    target_net: Decimal | float | int | str,
    payments_per_year: int | None = None,
    profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
    expenses: Decimal | float | int | str = 0,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SearchResult:
    """Bisect the forward net function of any rule.

    Used directly for regimes without a closed form, and usable against
    any rule to cross-check a closed-form shortcut.

    Bracket growth runs before the bisection and has its own budget, so a
    single search evaluates the rule at most 1 + 32 + max_iterations times
    (83 with the defaults). The bisection halves a bracket about as wide as
    the target, so very large targets (around 1e15) cannot reach the
    tolerance within 50 halvings; the result then carries a divergence
    record and the caller gets the last midpoint.
    """
    j = parse_jurisdiction(jurisdiction, profile)
    rule = get_rule(j, profile)
    target = _validate_target(target_net, "target_net")
    spent = to_decimal(expenses, "expenses")
    payments = resolve_payments(j, payments_per_year)
    # Validates payments once; each probe below reuses it.
    CompensationInput(Decimal("0"), spent, payments)

    def net_at(gross: Decimal) -> Decimal:
        return rule(CompensationInput(gross, spent, payments)).net

    # Gross is never below net, so the root lies at or above target.
    low, high = expand_bracket(net_at, target, target, target * 2)
    return bisect(net_at, target, low, high, tolerance, max_iterations)


def gross_for_net(
    jurisdiction: Jurisdiction | str,
    target_net: Decimal | float | int | str,
    payments_per_year: int | None = None,
    profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
    expenses: Decimal | float | int | str = 0,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Decimal:
    """Gross salary that yields target_net take-home pay."""
    return _solve_net(
        jurisdiction,
        target_net,
        payments_per_year,
        profile,
        expenses,
        tolerance,
        max_iterations,
    )[0]


def gross_for_total_cost(
    jurisdiction: Jurisdiction | str,
    target_cost: Decimal | float | int | str,
    payments_per_year: int | None = None,
    profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
) -> Decimal:
    """Gross salary whose total employer cost equals target_cost.

    payments_per_year does not change the answer (employer add-ons are a
    flat share of each payment) but is validated like everywhere else.
    """
    j = parse_jurisdiction(jurisdiction, profile)
    p = parse_profile(profile, jurisdiction)
    get_rule(j, p)
    target = _validate_target(target_cost, "target_cost")
    CompensationInput(Decimal("0"), Decimal("0"), resolve_payments(j, payments_per_year))

    if p is not EmploymentProfile.EMPLOYEE:
        return target
    return target / (1 + rates.EMPLOYER_RATES[j])


def _solve_net(
    jurisdiction: Jurisdiction | str,
    target_net: Decimal | float | int | str,
    payments_per_year: int | None,
    profile: EmploymentProfile | str,
    expenses: Decimal | float | int | str,
    tolerance: Decimal,
    max_iterations: int,
) -> tuple[Decimal, int]:
    """Return (gross, iterations); iterations is 0 for closed forms."""
    j = parse_jurisdiction(jurisdiction, profile)
    p = parse_profile(profile, jurisdiction)
    get_rule(j, p)

    if p is not EmploymentProfile.EMPLOYEE:
        target = _validate_target(target_net, "target_net")
        spent = to_decimal(expenses, "expenses")
        CompensationInput(Decimal("0"), spent, resolve_payments(j, payments_per_year))
        return target / (1 - rates.FLAT_RATES[(j, p)]) + spent, 0

    if j in CLOSED_FORM_NET:
        target = _validate_target(target_net, "target_net")
        CompensationInput(Decimal("0"), Decimal("0"), resolve_payments(j, payments_per_year))
        return target / BULGARIA_NET_RATIO, 0

    search = search_gross_for_net(
        j, target_net, payments_per_year, p, expenses, tolerance, max_iterations
    )
    return search.value, search.iterations


def invert(
    jurisdiction: Jurisdiction | str,
    mode: TargetMode | str,
    value: Decimal | float | int | str,
    payments_per_year: int | None = None,
    profile: EmploymentProfile | str = EmploymentProfile.EMPLOYEE,
    expenses: Decimal | float | int | str = 0,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> InversionResult:
    """Resolve gross for the given target and re-run the forward rules.

    The returned breakdown always comes from the forward function at the
    resolved gross; residual and within_tolerance report how closely it
    reproduces the target.
    """
    try:
        target_mode = TargetMode(mode)
    except ValueError:
        raise InvalidInputError("mode", mode, "must be gross, net or total_cost") from None

    iterations = 0
    if target_mode is TargetMode.GROSS:
        target = _validate_target(value, "gross")
        gross = target
    elif target_mode is TargetMode.NET:
        target = _validate_target(value, "target_net")
        gross, iterations = _solve_net(
            jurisdiction,
            target,
            payments_per_year,
            profile,
            expenses,
            tolerance,
            max_iterations,
        )
    else:
        target = _validate_target(value, "target_cost")
        gross = gross_for_total_cost(jurisdiction, target, payments_per_year, profile)

    result = calculate(jurisdiction, profile, gross, expenses, payments_per_year)
    achieved = {
        TargetMode.GROSS: result.gross,
        TargetMode.NET: result.net,
        TargetMode.TOTAL_COST: result.total_cost,
    }[target_mode]
    residual = achieved - target

    return InversionResult(
        mode=target_mode,
        target=target,
        gross=gross,
        result=result,
        iterations=iterations,
        residual=residual,
        within_tolerance=abs(residual) < tolerance,
    )
