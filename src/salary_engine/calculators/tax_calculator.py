"""Forward tax calculations per jurisdiction and employment profile.

Every function here is pure: it maps a validated CompensationInput to a
TaxBreakdown and nothing else. No rounding is applied, so net and total
cost stay non-decreasing in gross, which the inversion layer relies on.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from salary_engine.calculators import rates
from salary_engine.calculators.rates import format_rate
from salary_engine.calculators.types import (
    CompensationInput,
    EmploymentProfile,
    Jurisdiction,
    TaxBracket,
    TaxBreakdown,
)

ZERO = Decimal("0")


def calculate_progressive_tax(amount: Decimal, brackets: Iterable[TaxBracket]) -> Decimal:
    """Calculate tax using progressive brackets.

    Each band is taxed at its own rate only on the part of amount that
    falls inside it; bands below the first bracket's min are untaxed.
    """
    if amount <= 0:
        return ZERO

    total_tax = ZERO
    for bracket in sorted(brackets, key=lambda b: b.min_amount):
        if amount <= bracket.min_amount:
            break

        upper = amount if bracket.max_amount is None else min(amount, bracket.max_amount)
        taxable_in_bracket = upper - bracket.min_amount
        if taxable_in_bracket > 0:
            total_tax += taxable_in_bracket * bracket.rate

    return total_tax


def estonia_tax_free_allowance(annual_gross: Decimal) -> Decimal:
    """Annual basic exemption, phased out linearly between the thresholds."""
    full = rates.EE_MONTHLY_ALLOWANCE * rates.EE_MONTHS
    start = rates.EE_ALLOWANCE_PHASE_OUT_START
    end = rates.EE_ALLOWANCE_PHASE_OUT_END

    if annual_gross <= start:
        return full
    if annual_gross <= end:
        return full - full * ((annual_gross - start) / (end - start))
    return ZERO


def bulgaria_employee(comp: CompensationInput) -> TaxBreakdown:
    """Flat social security and 10% income tax on the remainder."""
    gross = comp.monthly_gross
    ss_employee = gross * rates.BG_EMPLOYEE_SOCIAL_SECURITY
    taxable = gross - ss_employee
    income_tax = taxable * rates.BG_INCOME_TAX
    net = gross - ss_employee - income_tax
    ss_employer = gross * rates.BG_EMPLOYER_SOCIAL_SECURITY
    total_cost = gross + ss_employer

    return TaxBreakdown(
        jurisdiction=Jurisdiction.BULGARIA,
        profile=EmploymentProfile.EMPLOYEE,
        gross=gross,
        payments_per_year=comp.payments_per_year,
        total_tax=ss_employee + income_tax,
        net=net,
        total_cost=total_cost,
        breakdown={
            "Gross": gross,
            f"Employee Social Security ({format_rate(rates.BG_EMPLOYEE_SOCIAL_SECURITY)})": ss_employee,
            f"Employer Social Security ({format_rate(rates.BG_EMPLOYER_SOCIAL_SECURITY)})": ss_employer,
            "Taxable Income": taxable,
            f"Income Tax ({format_rate(rates.BG_INCOME_TAX)})": income_tax,
            "Net Salary": net,
            "Total Cost": total_cost,
        },
    )


def estonia_employee(comp: CompensationInput) -> TaxBreakdown:
    """Pension and unemployment deductions plus a phased-out allowance."""
    gross = comp.monthly_gross
    pension = gross * rates.EE_PENSION
    unemployment = gross * rates.EE_EMPLOYEE_UNEMPLOYMENT

    annual_gross = gross * rates.EE_MONTHS
    tax_free = estonia_tax_free_allowance(annual_gross) / rates.EE_MONTHS

    taxable = gross - pension - unemployment - tax_free
    income_tax = max(ZERO, taxable * rates.EE_INCOME_TAX)
    net = gross - pension - unemployment - income_tax

    social_tax = gross * rates.EE_EMPLOYER_SOCIAL_TAX
    employer_unemployment = gross * rates.EE_EMPLOYER_UNEMPLOYMENT
    total_cost = gross + social_tax + employer_unemployment

    return TaxBreakdown(
        jurisdiction=Jurisdiction.ESTONIA,
        profile=EmploymentProfile.EMPLOYEE,
        gross=gross,
        payments_per_year=comp.payments_per_year,
        total_tax=income_tax + pension + unemployment,
        net=net,
        total_cost=total_cost,
        breakdown={
            "Gross": gross,
            "Pension (II pillar)": pension,
            "Unemployment (Employee)": unemployment,
            "Tax-free Allowance": tax_free,
            "Taxable Income": taxable,
            f"Income Tax ({format_rate(rates.EE_INCOME_TAX)})": income_tax,
            "Net Salary": net,
            "Social Tax (Employer)": social_tax,
            "Unemployment (Employer)": employer_unemployment,
            "Total Cost": total_cost,
        },
    )


def greece_employee(comp: CompensationInput) -> TaxBreakdown:
    """Annualized progressive income tax plus the solidarity levy.

    Gross is annualized by payments_per_year (14 by convention), taxed on
    the annual schedules and converted back to a per-payment figure.
    """
    gross = comp.monthly_gross
    payments = Decimal(comp.payments_per_year)

    annual_gross = gross * payments
    monthly_ss = gross * rates.GR_EMPLOYEE_SOCIAL_SECURITY
    annual_ss = monthly_ss * payments
    annual_taxable = annual_gross - annual_ss

    annual_income_tax = calculate_progressive_tax(annual_taxable, rates.GR_INCOME_TAX_BRACKETS)
    solidarity = calculate_progressive_tax(annual_taxable, rates.GR_SOLIDARITY_BRACKETS)

    net_annual = annual_gross - annual_ss - annual_income_tax - solidarity
    net_monthly = net_annual / payments

    monthly_employer_ss = gross * rates.GR_EMPLOYER_SOCIAL_SECURITY
    annual_employer_ss = monthly_employer_ss * payments
    total_cost_annual = annual_gross + annual_employer_ss
    total_cost_monthly = total_cost_annual / payments

    total_tax_annual = annual_ss + annual_income_tax + solidarity

    return TaxBreakdown(
        jurisdiction=Jurisdiction.GREECE,
        profile=EmploymentProfile.EMPLOYEE,
        gross=gross,
        payments_per_year=comp.payments_per_year,
        total_tax=total_tax_annual / payments,
        net=net_monthly,
        total_cost=total_cost_monthly,
        breakdown={
            "Gross (monthly)": gross,
            "Gross (annual)": annual_gross,
            "Employee Social Security (monthly)": monthly_ss,
            "Employee Social Security (annual)": annual_ss,
            "Employer Social Security (monthly)": monthly_employer_ss,
            "Employer Social Security (annual)": annual_employer_ss,
            "Taxable Income (annual)": annual_taxable,
            "Income Tax (annual)": annual_income_tax,
            "Solidarity Contribution (annual)": solidarity,
            "Total Tax (annual)": total_tax_annual,
            "Net Salary (annual)": net_annual,
            "Net Salary (monthly)": net_monthly,
            "Total Cost (annual)": total_cost_annual,
            "Total Cost (monthly)": total_cost_monthly,
        },
    )


def flat_rate(
    jurisdiction: Jurisdiction, profile: EmploymentProfile, rate: Decimal
):
    """Build a flat-rate rule on income net of expenses.

    The paying entity's cost is the income itself; there are no employer
    add-ons for these profiles.
    """

    def calculate(comp: CompensationInput) -> TaxBreakdown:
        income = comp.monthly_gross
        taxable = income - comp.expenses
        tax = taxable * rate
        net = taxable * (1 - rate)
        return TaxBreakdown(
            jurisdiction=jurisdiction,
            profile=profile,
            gross=income,
            payments_per_year=comp.payments_per_year,
            total_tax=tax,
            net=net,
            total_cost=income,
            breakdown={
                "Income": income,
                "Expenses": comp.expenses,
                "Taxable Income": taxable,
                f"Flat Tax ({format_rate(rate)})": tax,
                "Net": net,
                "Total Cost": income,
            },
        )

    calculate.__name__ = f"{jurisdiction.name.lower()}_{profile.name.lower()}"
    return calculate
