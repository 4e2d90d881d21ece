"""Current-year rates and thresholds per jurisdiction.

Rates are stored as decimals (0.22 for 22%). Thresholds for annualized
rules are annual amounts.
"""

from __future__ import annotations

from decimal import Decimal

from salary_engine.calculators.types import (
    EmploymentProfile,
    Jurisdiction,
    JurisdictionInfo,
    TaxBracket,
)

# Bulgaria
BG_EMPLOYEE_SOCIAL_SECURITY = Decimal("0.1378")
BG_INCOME_TAX = Decimal("0.10")
BG_EMPLOYER_SOCIAL_SECURITY = Decimal("0.1918")

# Estonia
EE_PENSION = Decimal("0.02")  # II pillar
EE_EMPLOYEE_UNEMPLOYMENT = Decimal("0.016")
EE_INCOME_TAX = Decimal("0.22")
EE_EMPLOYER_SOCIAL_TAX = Decimal("0.33")
EE_EMPLOYER_UNEMPLOYMENT = Decimal("0.008")
EE_MONTHLY_ALLOWANCE = Decimal("654")
EE_ALLOWANCE_PHASE_OUT_START = Decimal("14400")
EE_ALLOWANCE_PHASE_OUT_END = Decimal("25200")
EE_MONTHS = 12  # allowance is always annualized over calendar months

# Greece
GR_EMPLOYEE_SOCIAL_SECURITY = Decimal("0.1412")
GR_EMPLOYER_SOCIAL_SECURITY = Decimal("0.2229")

GR_INCOME_TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("10000"), Decimal("0.09")),
    TaxBracket(Decimal("10000"), Decimal("20000"), Decimal("0.22")),
    TaxBracket(Decimal("20000"), Decimal("30000"), Decimal("0.28")),
    TaxBracket(Decimal("30000"), Decimal("40000"), Decimal("0.36")),
    TaxBracket(Decimal("40000"), None, Decimal("0.44")),
)

GR_SOLIDARITY_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("12000"), Decimal("20000"), Decimal("0.022")),
    TaxBracket(Decimal("20000"), Decimal("30000"), Decimal("0.05")),
    TaxBracket(Decimal("30000"), Decimal("40000"), Decimal("0.06")),
    TaxBracket(Decimal("40000"), None, Decimal("0.08")),
)

# Provisional flat rates for non-employee profiles.
FLAT_RATES: dict[tuple[Jurisdiction, EmploymentProfile], Decimal] = {
    (Jurisdiction.BULGARIA, EmploymentProfile.SELF_EMPLOYED): Decimal("0.15"),
    (Jurisdiction.BULGARIA, EmploymentProfile.SMALL_BUSINESS): Decimal("0.12"),
    (Jurisdiction.ESTONIA, EmploymentProfile.SELF_EMPLOYED): Decimal("0.25"),
    (Jurisdiction.ESTONIA, EmploymentProfile.SMALL_BUSINESS): Decimal("0.20"),
    (Jurisdiction.GREECE, EmploymentProfile.SELF_EMPLOYED): Decimal("0.26"),
    (Jurisdiction.GREECE, EmploymentProfile.SMALL_BUSINESS): Decimal("0.24"),
}

JURISDICTIONS: dict[Jurisdiction, JurisdictionInfo] = {
    Jurisdiction.BULGARIA: JurisdictionInfo(Jurisdiction.BULGARIA, 12),
    Jurisdiction.ESTONIA: JurisdictionInfo(Jurisdiction.ESTONIA, 12),
    Jurisdiction.GREECE: JurisdictionInfo(Jurisdiction.GREECE, 14, variable_payments=True),
}

# Employer add-ons are flat on gross for every employee regime.
EMPLOYER_RATES: dict[Jurisdiction, Decimal] = {
    Jurisdiction.BULGARIA: BG_EMPLOYER_SOCIAL_SECURITY,
    Jurisdiction.ESTONIA: EE_EMPLOYER_SOCIAL_TAX + EE_EMPLOYER_UNEMPLOYMENT,
    Jurisdiction.GREECE: GR_EMPLOYER_SOCIAL_SECURITY,
}


def format_rate(rate: Decimal) -> str:
    """Render a rate as a percentage label, e.g. 0.1378 -> '13.78%'."""
    percent = (rate * 100).normalize()
    return f"{percent:f}%"
