"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from salary_engine.calculators import (
    ComparisonRow,
    EmploymentProfile,
    InversionResult,
    Jurisdiction,
    JurisdictionInfo,
    TargetMode,
    TaxBreakdown,
)


# ============================================================================
# Reference data schemas
# ============================================================================


class JurisdictionResponse(BaseModel):
    """Schema for a supported jurisdiction."""

    jurisdiction: Jurisdiction
    default_payments_per_year: int
    variable_payments: bool
    profiles: list[EmploymentProfile]

    @classmethod
    def from_info(
        cls, info: JurisdictionInfo, profiles: list[EmploymentProfile]
    ) -> "JurisdictionResponse":
        return cls(
            jurisdiction=info.jurisdiction,
            default_payments_per_year=info.default_payments_per_year,
            variable_payments=info.variable_payments,
            profiles=profiles,
        )


class JurisdictionListResponse(BaseModel):
    """Schema for listing jurisdictions."""

    items: list[JurisdictionResponse]
    total: int


class ProfileListResponse(BaseModel):
    """Schema for listing employment profiles."""

    items: list[EmploymentProfile]
    total: int


# ============================================================================
# Calculation schemas
# ============================================================================


class CalculationRequest(BaseModel):
    """Schema for a forward calculation.

    Jurisdiction and profile stay plain strings here; the engine resolves
    them and reports unknown names as unsupported combinations.
    """

    model_config = ConfigDict(extra="forbid")

    jurisdiction: str
    profile: str = EmploymentProfile.EMPLOYEE.value
    gross: Decimal = Field(ge=0)
    expenses: Decimal = Field(default=Decimal("0"), ge=0)
    payments_per_year: int | None = Field(default=None, ge=1)


class BreakdownLine(BaseModel):
    """Schema for one named breakdown line."""

    name: str
    amount: Decimal


class CalculationResponse(BaseModel):
    """Schema for a forward calculation result."""

    jurisdiction: Jurisdiction
    profile: EmploymentProfile
    gross: Decimal
    payments_per_year: int
    total_tax: Decimal
    net: Decimal
    total_cost: Decimal
    breakdown: list[BreakdownLine]

    @classmethod
    def from_breakdown(cls, result: TaxBreakdown) -> "CalculationResponse":
        return cls(
            jurisdiction=result.jurisdiction,
            profile=result.profile,
            gross=result.gross,
            payments_per_year=result.payments_per_year,
            total_tax=result.total_tax,
            net=result.net,
            total_cost=result.total_cost,
            breakdown=[
                BreakdownLine(name=name, amount=amount)
                for name, amount in result.breakdown.items()
            ],
        )


# ============================================================================
# Inversion schemas
# ============================================================================


class InversionRequest(BaseModel):
    """Schema for resolving gross from a target."""

    model_config = ConfigDict(extra="forbid")

    jurisdiction: str
    profile: str = EmploymentProfile.EMPLOYEE.value
    mode: str
    value: Decimal = Field(ge=0)
    expenses: Decimal = Field(default=Decimal("0"), ge=0)
    payments_per_year: int | None = Field(default=None, ge=1)


class InversionResponse(BaseModel):
    """Schema for a resolved gross and its breakdown."""

    mode: TargetMode
    target: Decimal
    gross: Decimal
    iterations: int
    residual: Decimal
    within_tolerance: bool
    result: CalculationResponse

    @classmethod
    def from_result(cls, resolution: InversionResult) -> "InversionResponse":
        return cls(
            mode=resolution.mode,
            target=resolution.target,
            gross=resolution.gross,
            iterations=resolution.iterations,
            residual=resolution.residual,
            within_tolerance=resolution.within_tolerance,
            result=CalculationResponse.from_breakdown(resolution.result),
        )


# ============================================================================
# Comparison schemas
# ============================================================================


class ComparisonRequest(BaseModel):
    """Schema for comparing one target across jurisdictions."""

    model_config = ConfigDict(extra="forbid")

    mode: str = TargetMode.GROSS.value
    value: Decimal = Field(ge=0)
    profile: str = EmploymentProfile.EMPLOYEE.value
    expenses: Decimal = Field(default=Decimal("0"), ge=0)
    payments_per_year: int | None = Field(default=None, ge=1)
    jurisdictions: list[str] | None = None


class ComparisonRowResponse(BaseModel):
    """Schema for one comparison row."""

    jurisdiction: Jurisdiction
    payments_per_year: int
    gross: Decimal
    net: Decimal
    total_cost: Decimal
    within_tolerance: bool
    breakdown: list[BreakdownLine]

    @classmethod
    def from_row(cls, row: ComparisonRow) -> "ComparisonRowResponse":
        return cls(
            jurisdiction=row.jurisdiction,
            payments_per_year=row.payments_per_year,
            gross=row.gross,
            net=row.net,
            total_cost=row.total_cost,
            within_tolerance=row.resolution.within_tolerance,
            breakdown=[
                BreakdownLine(name=name, amount=amount)
                for name, amount in row.resolution.result.breakdown.items()
            ],
        )


class ComparisonResponse(BaseModel):
    """Schema for comparison results."""

    mode: TargetMode
    value: Decimal
    rows: list[ComparisonRowResponse]


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str
