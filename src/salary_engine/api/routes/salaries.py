"""Salary calculation API endpoints."""

from fastapi import APIRouter, status

from salary_engine.api.dependencies import Engine
from salary_engine.api.schemas import (
    CalculationRequest,
    CalculationResponse,
    ComparisonRequest,
    ComparisonResponse,
    ComparisonRowResponse,
    ErrorResponse,
    InversionRequest,
    InversionResponse,
    JurisdictionListResponse,
    JurisdictionResponse,
    ProfileListResponse,
)
from salary_engine.calculators import (
    RULE_TABLE,
    TargetMode,
    jurisdiction_info,
    list_jurisdictions,
    list_profiles,
)

router = APIRouter(tags=["salaries"])


# ============================================================================
# Reference data
# ============================================================================


@router.get("/jurisdictions", response_model=JurisdictionListResponse)
async def get_jurisdictions() -> JurisdictionListResponse:
    """List supported jurisdictions with their payment conventions."""
    items = [
        JurisdictionResponse.from_info(
            jurisdiction_info(jurisdiction),
            [p for p in list_profiles() if (jurisdiction, p) in RULE_TABLE],
        )
        for jurisdiction in list_jurisdictions()
    ]
    return JurisdictionListResponse(items=items, total=len(items))


@router.get("/profiles", response_model=ProfileListResponse)
async def get_profiles() -> ProfileListResponse:
    """List supported employment profiles."""
    items = list(list_profiles())
    return ProfileListResponse(items=items, total=len(items))


# ============================================================================
# Calculations
# ============================================================================


@router.post(
    "/calculations",
    response_model=CalculationResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_calculation(
    engine: Engine,
    payload: CalculationRequest,
) -> CalculationResponse:
    """Compute net pay, total cost and breakdown for a gross salary."""
    result = engine.calculate(
        payload.jurisdiction,
        payload.profile,
        payload.gross,
        payload.expenses,
        payload.payments_per_year,
    )
    return CalculationResponse.from_breakdown(result)


@router.post(
    "/inversions",
    response_model=InversionResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_inversion(
    engine: Engine,
    payload: InversionRequest,
) -> InversionResponse:
    """Resolve gross salary from a net or total-cost target."""
    resolution = engine.resolve(
        payload.jurisdiction,
        payload.mode,
        payload.value,
        payments_per_year=payload.payments_per_year,
        profile=payload.profile,
        expenses=payload.expenses,
    )
    return InversionResponse.from_result(resolution)


@router.post(
    "/comparisons",
    response_model=ComparisonResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_comparison(
    engine: Engine,
    payload: ComparisonRequest,
) -> ComparisonResponse:
    """Resolve the same target in every selected jurisdiction."""
    rows = engine.compare(
        payload.mode,
        payload.value,
        payments_per_year=payload.payments_per_year,
        profile=payload.profile,
        expenses=payload.expenses,
        jurisdictions=payload.jurisdictions,
    )
    return ComparisonResponse(
        mode=TargetMode(payload.mode),
        value=payload.value,
        rows=[ComparisonRowResponse.from_row(row) for row in rows],
    )
