"""Salary calculation rules and their inverses."""

from salary_engine.calculators.engine import ComparisonRow, SalaryEngine
from salary_engine.calculators.errors import (
    InvalidInputError,
    NumericDivergence,
    SalaryEngineError,
    UnsupportedCombinationError,
)
from salary_engine.calculators.inversion import (
    InversionResult,
    gross_for_net,
    gross_for_total_cost,
    invert,
    search_gross_for_net,
)
from salary_engine.calculators.registry import (
    RULE_TABLE,
    calculate,
    jurisdiction_info,
    list_jurisdictions,
    list_profiles,
)
from salary_engine.calculators.solver import SearchResult, bisect, expand_bracket, solve_monotonic
from salary_engine.calculators.tax_calculator import calculate_progressive_tax
from salary_engine.calculators.types import (
    CompensationInput,
    EmploymentProfile,
    Jurisdiction,
    JurisdictionInfo,
    TargetMode,
    TaxBracket,
    TaxBreakdown,
)

__all__ = [
    "ComparisonRow",
    "CompensationInput",
    "EmploymentProfile",
    "InvalidInputError",
    "InversionResult",
    "Jurisdiction",
    "JurisdictionInfo",
    "NumericDivergence",
    "RULE_TABLE",
    "SalaryEngine",
    "SalaryEngineError",
    "SearchResult",
    "TargetMode",
    "TaxBracket",
    "TaxBreakdown",
    "UnsupportedCombinationError",
    "bisect",
    "calculate",
    "calculate_progressive_tax",
    "expand_bracket",
    "gross_for_net",
    "gross_for_total_cost",
    "invert",
    "jurisdiction_info",
    "list_jurisdictions",
    "list_profiles",
    "search_gross_for_net",
    "solve_monotonic",
]
