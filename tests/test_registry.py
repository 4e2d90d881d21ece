"""Tests for the rule table and the calculate entry point."""

import pytest
from decimal import Decimal
from itertools import product

from salary_engine.calculators import (
    RULE_TABLE,
    EmploymentProfile,
    InvalidInputError,
    Jurisdiction,
    UnsupportedCombinationError,
    calculate,
    jurisdiction_info,
    list_jurisdictions,
    list_profiles,
)


class TestRuleTable:
    """The table covers every pair and is read-only."""

    def test_every_pair_registered(self):
        for key in product(Jurisdiction, EmploymentProfile):
            assert key in RULE_TABLE

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            RULE_TABLE[(Jurisdiction.BULGARIA, EmploymentProfile.EMPLOYEE)] = None

    def test_listing_order(self):
        assert list_jurisdictions() == (
            Jurisdiction.BULGARIA,
            Jurisdiction.ESTONIA,
            Jurisdiction.GREECE,
        )
        assert list_profiles() == (
            EmploymentProfile.EMPLOYEE,
            EmploymentProfile.SELF_EMPLOYED,
            EmploymentProfile.SMALL_BUSINESS,
        )

    def test_jurisdiction_info(self):
        assert jurisdiction_info("Greece").default_payments_per_year == 14
        assert jurisdiction_info(Jurisdiction.GREECE).variable_payments is True
        assert jurisdiction_info(Jurisdiction.BULGARIA).default_payments_per_year == 12
        assert jurisdiction_info(Jurisdiction.ESTONIA).variable_payments is False


class TestCalculate:
    """Input coercion, defaults and error paths."""

    def test_accepts_string_values(self):
        result = calculate("Bulgaria", "Employee", "1000")
        assert result.net == Decimal("775.98")
        assert result.jurisdiction is Jurisdiction.BULGARIA

    def test_accepts_int_and_float(self):
        assert calculate(Jurisdiction.BULGARIA, EmploymentProfile.EMPLOYEE, 1000).net == Decimal(
            "775.98"
        )
        assert calculate(Jurisdiction.BULGARIA, EmploymentProfile.EMPLOYEE, 1000.0).net == Decimal(
            "775.98"
        )

    def test_default_payments_per_jurisdiction(self):
        assert calculate("Greece", "Employee", 1000).payments_per_year == 14
        assert calculate("Estonia", "Employee", 1000).payments_per_year == 12
        assert calculate("Greece", "Self-Employed", 1000).payments_per_year == 14

    def test_explicit_payments(self):
        result = calculate("Greece", "Employee", 1000, payments_per_year=12)
        assert result.payments_per_year == 12

    def test_identical_input_identical_output(self):
        first = calculate("Greece", "Employee", "2345.67", payments_per_year=14)
        second = calculate("Greece", "Employee", "2345.67", payments_per_year=14)
        assert first == second

    def test_expenses_passed_to_flat_rate(self):
        result = calculate("Estonia", "Small Business", 3000, expenses=1000)
        assert result.total_tax == Decimal("400")
        assert result.net == Decimal("1600")
        assert result.total_cost == Decimal("3000")

    def test_negative_income_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            calculate("Bulgaria", "Employee", -1)
        assert exc_info.value.field == "income"

    def test_negative_expenses_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            calculate("Bulgaria", "Self-Employed", 100, expenses=-5)
        assert exc_info.value.field == "expenses"

    @pytest.mark.parametrize("payments", [0, -3])
    def test_non_positive_payments_rejected(self, payments):
        with pytest.raises(InvalidInputError) as exc_info:
            calculate("Greece", "Employee", 1000, payments_per_year=payments)
        assert exc_info.value.field == "payments_per_year"

    def test_non_numeric_income_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate("Bulgaria", "Employee", "abc")

    def test_nan_income_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate("Bulgaria", "Employee", float("nan"))

    def test_unknown_jurisdiction(self):
        with pytest.raises(UnsupportedCombinationError) as exc_info:
            calculate("France", "Employee", 1000)
        assert exc_info.value.jurisdiction == "France"

    def test_unknown_profile(self):
        with pytest.raises(UnsupportedCombinationError) as exc_info:
            calculate("Greece", "Freelancer", 1000)
        assert exc_info.value.profile == "Freelancer"

    def test_errors_are_standard_exception_types(self):
        with pytest.raises(ValueError):
            calculate("Bulgaria", "Employee", -1)
        with pytest.raises(LookupError):
            calculate("France", "Employee", 1)

    def test_to_dict_keeps_breakdown_order(self):
        data = calculate("Estonia", "Employee", 1200).to_dict()
        assert data["jurisdiction"] == "Estonia"
        assert list(data["breakdown"])[0] == "Gross"
        assert list(data["breakdown"])[-1] == "Total Cost"
        assert Decimal(data["net"]) == Decimal("1046.184")
