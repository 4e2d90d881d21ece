"""Property-based tests for forward and inverse invariants.

These tests use hypothesis to generate salaries, payment counts and
jurisdiction/profile pairs, and verify that bounds, monotonicity and
round-trips always hold.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import given, settings, strategies as st

from salary_engine.calculators import (
    EmploymentProfile,
    Jurisdiction,
    calculate,
    gross_for_net,
    gross_for_total_cost,
)

TOLERANCE = Decimal("0.01")

amounts = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("100000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
targets = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("25000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
payment_counts = st.integers(min_value=1, max_value=16)
jurisdictions = st.sampled_from(list(Jurisdiction))
profiles = st.sampled_from(list(EmploymentProfile))


class TestForwardBounds:
    """net <= gross <= total cost and total tax <= gross."""

    @given(jurisdiction=jurisdictions, profile=profiles, gross=amounts, payments=payment_counts)
    @settings(max_examples=300)
    def test_bounds(self, jurisdiction, profile, gross, payments):
        result = calculate(jurisdiction, profile, gross, payments_per_year=payments)

        assert result.net <= gross
        assert result.total_cost >= gross
        assert result.total_tax <= gross

    @given(jurisdiction=jurisdictions, gross=amounts, payments=payment_counts)
    @settings(max_examples=200)
    def test_net_is_gross_minus_employee_deductions(self, jurisdiction, gross, payments):
        result = calculate(jurisdiction, EmploymentProfile.EMPLOYEE, gross, payments_per_year=payments)
        assert abs(gross - result.total_tax - result.net) < Decimal("1e-18")

    @given(jurisdiction=jurisdictions, gross=amounts, payments=payment_counts)
    def test_deterministic(self, jurisdiction, gross, payments):
        first = calculate(jurisdiction, "Employee", gross, payments_per_year=payments)
        second = calculate(jurisdiction, "Employee", gross, payments_per_year=payments)
        assert first == second


class TestMonotonicity:
    """Net and total cost never decrease as gross rises."""

    @given(
        jurisdiction=jurisdictions,
        profile=profiles,
        grosses=st.lists(amounts, min_size=2, max_size=8),
        payments=payment_counts,
    )
    @settings(max_examples=200)
    def test_non_decreasing(self, jurisdiction, profile, grosses, payments):
        results = [
            calculate(jurisdiction, profile, g, payments_per_year=payments)
            for g in sorted(grosses)
        ]
        for lower, higher in zip(results, results[1:]):
            assert higher.net >= lower.net
            assert higher.total_cost >= lower.total_cost


class TestRoundTrips:
    """Inverting then re-running the forward rules reproduces the target."""

    @given(jurisdiction=jurisdictions, net=targets, payments=payment_counts)
    @settings(max_examples=150, deadline=None)
    def test_net_round_trip(self, jurisdiction, net, payments):
        gross = gross_for_net(jurisdiction, net, payments_per_year=payments)
        result = calculate(jurisdiction, "Employee", gross, payments_per_year=payments)
        assert abs(result.net - net) < TOLERANCE

    @given(jurisdiction=jurisdictions, cost=targets, payments=payment_counts)
    @settings(max_examples=150)
    def test_total_cost_round_trip(self, jurisdiction, cost, payments):
        gross = gross_for_total_cost(jurisdiction, cost, payments_per_year=payments)
        result = calculate(jurisdiction, "Employee", gross, payments_per_year=payments)
        assert abs(result.total_cost - cost) < TOLERANCE

    @given(
        jurisdiction=jurisdictions,
        profile=st.sampled_from(
            [EmploymentProfile.SELF_EMPLOYED, EmploymentProfile.SMALL_BUSINESS]
        ),
        net=targets,
        expenses=targets,
    )
    def test_flat_rate_round_trip(self, jurisdiction, profile, net, expenses):
        gross = gross_for_net(jurisdiction, net, profile=profile, expenses=expenses)
        result = calculate(jurisdiction, profile, gross, expenses=expenses)
        assert abs(result.net - net) < TOLERANCE
