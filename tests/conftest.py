"""Pytest fixtures for salary engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from salary_engine.calculators import SalaryEngine
from salary_engine.config import Settings

TOLERANCE = Decimal("0.01")


@pytest.fixture
def settings() -> Settings:
    """Explicit settings, independent of the environment."""
    return Settings(
        engine_version="test",
        host="127.0.0.1",
        port=8000,
        debug=False,
        log_level="WARNING",
        solver_tolerance=TOLERANCE,
        solver_max_iterations=50,
    )


@pytest.fixture
def engine(settings: Settings) -> SalaryEngine:
    return SalaryEngine(settings)

