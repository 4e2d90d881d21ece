"""FastAPI dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from salary_engine.calculators import SalaryEngine
from salary_engine.config import Settings, get_settings


@lru_cache(maxsize=1)
def _default_engine() -> SalaryEngine:
    return SalaryEngine(get_settings())


def get_engine() -> SalaryEngine:
    """Get the shared salary engine dependency."""
    return _default_engine()


# Type aliases for cleaner dependency injection
Engine = Annotated[SalaryEngine, Depends(get_engine)]
AppSettings = Annotated[Settings, Depends(get_settings)]
