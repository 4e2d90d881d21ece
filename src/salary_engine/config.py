"""Configuration management for salary engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    solver_tolerance: Decimal
    solver_max_iterations: int

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.solver_tolerance <= 0:
            raise ValueError("solver_tolerance must be positive")
        if self.solver_max_iterations < 1:
            raise ValueError("solver_max_iterations must be at least 1")

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "0.1.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            solver_tolerance=Decimal(os.getenv("SOLVER_TOLERANCE", "0.01")),
            solver_max_iterations=int(os.getenv("SOLVER_MAX_ITERATIONS", "50")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for entry points."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
