"""API test fixtures over an in-process ASGI transport."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from salary_engine.api.app import create_app
from salary_engine.api.dependencies import get_engine
from salary_engine.calculators import SalaryEngine
from salary_engine.config import Settings, get_settings


@pytest.fixture
def app(engine: SalaryEngine, settings: Settings):
    app = create_app()
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app without a network socket."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
