# ABOUTME: Shared test fixtures for the weather search test suite.
# ABOUTME: Provides fast settings, a respx router for Open-Meteo, and orchestrators over real httpx clients.

import pytest
import pytest_asyncio
import respx

from fakes import TEST_DEBOUNCE_SECONDS
from weather_search.config import Settings
from weather_search.deps import SearchDeps, create_http_client
from weather_search.orchestrator import SearchOrchestrator


@pytest.fixture
def settings() -> Settings:
    return Settings(debounce_seconds=TEST_DEBOUNCE_SECONDS)


@pytest.fixture
def open_meteo():
    """Intercept outgoing httpx requests; tests register Open-Meteo routes on the router."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def make_orchestrator(settings, open_meteo):
    """Build SearchOrchestrators whose HTTP clients are closed after the test."""
    clients = []

    def _make() -> SearchOrchestrator:
        client = create_http_client(settings)
        clients.append(client)
        return SearchOrchestrator(SearchDeps(http_client=client, settings=settings))

    yield _make
    for client in clients:
        await client.aclose()
