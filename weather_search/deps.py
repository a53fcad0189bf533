# ABOUTME: Dependency container for the search orchestrator using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and settings shared by all Open-Meteo calls.

import httpx
from pydantic import BaseModel, ConfigDict, Field

from weather_search.config import Settings

USER_AGENT = "weather-search/0.1"


class SearchDeps(BaseModel):
    """Dependencies injected into the orchestrator."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings = Field(default_factory=Settings)


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with a bounded per-request timeout.

    No retry transport: each lookup is a single request/response cycle and a
    timeout surfaces to callers like any other transport failure.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        headers={"User-Agent": USER_AGENT},
    )
