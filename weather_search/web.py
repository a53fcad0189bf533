# ABOUTME: ASGI web entry point exposing the search orchestrator as a small JSON API.
# ABOUTME: Creates a Starlette app holding one orchestrator per process (single user session).

import contextlib
import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_search.config import Settings
from weather_search.deps import SearchDeps, create_http_client
from weather_search.orchestrator import SearchOrchestrator
from weather_search.render import render_view

logger = logging.getLogger(__name__)


async def _json_field(request: Request, name: str, kind: type):
    """Read one typed field from a JSON request body, or return None if it is missing or wrong."""
    try:
        data = await request.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    value = data.get(name)
    if not isinstance(value, kind) or isinstance(value, bool):
        return None
    return value


def _view(orchestrator: SearchOrchestrator) -> JSONResponse:
    return JSONResponse(render_view(orchestrator.state))


async def get_view(request: Request) -> JSONResponse:
    return _view(request.app.state.orchestrator)


async def get_state(request: Request) -> JSONResponse:
    return JSONResponse(request.app.state.orchestrator.state.model_dump(mode="json"))


async def post_query(request: Request) -> JSONResponse:
    query = await _json_field(request, "query", str)
    if query is None:
        return JSONResponse({"detail": "Body must be a JSON object with a string 'query'"}, status_code=400)
    orchestrator = request.app.state.orchestrator
    orchestrator.set_query(query)
    return _view(orchestrator)


async def post_search(request: Request) -> JSONResponse:
    """Run a debounced search immediately, as when the user presses enter."""
    orchestrator = request.app.state.orchestrator
    orchestrator.search_now()
    return _view(orchestrator)


async def post_select(request: Request) -> JSONResponse:
    location_id = await _json_field(request, "id", int)
    if location_id is None:
        return JSONResponse({"detail": "Body must be a JSON object with an integer 'id'"}, status_code=400)
    orchestrator = request.app.state.orchestrator
    if orchestrator.select_by_id(location_id) is None:
        return JSONResponse({"detail": f"No search result with id {location_id}"}, status_code=404)
    return _view(orchestrator)


def create_app(orchestrator: SearchOrchestrator | None = None, settings: Settings | None = None) -> Starlette:
    """Build the app. Without an orchestrator, one is created (with its HTTP client) for the app's lifespan."""

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        if orchestrator is not None:
            yield
            return
        app_settings = settings or Settings.from_env()
        logging.basicConfig(level=app_settings.log_level.upper())
        async with create_http_client(app_settings) as client:
            async with SearchOrchestrator(SearchDeps(http_client=client, settings=app_settings)) as owned:
                app.state.orchestrator = owned
                logger.info("Weather search ready (debounce %.2fs)", app_settings.debounce_seconds)
                yield

    app = Starlette(
        routes=[
            Route("/api/view", get_view, methods=["GET"]),
            Route("/api/state", get_state, methods=["GET"]),
            Route("/api/query", post_query, methods=["POST"]),
            Route("/api/search", post_search, methods=["POST"]),
            Route("/api/select", post_select, methods=["POST"]),
        ],
        lifespan=lifespan,
    )
    if orchestrator is not None:
        app.state.orchestrator = orchestrator
    return app


app = create_app()
