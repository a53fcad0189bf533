# ABOUTME: Drives the search-then-select flow: debounced geocoding, then parallel weather and marine fetches.
# ABOUTME: Every async result is dispatched as a tagged event through the pure reducer in state.py.

import asyncio
import logging
from collections.abc import Callable, Coroutine

from weather_search.debounce import DebounceTimer
from weather_search.deps import SearchDeps
from weather_search.errors import WeatherSearchError
from weather_search.models import LocationCandidate
from weather_search.state import (
    Event,
    LocationSelected,
    MarineResolved,
    MarineUnavailable,
    QueryChanged,
    SearchFailed,
    SearchResolved,
    SearchStarted,
    ViewState,
    WeatherFailed,
    WeatherResolved,
    is_stale,
    reduce,
)
from weather_search.weather_service import fetch_marine, fetch_weather, search_locations

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState], None]


class SearchOrchestrator:
    """Owns the view state for one user session.

    All methods must be called from the event loop that runs the fetches.
    Superseded requests are not aborted; their results are dropped when they
    arrive because their generation no longer matches the state.
    """

    def __init__(self, deps: SearchDeps):
        self.deps = deps
        self._state = ViewState()
        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task] = set()
        self._timer = DebounceTimer(deps.settings.debounce_seconds, self._fire_search)

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with every new state. Returns a function that unsubscribes."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, event: Event) -> ViewState:
        if is_stale(self._state, event):
            logger.debug("Discarding stale %s", type(event).__name__)
            return self._state
        new_state = reduce(self._state, event)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                try:
                    listener(new_state)
                except Exception:
                    logger.exception("View listener failed on %s", type(event).__name__)
        return self._state

    # -- search ---------------------------------------------------------------

    def set_query(self, query: str) -> None:
        """Record new query text and (re)start the debounce window if it is long enough."""
        searchable = len(query) >= self.deps.settings.min_query_length
        self.dispatch(QueryChanged(query=query, searchable=searchable))
        if searchable:
            self._timer.start()
        else:
            self._timer.cancel()

    def search_now(self) -> bool:
        """Skip the rest of the debounce window. Returns False if no search was pending."""
        return self._timer.fire_now()

    def _fire_search(self) -> None:
        generation = self._state.search_generation
        query = self._state.query
        self.dispatch(SearchStarted(generation=generation))
        self._spawn(self._run_search(generation, query))

    async def _run_search(self, generation: int, query: str) -> None:
        settings = self.deps.settings
        try:
            candidates = await search_locations(
                self.deps.http_client, query, count=settings.result_count, language=settings.language
            )
        except WeatherSearchError as e:
            logger.warning("Location search for %r failed: %s", query, e)
            self.dispatch(SearchFailed(generation=generation))
        except Exception:
            logger.exception("Unexpected error searching for %r", query)
            self.dispatch(SearchFailed(generation=generation))
        else:
            self.dispatch(SearchResolved(generation=generation, candidates=candidates))

    # -- selection ------------------------------------------------------------

    def select_location(self, location: LocationCandidate) -> int:
        """Select a location and start its weather and marine fetches. Returns the selection generation."""
        self._timer.cancel()
        generation = self.dispatch(LocationSelected(location=location)).selection_generation
        self._spawn(self._run_weather(generation, location))
        self._spawn(self._run_marine(generation, location))
        return generation

    def select_by_id(self, location_id: int) -> LocationCandidate | None:
        """Select one of the current candidates by geocoding id. Returns None if it isn't listed."""
        for candidate in self._state.candidates:
            if candidate.id == location_id:
                self.select_location(candidate)
                return candidate
        return None

    async def _run_weather(self, generation: int, location: LocationCandidate) -> None:
        try:
            snapshot = await fetch_weather(self.deps.http_client, location.latitude, location.longitude)
        except WeatherSearchError as e:
            logger.warning("Weather fetch for %s failed: %s", location.display_name, e)
            self.dispatch(WeatherFailed(generation=generation))
        except Exception:
            logger.exception("Unexpected error fetching weather for %s", location.display_name)
            self.dispatch(WeatherFailed(generation=generation))
        else:
            self.dispatch(WeatherResolved(generation=generation, snapshot=snapshot))

    async def _run_marine(self, generation: int, location: LocationCandidate) -> None:
        try:
            snapshot = await fetch_marine(
                self.deps.http_client,
                location.latitude,
                location.longitude,
                forecast_days=self.deps.settings.marine_forecast_days,
            )
        except WeatherSearchError as e:
            # expected for inland places
            logger.info("Marine data not available for %s: %s", location.display_name, e)
            self.dispatch(MarineUnavailable(generation=generation))
        except Exception:
            logger.exception("Unexpected error fetching marine data for %s", location.display_name)
            self.dispatch(MarineUnavailable(generation=generation))
        else:
            self.dispatch(MarineResolved(generation=generation, snapshot=snapshot))

    # -- lifecycle ------------------------------------------------------------

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until no fetch is in flight. A pending debounce timer is not waited for."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    async def aclose(self) -> None:
        """Cancel the debounce timer and any in-flight fetches."""
        self._timer.cancel()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def __aenter__(self) -> "SearchOrchestrator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
