# ABOUTME: Serializable view state and the pure reducer that advances it from tagged events.
# ABOUTME: Generation counters on events let stale search and selection results be dropped.

from enum import Enum

from pydantic import BaseModel, ConfigDict

from weather_search.models import LocationCandidate, MarineSnapshot, WeatherSnapshot

SEARCH_FAILED_MESSAGE = "Failed to search locations. Please try again."
WEATHER_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."


class SearchStatus(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    SEARCHING = "searching"
    RESULTS = "results"
    FAILED = "failed"


class WeatherStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class MarineStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ViewState(BaseModel):
    """Everything a renderer needs, as one immutable value."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    search_status: SearchStatus = SearchStatus.IDLE
    search_generation: int = 0
    candidates: tuple[LocationCandidate, ...] = ()

    selected: LocationCandidate | None = None
    selection_generation: int = 0
    weather_status: WeatherStatus = WeatherStatus.IDLE
    weather: WeatherSnapshot | None = None
    weather_error: str | None = None
    marine_status: MarineStatus = MarineStatus.IDLE
    marine: MarineSnapshot | None = None

    error: str | None = None


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class QueryChanged(Event):
    query: str
    searchable: bool


class SearchStarted(Event):
    generation: int


class SearchResolved(Event):
    generation: int
    candidates: tuple[LocationCandidate, ...]


class SearchFailed(Event):
    generation: int
    message: str = SEARCH_FAILED_MESSAGE


class LocationSelected(Event):
    location: LocationCandidate


class WeatherResolved(Event):
    generation: int
    snapshot: WeatherSnapshot


class WeatherFailed(Event):
    generation: int
    message: str = WEATHER_FAILED_MESSAGE


class MarineResolved(Event):
    generation: int
    snapshot: MarineSnapshot


class MarineUnavailable(Event):
    generation: int


_SEARCH_EVENTS = (SearchStarted, SearchResolved, SearchFailed)
_SELECTION_EVENTS = (WeatherResolved, WeatherFailed, MarineResolved, MarineUnavailable)


def is_stale(state: ViewState, event: Event) -> bool:
    """True when the event belongs to a search or selection that has since been superseded."""
    if isinstance(event, _SEARCH_EVENTS):
        return event.generation != state.search_generation
    if isinstance(event, _SELECTION_EVENTS):
        return event.generation != state.selection_generation
    return False


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the state that results from applying one event. Never mutates `state`."""
    if is_stale(state, event):
        return state

    if isinstance(event, QueryChanged):
        if not event.searchable:
            return state.model_copy(
                update={
                    "query": event.query,
                    "search_generation": state.search_generation + 1,
                    "search_status": SearchStatus.IDLE,
                    "candidates": (),
                }
            )
        return state.model_copy(
            update={
                "query": event.query,
                "search_generation": state.search_generation + 1,
                "search_status": SearchStatus.DEBOUNCING,
            }
        )

    if isinstance(event, SearchStarted):
        return state.model_copy(update={"search_status": SearchStatus.SEARCHING, "error": None})

    if isinstance(event, SearchResolved):
        return state.model_copy(update={"search_status": SearchStatus.RESULTS, "candidates": event.candidates})

    if isinstance(event, SearchFailed):
        return state.model_copy(
            update={"search_status": SearchStatus.FAILED, "candidates": (), "error": event.message}
        )

    if isinstance(event, LocationSelected):
        # a selection closes the result list, so pending searches are superseded too
        return state.model_copy(
            update={
                "search_generation": state.search_generation + 1,
                "search_status": SearchStatus.IDLE,
                "candidates": (),
                "selected": event.location,
                "selection_generation": state.selection_generation + 1,
                "weather_status": WeatherStatus.LOADING,
                "weather": None,
                "weather_error": None,
                "marine_status": MarineStatus.LOADING,
                "marine": None,
                "error": None,
            }
        )

    if isinstance(event, WeatherResolved):
        return state.model_copy(update={"weather_status": WeatherStatus.LOADED, "weather": event.snapshot})

    if isinstance(event, WeatherFailed):
        return state.model_copy(
            update={
                "weather_status": WeatherStatus.FAILED,
                "weather": None,
                "weather_error": event.message,
                "error": event.message,
            }
        )

    if isinstance(event, MarineResolved):
        return state.model_copy(update={"marine_status": MarineStatus.AVAILABLE, "marine": event.snapshot})

    if isinstance(event, MarineUnavailable):
        return state.model_copy(update={"marine_status": MarineStatus.UNAVAILABLE, "marine": None})

    raise TypeError(f"Unknown event type: {type(event).__name__}")
