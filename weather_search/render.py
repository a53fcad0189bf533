# ABOUTME: Turns a ViewState into a presentation model of search box, results, and weather/marine cards.
# ABOUTME: Pure formatting only; labels and icons come from the classification tables.

from weather_search.classify import (
    sea_temperature_icon,
    wave_height_description,
    wave_icon,
    weather_description,
    weather_icon,
)
from weather_search.models import LocationCandidate, MarineSnapshot, WeatherSnapshot
from weather_search.state import MarineStatus, SearchStatus, ViewState, WeatherStatus

INLAND_ICON = "\N{SNOW CAPPED MOUNTAIN}\N{VARIATION SELECTOR-16}"
INLAND_TITLE = "No Marine Data Available"
INLAND_MESSAGE = (
    "This location does not have sea or ocean access. "
    "Marine weather data is only available for coastal and oceanic locations."
)

SUGGESTED_CITIES = ("New York", "London", "Tokyo", "Paris", "Denver")
SUGGESTED_COASTAL_CITIES = ("Miami", "San Diego", "Barcelona", "Nice", "Honolulu")


def render_view(state: ViewState) -> dict:
    """Build the JSON-ready presentation model for one state."""
    return {
        "search": render_search(state),
        "error": state.error,
        "location": render_location(state.selected) if state.selected else None,
        "weather": render_weather(state) if state.selected else None,
        "marine": render_marine(state) if state.selected else None,
        "getting_started": render_getting_started() if not state.selected and not state.query else None,
    }


def render_search(state: ViewState) -> dict:
    results = [
        {
            "id": c.id,
            "label": c.display_name,
            "population": f"Population: {c.population:,}" if c.population else None,
        }
        for c in state.candidates
    ]
    empty_hint = None
    if state.search_status == SearchStatus.RESULTS and not results:
        empty_hint = f'No locations found for "{state.query}"'
    return {
        "query": state.query,
        "status": state.search_status.value,
        "loading": state.search_status == SearchStatus.SEARCHING,
        "results": results,
        "empty_hint": empty_hint,
    }


def render_location(location: LocationCandidate) -> dict:
    return {
        "title": location.display_name,
        "coordinates": f"{location.latitude:.4f}, {location.longitude:.4f}",
    }


def render_weather(state: ViewState) -> dict:
    if state.weather_status == WeatherStatus.LOADED and state.weather is not None:
        return {"status": "loaded", **render_weather_snapshot(state.weather)}
    if state.weather_status == WeatherStatus.FAILED:
        return {"status": "failed", "message": state.weather_error}
    return {"status": "loading"}


def render_weather_snapshot(weather: WeatherSnapshot) -> dict:
    units = weather.units
    return {
        "icon": weather_icon(weather.weather_code),
        "description": weather_description(weather.weather_code),
        "temperature": f"{round(weather.temperature)}{units.temperature}",
        "humidity": f"{weather.humidity:g}{units.humidity}",
        "wind_speed": f"{round(weather.wind_speed)} {units.wind_speed}",
        "wind_direction": f"{round(weather.wind_direction)}{units.wind_direction}",
        "timezone": weather.timezone,
        "elevation": f"{weather.elevation:g}m" if weather.elevation is not None else None,
        "updated": weather.time,
    }


def render_marine(state: ViewState) -> dict:
    title = state.selected.display_name if state.selected else ""
    if state.marine_status == MarineStatus.AVAILABLE and state.marine is not None:
        return {
            "status": "available",
            "subtitle": f"Current sea conditions for {title}",
            **render_marine_snapshot(state.marine),
        }
    if state.marine_status == MarineStatus.UNAVAILABLE:
        return {
            "status": "unavailable",
            "subtitle": f"Marine conditions for {title}",
            "icon": INLAND_ICON,
            "title": INLAND_TITLE,
            "message": INLAND_MESSAGE,
        }
    return {"status": "loading", "subtitle": f"Checking marine conditions for {title}"}


def render_marine_snapshot(marine: MarineSnapshot) -> dict:
    return {
        "wave_icon": wave_icon(marine.wave_height),
        "wave_height": f"{marine.wave_height:.1f}{marine.units.wave_height}",
        "wave_description": wave_height_description(marine.wave_height),
        "sea_temperature_icon": sea_temperature_icon(marine.sea_surface_temperature),
        "sea_temperature": f"{round(marine.sea_surface_temperature)}{marine.units.sea_surface_temperature}",
        "updated": marine.time,
    }


def render_getting_started() -> dict:
    return {
        "cities": list(SUGGESTED_CITIES),
        "coastal_cities": list(SUGGESTED_COASTAL_CITIES),
        "note": (
            "Marine weather data (wave height, sea temperature) is only available for "
            "coastal and oceanic locations. Inland cities will show weather data only."
        ),
    }
