# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles location search, current weather, and current marine conditions.

import logging
import numbers

import httpx
import pydantic

from weather_search.errors import MarineUnavailableError, TransportError, ValidationError
from weather_search.models import (
    LocationCandidate,
    MarineSnapshot,
    MarineUnits,
    WeatherSnapshot,
    WeatherUnits,
)

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
MARINE_URL = "https://marine-api.open-meteo.com/v1/marine"

CURRENT_WEATHER_PARAMS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m,wind_direction_10m"
CURRENT_MARINE_PARAMS = "wave_height,sea_surface_temperature"


async def search_locations(
    client: httpx.AsyncClient,
    query: str,
    count: int = 10,
    language: str = "en",
) -> list[LocationCandidate]:
    """Search Open-Meteo geocoding for places matching a free-text query.

    Results keep the API's order. A body without "results" means no match
    and yields an empty list.
    """
    try:
        resp = await client.get(
            GEOCODING_URL,
            params={"name": query, "count": count, "language": language, "format": "json"},
        )
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(f"Location search failed for '{query}': {e}") from e

    data = _json_body(resp, ValidationError)
    locations = parse_locations(data)
    logger.debug("Location search for %r returned %d results", query, len(locations))
    return locations


async def fetch_weather(client: httpx.AsyncClient, latitude: float, longitude: float) -> WeatherSnapshot:
    """Fetch current conditions for a coordinate pair from the forecast API."""
    try:
        resp = await client.get(
            FORECAST_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_WEATHER_PARAMS,
                "timezone": "auto",
            },
        )
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(f"Weather API failed: {e}") from e

    data = _json_body(resp, ValidationError)
    return parse_weather(data)


async def fetch_marine(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    forecast_days: int = 3,
) -> MarineSnapshot:
    """Fetch current wave height and sea surface temperature from the marine API.

    Raises MarineUnavailableError on a non-success status or when the body has
    no numeric wave height and sea temperature, which is what the API returns
    for places away from the sea. Network failures raise TransportError.
    """
    try:
        resp = await client.get(
            MARINE_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_MARINE_PARAMS,
                "forecast_days": forecast_days,
                "timezone": "auto",
            },
        )
    except httpx.HTTPError as e:
        raise TransportError(f"Marine API failed: {e}") from e

    if not resp.is_success:
        raise MarineUnavailableError(f"Marine data not available for this location ({resp.status_code})")

    data = _json_body(resp, MarineUnavailableError)
    return parse_marine(data)


def parse_locations(data: dict) -> list[LocationCandidate]:
    """Parse the geocoding "results" array into LocationCandidate objects."""
    if not isinstance(data, dict):
        raise ValidationError("Geocoding response is not a JSON object")
    results = data.get("results")
    if results is None:
        return []
    try:
        return [LocationCandidate.model_validate(r) for r in results]
    except (pydantic.ValidationError, TypeError) as e:
        raise ValidationError(f"Malformed geocoding result: {e}") from e


def parse_weather(data: dict) -> WeatherSnapshot:
    """Parse a forecast response's "current" block into a WeatherSnapshot.

    Every reading must be present and numeric; a partial snapshot is an error.
    """
    try:
        current = data["current"]
        units = data.get("current_units") or {}
        return WeatherSnapshot(
            time=current["time"],
            temperature=current["temperature_2m"],
            humidity=current["relative_humidity_2m"],
            weather_code=current["weather_code"],
            wind_speed=current["wind_speed_10m"],
            wind_direction=current["wind_direction_10m"],
            units=WeatherUnits(
                **_present(
                    temperature=units.get("temperature_2m"),
                    humidity=units.get("relative_humidity_2m"),
                    wind_speed=units.get("wind_speed_10m"),
                    wind_direction=units.get("wind_direction_10m"),
                )
            ),
            timezone=data["timezone"],
            elevation=data.get("elevation"),
        )
    except (KeyError, TypeError, AttributeError, pydantic.ValidationError) as e:
        raise ValidationError(f"Malformed weather response: {e}") from e


def parse_marine(data: dict) -> MarineSnapshot:
    """Parse a marine response's "current" block into a MarineSnapshot."""
    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        raise MarineUnavailableError("Marine data not available for this location")

    wave_height = current.get("wave_height")
    sea_temperature = current.get("sea_surface_temperature")
    if not (_is_number(wave_height) and _is_number(sea_temperature)):
        raise MarineUnavailableError("Marine data not available for this location")

    units = data.get("current_units") or {}
    try:
        return MarineSnapshot(
            time=current.get("time", ""),
            wave_height=float(wave_height),
            sea_surface_temperature=float(sea_temperature),
            units=MarineUnits(
                **_present(
                    wave_height=units.get("wave_height"),
                    sea_surface_temperature=units.get("sea_surface_temperature"),
                )
            ),
        )
    except (TypeError, AttributeError, pydantic.ValidationError) as e:
        raise MarineUnavailableError(f"Malformed marine response: {e}") from e


def _json_body(resp: httpx.Response, error: type[Exception]):
    """Decode a JSON body, raising the given error type if it isn't JSON."""
    try:
        return resp.json()
    except ValueError as e:
        raise error(f"Response body is not JSON: {e}") from e


def _present(**values) -> dict:
    """Drop None values so model defaults apply."""
    return {k: v for k, v in values.items() if v is not None}


def _is_number(value) -> bool:
    """True for ints and floats, excluding bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
