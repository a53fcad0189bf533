# ABOUTME: Exception hierarchy for the weather search client and orchestrator.
# ABOUTME: Separates transport failures, malformed payloads, and missing marine data.


class WeatherSearchError(Exception):
    """Base class for every failure raised by the Open-Meteo client."""


class TransportError(WeatherSearchError):
    """Non-success HTTP status, timeout, or network failure."""


class ValidationError(WeatherSearchError):
    """Response body did not have the shape we need."""


class MarineUnavailableError(WeatherSearchError):
    """No usable marine data for a location.

    Raised both for a non-success status from the marine endpoint and for a
    body without numeric wave height and sea surface temperature. Inland
    locations end up here routinely, so callers treat it as "no data" rather
    than as a failure to report.
    """
