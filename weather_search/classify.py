# ABOUTME: Lookup and threshold tables turning raw weather/marine values into labels and icons.
# ABOUTME: Pure functions over WMO weather codes, wave heights (m) and sea temperatures (°C).

# WMO weather interpretation codes as used by Open-Meteo
WEATHER_CODES: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

UNKNOWN_WEATHER = "Unknown"

ICON_CLEAR = "\N{BLACK SUN WITH RAYS}\N{VARIATION SELECTOR-16}"
ICON_PARTLY_CLOUDY = "\N{SUN BEHIND CLOUD}"
ICON_FOG = "\N{FOG}\N{VARIATION SELECTOR-16}"
ICON_SHOWERS = "\N{WHITE SUN BEHIND CLOUD WITH RAIN}\N{VARIATION SELECTOR-16}"
ICON_RAIN = "\N{CLOUD WITH RAIN}\N{VARIATION SELECTOR-16}"
ICON_SNOW = "\N{CLOUD WITH SNOW}\N{VARIATION SELECTOR-16}"
ICON_THUNDER = "\N{THUNDER CLOUD AND RAIN}\N{VARIATION SELECTOR-16}"
ICON_FAIR = "\N{WHITE SUN WITH SMALL CLOUD}\N{VARIATION SELECTOR-16}"

# (low, high, icon), inclusive on both ends, checked in order
_WEATHER_ICON_RANGES: tuple[tuple[int, int, str], ...] = (
    (0, 0, ICON_CLEAR),
    (1, 3, ICON_PARTLY_CLOUDY),
    (45, 48, ICON_FOG),
    (51, 57, ICON_SHOWERS),
    (61, 67, ICON_RAIN),
    (71, 77, ICON_SNOW),
    (80, 82, ICON_SHOWERS),
    (85, 86, ICON_SNOW),
    (95, 99, ICON_THUNDER),
)

WAVE_CALM = "\N{WAVY DASH}\N{VARIATION SELECTOR-16}"
WAVE = "\N{WATER WAVE}"
WARNING = "\N{WARNING SIGN}\N{VARIATION SELECTOR-16}"

# (exclusive upper bound in metres, description, icon); the last band is unbounded
_WAVE_BANDS: tuple[tuple[float, str, str], ...] = (
    (0.5, "Calm", WAVE_CALM),
    (1.0, "Small waves", WAVE),
    (2.0, "Moderate waves", WAVE * 2),
    (3.0, "Large waves", WAVE * 3),
    (4.0, "Very large waves", WAVE + WARNING),
)
_WAVE_TOP = ("Extreme waves", WAVE + WARNING)

SEA_ICE = "\N{ICE CUBE}"
SEA_COLD = "\N{SNOWFLAKE}\N{VARIATION SELECTOR-16}"
SEA_MILD = "\N{THERMOMETER}\N{VARIATION SELECTOR-16}"
SEA_WARM = WAVE
SEA_HOT = "\N{FIRE}"

_SEA_TEMPERATURE_BANDS: tuple[tuple[float, str], ...] = (
    (5.0, SEA_ICE),
    (15.0, SEA_COLD),
    (20.0, SEA_MILD),
    (25.0, SEA_WARM),
)


def weather_description(code: int) -> str:
    """Return the WMO description for a weather code, or "Unknown" for unmapped codes."""
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)


def weather_icon(code: int) -> str:
    """Return an emoji for a weather code.

    Only codes with a description get a category icon; every other code,
    including gaps inside a range such as 52 or 97, gets the fair weather icon.
    """
    if code not in WEATHER_CODES:
        return ICON_FAIR
    for low, high, icon in _WEATHER_ICON_RANGES:
        if low <= code <= high:
            return icon
    return ICON_FAIR


def _wave_band(height: float) -> tuple[str, str]:
    for upper, description, icon in _WAVE_BANDS:
        if height < upper:
            return description, icon
    return _WAVE_TOP


def wave_height_description(height: float) -> str:
    """Describe a wave height in metres. Bands are lower-inclusive, upper-exclusive."""
    return _wave_band(height)[0]


def wave_icon(height: float) -> str:
    """Emoji for a wave height in metres; one more wave per band, capped with a warning."""
    return _wave_band(height)[1]


def sea_temperature_icon(temperature: float) -> str:
    """Emoji for a sea surface temperature in °C, from ice to fire."""
    for upper, icon in _SEA_TEMPERATURE_BANDS:
        if temperature < upper:
            return icon
    return SEA_HOT
