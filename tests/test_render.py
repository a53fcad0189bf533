# ABOUTME: Tests for the presentation model built from view state.
# ABOUTME: Checks labels, unit formatting, and which cards appear in each state.

from fakes import DENVER, MIAMI
from weather_search.classify import ICON_PARTLY_CLOUDY, SEA_WARM, WAVE
from weather_search.models import LocationCandidate, MarineSnapshot, WeatherSnapshot, WeatherUnits
from weather_search.render import INLAND_TITLE, SUGGESTED_COASTAL_CITIES, render_view
from weather_search.state import MarineStatus, SearchStatus, ViewState, WeatherStatus

DENVER_LOC = LocationCandidate.model_validate(DENVER)
MIAMI_LOC = LocationCandidate.model_validate(MIAMI)


def _weather(**overrides) -> WeatherSnapshot:
    values = dict(
        time="2025-06-01T12:00",
        temperature=21.6,
        humidity=31,
        weather_code=1,
        wind_speed=11.2,
        wind_direction=204.4,
        timezone="America/Denver",
        elevation=1609.0,
    )
    values.update(overrides)
    return WeatherSnapshot(**values)


class TestGettingStarted:
    def test_shown_only_before_any_input(self):
        """The getting-started block appears on a blank page only.

        Implementation: Renders an empty state, then one with a query.
        Passing implies: Suggestions disappear as soon as the user types.
        """
        view = render_view(ViewState())
        assert view["getting_started"]["coastal_cities"] == list(SUGGESTED_COASTAL_CITIES)
        assert view["location"] is None
        assert view["weather"] is None
        assert render_view(ViewState(query="D"))["getting_started"] is None


class TestSearchSection:
    def test_results_list_labels_and_population(self):
        state = ViewState(query="Den", search_status=SearchStatus.RESULTS, candidates=(DENVER_LOC,))
        search = render_view(state)["search"]
        assert search["results"] == [
            {"id": 5419384, "label": "Denver, Colorado, United States", "population": "Population: 682,545"}
        ]
        assert search["empty_hint"] is None

    def test_empty_results_show_hint(self):
        state = ViewState(query="Xyzzy", search_status=SearchStatus.RESULTS)
        assert render_view(state)["search"]["empty_hint"] == 'No locations found for "Xyzzy"'

    def test_searching_is_flagged_as_loading(self):
        state = ViewState(query="Den", search_status=SearchStatus.SEARCHING)
        assert render_view(state)["search"]["loading"] is True


class TestWeatherCard:
    def test_loaded_weather_formatting(self):
        """Readings are rounded and suffixed with the units from the response.

        Implementation: Renders a loaded Denver snapshot.
        Passing implies: The card shows the icon, description, and unit strings verbatim.
        """
        state = ViewState(selected=DENVER_LOC, weather_status=WeatherStatus.LOADED, weather=_weather())
        view = render_view(state)
        weather = view["weather"]
        assert view["location"]["title"] == "Denver, Colorado, United States"
        assert view["location"]["coordinates"].endswith(", -104.9847")
        assert weather["status"] == "loaded"
        assert weather["icon"] == ICON_PARTLY_CLOUDY
        assert weather["description"] == "Mainly clear"
        assert weather["temperature"] == "22°C"
        assert weather["humidity"] == "31%"
        assert weather["wind_speed"] == "11 km/h"
        assert weather["wind_direction"] == "204°"
        assert weather["elevation"] == "1609m"

    def test_fahrenheit_unit_passes_through(self):
        snapshot = _weather(temperature=71.2, units=WeatherUnits(temperature="°F"))
        state = ViewState(selected=DENVER_LOC, weather_status=WeatherStatus.LOADED, weather=snapshot)
        assert render_view(state)["weather"]["temperature"] == "71°F"

    def test_loading_and_failed(self):
        loading = ViewState(selected=DENVER_LOC, weather_status=WeatherStatus.LOADING)
        assert render_view(loading)["weather"] == {"status": "loading"}

        failed = ViewState(selected=DENVER_LOC, weather_status=WeatherStatus.FAILED, weather_error="nope", error="nope")
        view = render_view(failed)
        assert view["weather"] == {"status": "failed", "message": "nope"}
        assert view["error"] == "nope"


class TestMarineCard:
    def test_available_marine(self):
        """Marine card shows wave band and sea temperature icons.

        Implementation: Renders a 1.5 m / 24.3 °C snapshot for Miami.
        Passing implies: Classification tables drive the marine card.
        """
        marine = MarineSnapshot(time="2025-06-01T12:00", wave_height=1.5, sea_surface_temperature=24.3)
        state = ViewState(selected=MIAMI_LOC, marine_status=MarineStatus.AVAILABLE, marine=marine)
        card = render_view(state)["marine"]
        assert card["status"] == "available"
        assert card["wave_icon"] == WAVE * 2
        assert card["wave_height"] == "1.5m"
        assert card["wave_description"] == "Moderate waves"
        assert card["sea_temperature_icon"] == SEA_WARM
        assert card["sea_temperature"] == "24°C"
        assert card["subtitle"] == "Current sea conditions for Miami, Florida, United States"

    def test_unavailable_marine_shows_inland_message(self):
        state = ViewState(selected=DENVER_LOC, marine_status=MarineStatus.UNAVAILABLE)
        card = render_view(state)["marine"]
        assert card["status"] == "unavailable"
        assert card["title"] == INLAND_TITLE

    def test_loading_marine(self):
        state = ViewState(selected=DENVER_LOC, marine_status=MarineStatus.LOADING)
        card = render_view(state)["marine"]
        assert card == {"status": "loading", "subtitle": "Checking marine conditions for Denver, Colorado, United States"}
