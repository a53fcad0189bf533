# ABOUTME: Tests for environment-driven settings and HTTP client construction.
# ABOUTME: Uses monkeypatch to set WEATHER_SEARCH_* variables and a temporary .env file.

import pydantic
import pytest

from weather_search.config import Settings
from weather_search.deps import USER_AGENT, SearchDeps, create_http_client


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Without overrides the settings match the reference behaviour.

        Implementation: Clears every WEATHER_SEARCH_* variable and builds settings.
        Passing implies: 500 ms debounce, 2-char minimum, 10 English results, 3 marine days.
        """
        for name in Settings.model_fields:
            monkeypatch.delenv(f"WEATHER_SEARCH_{name.upper()}", raising=False)
        settings = Settings.from_env()
        assert settings.debounce_seconds == 0.5
        assert settings.min_query_length == 2
        assert settings.result_count == 10
        assert settings.language == "en"
        assert settings.marine_forecast_days == 3

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WEATHER_SEARCH_DEBOUNCE_SECONDS", "0.25")
        monkeypatch.setenv("WEATHER_SEARCH_HTTP_TIMEOUT", "3")
        monkeypatch.setenv("WEATHER_SEARCH_LANGUAGE", "de")
        settings = Settings.from_env()
        assert settings.debounce_seconds == 0.25
        assert settings.http_timeout == 3.0
        assert settings.language == "de"

    def test_invalid_value_fails_fast(self, monkeypatch):
        monkeypatch.setenv("WEATHER_SEARCH_RESULT_COUNT", "zero")
        with pytest.raises(pydantic.ValidationError):
            Settings.from_env()

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        """A .env file in the working directory supplies prefixed settings.

        Implementation: Writes a .env with one prefixed and one unrelated variable.
        Passing implies: Only WEATHER_SEARCH_* keys are used and others are ignored.
        """
        monkeypatch.delenv("WEATHER_SEARCH_MIN_QUERY_LENGTH", raising=False)
        (tmp_path / ".env").write_text("WEATHER_SEARCH_MIN_QUERY_LENGTH=3\nOTHER_APP_TOKEN=abc\n")
        monkeypatch.chdir(tmp_path)
        assert Settings.from_env().min_query_length == 3

    def test_keyword_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("WEATHER_SEARCH_DEBOUNCE_SECONDS", "2")
        assert Settings(debounce_seconds=0.1).debounce_seconds == 0.1


class TestHttpClient:
    @pytest.mark.asyncio
    async def test_client_has_bounded_timeout(self):
        """The shared client carries the configured timeout and a User-Agent.

        Implementation: Builds a client from settings and inspects it.
        Passing implies: No request can hang forever.
        """
        async with create_http_client(Settings(http_timeout=4.0)) as client:
            assert client.timeout.read == 4.0
            assert client.headers["User-Agent"] == USER_AGENT
            deps = SearchDeps(http_client=client)
            assert deps.settings == Settings()

    def test_deps_rejects_non_client(self):
        with pytest.raises(pydantic.ValidationError):
            SearchDeps(http_client=object())
