# ABOUTME: Runtime settings for the weather search app, read from the environment.
# ABOUTME: Uses pydantic-settings for WEATHER_SEARCH_* variables and an optional .env file.

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "WEATHER_SEARCH_"


class Settings(BaseSettings):
    """Tunables for search debouncing, request shaping, and logging."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debounce_seconds: float = Field(default=0.5, ge=0.0, le=10.0)
    min_query_length: int = Field(default=2, ge=1)
    result_count: int = Field(default=10, ge=1, le=100)
    language: str = "en"
    marine_forecast_days: int = Field(default=3, ge=1, le=16)
    http_timeout: float = Field(default=10.0, gt=0.0, le=120.0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from WEATHER_SEARCH_* variables and .env, falling back to defaults."""
        return cls()
