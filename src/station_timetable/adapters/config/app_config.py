"""12-factor configuration adapter using environment variables."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOCALES = ("fi", "sv", "en")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Digitraffic API configuration
    api_base_url: str = Field(
        default="https://rata.digitraffic.fi/api/v1",
        description="Base URL of the railway traffic API",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for API requests in seconds"
    )
    user_agent: str = Field(
        default="station-timetable",
        description="Value of the Digitraffic-User header sent with every request",
    )

    # Local persistence
    database_url: str = Field(
        default="sqlite:///station_timetable.db",
        description="SQLAlchemy URL of the station and cause category cache",
    )
    settings_file: str = Field(
        default="station_timetable_settings.json",
        description="Path to the JSON file holding the user's selections",
    )

    # Stations
    locale: str = Field(default="fi", description="Locale for station and cause names")
    allowed_station_codes: list[int] = Field(
        default=[769],
        description="Stations kept even though they have no passenger traffic",
    )
    station_country_code: str = Field(
        default="FI", description="Only stations in this country are listed"
    )

    # Live trains query
    arrived_trains: int = Field(default=5, description="Number of already arrived trains")
    arriving_trains: int = Field(default=20, description="Number of arriving trains")
    departed_trains: int = Field(default=5, description="Number of already departed trains")
    departing_trains: int = Field(default=20, description="Number of departing trains")

    # Display
    timetable_cutoff_minutes: int = Field(
        default=5,
        description="Trains that arrived or departed longer ago than this are hidden",
    )
    skip_home_screen: bool = Field(
        default=True,
        description="Open the most recently selected station's timetable on start",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate locale is one of 'fi', 'sv' or 'en'."""
        if v.lower() not in SUPPORTED_LOCALES:
            raise ValueError("locale must be either 'fi', 'sv', or 'en'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return v.upper()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores the .env file and uses an in-memory database."""
        values: dict[str, Any] = {"database_url": "sqlite://"}
        values.update(overrides)
        return cls(_env_file=None, **values)  # type: ignore[call-arg]
