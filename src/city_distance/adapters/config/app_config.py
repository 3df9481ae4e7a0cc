"""12-factor configuration adapter using environment variables and a .env file."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from city_distance.adapters.google_api.constants import GOOGLE_GEOCODING_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding API configuration
    google_api_key: str | None = Field(
        default=None,
        description="Google API key; requests are sent unauthenticated when unset",
    )
    geocoding_url: str = Field(
        default=GOOGLE_GEOCODING_URL,
        description="Geocoding endpoint returning the Google JSON envelope",
    )
    lookup_timeout_seconds: float = Field(
        default=10.0,
        ge=0,
        allow_inf_nan=False,
        description="Deadline for both concurrent lookups in seconds (0 disables the deadline)",
    )

    # Output configuration
    default_unit: str = Field(default="km", description="Distance unit: 'km' or 'miles'")
    log_level: str = Field(default="WARNING", description="Log level for messages on stderr")

    @field_validator("google_api_key")
    @classmethod
    def normalize_api_key(cls, v: str | None) -> str | None:
        """Treat an empty or blank key as no key."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("default_unit")
    @classmethod
    def validate_default_unit(cls, v: str) -> str:
        """Validate default unit is either 'km' or 'miles'."""
        if v not in ("km", "miles"):
            raise ValueError("default_unit must be either 'km' or 'miles'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level names a standard logging level."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @property
    def timeout(self) -> float | None:
        """Lookup deadline in seconds, or None when disabled."""
        return self.lookup_timeout_seconds or None
