"""Configuration management for Weather Tabs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

VALID_UNITS = ("standard", "metric", "imperial")

ENV_LOCATION = "WEATHER_TABS_LOCATION"
ENV_UNITS = "WEATHER_TABS_UNITS"
ENV_LANGUAGE = "WEATHER_TABS_LANG"
ENV_API_KEY = "OPENWEATHER_API_KEY"
ENV_POLL_MINUTES = "WEATHER_TABS_POLL_MINUTES"
ENV_LOG_LEVEL = "WEATHER_TABS_LOG_LEVEL"
ENV_LOG_FILE = "WEATHER_TABS_LOG_FILE"


@dataclass
class Config:
    """Configuration settings for the weather dashboard."""

    # Weather query
    location: str = "Berlin, DE"
    units: str = "imperial"
    language: str = "en"
    api_key: Optional[str] = None
    poll_interval_minutes: int = 10

    # Terminal
    mouse_capture: bool = True

    # Logging (the dashboard owns stdout, so records only go to a file)
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a configuration from environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated configuration

        Raises:
            ValueError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ
        config = cls()
        config.location = env.get(ENV_LOCATION, config.location)
        config.units = env.get(ENV_UNITS, config.units)
        config.language = env.get(ENV_LANGUAGE, config.language)
        config.api_key = env.get(ENV_API_KEY) or None
        poll = env.get(ENV_POLL_MINUTES)
        if poll:
            try:
                config.poll_interval_minutes = int(poll)
            except ValueError:
                raise ValueError(f"{ENV_POLL_MINUTES} must be an integer, got {poll!r}") from None
        config.log_level = env.get(ENV_LOG_LEVEL, config.log_level)
        config.log_file = env.get(ENV_LOG_FILE) or None
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ValueError if any field is out of range."""
        if self.units not in VALID_UNITS:
            raise ValueError(
                f"units must be one of {', '.join(VALID_UNITS)}, got {self.units!r}"
            )
        if self.poll_interval_minutes <= 0:
            raise ValueError("poll interval must be a positive number of minutes")
        if not self.location.strip():
            raise ValueError("location must not be empty")

