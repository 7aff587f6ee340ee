"""Weather polling and the displayed weather snapshot."""

from weather.results import UNAVAILABLE, Failure, PollResult, Success, Unavailable
from weather.snapshot import WeatherSnapshot
from weather.source import WeatherSource

__all__ = [
    "UNAVAILABLE",
    "Failure",
    "PollResult",
    "Success",
    "Unavailable",
    "WeatherSnapshot",
    "WeatherSource",
]
