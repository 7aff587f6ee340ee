"""Background poller for the OpenWeatherMap current-weather endpoint."""

from __future__ import annotations

import http.client
import json
import queue
import threading
import urllib.error
import urllib.request
from typing import Callable, List, Optional
from urllib.parse import urlencode

from typing_extensions import TypedDict

from common.config import Config
from common.logging_setup import get_logger
from weather.results import UNAVAILABLE, Failure, PollResult, Success

__all__ = ["WeatherSource", "build_request_url", "parse_current_weather", "API_URL"]

logger = get_logger(__name__)

API_URL = "https://api.openweathermap.org/data/2.5/weather"
REQUEST_TIMEOUT = 10.0


class WeatherCondition(TypedDict, total=False):
    """One entry of the ``weather`` array."""

    id: int
    main: str
    description: str


class Clouds(TypedDict, total=False):
    all: int


class CurrentWeather(TypedDict, total=False):
    """Subset of the current-weather payload the dashboard reads."""

    name: str
    weather: List[WeatherCondition]
    clouds: Clouds
    cod: int
    message: str


def build_request_url(location: str, units: str, language: str, api_key: str) -> str:
    """Return the current-weather URL for a location query."""
    query = urlencode({"q": location, "units": units, "lang": language, "appid": api_key})
    return f"{API_URL}?{query}"


def parse_current_weather(payload: CurrentWeather) -> Success:
    """
    Extract the displayed fields from a current-weather payload.

    Raises:
        KeyError, IndexError, TypeError, ValueError: If the payload is missing
            the name, primary condition or cloud coverage
    """
    return Success(
        name=str(payload["name"]),
        condition=str(payload["weather"][0]["main"]),
        cloud_percent=int(payload["clouds"]["all"]),
    )


def _http_error_description(exc: urllib.error.HTTPError) -> str:
    message = exc.reason
    try:
        body = json.loads(exc.read().decode("utf-8"))
        if isinstance(body, dict) and body.get("message"):
            message = body["message"]
    except Exception:
        pass
    return f"HTTP {exc.code} {message}"


class WeatherSource:
    """
    Polls the weather service on a background thread.

    The first fetch happens as soon as the thread starts, then once per
    poll interval. Results are queued; :meth:`poll` samples the newest one
    without blocking.
    """

    def __init__(
        self,
        location: str,
        units: str,
        language: str,
        api_key: Optional[str],
        poll_interval_minutes: int = 10,
        opener: Optional[Callable[..., object]] = None,
    ) -> None:
        """
        Initialize the weather source.

        Args:
            location: City query, e.g. ``"Berlin, DE"``
            units: ``standard``, ``metric`` or ``imperial``
            language: Language code for condition descriptions
            api_key: OpenWeatherMap access key
            poll_interval_minutes: Minutes between fetches
            opener: Replacement for ``urllib.request.urlopen``
        """
        self.location = location
        self.units = units
        self.language = language
        self.poll_interval_minutes = poll_interval_minutes
        self._api_key = api_key
        self._opener = opener or urllib.request.urlopen
        self._results: queue.Queue[PollResult] = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_config(cls, config: Config) -> "WeatherSource":
        return cls(
            location=config.location,
            units=config.units,
            language=config.language,
            api_key=config.api_key,
            poll_interval_minutes=config.poll_interval_minutes,
        )

    def start(self) -> None:
        """Start the polling thread."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="weather-poller",
        )
        self._thread.start()
        logger.debug(
            f"Weather poller started for {self.location!r} "
            f"(every {self.poll_interval_minutes} min)"
        )

    def stop(self) -> None:
        """Stop the polling thread."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None
        logger.debug("Weather poller stopped")

    def poll(self) -> PollResult:
        """Return the newest queued result, or ``UNAVAILABLE`` if none is ready."""
        latest: PollResult = UNAVAILABLE
        while True:
            try:
                latest = self._results.get_nowait()
            except queue.Empty:
                return latest

    def fetch_once(self) -> PollResult:
        """Fetch current conditions, converting every failure into a ``Failure``."""
        if not self._api_key:
            return Failure("no API key configured")

        url = build_request_url(self.location, self.units, self.language, self._api_key)
        try:
            with self._opener(url, timeout=REQUEST_TIMEOUT) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            return Failure(_http_error_description(exc))
        except urllib.error.URLError as exc:
            return Failure(str(exc.reason))
        except http.client.HTTPException as exc:
            return Failure(str(exc) or exc.__class__.__name__)
        except (OSError, ValueError) as exc:
            return Failure(str(exc) or exc.__class__.__name__)

        try:
            return parse_current_weather(payload)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            return Failure(f"malformed response ({exc.__class__.__name__}: {exc})")

    def _run(self) -> None:
        """Poller thread main loop."""
        interval_s = self.poll_interval_minutes * 60.0

        while not self._stop_event.is_set():
            try:
                result = self.fetch_once()
            except Exception as e:
                logger.error(f"Unexpected error fetching weather: {e!r}")
                result = Failure(str(e) or e.__class__.__name__)

            if isinstance(result, Failure):
                logger.warning(f"Weather fetch failed: {result.description}")
            else:
                logger.debug(f"Weather fetched: {result}")
            self._results.put(result)

            if self._stop_event.wait(timeout=interval_s):
                break
