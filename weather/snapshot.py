"""Displayed weather text, refreshed once per frame."""

from __future__ import annotations

from weather.results import Failure, PollResult, Success, Unavailable

SUCCESS_TEMPLATE = "Today's weather in {name} is {condition} and clouds are at {cloud_percent} percent"
FAILURE_TEMPLATE = "Could not fetch weather because: {description}"


class WeatherSnapshot:
    """
    Text buffer holding the latest weather summary or error message.

    The buffer is empty until the first result arrives. Stale text is kept
    when a poll yields nothing new.
    """

    def __init__(self) -> None:
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def refresh(self, result: PollResult) -> None:
        """
        Merge a poll result into the buffer.

        Args:
            result: Value returned by the weather source for this frame

        Raises:
            TypeError: If ``result`` is not a poll result
        """
        if isinstance(result, Unavailable):
            return
        if isinstance(result, Success):
            self._text = SUCCESS_TEMPLATE.format(
                name=result.name,
                condition=result.condition,
                cloud_percent=result.cloud_percent,
            )
        elif isinstance(result, Failure):
            self._text = FAILURE_TEMPLATE.format(description=result.description)
        else:
            raise TypeError(f"not a poll result: {result!r}")
