"""Values sampled from the weather source once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = ["Unavailable", "Success", "Failure", "PollResult", "UNAVAILABLE"]


@dataclass(frozen=True)
class Unavailable:
    """No new result since the last poll."""


@dataclass(frozen=True)
class Success:
    """Current conditions for a location.

    Attributes:
        name: Location name as reported by the weather service.
        condition: Primary condition group (e.g. ``Clear``, ``Rain``).
        cloud_percent: Cloud coverage in percent.
    """

    name: str
    condition: str
    cloud_percent: int


@dataclass(frozen=True)
class Failure:
    """A fetch that did not produce weather data."""

    description: str


PollResult = Union[Unavailable, Success, Failure]

UNAVAILABLE = Unavailable()
