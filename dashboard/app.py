"""Event-driven redraw loop for the weather dashboard."""

from __future__ import annotations

from typing import Callable, ContextManager, Optional

from typing_extensions import Protocol

from common.config import Config
from common.logging_setup import get_logger
from dashboard.keys import InputEvent, KeyEvent, KeyKind
from dashboard.navigation import NavigationState
from dashboard.terminal import TerminalSession
from dashboard.ui import render_ui
from weather.results import PollResult
from weather.snapshot import WeatherSnapshot
from weather.source import WeatherSource

logger = get_logger(__name__)

QUIT_KEY = "q"


class Terminal(Protocol):
    def draw(self, renderable) -> None: ...

    def read_event(self) -> InputEvent: ...


class PollingSource(Protocol):
    def poll(self) -> PollResult: ...


class BackgroundSource(PollingSource, Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


def _handle_key(key: str, navigation: NavigationState) -> bool:
    """Apply a key press. Returns False when the dashboard should quit."""
    if key == QUIT_KEY:
        return False
    if key == "right":
        navigation.advance()
    elif key == "left":
        navigation.retreat()
    return True


def handle_event(event: InputEvent, navigation: NavigationState) -> bool:
    """Dispatch one input event. Only key presses are acted on."""
    if not isinstance(event, KeyEvent) or event.kind is not KeyKind.PRESS:
        return True
    return _handle_key(event.key, navigation)


def run_app(
    terminal: Terminal,
    navigation: NavigationState,
    snapshot: WeatherSnapshot,
    source: PollingSource,
) -> None:
    """
    Redraw, then wait for input, until the quit key is pressed.

    The weather source is sampled once per frame, before the frame is
    composed. There is no timed redraw: new weather shows up on the next
    keypress.
    """
    while True:
        snapshot.refresh(source.poll())
        terminal.draw(render_ui(navigation, snapshot))

        event = terminal.read_event()
        if not handle_event(event, navigation):
            logger.debug("Quit requested")
            return


def _default_session(config: Config) -> TerminalSession:
    return TerminalSession(mouse_capture=config.mouse_capture)


def run_dashboard(
    config: Config,
    session_factory: Optional[Callable[[Config], ContextManager[Terminal]]] = None,
    source_factory: Optional[Callable[[Config], BackgroundSource]] = None,
) -> None:
    """Run the dashboard until quit, restoring the terminal on every exit path."""
    if session_factory is None:
        session_factory = _default_session
    if source_factory is None:
        source_factory = WeatherSource.from_config

    source = source_factory(config)
    navigation = NavigationState()
    snapshot = WeatherSnapshot()

    source.start()
    try:
        with session_factory(config) as terminal:
            run_app(terminal, navigation, snapshot, source)
    finally:
        source.stop()
