"""Terminal session: alternate screen, raw input and frame drawing."""

from __future__ import annotations

import os
import select
import sys
from typing import Any, List, Optional, TextIO

from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from common.logging_setup import get_logger
from dashboard.keys import (
    ESC,
    InputEvent,
    decode_posix,
    decode_windows,
    escape_sequence_complete,
    utf8_sequence_length,
)

logger = get_logger(__name__)

MOUSE_CAPTURE_ON = "\x1b[?1000h"
MOUSE_CAPTURE_OFF = "\x1b[?1000l"
# How long to wait for the rest of an escape sequence after ESC
ESCAPE_TIMEOUT = 0.05


class TerminalSession:
    """
    Scoped ownership of the terminal.

    Entering switches stdin to raw input, opens the alternate screen and
    turns on mouse capture. Leaving undoes whatever was acquired, once,
    on every exit path.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        mouse_capture: bool = True,
    ) -> None:
        self.console = console or Console()
        self._stdin = stdin or sys.stdin
        self._mouse_capture = mouse_capture
        self._saved_tty: Optional[List[Any]] = None
        self._live: Optional[Live] = None
        self._mouse_enabled = False

    def __enter__(self) -> "TerminalSession":
        try:
            self._enable_raw_input()
            self._live = Live(
                Text(""),
                console=self.console,
                screen=True,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            self._live.start()
            self.console.show_cursor(False)
            if self._mouse_capture and self.console.is_terminal:
                self._write_control(MOUSE_CAPTURE_ON)
                self._mouse_enabled = True
        except BaseException:
            self._restore()
            raise
        logger.debug("Terminal session entered")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()
        logger.debug("Terminal session left")

    def draw(self, renderable: RenderableType) -> None:
        """Render one frame."""
        if self._live is None:
            raise RuntimeError("terminal session is not active")
        self._live.update(renderable, refresh=True)

    def read_event(self) -> InputEvent:
        """Block until the next key or mouse event."""
        if os.name == "nt":
            return self._read_event_windows()
        return self._read_event_posix()

    def _enable_raw_input(self) -> None:
        if os.name == "nt":
            return
        import termios
        import tty

        fd = self._stdin.fileno()
        self._saved_tty = termios.tcgetattr(fd)
        tty.setcbreak(fd)

    def _restore(self) -> None:
        try:
            if self._mouse_enabled:
                self._mouse_enabled = False
                self._write_control(MOUSE_CAPTURE_OFF)
            if self._live is not None:
                live, self._live = self._live, None
                live.stop()
        finally:
            # Input mode comes back even if the screen could not be restored
            if self._saved_tty is not None:
                import termios

                saved, self._saved_tty = self._saved_tty, None
                termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, saved)
            self.console.show_cursor(True)

    def _write_control(self, code: str) -> None:
        self.console.file.write(code)
        self.console.file.flush()

    def _read_bytes(self, count: int = 1) -> bytes:
        data = b""
        while len(data) < count:
            chunk = os.read(self._stdin.fileno(), count - len(data))
            if not chunk:
                raise EOFError("terminal input closed")
            data += chunk
        return data

    def _pending(self) -> bool:
        readable, _, _ = select.select([self._stdin], [], [], ESCAPE_TIMEOUT)
        return bool(readable)

    def _read_event_posix(self) -> InputEvent:
        first = self._read_bytes()
        if first == ESC.encode():
            sequence = ESC
            while not escape_sequence_complete(sequence) and self._pending():
                sequence += self._read_bytes().decode("latin-1")
            return decode_posix(sequence)
        # One keypress may be a multi-byte character
        remaining = utf8_sequence_length(first[0]) - 1
        if remaining:
            first += self._read_bytes(remaining)
        return decode_posix(first.decode("utf-8", errors="replace"))

    def _read_event_windows(self) -> InputEvent:
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return decode_windows(ch, msvcrt.getwch())
        return decode_windows(ch)
