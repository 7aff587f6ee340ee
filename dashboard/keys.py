"""Input events and terminal byte-sequence decoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

ESC = "\x1b"
MOUSE_PREFIX = ESC + "[M"
MOUSE_REPORT_LENGTH = len(MOUSE_PREFIX) + 3

_CSI_KEYS = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
    "OC": "right",
    "OD": "left",
    "[5~": "pgup",
    "[6~": "pgdn",
}

_WINDOWS_SCAN_CODES = {
    "H": "up",
    "P": "down",
    "K": "left",
    "M": "right",
    "I": "pgup",
    "Q": "pgdn",
}

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
}


class KeyKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    kind: KeyKind = KeyKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    raw: str


InputEvent = Union[KeyEvent, MouseEvent]


def decode_posix(sequence: str) -> InputEvent:
    """
    Decode one input sequence read from a POSIX terminal.

    ``sequence`` is a single character, or an escape sequence starting with
    ESC. Unknown escape sequences decode to ``esc``.
    """
    if sequence.startswith(MOUSE_PREFIX):
        return MouseEvent(sequence)
    if sequence.startswith(ESC):
        tail = sequence[1:]
        if not tail:
            return KeyEvent("esc")
        return KeyEvent(_CSI_KEYS.get(tail, "esc"))
    return KeyEvent(_CONTROL_KEYS.get(sequence, sequence))


def decode_windows(first: str, second: str = "") -> KeyEvent:
    """Decode a character from ``msvcrt.getwch`` (plus its scan code, if prefixed)."""
    if first in ("\x00", "\xe0"):
        return KeyEvent(_WINDOWS_SCAN_CODES.get(second, "unknown"))
    if first == ESC:
        return KeyEvent("esc")
    return KeyEvent(_CONTROL_KEYS.get(first, first))


def escape_sequence_complete(sequence: str) -> bool:
    """Return True once ``sequence`` (starting with ESC) needs no more bytes."""
    if sequence.startswith(MOUSE_PREFIX):
        return len(sequence) >= MOUSE_REPORT_LENGTH
    tail = sequence[1:]
    if len(tail) < 2:
        return False
    if tail[0] not in "[O":
        return True
    if tail == "[M":
        return False
    if tail in _CSI_KEYS:
        return True
    # CSI sequences end with a byte in the @..~ range
    return "@" <= tail[-1] <= "~"


def utf8_sequence_length(first_byte: int) -> int:
    """Return how many bytes the UTF-8 character starting with ``first_byte`` spans."""
    if first_byte >= 0xF0:
        return 4
    if first_byte >= 0xE0:
        return 3
    if first_byte >= 0xC0:
        return 2
    # ASCII, or a stray continuation byte
    return 1
