"""Tests for input decoding."""

import unittest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dashboard.keys import (
    KeyEvent,
    KeyKind,
    MouseEvent,
    decode_posix,
    decode_windows,
    escape_sequence_complete,
    utf8_sequence_length,
)


class TestDecodePosix(unittest.TestCase):
    """Test decode_posix."""

    def test_printable_character(self):
        """Test that printable characters are their own key."""
        self.assertEqual(decode_posix("q"), KeyEvent("q"))
        self.assertEqual(decode_posix("Q"), KeyEvent("Q"))

    def test_arrows(self):
        """Test CSI and SS3 arrow sequences."""
        self.assertEqual(decode_posix("\x1b[C"), KeyEvent("right"))
        self.assertEqual(decode_posix("\x1b[D"), KeyEvent("left"))
        self.assertEqual(decode_posix("\x1b[A"), KeyEvent("up"))
        self.assertEqual(decode_posix("\x1b[B"), KeyEvent("down"))
        self.assertEqual(decode_posix("\x1bOC"), KeyEvent("right"))
        self.assertEqual(decode_posix("\x1bOD"), KeyEvent("left"))

    def test_paging(self):
        """Test page up and page down."""
        self.assertEqual(decode_posix("\x1b[5~"), KeyEvent("pgup"))
        self.assertEqual(decode_posix("\x1b[6~"), KeyEvent("pgdn"))

    def test_lone_and_unknown_escape(self):
        """Test that ESC alone and unknown sequences decode to esc."""
        self.assertEqual(decode_posix("\x1b"), KeyEvent("esc"))
        self.assertEqual(decode_posix("\x1b[1;5C"), KeyEvent("esc"))

    def test_control_characters(self):
        """Test enter, backspace and tab."""
        self.assertEqual(decode_posix("\r"), KeyEvent("enter"))
        self.assertEqual(decode_posix("\n"), KeyEvent("enter"))
        self.assertEqual(decode_posix("\x7f"), KeyEvent("backspace"))
        self.assertEqual(decode_posix("\t"), KeyEvent("tab"))

    def test_mouse_report(self):
        """Test that X10 mouse reports are mouse events, not keys."""
        event = decode_posix("\x1b[M !!")
        self.assertIsInstance(event, MouseEvent)
        self.assertEqual(event.raw, "\x1b[M !!")

    def test_decoded_keys_are_presses(self):
        """Test that terminals only ever report presses."""
        self.assertIs(decode_posix("q").kind, KeyKind.PRESS)
        self.assertIs(decode_posix("\x1b[C").kind, KeyKind.PRESS)


class TestEscapeSequenceComplete(unittest.TestCase):
    """Test escape_sequence_complete."""

    def test_incomplete_prefixes(self):
        """Test prefixes that need more bytes."""
        for sequence in ("\x1b", "\x1b[", "\x1b[5", "\x1b[1;5", "\x1b[M", "\x1b[M !"):
            self.assertFalse(escape_sequence_complete(sequence), repr(sequence))

    def test_complete_sequences(self):
        """Test full sequences."""
        for sequence in ("\x1b[A", "\x1bOD", "\x1b[5~", "\x1b[1;5C", "\x1b[M !!"):
            self.assertTrue(escape_sequence_complete(sequence), repr(sequence))


class TestUtf8SequenceLength(unittest.TestCase):
    """Test utf8_sequence_length."""

    def test_lengths_from_lead_byte(self):
        """Test that each character spans the bytes its lead byte announces."""
        for char in ("q", "\u00e9", "\u20ac", "\U0001F600"):
            encoded = char.encode("utf-8")
            self.assertEqual(utf8_sequence_length(encoded[0]), len(encoded), repr(char))

    def test_stray_continuation_byte(self):
        """Test that a lone continuation byte is read on its own."""
        self.assertEqual(utf8_sequence_length(0x80), 1)


class TestDecodeWindows(unittest.TestCase):
    """Test decode_windows."""

    def test_scan_codes(self):
        """Test prefixed scan codes for arrows and paging."""
        self.assertEqual(decode_windows("\xe0", "M"), KeyEvent("right"))
        self.assertEqual(decode_windows("\xe0", "K"), KeyEvent("left"))
        self.assertEqual(decode_windows("\x00", "I"), KeyEvent("pgup"))
        self.assertEqual(decode_windows("\x00", "Z"), KeyEvent("unknown"))

    def test_plain_characters(self):
        """Test characters and control keys."""
        self.assertEqual(decode_windows("q"), KeyEvent("q"))
        self.assertEqual(decode_windows("\r"), KeyEvent("enter"))
        self.assertEqual(decode_windows("\x1b"), KeyEvent("esc"))
        self.assertEqual(decode_windows("\x08"), KeyEvent("backspace"))


if __name__ == "__main__":
    unittest.main()
