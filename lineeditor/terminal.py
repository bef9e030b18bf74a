"""Terminal input decoding, escape-sequence output and a clipboard."""

from __future__ import annotations

import base64
import codecs
import contextlib
import dataclasses
import enum
import os
import re
import select
import sys
from collections.abc import Iterator
from typing import IO, Any, Union

try:
    import termios
    import tty
except ImportError:  # not a POSIX system
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

from .keys import KeyCode, KeyEvent, KeyModifiers, PasteEvent
from .style import AnyColor, Color, Rgb
from .styled_buffer import StyledBuffer

InputEvent = Union[KeyEvent, PasteEvent]

_ESC = "\x1b"
_PASTE_START = "\x1b[200~"
_PASTE_END = "\x1b[201~"
_BRACKETED_PASTE_ON = "\x1b[?2004h"
_BRACKETED_PASTE_OFF = "\x1b[?2004l"
_REQUEST_POSITION = "\x1b[6n"
_POSITION_REPORT = re.compile(r"\x1b\[(\d+);(\d+)R")
_ESCAPE_WAIT = 0.05
_POSITION_WAIT = 2.0

_LETTER_KEYS = {
    "A": KeyCode.UP,
    "B": KeyCode.DOWN,
    "C": KeyCode.RIGHT,
    "D": KeyCode.LEFT,
    "H": KeyCode.HOME,
    "F": KeyCode.END,
    "P": KeyCode.F1,
    "Q": KeyCode.F2,
    "R": KeyCode.F3,
    "S": KeyCode.F4,
}

_TILDE_KEYS = {
    1: KeyCode.HOME,
    2: KeyCode.INSERT,
    3: KeyCode.DELETE,
    4: KeyCode.END,
    5: KeyCode.PAGE_UP,
    6: KeyCode.PAGE_DOWN,
    7: KeyCode.HOME,
    8: KeyCode.END,
    11: KeyCode.F1,
    12: KeyCode.F2,
    13: KeyCode.F3,
    14: KeyCode.F4,
    15: KeyCode.F5,
    17: KeyCode.F6,
    18: KeyCode.F7,
    19: KeyCode.F8,
    20: KeyCode.F9,
    21: KeyCode.F10,
    23: KeyCode.F11,
    24: KeyCode.F12,
}

_CODEPOINT_KEYS = {
    8: KeyCode.BACKSPACE,
    9: KeyCode.TAB,
    13: KeyCode.ENTER,
    27: KeyCode.ESC,
    127: KeyCode.BACKSPACE,
}

_MODIFIER_BITS = (
    (1, KeyModifiers.SHIFT),
    (2, KeyModifiers.ALT),
    (4, KeyModifiers.CONTROL),
    (8, KeyModifiers.SUPER),
    (16, KeyModifiers.HYPER),
    (32, KeyModifiers.META),
)


class CursorStyle(enum.Enum):
    """Cursor shapes; the value is the escape sequence that selects it."""

    DEFAULT_USER_SHAPE = "\x1b[0 q"
    BLINKING_BLOCK = "\x1b[1 q"
    STEADY_BLOCK = "\x1b[2 q"
    BLINKING_UNDER_SCORE = "\x1b[3 q"
    STEADY_UNDER_SCORE = "\x1b[4 q"
    BLINKING_BAR = "\x1b[5 q"
    STEADY_BAR = "\x1b[6 q"


def _modifiers(parameter: int) -> KeyModifiers:
    bits = max(parameter - 1, 0)
    result = KeyModifiers.NONE
    for bit, modifier in _MODIFIER_BITS:
        if bits & bit:
            result |= modifier
    return result


def _plain_key(ch: str) -> KeyEvent:
    if ch in "\r\n":
        return KeyEvent(KeyCode.ENTER)
    if ch == "\t":
        return KeyEvent(KeyCode.TAB)
    if ch in "\x7f\x08":
        return KeyEvent(KeyCode.BACKSPACE)
    if ch == "\x00":
        return KeyEvent(" ", KeyModifiers.CONTROL)
    if "\x01" <= ch <= "\x1a":
        return KeyEvent(chr(ord(ch) + 96), KeyModifiers.CONTROL)
    if "\x1c" <= ch <= "\x1f":
        return KeyEvent(chr(ord(ch) + 24), KeyModifiers.CONTROL)
    return KeyEvent(ch)


def _codepoint_key(codepoint: int, modifiers: KeyModifiers) -> KeyEvent | None:
    code = _CODEPOINT_KEYS.get(codepoint)
    if code is not None:
        return KeyEvent(code, modifiers)
    try:
        return KeyEvent(chr(codepoint), modifiers)
    except (ValueError, OverflowError):
        return None


def _csi_key(params: str, final_char: str) -> KeyEvent | None:
    try:
        numbers = [int(field.split(":")[0]) if field else 1 for field in params.split(";")] if params else []
    except ValueError:
        return None
    modifiers = _modifiers(numbers[1]) if len(numbers) > 1 else KeyModifiers.NONE
    if final_char == "~":
        code = _TILDE_KEYS.get(numbers[0] if numbers else 0)
        return KeyEvent(code, modifiers) if code is not None else None
    if final_char == "Z":
        return KeyEvent(KeyCode.BACK_TAB, KeyModifiers.SHIFT | modifiers)
    if final_char == "u":
        return _codepoint_key(numbers[0], modifiers) if numbers else None
    code = _LETTER_KEYS.get(final_char)
    return KeyEvent(code, modifiers) if code is not None else None


def _parse_csi(data: str, final: bool) -> tuple[InputEvent | None, int] | None:
    if data.startswith(_PASTE_START):
        end = data.find(_PASTE_END, len(_PASTE_START))
        if end < 0:
            if not final:
                return None
            return PasteEvent(data[len(_PASTE_START):]), len(data)
        return PasteEvent(data[len(_PASTE_START):end]), end + len(_PASTE_END)

    i = 2
    while i < len(data) and "\x30" <= data[i] <= "\x3f":
        i += 1
    while i < len(data) and "\x20" <= data[i] <= "\x2f":
        i += 1
    if i >= len(data):
        if not final:
            return None
        return KeyEvent(KeyCode.ESC), 1
    final_char = data[i]
    if not "\x40" <= final_char <= "\x7e":
        return None, i
    return _csi_key(data[2:i], final_char), i + 1


def _parse_event(data: str, final: bool) -> tuple[InputEvent | None, int] | None:
    """Decode one event from the start of data.

    Returns the event (None for an unrecognised sequence) and the number of
    characters consumed, or None if more input is needed and final is false.
    """
    if data[0] != _ESC:
        return _plain_key(data[0]), 1
    if len(data) == 1:
        return (KeyEvent(KeyCode.ESC), 1) if final else None
    second = data[1]
    if second == "[":
        return _parse_csi(data, final)
    if second == "O":
        if len(data) < 3:
            return (KeyEvent("O", KeyModifiers.ALT), 2) if final else None
        code = _LETTER_KEYS.get(data[2])
        return (KeyEvent(code) if code is not None else None), 3
    if second == _ESC:
        return KeyEvent(KeyCode.ESC), 1
    base = _plain_key(second)
    return dataclasses.replace(base, modifiers=base.modifiers | KeyModifiers.ALT), 2


def decode_events(data: str) -> list[InputEvent]:
    """Decode every key and paste event in a complete piece of terminal input."""
    events: list[InputEvent] = []
    pos = 0
    while pos < len(data):
        parsed = _parse_event(data[pos:], final=True)
        assert parsed is not None
        event, consumed = parsed
        if event is not None:
            events.append(event)
        pos += consumed
    return events


def _color_code(color: AnyColor, background: bool) -> str:
    if isinstance(color, Rgb):
        return f"\x1b[{48 if background else 38};2;{color.r};{color.g};{color.b}m"
    return f"\x1b[{color.value + 10 if background else color.value}m"


def render_styled_buffer(buffer: StyledBuffer) -> str:
    """Return the escape-coded text that draws buffer with its styles."""
    parts: list[str] = []
    for ch, style in zip(buffer.chars, buffer.styles):
        if style.foreground is not None:
            parts.append(_color_code(style.foreground, background=False))
        if style.background is not None:
            parts.append(_color_code(style.background, background=True))
        parts.extend(f"\x1b[{attribute.value}m" for attribute in style.attributes)
        parts.append(ch)
        parts.append(_color_code(Color.RESET, background=False))
        parts.append(_color_code(Color.RESET, background=True))
    return "".join(parts)


class Terminal:
    """Reads input events from and writes escape-coded output to a terminal."""

    def __init__(self, input_stream: IO[Any] | None = None, output_stream: IO[str] | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stderr
        self._pending_output: list[str] = []
        self._pending_input = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def write(self, text: str) -> None:
        """Queue text; it reaches the terminal on the next flush."""
        self._pending_output.append(text)

    def flush(self) -> None:
        """Send all queued output to the terminal."""
        if self._pending_output:
            self.output_stream.write("".join(self._pending_output))
            self._pending_output.clear()
        self.output_stream.flush()

    def size(self) -> tuple[int, int]:
        """Return (columns, rows) of the terminal."""
        try:
            columns, rows = os.get_terminal_size(self.output_stream.fileno())
            return columns, rows
        except (OSError, ValueError, AttributeError):
            pass
        try:
            return int(os.environ["COLUMNS"]), int(os.environ["LINES"])
        except (KeyError, ValueError):
            raise OSError("terminal size is unavailable") from None

    def cursor_position(self) -> tuple[int, int]:
        """Ask the terminal for the cursor position and return (column, row), zero-based."""
        self.write(_REQUEST_POSITION)
        self.flush()
        while True:
            match = _POSITION_REPORT.search(self._pending_input)
            if match:
                self._pending_input = self._pending_input[: match.start()] + self._pending_input[match.end():]
                return int(match.group(2)) - 1, int(match.group(1)) - 1
            chunk = self._read_chunk(_POSITION_WAIT)
            if not chunk:
                raise OSError("terminal did not report the cursor position")
            self._pending_input += chunk

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Put the terminal in raw mode with bracketed paste for the duration."""
        fd = self._input_fd()
        saved = None
        if termios is not None and fd is not None and os.isatty(fd):
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
        self.write(_BRACKETED_PASTE_ON)
        self.flush()
        try:
            yield
        finally:
            if saved is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            self.write(_BRACKETED_PASTE_OFF)
            self.flush()

    def read_event(self) -> InputEvent:
        """Block until the next key or paste event and return it."""
        while True:
            if self._pending_input:
                parsed = _parse_event(self._pending_input, final=False)
                if parsed is not None:
                    event, consumed = parsed
                    self._pending_input = self._pending_input[consumed:]
                    if event is not None:
                        return event
                    continue
            chunk = self._read_chunk(_ESCAPE_WAIT if self._pending_input else None)
            if chunk:
                self._pending_input += chunk
                continue
            if not self._pending_input:
                raise EOFError("end of terminal input")
            parsed = _parse_event(self._pending_input, final=True)
            assert parsed is not None
            event, consumed = parsed
            self._pending_input = self._pending_input[consumed:]
            if event is not None:
                return event

    def _input_fd(self) -> int | None:
        try:
            return self.input_stream.fileno()
        except (OSError, ValueError, AttributeError):
            return None

    def _read_chunk(self, timeout: float | None) -> str:
        fd = self._input_fd()
        if fd is None:
            while True:
                chunk = self.input_stream.read(4096)
                if isinstance(chunk, str):
                    return chunk
                text = self._decoder.decode(chunk, final=not chunk)
                if text or not chunk:
                    return text
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return ""
        while True:
            data = os.read(fd, 4096)
            text = self._decoder.decode(data, final=not data)
            if text or not data:
                return text


class Clipboard:
    """Holds copied text; mirrors it to the terminal's clipboard when one is given."""

    def __init__(self, terminal: Terminal | None = None) -> None:
        self.terminal = terminal
        self._contents: str | None = None

    def get_contents(self) -> str:
        """Return the copied text, or raise LookupError if nothing was copied."""
        if self._contents is None:
            raise LookupError("clipboard is empty")
        return self._contents

    def set_contents(self, text: str) -> None:
        """Store text as the clipboard contents."""
        self._contents = text
        if self.terminal is not None:
            encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
            self.terminal.write(f"\x1b]52;c;{encoded}\x07")
            self.terminal.flush()