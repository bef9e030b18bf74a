"""Keys, modifiers and the input events read from the terminal."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class KeyCode(enum.Enum):
    """Non-character keys. Character keys are plain one-character strings."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


class KeyModifiers(enum.Flag):
    """Modifier keys held with a key."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


class KeyEventKind(enum.Enum):
    PRESS = enum.auto()
    REPEAT = enum.auto()
    RELEASE = enum.auto()


Key = Union[KeyCode, str]


def _check_key(code: object) -> None:
    if isinstance(code, KeyCode):
        return
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"character key must be one character, got {code!r}")
        return
    raise TypeError(f"not a key: {code!r}")


@dataclass(frozen=True)
class KeyEvent:
    """A key press, repeat or release."""

    code: Key
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self) -> None:
        _check_key(self.code)


@dataclass(frozen=True)
class PasteEvent:
    """Text pasted into the terminal as one block."""

    text: str