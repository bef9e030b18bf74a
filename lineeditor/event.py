"""Edit commands, movement commands and editor events."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class InsertChar:
    """Insert a character at the insertion point."""

    ch: str

    def __post_init__(self) -> None:
        if len(self.ch) != 1:
            raise ValueError(f"expected a single character, got {self.ch!r}")


@dataclass(frozen=True)
class InsertString:
    """Insert a string at the insertion point."""

    text: str


@dataclass(frozen=True)
class DeleteLeftChar:
    """Delete backwards from the insertion point."""


@dataclass(frozen=True)
class DeleteRightChar:
    """Delete forwards from the insertion point."""


@dataclass(frozen=True)
class DeleteSpan:
    """Delete the characters in [start, end)."""

    start: int
    end: int


@dataclass(frozen=True)
class ClearBuffer:
    """Empty the buffer."""


@dataclass(frozen=True)
class MoveToStart:
    """Move to the start of the buffer."""


@dataclass(frozen=True)
class MoveToEnd:
    """Move to the end of the buffer."""


@dataclass(frozen=True)
class MoveLeftChar:
    """Move one character left."""


@dataclass(frozen=True)
class MoveRightChar:
    """Move one character right."""


@dataclass(frozen=True)
class MoveLeftWord:
    """Move one word left."""


@dataclass(frozen=True)
class MoveRightWord:
    """Move one word right."""


@dataclass(frozen=True)
class MoveToPosition:
    """Move to an absolute position."""

    position: int


EditCommand = Union[InsertChar, InsertString, DeleteLeftChar, DeleteRightChar, DeleteSpan, ClearBuffer]
MovementCommand = Union[
    MoveToStart, MoveToEnd, MoveLeftChar, MoveRightChar, MoveLeftWord, MoveRightWord, MoveToPosition
]


class LineEditorEvent(enum.Enum):
    """Actions of the line editor that carry no data."""

    NONE = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    SUBMIT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    SELECT_RIGHT = enum.auto()
    SELECT_LEFT = enum.auto()
    SELECT_ALL = enum.auto()
    CUT_SELECTED = enum.auto()
    COPY_SELECTED = enum.auto()
    PASTE = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    TOGGLE_AUTO_COMPLETE = enum.auto()


@dataclass(frozen=True)
class Edit:
    """Run these edit commands in the editor."""

    commands: tuple[EditCommand, ...]

    def __init__(self, commands: Iterable[EditCommand]) -> None:
        object.__setattr__(self, "commands", tuple(commands))


@dataclass(frozen=True)
class Movement:
    """Run these movement commands in the editor."""

    commands: tuple[MovementCommand, ...]

    def __init__(self, commands: Iterable[MovementCommand]) -> None:
        object.__setattr__(self, "commands", tuple(commands))


EditorEvent = Union[LineEditorEvent, Edit, Movement]