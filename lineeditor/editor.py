"""Applies edit and movement commands to a styled buffer."""

from __future__ import annotations

from .event import (
    ClearBuffer,
    DeleteLeftChar,
    DeleteRightChar,
    DeleteSpan,
    EditCommand,
    InsertChar,
    InsertString,
    MoveLeftChar,
    MoveLeftWord,
    MovementCommand,
    MoveRightChar,
    MoveRightWord,
    MoveToEnd,
    MoveToPosition,
    MoveToStart,
)
from .styled_buffer import StyledBuffer


class Editor:
    """Owns the line buffer and runs commands against it."""

    def __init__(self) -> None:
        self.buffer = StyledBuffer()

    def run_edit_command(self, command: EditCommand) -> None:
        match command:
            case InsertChar(ch):
                self.buffer.insert_char(ch)
            case InsertString(text):
                self.buffer.insert_string(text)
            case DeleteLeftChar():
                self.buffer.delete_left_char()
            case DeleteRightChar():
                self.buffer.delete_right_char()
            case DeleteSpan(start, end):
                self.buffer.delete_range(start, end)
            case ClearBuffer():
                self.buffer.clear()
            case _:
                raise TypeError(f"not an edit command: {command!r}")

    def run_movement_command(self, command: MovementCommand) -> None:
        match command:
            case MoveToStart():
                self.buffer.move_to_start()
            case MoveToEnd():
                self.buffer.move_to_end()
            case MoveLeftChar():
                self.buffer.move_char_left()
            case MoveRightChar():
                self.buffer.move_char_right()
            case MoveLeftWord():
                self.buffer.move_word_left()
            case MoveRightWord():
                self.buffer.move_word_right()
            case MoveToPosition(position):
                self.buffer.position = position
            case _:
                raise TypeError(f"not a movement command: {command!r}")