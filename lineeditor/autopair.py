"""Automatic insertion of the closing half of a typed pair."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from .styled_buffer import StyledBuffer

DEFAULT_PAIRS: tuple[tuple[str, str], ...] = (
    ("(", ")"),
    ("{", "}"),
    ("[", "]"),
    ("'", "'"),
    ('"', '"'),
    ("`", "`"),
)


class AutoPair(ABC):
    """Modifies the line buffer after a character has been inserted."""

    @abstractmethod
    def complete_pair(self, buffer: StyledBuffer) -> None:
        """Complete a pair in the buffer if one was just opened."""


class DefaultAutoPair(AutoPair):
    """Closes pairs taken from a mapping of opening to closing characters."""

    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        self.pairs: dict[str, str] = dict(pairs) if pairs is not None else dict(DEFAULT_PAIRS)

    def complete_pair(self, buffer: StyledBuffer) -> None:
        """Insert the closing character if the cursor is at the end after an opener."""
        if not buffer.is_cursor_at_the_end() or not len(buffer):
            return
        closing = self.pairs.get(buffer.chars[-1])
        if closing is not None:
            buffer.insert_char(closing)
            buffer.move_char_left()