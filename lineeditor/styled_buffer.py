"""An editable line of characters with one style per character."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from .style import Style


class StyledBuffer:
    """Characters of one line, a style for each, and an insertion point."""

    def __init__(self, text: str = "") -> None:
        self._chars: list[str] = []
        self._styles: list[Style] = []
        self.position = 0
        self.insert_string(text)

    @property
    def chars(self) -> tuple[str, ...]:
        """The characters of the buffer."""
        return tuple(self._chars)

    @property
    def styles(self) -> tuple[Style, ...]:
        """The style of each character."""
        return tuple(self._styles)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.literal()

    def __repr__(self) -> str:
        return f"StyledBuffer({self.literal()!r}, position={self.position})"

    def insert_char(self, ch: str) -> None:
        """Insert a character with the default style and move past it."""
        self.insert_styled_char(ch, Style())

    def insert_styled_char(self, ch: str, style: Style) -> None:
        """Insert a character with the given style and move past it."""
        self._chars.insert(self.position, ch)
        self._styles.insert(self.position, style)
        self.move_char_right()

    def insert_string(self, text: str) -> None:
        """Insert every character of text with the default style."""
        for ch in text:
            self.insert_char(ch)

    def insert_styled_string(self, text: str, style: Style) -> None:
        """Insert every character of text, each with its own copy of style."""
        for ch in text:
            self.insert_styled_char(ch, copy.deepcopy(style))

    def move_char_right(self) -> None:
        if self.position < len(self):
            self.position += 1

    def move_char_left(self) -> None:
        if self.position > 0:
            self.position -= 1

    def move_word_right(self) -> None:
        """Move to the start of the next word."""
        while self.position < len(self):
            if self._chars[self.position].isspace():
                self.position += 1
                return
            self.position += 1

    def move_word_left(self) -> None:
        """Move to the start of the previous word."""
        if not self._chars:
            return
        size = len(self)
        pos = min(self.position, size - 1)
        if pos:
            pos -= 1
        while pos and self._chars[pos].isspace():
            pos -= 1
        while pos:
            if self._chars[pos].isspace():
                if pos + 1 < size:
                    pos += 1
                break
            pos -= 1
        self.position = pos

    def move_to_start(self) -> None:
        self.position = 0

    def move_to_end(self) -> None:
        self.position = len(self)

    def delete_right_char(self) -> None:
        """Delete the character after the one under the cursor."""
        if self.position + 1 < len(self):
            del self._chars[self.position + 1]
            del self._styles[self.position + 1]

    def delete_left_char(self) -> None:
        """Delete the character before the cursor and move onto its place."""
        if self.position > 0:
            self.position -= 1
            del self._chars[self.position]
            del self._styles[self.position]

    def delete_range(self, start: int, end: int) -> None:
        """Delete characters in [start, end) and put the cursor at start."""
        if start < 0 or start > end:
            raise ValueError(f"invalid range {start}..{end}")
        if end <= len(self):
            del self._chars[start:end]
            del self._styles[start:end]
            self.position = start

    def literal(self) -> str:
        """The text of the buffer without styles."""
        return "".join(self._chars)

    def char_at(self, position: int) -> str:
        if not 0 <= position < len(self):
            raise IndexError(f"position {position} out of range")
        return self._chars[position]

    def sub_string(self, start: int, end: int) -> str | None:
        """Text in [start, end), or None if the range is empty or invalid."""
        if 0 <= start < end <= len(self):
            return "".join(self._chars[start:end])
        return None

    def last_alphabetic_keyword(self) -> str | None:
        """The run of alphabetic characters at the end of the buffer, if any."""
        keyword: list[str] = []
        for ch in reversed(self._chars):
            if not ch.isalpha():
                break
            keyword.append(ch)
        return "".join(reversed(keyword)) or None

    def set_styles(self, styles: Iterable[Style]) -> None:
        """Replace all styles, only if there is exactly one per character."""
        new_styles = list(styles)
        if len(new_styles) == len(self):
            self._styles = new_styles

    def style_char(self, position: int, style: Style) -> None:
        if not 0 <= position < len(self._styles):
            raise IndexError(f"position {position} out of range")
        self._styles[position] = style

    def style_range(self, start: int, end: int, style: Style) -> None:
        """Style characters in [start, end), clamped to the buffer."""
        for i in range(max(start, 0), min(end, len(self._styles))):
            self._styles[i] = copy.deepcopy(style)

    def style_all(self, style: Style) -> None:
        self._styles = [copy.deepcopy(style) for _ in self._chars]

    def reset_styles(self) -> None:
        self._styles = [Style() for _ in self._styles]

    def clear(self) -> None:
        """Empty the buffer and move the cursor to the start."""
        self._chars = []
        self._styles = []
        self.position = 0

    def is_cursor_at_the_end(self) -> bool:
        return self.position == len(self)