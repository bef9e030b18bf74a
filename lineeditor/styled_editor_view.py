"""Draws the prompt, the edited line and hints on the terminal."""

from __future__ import annotations

from .styled_buffer import StyledBuffer
from .terminal import CursorStyle, Terminal, render_styled_buffer

_CLEAR_FROM_CURSOR_DOWN = "\x1b[J"


def _move_to_column(column: int) -> str:
    return f"\x1b[{column + 1}G"


def _move_to_row(row: int) -> str:
    return f"\x1b[{row + 1}d"


class StyledEditorView:
    """Renders styled buffers at a start position just after the prompt."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self.start_position: tuple[int, int] = (0, 0)
        try:
            self.terminal_size = terminal.size()
        except OSError:
            self.terminal_size = (0, 0)

    def render_line_buffer(self, buffer: StyledBuffer) -> None:
        """Redraw the line from the start position and place the cursor."""
        column, row = self.start_position
        self.terminal.write(_move_to_row(row))
        self.terminal.write(_move_to_column(column))
        self.terminal.write(_CLEAR_FROM_CURSOR_DOWN)
        self.terminal.write(render_styled_buffer(buffer))
        self.update_cursor_position(buffer.position)
        self.flush()

    def _wrapped_column(self, position: int) -> tuple[int, int]:
        width = self.terminal_size[0]
        column = self.start_position[0] + position
        lines = 1
        while width > 0 and column > width:
            column -= width
            lines += 1
        return column, lines

    def update_cursor_position(self, position: int) -> None:
        """Move the cursor to the column of the insertion point."""
        column, _ = self._wrapped_column(position)
        self.terminal.write(_move_to_column(column))

    def number_of_lines(self, position: int) -> int:
        """Number of screen lines the text up to position occupies."""
        _, lines = self._wrapped_column(position)
        return lines

    def render_prompt_buffer(self, prompt: StyledBuffer) -> None:
        self.terminal.write(render_styled_buffer(prompt))
        self.flush()

    def render_hint(self, hint: StyledBuffer) -> None:
        """Draw the hint after the line, leaving the cursor where it was."""
        column, _ = self.terminal.cursor_position()
        self.terminal.write(render_styled_buffer(hint))
        self.terminal.write(_move_to_column(column))
        self.flush()

    def set_cursor_style(self, style: CursorStyle) -> None:
        """Queue a cursor shape change; it takes effect on the next flush."""
        self.terminal.write(style.value)

    def flush(self) -> None:
        self.terminal.flush()