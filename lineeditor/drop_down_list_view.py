"""A drop-down list of suggestions drawn under the cursor."""

from __future__ import annotations

from collections.abc import Iterable

from .completion import Suggestion
from .list_view import ListView
from .style import Style
from .terminal import Terminal, render_styled_buffer


def _move_to(column: int, row: int) -> str:
    return f"\x1b[{row + 1};{column + 1}H"


def _move_to_column(column: int) -> str:
    return f"\x1b[{column + 1}G"


def _move_to_next_line(count: int) -> str:
    return f"\x1b[{count}E"


def _move_to_previous_line(count: int) -> str:
    return f"\x1b[{count}F"


def _scroll_up(count: int) -> str:
    return f"\x1b[{count}S"


_CLEAR_FROM_CURSOR_DOWN = "\x1b[J"


class DropDownListView(ListView[Suggestion]):
    """Shows suggestions one per line below the cursor, highlighting the focused one."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self.elements: list[Suggestion] = []
        self.focus_style = Style()
        self.focus_position = 0
        self.visible = False

    def render(self) -> None:
        _, rows = self.terminal.size()
        start_column, start_row = self.terminal.cursor_position()

        scrolls = 0
        needed = start_row + 1 + len(self.elements)
        if needed > rows:
            scrolls = needed - rows + 1
            self.terminal.write(_scroll_up(scrolls))
            self.terminal.write(_move_to_previous_line(scrolls))

        for index, suggestion in enumerate(self.elements):
            content = suggestion.content
            self.terminal.write(_move_to_next_line(1))
            self.terminal.write(_move_to_column(start_column))
            if index == self.focus_position:
                saved_styles = content.styles
                content.style_all(self.focus_style)
                self.terminal.write(render_styled_buffer(content))
                content.set_styles(saved_styles)
            else:
                self.terminal.write(render_styled_buffer(content))

        self.terminal.write(_move_to(start_column, max(start_row - scrolls, 0)))
        self.terminal.flush()

    def clear(self) -> None:
        self.terminal.write(_CLEAR_FROM_CURSOR_DOWN)
        self.terminal.flush()

    def focus_next(self) -> None:
        if self.focus_position < len(self.elements) - 1:
            self.focus_position += 1

    def focus_previous(self) -> None:
        if self.focus_position > 0:
            self.focus_position -= 1

    def clear_focus(self) -> None:
        self.focus_position = 0

    def reset(self) -> None:
        self.clear_elements()
        self.clear_focus()

    def set_elements(self, elements: Iterable[Suggestion]) -> None:
        self.elements.extend(elements)

    def clear_elements(self) -> None:
        self.elements.clear()

    def selected_element(self) -> Suggestion | None:
        if 0 <= self.focus_position < len(self.elements):
            return self.elements[self.focus_position]
        return None

    def __len__(self) -> int:
        return len(self.elements)