"""The line editor: reads key events, edits the line and redraws it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .autopair import DEFAULT_PAIRS, AutoPair
from .completion import Completer, Suggestion
from .drop_down_list_view import DropDownListView
from .editor import Editor
from .event import (
    DeleteLeftChar,
    DeleteRightChar,
    DeleteSpan,
    Edit,
    EditorEvent,
    InsertChar,
    InsertString,
    LineEditorEvent,
    MoveLeftChar,
    Movement,
    MoveRightChar,
)
from .hooks import Highlighter, Hinter, Prompt
from .input_filter import AnyFilter, InputFilter, filter_input
from .keybindings import KeyCombination, Keybindings
from .keys import KeyEventKind, KeyModifiers, PasteEvent
from .list_view import ListView
from .style import Color, Style
from .styled_editor_view import StyledEditorView
from .terminal import Clipboard, CursorStyle, Terminal


@dataclass(frozen=True)
class Success:
    """The line was entered with this content."""

    line: str


@dataclass(frozen=True)
class Interrupted:
    """Editing was interrupted."""


@dataclass(frozen=True)
class EndTerminalSession:
    """The terminal session ended."""


LineEditorResult = Union[Success, Interrupted, EndTerminalSession]

_SURROUND_PAIRS = dict(DEFAULT_PAIRS)


class _EventStatus(enum.Enum):
    GENERAL_HANDLED = enum.auto()
    EDIT_HANDLED = enum.auto()
    MOVEMENT_HANDLED = enum.auto()
    SELECTION_HANDLED = enum.auto()
    AUTO_COMPLETE_HANDLED = enum.auto()
    INAPPLICABLE = enum.auto()


_SKIP_REDRAW = (_EventStatus.AUTO_COMPLETE_HANDLED, _EventStatus.INAPPLICABLE)


class LineEditor:
    """Reads one line from the terminal with bindings, styles, hints and completion."""

    def __init__(
        self,
        prompt: Prompt,
        terminal: Terminal | None = None,
        clipboard: Clipboard | None = None,
    ) -> None:
        self.prompt = prompt
        self.terminal = terminal if terminal is not None else Terminal()
        self.clipboard = clipboard if clipboard is not None else Clipboard(self.terminal)
        self.editor = Editor()
        self.input_filter: AnyFilter = InputFilter.TEXT
        self.styled_editor_view = StyledEditorView(self.terminal)
        self.keybindings = Keybindings()
        self.auto_pair: AutoPair | None = None
        self.highlighters: list[Highlighter] = []
        self.hinters: list[Hinter] = []
        self.completer: Completer | None = None
        self.auto_complete_view: ListView[Suggestion] = DropDownListView(self.terminal)
        self.cursor_style: CursorStyle | None = None
        self.selection_style: Style | None = None
        self.surround_selection = False
        self.selected_start = 0
        self.selected_end = 0

    def read_line(self) -> LineEditorResult:
        """Edit a line until it is entered or the input ends, and return the result."""
        if self.cursor_style is not None:
            self.styled_editor_view.set_cursor_style(self.cursor_style)
        try:
            with self.terminal.raw_mode():
                return self._read_line_loop()
        finally:
            self.styled_editor_view.set_cursor_style(CursorStyle.DEFAULT_USER_SHAPE)
            self.styled_editor_view.flush()

    def handle_event(self, event: EditorEvent) -> LineEditorResult | None:
        """Apply one event; return the result if the event ends the line."""
        status = self._apply_event(event)
        return None if isinstance(status, _EventStatus) else status

    def _read_line_loop(self) -> LineEditorResult:
        prompt_buffer = self.prompt.prompt()
        _, row_start = self.terminal.cursor_position()
        self.styled_editor_view.start_position = (len(prompt_buffer), row_start)
        self.styled_editor_view.render_prompt_buffer(prompt_buffer)

        buffer = self.editor.buffer
        while True:
            try:
                events = self._next_events()
            except EOFError:
                return EndTerminalSession()

            length_before = len(buffer)
            redraw = True
            for event in events:
                status = self._apply_event(event)
                if not isinstance(status, _EventStatus):
                    return status
                if status in _SKIP_REDRAW:
                    redraw = False
                    break
            if not redraw:
                continue

            if self.auto_pair is not None and length_before < len(buffer):
                self.auto_pair.complete_pair(buffer)

            buffer.reset_styles()
            for highlighter in self.highlighters:
                highlighter.highlight(buffer)
            self._apply_visual_selection()
            self.styled_editor_view.render_line_buffer(buffer)

            if buffer.is_cursor_at_the_end():
                for hinter in self.hinters:
                    hint = hinter.hint(buffer)
                    if hint is not None:
                        self.styled_editor_view.render_hint(hint)
                        break

    def _next_events(self) -> list[EditorEvent]:
        """Read input until it yields events to apply (possibly none for a filtered key)."""
        while True:
            event = self.terminal.read_event()
            if isinstance(event, PasteEvent):
                return [Edit([InsertString(event.text)])]
            if (
                isinstance(event.code, str)
                and event.modifiers in (KeyModifiers.NONE, KeyModifiers.SHIFT)
                and event.kind is KeyEventKind.PRESS
            ):
                if filter_input(event.code, self.input_filter):
                    return [Edit([InsertChar(event.code)])]
                return []
            binding = self.keybindings.find_binding(KeyCombination.from_key_event(event))
            if binding is not None:
                return [binding]

    def _selection_bounds(self) -> tuple[int, int]:
        return min(self.selected_start, self.selected_end), max(self.selected_start, self.selected_end)

    def _has_selection(self) -> bool:
        return self.selected_start != self.selected_end

    def _apply_event(self, event: EditorEvent) -> _EventStatus | LineEditorResult:
        buffer = self.editor.buffer

        if isinstance(event, Edit):
            for command in event.commands:
                if (
                    self.surround_selection
                    and self._has_selection()
                    and isinstance(command, InsertChar)
                    and command.ch in _SURROUND_PAIRS
                ):
                    self._apply_surround_selection(command.ch, _SURROUND_PAIRS[command.ch])
                    return _EventStatus.EDIT_HANDLED
                self.editor.run_edit_command(command)
            self._reset_selection_range()
            return _EventStatus.EDIT_HANDLED

        if isinstance(event, Movement):
            for command in event.commands:
                self.editor.run_movement_command(command)
            self._reset_selection_range()
            return _EventStatus.MOVEMENT_HANDLED

        view = self.auto_complete_view
        match event:
            case LineEditorEvent.ENTER:
                if view.visible:
                    suggestion = view.selected_element()
                    if suggestion is not None:
                        self.editor.run_edit_command(DeleteSpan(suggestion.span.start, suggestion.span.end))
                        self.editor.run_edit_command(InsertString(suggestion.content.literal()))
                        view.clear()
                        view.visible = False
                        return _EventStatus.SELECTION_HANDLED
                line = buffer.literal()
                self._reset_selection_range()
                buffer.clear()
                return Success(line)
            case LineEditorEvent.UP:
                if view.visible:
                    view.focus_previous()
                    view.render()
                    return _EventStatus.AUTO_COMPLETE_HANDLED
                return _EventStatus.INAPPLICABLE
            case LineEditorEvent.DOWN:
                if view.visible:
                    view.focus_next()
                    view.clear()
                    view.render()
                    return _EventStatus.AUTO_COMPLETE_HANDLED
                return _EventStatus.INAPPLICABLE
            case LineEditorEvent.LEFT:
                self.editor.run_movement_command(MoveLeftChar())
                self._reset_selection_range()
                return _EventStatus.MOVEMENT_HANDLED
            case LineEditorEvent.RIGHT:
                self.editor.run_movement_command(MoveRightChar())
                self._reset_selection_range()
                return _EventStatus.MOVEMENT_HANDLED
            case LineEditorEvent.DELETE:
                if self._has_selection():
                    self._delete_selected_text()
                else:
                    self.editor.run_edit_command(DeleteRightChar())
                return _EventStatus.EDIT_HANDLED
            case LineEditorEvent.BACKSPACE:
                if self._has_selection():
                    self._delete_selected_text()
                else:
                    self.editor.run_edit_command(DeleteLeftChar())
                return _EventStatus.EDIT_HANDLED
            case LineEditorEvent.SELECT_LEFT:
                if self.selected_end < 1:
                    return _EventStatus.INAPPLICABLE
                self.selected_end -= 1
                return _EventStatus.SELECTION_HANDLED
            case LineEditorEvent.SELECT_RIGHT:
                if self.selected_end > len(buffer):
                    return _EventStatus.INAPPLICABLE
                self.selected_end += 1
                return _EventStatus.SELECTION_HANDLED
            case LineEditorEvent.SELECT_ALL:
                self.selected_start = 0
                self.selected_end = len(buffer)
                return _EventStatus.SELECTION_HANDLED
            case LineEditorEvent.CUT_SELECTED:
                if self._has_selection():
                    start, end = self._selection_bounds()
                    text = buffer.sub_string(start, end)
                    if text is not None:
                        self.clipboard.set_contents(text)
                        buffer.delete_range(start, end)
                        self._reset_selection_range()
                        return _EventStatus.GENERAL_HANDLED
                return _EventStatus.INAPPLICABLE
            case LineEditorEvent.COPY_SELECTED:
                if self._has_selection():
                    text = buffer.sub_string(*self._selection_bounds())
                    if text is not None:
                        self.clipboard.set_contents(text)
                        return _EventStatus.GENERAL_HANDLED
                return _EventStatus.INAPPLICABLE
            case LineEditorEvent.PASTE:
                try:
                    content = self.clipboard.get_contents()
                except LookupError:
                    return _EventStatus.INAPPLICABLE
                if self._has_selection():
                    self._delete_selected_text()
                self.editor.run_edit_command(InsertString(content))
                return _EventStatus.GENERAL_HANDLED
            case LineEditorEvent.TOGGLE_AUTO_COMPLETE:
                return self._toggle_auto_complete()
        return _EventStatus.INAPPLICABLE

    def _toggle_auto_complete(self) -> _EventStatus:
        view = self.auto_complete_view
        if view.visible:
            view.clear()
            view.visible = False
            return _EventStatus.INAPPLICABLE

        if self.completer is None:
            return _EventStatus.INAPPLICABLE
        suggestions = self.completer.complete(self.editor.buffer)
        if not suggestions:
            return _EventStatus.INAPPLICABLE

        prompt_width = len(self.prompt.prompt())
        _, row = self.terminal.cursor_position()

        view.focus_style = Style(background=Color.BLUE)
        view.reset()
        view.set_elements(suggestions)
        view.clear()
        view.render()
        view.visible = True

        _, max_row = self.terminal.size()
        if row + len(view) > max_row:
            new_start_row = max(max_row - 2 - len(view), 0)
            self.styled_editor_view.start_position = (prompt_width, new_start_row)
        return _EventStatus.AUTO_COMPLETE_HANDLED

    def _apply_visual_selection(self) -> None:
        if not self._has_selection() or self.selection_style is None:
            return
        start, end = self._selection_bounds()
        self.editor.buffer.style_range(start, end, self.selection_style)

    def _apply_surround_selection(self, opening: str, closing: str) -> None:
        start, end = self._selection_bounds()
        buffer = self.editor.buffer
        buffer.position = start
        buffer.insert_char(opening)
        buffer.position = end + 1
        buffer.insert_char(closing)
        buffer.position = start

    def _delete_selected_text(self) -> None:
        if not self._has_selection():
            return
        start, end = self._selection_bounds()
        self.editor.run_edit_command(DeleteSpan(start, end))
        self.editor.buffer.position = start
        self._reset_selection_range()

    def _reset_selection_range(self) -> None:
        position = self.editor.buffer.position
        self.selected_start = position
        self.selected_end = position