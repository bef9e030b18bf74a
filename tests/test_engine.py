import io

import pytest

from lineeditor.completion import Completer, Span, Suggestion
from lineeditor.autopair import DefaultAutoPair
from lineeditor.engine import EndTerminalSession, LineEditor, Success
from lineeditor.event import Edit, InsertChar, InsertString, LineEditorEvent, Movement, MoveToStart
from lineeditor.hooks import Highlighter, Hinter, StringPrompt
from lineeditor.input_filter import InputFilter
from lineeditor.style import Color, Style
from lineeditor.styled_buffer import StyledBuffer
from lineeditor.terminal import Clipboard, CursorStyle, Terminal

REPORT = "\x1b[1;1R"


def make_editor(text=""):
    output = io.StringIO()
    terminal = Terminal(io.StringIO(text), output)
    editor = LineEditor(StringPrompt("> "), terminal, Clipboard())
    editor.keybindings.register_common_control_bindings()
    return editor, output


def type_text(editor, text):
    editor.handle_event(Edit([InsertString(text)]))


class _ListCompleter(Completer):
    def __init__(self, words):
        self.words = words

    def complete(self, buffer):
        return [Suggestion(StyledBuffer(word), Span(0, len(buffer))) for word in self.words]


class _RedHighlighter(Highlighter):
    def highlight(self, buffer):
        buffer.style_all(Style(foreground=Color.RED))


class _SuffixHinter(Hinter):
    def hint(self, buffer):
        if buffer.literal() == "he":
            return StyledBuffer("llo")
        return None


def test_insert_and_enter_returns_line_and_clears():
    editor, _ = make_editor()
    type_text(editor, "abc")
    assert editor.editor.buffer.literal() == "abc"
    assert editor.handle_event(LineEditorEvent.ENTER) == Success("abc")
    assert len(editor.editor.buffer) == 0


def test_select_all_then_backspace_deletes_everything():
    editor, _ = make_editor()
    type_text(editor, "hello")
    assert editor.handle_event(LineEditorEvent.SELECT_ALL) is None
    editor.handle_event(LineEditorEvent.BACKSPACE)
    assert editor.editor.buffer.literal() == ""
    assert editor.editor.buffer.position == 0


def test_cut_selected_moves_text_to_clipboard():
    editor, _ = make_editor()
    type_text(editor, "hello")
    editor.handle_event(Movement([MoveToStart()]))
    editor.handle_event(LineEditorEvent.SELECT_RIGHT)
    editor.handle_event(LineEditorEvent.SELECT_RIGHT)
    editor.handle_event(LineEditorEvent.CUT_SELECTED)
    assert editor.clipboard.get_contents() == "he"
    assert editor.editor.buffer.literal() == "llo"


def test_copy_selected_keeps_buffer():
    editor, _ = make_editor()
    type_text(editor, "hello")
    editor.handle_event(LineEditorEvent.SELECT_ALL)
    editor.handle_event(LineEditorEvent.COPY_SELECTED)
    assert editor.clipboard.get_contents() == "hello"
    assert editor.editor.buffer.literal() == "hello"


def test_copy_without_selection_leaves_clipboard_empty():
    editor, _ = make_editor()
    type_text(editor, "hello")
    editor.handle_event(LineEditorEvent.COPY_SELECTED)
    with pytest.raises(LookupError):
        editor.clipboard.get_contents()


def test_paste_with_empty_clipboard_changes_nothing():
    editor, _ = make_editor()
    type_text(editor, "ab")
    assert editor.handle_event(LineEditorEvent.PASTE) is None
    assert editor.editor.buffer.literal() == "ab"


def test_paste_replaces_selection():
    editor, _ = make_editor()
    editor.clipboard.set_contents("XY")
    type_text(editor, "abc")
    editor.handle_event(LineEditorEvent.SELECT_LEFT)
    editor.handle_event(LineEditorEvent.PASTE)
    assert editor.editor.buffer.literal() == "abXY"


def test_surround_selection_wraps_selected_text():
    editor, _ = make_editor()
    editor.surround_selection = True
    type_text(editor, "abc")
    editor.handle_event(LineEditorEvent.SELECT_ALL)
    editor.handle_event(Edit([InsertChar("(")]))
    assert editor.editor.buffer.literal() == "(abc)"
    assert editor.editor.buffer.position == 0


def test_without_surround_selection_pair_is_inserted():
    editor, _ = make_editor()
    type_text(editor, "abc")
    editor.handle_event(LineEditorEvent.SELECT_ALL)
    editor.handle_event(Edit([InsertChar("(")]))
    assert editor.editor.buffer.literal() == "abc("


def test_left_and_right_move_cursor():
    editor, _ = make_editor()
    type_text(editor, "abc")
    editor.handle_event(LineEditorEvent.LEFT)
    editor.handle_event(LineEditorEvent.LEFT)
    assert editor.editor.buffer.position == 1
    editor.handle_event(LineEditorEvent.RIGHT)
    assert editor.editor.buffer.position == 2


def test_toggle_without_completer_keeps_view_hidden():
    editor, _ = make_editor()
    type_text(editor, "se")
    editor.handle_event(LineEditorEvent.TOGGLE_AUTO_COMPLETE)
    assert editor.auto_complete_view.visible is False


def test_auto_complete_enter_replaces_span(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    editor, _ = make_editor(REPORT * 2)
    editor.completer = _ListCompleter(["select"])
    type_text(editor, "sel")
    editor.handle_event(LineEditorEvent.TOGGLE_AUTO_COMPLETE)
    assert editor.auto_complete_view.visible is True
    assert editor.handle_event(LineEditorEvent.ENTER) is None
    assert editor.editor.buffer.literal() == "select"
    assert editor.auto_complete_view.visible is False
    assert editor.handle_event(LineEditorEvent.ENTER) == Success("select")


def test_auto_complete_down_selects_next(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    editor, _ = make_editor(REPORT * 3)
    editor.completer = _ListCompleter(["set", "select"])
    type_text(editor, "se")
    editor.handle_event(LineEditorEvent.TOGGLE_AUTO_COMPLETE)
    editor.handle_event(LineEditorEvent.DOWN)
    editor.handle_event(LineEditorEvent.ENTER)
    assert editor.editor.buffer.literal() == "select"


def test_read_line_returns_typed_text():
    editor, output = make_editor("ab\r" + REPORT)
    assert editor.read_line() == Success("ab")
    assert "\x1b[?2004h" in output.getvalue()


def test_read_line_end_of_input():
    editor, _ = make_editor(REPORT)
    assert editor.read_line() == EndTerminalSession()


def test_read_line_applies_input_filter():
    editor, _ = make_editor("a1b2\r" + REPORT)
    editor.input_filter = InputFilter.DIGIT
    assert editor.read_line() == Success("12")


def test_read_line_auto_pair():
    editor, _ = make_editor("(\r" + REPORT)
    editor.auto_pair = DefaultAutoPair()
    assert editor.read_line() == Success("()")


def test_read_line_paste_event():
    editor, _ = make_editor("\x1b[200~hi there\x1b[201~\r" + REPORT)
    assert editor.read_line() == Success("hi there")


def test_read_line_runs_highlighters():
    editor, output = make_editor("a\r" + REPORT)
    editor.highlighters.append(_RedHighlighter())
    assert editor.read_line() == Success("a")
    assert f"\x1b[{Color.RED.value}ma" in output.getvalue()


def test_read_line_sets_and_restores_cursor_style():
    editor, output = make_editor("\r" + REPORT)
    editor.cursor_style = CursorStyle.BLINKING_BLOCK
    assert editor.read_line() == Success("")
    text = output.getvalue()
    assert CursorStyle.BLINKING_BLOCK.value in text
    assert text.rindex(CursorStyle.DEFAULT_USER_SHAPE.value) > text.index(CursorStyle.BLINKING_BLOCK.value)