import io

import pytest

from lineeditor.style import Color, Style
from lineeditor.styled_buffer import StyledBuffer
from lineeditor.styled_editor_view import StyledEditorView
from lineeditor.terminal import CursorStyle, Terminal, render_styled_buffer


@pytest.fixture
def sized(monkeypatch):
    monkeypatch.setenv("COLUMNS", "10")
    monkeypatch.setenv("LINES", "5")


def _view(input_text=""):
    return StyledEditorView(Terminal(io.StringIO(input_text), io.StringIO()))


def _output(view):
    return view.terminal.output_stream.getvalue()


def test_terminal_size_taken_from_terminal(sized):
    assert _view().terminal_size == (10, 5)


def test_unknown_size_falls_back_to_zero(monkeypatch):
    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.delenv("LINES", raising=False)
    view = _view()
    assert view.terminal_size == (0, 0)
    assert view.number_of_lines(1000) == 1


def test_number_of_lines_grows_with_wrapping(sized):
    view = _view()
    view.start_position = (2, 0)
    assert view.number_of_lines(0) == 1
    assert view.number_of_lines(13) == view.number_of_lines(3) + 1


def test_cursor_column_wraps_by_terminal_width(sized):
    first = _view()
    first.start_position = (2, 0)
    first.update_cursor_position(3)
    first.flush()
    second = _view()
    second.start_position = (2, 0)
    second.update_cursor_position(13)
    second.flush()
    assert _output(first) == _output(second)
    assert _output(first).endswith("G")


def test_render_line_buffer_clears_and_draws(sized):
    view = _view()
    view.start_position = (2, 1)
    buffer = StyledBuffer("hi")
    buffer.style_char(0, Style(foreground=Color.RED))
    view.render_line_buffer(buffer)
    output = _output(view)
    assert "\x1b[J" in output
    assert render_styled_buffer(buffer) in output
    assert output.index("\x1b[J") < output.index(render_styled_buffer(buffer))


def test_render_prompt_buffer_writes_prompt(sized):
    view = _view()
    prompt = StyledBuffer("prompt> ")
    view.render_prompt_buffer(prompt)
    assert _output(view) == render_styled_buffer(prompt)


def test_render_hint_restores_column(sized):
    view = _view("\x1b[1;8R")
    hint = StyledBuffer("lect")
    view.render_hint(hint)
    output = _output(view)
    assert output.startswith("\x1b[6n")
    assert render_styled_buffer(hint) in output
    assert output.endswith("\x1b[8G")


def test_set_cursor_style_is_queued_until_flush(sized):
    view = _view()
    view.set_cursor_style(CursorStyle.STEADY_BAR)
    assert _output(view) == ""
    view.flush()
    assert _output(view) == CursorStyle.STEADY_BAR.value