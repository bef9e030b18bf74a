import pytest

from lineeditor.editor import Editor
from lineeditor.event import (
    ClearBuffer,
    DeleteLeftChar,
    DeleteRightChar,
    DeleteSpan,
    InsertChar,
    InsertString,
    MoveLeftChar,
    MoveLeftWord,
    MoveRightChar,
    MoveRightWord,
    MoveToEnd,
    MoveToPosition,
    MoveToStart,
)


def test_new_editor_is_empty():
    editor = Editor()
    assert editor.buffer.literal() == ""
    assert editor.buffer.position == 0


def test_insert_commands():
    editor = Editor()
    editor.run_edit_command(InsertString("hell"))
    editor.run_edit_command(InsertChar("o"))
    assert editor.buffer.literal() == "hello"
    assert editor.buffer.is_cursor_at_the_end()


def test_delete_commands():
    editor = Editor()
    editor.run_edit_command(InsertString("abc"))
    editor.run_edit_command(DeleteLeftChar())
    assert editor.buffer.literal() == "ab"
    editor.run_movement_command(MoveToStart())
    editor.run_edit_command(DeleteRightChar())
    assert editor.buffer.literal() == "a"


def test_delete_span_and_clear():
    editor = Editor()
    editor.run_edit_command(InsertString("hello world"))
    editor.run_edit_command(DeleteSpan(5, 11))
    assert editor.buffer.literal() == "hello"
    editor.run_edit_command(ClearBuffer())
    assert editor.buffer.literal() == ""


def test_movement_commands():
    text = "hello world"
    editor = Editor()
    editor.run_edit_command(InsertString(text))
    editor.run_movement_command(MoveLeftWord())
    assert editor.buffer.position == text.index("world")
    editor.run_movement_command(MoveLeftChar())
    assert editor.buffer.position == text.index("world") - 1
    editor.run_movement_command(MoveRightChar())
    editor.run_movement_command(MoveToStart())
    editor.run_movement_command(MoveRightWord())
    assert editor.buffer.position == text.index("world")
    editor.run_movement_command(MoveToEnd())
    assert editor.buffer.position == len(text)
    editor.run_movement_command(MoveToPosition(2))
    assert editor.buffer.position == 2


def test_commands_of_wrong_kind_raise():
    editor = Editor()
    with pytest.raises(TypeError):
        editor.run_edit_command(MoveToStart())
    with pytest.raises(TypeError):
        editor.run_movement_command(InsertChar("a"))