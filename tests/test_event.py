import dataclasses

import pytest

from lineeditor.event import (
    ClearBuffer,
    DeleteSpan,
    Edit,
    InsertChar,
    InsertString,
    LineEditorEvent,
    Movement,
    MoveToPosition,
    MoveToStart,
)


def test_edit_stores_commands_as_tuple():
    commands = [InsertChar("a"), InsertString("bc")]
    event = Edit(commands)
    assert event.commands == tuple(commands)


def test_movement_accepts_generator():
    event = Movement(MoveToPosition(i) for i in range(3))
    assert event.commands == (MoveToPosition(0), MoveToPosition(1), MoveToPosition(2))


def test_events_are_hashable_and_compare_by_value():
    events = {
        Edit([InsertChar("a")]),
        Edit([InsertChar("a")]),
        Movement([MoveToStart()]),
        LineEditorEvent.ENTER,
    }
    assert len(events) == 3
    assert Edit([ClearBuffer()]) == Edit((ClearBuffer(),))


def test_commands_are_immutable():
    command = DeleteSpan(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.start = 0
    assert command.start == 1
    assert command == DeleteSpan(1, 2)


@pytest.mark.parametrize("text", ["", "ab"])
def test_insert_char_needs_single_character(text):
    with pytest.raises(ValueError):
        InsertChar(text)


def test_simple_events_are_distinct():
    members = list(LineEditorEvent)
    assert len({member.value for member in members}) == len(members)
    edits = {Edit([InsertChar(ch)]) for ch in "abc"}
    assert len(edits | set(members)) == len(members) + 3