from lineeditor.autopair import DEFAULT_PAIRS, AutoPair, DefaultAutoPair
from lineeditor.styled_buffer import StyledBuffer

import pytest


@pytest.mark.parametrize("opening, closing", DEFAULT_PAIRS)
def test_default_pairs_are_closed(opening, closing):
    buffer = StyledBuffer("x" + opening)
    DefaultAutoPair().complete_pair(buffer)
    assert buffer.literal() == "x" + opening + closing
    assert buffer.position == 2


def test_nothing_happens_when_cursor_not_at_end():
    buffer = StyledBuffer("(a")
    buffer.position = 1
    DefaultAutoPair().complete_pair(buffer)
    assert buffer.literal() == "(a"
    assert buffer.position == 1


def test_empty_buffer_is_left_alone():
    buffer = StyledBuffer()
    DefaultAutoPair().complete_pair(buffer)
    assert len(buffer) == 0
    assert buffer.position == 0


def test_non_opening_character_is_left_alone():
    buffer = StyledBuffer("ab")
    DefaultAutoPair().complete_pair(buffer)
    assert buffer.literal() == "ab"


def test_custom_pairs_replace_defaults():
    auto_pair = DefaultAutoPair({"<": ">"})
    angle = StyledBuffer("<")
    auto_pair.complete_pair(angle)
    paren = StyledBuffer("(")
    auto_pair.complete_pair(paren)
    assert angle.literal() == "<>"
    assert paren.literal() == "("


def test_auto_pair_is_abstract():
    with pytest.raises(TypeError):
        AutoPair()