import pytest

from lineeditor.hooks import Highlighter, Hinter, Prompt, StringPrompt
from lineeditor.style import Color, Style
from lineeditor.styled_buffer import StyledBuffer


class _FirstCharHighlighter(Highlighter):
    def highlight(self, buffer):
        if len(buffer):
            buffer.style_char(0, Style(foreground=Color.RED))


@pytest.mark.parametrize("base", [Highlighter, Hinter, Prompt])
def test_bases_are_abstract(base):
    with pytest.raises(TypeError):
        base()


def test_string_prompt_returns_its_text():
    prompt = StringPrompt("prompt> ")
    buffer = prompt.prompt()
    assert buffer.literal() == "prompt> "
    assert len(buffer) == len("prompt> ")


def test_string_prompt_returns_fresh_buffer_each_time():
    prompt = StringPrompt("gql> ")
    first = prompt.prompt()
    first.insert_string("changed")
    assert prompt.prompt().literal() == "gql> "


def test_highlighter_subclass_styles_buffer():
    buffer = StyledBuffer("ab")
    _FirstCharHighlighter().highlight(buffer)
    assert buffer.styles[0].foreground is Color.RED
    assert buffer.styles[1] == Style()