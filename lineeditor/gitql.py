"""GitQL-flavoured highlighters, hinter, completer and prompt, plus a demo command."""

from __future__ import annotations

import argparse
import os
import string
from collections.abc import Sequence

from .autopair import DefaultAutoPair
from .completion import Completer, Span, Suggestion
from .engine import LineEditor, Success
from .event import LineEditorEvent
from .hooks import Highlighter, Hinter, Prompt, StringPrompt
from .keybindings import KeyCombination
from .keys import KeyCode
from .style import Color, Rgb, Style
from .styled_buffer import StyledBuffer

GITQL_RESERVED_KEYWORDS: tuple[str, ...] = (
    "set", "select", "distinct", "from", "group", "where", "having", "offset", "limit", "order",
    "by", "case", "when", "then", "else", "end", "between", "in", "is", "not", "like", "glob",
    "or", "and", "xor", "true", "false", "null", "as", "asc", "desc",
)

_OPEN_BRACKETS = "(<[{"
_CLOSE_BRACKETS = ")>]}"
_BRACKET_COLORS = (Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN)


def _end_of_string(chars: Sequence[str], start: int) -> int:
    """Index just past the string literal whose opening quote is at start."""
    i = start + 1
    while i < len(chars) and chars[i] != '"':
        i += 1
    if i < len(chars):
        i += 1
    return i


class GitQLHighlighter(Highlighter):
    """Colours reserved keywords magenta and string literals yellow."""

    def highlight(self, buffer: StyledBuffer) -> None:
        chars = buffer.chars
        keyword_style = Style(foreground=Color.MAGENTA)
        string_style = Style(foreground=Color.YELLOW)
        i = 0
        while i < len(chars):
            ch = chars[i]
            if ch == '"':
                end = _end_of_string(chars, i)
                buffer.style_range(i, end, string_style)
                i = end
                continue
            if ch.isalpha():
                start = i
                while i < len(chars) and (chars[i].isalpha() or chars[i].isnumeric() or chars[i] == "_"):
                    i += 1
                word = "".join(chars[start:i]).lower()
                if word in GITQL_RESERVED_KEYWORDS:
                    buffer.style_range(start, i, keyword_style)
                continue
            i += 1


class HexColorHighlighter(Highlighter):
    """Paints each #rrggbb value with its own colour as background."""

    def highlight(self, buffer: StyledBuffer) -> None:
        chars = buffer.chars
        i = 0
        while i < len(chars):
            if chars[i] == '"':
                i = _end_of_string(chars, i)
                continue
            if chars[i] == "#" and i + 6 < len(chars):
                start = i
                i += 1
                digits = chars[i:i + 6]
                if any(d not in string.hexdigits for d in digits):
                    return
                value = int("".join(digits), 16)
                style = Style(background=Rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
                buffer.style_range(start, start + 7, style)
            i += 1


class MatchingBracketsHighlighter(Highlighter):
    """Gives each pair of brackets its own colour, cycling through four colours."""

    def highlight(self, buffer: StyledBuffer) -> None:
        chars = buffer.chars
        stack: list[Color] = []
        color_index = 0
        i = 0
        while i < len(chars):
            ch = chars[i]
            if ch == '"':
                i = _end_of_string(chars, i)
                continue
            if ch in _OPEN_BRACKETS:
                if color_index >= len(_BRACKET_COLORS):
                    color_index = 0
                color = _BRACKET_COLORS[color_index]
                color_index += 1
                stack.append(color)
                buffer.style_char(i, Style(foreground=color))
            elif ch in _CLOSE_BRACKETS:
                color = stack.pop() if stack else _BRACKET_COLORS[0]
                buffer.style_char(i, Style(foreground=color))
            i += 1


class GitQLHinter(Hinter):
    """Hints the rest of the first reserved keyword that completes the last word."""

    def hint(self, buffer: StyledBuffer) -> StyledBuffer | None:
        keyword = buffer.last_alphabetic_keyword()
        if keyword is None:
            return None
        lowered = keyword.lower()
        for word in GITQL_RESERVED_KEYWORDS:
            if word.startswith(lowered):
                hint = StyledBuffer()
                hint.insert_styled_string(word[len(keyword):], Style(foreground=Color.DARK_GREY))
                return hint
        return None


class FixedCompleter(Completer):
    """Suggests reserved keywords that start with the last word of the line."""

    def complete(self, buffer: StyledBuffer) -> list[Suggestion]:
        if buffer.position != len(buffer):
            return []
        keyword = buffer.last_alphabetic_keyword()
        if keyword is None:
            return []
        end = len(buffer)
        return [
            Suggestion(content=StyledBuffer(word), span=Span(end - len(keyword), end))
            for word in GITQL_RESERVED_KEYWORDS
            if word.startswith(keyword)
        ]


class CurrentPathPrompt(Prompt):
    """A prompt showing the current working directory."""

    def prompt(self) -> StyledBuffer:
        try:
            path = os.getcwd()
        except OSError:
            path = ""
        return StyledBuffer(f"📁 {path}> ")


def main(argv: Sequence[str] | None = None) -> int:
    """Read one GitQL line with highlighting, hints and completion, then print it."""
    parser = argparse.ArgumentParser(prog="lineeditor", description="Read one line of GitQL.")
    parser.add_argument("--prompt", help="fixed prompt text (default: the current directory)")
    args = parser.parse_args(argv)

    prompt: Prompt = StringPrompt(args.prompt) if args.prompt is not None else CurrentPathPrompt()
    line_editor = LineEditor(prompt)
    line_editor.auto_pair = DefaultAutoPair()
    line_editor.highlighters.extend(
        [GitQLHighlighter(), MatchingBracketsHighlighter(), HexColorHighlighter()]
    )
    line_editor.hinters.append(GitQLHinter())
    line_editor.completer = FixedCompleter()

    bindings = line_editor.keybindings
    bindings.register_binding(KeyCombination(KeyCode.TAB), LineEditorEvent.TOGGLE_AUTO_COMPLETE)
    bindings.register_common_control_bindings()
    bindings.register_common_navigation_bindings()
    bindings.register_common_edit_bindings()
    bindings.register_common_selection_bindings()

    result = line_editor.read_line()
    if isinstance(result, Success):
        print(f"Line {result.line}")
        return 0
    return 1