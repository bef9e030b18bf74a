# lineeditor

A line editor for the terminal. It reads one line of input from the user and
offers more than plain input does:

- syntax highlighting through pluggable highlighters
- hints shown after the cursor when it sits at the end of the line
- auto pairing of brackets and quotes
- visual selection, cut, copy and paste, and surrounding a selection with a pair
- a drop-down list of completion suggestions
- input filters that accept only certain characters
- configurable key bindings and cursor shape

It uses only the standard library. Raw mode relies on `termios`, so it is
meant for POSIX terminals.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading a line

```python
from lineeditor.engine import LineEditor, Success
from lineeditor.hooks import StringPrompt

editor = LineEditor(StringPrompt("prompt> "))
editor.keybindings.register_common_control_bindings()
result = editor.read_line()
if isinstance(result, Success):
    print(result.line)
```

`read_line()` puts the terminal into raw mode with bracketed paste for as long
as it reads, and restores it afterwards. It returns `Success` with the entered
text when Enter is pressed, or `EndTerminalSession` when the input ends.

`LineEditor(prompt, terminal=None, clipboard=None)` reads from standard input
and draws on standard error unless a `lineeditor.terminal.Terminal` is given.
Its behaviour is set through attributes:

- `keybindings`: a `Keybindings` instance
- `input_filter`: which typed characters are accepted (`InputFilter.TEXT` by default)
- `auto_pair`: an `AutoPair` or `None`
- `highlighters`, `hinters`: lists of hooks, applied in order
- `completer`: a `Completer` or `None`; its suggestions appear in `auto_complete_view`
- `cursor_style`: a `lineeditor.terminal.CursorStyle` or `None`
- `selection_style`: the `Style` painted over the selection, or `None`
- `surround_selection`: when true, typing an opening bracket or quote while
  text is selected wraps the selection in the pair

`handle_event(event)` applies one editor event directly and returns a result
if the event ends the line.

## Key bindings

`Keybindings` maps a `KeyCombination` (key code, modifiers, event kind) to an
editor event: a `LineEditorEvent`, or an `Edit` / `Movement` carrying
commands from `lineeditor.event`. Common sets can be registered in one call:

- `register_common_control_bindings()`: Enter and Esc
- `register_common_navigation_bindings()`: arrow keys, Home, End, Ctrl+Left and Ctrl+Right
- `register_common_edit_bindings()`: Backspace and Delete
- `register_common_selection_bindings()`: Shift+Left, Shift+Right and Ctrl+A

Further bindings are added with `register_binding(key_combination, event)`
and looked up with `find_binding(key_combination)`. Cut, copy, paste and
toggling the completion list (`LineEditorEvent.CUT_SELECTED`,
`COPY_SELECTED`, `PASTE`, `TOGGLE_AUTO_COMPLETE`) have no default keys:

```python
from lineeditor.event import LineEditorEvent
from lineeditor.keybindings import KeyCombination
from lineeditor.keys import KeyCode

editor.keybindings.register_binding(
    KeyCombination(KeyCode.TAB), LineEditorEvent.TOGGLE_AUTO_COMPLETE
)
```

Esc is bound but has no effect of its own.

## The styled buffer

The text being edited is a `StyledBuffer`: characters, one `Style` per
character and a cursor `position`.

```python
from lineeditor.style import Color, Style
from lineeditor.styled_buffer import StyledBuffer

buffer = StyledBuffer("select name")
buffer.last_alphabetic_keyword()   # "name"
buffer.sub_string(0, 6)            # "select"
buffer.style_range(0, 6, Style(foreground=Color.MAGENTA))
```

Colours are `Color` members or `Rgb(r, g, b)`; `Style` also holds a list of
`Attribute` values.

## Extending the editor

Subclass the hooks and override one method:

- `Highlighter.highlight(buffer)` restyles the buffer in place
- `Hinter.hint(buffer)` returns a `StyledBuffer` to show after the cursor, or `None`
- `Completer.complete(buffer)` returns a list of `Suggestion`, each with the
  content to insert and the `Span` it replaces
- `Prompt.prompt()` returns the prompt as a `StyledBuffer`; `StringPrompt`
  shows fixed text
- `AutoPair.complete_pair(buffer)` completes a pair after an insertion;
  `DefaultAutoPair` handles `()`, `{}`, `[]`, `''`, `""` and backquotes, or
  a mapping of your own

Input can be restricted with an `InputFilter`; `Not`, `Options` and `Custom`
combine or extend the built-in filters, and `filter_input(ch, input_filter)`
tells whether a character passes.

`lineeditor.terminal.decode_events(data)` turns raw terminal input into
`KeyEvent` and `PasteEvent` values, and `render_styled_buffer(buffer)` returns
the escape-coded text that draws a buffer.

## GitQL demo

`lineeditor.gitql` holds GitQL-flavoured hooks: `GitQLHighlighter`,
`HexColorHighlighter`, `MatchingBracketsHighlighter`, `GitQLHinter`,
`FixedCompleter` and `CurrentPathPrompt`. The demo command uses them all, with
keyword completion on Tab, and prints the entered line:

```
lineeditor-gitql
lineeditor-gitql --prompt "gql> "
```

Without `--prompt` the prompt shows the current directory.

## What it does not do

- There is no history: Up and Down only move through an open completion list.
- Lines are single lines; there is no multi-line editing.
- The clipboard lives inside the editor. Copying also sends the text to the
  terminal's clipboard by escape sequence, but pasting only inserts what was
  copied or cut in the same editor; pasting from the system is done through
  the terminal's own bracketed paste.