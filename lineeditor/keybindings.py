"""Mapping from key combinations to editor events."""

from __future__ import annotations

from dataclasses import dataclass, field

from .event import EditorEvent, LineEditorEvent, Movement, MoveLeftWord, MoveRightWord, MoveToEnd, MoveToStart
from .keys import Key, KeyCode, KeyEvent, KeyEventKind, KeyModifiers, _check_key


@dataclass(frozen=True)
class KeyCombination:
    """A key with its modifiers and event kind."""

    key_code: Key
    modifier: KeyModifiers = KeyModifiers.NONE
    key_kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self) -> None:
        _check_key(self.key_code)

    @classmethod
    def from_key_event(cls, key_event: KeyEvent) -> KeyCombination:
        return cls(key_event.code, key_event.modifiers, key_event.kind)


@dataclass
class Keybindings:
    """Key combinations bound to editor events."""

    bindings: dict[KeyCombination, EditorEvent] = field(default_factory=dict)

    def register_binding(self, key_combination: KeyCombination, event: EditorEvent) -> None:
        self.bindings[key_combination] = event

    def find_binding(self, key_combination: KeyCombination) -> EditorEvent | None:
        return self.bindings.get(key_combination)

    def register_common_control_bindings(self) -> None:
        """Bind Enter and Esc."""
        self.register_binding(KeyCombination(KeyCode.ENTER), LineEditorEvent.ENTER)
        self.register_binding(KeyCombination(KeyCode.ESC), LineEditorEvent.ESC)

    def register_common_navigation_bindings(self) -> None:
        """Bind the arrow keys, Ctrl+Left/Right, Home and End."""
        self.register_binding(KeyCombination(KeyCode.UP), LineEditorEvent.UP)
        self.register_binding(KeyCombination(KeyCode.DOWN), LineEditorEvent.DOWN)
        self.register_binding(KeyCombination(KeyCode.LEFT), LineEditorEvent.LEFT)
        self.register_binding(KeyCombination(KeyCode.RIGHT), LineEditorEvent.RIGHT)
        self.register_binding(KeyCombination(KeyCode.HOME), Movement([MoveToStart()]))
        self.register_binding(KeyCombination(KeyCode.END), Movement([MoveToEnd()]))
        self.register_binding(
            KeyCombination(KeyCode.LEFT, KeyModifiers.CONTROL), Movement([MoveLeftWord()])
        )
        self.register_binding(
            KeyCombination(KeyCode.RIGHT, KeyModifiers.CONTROL), Movement([MoveRightWord()])
        )

    def register_common_edit_bindings(self) -> None:
        """Bind Backspace and Delete."""
        self.register_binding(KeyCombination(KeyCode.BACKSPACE), LineEditorEvent.BACKSPACE)
        self.register_binding(KeyCombination(KeyCode.DELETE), LineEditorEvent.DELETE)

    def register_common_selection_bindings(self) -> None:
        """Bind Shift+Left/Right and Ctrl+A."""
        self.register_binding(KeyCombination(KeyCode.LEFT, KeyModifiers.SHIFT), LineEditorEvent.SELECT_LEFT)
        self.register_binding(KeyCombination(KeyCode.RIGHT, KeyModifiers.SHIFT), LineEditorEvent.SELECT_RIGHT)
        self.register_binding(KeyCombination("a", KeyModifiers.CONTROL), LineEditorEvent.SELECT_ALL)