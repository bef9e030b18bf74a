"""Extension points: highlighters, hinters and prompts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .styled_buffer import StyledBuffer


class Highlighter(ABC):
    """Styles the characters of the current line in place."""

    @abstractmethod
    def highlight(self, buffer: StyledBuffer) -> None:
        """Apply styles to buffer."""


class Hinter(ABC):
    """Offers a hint shown after the end of the line."""

    @abstractmethod
    def hint(self, buffer: StyledBuffer) -> StyledBuffer | None:
        """Return the hint for buffer, or None if there is none."""


class Prompt(ABC):
    """Supplies the styled prompt shown before the line."""

    @abstractmethod
    def prompt(self) -> StyledBuffer:
        """Return the prompt as a styled buffer."""


class StringPrompt(Prompt):
    """A prompt made of fixed, unstyled text."""

    def __init__(self, text: str) -> None:
        self.text = text

    def prompt(self) -> StyledBuffer:
        return StyledBuffer(self.text)