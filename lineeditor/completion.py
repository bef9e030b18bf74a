"""Suggestions for completing the current line."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .styled_buffer import StyledBuffer


@dataclass
class Span:
    """A range [start, end) of positions in the line."""

    start: int
    end: int


@dataclass
class Suggestion:
    """Replacement content for a span of the line."""

    content: StyledBuffer
    span: Span


class Completer(ABC):
    """Produces suggestions for the current buffer."""

    @abstractmethod
    def complete(self, buffer: StyledBuffer) -> list[Suggestion]:
        """Return the suggestions for buffer, possibly none."""