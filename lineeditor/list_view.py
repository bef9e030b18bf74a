"""Interface of a view that shows a list of elements with one in focus."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from .style import Style

T = TypeVar("T")


class ListView(ABC, Generic[T]):
    """A visible list of elements with a focused one."""

    visible: bool
    focus_position: int
    focus_style: Style

    @abstractmethod
    def render(self) -> None:
        """Draw the list below the cursor."""

    @abstractmethod
    def clear(self) -> None:
        """Erase the drawn list."""

    @abstractmethod
    def focus_next(self) -> None:
        """Move focus to the next element."""

    @abstractmethod
    def focus_previous(self) -> None:
        """Move focus to the previous element."""

    @abstractmethod
    def clear_focus(self) -> None:
        """Move focus back to the first element."""

    @abstractmethod
    def reset(self) -> None:
        """Remove all elements and clear the focus."""

    @abstractmethod
    def set_elements(self, elements: Iterable[T]) -> None:
        """Append elements to the list."""

    @abstractmethod
    def clear_elements(self) -> None:
        """Remove all elements."""

    @abstractmethod
    def selected_element(self) -> T | None:
        """Return the focused element, or None."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements."""