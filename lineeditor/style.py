"""Colours, text attributes and per-character styles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


class Color(enum.Enum):
    """Named terminal colours; the value is the SGR foreground code."""

    RESET = 39
    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    DARK_YELLOW = 33
    DARK_BLUE = 34
    DARK_MAGENTA = 35
    DARK_CYAN = 36
    GREY = 37
    DARK_GREY = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97


@dataclass(frozen=True)
class Rgb:
    """A true-colour value with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


class Attribute(enum.Enum):
    """Text attributes; the value is the SGR code that turns them on."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINED = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    REVERSE = 7
    HIDDEN = 8
    CROSSED_OUT = 9
    DOUBLE_UNDERLINED = 21


AnyColor = Union[Color, Rgb]


@dataclass
class Style:
    """Foreground and background colours plus a list of attributes."""

    foreground: AnyColor | None = None
    background: AnyColor | None = None
    attributes: list[Attribute] = field(default_factory=list)

    def add_attribute(self, attribute: Attribute) -> None:
        """Append an attribute to this style."""
        self.attributes.append(attribute)

    def clear_attributes(self) -> None:
        """Remove every attribute from this style."""
        self.attributes.clear()