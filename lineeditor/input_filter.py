"""Rules that decide which typed characters are accepted."""

from __future__ import annotations

import enum
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union


class InputFilter(enum.Enum):
    """Built-in character classes."""

    ALPHABETIC = enum.auto()
    ALPHA_NUMERIC = enum.auto()
    DIGIT = enum.auto()
    TEXT = enum.auto()
    HEX_DIGIT = enum.auto()
    WHITESPACE = enum.auto()
    PUNCTUATION = enum.auto()


@dataclass(frozen=True)
class Not:
    """Accept everything the wrapped filter rejects."""

    input_filter: AnyFilter


@dataclass(frozen=True)
class Options:
    """Accept a character if any of the filters accepts it."""

    filters: tuple[AnyFilter, ...]

    def __init__(self, filters: Iterable[AnyFilter]) -> None:
        object.__setattr__(self, "filters", tuple(filters))


@dataclass(frozen=True)
class Custom:
    """Accept a character if the predicate returns true."""

    predicate: Callable[[str], bool]


AnyFilter = Union[InputFilter, Not, Options, Custom]


def filter_input(ch: str, input_filter: AnyFilter) -> bool:
    """Return True if ch matches the rules of input_filter."""
    match input_filter:
        case InputFilter.ALPHABETIC:
            return ch.isalpha()
        case InputFilter.ALPHA_NUMERIC:
            return ch.isalpha() or ch.isnumeric()
        case InputFilter.DIGIT:
            return ch.isnumeric()
        case InputFilter.TEXT:
            return True
        case InputFilter.HEX_DIGIT:
            return ch in string.hexdigits
        case InputFilter.WHITESPACE:
            return ch.isspace()
        case InputFilter.PUNCTUATION:
            return ch in string.punctuation
        case Not(inner):
            return not filter_input(ch, inner)
        case Options(filters):
            return any(filter_input(ch, option) for option in filters)
        case Custom(predicate):
            return bool(predicate(ch))
    raise TypeError(f"not an input filter: {input_filter!r}")