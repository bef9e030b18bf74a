"""A rich line editor for the terminal with highlighting, hints, auto pairs, selection and completion."""

__version__ = "0.4.0"