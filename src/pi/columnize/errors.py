"""Exception types raised by pi-columnize."""

from __future__ import annotations


class ColumnizeError(Exception):
    """Base class for all pi-columnize errors."""


class InvalidInputShapeError(ColumnizeError, TypeError):
    """Input was neither a text block nor a sequence of line strings."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"expected str or a sequence of str, got {type(value).__name__}"
        )


class TerminalWidthUnavailableError(ColumnizeError):
    """The terminal width provider could not report a width."""


class ConfigError(ColumnizeError, ValueError):
    """Configuration data could not be parsed."""
