"""Rendering rows into aligned text, and the public formatting entry points.

The dynamic entry point is named ``format`` after the original library's
``Format``; it shadows the builtin inside this module and in
``pi.columnize``, so import it qualified where the builtin is also needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from pi.columnize.config import Config, merge_config, resolve_config
from pi.columnize.errors import InvalidInputShapeError
from pi.columnize.layout import compute_widths
from pi.columnize.terminal import TerminalWidth
from pi.columnize.tokenize import split_lines, tokenize
from pi.columnize.width import Measure, visible_width
from pi.columnize.wrap import wrap_row


@dataclass
class FormatResult:
    """Formatted text with the column widths it was laid out with."""

    text: str
    widths: list[int] = field(default_factory=list)
    # Recovered problems, e.g. an unavailable terminal width.
    diagnostics: list[str] = field(default_factory=list)


def render_row(
    fields: Sequence[str],
    widths: Sequence[int],
    config: Config,
    measure: Measure | None = None,
) -> str:
    """Render one row as a line ending in ``\\n``.

    Every field but the last is padded to its column width and followed by
    the glue. Fields past the end of *widths* are not padded. Unset fields
    of *config* take their values from ``default_config()``.
    """
    config = resolve_config(config)
    measure = measure or config.measure or visible_width
    parts = [config.prefix]
    last = len(fields) - 1
    for i, value in enumerate(fields):
        parts.append(value)
        if i == last:
            break
        if i < len(widths):
            parts.append(" " * max(widths[i] - measure(value), 0))
        parts.append(config.glue)
    parts.append("\n")
    return "".join(parts)


def _trim_extension(fields: list[str]) -> list[str]:
    """Drop blank trailing fields of an extension row so it ends on content."""
    end = len(fields)
    while end > 1 and not fields[end - 1]:
        end -= 1
    return fields[:end]


def _columnize(
    lines: Sequence[str],
    config: Config,
    terminal_width: TerminalWidth | None,
) -> FormatResult:
    measure = config.measure or visible_width
    rows = [tokenize(line, config.delim, config.empty) for line in lines]
    layout = compute_widths(rows, config, terminal_width)

    out: list[str] = []
    for fields in rows:
        for n, rendered in enumerate(wrap_row(fields, layout.widths, measure)):
            if n:
                rendered = _trim_extension(rendered)
            out.append(render_row(rendered, layout.widths, config, measure))

    # Remove the trailing newline without touching other whitespace.
    text = "".join(out)
    if text.endswith("\n"):
        text = text[:-1]
    return FormatResult(text=text, widths=layout.widths, diagnostics=layout.diagnostics)


def _check_lines(lines: object) -> Sequence[str]:
    if isinstance(lines, str):
        return split_lines(lines)
    if isinstance(lines, (bytes, bytearray)) or not isinstance(lines, Sequence):
        raise InvalidInputShapeError(lines)
    if not all(isinstance(line, str) for line in lines):
        raise InvalidInputShapeError(lines)
    return lines


class Formatter:
    """Formats rows against a set of caller-owned defaults.

    Construct one at startup to change the defaults for a whole program;
    each call merges its own config over them.
    """

    def __init__(
        self,
        defaults: Config | None = None,
        terminal_width: TerminalWidth | None = None,
    ) -> None:
        self._defaults = resolve_config(defaults)
        self._terminal_width = terminal_width

    @property
    def defaults(self) -> Config:
        return self._defaults

    def columnize(self, rows: Sequence[str], config: Config | None = None) -> FormatResult:
        """Format *rows* and return the text along with widths and diagnostics."""
        conf = merge_config(self._defaults, config)
        return _columnize(rows, conf, self._terminal_width)

    def format_rows(self, rows: Sequence[str], config: Config | None = None) -> str:
        return self.columnize(rows, config).text

    def format_text(self, text: str, config: Config | None = None) -> str:
        return self.columnize(split_lines(text), config).text

    def format(self, lines: str | Sequence[str], config: Config | None = None) -> str:
        """Format a text block or a sequence of lines.

        Raises :class:`InvalidInputShapeError` for any other input.
        """
        return self.columnize(_check_lines(lines), config).text


def columnize(
    rows: Sequence[str],
    config: Config | None = None,
    *,
    terminal_width: TerminalWidth | None = None,
) -> FormatResult:
    """Format *rows* with the defaults merged under *config*."""
    return Formatter(terminal_width=terminal_width).columnize(rows, config)


def format_rows(
    rows: Sequence[str],
    config: Config | None = None,
    *,
    terminal_width: TerminalWidth | None = None,
) -> str:
    """Return *rows* formatted as aligned columns."""
    return columnize(rows, config, terminal_width=terminal_width).text


def format_text(
    text: str,
    config: Config | None = None,
    *,
    terminal_width: TerminalWidth | None = None,
) -> str:
    """Return the lines of *text* formatted as aligned columns."""
    return columnize(split_lines(text), config, terminal_width=terminal_width).text


def format(
    lines: str | Sequence[str],
    config: Config | None = None,
    *,
    terminal_width: TerminalWidth | None = None,
) -> str:
    """Format either a text block or a sequence of line strings."""
    return columnize(_check_lines(lines), config, terminal_width=terminal_width).text


def simple_format(lines: str | Sequence[str]) -> str:
    """Format with the default configuration."""
    return format(lines)
