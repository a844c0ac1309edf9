"""Column width computation.

Widths are derived from the widest value seen at each field index, clamped by
per-column caps, and then adjusted once to honor either an output width cap
or a total-width directive (a negative entry in ``max_widths``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from pi.columnize.config import AUTO, Config, resolve_config
from pi.columnize.errors import TerminalWidthUnavailableError
from pi.columnize.terminal import TerminalWidth, terminal_columns
from pi.columnize.width import Measure, visible_width

logger = logging.getLogger(__name__)


@dataclass
class Layout:
    """Column widths for one table, plus any recovered problems."""

    widths: list[int]
    diagnostics: list[str] = field(default_factory=list)


def _diagnose(diagnostics: list[str], message: str) -> None:
    logger.warning("%s", message)
    diagnostics.append(message)


def column_cap(max_widths: Sequence[int], index: int) -> int:
    """Return the positive cap for column *index*, or 0 if it has none."""
    if index < len(max_widths) and max_widths[index] > 0:
        return max_widths[index]
    return 0


def natural_widths(
    rows: Sequence[Sequence[str]],
    max_widths: Sequence[int] = (),
    measure: Measure = visible_width,
) -> list[int]:
    """Return the widest (capped) value length at each field index."""
    widths: list[int] = []
    for fields in rows:
        for i, value in enumerate(fields):
            length = measure(value)
            cap = column_cap(max_widths, i)
            if cap:
                length = min(length, cap)
            if i >= len(widths):
                widths.append(length)
            elif widths[i] < length:
                widths[i] = length
    return widths


def line_width(widths: Sequence[int], config: Config, measure: Measure = visible_width) -> int:
    """Total width of a line that fills every column."""
    config = resolve_config(config)
    if not widths:
        return measure(config.prefix)
    return (
        measure(config.prefix)
        + sum(widths)
        + measure(config.glue) * (len(widths) - 1)
    )


def resolve_output_width(
    config: Config,
    terminal_width: TerminalWidth | None,
    diagnostics: list[str],
) -> int | None:
    """Return the active output width cap, or None when unconstrained.

    For ``"auto"`` the terminal provider is called once. A failing provider
    is recorded as a diagnostic and the output is left unconstrained.
    """
    if not config.has_output_cap:
        return None

    if config.output_width == AUTO:
        provider = terminal_width or terminal_columns
        try:
            columns = provider()
        except TerminalWidthUnavailableError as e:
            _diagnose(diagnostics, f"terminal width unavailable, output is unconstrained: {e}")
            return None
        if columns <= 0:
            _diagnose(diagnostics, f"terminal reported {columns} columns, output is unconstrained")
            return None
        logger.debug("terminal width: %d", columns)
        return columns

    return int(config.output_width)


def _cap_target(max_widths: Sequence[int], count: int) -> int:
    """Rightmost column without its own cap, else the last column."""
    for i in range(count - 1, -1, -1):
        if not column_cap(max_widths, i):
            return i
    return count - 1


def _total_width_directive(max_widths: Sequence[int], count: int) -> tuple[int, int] | None:
    """Find the first negative entry and return ``(column, total_width)``."""
    for i, value in enumerate(max_widths):
        if value < 0:
            if len(max_widths) == 1 and count > 1:
                return count - 1, -value
            return i, -value
    return None


def _fit_column(
    widths: list[int],
    index: int,
    target_total: int,
    config: Config,
    measure: Measure,
    diagnostics: list[str],
    *,
    shrink_only: bool,
) -> None:
    total = line_width(widths, config, measure)
    new_width = target_total - (total - widths[index])
    if new_width <= 0:
        _diagnose(
            diagnostics,
            f"cannot fit line into {target_total} columns by resizing column {index}; "
            f"width left at {widths[index]}",
        )
        return
    if shrink_only and new_width >= widths[index]:
        return
    widths[index] = new_width


def compute_widths(
    rows: Sequence[Sequence[str]],
    config: Config,
    terminal_width: TerminalWidth | None = None,
) -> Layout:
    """Compute the width of every column across tokenized *rows*.

    Unset fields of *config* take their values from ``default_config()``.
    """
    config = resolve_config(config)
    measure = config.measure or visible_width
    widths = natural_widths(rows, config.max_widths, measure)
    layout = Layout(widths=widths)
    if not widths:
        return layout

    directive = _total_width_directive(config.max_widths, len(widths))
    cap = resolve_output_width(config, terminal_width, layout.diagnostics)

    if cap is not None:
        if directive is not None:
            _diagnose(
                layout.diagnostics,
                f"total width directive {-directive[1]} ignored, output width is capped at {cap}",
            )
        if line_width(widths, config, measure) > cap:
            target = _cap_target(config.max_widths, len(widths))
            _fit_column(widths, target, cap, config, measure, layout.diagnostics, shrink_only=True)
    elif directive is not None:
        index, total = directive
        if index < len(widths):
            _fit_column(widths, index, total, config, measure, layout.diagnostics, shrink_only=False)
        else:
            _diagnose(
                layout.diagnostics,
                f"total width directive for column {index} ignored, table has {len(widths)} columns",
            )

    logger.debug("column widths: %s", widths)
    return layout
