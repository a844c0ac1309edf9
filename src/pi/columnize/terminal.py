"""Terminal width provider used when ``output_width`` is ``"auto"``."""

from __future__ import annotations

import os
import sys
from typing import Callable

from pi.columnize.errors import TerminalWidthUnavailableError

TerminalWidth = Callable[[], int]


def terminal_columns() -> int:
    """Return the column count of the terminal attached to stdout.

    Raises :class:`TerminalWidthUnavailableError` when stdout is not a
    terminal or reports no usable size.
    """
    try:
        columns = os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalWidthUnavailableError(f"cannot query terminal size: {e}") from e
    if columns <= 0:
        raise TerminalWidthUnavailableError(f"terminal reported {columns} columns")
    return columns
