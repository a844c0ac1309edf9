"""Wrapping oversize cells into extension lines.

A row whose cells all fit their columns renders as one line. Otherwise every
oversize cell is split at the last whitespace that fits (or hard-broken at the
column boundary) and the remainders form an extension row, which is wrapped
again until nothing is left over.
"""

from __future__ import annotations

from typing import Sequence

import grapheme

from pi.columnize.width import Measure, take_width, visible_width


def split_cell(text: str, width: int, measure: Measure = visible_width) -> tuple[str, str]:
    """Split *text* into the part shown in a *width* column and the rest.

    The rest is empty when *text* already fits.
    """
    if width <= 0 or measure(text) <= width:
        return text, ""

    cut = take_width(text, width, measure)
    if cut == 0:
        # First glyph is wider than the column; emit it alone.
        cut = len(next(grapheme.graphemes(text)))
        return text[:cut], text[cut:].strip()

    for pos in range(min(cut, len(text) - 1), 0, -1):
        if text[pos].isspace():
            head = text[:pos].rstrip()
            if head:
                return head, text[pos:].strip()
            break

    return text[:cut], text[cut:].strip()


def _split_fields(
    fields: Sequence[str],
    widths: Sequence[int],
    measure: Measure,
) -> tuple[list[str], tuple[str, ...]]:
    heads: list[str] = []
    tails: list[str] = []
    for i, value in enumerate(fields):
        if i >= len(widths):
            heads.append(value)
            tails.append("")
            continue
        head, tail = split_cell(value, widths[i], measure)
        heads.append(head)
        tails.append(tail)
    return heads, tuple(tails)


def wrap_row(
    fields: Sequence[str],
    widths: Sequence[int],
    measure: Measure = visible_width,
) -> list[list[str]]:
    """Return the rendering rows for *fields*: the row plus extension rows.

    Every returned row has as many fields as *fields*. Fields past the end
    of *widths* are never split.
    """
    rows: list[list[str]] = []
    pending: tuple[str, ...] = tuple(fields)
    while True:
        current, pending = _split_fields(pending, widths, measure)
        rows.append(current)
        if not any(pending):
            return rows
