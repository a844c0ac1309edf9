"""Splitting input into rows of trimmed fields."""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split a text block into lines on ``\\n``.

    ``"".split("\\n")`` is ``[""]``, so an empty block is one empty line.
    """
    return text.split("\n")


def tokenize(line: str, delim: str, empty: str = "") -> list[str]:
    """Split *line* on every literal occurrence of *delim*.

    Each field is stripped of surrounding whitespace. Fields that end up
    blank are replaced by *empty* when it is set. An empty *delim* leaves the
    line unsplit.
    """
    parts = line.split(delim) if delim else [line]
    fields: list[str] = []
    for part in parts:
        value = part.strip()
        if not value and empty:
            value = empty
        fields.append(value)
    return fields
