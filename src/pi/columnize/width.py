"""Visible-width measurement for table cells.

Two strategies are provided:

* :func:`visible_width` measures terminal display columns. ANSI escape
  sequences count zero, East Asian wide glyphs and emoji count two.
* :func:`char_width` counts characters, ignoring ANSI escape sequences.

Both have the signature ``(text: str) -> int`` so either can be set as
``Config.measure``.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Callable

import grapheme
import wcwidth as _wcwidth

Measure = Callable[[str], int]

# CSI, OSC 8 hyperlinks and APC sequences
_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;]*[A-Za-z]"
    r"|\x1b\]8;;[^\x07]*\x07"
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"
)

_TAB_WIDTH = 3

# Non-ASCII cell texts repeat across rows; the cache is dropped when full.
_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512

_VARIATION_SELECTOR_16 = 0xFE0F
_ZERO_WIDTH_JOINER = 0x200D
_SKIN_TONES = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)


def _remember(text: str, width: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[text] = width
    return width


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _ESCAPE_RE.sub("", text)


def _is_emoji_cluster(g: str) -> bool:
    """True for multi-codepoint clusters a terminal draws as one wide emoji."""
    for ch in g:
        cp = ord(ch)
        if cp in (_VARIATION_SELECTOR_16, _ZERO_WIDTH_JOINER):
            return True
        if cp in _SKIN_TONES or cp in _REGIONAL_INDICATORS:
            return True
    first = ord(g[0])
    # Pictographs and the Miscellaneous Symbols and Dingbats blocks
    return first >= 0x1F000 or 0x2600 <= first <= 0x27BF


def _grapheme_width(g: str) -> int:
    """Return the display width of a single grapheme cluster."""
    if not g:
        return 0

    if g == "\t":
        return _TAB_WIDTH

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    if _is_emoji_cluster(g):
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the terminal display width of *text*.

    * Strips ANSI escape sequences.
    * Treats tabs as 3 columns.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _remember(stripped, total)


def char_width(text: str) -> int:
    """Count the characters of *text*, ignoring ANSI escape sequences."""
    return len(strip_ansi(text))


def take_width(text: str, width: int, measure: Measure = visible_width) -> int:
    """Return the end index of the longest prefix of *text* that fits *width*.

    The cut falls on a grapheme boundary and never inside an escape sequence.
    Escape sequences directly following the last fitting grapheme are kept
    in the prefix.
    """
    end = 0
    used = 0
    pos = 0
    while pos < len(text):
        match = _ESCAPE_RE.match(text, pos)
        if match is not None:
            pos = match.end()
            end = pos
            continue

        g = next(grapheme.graphemes(text[pos:]))
        used += measure(g)
        if used > width:
            break
        pos += len(g)
        end = pos

    return end
