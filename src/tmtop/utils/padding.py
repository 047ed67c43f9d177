"""
Fixed-width padding and truncation measured in terminal display columns.

Dashboard cells are aligned by what the terminal draws, not by code points.
Wide East Asian characters and most emoji occupy two columns, while
combining marks, variation selectors and joiners occupy none.

Both helpers are total: any string and any width produce a string of exactly
`max(width, 0)` display columns.
"""

from __future__ import annotations

import unicodedata

_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf"})
"""Unicode categories that attach to the previous character without advancing the cursor."""

_WIDE_EAST_ASIAN = frozenset({"W", "F"})
"""East Asian width classes drawn in two columns."""


def char_width(char: str) -> int:
    """Return the number of display columns a single character occupies."""
    category = unicodedata.category(char)
    if category == "Cc" or category in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(char) in _WIDE_EAST_ASIAN:
        return 2
    return 1


def display_width(s: str) -> int:
    """Return the number of display columns a string occupies."""
    return sum(char_width(char) for char in s)


def _fit(s: str, width: int) -> tuple[str, int]:
    """
    Keep the longest prefix of `s` that fits in `width` columns.

    Control characters are dropped so a cell never breaks the row.
    A wide character that would straddle the boundary is left out.

    Returns:
        The kept prefix and the number of columns it occupies.
    """
    kept: list[str] = []
    used = 0
    for char in s:
        if unicodedata.category(char) == "Cc":
            continue
        w = char_width(char)
        if used + w > width:
            break
        kept.append(char)
        used += w
    return "".join(kept), used


def right_pad_and_trim(s: str, width: int) -> str:
    """Truncate `s` to `width` columns, or pad it with spaces on the right to reach it."""
    width = max(width, 0)
    fitted, used = _fit(s, width)
    return fitted + " " * (width - used)


def left_pad_and_trim(s: str, width: int) -> str:
    """Truncate `s` to `width` columns, or pad it with spaces on the left to reach it."""
    width = max(width, 0)
    fitted, used = _fit(s, width)
    return " " * (width - used) + fitted
