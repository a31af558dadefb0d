"""Text measurement in codepoints, with tabs expanded to a fixed width."""

from __future__ import annotations

DEFAULT_TAB_WIDTH = 4


def codepoint_len(text: str) -> int:
    """Number of codepoints in ``text``; multi-byte glyphs count once."""
    return len(text)


def visual_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Width of ``text`` after replacing every tab with ``tab_width`` spaces."""
    if not text:
        return 0
    return codepoint_len(text.replace("\t", " " * tab_width))
