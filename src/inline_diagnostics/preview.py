"""Plain-text preview of a panel, as a terminal host might paint it."""

from __future__ import annotations

import re

import click

from inline_diagnostics.layout.width import DEFAULT_TAB_WIDTH, codepoint_len, visual_width
from inline_diagnostics.model.fragment import Fragment

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{6})$")

_NAMED_COLORS = frozenset(
    {"black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"}
    | {f"bright_{name}" for name in ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")}
)


def terminal_color(value: str | None) -> tuple[int, int, int] | str | None:
    """Translate a fragment color into something ``click.style`` accepts."""
    if not value:
        return None
    match = _HEX_COLOR.match(value)
    if match:
        digits = match.group(1)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    name = value.lower()
    if name in _NAMED_COLORS:
        return name
    return None


def render_preview(
    line_text: str,
    fragments: list[Fragment],
    tab_width: int = DEFAULT_TAB_WIDTH,
    color: bool = False,
) -> list[str]:
    """Render the code line and its panel rows as text lines.

    Inline fragments sit ``offset`` columns past the end of the code;
    virtual-line fragments sit at column ``offset - 1``.
    """
    code = line_text.replace("\t", " " * tab_width)
    line_width = visual_width(line_text, tab_width)

    inline = [f for f in fragments if not f.is_line]
    virtual: dict[int, list[Fragment]] = {}
    for fragment in fragments:
        if fragment.is_line:
            virtual.setdefault(fragment.virt_line_idx or 0, []).append(fragment)

    lines = [_paint_row(code, line_width, inline, line_width, color)]
    for idx in sorted(virtual):
        lines.append(_paint_row("", 0, virtual[idx], -1, color))
    return lines


def _paint_row(
    prefix: str, prefix_width: int, fragments: list[Fragment], origin: int, color: bool
) -> str:
    parts = [prefix]
    column = prefix_width
    for fragment in fragments:
        start = origin + fragment.offset
        if start > column:
            parts.append(" " * (start - column))
            column = start
        text = fragment.text
        if color:
            text = click.style(text, fg=terminal_color(fragment.fg), bg=terminal_color(fragment.bg))
        parts.append(text)
        column += codepoint_len(fragment.text)
    return "".join(parts)
