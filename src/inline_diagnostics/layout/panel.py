"""Panel layout: turns the shown diagnostics into positioned fragments.

A panel is one inline row appended to the code line followed by virtual
rows drawn beneath it:

     code();  ← (● first message      )
                (● second message     )
                (... (+2 more)        )

Every row between its caps is ``content_width + 2`` codepoints wide, so the
caps of all rows line up.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from inline_diagnostics.config import PanelConfig
from inline_diagnostics.layout.width import DEFAULT_TAB_WIDTH, codepoint_len, visual_width
from inline_diagnostics.model.diagnostic import Diagnostic
from inline_diagnostics.model.fragment import Fragment

# Columns between the end of the code and a virtual row's left cap.
VIRTUAL_LINE_MARGIN = 5

# Extra codepoints added to the widest row text.
CONTENT_PADDING = 2

INLINE_START_OFFSET = 1


@dataclass(frozen=True)
class LayoutCursor:
    """Position of the next fragment within a row."""

    char_idx: int
    offset: int
    is_line: bool = False
    virt_line_idx: int | None = None

    def emit(
        self, text: str, fg: str | None = None, bg: str | None = None
    ) -> tuple[Fragment, LayoutCursor]:
        """Place ``text`` at the cursor and return it with the advanced cursor."""
        fragment = Fragment(
            char_idx=self.char_idx,
            text=text,
            fg=fg,
            bg=bg,
            offset=self.offset,
            is_line=self.is_line,
            virt_line_idx=self.virt_line_idx,
        )
        return fragment, replace(self, offset=self.offset + codepoint_len(text))


@dataclass(frozen=True)
class PanelRow:
    """Fragments of one screen row, left to right."""

    fragments: tuple[Fragment, ...]
    virt_line_idx: int | None = None

    @property
    def is_inline(self) -> bool:
        return self.virt_line_idx is None

    @property
    def text(self) -> str:
        return "".join(f.text for f in self.fragments)


@dataclass(frozen=True)
class PanelLayout:
    """The complete panel for one cursor line."""

    char_idx: int
    content_width: int
    inline_row: PanelRow
    virtual_rows: tuple[PanelRow, ...] = ()
    hidden: int = 0

    @property
    def rows(self) -> list[PanelRow]:
        return [self.inline_row, *sorted(self.virtual_rows, key=lambda r: r.virt_line_idx)]

    def fragments(self) -> list[Fragment]:
        """Inline row first, then each virtual row in ascending index.

        Hosts blend abutting fragment edges in this order, so it is part of
        the output contract.
        """
        result: list[Fragment] = []
        for row in self.rows:
            result.extend(row.fragments)
        return result


def truncation_label(hidden: int) -> str:
    return f"... (+{hidden} more)"


def content_width(shown: list[Diagnostic], hidden: int, bullet: str) -> int:
    """Uniform width every row's padded text is normalised to."""
    widths = [codepoint_len(f"{bullet} {d.message}") for d in shown]
    if hidden > 0:
        widths.append(codepoint_len(truncation_label(hidden)))
    return max(widths, default=0) + CONTENT_PADDING


def pad_message(message: str, bullet: str, width: int) -> str:
    """Right-pad ``message`` so ``bullet + " " + message`` spans ``width``."""
    padding = width - codepoint_len(f"{bullet} {message}")
    if padding > 0:
        return message + " " * padding
    return message


def layout_panel(
    shown: list[Diagnostic],
    hidden: int,
    line_text: str,
    config: PanelConfig,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> PanelLayout:
    """Lay out a panel for ``shown`` (already sorted and truncated).

    ``shown[0]`` goes on the inline row and supplies the anchor character;
    the rest become virtual rows, followed by a truncation row when
    ``hidden`` is positive.
    """
    if not shown:
        raise ValueError("layout_panel requires at least one diagnostic")

    width = content_width(shown, hidden, config.bullet)
    char_idx = shown[0].range.start

    inline_row = _inline_row(shown[0], char_idx, width, config)

    base_offset = visual_width(line_text, tab_width) + VIRTUAL_LINE_MARGIN
    virtual_rows: list[PanelRow] = []
    for virt_line_idx, diag in enumerate(shown[1:]):
        cursor = LayoutCursor(char_idx, base_offset, is_line=True, virt_line_idx=virt_line_idx)
        virtual_rows.append(_diagnostic_row(diag, cursor, width, config))

    if hidden > 0:
        cursor = LayoutCursor(char_idx, base_offset, is_line=True, virt_line_idx=len(shown) - 1)
        virtual_rows.append(_truncation_row(hidden, cursor, width, config))

    return PanelLayout(
        char_idx=char_idx,
        content_width=width,
        inline_row=inline_row,
        virtual_rows=tuple(virtual_rows),
        hidden=hidden,
    )


def _inline_row(diag: Diagnostic, char_idx: int, width: int, config: PanelConfig) -> PanelRow:
    # Caps carry no background so they blend into whatever sits beside them.
    cursor = LayoutCursor(char_idx, INLINE_START_OFFSET)
    lead_in, cursor = cursor.emit(f" {config.arrow} ", fg=config.panel_bg)
    left_cap, cursor = cursor.emit(config.left_cap, fg=config.panel_bg)
    bullet, cursor = cursor.emit(
        f" {config.bullet}", fg=config.color_for(diag.severity), bg=config.panel_bg
    )
    message, cursor = cursor.emit(
        f" {pad_message(diag.message, config.bullet, width)} ",
        fg=config.panel_fg,
        bg=config.panel_bg,
    )
    right_cap, _ = cursor.emit(config.right_cap, fg=config.panel_bg)
    return PanelRow((lead_in, left_cap, bullet, message, right_cap))


def _diagnostic_row(
    diag: Diagnostic, cursor: LayoutCursor, width: int, config: PanelConfig
) -> PanelRow:
    left_cap, cursor = cursor.emit(config.left_cap, fg=config.panel_bg, bg=config.panel_bg)
    bullet, cursor = cursor.emit(
        f" {config.bullet}", fg=config.color_for(diag.severity), bg=config.panel_bg
    )
    message, cursor = cursor.emit(
        f" {pad_message(diag.message, config.bullet, width)} ",
        fg=config.panel_fg,
        bg=config.panel_bg,
    )
    right_cap, cursor = cursor.emit(config.right_cap, fg=config.panel_bg, bg=config.panel_bg)
    return PanelRow((left_cap, bullet, message, right_cap), virt_line_idx=cursor.virt_line_idx)


def _truncation_row(
    hidden: int, cursor: LayoutCursor, width: int, config: PanelConfig
) -> PanelRow:
    label = truncation_label(hidden)
    padding = width - codepoint_len(label)
    if padding > 0:
        label += " " * padding
    left_cap, cursor = cursor.emit(config.left_cap, fg=config.panel_bg, bg=config.panel_bg)
    text, cursor = cursor.emit(f" {label} ", fg=config.panel_fg, bg=config.panel_bg)
    right_cap, cursor = cursor.emit(config.right_cap, fg=config.panel_bg, bg=config.panel_bg)
    return PanelRow((left_cap, text, right_cap), virt_line_idx=cursor.virt_line_idx)
