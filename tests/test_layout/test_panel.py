"""Tests for the panel layout engine."""

import pytest

from inline_diagnostics.config import DEFAULT_CONFIG, PanelConfig
from inline_diagnostics.layout.panel import (
    LayoutCursor,
    content_width,
    layout_panel,
    pad_message,
    truncation_label,
)
from inline_diagnostics.model import CharRange, Diagnostic, Severity


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

ASCII = PanelConfig(arrow="<", bullet="*", left_cap="(", right_cap=")")


def _diag(
    message: str,
    severity: Severity = Severity.ERROR,
    start: int = 0,
) -> Diagnostic:
    return Diagnostic(line=0, severity=severity, message=message, range=CharRange(start, start + 1))


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

class TestLayoutCursor:
    def test_emit_advances_by_codepoints(self):
        cursor = LayoutCursor(char_idx=3, offset=1)
        frag, nxt = cursor.emit("●ab", fg="#fff")
        assert frag.offset == 1
        assert frag.char_idx == 3
        assert frag.fg == "#fff"
        assert nxt.offset == 4

    def test_emit_carries_row_tags(self):
        cursor = LayoutCursor(char_idx=0, offset=10, is_line=True, virt_line_idx=2)
        frag, nxt = cursor.emit("x")
        assert frag.is_line is True
        assert frag.virt_line_idx == 2
        assert nxt.virt_line_idx == 2

    def test_cursor_is_immutable(self):
        cursor = LayoutCursor(char_idx=0, offset=1)
        cursor.emit("abc")
        assert cursor.offset == 1


class TestContentWidth:
    def test_longest_message_plus_two(self):
        diags = [_diag("x"), _diag("bad type")]
        assert content_width(diags, 0, "●") == len("● bad type") + 2

    def test_truncation_label_counts(self):
        diags = [_diag("ab")]
        assert content_width(diags, 12, "●") == len("... (+12 more)") + 2

    def test_multibyte_message(self):
        diags = [_diag("größe ✓")]
        assert content_width(diags, 0, "●") == 9 + 2


class TestPadMessage:
    def test_pads_to_width(self):
        assert pad_message("ab", "*", 8) == "ab" + " " * 4

    def test_no_padding_when_full(self):
        assert pad_message("abcdef", "*", 8) == "abcdef"

    def test_truncation_label(self):
        assert truncation_label(1) == "... (+1 more)"


# ---------------------------------------------------------------------------
# Inline row
# ---------------------------------------------------------------------------

class TestInlineRow:
    def test_fragments_in_order(self):
        panel = layout_panel([_diag("bad type", start=7)], 0, "let x = 1;", ASCII)
        texts = [f.text for f in panel.inline_row.fragments]
        assert texts == [" < ", "(", " *", " bad type" + " " * 3, ")"]

    def test_offsets_accumulate_from_one(self):
        panel = layout_panel([_diag("bad type", start=7)], 0, "let x = 1;", ASCII)
        assert [f.offset for f in panel.inline_row.fragments] == [1, 4, 5, 7, 19]

    def test_colors(self):
        panel = layout_panel([_diag("w", Severity.WARNING)], 0, "", DEFAULT_CONFIG)
        lead_in, left_cap, bullet, message, right_cap = panel.inline_row.fragments
        bg, fg = DEFAULT_CONFIG.panel_bg, DEFAULT_CONFIG.panel_fg
        assert (lead_in.fg, lead_in.bg) == (bg, None)
        assert (left_cap.fg, left_cap.bg) == (bg, None)
        assert (bullet.fg, bullet.bg) == (DEFAULT_CONFIG.warning_color, bg)
        assert (message.fg, message.bg) == (fg, bg)
        assert (right_cap.fg, right_cap.bg) == (bg, None)

    def test_inline_tags(self):
        panel = layout_panel([_diag("x")], 0, "code", ASCII)
        for frag in panel.inline_row.fragments:
            assert frag.is_line is False
            assert frag.virt_line_idx is None

    def test_default_glyphs(self):
        panel = layout_panel([_diag("x")], 0, "code", DEFAULT_CONFIG)
        texts = [f.text for f in panel.inline_row.fragments]
        assert texts[0] == " ← "
        assert texts[1] == "\ue0b6"
        assert texts[2] == " ●"
        assert texts[4] == "\ue0b4"


# ---------------------------------------------------------------------------
# Virtual rows
# ---------------------------------------------------------------------------

class TestVirtualRows:
    def test_base_offset_is_line_width_plus_five(self):
        panel = layout_panel([_diag("a"), _diag("b")], 0, "let x = 1;", ASCII)
        (row,) = panel.virtual_rows
        assert row.fragments[0].offset == 15

    def test_base_offset_expands_tabs(self):
        panel = layout_panel([_diag("a"), _diag("b")], 0, "\tfoo", ASCII)
        assert panel.virtual_rows[0].fragments[0].offset == 12

    def test_empty_line_measures_zero(self):
        panel = layout_panel([_diag("a"), _diag("b")], 0, "", ASCII)
        assert panel.virtual_rows[0].fragments[0].offset == 5

    def test_row_fragments(self):
        diags = [_diag("bad type", start=7), _diag("x", Severity.HINT)]
        panel = layout_panel(diags, 0, "let x = 1;", ASCII)
        (row,) = panel.virtual_rows
        assert [f.text for f in row.fragments] == ["(", " *", " x" + " " * 10, ")"]
        assert [f.offset for f in row.fragments] == [15, 16, 18, 30]
        assert row.fragments[1].fg == ASCII.hint_color

    def test_every_fragment_has_panel_background(self):
        diags = [_diag("a"), _diag("b", Severity.INFO)]
        panel = layout_panel(diags, 0, "x", ASCII)
        for frag in panel.virtual_rows[0].fragments:
            assert frag.bg == ASCII.panel_bg
            assert frag.is_line is True
            assert frag.virt_line_idx == 0

    def test_indices_ascend_from_zero(self):
        diags = [_diag(str(i)) for i in range(4)]
        panel = layout_panel(diags, 0, "x", ASCII)
        assert [r.virt_line_idx for r in panel.virtual_rows] == [0, 1, 2]

    def test_single_diagnostic_has_no_virtual_rows(self):
        panel = layout_panel([_diag("a")], 0, "x", ASCII)
        assert panel.virtual_rows == ()


# ---------------------------------------------------------------------------
# Truncation row
# ---------------------------------------------------------------------------

class TestTruncationRow:
    def test_follows_last_diagnostic_row(self):
        diags = [_diag(f"e{i}") for i in range(4)]
        panel = layout_panel(diags, 1, "code", ASCII)
        assert [r.virt_line_idx for r in panel.virtual_rows] == [0, 1, 2, 3]
        trunc = panel.virtual_rows[-1]
        assert [f.text for f in trunc.fragments] == ["(", " ... (+1 more)" + " " * 3, ")"]

    def test_truncation_colors(self):
        panel = layout_panel([_diag("a")], 2, "code", ASCII)
        (trunc,) = panel.virtual_rows
        assert trunc.virt_line_idx == 0
        text = trunc.fragments[1]
        assert (text.fg, text.bg) == (ASCII.panel_fg, ASCII.panel_bg)

    def test_no_truncation_row_without_hidden(self):
        panel = layout_panel([_diag("a"), _diag("b")], 0, "code", ASCII)
        assert all("more)" not in r.text for r in panel.virtual_rows)


# ---------------------------------------------------------------------------
# Whole-panel properties
# ---------------------------------------------------------------------------

class TestPanelProperties:
    def test_uniform_row_width(self):
        diags = [_diag("short"), _diag("a much longer message ✓"), _diag("mid size")]
        panel = layout_panel(diags, 3, "\tcode", DEFAULT_CONFIG)
        inline = panel.inline_row.fragments
        widths = [len(inline[2].text) + len(inline[3].text)]
        for row in panel.virtual_rows:
            widths.append(sum(len(f.text) for f in row.fragments[1:-1]))
        assert set(widths) == {panel.content_width + 2}

    def test_left_caps_align(self):
        diags = [_diag("a"), _diag("b")]
        panel = layout_panel(diags, 0, "let x = 1;", ASCII)
        inline_cap_column = len("let x = 1;") + panel.inline_row.fragments[1].offset
        virtual_cap_column = panel.virtual_rows[0].fragments[0].offset - 1
        assert inline_cap_column == virtual_cap_column

    def test_all_fragments_share_anchor(self):
        diags = [_diag("a", start=12), _diag("b", start=40), _diag("c", start=2)]
        panel = layout_panel(diags, 5, "x", ASCII)
        assert {f.char_idx for f in panel.fragments()} == {12}

    def test_fragments_order(self):
        diags = [_diag("a"), _diag("b"), _diag("c")]
        panel = layout_panel(diags, 1, "x", ASCII)
        fragments = panel.fragments()
        assert fragments[:5] == list(panel.inline_row.fragments)
        tags = [f.virt_line_idx for f in fragments[5:]]
        assert tags == sorted(tags)
        assert tags == [0] * 4 + [1] * 4 + [2] * 3

    def test_empty_shown_rejected(self):
        with pytest.raises(ValueError):
            layout_panel([], 0, "x", ASCII)

    def test_deterministic(self):
        diags = [_diag("a ü"), _diag("b", Severity.HINT)]
        first = layout_panel(diags, 2, "\tx", DEFAULT_CONFIG).fragments()
        second = layout_panel(list(diags), 2, "\tx", DEFAULT_CONFIG).fragments()
        assert first == second
