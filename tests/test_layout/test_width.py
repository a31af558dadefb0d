"""Tests for codepoint and visual width measurement."""

from inline_diagnostics.layout.width import codepoint_len, visual_width


class TestCodepointLen:
    def test_ascii(self):
        assert codepoint_len("hello") == 5

    def test_multibyte_counts_once(self):
        assert codepoint_len("●") == 1
        assert codepoint_len("héllo wörld") == 11
        assert codepoint_len("日本語") == 3

    def test_empty(self):
        assert codepoint_len("") == 0


class TestVisualWidth:
    def test_empty_is_zero(self):
        assert visual_width("") == 0

    def test_plain_text(self):
        assert visual_width("let x = 1;") == 10

    def test_tab_expands_to_default_four(self):
        assert visual_width("\tx") == 5

    def test_custom_tab_width(self):
        assert visual_width("\t\tx", tab_width=8) == 17

    def test_tab_is_fixed_not_tab_stop(self):
        # "ab" then a tab still adds a full tab_width, not up to column 4.
        assert visual_width("ab\tc") == 7

    def test_multibyte_with_tabs(self):
        assert visual_width("\t→ ü") == 7
