"""Layout layer: measurement, selection and panel layout."""

from inline_diagnostics.layout.panel import (
    LayoutCursor,
    PanelLayout,
    PanelRow,
    content_width,
    layout_panel,
    pad_message,
    truncation_label,
)
from inline_diagnostics.layout.selection import (
    Overflow,
    filter_line,
    sort_by_severity,
    take_with_overflow,
)
from inline_diagnostics.layout.width import codepoint_len, visual_width

__all__ = [
    "codepoint_len",
    "visual_width",
    "filter_line",
    "sort_by_severity",
    "take_with_overflow",
    "Overflow",
    "LayoutCursor",
    "PanelRow",
    "PanelLayout",
    "content_width",
    "pad_message",
    "truncation_label",
    "layout_panel",
]
