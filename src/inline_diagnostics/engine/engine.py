"""Annotation engine: snapshot the buffer, lay out the panel, emit fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from inline_diagnostics.config import DEFAULT_CONFIG, PanelConfig
from inline_diagnostics.engine.host import Buffer
from inline_diagnostics.layout.panel import PanelLayout, layout_panel
from inline_diagnostics.layout.selection import filter_line, sort_by_severity, take_with_overflow
from inline_diagnostics.layout.width import DEFAULT_TAB_WIDTH
from inline_diagnostics.model.diagnostic import Diagnostic
from inline_diagnostics.model.fragment import Fragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferSnapshot:
    """Everything one update reads from the buffer.

    Attributes:
        diagnostics: All diagnostics on the buffer, in host order.
        cursor_line: Zero-based line holding the primary cursor.
        line_text: Text of the cursor line without its line break.
    """

    diagnostics: tuple[Diagnostic, ...]
    cursor_line: int
    line_text: str

    @classmethod
    def capture(cls, buffer: Buffer) -> BufferSnapshot:
        cursor_line = buffer.char_to_line(buffer.get_cursor())
        return cls(
            diagnostics=tuple(buffer.get_diagnostics()),
            cursor_line=cursor_line,
            line_text=current_line_text(buffer, cursor_line),
        )


def current_line_text(buffer: Buffer, line: int) -> str:
    """Text of ``line`` with any trailing ``\\n``, ``\\r\\n`` or ``\\r`` removed."""
    start = buffer.line_to_char(line)
    end = buffer.line_to_char(line + 1)
    text = buffer.get_text()[start:end]
    return text.rstrip("\r\n")


def build_panel(
    snapshot: BufferSnapshot,
    config: PanelConfig = DEFAULT_CONFIG,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> PanelLayout | None:
    """Run filter, sort, truncate and layout; None when the line is clean."""
    on_line = filter_line(snapshot.diagnostics, snapshot.cursor_line)
    if not on_line:
        return None
    shown, hidden = take_with_overflow(sort_by_severity(on_line), config.max_lines)
    logger.debug(
        "Panel for line %d: %d shown, %d hidden", snapshot.cursor_line, len(shown), hidden
    )
    return layout_panel(shown, hidden, snapshot.line_text, config, tab_width=tab_width)


def compute_fragments(
    snapshot: BufferSnapshot,
    config: PanelConfig = DEFAULT_CONFIG,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> list[Fragment]:
    """Ordered fragment list for ``snapshot``; empty when nothing is shown."""
    panel = build_panel(snapshot, config, tab_width)
    if panel is None:
        return []
    return panel.fragments()


class InlineDiagnostics:
    """Recomputes a buffer's panel and replaces its annotations wholesale.

    With ``skip_unchanged`` set, an update whose buffer, snapshot, config and
    tab width all equal the previous update's is skipped; the annotations
    from that previous update are still in place on the buffer.
    """

    def __init__(
        self,
        config: PanelConfig = DEFAULT_CONFIG,
        tab_width: int = DEFAULT_TAB_WIDTH,
        skip_unchanged: bool = True,
    ) -> None:
        self.config = config
        self.tab_width = tab_width
        self.skip_unchanged = skip_unchanged
        self._last_buffer: Buffer | None = None
        self._last_key: tuple | None = None

    def update(
        self, buffer: Buffer | None, config: PanelConfig | None = None
    ) -> list[Fragment] | None:
        """Refresh ``buffer``'s panel.

        Returns the fragments written, or None when there was no buffer or
        the update was skipped.
        """
        if buffer is None:
            return None

        config = config if config is not None else self.config
        snapshot = BufferSnapshot.capture(buffer)
        key = (snapshot, config, self.tab_width)
        if self.skip_unchanged and buffer is self._last_buffer and key == self._last_key:
            logger.debug("Line %d unchanged, skipping recompute", snapshot.cursor_line)
            return None

        fragments = compute_fragments(snapshot, config, self.tab_width)
        buffer.set_annotations(fragments)
        self._last_buffer = buffer
        self._last_key = key
        return fragments

    def reset(self) -> None:
        """Forget the previous update so the next one always recomputes."""
        self._last_buffer = None
        self._last_key = None
