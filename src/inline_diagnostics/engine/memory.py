"""In-memory host for tests and the command line preview."""

from __future__ import annotations

import bisect
from typing import Any, Mapping, Sequence

from inline_diagnostics.model.diagnostic import Diagnostic
from inline_diagnostics.model.fragment import Fragment


class InMemoryBuffer:
    """Buffer backed by a plain string.

    Line starts follow ``\\n`` line breaks. ``line_to_char`` clamps to the
    line count and ``char_to_line`` clamps to the text length, so offsets
    past either end resolve to the last line.
    """

    def __init__(
        self,
        text: str = "",
        cursor: int = 0,
        diagnostics: Sequence[Diagnostic] | None = None,
        document_id: str = "buffer-1",
    ) -> None:
        self.document_id = document_id
        self._text = text
        self._line_starts = _line_starts(text)
        self._cursor = cursor
        self._diagnostics: list[Diagnostic] = list(diagnostics) if diagnostics else []
        self.annotations: list[Fragment] = []
        self.set_calls = 0

    # --- Reads ---

    def get_cursor(self) -> int:
        return self._cursor

    def get_text(self) -> str:
        return self._text

    def get_diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def line_count(self) -> int:
        return len(self._line_starts)

    def char_to_line(self, offset: int) -> int:
        offset = max(0, min(offset, len(self._text)))
        return bisect.bisect_right(self._line_starts, offset) - 1

    def line_to_char(self, line: int) -> int:
        line = max(0, line)
        if line >= len(self._line_starts):
            return len(self._text)
        return self._line_starts[line]

    # --- Writes ---

    def set_annotations(self, fragments: list[Fragment]) -> None:
        self.annotations = list(fragments)
        self.set_calls += 1

    def set_cursor(self, offset: int) -> None:
        self._cursor = offset

    def move_to(self, line: int, column: int = 0) -> None:
        """Place the cursor at ``column`` characters into ``line``, clamped to its end."""
        start = self.line_to_char(line)
        line_len = len(self._text[start : self.line_to_char(line + 1)].rstrip("\r\n"))
        self._cursor = start + min(max(0, column), line_len)

    def set_diagnostics(self, diagnostics: Sequence[Diagnostic]) -> None:
        self._diagnostics = list(diagnostics)

    def set_text(self, text: str) -> None:
        self._text = text
        self._line_starts = _line_starts(text)


class InMemoryHost:
    """Host holding at most one current buffer and a config mapping."""

    def __init__(
        self,
        buffer: InMemoryBuffer | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        self.buffer = buffer
        self.config = dict(config) if config is not None else None

    def current_buffer(self) -> InMemoryBuffer | None:
        return self.buffer

    def get_config(self) -> Mapping[str, Any] | None:
        return self.config


def _line_starts(text: str) -> list[int]:
    starts = [0]
    for idx, ch in enumerate(text):
        if ch == "\n":
            starts.append(idx + 1)
    return starts
