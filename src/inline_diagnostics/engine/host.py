"""Host interface: the buffer and editor surfaces the engine talks to."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from inline_diagnostics.model.diagnostic import Diagnostic
from inline_diagnostics.model.fragment import Fragment


class Buffer(Protocol):
    """A text buffer with a cursor, diagnostics and an annotation slot.

    Offsets and line indices are zero-based and counted in characters.
    """

    def get_cursor(self) -> int: ...
    def char_to_line(self, offset: int) -> int: ...
    def line_to_char(self, line: int) -> int: ...
    def get_text(self) -> str: ...
    def get_diagnostics(self) -> Sequence[Diagnostic]: ...

    def set_annotations(self, fragments: list[Fragment]) -> None:
        """Replace every annotation previously set on this buffer."""
        ...


class Host(Protocol):
    """The editor hosting the panel."""

    def current_buffer(self) -> Buffer | None: ...

    def get_config(self) -> Mapping[str, Any] | None:
        """Plugin configuration overrides, or None when none are set."""
        ...
