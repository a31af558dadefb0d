"""Fragment model: one positioned, styled run of annotation text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Fragment:
    """A styled text run the host paints relative to an anchor character.

    Attributes:
        char_idx: Anchor character shared by every fragment of one panel.
        text: Literal text to paint.
        fg: Foreground color, or None for the host default.
        bg: Background color, or None for no fill.
        offset: Column position relative to the anchor.
        is_line: False for the run appended to the code line, True for a
            virtual line drawn below it.
        virt_line_idx: Zero-based virtual line the fragment belongs to;
            None for the inline row.
    """

    char_idx: int
    text: str
    fg: str | None = None
    bg: str | None = None
    offset: int = 0
    is_line: bool = False
    virt_line_idx: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "char_idx": self.char_idx,
            "text": self.text,
            "fg": self.fg,
            "bg": self.bg,
            "offset": self.offset,
            "is_line": self.is_line,
            "virt_line_idx": self.virt_line_idx,
        }
