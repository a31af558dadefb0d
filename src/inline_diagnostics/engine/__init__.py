"""Engine layer: host protocols, in-memory host and the annotation engine."""

from inline_diagnostics.engine.engine import (
    BufferSnapshot,
    InlineDiagnostics,
    build_panel,
    compute_fragments,
    current_line_text,
)
from inline_diagnostics.engine.host import Buffer, Host
from inline_diagnostics.engine.memory import InMemoryBuffer, InMemoryHost

__all__ = [
    "Buffer",
    "Host",
    "InMemoryBuffer",
    "InMemoryHost",
    "BufferSnapshot",
    "InlineDiagnostics",
    "build_panel",
    "compute_fragments",
    "current_line_text",
]
