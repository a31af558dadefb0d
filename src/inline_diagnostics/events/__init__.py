"""Event system: bus and editor event types."""

from inline_diagnostics.events.bus import EventBus
from inline_diagnostics.events.types import DiagnosticsUpdated, SelectionChanged

__all__ = [
    "EventBus",
    "DiagnosticsUpdated",
    "SelectionChanged",
]
