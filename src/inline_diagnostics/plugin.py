"""Wires the annotation engine to a host's editor events."""

from __future__ import annotations

import logging

from inline_diagnostics.config import PanelConfig, resolve_config
from inline_diagnostics.engine.engine import InlineDiagnostics
from inline_diagnostics.engine.host import Host
from inline_diagnostics.events.bus import EventBus
from inline_diagnostics.events.types import DiagnosticsUpdated, SelectionChanged
from inline_diagnostics.layout.width import DEFAULT_TAB_WIDTH
from inline_diagnostics.model.fragment import Fragment

logger = logging.getLogger(__name__)

TRIGGER_EVENTS: tuple[type, ...] = (SelectionChanged, DiagnosticsUpdated)


class InlineDiagnosticsPlugin:
    """Refreshes the current buffer's panel on selection and diagnostic changes."""

    def __init__(
        self,
        host: Host,
        tab_width: int = DEFAULT_TAB_WIDTH,
        skip_unchanged: bool = True,
    ) -> None:
        self.host = host
        self.engine = InlineDiagnostics(tab_width=tab_width, skip_unchanged=skip_unchanged)
        self._bus: EventBus | None = None

    def register(self, bus: EventBus) -> None:
        for event_type in TRIGGER_EVENTS:
            bus.subscribe(event_type, self.handle_event)
        self._bus = bus
        logger.info("Inline diagnostics panel enabled")

    def unregister(self) -> None:
        if self._bus is None:
            return
        for event_type in TRIGGER_EVENTS:
            self._bus.unsubscribe(event_type, self.handle_event)
        self._bus = None

    def handle_event(self, event: SelectionChanged | DiagnosticsUpdated) -> None:
        logger.debug("Refreshing panel on %s", type(event).__name__)
        self.refresh()

    def refresh(self) -> list[Fragment] | None:
        """Recompute the panel for the host's current buffer, if any."""
        buffer = self.host.current_buffer()
        if buffer is None:
            return None
        return self.engine.update(buffer, self.load_config())

    def load_config(self) -> PanelConfig:
        """Resolve the host's overrides; an unavailable source yields defaults."""
        try:
            overrides = self.host.get_config()
        except (LookupError, OSError) as exc:
            logger.debug("Plugin config unavailable, using defaults: %s", exc)
            return resolve_config(None)
        try:
            return resolve_config(overrides)
        except (TypeError, ValueError, OverflowError) as exc:
            logger.warning("Ignoring invalid plugin config: %s", exc)
            return resolve_config(None)
