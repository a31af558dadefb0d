"""In-process dispatch of editor notifications to panel refresh handlers."""

from typing import Any, Callable


class EventBus:
    """Routes editor events, keyed by event class, to their handlers.

    The host emits ``SelectionChanged`` and ``DiagnosticsUpdated`` here and
    the plugin's refresh runs inside ``emit``, so the annotations are
    replaced before the host paints again. Handlers may unsubscribe while an
    event is being dispatched; the current dispatch still reaches them.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}
        self._observers: list[Callable] = []

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Run ``handler`` for every emitted event of exactly ``event_type``."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Stop running ``handler`` for ``event_type``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def on_all(self, observer: Callable) -> None:
        """Observe every event, ahead of the type-specific handlers."""
        self._observers.append(observer)

    def emit(self, event: Any) -> None:
        """Dispatch ``event``; a handler's exception propagates to the emitter."""
        for observer in list(self._observers):
            observer(event)
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)
