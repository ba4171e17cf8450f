"""In-process key event source for headless runs."""

from __future__ import annotations

from canvasrt.api.input_events import KEY_DOWN, KEY_UP
from canvasrt.api.surface import EventHandler


class KeyEventSource:
    """Key feed that emits backend-shaped events to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def add_event_handler(self, handler: EventHandler, *event_types: str) -> None:
        """Register `handler` for each event type."""
        if not event_types:
            raise ValueError("at least one event type is required")
        for event_type in event_types:
            self._handlers.setdefault(event_type, []).append(handler)

    def handler_count(self, event_type: str) -> int:
        return len(self._handlers.get(event_type, ()))

    def emit(self, event_type: str, key: str) -> int:
        """Deliver one event and return number of invoked handlers."""
        event = {"event_type": event_type, "key": key}
        handlers = tuple(self._handlers.get(event_type, ()))
        for handler in handlers:
            handler(event)
        return len(handlers)

    def press(self, key: str) -> int:
        return self.emit(KEY_DOWN, key)

    def release(self, key: str) -> int:
        return self.emit(KEY_UP, key)


__all__ = ["KeyEventSource"]
