"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass

KEY_DOWN = "key_down"
KEY_UP = "key_up"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key event."""

    event_type: str
    value: str


def parse_key_event(event: object, *, expected_type: str) -> KeyEvent | None:
    """Normalize a backend key event (dict or attribute object) into `KeyEvent`."""
    if str(_event_value(event, "event_type", "")) != expected_type:
        return None
    key = _event_value(event, "key")
    if not isinstance(key, str):
        return None
    return KeyEvent(expected_type, key)


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


__all__ = ["KEY_DOWN", "KEY_UP", "KeyEvent", "parse_key_event"]
