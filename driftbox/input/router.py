"""Keyboard event routing to registered key bindings."""

from __future__ import annotations

import logging

from canvasrt.api.input_events import KEY_DOWN, KEY_UP, KeyEvent, parse_key_event
from canvasrt.api.surface import KeyEventFeed
from driftbox.input.bindings import KeyBinding
from driftbox.input.keys import parse_key

logger = logging.getLogger(__name__)


class InputRouter:
    """Dispatch key-down/key-up events to bindings, directional keys only."""

    def __init__(self) -> None:
        self._bindings: dict[str, list[KeyBinding]] = {}
        self._subscribed = False

    @property
    def subscribed(self) -> bool:
        return self._subscribed

    def subscribe(self, feed: KeyEventFeed) -> None:
        """Attach one key-down and one key-up handler to the feed."""
        if self._subscribed:
            logger.warning("input_router_already_subscribed")
            return
        if not hasattr(feed, "add_event_handler"):
            raise RuntimeError("Key feed does not support event handlers.")
        feed.add_event_handler(self._on_key_down, KEY_DOWN)
        feed.add_event_handler(self._on_key_up, KEY_UP)
        self._subscribed = True

    def register(self, binding: KeyBinding) -> None:
        """Append binding to the sequence for its key."""
        self._bindings.setdefault(binding.key, []).append(binding)

    def bindings_for(self, key: str) -> tuple[KeyBinding, ...]:
        """Return bindings that fire for `key`; empty for non-directional keys."""
        if parse_key(key) is None:
            return ()
        return tuple(self._bindings.get(key, ()))

    def dispatch_key_down(self, key: str) -> int:
        bindings = self.bindings_for(key)
        for binding in bindings:
            binding.on_press()
        return len(bindings)

    def dispatch_key_up(self, key: str) -> int:
        bindings = self.bindings_for(key)
        for binding in bindings:
            binding.on_release()
        return len(bindings)

    def _on_key_down(self, event: object) -> None:
        parsed = parse_key_event(event, expected_type=KEY_DOWN)
        if parsed is not None:
            self._dispatch(parsed)

    def _on_key_up(self, event: object) -> None:
        parsed = parse_key_event(event, expected_type=KEY_UP)
        if parsed is not None:
            self._dispatch(parsed)

    def _dispatch(self, event: KeyEvent) -> None:
        if event.event_type == KEY_DOWN:
            invoked = self.dispatch_key_down(event.value)
        else:
            invoked = self.dispatch_key_up(event.value)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "key_event",
                extra={"event_type": event.event_type, "key": event.value, "invoked": invoked},
            )


__all__ = ["InputRouter"]
