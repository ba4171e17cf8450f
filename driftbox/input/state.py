"""Held-key state shared between input bindings and the frame loop."""

from __future__ import annotations

from dataclasses import dataclass, field

from driftbox.core.ordered import OrderedCollection, unique_collection
from driftbox.input.bindings import KeyBinding
from driftbox.input.keys import DIRECTIONAL_KEYS, Key


@dataclass(slots=True)
class InputState:
    """Keys currently held plus the most recently pressed key.

    `last_pressed` only changes on press; releasing a key leaves it as is.
    """

    held: OrderedCollection[Key] = field(default_factory=unique_collection)
    last_pressed: Key = Key.NONE

    def press(self, key: Key) -> None:
        self.last_pressed = key
        self.held.add(key)

    def release(self, key: Key) -> None:
        self.held.remove(key)

    def is_active(self, key: Key) -> bool:
        """Return whether `key` is held and was the most recent press."""
        return key in self.held and key == self.last_pressed

    @property
    def any_held(self) -> bool:
        return len(self.held) > 0

    def create_bindings(self) -> tuple[KeyBinding, ...]:
        """Return bindings that feed each directional key into this state."""
        return tuple(
            KeyBinding(
                key=key,
                on_press=lambda key=key: self.press(key),
                on_release=lambda key=key: self.release(key),
            )
            for key in DIRECTIONAL_KEYS
        )


__all__ = ["InputState"]
