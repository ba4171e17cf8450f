"""Logical keys recognized by the demo."""

from __future__ import annotations

from enum import StrEnum


class Key(StrEnum):
    """Directional keys mapped to their raw key identifiers."""

    LEFT = "a"
    RIGHT = "d"
    UP = "w"
    DOWN = "s"
    NONE = ""


DIRECTIONAL_KEYS: tuple[Key, ...] = (Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN)


def parse_key(value: object) -> Key | None:
    """Return the directional key for a raw identifier, or None."""
    for key in DIRECTIONAL_KEYS:
        if value == key.value:
            return key
    return None


__all__ = ["DIRECTIONAL_KEYS", "Key", "parse_key"]
