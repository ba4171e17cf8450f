"""Key binding records."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyCallback = Callable[[], None]


def _noop() -> None:
    return None


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """One key with its press and release callbacks."""

    key: str
    on_press: KeyCallback = _noop
    on_release: KeyCallback = _noop


__all__ = ["KeyBinding", "KeyCallback"]
