"""Drawing surface, frame pacing and key feed contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Color = str | tuple[int, int, int] | tuple[int, int, int, int]
FrameCallback = Callable[[], None]
EventHandler = Callable[[object], None]


class DrawSurface(Protocol):
    """2D surface the demo draws into once per frame."""

    @property
    def width(self) -> int:
        """Surface width in pixels."""

    @property
    def height(self) -> int:
        """Surface height in pixels."""

    def clear(self) -> None:
        """Clear the whole surface area."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """Fill one rectangle at (x, y) with size (w, h)."""


class FrameScheduler(Protocol):
    """Host frame-pacing facility."""

    def schedule_next_frame(self, callback: FrameCallback) -> None:
        """Run `callback` on the next host frame."""


class KeyEventFeed(Protocol):
    """Host keyboard event source.

    Handlers receive backend events shaped like
    ``{"event_type": "key_down", "key": "a"}``.
    """

    def add_event_handler(self, handler: EventHandler, *event_types: str) -> None:
        """Register `handler` for the given event types."""


__all__ = [
    "Color",
    "DrawSurface",
    "EventHandler",
    "FrameCallback",
    "FrameScheduler",
    "KeyEventFeed",
]
