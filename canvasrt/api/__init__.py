"""Public host runtime contracts."""

from canvasrt.api.input_events import KEY_DOWN, KEY_UP, KeyEvent, parse_key_event
from canvasrt.api.logging import EngineLoggingConfig
from canvasrt.api.surface import (
    Color,
    DrawSurface,
    EventHandler,
    FrameCallback,
    FrameScheduler,
    KeyEventFeed,
)

__all__ = [
    "Color",
    "DrawSurface",
    "EngineLoggingConfig",
    "EventHandler",
    "FrameCallback",
    "FrameScheduler",
    "KEY_DOWN",
    "KEY_UP",
    "KeyEvent",
    "KeyEventFeed",
    "parse_key_event",
]
