"""Host input capture modules."""

from canvasrt.api.input_events import KeyEvent
from canvasrt.input.key_feed import KeyEventSource

__all__ = ["KeyEvent", "KeyEventSource"]
