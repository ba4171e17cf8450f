"""Keyboard input for the demo."""

from driftbox.input.bindings import KeyBinding
from driftbox.input.keys import DIRECTIONAL_KEYS, Key, parse_key
from driftbox.input.router import InputRouter
from driftbox.input.state import InputState

__all__ = ["DIRECTIONAL_KEYS", "InputRouter", "InputState", "Key", "KeyBinding", "parse_key"]
