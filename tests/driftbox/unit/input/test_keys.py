from __future__ import annotations

from driftbox.input.keys import DIRECTIONAL_KEYS, Key, parse_key


def test_directional_keys_map_to_wasd() -> None:
    assert [key.value for key in DIRECTIONAL_KEYS] == ["a", "d", "w", "s"]
    assert Key.NONE not in DIRECTIONAL_KEYS


def test_parse_key_accepts_only_directional_identifiers() -> None:
    assert parse_key("a") is Key.LEFT
    assert parse_key("s") is Key.DOWN
    assert parse_key("q") is None
    assert parse_key("") is None
    assert parse_key("A") is None
    assert parse_key(None) is None
