from __future__ import annotations

import pytest

from canvasrt.input.key_feed import KeyEventSource


def test_key_feed_delivers_events_to_handlers_by_type() -> None:
    feed = KeyEventSource()
    downs: list[dict] = []
    ups: list[dict] = []
    feed.add_event_handler(downs.append, "key_down")
    feed.add_event_handler(ups.append, "key_up")

    assert feed.press("a") == 1
    assert feed.release("a") == 1
    assert feed.emit("char", "a") == 0

    assert downs == [{"event_type": "key_down", "key": "a"}]
    assert ups == [{"event_type": "key_up", "key": "a"}]


def test_key_feed_handler_for_multiple_types_and_counts() -> None:
    feed = KeyEventSource()
    seen: list[str] = []
    feed.add_event_handler(lambda event: seen.append(event["event_type"]), "key_down", "key_up")

    feed.press("w")
    feed.release("w")

    assert seen == ["key_down", "key_up"]
    assert feed.handler_count("key_down") == 1
    assert feed.handler_count("key_up") == 1
    assert feed.handler_count("char") == 0


def test_key_feed_requires_event_type() -> None:
    with pytest.raises(ValueError):
        KeyEventSource().add_event_handler(lambda event: None)
