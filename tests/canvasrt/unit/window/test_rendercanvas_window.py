from __future__ import annotations

import sys

import pytest

from canvasrt.runtime.errors import SurfaceUnavailableError
from canvasrt.window.rendercanvas_window import RenderCanvasWindow, create_rendercanvas_window
from tests.canvasrt.fakes import FakeCanvas


def test_window_forwards_key_handlers_to_canvas() -> None:
    canvas = FakeCanvas()
    window = RenderCanvasWindow(canvas=canvas)
    seen: list[str] = []
    window.add_event_handler(lambda event: seen.append(event["key"]), "key_down", "key_up")

    canvas.emit("key_down", key="a")
    canvas.emit("key_up", key="a")

    assert seen == ["a", "a"]
    assert "close" in canvas.handlers


def test_create_surface_uses_logical_size_and_bitmap_context() -> None:
    canvas = FakeCanvas(logical_size=(64, 48))
    window = RenderCanvasWindow(canvas=canvas, width=800, height=500)

    surface = window.create_surface()

    assert (surface.width, surface.height) == (64, 48)
    assert window.create_surface() is surface


def test_create_surface_falls_back_to_configured_size() -> None:
    canvas = FakeCanvas(logical_size=None)
    window = RenderCanvasWindow(canvas=canvas, width=32, height=16)

    surface = window.create_surface()

    assert (surface.width, surface.height) == (32, 16)


def test_create_surface_fails_fast_without_bitmap_context() -> None:
    window = RenderCanvasWindow(canvas=FakeCanvas(bitmap=False))
    with pytest.raises(SurfaceUnavailableError):
        window.create_surface()


def test_scheduled_frame_runs_inside_draw_and_presents() -> None:
    canvas = FakeCanvas(logical_size=(8, 8))
    window = RenderCanvasWindow(canvas=canvas)
    surface = window.create_surface()
    calls: list[str] = []

    def frame() -> None:
        calls.append("frame")
        surface.fill_rect(0, 0, 2, 2, "red")

    window.schedule_next_frame(frame)
    assert canvas.draw_requests == 1
    assert calls == []

    canvas.draw()

    assert calls == ["frame"]
    assert len(canvas.context.bitmaps) == 1
    assert tuple(canvas.context.bitmaps[0][1, 1]) == (255, 0, 0, 255)

    canvas.draw()
    assert calls == ["frame"]


def test_draw_failure_closes_window() -> None:
    canvas = FakeCanvas()
    window = RenderCanvasWindow(canvas=canvas)
    window.create_surface()

    def broken() -> None:
        raise RuntimeError("boom")

    window.schedule_next_frame(broken)
    canvas.draw()

    assert window.closed is True
    assert canvas.closed is True
    window.schedule_next_frame(lambda: None)
    assert canvas.draw_requests == 1


def test_close_event_stops_scheduling() -> None:
    canvas = FakeCanvas()
    window = RenderCanvasWindow(canvas=canvas)

    canvas.emit("close")
    window.schedule_next_frame(lambda: None)

    assert window.closed is True
    assert canvas.draw_requests == 0


def test_set_title_and_close() -> None:
    canvas = FakeCanvas()
    window = RenderCanvasWindow(canvas=canvas)
    window.set_title("driftbox")
    window.close()
    window.close()

    assert canvas.title == "driftbox"
    assert canvas.closed is True


def test_create_rendercanvas_window_wraps_existing_canvas() -> None:
    canvas = FakeCanvas()
    window = create_rendercanvas_window(canvas, width=100, height=50)
    assert window.canvas is canvas
    assert (window.width, window.height) == (100, 50)


def test_create_rendercanvas_window_without_backend_raises(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "rendercanvas.auto", None)
    with pytest.raises(SurfaceUnavailableError):
        create_rendercanvas_window(width=10, height=10)
