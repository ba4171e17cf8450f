"""Rendercanvas/GLFW-backed window layer implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from canvasrt.api.surface import EventHandler, FrameCallback
from canvasrt.rendering.bitmap_surface import BitmapSurface
from canvasrt.runtime.errors import (
    RECOVERABLE_RUNTIME_ERRORS,
    SurfaceUnavailableError,
    log_recoverable,
)

_LOG = logging.getLogger("canvasrt.window")


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


def stop_backend_loop(rc_auto: Any) -> None:
    """Stop rendercanvas backend loop when supported."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "stop"):
        loop.stop()


@dataclass(slots=True)
class RenderCanvasWindow:
    """Window adapter acting as key feed, frame scheduler and surface provider."""

    canvas: Any
    width: int = 800
    height: int = 500
    _rc_auto: Any | None = field(default=None, repr=False)
    _surface: BitmapSurface | None = field(default=None, repr=False)
    _pending: FrameCallback | None = field(default=None, repr=False)
    _closed: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if callable(add_handler):
            add_handler(self._on_close, "close")

    @property
    def closed(self) -> bool:
        return self._closed

    def add_event_handler(self, handler: EventHandler, *event_types: str) -> None:
        """Forward handler registration to the canvas event system."""
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            raise RuntimeError("Canvas does not support event handlers.")
        add_handler(handler, *event_types)

    def create_surface(self) -> BitmapSurface:
        """Create the framebuffer bound to the canvas bitmap context."""
        if self._surface is not None:
            return self._surface
        context = self._acquire_bitmap_context()
        width, height = self._logical_size()
        self._surface = BitmapSurface(width, height, context=context)
        _LOG.info("surface_created", extra={"width": width, "height": height})
        return self._surface

    def schedule_next_frame(self, callback: FrameCallback) -> None:
        """Run `callback` inside the next canvas draw."""
        if self._closed:
            return
        self._pending = callback
        request_draw = getattr(self.canvas, "request_draw", None)
        if not callable(request_draw):
            raise RuntimeError("Canvas does not support request_draw.")
        try:
            request_draw(self._draw_frame)
        except TypeError:
            log_recoverable(_LOG, "request_draw_without_callback")
            request_draw()

    def set_title(self, title: str) -> None:
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title)

    def run_loop(self) -> None:
        if self._rc_auto is None:
            return
        run_backend_loop(self._rc_auto)

    def stop_loop(self) -> None:
        if self._rc_auto is None:
            return
        stop_backend_loop(self._rc_auto)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = None
        self.stop_loop()
        closer = getattr(self.canvas, "close", None)
        if callable(closer):
            closer()

    def _draw_frame(self) -> None:
        callback = self._pending
        self._pending = None
        if callback is not None:
            try:
                callback()
            except Exception:  # pylint: disable=broad-exception-caught
                _LOG.exception("unhandled_exception_in_draw_loop")
                self.close()
                return
        if self._surface is not None:
            self._surface.present()

    def _acquire_bitmap_context(self) -> object:
        get_bitmap_context = getattr(self.canvas, "get_bitmap_context", None)
        get_context = getattr(self.canvas, "get_context", None)
        try:
            if callable(get_bitmap_context):
                context = get_bitmap_context()
            elif callable(get_context):
                context = get_context("bitmap")
            else:
                context = None
        except RECOVERABLE_RUNTIME_ERRORS as exc:
            raise SurfaceUnavailableError("Canvas bitmap context could not be created.") from exc
        if context is None:
            raise SurfaceUnavailableError("Canvas does not expose a bitmap context.")
        return context

    def _logical_size(self) -> tuple[int, int]:
        getter = getattr(self.canvas, "get_logical_size", None)
        if callable(getter):
            try:
                lw, lh = getter()
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(_LOG, "logical_size_unavailable")
            else:
                if lw > 0 and lh > 0:
                    return (int(lw), int(lh))
        return (int(self.width), int(self.height))

    def _on_close(self, event: object) -> None:
        _ = event
        _LOG.info("window_close_requested")
        self._closed = True
        self._pending = None


def create_rendercanvas_window(
    canvas: Any | None = None,
    *,
    width: int = 800,
    height: int = 500,
    title: str = "driftbox",
    max_fps: float = 60.0,
    vsync: bool = True,
) -> RenderCanvasWindow:
    """Create window adapter over an existing or newly created rendercanvas canvas."""
    if canvas is not None:
        return RenderCanvasWindow(canvas=canvas, width=int(width), height=int(height))
    try:
        import rendercanvas.auto as rc_auto
    except ImportError as exc:
        raise SurfaceUnavailableError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise SurfaceUnavailableError("rendercanvas.auto did not expose RenderCanvas.")
    try:
        canvas = canvas_cls(
            size=(int(width), int(height)),
            title=title,
            update_mode="ondemand",
            max_fps=float(max_fps),
            vsync=bool(vsync),
        )
    except TypeError:
        canvas = canvas_cls(size=(int(width), int(height)), title=title)
    return RenderCanvasWindow(canvas=canvas, width=int(width), height=int(height), _rc_auto=rc_auto)


__all__ = [
    "RenderCanvasWindow",
    "create_rendercanvas_window",
    "run_backend_loop",
    "stop_backend_loop",
]
