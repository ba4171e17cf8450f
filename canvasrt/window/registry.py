"""Tracking of created windows for bulk teardown."""

from __future__ import annotations

import logging
from collections.abc import Callable

from canvasrt.window.rendercanvas_window import RenderCanvasWindow, create_rendercanvas_window

WindowFactory = Callable[..., RenderCanvasWindow]

_LOG = logging.getLogger("canvasrt.window")


class WindowRegistry:
    """Create, track and destroy host windows."""

    def __init__(self, factory: WindowFactory = create_rendercanvas_window) -> None:
        self._factory = factory
        self._windows: list[RenderCanvasWindow] = []

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, window: object) -> bool:
        return any(existing is window for existing in self._windows)

    def create(self, width: int, height: int, title: str = "driftbox", **options: object) -> RenderCanvasWindow:
        """Create a window and start tracking it."""
        window = self._factory(width=int(width), height=int(height), title=title, **options)
        self._windows.append(window)
        _LOG.debug(
            "window_created",
            extra={"width": int(width), "height": int(height), "tracked": len(self._windows)},
        )
        return window

    def destroy(self, window: RenderCanvasWindow) -> None:
        """Close one window; untracked windows are ignored."""
        for index, existing in enumerate(self._windows):
            if existing is window:
                del self._windows[index]
                window.close()
                return

    def destroy_all(self) -> None:
        """Close every tracked window."""
        windows = tuple(self._windows)
        self._windows.clear()
        for window in windows:
            window.close()
        if windows:
            _LOG.debug("windows_destroyed", extra={"count": len(windows)})


__all__ = ["WindowFactory", "WindowRegistry"]
