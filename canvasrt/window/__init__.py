"""Window subsystem runtime adapters."""

from canvasrt.window.registry import WindowRegistry
from canvasrt.window.rendercanvas_window import RenderCanvasWindow, create_rendercanvas_window

__all__ = ["RenderCanvasWindow", "WindowRegistry", "create_rendercanvas_window"]
