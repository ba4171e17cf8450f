"""Rendering surfaces."""

from canvasrt.rendering.bitmap_surface import BitmapSurface, parse_color

__all__ = ["BitmapSurface", "parse_color"]
