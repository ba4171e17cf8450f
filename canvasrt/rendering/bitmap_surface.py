"""CPU framebuffer surface presented through a rendercanvas bitmap context."""

from __future__ import annotations

import logging
import math

import numpy as np

from canvasrt.api.surface import Color
from canvasrt.runtime.errors import SurfaceUnavailableError

_LOG = logging.getLogger("canvasrt.rendering")

RGBA = tuple[int, int, int, int]

NAMED_COLORS: dict[str, RGBA] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "lime": (0, 255, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "orange": (255, 165, 0, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "transparent": (0, 0, 0, 0),
}


def parse_color(color: Color) -> RGBA:
    """Resolve a color name, `#rgb[a]`/`#rrggbb[aa]` string or channel tuple to RGBA bytes."""
    if isinstance(color, tuple):
        if len(color) not in (3, 4):
            raise ValueError(f"color tuple must have 3 or 4 channels: {color!r}")
        channels = [min(255, max(0, int(channel))) for channel in color]
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    normalized = str(color).strip().lower()
    named = NAMED_COLORS.get(normalized)
    if named is not None:
        return named
    parsed = _parse_hex_color(normalized)
    if parsed is None:
        raise ValueError(f"unknown color: {color!r}")
    return parsed


def _parse_hex_color(raw: str) -> RGBA | None:
    if not raw.startswith("#"):
        return None
    value = raw.removeprefix("#")
    if len(value) in (3, 4):
        value = "".join(ch * 2 for ch in value)
    if len(value) == 6:
        value = f"{value}ff"
    if len(value) != 8:
        return None
    try:
        channels = tuple(int(value[index:index + 2], 16) for index in range(0, 8, 2))
    except ValueError:
        return None
    return (channels[0], channels[1], channels[2], channels[3])


class BitmapSurface:
    """RGBA framebuffer implementing the draw-surface contract."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        clear_color: Color = "transparent",
        context: object | None = None,
    ) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise SurfaceUnavailableError(f"invalid surface size: {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._clear_rgba = np.array(parse_color(clear_color), dtype=np.uint8)
        self._pixels = np.zeros((self._height, self._width, 4), dtype=np.uint8)
        self._pixels[:, :] = self._clear_rgba
        self._context = context

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Framebuffer view in (row, column, channel) order."""
        return self._pixels

    def clear(self) -> None:
        self._pixels[:, :] = self._clear_rgba

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """Fill the rectangle clipped to the surface bounds."""
        rgba = parse_color(color)
        left = max(0, math.floor(x))
        top = max(0, math.floor(y))
        right = min(self._width, math.floor(x + w))
        bottom = min(self._height, math.floor(y + h))
        if right <= left or bottom <= top:
            return
        self._pixels[top:bottom, left:right] = rgba

    def pixel(self, x: int, y: int) -> RGBA:
        r, g, b, a = (int(channel) for channel in self._pixels[int(y), int(x)])
        return (r, g, b, a)

    def present(self, context: object | None = None) -> bool:
        """Hand the framebuffer to a bitmap context; return whether it was accepted."""
        target = context if context is not None else self._context
        if target is None:
            return False
        set_bitmap = getattr(target, "set_bitmap", None)
        if not callable(set_bitmap):
            _LOG.warning("present_skipped", extra={"reason": "context_without_set_bitmap"})
            return False
        set_bitmap(self._pixels)
        return True


__all__ = ["BitmapSurface", "NAMED_COLORS", "parse_color"]
