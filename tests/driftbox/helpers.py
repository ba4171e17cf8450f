from __future__ import annotations


class RecordingSurface:
    def __init__(self, width: int = 800, height: int = 500) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def fill_rect(self, x, y, width, height, color) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    @property
    def rects(self) -> list[tuple]:
        return [call[1:] for call in self.calls if call[0] == "fill_rect"]

    def reset(self) -> None:
        self.calls.clear()
