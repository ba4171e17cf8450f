"""Plain 2D vector used for positions and per-frame deltas."""

from __future__ import annotations

from dataclasses import dataclass

Number = int | float


@dataclass(slots=True)
class Vector2:
    """Mutable (x, y) pair."""

    x: Number = 0
    y: Number = 0

    def add_in_place(self, other: "Vector2") -> None:
        self.x += other.x
        self.y += other.y

    def as_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)
