"""Drawable rectangle entity with integrated motion."""

from __future__ import annotations

from dataclasses import dataclass

from canvasrt.api.surface import Color, DrawSurface
from driftbox.core.vector import Number, Vector2
from driftbox.core.velocity import VelocityState


@dataclass(slots=True)
class Entity:
    """Filled rectangle owning its position and velocity."""

    position: Vector2
    velocity: VelocityState
    width: Number
    height: Number
    color: Color

    def advance(self) -> None:
        """Apply one frame of velocity to position."""
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y

    def render(self, surface: DrawSurface) -> None:
        """Draw at the current position, then advance one frame."""
        surface.fill_rect(self.position.x, self.position.y, self.width, self.height, self.color)
        self.advance()

    def speed_up(self, delta: Vector2) -> None:
        self.velocity.accelerate(delta)

    def slow_down(self) -> None:
        self.velocity.decay()
