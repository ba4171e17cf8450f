"""Bounded velocity with clamped acceleration and unit-step decay."""

from __future__ import annotations

from dataclasses import dataclass, field

from driftbox.core.vector import Number, Vector2


@dataclass(slots=True)
class VelocityState:
    """Velocity vector with inclusive per-axis bounds.

    `min_x` / `min_y` default to the negated maximum, giving symmetric
    bounds. An explicit bound of zero is kept as given.

    By default a delta that lands an axis exactly on zero leaves that axis
    untouched (only the positive and negative branches assign). Set
    `assign_exact_zero` to write the zero instead. Every assigned value is
    clipped into the bounds, including bounds that exclude zero.
    """

    x: Number
    y: Number
    max_x: Number
    max_y: Number
    min_x: Number | None = None
    min_y: Number | None = None
    assign_exact_zero: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if self.min_x is None:
            self.min_x = -self.max_x
        if self.min_y is None:
            self.min_y = -self.max_y
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"velocity bounds are inverted: x=[{self.min_x}, {self.max_x}] "
                f"y=[{self.min_y}, {self.max_y}]"
            )
        if not (self.min_x <= self.x <= self.max_x and self.min_y <= self.y <= self.max_y):
            raise ValueError(
                f"starting velocity ({self.x}, {self.y}) is outside its bounds"
            )

    @property
    def is_at_rest(self) -> bool:
        return self.x == 0 and self.y == 0

    def as_vector(self) -> Vector2:
        return Vector2(self.x, self.y)

    def accelerate(self, delta: Vector2) -> None:
        """Add `delta` per axis, clamping each axis into its bounds."""
        self.x = self._clamped(self.x, self.x + delta.x, self.min_x, self.max_x)
        self.y = self._clamped(self.y, self.y + delta.y, self.min_y, self.max_y)

    def decay(self) -> None:
        """Move each axis one unit toward zero without crossing it.

        With bounds that exclude zero, an axis stops at the nearer bound.
        """
        self.x = _clip(_step_toward_zero(self.x), self.min_x, self.max_x)
        self.y = _clip(_step_toward_zero(self.y), self.min_y, self.max_y)

    def _clamped(self, current: Number, candidate: Number, low: Number, high: Number) -> Number:
        if candidate == 0 and not self.assign_exact_zero:
            return current
        return _clip(candidate, low, high)


def _clip(value: Number, low: Number, high: Number) -> Number:
    return min(max(value, low), high)


def _step_toward_zero(value: Number) -> Number:
    if value >= 1:
        return value - 1
    if value <= -1:
        return value + 1
    # Sub-unit remainders snap to rest.
    return 0
