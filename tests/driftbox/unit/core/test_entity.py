from __future__ import annotations

from driftbox.core.entity import Entity
from driftbox.core.vector import Vector2
from driftbox.core.velocity import VelocityState
from tests.driftbox.helpers import RecordingSurface


def _entity(vx: int = 0, vy: int = 0) -> Entity:
    return Entity(
        position=Vector2(10, 20),
        velocity=VelocityState(vx, vy, 3, 3),
        width=24,
        height=12,
        color="red",
    )


def test_render_draws_before_advancing() -> None:
    entity = _entity(2, -1)
    surface = RecordingSurface()

    entity.render(surface)

    assert surface.rects == [(10, 20, 24, 12, "red")]
    assert entity.position.as_tuple() == (12, 19)


def test_speed_up_and_slow_down_delegate_to_velocity() -> None:
    entity = _entity()
    entity.speed_up(Vector2(1, 0))
    entity.speed_up(Vector2(1, 0))
    assert entity.velocity.as_vector().as_tuple() == (2, 0)

    entity.slow_down()
    assert entity.velocity.as_vector().as_tuple() == (1, 0)


def test_advance_at_rest_keeps_position() -> None:
    entity = _entity()
    entity.advance()
    assert entity.position.as_tuple() == (10, 20)
