from __future__ import annotations

import pytest

from driftbox.core.vector import Vector2
from driftbox.core.velocity import VelocityState


def test_bounds_default_to_symmetric_range() -> None:
    velocity = VelocityState(0, 0, 3, 2)
    assert (velocity.min_x, velocity.min_y) == (-3, -2)


def test_explicit_zero_minimum_is_kept() -> None:
    velocity = VelocityState(0, 0, 3, 3, min_x=0, min_y=0)
    velocity.accelerate(Vector2(-2, -2))
    assert (velocity.min_x, velocity.min_y) == (0, 0)
    assert velocity.as_vector().as_tuple() == (0, 0)


def test_inverted_bounds_are_rejected() -> None:
    with pytest.raises(ValueError):
        VelocityState(0, 0, 1, 1, min_x=2)


def test_accelerate_clamps_each_axis() -> None:
    velocity = VelocityState(0, 0, 3, 3)
    for _ in range(5):
        velocity.accelerate(Vector2(-1, 2))
    assert (velocity.x, velocity.y) == (-3, 3)


def test_accelerate_leaves_axis_when_sum_is_exactly_zero() -> None:
    velocity = VelocityState(-1, 2, 3, 3)
    velocity.accelerate(Vector2(1, -2))
    assert (velocity.x, velocity.y) == (-1, 2)


def test_accelerate_assigns_zero_when_enabled() -> None:
    velocity = VelocityState(-1, 2, 3, 3, assign_exact_zero=True)
    velocity.accelerate(Vector2(1, -2))
    assert (velocity.x, velocity.y) == (0, 0)
    assert velocity.is_at_rest


def test_decay_steps_toward_zero_without_crossing() -> None:
    velocity = VelocityState(2, -1, 3, 3)
    velocity.decay()
    assert (velocity.x, velocity.y) == (1, 0)
    velocity.decay()
    assert (velocity.x, velocity.y) == (0, 0)
    velocity.decay()
    assert (velocity.x, velocity.y) == (0, 0)


def test_decay_snaps_fractional_speed_to_rest() -> None:
    velocity = VelocityState(0.5, -1.5, 3, 3)
    velocity.decay()
    assert velocity.x == 0
    assert velocity.y == pytest.approx(-0.5)
    velocity.decay()
    assert velocity.is_at_rest


def test_exact_zero_assignment_respects_bounds_that_exclude_zero() -> None:
    velocity = VelocityState(2, 0, 3, 3, min_x=1, assign_exact_zero=True)
    velocity.accelerate(Vector2(-2, 0))
    assert velocity.x == 1


def test_accelerate_lifts_small_positive_speed_to_positive_minimum() -> None:
    velocity = VelocityState(2, 0, 3, 3, min_x=1)
    velocity.accelerate(Vector2(-1.5, 0))
    assert velocity.x == 1


def test_decay_stops_at_bound_nearest_zero() -> None:
    velocity = VelocityState(3, 0, 3, 3, min_x=1)
    for _ in range(5):
        velocity.decay()
    assert velocity.x == 1


@pytest.mark.parametrize(("x", "y"), [(9, 0), (0, -4), (-3.5, 0)])
def test_starting_velocity_outside_bounds_is_rejected(x, y) -> None:
    with pytest.raises(ValueError):
        VelocityState(x, y, 3, 3)
