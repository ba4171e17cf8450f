"""Per-frame orchestration of rendering, input and player kinematics."""

from __future__ import annotations

import logging

from canvasrt.api.surface import DrawSurface, FrameScheduler, KeyEventFeed
from driftbox.core.entity import Entity
from driftbox.core.ordered import OrderedCollection
from driftbox.core.vector import Number, Vector2
from driftbox.core.velocity import VelocityState
from driftbox.game.settings import GameSettings
from driftbox.input.keys import DIRECTIONAL_KEYS, Key
from driftbox.input.router import InputRouter
from driftbox.input.state import InputState

logger = logging.getLogger(__name__)

# Unit direction per key, scaled by player speed.
_DIRECTION_UNITS: dict[Key, tuple[int, int]] = {
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
}


def create_player(settings: GameSettings) -> Entity:
    """Build the player at its start position with zero, speed-bounded velocity."""
    start_x, start_y = settings.player_start
    width, height = settings.player_size
    velocity = VelocityState(
        0,
        0,
        settings.player_max_speed,
        settings.player_max_speed,
        assign_exact_zero=settings.assign_exact_zero,
    )
    return Entity(
        position=Vector2(start_x, start_y),
        velocity=velocity,
        width=width,
        height=height,
        color=settings.player_color,
    )


class FrameLoop:
    """Self-rescheduling frame loop driving one keyboard-controlled player.

    Each tick clears the surface, renders every entity (which advances it),
    then accelerates the player along the most recently pressed held key or,
    when nothing is held, decays its velocity.
    """

    def __init__(
        self,
        surface: DrawSurface,
        scheduler: FrameScheduler,
        feed: KeyEventFeed,
        settings: GameSettings | None = None,
    ) -> None:
        self._surface = surface
        self._scheduler = scheduler
        self._settings = settings or GameSettings()
        self._entities: OrderedCollection[Entity] = OrderedCollection()
        self._player = create_player(self._settings)
        self._entities.add(self._player)
        self._input_state = InputState()
        self._router = InputRouter()
        self._router.subscribe(feed)
        for binding in self._input_state.create_bindings():
            self._router.register(binding)
        self._running = False
        self._tick_pending = False
        self._frame_index = 0

    @property
    def player(self) -> Entity:
        return self._player

    @property
    def input_state(self) -> InputState:
        return self._input_state

    @property
    def router(self) -> InputRouter:
        return self._router

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self._entities.to_tuple()

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def add_entity(self, entity: Entity) -> None:
        """Track an extra entity; only the player reacts to input."""
        self._entities.add(entity)

    def start(self) -> None:
        """Run the first tick; later ticks are driven by the scheduler.

        Restarting while a tick from the previous run is still queued resumes
        that tick instead of starting a second chain.
        """
        if self._running:
            return
        self._running = True
        logger.info(
            "frame_loop_started",
            extra={
                "position": self._player.position.as_tuple(),
                "max_speed": self._settings.player_max_speed,
                "resumed": self._tick_pending,
            },
        )
        if not self._tick_pending:
            self.tick()

    def stop(self) -> None:
        """Stop rescheduling after the current tick."""
        if not self._running:
            return
        self._running = False
        logger.info("frame_loop_stopped", extra={"frame": self._frame_index})

    def tick(self) -> None:
        """Run one frame and reschedule while running."""
        self._tick_pending = False
        self._frame_index += 1
        self._surface.clear()
        self._entities.for_each(lambda entity: entity.render(self._surface))
        self._apply_input()
        if self._running:
            self._tick_pending = True
            self._scheduler.schedule_next_frame(self.tick)

    def _apply_input(self) -> None:
        speed = self._settings.player_speed
        for key in DIRECTIONAL_KEYS:
            if self._input_state.is_active(key):
                self._player.speed_up(_scaled(key, speed))
        if not self._input_state.any_held:
            self._player.slow_down()


def _scaled(key: Key, speed: Number) -> Vector2:
    unit_x, unit_y = _DIRECTION_UNITS[key]
    return Vector2(unit_x * speed, unit_y * speed)


__all__ = ["FrameLoop", "create_player"]
