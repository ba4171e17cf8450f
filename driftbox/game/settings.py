"""Player tuning loaded from environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from canvasrt.runtime.config import env_flag, env_float, env_text


@dataclass(frozen=True, slots=True)
class GameSettings:
    player_speed: float = 1
    player_max_speed: float = 3
    player_start: tuple[float, float] = (10, 476)
    player_size: tuple[float, float] = (24, 24)
    player_color: str = "red"
    assign_exact_zero: bool = False


def _number(value: float) -> float:
    # Integral values stay ints so positions remain whole pixels.
    return int(value) if float(value).is_integer() else value


def load_game_settings(*, env: Mapping[str, str] | None = None) -> GameSettings:
    defaults = GameSettings()
    return GameSettings(
        player_speed=_number(env_float("DRIFTBOX_PLAYER_SPEED", defaults.player_speed, minimum=0.0, env=env)),
        player_max_speed=_number(
            env_float("DRIFTBOX_PLAYER_MAX_SPEED", defaults.player_max_speed, minimum=0.0, env=env)
        ),
        player_start=(
            _number(env_float("DRIFTBOX_PLAYER_START_X", defaults.player_start[0], env=env)),
            _number(env_float("DRIFTBOX_PLAYER_START_Y", defaults.player_start[1], env=env)),
        ),
        player_size=(
            _number(env_float("DRIFTBOX_PLAYER_WIDTH", defaults.player_size[0], minimum=1.0, env=env)),
            _number(env_float("DRIFTBOX_PLAYER_HEIGHT", defaults.player_size[1], minimum=1.0, env=env)),
        ),
        player_color=env_text("DRIFTBOX_PLAYER_COLOR", defaults.player_color, env=env),
        assign_exact_zero=env_flag("DRIFTBOX_ASSIGN_EXACT_ZERO", defaults.assign_exact_zero, env=env),
    )


__all__ = ["GameSettings", "load_game_settings"]
