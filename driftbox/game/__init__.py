"""Frame loop and player tuning."""

from driftbox.game.frame_loop import FrameLoop, create_player
from driftbox.game.settings import GameSettings, load_game_settings

__all__ = ["FrameLoop", "GameSettings", "create_player", "load_game_settings"]
