"""Application entry point."""

from __future__ import annotations

import logging

from canvasrt.api.logging import EngineLoggingConfig
from canvasrt.input.key_feed import KeyEventSource
from canvasrt.rendering.bitmap_surface import BitmapSurface
from canvasrt.runtime.config import RuntimeConfig, env_text, load_runtime_config
from canvasrt.runtime.errors import SurfaceUnavailableError
from canvasrt.runtime.logging import configure_engine_logging, shutdown_engine_logging
from canvasrt.runtime.scheduler import ManualFrameScheduler
from canvasrt.window.registry import WindowRegistry
from driftbox.game.frame_loop import FrameLoop
from driftbox.game.settings import GameSettings, load_game_settings
from driftbox.infra.config import load_default_env_files
from driftbox.input.keys import parse_key

logger = logging.getLogger(__name__)


def run_headless(
    config: RuntimeConfig,
    settings: GameSettings,
    *,
    hold_key: str | None = None,
) -> FrameLoop:
    """Drive the loop for the configured frame count without a window."""
    scheduler = ManualFrameScheduler()
    feed = KeyEventSource()
    surface = BitmapSurface(config.window.width, config.window.height)
    loop = FrameLoop(surface, scheduler, feed, settings)
    if hold_key:
        if parse_key(hold_key) is None:
            logger.warning("headless_hold_key_ignored", extra={"key": hold_key})
        feed.press(hold_key)
    loop.start()
    scheduler.run_frames(config.headless.frames - 1)
    loop.stop()
    player = loop.player
    logger.info(
        "headless_run_done",
        extra={
            "frame": loop.frame_index,
            "position": player.position.as_tuple(),
            "velocity": player.velocity.as_vector().as_tuple(),
        },
    )
    return loop


def run_windowed(config: RuntimeConfig, settings: GameSettings) -> None:
    """Open a window and run the loop until the window closes."""
    registry = WindowRegistry()
    try:
        window = registry.create(
            config.window.width,
            config.window.height,
            config.window.title,
            max_fps=config.window.max_fps,
            vsync=config.window.vsync,
        )
        surface = window.create_surface()
        loop = FrameLoop(surface, window, window, settings)
        loop.start()
        window.run_loop()
        loop.stop()
    finally:
        registry.destroy_all()


def main() -> None:
    """Run the driftbox demo."""
    load_default_env_files()
    config = load_runtime_config()
    configure_engine_logging(
        EngineLoggingConfig(
            level_name=config.logging.level_name,
            console_format=config.logging.console_format,
            file_path=config.logging.file_path,
        )
    )
    settings = load_game_settings()
    try:
        if config.headless.enabled:
            run_headless(config, settings, hold_key=env_text("DRIFTBOX_HEADLESS_HOLD", "") or None)
        else:
            run_windowed(config, settings)
    except SurfaceUnavailableError:
        logger.exception("surface_unavailable")
        raise
    finally:
        shutdown_engine_logging()


if __name__ == "__main__":
    main()
