"""Host runtime modules."""

from canvasrt.runtime.config import RuntimeConfig, load_runtime_config
from canvasrt.runtime.errors import SurfaceUnavailableError
from canvasrt.runtime.logging import configure_engine_logging, shutdown_engine_logging
from canvasrt.runtime.scheduler import ManualFrameScheduler

__all__ = [
    "ManualFrameScheduler",
    "RuntimeConfig",
    "SurfaceUnavailableError",
    "configure_engine_logging",
    "load_runtime_config",
    "shutdown_engine_logging",
]
