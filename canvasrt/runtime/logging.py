"""Log sinks for canvasrt hosts.

Loggers across the runtime and the game log a short event name as the
message and put the details in `extra=` (for example
`logger.info("frame_loop_stopped", extra={"frame": 120})`). Both formatters
here render those details: the console as trailing `key=value` pairs, the
JSON sink as a nested `fields` object.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from canvasrt.api.logging import EngineLoggingConfig

_LISTENER: QueueListener | None = None
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the structured fields attached to `record` through `extra=`."""
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}


class TextFormatter(logging.Formatter):
    """Console lines with structured fields appended after the event name."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = record_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{line} {pairs}"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; fields from `extra=` nest under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_engine_logging(config: EngineLoggingConfig) -> None:
    """Replace root handlers with a console sink and, optionally, a file sink.

    The file sink is written from a background `QueueListener` so frame
    callbacks never block on disk.
    """
    global _LISTENER

    shutdown_engine_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    sink.setFormatter(_formatter_for(config.file_format))

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _LISTENER = QueueListener(records, console, sink, respect_handler_level=True)
    _LISTENER.start()


def shutdown_engine_logging() -> None:
    """Drain the file listener and close its handlers."""
    global _LISTENER

    if _LISTENER is None:
        return
    listener, _LISTENER = _LISTENER, None
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def _formatter_for(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else TextFormatter()


__all__ = [
    "JsonFormatter",
    "TextFormatter",
    "configure_engine_logging",
    "record_fields",
    "shutdown_engine_logging",
]
