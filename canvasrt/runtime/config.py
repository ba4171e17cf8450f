"""Centralized runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RuntimeWindowConfig:
    width: int
    height: int
    title: str
    max_fps: float
    vsync: bool


@dataclass(frozen=True, slots=True)
class RuntimeHeadlessConfig:
    enabled: bool
    frames: int


@dataclass(frozen=True, slots=True)
class RuntimeLoggingConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    window: RuntimeWindowConfig
    headless: RuntimeHeadlessConfig
    logging: RuntimeLoggingConfig


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def env_flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def env_int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def env_float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def env_text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve runtime log level with runtime-prefixed override."""
    value = _raw("CANVASRT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    return value if value in {"text", "json"} else "text"


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    file_path = env_text("CANVASRT_LOG_FILE", "", env=env)
    return RuntimeConfig(
        window=RuntimeWindowConfig(
            width=env_int("CANVASRT_WINDOW_WIDTH", 800, minimum=1, env=env),
            height=env_int("CANVASRT_WINDOW_HEIGHT", 500, minimum=1, env=env),
            title=env_text("CANVASRT_WINDOW_TITLE", "driftbox", env=env),
            max_fps=env_float("CANVASRT_MAX_FPS", 60.0, minimum=1.0, env=env),
            vsync=env_flag("CANVASRT_VSYNC", True, env=env),
        ),
        headless=RuntimeHeadlessConfig(
            enabled=env_flag("CANVASRT_HEADLESS", False, env=env),
            frames=env_int("CANVASRT_HEADLESS_FRAMES", 120, minimum=1, env=env),
        ),
        logging=RuntimeLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_normalize_log_format(env_text("CANVASRT_LOG_FORMAT", "text", env=env)),
            file_path=file_path or None,
        ),
    )


__all__ = [
    "RuntimeConfig",
    "RuntimeHeadlessConfig",
    "RuntimeLoggingConfig",
    "RuntimeWindowConfig",
    "env_flag",
    "env_float",
    "env_int",
    "env_text",
    "load_runtime_config",
    "resolve_log_level_name",
]
