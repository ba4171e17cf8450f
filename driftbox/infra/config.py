"""Environment file loading for the demo."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    ".env.runtime",
    ".env.runtime.local",
    ".env.app",
    ".env.app.local",
)


def load_env_file(path: str | Path = ".env", *, override_existing: bool = True) -> int:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment
    variables. Returns the number of variables applied.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return 0

    applied = 0
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied += 1
    return applied


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str | Path] | None = None
) -> None:
    """Load split env files; later files overwrite earlier ones."""
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str | Path) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / candidate


__all__ = ["DEFAULT_ENV_FILES", "load_default_env_files", "load_env_file"]
