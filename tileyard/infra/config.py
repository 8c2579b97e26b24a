"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from engine.runtime.config import env_flag, env_float, env_int, env_str

CANCEL_KEY = "escape"

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env",
    ".env.local",
)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> bool:
    """Load KEY=VALUE pairs from an env file into the process environment.

    Returns ``False`` when the file does not exist. Blank lines, comments and
    lines without ``=`` are skipped; matching outer quotes are stripped.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return False

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value
    return True


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> list[str]:
    """Load env files in order; later files win. Returns the paths that existed."""
    loaded: list[str] = []
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        if load_env_file(path, override_existing=override_existing):
            loaded.append(path)
    return loaded


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.is_absolute() or candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_candidate = Path(executable).resolve().parent / path
            if frozen_candidate.exists():
                return frozen_candidate

    # IDE run configs may start from a different working directory.
    return Path(__file__).resolve().parents[2] / path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Grid shape, key bindings and HUD toggle for the placement surface."""

    grid_rows: int = 30
    grid_cols: int = 30
    cell_size: float = 50.0
    key_store: str = "s"
    key_track: str = "t"
    hud_enabled: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> AppConfig:
        defaults = cls()
        cell_size = env_float("TILEYARD_CELL_SIZE", defaults.cell_size, minimum=0.0, env=env)
        key_store = env_str("TILEYARD_KEY_STORE", defaults.key_store, env=env).lower()
        key_track = env_str("TILEYARD_KEY_TRACK", defaults.key_track, env=env).lower()
        # Each tool needs its own key, distinct from cancel.
        if len({key_store, key_track, CANCEL_KEY}) < 3:
            key_store, key_track = defaults.key_store, defaults.key_track
        return cls(
            grid_rows=env_int("TILEYARD_GRID_ROWS", defaults.grid_rows, minimum=0, env=env),
            grid_cols=env_int("TILEYARD_GRID_COLS", defaults.grid_cols, minimum=0, env=env),
            cell_size=cell_size if cell_size > 0 else defaults.cell_size,
            key_store=key_store,
            key_track=key_track,
            hud_enabled=env_flag("TILEYARD_HUD_ENABLED", defaults.hud_enabled, env=env),
        )
