"""Centralized runtime configuration ownership for engine execution."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping


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
        return int(default)
    try:
        value = int(raw.strip())
    except ValueError:
        return int(default)
    if minimum is not None and value < minimum:
        return int(default)
    return value


def env_float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        value = float(raw.strip())
    except ValueError:
        return float(default)
    if not math.isfinite(value) or (minimum is not None and value < minimum):
        return float(default)
    return value


def env_str(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip()
    return value or default


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Window and frame-loop settings for the engine host."""

    window_width: int = 1280
    window_height: int = 800
    window_title: str = "Tileyard"
    max_frame_delta_seconds: float = 0.25
    debug_input: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> RuntimeConfig:
        defaults = cls()
        return cls(
            window_width=env_int(
                "ENGINE_WINDOW_WIDTH", defaults.window_width, minimum=64, env=env
            ),
            window_height=env_int(
                "ENGINE_WINDOW_HEIGHT", defaults.window_height, minimum=64, env=env
            ),
            window_title=env_str("ENGINE_WINDOW_TITLE", defaults.window_title, env=env),
            max_frame_delta_seconds=env_float(
                "ENGINE_MAX_FRAME_DELTA",
                defaults.max_frame_delta_seconds,
                minimum=0.001,
                env=env,
            ),
            debug_input=env_flag("ENGINE_DEBUG_INPUT", defaults.debug_input, env=env),
        )
