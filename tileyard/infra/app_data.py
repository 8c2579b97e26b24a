"""Tileyard app-data paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_app_root() -> Path:
    """Resolve the directory the application runs from."""
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def resolve_app_data_root() -> Path:
    configured = os.getenv("TILEYARD_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        return candidate if candidate.is_absolute() else resolve_app_root() / candidate
    return resolve_app_root() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve the logs directory; ``TILEYARD_LOG_DIR`` overrides the app-data default."""
    configured = os.getenv("TILEYARD_LOG_DIR", "").strip()
    if not configured:
        return resolve_app_data_root() / "logs"
    candidate = Path(configured)
    return candidate if candidate.is_absolute() else resolve_app_data_root() / candidate


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    root.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs}
