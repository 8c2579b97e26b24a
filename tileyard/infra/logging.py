"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from engine.api.logging import EngineLoggingConfig, configure_logging
from tileyard.infra.app_data import resolve_logs_dir

__all__ = ["resolve_run_log_file_path", "setup_logging"]


def setup_logging() -> str:
    """Configure console and per-run file logging; returns the log file path."""
    level_name = os.getenv("TILEYARD_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    console_format = (os.getenv("LOG_FORMAT") or "text").strip().lower()
    file_path = resolve_run_log_file_path()
    configure_logging(
        EngineLoggingConfig(
            level_name=level_name.upper(),
            console_format=console_format,
            file_path=file_path,
            file_format="json",
        )
    )
    logging.getLogger(__name__).info("logging_file=%s", file_path)
    return file_path


def resolve_run_log_file_path(now: datetime | None = None) -> str:
    base_dir = Path(resolve_logs_dir())
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now(UTC)).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"tileyard_run_{stamp}.jsonl")
