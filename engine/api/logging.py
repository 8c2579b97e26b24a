"""Public engine logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineLoggingConfig:
    """Engine logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: EngineLoggingConfig) -> None:
    """Install root handlers according to ``config``."""
    from engine.runtime.logging import configure_engine_logging

    configure_engine_logging(config)


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


__all__ = ["EngineLoggingConfig", "configure_logging", "get_logger"]
