"""Engine runtime modules."""

from engine.runtime.config import RuntimeConfig
from engine.runtime.errors import RenderingUnavailableError, log_recoverable
from engine.runtime.host import EngineHost
from engine.runtime.logging import JsonFormatter, setup_engine_logging, stop_engine_logging
from engine.runtime.time import FrameClock

__all__ = [
    "EngineHost",
    "FrameClock",
    "JsonFormatter",
    "RenderingUnavailableError",
    "RuntimeConfig",
    "log_recoverable",
    "setup_engine_logging",
    "stop_engine_logging",
]
