"""Public engine API contracts."""

from engine.api.game_module import GameModule, HostControl, HostFrameContext
from engine.api.input_events import (
    BUTTON_LEFT,
    BUTTON_MIDDLE,
    BUTTON_RIGHT,
    InputEvent,
    KeyEvent,
    PointerEvent,
    ResizeEvent,
    WheelEvent,
)
from engine.api.input_snapshot import InputSnapshot
from engine.api.logging import EngineLoggingConfig, configure_logging, get_logger
from engine.api.render import RenderAPI

__all__ = [
    "BUTTON_LEFT",
    "BUTTON_MIDDLE",
    "BUTTON_RIGHT",
    "EngineLoggingConfig",
    "GameModule",
    "HostControl",
    "HostFrameContext",
    "InputEvent",
    "InputSnapshot",
    "KeyEvent",
    "PointerEvent",
    "RenderAPI",
    "ResizeEvent",
    "WheelEvent",
    "configure_logging",
    "get_logger",
]
