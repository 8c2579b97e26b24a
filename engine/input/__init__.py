"""Engine input capture runtime modules."""

from engine.api.input_events import KeyEvent, PointerEvent, ResizeEvent, WheelEvent
from engine.input.input_controller import InputController

__all__ = ["InputController", "KeyEvent", "PointerEvent", "ResizeEvent", "WheelEvent"]
