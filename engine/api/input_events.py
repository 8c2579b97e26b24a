"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

BUTTON_LEFT = 1
BUTTON_RIGHT = 2
BUTTON_MIDDLE = 3


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer event in canvas coordinates with movement since the previous pointer event."""

    event_type: str
    x: float
    y: float
    button: int
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key event; ``value`` is the normalized lower-case key name."""

    event_type: str
    value: str


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Mouse wheel event in canvas coordinates."""

    x: float
    y: float
    dy: float


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    """Logical canvas size change."""

    width: float
    height: float


InputEvent: TypeAlias = PointerEvent | KeyEvent | WheelEvent | ResizeEvent

__all__ = [
    "BUTTON_LEFT",
    "BUTTON_MIDDLE",
    "BUTTON_RIGHT",
    "InputEvent",
    "KeyEvent",
    "PointerEvent",
    "ResizeEvent",
    "WheelEvent",
]
