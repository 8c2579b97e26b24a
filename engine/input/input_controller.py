"""Canvas event normalization into per-frame input snapshots."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from engine.api.input_events import InputEvent, KeyEvent, PointerEvent, ResizeEvent, WheelEvent
from engine.api.input_snapshot import InputSnapshot

logger = logging.getLogger(__name__)

_POINTER_EVENT_TYPES = ("pointer_down", "pointer_move", "pointer_up")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class InputController:
    """Collect canvas events for polling by the frame loop."""

    def __init__(self, *, debug: bool = False) -> None:
        self._events: deque[InputEvent] = deque()
        self._pointer_x = 0.0
        self._pointer_y = 0.0
        self._has_pointer = False
        self._debug = debug

    def bind(self, canvas: Any) -> None:
        """Attach listeners to a rendercanvas canvas."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        canvas.add_event_handler(self._on_pointer, *_POINTER_EVENT_TYPES)
        canvas.add_event_handler(self._on_key_down, "key_down")
        canvas.add_event_handler(self._on_wheel, "wheel")
        canvas.add_event_handler(self._on_resize, "resize")

    def drain_events(self) -> list[InputEvent]:
        """Return and clear queued events."""
        items = list(self._events)
        self._events.clear()
        return items

    def build_input_snapshot(self, *, frame_index: int) -> InputSnapshot:
        """Build one immutable per-frame snapshot and consume queued events."""
        return InputSnapshot(frame_index=frame_index, events=tuple(self.drain_events()))

    def _on_pointer(self, event: dict[str, Any]) -> None:
        event_type = event.get("event_type")
        if event_type not in _POINTER_EVENT_TYPES:
            return
        x = event.get("x")
        y = event.get("y")
        if not _is_number(x) or not _is_number(y):
            return
        button = event.get("button")
        if not isinstance(button, int):
            button = 0
        x = float(x)
        y = float(y)
        if self._has_pointer:
            dx = x - self._pointer_x
            dy = y - self._pointer_y
        else:
            dx = dy = 0.0
        self._pointer_x = x
        self._pointer_y = y
        self._has_pointer = True
        self._events.append(PointerEvent(event_type, x, y, button, dx, dy))
        if self._debug and event_type != "pointer_move":
            logger.debug("input_pointer type=%s button=%d x=%.1f y=%.1f", event_type, button, x, y)

    def _on_key_down(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "key_down":
            return
        key = event.get("key")
        if not isinstance(key, str):
            return
        normalized = key.strip().lower()
        if normalized:
            self._events.append(KeyEvent("key_down", normalized))
            if self._debug:
                logger.debug("input_key key=%s", normalized)

    def _on_wheel(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "wheel":
            return
        x = event.get("x")
        y = event.get("y")
        dy = event.get("dy")
        if not _is_number(x) or not _is_number(y) or not _is_number(dy):
            return
        self._events.append(WheelEvent(float(x), float(y), float(dy)))

    def _on_resize(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "resize":
            return
        width = event.get("width")
        height = event.get("height")
        if not _is_number(width) or not _is_number(height):
            return
        self._events.append(ResizeEvent(float(width), float(height)))
