"""Per-frame input handed from the input controller to the module."""

from __future__ import annotations

from dataclasses import dataclass

from engine.api.input_events import InputEvent


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Events since the previous frame, oldest first."""

    frame_index: int
    events: tuple[InputEvent, ...] = ()


__all__ = ["InputSnapshot"]
