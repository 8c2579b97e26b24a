"""Engine runtime timing primitives."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic

from engine.api.game_module import HostFrameContext


class FrameClock:
    """Monotonic frame clock with bounded deltas and a smoothed frame rate."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
        fps_smoothing: float = 0.9,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        if not 0.0 <= fps_smoothing < 1.0:
            raise ValueError("fps_smoothing must be in [0, 1)")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._fps_smoothing = fps_smoothing
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0
        self._fps = 0.0

    def next(self, frame_index: int) -> HostFrameContext:
        """Advance the clock and return timing for ``frame_index``."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        if delta > 0.0:
            instant = 1.0 / delta
            if self._fps == 0.0:
                self._fps = instant
            else:
                self._fps = self._fps_smoothing * self._fps + (1.0 - self._fps_smoothing) * instant
        return HostFrameContext(
            frame_index=frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed_seconds,
            fps=self._fps,
        )
