"""Pan and smoothed-zoom camera with the screen <-> world transform."""

from __future__ import annotations

from dataclasses import dataclass, field

from tileyard.core.geometry import Displacement, Position

MIN_ZOOM_LEVEL = -3.0
MAX_ZOOM_LEVEL = 3.0
ZOOM_RETAIN = 0.6
ZOOM_APPROACH = 0.4
WHEEL_SENSITIVITY = 100.0


def clamp_zoom_level(value: float) -> float:
    return max(MIN_ZOOM_LEVEL, min(MAX_ZOOM_LEVEL, value))


@dataclass(slots=True)
class Camera:
    """Camera state.

    World to screen is ``screen = (world + pan) * 2**zoom_level + viewport / 2``.
    ``screen_to_world`` is the exact inverse of that composition.
    """

    pan: Position = field(default_factory=lambda: Position(0.0, 0.0))
    zoom_level: float = 0.0
    target_zoom_level: float = 0.0
    viewport: Displacement = field(default_factory=lambda: Displacement(0.0, 0.0))

    def __post_init__(self) -> None:
        self.target_zoom_level = clamp_zoom_level(self.target_zoom_level)

    @property
    def zoom_scale(self) -> float:
        return 2.0**self.zoom_level

    @property
    def zoom_percent(self) -> int:
        return int(round(self.zoom_scale * 100.0))

    @property
    def viewport_center(self) -> Position:
        return self.viewport.center()

    def advance(self) -> None:
        """Move ``zoom_level`` one smoothing step toward the target. Call once per frame."""
        self.zoom_level = ZOOM_RETAIN * self.zoom_level + ZOOM_APPROACH * self.target_zoom_level

    def set_target_zoom(self, raw: float) -> None:
        self.target_zoom_level = clamp_zoom_level(raw)

    def apply_wheel(self, wheel_dy: float) -> None:
        """Apply one wheel notch; positive ``wheel_dy`` zooms out."""
        self.set_target_zoom(self.target_zoom_level - wheel_dy / WHEEL_SENSITIVITY)

    def pan_by(self, delta: Displacement) -> None:
        """Pan by a world-space displacement."""
        self.pan = self.pan + delta

    def pan_by_screen(self, delta: Displacement) -> None:
        """Pan by a screen-pixel displacement so the world follows the cursor."""
        self.pan_by(delta * (2.0 ** -self.zoom_level))

    def world_to_screen(self, point: Position) -> Position:
        scale = self.zoom_scale
        center = self.viewport_center
        return Position(
            (point.x + self.pan.x) * scale + center.x,
            (point.y + self.pan.y) * scale + center.y,
        )

    def screen_to_world(self, point: Position) -> Position:
        scale = self.zoom_scale
        center = self.viewport_center
        return Position(
            (point.x - center.x) / scale - self.pan.x,
            (point.y - center.y) / scale - self.pan.y,
        )
