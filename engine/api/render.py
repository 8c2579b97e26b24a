"""Engine-owned rendering API contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class RenderAPI(Protocol):
    """Immediate-mode 2D drawing surface with an ambient affine transform.

    Coordinates passed to draw calls are mapped through the current transform.
    """

    def viewport_size(self) -> tuple[float, float]:
        """Return the logical surface size in pixels."""

    def clear(self, color: str) -> None:
        """Drop everything drawn in the previous frame and fill the background."""

    def save(self) -> None:
        """Push a copy of the current transform."""

    def restore(self) -> None:
        """Pop back to the most recently saved transform."""

    def translate(self, dx: float, dy: float) -> None:
        """Post-multiply the current transform by a translation."""

    def scale(self, factor: float) -> None:
        """Post-multiply the current transform by a uniform scale."""

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: str,
        width: float = 1.0,
    ) -> None:
        """Draw a line segment; ``width`` is in screen pixels."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        """Fill an axis-aligned rectangle."""

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str = "#ffffff",
        font_size: float = 14.0,
    ) -> None:
        """Draw text with its top-left corner at the given point."""

    def measure_text(self, text: str, font_size: float = 14.0) -> tuple[float, float]:
        """Return approximate text extent in screen pixels."""

    def set_cursor(self, cursor: str) -> None:
        """Set the pointer cursor shape when supported."""

    def set_title(self, title: str) -> None:
        """Set window title when supported."""

    def run(self, draw_callback: Callable[[], None]) -> None:
        """Run render loop, calling ``draw_callback`` once per display refresh."""

    def close(self) -> None:
        """Close renderer resources and stop the loop."""
