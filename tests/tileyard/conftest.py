from __future__ import annotations

import pytest

from engine.rendering.transform import TransformStack
from tileyard.app.session import Session
from tileyard.core.grid import Grid


class FakeRenderer:
    """RenderAPI double that records draw calls in screen space."""

    def __init__(self, width: float = 800.0, height: float = 600.0) -> None:
        self.size = (width, height)
        self.transform = TransformStack()
        self.calls: list[tuple] = []
        self.cursors: list[str] = []
        self.titles: list[str] = []
        self.closed = False
        self.max_depth = 0

    def viewport_size(self) -> tuple[float, float]:
        self.calls.append(("viewport_size",))
        return self.size

    def clear(self, color: str) -> None:
        self.transform.reset()
        self.calls.append(("clear", color))

    def save(self) -> None:
        self.transform.save()
        self.max_depth = max(self.max_depth, self.transform.depth)
        self.calls.append(("save",))

    def restore(self) -> None:
        self.transform.restore()
        self.calls.append(("restore",))

    def translate(self, dx: float, dy: float) -> None:
        self.transform.translate(dx, dy)
        self.calls.append(("translate", dx, dy))

    def scale(self, factor: float) -> None:
        self.transform.scale(factor)
        self.calls.append(("scale", factor))

    def draw_line(self, x0, y0, x1, y1, color, width=1.0) -> None:
        self.calls.append(("draw_line", x0, y0, x1, y1, color, width))

    def fill_rect(self, x, y, w, h, color) -> None:
        sx, sy = self.transform.apply(x, y)
        self.calls.append(("fill_rect", x, y, w, h, color, (sx, sy)))

    def draw_text(self, text, x, y, color="#ffffff", font_size=14.0) -> None:
        self.calls.append(("draw_text", text, x, y, color, font_size))

    def measure_text(self, text: str, font_size: float = 14.0) -> tuple[float, float]:
        return len(text) * font_size * 0.5, font_size

    def set_cursor(self, cursor: str) -> None:
        self.cursors.append(cursor)

    def set_title(self, title: str) -> None:
        self.titles.append(title)

    def run(self, draw_callback) -> None:
        draw_callback()

    def close(self) -> None:
        self.closed = True

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def session() -> Session:
    """Session on a 30x30 grid of 50-unit cells with an 800x600 viewport."""
    result = Session(Grid(rows=30, cols=30, cell_size=50.0))
    result.set_viewport(800.0, 600.0)
    return result
