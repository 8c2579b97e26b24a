"""World-anchored cell grid and snapping."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from tileyard.core.geometry import Displacement, Position

MAJOR_LINE_EVERY = 10


def snap_to_cell(world_pos: Position, cell_size: float) -> Position:
    """Return the lower corner of the cell containing ``world_pos``."""
    if not cell_size > 0.0:
        raise ValueError(f"cell_size must be > 0, got {cell_size!r}")
    return Position(
        math.floor(world_pos.x / cell_size) * cell_size,
        math.floor(world_pos.y / cell_size) * cell_size,
    )


@dataclass(frozen=True, slots=True)
class GridLine:
    """One grid line segment in world space."""

    start: Position
    end: Position
    major: bool


@dataclass(frozen=True, slots=True)
class Grid:
    """Fixed rows x cols grid with cell (0, 0) lower corner at the world origin."""

    rows: int
    cols: int
    cell_size: float

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"grid dimensions must be >= 0, got rows={self.rows} cols={self.cols}")
        if not math.isfinite(self.cell_size) or self.cell_size <= 0.0:
            raise ValueError(f"cell_size must be a positive finite number, got {self.cell_size!r}")

    def bounds(self) -> Displacement:
        """World-space extent covered by the grid."""
        return Displacement(self.cols * self.cell_size, self.rows * self.cell_size)

    def snap(self, world_pos: Position) -> Position:
        return snap_to_cell(world_pos, self.cell_size)

    def lines(self) -> Iterator[GridLine]:
        """Yield vertical then horizontal lines; every 10th line is major."""
        extent = self.bounds()
        for col in range(self.cols + 1):
            x = col * self.cell_size
            yield GridLine(Position(x, 0.0), Position(x, extent.dy), col % MAJOR_LINE_EVERY == 0)
        for row in range(self.rows + 1):
            y = row * self.cell_size
            yield GridLine(Position(0.0, y), Position(extent.dx, y), row % MAJOR_LINE_EVERY == 0)
