"""Rectangle construction shared by ghost preview and commit."""

from __future__ import annotations

from tileyard.core.geometry import Displacement, Position
from tileyard.core.grid import snap_to_cell
from tileyard.core.models import EntityKind, PlacedEntity


def axis_lock(anchor: Position, point: Position) -> Position:
    """Force ``point`` onto the horizontal or vertical line through ``anchor``.

    Ties go horizontal.
    """
    if abs(point.x - anchor.x) >= abs(point.y - anchor.y):
        return Position(point.x, anchor.y)
    return Position(anchor.x, point.y)


def cell_bounding_box(a: Position, b: Position, cell_size: float) -> tuple[Position, Displacement]:
    """Inclusive bounding box of the cells whose lower corners are ``a`` and ``b``."""
    min_x, max_x = min(a.x, b.x), max(a.x, b.x)
    min_y, max_y = min(a.y, b.y), max(a.y, b.y)
    origin = Position(min_x, min_y)
    extent = Displacement(max_x - min_x + cell_size, max_y - min_y + cell_size)
    return origin, extent


def closing_rect(
    kind: EntityKind,
    anchor: Position,
    world_point: Position,
    cell_size: float,
) -> PlacedEntity:
    """Build the entity a second click at ``world_point`` would commit.

    ``anchor`` is already snapped. Tracks lock the second point to one axis
    before snapping so the result is a single row or column of cells.
    """
    point = world_point
    if kind is EntityKind.TRACK:
        point = axis_lock(anchor, point)
    snapped = snap_to_cell(point, cell_size)
    origin, extent = cell_bounding_box(anchor, snapped, cell_size)
    return PlacedEntity(kind=kind, origin=origin, extent=extent)
