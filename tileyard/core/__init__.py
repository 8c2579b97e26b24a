"""Pure tile placement domain: geometry, grid, camera, tools, entities."""

from tileyard.core.camera import Camera
from tileyard.core.entities import EntityStore
from tileyard.core.geometry import Displacement, Position
from tileyard.core.grid import Grid, snap_to_cell
from tileyard.core.models import (
    EntityKind,
    Idle,
    PlacedEntity,
    PlacingStore,
    PlacingTrack,
    Tool,
)
from tileyard.core.placement import axis_lock, closing_rect

__all__ = [
    "Camera",
    "Displacement",
    "EntityKind",
    "EntityStore",
    "Grid",
    "Idle",
    "PlacedEntity",
    "PlacingStore",
    "PlacingTrack",
    "Position",
    "Tool",
    "axis_lock",
    "closing_rect",
    "snap_to_cell",
]
