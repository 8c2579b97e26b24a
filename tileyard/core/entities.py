"""Append-only collection of placed entities."""

from __future__ import annotations

import math
from collections.abc import Iterator

from tileyard.core.models import EntityKind, PlacedEntity


def _is_multiple(value: float, cell_size: float) -> bool:
    ratio = value / cell_size
    return math.isclose(ratio, round(ratio), abs_tol=1e-9)


class EntityStore:
    """Placed entities in insertion order, which is also render order."""

    def __init__(self, cell_size: float) -> None:
        if not cell_size > 0.0:
            raise ValueError(f"cell_size must be > 0, got {cell_size!r}")
        self._cell_size = cell_size
        self._entities: list[PlacedEntity] = []

    def append(self, entity: PlacedEntity) -> None:
        """Add a committed entity; origin and extent must be whole cells."""
        size = self._cell_size
        if entity.extent.dx <= 0.0 or entity.extent.dy <= 0.0:
            raise ValueError(f"entity extent must be positive, got {entity.extent}")
        aligned = all(
            _is_multiple(value, size)
            for value in (entity.origin.x, entity.origin.y, entity.extent.dx, entity.extent.dy)
        )
        if not aligned:
            raise ValueError(f"entity is not aligned to cell size {size}: {entity}")
        self._entities.append(entity)

    def last(self) -> PlacedEntity | None:
        return self._entities[-1] if self._entities else None

    def count(self, kind: EntityKind) -> int:
        return sum(1 for entity in self._entities if entity.kind is kind)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[PlacedEntity]:
        return iter(tuple(self._entities))

    def __getitem__(self, index: int) -> PlacedEntity:
        return self._entities[index]
