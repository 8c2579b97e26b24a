from __future__ import annotations

import pytest

from tileyard.core.entities import EntityStore
from tileyard.core.geometry import Displacement, Position
from tileyard.core.models import EntityKind, PlacedEntity


def _entity(kind: EntityKind, x: float, y: float, w: float = 50.0, h: float = 50.0) -> PlacedEntity:
    return PlacedEntity(kind=kind, origin=Position(x, y), extent=Displacement(w, h))


def test_store_preserves_insertion_order_and_allows_overlap() -> None:
    store = EntityStore(50.0)
    first = _entity(EntityKind.STORE, 0.0, 0.0, 100.0, 100.0)
    second = _entity(EntityKind.TRACK, 50.0, 50.0, 150.0, 50.0)
    third = _entity(EntityKind.STORE, 0.0, 0.0)
    for entity in (first, second, third):
        store.append(entity)

    assert list(store) == [first, second, third]
    assert len(store) == 3
    assert store[1] == second
    assert store.last() == third
    assert store.count(EntityKind.STORE) == 2
    assert store.count(EntityKind.TRACK) == 1


def test_empty_store() -> None:
    store = EntityStore(50.0)
    assert len(store) == 0
    assert store.last() is None
    assert list(store) == []


def test_iteration_is_a_stable_view() -> None:
    store = EntityStore(50.0)
    store.append(_entity(EntityKind.STORE, 0.0, 0.0))
    seen = []
    for entity in store:
        seen.append(entity)
        if len(store) < 3:
            store.append(_entity(EntityKind.TRACK, 50.0, 0.0))
    assert len(seen) == 1
    assert len(store) == 2


@pytest.mark.parametrize(
    "entity",
    [
        _entity(EntityKind.STORE, 10.0, 0.0),
        _entity(EntityKind.STORE, 0.0, 0.0, 75.0, 50.0),
        _entity(EntityKind.TRACK, 0.0, 0.0, 0.0, 50.0),
        _entity(EntityKind.TRACK, 0.0, 0.0, 50.0, -50.0),
    ],
)
def test_append_rejects_misaligned_or_empty_entities(entity: PlacedEntity) -> None:
    store = EntityStore(50.0)
    with pytest.raises(ValueError):
        store.append(entity)
    assert len(store) == 0


def test_store_rejects_invalid_cell_size() -> None:
    with pytest.raises(ValueError):
        EntityStore(0.0)
