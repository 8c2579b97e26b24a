from __future__ import annotations

import dataclasses

import pytest

from tileyard.core.geometry import Position
from tileyard.core.models import (
    EntityKind,
    Idle,
    PlacingStore,
    PlacingTrack,
    placing_tool_for,
    tool_label,
)


def test_placing_tools_expose_kind_and_default_anchor() -> None:
    assert PlacingStore().kind is EntityKind.STORE
    assert PlacingTrack().kind is EntityKind.TRACK
    assert PlacingStore().anchor is None


def test_placing_tool_for_builds_matching_variant() -> None:
    anchor = Position(50.0, 0.0)
    assert placing_tool_for(EntityKind.STORE, anchor) == PlacingStore(anchor)
    assert placing_tool_for(EntityKind.TRACK) == PlacingTrack()


def test_tools_are_immutable_values() -> None:
    tool = PlacingTrack(Position(0.0, 0.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        tool.anchor = None  # type: ignore[misc]
    assert Idle() == Idle()


def test_tool_labels() -> None:
    assert tool_label(Idle()) == "Pan"
    assert tool_label(PlacingStore()) == "Store"
    assert tool_label(PlacingTrack()) == "Track"
