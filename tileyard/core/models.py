"""Core domain models for placement tools and placed entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from tileyard.core.geometry import Displacement, Position


class EntityKind(StrEnum):
    """Kinds of rectangular entities that can be placed."""

    STORE = "STORE"
    TRACK = "TRACK"


@dataclass(frozen=True, slots=True)
class Idle:
    """No placement tool active; left-drag pans the camera."""


@dataclass(frozen=True, slots=True)
class PlacingStore:
    """Store tool, optionally holding the first-click anchor."""

    anchor: Position | None = None

    @property
    def kind(self) -> EntityKind:
        return EntityKind.STORE


@dataclass(frozen=True, slots=True)
class PlacingTrack:
    """Track tool, optionally holding the first-click anchor."""

    anchor: Position | None = None

    @property
    def kind(self) -> EntityKind:
        return EntityKind.TRACK


PlacingTool: TypeAlias = PlacingStore | PlacingTrack
Tool: TypeAlias = Idle | PlacingStore | PlacingTrack


def placing_tool_for(kind: EntityKind, anchor: Position | None = None) -> PlacingTool:
    if kind is EntityKind.STORE:
        return PlacingStore(anchor)
    return PlacingTrack(anchor)


def tool_label(tool: Tool) -> str:
    if isinstance(tool, Idle):
        return "Pan"
    return tool.kind.value.capitalize()


@dataclass(frozen=True, slots=True)
class PlacedEntity:
    """Committed axis-aligned rectangle in world units."""

    kind: EntityKind
    origin: Position
    extent: Displacement
