"""Two-dimensional displacement and position primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Displacement:
    """Relative motion or extent in some coordinate space."""

    dx: float
    dy: float

    def __add__(self, other: object) -> Displacement:
        if not isinstance(other, Displacement):
            return NotImplemented
        return Displacement(self.dx + other.dx, self.dy + other.dy)

    def __mul__(self, factor: float) -> Displacement:
        if isinstance(factor, (Displacement, Position)):
            return NotImplemented
        return Displacement(self.dx * factor, self.dy * factor)

    __rmul__ = __mul__

    def floor(self) -> Displacement:
        return Displacement(float(math.floor(self.dx)), float(math.floor(self.dy)))

    def round(self) -> Displacement:
        return Displacement(float(round(self.dx)), float(round(self.dy)))

    def center(self) -> Position:
        """Return the midpoint of an extent measured from the origin."""
        return Position(self.dx * 0.5, self.dy * 0.5)


@dataclass(frozen=True, slots=True)
class Position:
    """Absolute location in screen or world space."""

    x: float
    y: float

    def __add__(self, other: object) -> Position:
        if not isinstance(other, Displacement):
            return NotImplemented
        return Position(self.x + other.dx, self.y + other.dy)

    def __sub__(self, other: object) -> Position | Displacement:
        if isinstance(other, Position):
            return Displacement(self.x - other.x, self.y - other.y)
        if isinstance(other, Displacement):
            return Position(self.x - other.dx, self.y - other.dy)
        return NotImplemented

