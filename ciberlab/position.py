"""A point together with a heading."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .point import Point


@dataclass
class Position:
    """Coordinates plus a direction held in radians."""

    coord: Point = field(default_factory=Point)
    direction: float = 0.0

    def set(self, x: float, y: float, direction: float) -> None:
        """Set coordinates and direction (radians) at once."""
        self.coord.x = x
        self.coord.y = y
        self.direction = direction

    def set_degrees(self, degrees: float) -> None:
        """Set the direction from a value in degrees."""
        self.direction = degrees * math.pi / 180

    def degrees(self) -> float:
        """The direction in degrees."""
        return 180 * self.direction / math.pi

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y