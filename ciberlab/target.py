"""Circular target zones inside the lab."""

from __future__ import annotations

from dataclasses import dataclass, field

from .point import Point


@dataclass
class Target:
    """A target area: a circle with a centre and a radius."""

    center: Point = field(default_factory=Point)
    radius: float = 2.0

    def contains(self, point: Point, margin: float) -> bool:
        """True if ``point`` lies within the radius reduced by ``margin``."""
        return self.center.distance(point) <= self.radius - margin