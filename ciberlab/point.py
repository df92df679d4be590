"""Cartesian and polar points with the vector operations the lab geometry needs."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A mutable point (or vector) in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance to the point given by its coordinates."""
        return math.hypot(self.x - x, self.y - y)

    def angle(self) -> float:
        """Direction of this vector in radians."""
        if self.x == 0.0:
            return math.pi / 2 if self.y > 0.0 else -math.pi / 2
        return math.atan2(self.y, self.x)

    def angle_to(self, other: Point) -> float:
        """Direction in radians from this point towards another."""
        if self.x == other.x:
            return math.pi / 2 if other.y > self.y else -math.pi / 2
        return math.atan2(other.y - self.y, other.x - self.x)

    def normalize(self) -> Point:
        """Scale to unit length in place; a zero vector is left as it is."""
        size_sq = self.x * self.x + self.y * self.y
        if size_sq == 0.0:
            return self
        size = math.sqrt(size_sq)
        self.x /= size
        self.y /= size
        return self

    def rotate(self, angle: float) -> Point:
        """Rotate in place about the origin by ``angle`` radians."""
        self.x, self.y = self._rotation(angle)
        return self

    def rotated(self, angle: float) -> Point:
        """Return a copy rotated about the origin by ``angle`` radians."""
        return Point(*self._rotation(angle))

    def _rotation(self, angle: float) -> tuple[float, float]:
        c, s = math.cos(angle), math.sin(angle)
        return self.x * c - self.y * s, self.x * s + self.y * c

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Point:
        return Point(self.x * scale, self.y * scale)


@dataclass
class PolarPoint:
    """A point given by radius and angle."""

    ro: float = 0.0
    theta: float = 0.0