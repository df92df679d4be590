"""The labyrinth: its border, walls, beacons and targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from .point import Point
from .target import Target

DEFAULT_LAB_NAME = "NO NAMED LAB"
DEFAULT_LAB_SIZE = 16.0


@dataclass
class Beacon:
    """A beacon placed in the lab."""

    center: Point = field(default_factory=Point)
    height: float = 0.5


@dataclass
class Wall:
    """A polygonal wall given by its corners."""

    corners: list[Point] = field(default_factory=list)
    height: float = 1.0

    def add_corner(self, x: float, y: float) -> None:
        """Append a corner to the polygon."""
        self.corners.append(Point(x, y))


class Lab:
    """The labyrinth where robots move.

    Wall 0 is always the rectangular border, with corners in the order
    left-bottom, left-top, right-top, right-bottom; left-bottom is (0, 0).
    """

    def __init__(self, name: str = DEFAULT_LAB_NAME) -> None:
        self.name = name
        self._width = DEFAULT_LAB_SIZE
        self._height = DEFAULT_LAB_SIZE
        self.beacons: list[Beacon] = []
        self.targets: list[Target] = []
        self.walls: list[Wall] = []
        border = Wall()
        border.add_corner(0.0, 0.0)
        border.add_corner(0.0, self._height)
        border.add_corner(self._width, self._height)
        border.add_corner(self._width, 0.0)
        self.add_wall(border)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def set_width(self, width: float) -> None:
        """Change the width, moving the right side of the border."""
        self._width = width
        corners = self.border().corners
        corners[2].x = width
        corners[3].x = width

    def set_height(self, height: float) -> None:
        """Change the height, moving the top side of the border."""
        self._height = height
        corners = self.border().corners
        corners[1].y = height
        corners[2].y = height

    def add_beacon(self, beacon: Beacon) -> None:
        self.beacons.append(beacon)

    def add_target(self, target: Target) -> None:
        self.targets.append(target)

    def add_wall(self, wall: Wall) -> None:
        self.walls.append(wall)

    def border(self) -> Wall:
        """The wall that models the outer border."""
        return self.walls[0]

    def to_xml(self) -> str:
        """The ``<Lab>`` element describing this lab (the border is implied)."""
        lines = [
            '<Lab Name="%s" Height="%g" Width="%g">\n'
            % (escape(self.name, {'"': "&quot;"}), self._height, self._width)
        ]
        lines.extend(
            '\t<Beacon X="%g" Y="%g" Height="%g"/>\n' % (b.center.x, b.center.y, b.height)
            for b in self.beacons
        )
        lines.extend(
            '\t<Target X="%g" Y="%g" Radius="%g"/>\n' % (t.center.x, t.center.y, t.radius)
            for t in self.targets
        )
        for wall in self.walls[1:]:
            lines.append('\t<Wall Height="%g">\n' % wall.height)
            lines.extend(
                '\t\t<Corner X="%g" Y="%g"/>\n' % (p.x, p.y) for p in wall.corners
            )
            lines.append("\t</Wall>\n")
        lines.append("</Lab>\n")
        return "".join(lines)