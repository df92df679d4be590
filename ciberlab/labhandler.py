"""Reading a labyrinth from its XML description."""

from __future__ import annotations

import math
import os
import re
import xml.sax
from os import PathLike
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

from .lab import Beacon, Lab, Wall
from .point import Point
from .target import Target

PATH_CUBE_SIZE = 2.0
PATH_WALL_WIDTH = 0.2
PATH_WALL_GAP = 0.0
DEFAULT_ROW_HEIGHT = 4.0
LAST_PATTERN_COLUMN = 39

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class LabFormatError(ValueError):
    """The lab document is malformed or does not describe a lab."""


def _to_double(text: str) -> float:
    text = text.strip()
    return float(text) if _FLOAT_RE.fullmatch(text) else 0.0


def _to_int(text: str) -> int:
    text = text.strip()
    return int(text) if _INT_RE.fullmatch(text) else 0


def _wall(height: float, corners: list[tuple[float, float]]) -> Wall:
    wall = Wall(height=height)
    for x, y in corners:
        wall.add_corner(x, y)
    return wall


def _even_row_wall(row: int, col: int, ch: str, height: float) -> Wall | None:
    """Vertical or diagonal wall drawn by ``ch`` at ``col`` of an even row."""
    size, half, gap = PATH_CUBE_SIZE, PATH_WALL_WIDTH * 0.5, PATH_WALL_GAP
    if ch == "|":
        cx = ((col + 1) / 3.0) * size
        y0 = (row * 0.5 + gap) * size
        y1 = (row * 0.5 + 1.0 - gap) * size
        return _wall(height, [(cx - half, y0), (cx + half, y0), (cx + half, y1), (cx - half, y1)])
    if ch not in "\\/":
        return None
    dx = half * math.cos(math.pi / 4)
    dy = half * math.sin(math.pi / 4)
    x0 = (col / 3.0) * size
    x1 = ((col + 3) / 3.0) * size
    if ch == "\\":
        top = (row * 0.5 + 1.0 + gap) * size
        bottom = (row * 0.5 - gap) * size
        return _wall(
            height,
            [(x0 - dx, top - dy), (x0 + dx, top + dy), (x1 + dx, bottom + dy), (x1 - dx, bottom - dy)],
        )
    bottom = (row * 0.5 + gap) * size
    top = (row * 0.5 + 1.0 - gap) * size
    return _wall(
        height,
        [(x0 - dx, bottom + dy), (x0 + dx, bottom - dy), (x1 + dx, top - dy), (x1 - dx, top + dy)],
    )


def _horizontal_wall(row: int, start_col: int, end_col: int, height: float) -> Wall:
    size, half, gap = PATH_CUBE_SIZE, PATH_WALL_WIDTH * 0.5, PATH_WALL_GAP
    xs = (start_col / 3.0 + gap) * size
    xe = (end_col / 3.0 + 1.0 - gap) * size
    yc = ((row + 1) * 0.5) * size
    return _wall(height, [(xs, yc - half), (xe, yc - half), (xe, yc + half), (xs, yc + half)])


def row_walls(row: int, pattern: str, height: float = DEFAULT_ROW_HEIGHT) -> list[Wall]:
    """Walls described by one ``<Row>`` pattern.

    Even rows hold vertical (``|``) and diagonal (``\\``, ``/``) walls; odd rows
    hold horizontal walls made of ``-`` runs, sampled every third column.
    """
    walls: list[Wall] = []
    in_horizontal = False
    start_col = 0
    for col, ch in enumerate(pattern):
        if row % 2 == 0:
            wall = _even_row_wall(row, col, ch, height)
            if wall is not None:
                walls.append(wall)
        elif col % 3 == 0:
            if ch == "-" and not in_horizontal:
                in_horizontal = True
                start_col = col
            if (ch == " " and in_horizontal) or (ch == "-" and col == LAST_PATTERN_COLUMN):
                in_horizontal = False
                end_col = col if ch == "-" else col - 3
                walls.append(_horizontal_wall(row, start_col, end_col, height))
    return walls


def _order_anticlockwise(wall: Wall) -> bool:
    """Put the corners in anticlockwise order; False for a degenerate polygon."""
    corners = wall.corners
    doubled_area = sum(
        a.x * b.y - b.x * a.y for a, b in zip(corners, corners[1:] + corners[:1])
    )
    if doubled_area == 0:
        return False
    if doubled_area < 0:
        corners.reverse()
    return True


class _LabHandler(ContentHandler):
    def __init__(self) -> None:
        super().__init__()
        self.lab: Lab | None = None
        self._wall: Wall | None = None
        self._beacon: Beacon | None = None
        self._target: Target | None = None
        self._point = Point()

    def _read_point(self, attrs: AttributesImpl) -> None:
        self._point = Point()
        x = attrs.get("X")
        if x is not None:
            self._point.x = _to_double(x)
        y = attrs.get("Y")
        if y is not None:
            self._point.y = _to_double(y)

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        if self.lab is None:
            if name != "Lab":
                raise LabFormatError(f"expected a <Lab> element, found <{name}>")
            self.lab = Lab()
            lab_name = attrs.get("Name")
            if lab_name is not None:
                self.lab.name = lab_name
            width = attrs.get("Width")
            if width is not None:
                self.lab.set_width(_to_double(width))
            height = attrs.get("Height")
            if height is not None:
                self.lab.set_height(_to_double(height))
        elif name == "Wall":
            self._wall = Wall()
            height = attrs.get("Height")
            if height is not None:
                self._wall.height = _to_double(height)
        elif name == "Beacon":
            self._beacon = Beacon()
            self._read_point(attrs)
            height = attrs.get("Height")
            if height is not None:
                self._beacon.height = _to_double(height)
        elif name == "Target":
            self._target = Target()
            self._read_point(attrs)
            radius = attrs.get("Radius")
            if radius is not None:
                self._target.radius = _to_double(radius)
        elif name == "Corner":
            self._read_point(attrs)
        elif name == "Row":
            pos = attrs.get("Pos")
            row = _to_int(pos) if pos is not None else 0
            height_text = attrs.get("Height")
            height = _to_double(height_text) if height_text is not None else DEFAULT_ROW_HEIGHT
            walls = row_walls(row, attrs.get("Pattern") or "", height)
            for wall in walls:
                self.lab.add_wall(wall)
            if walls:
                self._wall = walls[-1]

    def endElement(self, name: str) -> None:
        lab = self.lab
        if lab is None:
            return
        if name == "Wall":
            if self._wall is not None and _order_anticlockwise(self._wall):
                lab.add_wall(self._wall)
        elif name == "Beacon" and self._beacon is not None:
            self._beacon.center = Point(self._point.x, self._point.y)
            lab.add_beacon(self._beacon)
        elif name == "Target" and self._target is not None:
            self._target.center = Point(self._point.x, self._point.y)
            lab.add_target(self._target)
        elif name == "Corner":
            if self._wall is None:
                raise LabFormatError("<Corner> outside of a <Wall>")
            self._wall.add_corner(self._point.x, self._point.y)


def _result(handler: _LabHandler) -> Lab:
    if handler.lab is None:
        raise LabFormatError("document holds no <Lab> element")
    return handler.lab


def parse_lab(text: str | bytes) -> Lab:
    """Build a lab from its XML description."""
    handler = _LabHandler()
    try:
        xml.sax.parseString(text, handler)
    except xml.sax.SAXParseException as exc:
        raise LabFormatError(f"invalid lab document: {exc}") from exc
    return _result(handler)


def load_lab(path: str | PathLike[str]) -> Lab:
    """Read and parse a lab file."""
    handler = _LabHandler()
    try:
        xml.sax.parse(os.fspath(path), handler)
    except xml.sax.SAXParseException as exc:
        raise LabFormatError(f"invalid lab file {path}: {exc}") from exc
    return _result(handler)