import xml.etree.ElementTree as ET

from ciberlab.lab import Beacon, Lab, Wall
from ciberlab.point import Point
from ciberlab.target import Target


def test_new_lab_defaults():
    lab = Lab()
    assert lab.name == "NO NAMED LAB"
    assert lab.width == 16.0
    assert lab.height == 16.0
    assert len(lab.walls) == 1
    assert lab.border().corners == [
        Point(0, 0),
        Point(0, 16.0),
        Point(16.0, 16.0),
        Point(16.0, 0),
    ]


def test_set_width_moves_right_side():
    lab = Lab()
    lab.set_width(28.0)
    assert lab.width == 28.0
    xs = [p.x for p in lab.border().corners]
    assert xs == [0, 0, 28.0, 28.0]


def test_set_height_moves_top_side():
    lab = Lab()
    lab.set_height(14.0)
    assert lab.height == 14.0
    ys = [p.y for p in lab.border().corners]
    assert ys == [0, 14.0, 14.0, 0]


def test_wall_add_corner():
    wall = Wall(height=3.0)
    wall.add_corner(1.0, 2.0)
    wall.add_corner(3.0, 4.0)
    assert wall.corners == [Point(1.0, 2.0), Point(3.0, 4.0)]


def test_add_wall_keeps_border_first():
    lab = Lab()
    wall = Wall()
    lab.add_wall(wall)
    assert lab.walls[0] is lab.border()
    assert lab.walls[1] is wall


def test_empty_lab_xml():
    lab = Lab("L")
    assert lab.to_xml() == '<Lab Name="L" Height="16" Width="16">\n</Lab>\n'


def test_xml_contents():
    lab = Lab("Maze")
    lab.set_width(28.0)
    lab.set_height(14.0)
    lab.add_beacon(Beacon(Point(3.0, 7.0), 2.0))
    lab.add_target(Target(Point(5.0, 6.0), 1.5))
    wall = Wall(height=4.0)
    wall.add_corner(1.0, 1.0)
    wall.add_corner(2.0, 1.0)
    wall.add_corner(2.0, 2.0)
    lab.add_wall(wall)
    text = lab.to_xml()
    assert '\t<Beacon X="3" Y="7" Height="2"/>\n' in text
    assert '\t<Target X="5" Y="6" Radius="1.5"/>\n' in text
    root = ET.fromstring(text)
    assert root.get("Name") == "Maze"
    assert float(root.get("Width")) == 28.0
    assert float(root.get("Height")) == 14.0
    walls = root.findall("Wall")
    assert len(walls) == 1
    assert float(walls[0].get("Height")) == 4.0
    corners = [(float(c.get("X")), float(c.get("Y"))) for c in walls[0].findall("Corner")]
    assert corners == [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0)]


def test_xml_name_is_escaped():
    lab = Lab('a "b" & c')
    root = ET.fromstring(lab.to_xml())
    assert root.get("Name") == 'a "b" & c'


def test_beacons_and_targets_are_kept_in_order():
    lab = Lab()
    first, second = Beacon(Point(1, 1)), Beacon(Point(2, 2))
    lab.add_beacon(first)
    lab.add_beacon(second)
    target = Target()
    lab.add_target(target)
    assert lab.beacons == [first, second]
    assert lab.targets == [target]