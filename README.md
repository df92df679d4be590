# ciberlab

The world model of a robot-mouse simulation environment: labs with walls,
beacons and target areas, the simulation parameters and their XML form, the
small XML messages a viewer sends to the simulator, and the simulator's
command-line option syntax.

The package has no dependencies outside the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `ciberlab.point` | `Point` and `PolarPoint`: distances, angles, normalising, rotation, vector arithmetic |
| `ciberlab.position` | `Position`: a point plus a heading held in radians, settable and readable in degrees |
| `ciberlab.target` | `Target`: a circular target area with a `contains(point, margin)` test |
| `ciberlab.randutil` | `rand_normal` and `rand_uniform`, each taking an optional `random.Random` |
| `ciberlab.parameters` | `Parameters`: timing, noise, latency, request and scoring settings, with `to_xml()` |
| `ciberlab.lab` | `Lab`, `Wall` and `Beacon`: the maze, its border and its XML form |
| `ciberlab.labhandler` | `parse_lab`, `load_lab` and `row_walls` read a `<Lab>` document, including row patterns |
| `ciberlab.viewhandler` | `parse_view_command` turns a viewer message into a `ViewCommand` |
| `ciberlab.robotaction` | `RobotAction`: the motor, LED, say and sensor-request state of one cycle |
| `ciberlab.cli` | `parse_command_line` and `apply_overrides` for the simulator's option syntax |

## Labs

A lab always holds its rectangular outer border as its first wall, available
from `lab.border()`, with corners left-bottom, left-top, right-top,
right-bottom. `set_width` and `set_height` move the border with the lab's size.
A new lab is 16 by 16 and named `NO NAMED LAB`.

```python
from ciberlab.lab import Beacon, Lab, Wall
from ciberlab.point import Point
from ciberlab.target import Target

lab = Lab("demo")
lab.set_width(28.0)
lab.set_height(14.0)
lab.add_beacon(Beacon(Point(3.0, 7.0), height=2.0))
lab.add_target(Target(Point(3.0, 7.0), radius=1.0))

wall = Wall(height=5.0)
for x, y in [(5, 5), (6, 5), (6, 9), (5, 9)]:
    wall.add_corner(x, y)
lab.add_wall(wall)

print(lab.to_xml())
```

`to_xml()` writes beacons, targets and every wall except the border.

## Reading a lab file

Walls can be given by their corners or, more compactly, by `<Row>` patterns of
`|`, `-`, `/` and `\` characters:

```python
from ciberlab.labhandler import LabFormatError, load_lab, parse_lab

try:
    lab = load_lab("mylab.xml")
except LabFormatError as err:
    print("not a lab:", err)

lab = parse_lab('<Lab Name="small" Width="8" Height="6"></Lab>')
```

Walls given by corners are stored with their corners in anticlockwise order; a
wall whose corners enclose no area is left out. `row_walls(row, pattern,
height)` returns the walls a single row pattern describes: even rows hold
vertical and diagonal walls, odd rows horizontal ones. The default row wall
height is 4.0.

A document whose first element is not `<Lab>`, or which is not well-formed
XML, raises `LabFormatError`.

## Simulation parameters

```python
from ciberlab.parameters import Parameters

params = Parameters(sim_time=3000, gps_on=True, lab_filename="mylab.xml")
print(params.to_xml())
```

`to_xml()` returns the `<Parameters .../>` element; `Lab` and `Grid`
attributes appear only when `lab_filename` or `grid_filename` is set.

## Viewer commands

```python
from ciberlab.viewhandler import CommandType, parse_view_command

command = parse_view_command("<Start/>")
assert command.type is CommandType.START

command = parse_view_command('<Robot Removed="Yes" Id="3"/>')
assert command.type is CommandType.ROBOTDEL and command.robot_id == 3
```

The recognised tags are `Start`, `Stop`, `LabReq`, `GridReq`, `Reset` and
`Robot`. Unknown or mismatched tags, and malformed XML, raise
`ViewCommandError`.

## Robot actions

`RobotAction` holds what a robot asked for in a cycle. `reset()` clears the
"changed" flags, the sensor requests and the say message, and keeps the motor
and LED values.

## Command-line options

`ciberlab.cli` understands the simulator's options — `--lab`, `--grid`,
`--log`, `--param`, `--port`, `--showgraph`, `--scoring`, `--gps`,
`--beacon`, `--compass` and `--showactions`:

```python
from ciberlab.cli import CommandLineError, apply_overrides, parse_command_line
from ciberlab.parameters import Parameters

options = parse_command_line(["--lab", "mylab.xml", "--port", "6000", "--gps"])
parameters = apply_overrides(options, Parameters())
assert parameters.gps_on
```

`parse_command_line` takes the arguments without the program name (it reads
`sys.argv` when given none). When an option is repeated, the last one wins; the
default port is 6000. `apply_overrides` returns a new `Parameters` with the
sensor switches from the command line turned on and leaves its argument
unchanged. An unknown option, an option missing its value, or a non-numeric
`--scoring` value raises `CommandLineError`.

## Geometry

```python
from ciberlab.point import Point

a = Point(0.0, 0.0)
b = Point(3.0, 4.0)
print(a.distance(b))      # 5.0
print(a.angle_to(b))      # heading from a to b, in radians
```

## What it does not do

This package is a model and a set of readers, not a running simulator. It
provides no command to start, no network server that accepts robots or
viewers, no graphical interface, and no robot motion, sensors or scoring.
It does not read parameters files: `Parameters` can be built and written as
XML, but not loaded back. `Lab` has no distance, visibility or reachability
queries against its walls.