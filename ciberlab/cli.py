"""Command-line options of the simulator."""

from __future__ import annotations

import dataclasses
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .parameters import Parameters

DEFAULT_PORT = 6000
SYNOPSIS = (
    "SYNOPSIS: simulator [--lab file] [--grid file] [--log file] [--param file] "
    "[--port portnumber] [--showgraph id] [--gps] [--beacon]"
)

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class CommandLineError(ValueError):
    """The command line does not follow the simulator's synopsis."""

    def __init__(self, detail: str = "") -> None:
        message = SYNOPSIS if not detail else f"{detail}\n{SYNOPSIS}"
        super().__init__(message)
        self.detail = detail


@dataclass
class SimulatorOptions:
    """Everything the simulator's command line can set."""

    lab_filename: str | None = None
    grid_filename: str | None = None
    log_filename: str | None = None
    param_filename: str | None = None
    port: int = DEFAULT_PORT
    show_graph: bool = False
    show_graph_id: int = 0
    scoring: int | None = None
    gps: bool = False
    beacon: bool = False
    compass: bool = False
    show_actions: bool = False


def _leading_int(text: str) -> int | None:
    """The integer a ``%d`` scan would read from the start of ``text``."""
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else None


_VALUE_OPTIONS = frozenset(
    {"--lab", "--grid", "--log", "--param", "--port", "--showgraph", "--scoring"}
)
_FLAG_OPTIONS = {
    "--gps": "gps",
    "--beacon": "beacon",
    "--compass": "compass",
    "--showactions": "show_actions",
}
_FILE_OPTIONS = {
    "--lab": "lab_filename",
    "--grid": "grid_filename",
    "--log": "log_filename",
    "--param": "param_filename",
}


def parse_command_line(argv: Sequence[str] | None = None) -> SimulatorOptions:
    """Parse the arguments (without the program name) into options.

    When an option is given more than once, the last occurrence wins.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    options = SimulatorOptions()
    rest = iter(args)
    for arg in rest:
        if arg in _FLAG_OPTIONS:
            setattr(options, _FLAG_OPTIONS[arg], True)
            continue
        if arg not in _VALUE_OPTIONS:
            raise CommandLineError(f"unknown option {arg!r}")
        value = next(rest, None)
        if value is None:
            raise CommandLineError(f"option {arg} needs a value")
        if arg in _FILE_OPTIONS:
            setattr(options, _FILE_OPTIONS[arg], value)
        elif arg == "--port":
            port = _leading_int(value)
            if port is not None:
                options.port = port
        elif arg == "--showgraph":
            options.show_graph = True
            graph_id = _leading_int(value)
            if graph_id is not None:
                options.show_graph_id = graph_id
        else:
            scoring = _leading_int(value)
            if scoring is None:
                raise CommandLineError(f"invalid scoring value {value!r}")
            options.scoring = scoring
    return options


def apply_overrides(options: SimulatorOptions, parameters: Parameters) -> Parameters:
    """Parameters with the sensor switches given on the command line turned on.

    Command-line switches take precedence over a parameters file; the given
    parameters are left unchanged.
    """
    changes: dict[str, bool] = {}
    if options.gps:
        changes["gps_on"] = True
    if options.beacon:
        changes["beacon_sensor_on"] = True
    if options.compass:
        changes["compass_sensor_on"] = True
    if options.show_actions:
        changes["show_actions"] = True
    return dataclasses.replace(parameters, **changes)