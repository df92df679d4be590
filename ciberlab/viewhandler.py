"""Parsing the control commands a viewer sends to the simulator."""

from __future__ import annotations

import enum
import re
import xml.sax
from dataclasses import dataclass
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

_INT_RE = re.compile(r"[+-]?\d+")


class CommandType(enum.Enum):
    """Kinds of viewer command."""

    UNKNOWN = enum.auto()
    START = enum.auto()
    STOP = enum.auto()
    ROBOTDEL = enum.auto()
    LABRQ = enum.auto()
    GRIDRQ = enum.auto()
    RESET = enum.auto()


@dataclass
class ViewCommand:
    """A parsed viewer command; ``robot_id`` matters for robot removal."""

    type: CommandType = CommandType.UNKNOWN
    robot_id: int = 0


class ViewCommandError(ValueError):
    """The viewer message is not a valid command."""


_SIMPLE_TAGS = {
    "Start": CommandType.START,
    "Stop": CommandType.STOP,
    "LabReq": CommandType.LABRQ,
    "GridReq": CommandType.GRIDRQ,
    "Reset": CommandType.RESET,
}
_END_TAGS = {**_SIMPLE_TAGS, "Robot": CommandType.ROBOTDEL}


def _to_int(text: str) -> int:
    text = text.strip()
    return int(text) if _INT_RE.fullmatch(text) else 0


class _ViewHandler(ContentHandler):
    def __init__(self) -> None:
        super().__init__()
        self.command = ViewCommand()

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        if name in _SIMPLE_TAGS:
            self.command.type = _SIMPLE_TAGS[name]
        elif name == "Robot":
            if attrs.get("Removed") == "Yes":
                self.command.type = CommandType.ROBOTDEL
                self.command.robot_id = 0
            robot_id = attrs.get("Id")
            if robot_id is not None:
                self.command.robot_id = _to_int(robot_id)
        else:
            self.command.type = CommandType.UNKNOWN
            raise ViewCommandError(f"unknown tag <{name}>")

    def endElement(self, name: str) -> None:
        expected = _END_TAGS.get(name)
        if expected is None:
            raise ViewCommandError(f"unknown tag </{name}>")
        if self.command.type is not expected:
            raise ViewCommandError(f"mismatched end {name} tag")


def parse_view_command(text: str | bytes) -> ViewCommand:
    """Parse one viewer message into a command."""
    handler = _ViewHandler()
    try:
        xml.sax.parseString(text, handler)
    except xml.sax.SAXParseException as exc:
        raise ViewCommandError(f"invalid viewer message: {exc}") from exc
    return handler.command