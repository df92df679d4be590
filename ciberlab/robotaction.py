"""The actions a robot requests in one simulation cycle."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RobotAction:
    """Motor powers, leds, sensor requests and messages sent by a robot."""

    left_motor: float = 0.0
    right_motor: float = 0.0
    end_led: bool = False
    returning_led: bool = False
    visiting_led: bool = False

    left_motor_changed: bool = False
    right_motor_changed: bool = False
    end_led_changed: bool = False
    returning_led_changed: bool = False
    visiting_led_changed: bool = False
    say_received: bool = False

    sensor_requests: list[str] = field(default_factory=list)
    say_message: str = ""

    def reset(self) -> None:
        """Forget what changed this cycle; motor and led values are kept."""
        self.left_motor_changed = False
        self.right_motor_changed = False
        self.end_led_changed = False
        self.returning_led_changed = False
        self.visiting_led_changed = False
        self.say_received = False
        self.sensor_requests.clear()
        self.say_message = ""