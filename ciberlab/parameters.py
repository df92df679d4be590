"""Global simulation parameters and their XML form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional
from xml.sax.saxutils import escape

_SWITCH = {True: "On", False: "Off"}
_TRUTH = {True: "True", False: "False"}


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


@dataclass
class Parameters:
    """Settings that govern a simulation run."""

    sim_time: int = 2000
    cycle_time: int = 50
    key_time: int = 1500

    compass_noise: float = 0.0
    beacon_noise: float = 0.0
    obstacle_noise: float = 0.0
    motors_noise: float = 0.0
    gps_lin_noise: float = 0.5
    gps_dir_noise: float = 5.0
    line_sensor_true_prob: float = 0.98

    n_req_per_cycle: int = 4
    obstacle_requestable: bool = False
    compass_requestable: bool = False
    beacon_requestable: bool = False
    ground_requestable: bool = False
    collision_requestable: bool = False
    gps_requestable: bool = False

    obstacle_latency: int = 0
    compass_latency: int = 0
    beacon_latency: int = 0
    ground_latency: int = 0
    collision_latency: int = 0
    gps_latency: int = 0

    return_time_penalty: int = 25
    arrival_time_penalty: int = 100
    collision_wall_penalty: int = 2
    collision_robot_penalty: int = 2
    target_reward: int = 100
    home_reward: int = 100

    beacon_aperture: float = math.pi

    gps_on: bool = False
    beacon_sensor_on: bool = False
    compass_sensor_on: bool = True
    score_sensor_on: bool = False
    show_actions: bool = True

    lab_filename: Optional[str] = None
    grid_filename: Optional[str] = None
    n_beacons: int = 0

    def to_xml(self) -> str:
        """The ``<Parameters .../>`` element describing these settings."""
        parts = [
            '<Parameters SimTime="%d" CycleTime="%d"\n'
            '\t\tCompassNoise="%g" BeaconNoise="%g" ObstacleNoise="%g"\n'
            '\t\tMotorsNoise="%g" KeyTime="%d"\n'
            '\t\tGPS="%s" GPSLinNoise="%g" GPSDirNoise="%g" \n'
            '\t\tBeaconSensor="%s" \n'
            '\t\tCompassSensor="%s" \n'
            '\t\tScoreSensor="%s" ShowActions="%s" NBeacons="%d" \n'
            % (
                self.sim_time,
                self.cycle_time,
                self.compass_noise,
                self.beacon_noise,
                self.obstacle_noise,
                self.motors_noise,
                self.key_time,
                _SWITCH[bool(self.gps_on)],
                self.gps_lin_noise,
                self.gps_dir_noise,
                _SWITCH[bool(self.beacon_sensor_on)],
                _SWITCH[bool(self.compass_sensor_on)],
                _SWITCH[bool(self.score_sensor_on)],
                _TRUTH[bool(self.show_actions)],
                self.n_beacons,
            ),
            '\t\tNRequestsPerCycle="%d" \n'
            '\t\tObstacleRequestable="%s" BeaconRequestable="%s" \n'
            '\t\tGroundRequestable="%s" CompassRequestable="%s"\n'
            '\t\tCollisionRequestable="%s"\n'
            % (
                self.n_req_per_cycle,
                _SWITCH[bool(self.obstacle_requestable)],
                _SWITCH[bool(self.beacon_requestable)],
                _SWITCH[bool(self.ground_requestable)],
                _SWITCH[bool(self.compass_requestable)],
                _SWITCH[bool(self.collision_requestable)],
            ),
            '\t\tObstacleLatency="%d" BeaconLatency="%d" \n'
            '\t\tGroundLatency="%d" CompassLatency="%d"\n'
            '\t\tCollisionLatency="%d"\n'
            % (
                self.obstacle_latency,
                self.beacon_latency,
                self.ground_latency,
                self.compass_latency,
                self.collision_latency,
            ),
            '\t\tBeaconAperture="%f"\n' % self.beacon_aperture,
            '\t\tReturnTimePenalty="%d" ArrivalTimePenalty="%d" \n'
            '\t\tCollisionWallPenalty="%d" CollisionRobotPenalty="%d" \n'
            '\t\tTargetReward="%d" HomeReward="%d"\n'
            % (
                self.return_time_penalty,
                self.arrival_time_penalty,
                self.collision_wall_penalty,
                self.collision_robot_penalty,
                self.target_reward,
                self.home_reward,
            ),
        ]
        if self.lab_filename is not None:
            parts.append('\t\tLab="%s"\n' % _attr(self.lab_filename))
        if self.grid_filename is not None:
            parts.append('\t\tGrid="%s"\n' % _attr(self.grid_filename))
        parts.append("/>\n")
        return "".join(parts)