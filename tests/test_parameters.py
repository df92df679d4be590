import xml.etree.ElementTree as ET

import pytest

from ciberlab.parameters import Parameters


def _attrs(params):
    element = ET.fromstring(params.to_xml())
    assert element.tag == "Parameters"
    return element.attrib


def test_defaults_follow_simulator_settings():
    p = Parameters()
    assert (p.sim_time, p.cycle_time, p.key_time) == (2000, 50, 1500)
    assert p.n_req_per_cycle == 4
    assert p.compass_sensor_on is True
    assert p.gps_on is False


def test_xml_starts_and_ends_with_element_markers():
    xml = Parameters().to_xml()
    assert xml.startswith('<Parameters SimTime="2000" CycleTime="50"\n')
    assert xml.endswith("/>\n")


def test_xml_round_trips_integer_fields():
    p = Parameters(sim_time=3000, cycle_time=25, key_time=900, n_req_per_cycle=3,
                   obstacle_latency=2, beacon_latency=4, ground_latency=1,
                   compass_latency=5, collision_latency=6, target_reward=77,
                   home_reward=55, return_time_penalty=11, arrival_time_penalty=22,
                   collision_wall_penalty=7, collision_robot_penalty=8, n_beacons=2)
    a = _attrs(p)
    assert int(a["SimTime"]) == p.sim_time
    assert int(a["CycleTime"]) == p.cycle_time
    assert int(a["KeyTime"]) == p.key_time
    assert int(a["NRequestsPerCycle"]) == p.n_req_per_cycle
    assert int(a["ObstacleLatency"]) == p.obstacle_latency
    assert int(a["BeaconLatency"]) == p.beacon_latency
    assert int(a["GroundLatency"]) == p.ground_latency
    assert int(a["CompassLatency"]) == p.compass_latency
    assert int(a["CollisionLatency"]) == p.collision_latency
    assert int(a["TargetReward"]) == p.target_reward
    assert int(a["HomeReward"]) == p.home_reward
    assert int(a["ReturnTimePenalty"]) == p.return_time_penalty
    assert int(a["ArrivalTimePenalty"]) == p.arrival_time_penalty
    assert int(a["CollisionWallPenalty"]) == p.collision_wall_penalty
    assert int(a["CollisionRobotPenalty"]) == p.collision_robot_penalty
    assert int(a["NBeacons"]) == p.n_beacons


def test_xml_round_trips_noise_values():
    p = Parameters(compass_noise=2.5, beacon_noise=1.25, obstacle_noise=0.1,
                   motors_noise=1.5, gps_lin_noise=0.75, gps_dir_noise=3.0)
    a = _attrs(p)
    assert float(a["CompassNoise"]) == p.compass_noise
    assert float(a["BeaconNoise"]) == p.beacon_noise
    assert float(a["ObstacleNoise"]) == p.obstacle_noise
    assert float(a["MotorsNoise"]) == p.motors_noise
    assert float(a["GPSLinNoise"]) == p.gps_lin_noise
    assert float(a["GPSDirNoise"]) == p.gps_dir_noise


def test_beacon_aperture_uses_fixed_precision():
    a = _attrs(Parameters())
    assert float(a["BeaconAperture"]) == pytest.approx(Parameters().beacon_aperture, abs=1e-6)


@pytest.mark.parametrize("flag", [True, False])
def test_switches_render_on_off(flag):
    p = Parameters(gps_on=flag, beacon_sensor_on=flag, compass_sensor_on=flag,
                   score_sensor_on=flag, obstacle_requestable=flag,
                   beacon_requestable=flag, ground_requestable=flag,
                   compass_requestable=flag, collision_requestable=flag)
    a = _attrs(p)
    expected = "On" if flag else "Off"
    for key in ("GPS", "BeaconSensor", "CompassSensor", "ScoreSensor",
                "ObstacleRequestable", "BeaconRequestable", "GroundRequestable",
                "CompassRequestable", "CollisionRequestable"):
        assert a[key] == expected


def test_show_actions_renders_true_false():
    assert _attrs(Parameters(show_actions=True))["ShowActions"] == "True"
    assert _attrs(Parameters(show_actions=False))["ShowActions"] == "False"


def test_filenames_only_present_when_set():
    a = _attrs(Parameters())
    assert "Lab" not in a and "Grid" not in a
    b = _attrs(Parameters(lab_filename="labs/maze.xml", grid_filename="labs/grid.xml"))
    assert b["Lab"] == "labs/maze.xml"
    assert b["Grid"] == "labs/grid.xml"


def test_filename_with_quote_survives():
    a = _attrs(Parameters(lab_filename='odd"name.xml'))
    assert a["Lab"] == 'odd"name.xml'