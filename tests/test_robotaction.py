from ciberlab.robotaction import RobotAction


def test_defaults():
    action = RobotAction()
    assert action.left_motor == 0.0
    assert action.right_motor == 0.0
    assert not action.end_led
    assert not action.left_motor_changed
    assert action.sensor_requests == []
    assert action.say_message == ""


def test_reset_clears_change_flags_and_requests():
    action = RobotAction(
        left_motor=0.1,
        right_motor=-0.1,
        end_led=True,
        left_motor_changed=True,
        right_motor_changed=True,
        end_led_changed=True,
        returning_led_changed=True,
        visiting_led_changed=True,
        say_received=True,
        sensor_requests=["IRSensor0", "Compass"],
        say_message="hello",
    )
    action.reset()
    assert action == RobotAction(left_motor=0.1, right_motor=-0.1, end_led=True)


def test_reset_keeps_same_request_list():
    action = RobotAction()
    requests = action.sensor_requests
    requests.append("Ground")
    action.reset()
    assert action.sensor_requests is requests
    assert requests == []


def test_instances_do_not_share_requests():
    first, second = RobotAction(), RobotAction()
    first.sensor_requests.append("Beacon")
    assert second.sensor_requests == []