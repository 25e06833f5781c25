import pytest

from shooterbot.drive import (
    ArcadeDrive,
    DriveStraight,
    ProfiledTurn,
    SimpleTurn,
    brake_value,
)
from shooterbot.hardware import Inputs, Sensor, SimulatedHardware
from shooterbot.utils import MOTOR_MAX, MOTOR_MIN, THROTTLE_STEP


def test_brake_value():
    assert brake_value(True) == 1
    assert brake_value(False) == 0


def test_arcade_idle_sticks_give_zero():
    out = ArcadeDrive().update(0, 0, False)
    assert (out.left, out.right) == (0, 0)


def test_arcade_throttle_is_ramped():
    drive = ArcadeDrive()
    out = drive.update(127, 0, False)
    assert out.left == THROTTLE_STEP
    assert out.right == THROTTLE_STEP


def test_arcade_throttle_saturates():
    drive = ArcadeDrive()
    for _ in range(10):
        out = drive.update(127, 0, False)
    assert out.left == MOTOR_MAX
    assert out.right == MOTOR_MAX


def test_arcade_quickturn_spins_in_place():
    drive = ArcadeDrive()
    for _ in range(10):
        out = drive.update(0, 127, False)
    assert drive.quickturn is True
    assert out.left == MOTOR_MAX
    assert out.right == MOTOR_MIN


@pytest.mark.parametrize("throttle,wheel", [(80, 20), (127, 60), (-90, 10)])
def test_arcade_mirror_symmetry(throttle, wheel):
    a, b = ArcadeDrive(), ArcadeDrive()
    for _ in range(8):
        out_a = a.update(throttle, wheel, False)
        out_b = b.update(throttle, -wheel, False)
    assert out_a.left == out_b.right
    assert out_a.right == out_b.left


def test_arcade_brake_request_follows_button():
    drive = ArcadeDrive()
    drive.update(0, 0, True)
    assert drive.brake_request is True
    drive.update(0, 0, False)
    assert drive.brake_request is False


def test_arcade_reset_zeroes_encoder_and_totals():
    hw = SimulatedHardware()
    hw.write(Sensor.LEFT_DRIVE_ENCODER, 500)
    drive = ArcadeDrive(hardware=hw)
    drive.update(127, 0, False)
    drive.reset()
    assert hw.read(Sensor.LEFT_DRIVE_ENCODER) == 0
    assert (drive.left_total, drive.right_total) == (0, 0)


def test_drive_straight_new_goal_resets_sensors():
    hw = SimulatedHardware()
    hw.write(Sensor.LEFT_DRIVE_ENCODER, 1000)
    hw.write(Sensor.GYRO, 50)
    inputs = Inputs(heading=5.0)
    out = DriveStraight().update(hw, inputs, 9, 22, 65)
    assert hw.read(Sensor.LEFT_DRIVE_ENCODER) == 0
    assert hw.read(Sensor.GYRO) == 0
    assert inputs.heading == 0.0
    assert out.right == out.left
    assert out.done is False


def test_drive_straight_done_at_goal():
    hw = SimulatedHardware()
    inputs = Inputs(drive_distance=65.0)
    out = DriveStraight().update(hw, inputs, 9, 22, 65)
    assert out.done is True
    assert (out.right, out.left) == (0, 0)


def test_drive_straight_corrects_heading():
    hw = SimulatedHardware()
    inputs = Inputs()
    move = DriveStraight()
    move.update(hw, inputs, 9, 22, 65)
    inputs.heading = 2.0
    out = move.update(hw, inputs, 9, 22, 65)
    assert out.left > out.right


def test_profiled_turn_outputs_are_opposed():
    hw = SimulatedHardware()
    inputs = Inputs()
    out = ProfiledTurn().update(hw, inputs, 11, 30, 30)
    assert out.left == -out.right
    assert out.done is False


def test_profiled_turn_done_near_goal():
    hw = SimulatedHardware()
    inputs = Inputs()
    turn = ProfiledTurn()
    turn.update(hw, inputs, 11, 30, 10)
    inputs.heading = 9.0
    out = turn.update(hw, inputs, 11, 30, 10)
    assert out.done is True
    assert (out.right, out.left) == (0, 0)


@pytest.mark.parametrize("target,right", [(90, MOTOR_MAX), (-90, MOTOR_MIN)])
def test_simple_turn_saturates(target, right):
    out = SimpleTurn().update(Inputs(), target)
    assert out.right == right
    assert out.left == -right


def test_simple_turn_done_near_target():
    inputs = Inputs()
    turn = SimpleTurn()
    turn.update(inputs, 11)
    inputs.heading = 10.0
    out = turn.update(inputs, 11)
    assert out.done is True
    assert (out.right, out.left) == (0, 0)


def test_simple_turn_new_target_clears_heading():
    inputs = Inputs(heading=40.0)
    SimpleTurn().update(inputs, -12)
    assert inputs.heading == 0.0