import pytest

from shooterbot.hardware import Sensor, SimulatedHardware
from shooterbot.shooter import SHOOTER_OFF_RAMP, Shooter, ShotSpeed
from shooterbot.utils import MOTOR_MAX, MOTOR_MIN


def test_choose_short_shot_raises_deflector():
    shooter = Shooter()
    assert shooter.choose(False, True, False, False) is ShotSpeed.SHORT_SHOT
    assert shooter.deflect_value == 1


def test_choose_full_field_lowers_deflector():
    shooter = Shooter()
    shooter.choose(False, True, False, False)
    shooter.choose(False, False, False, True)
    assert shooter.speed_choice is ShotSpeed.FULL_FIELD
    assert shooter.deflect_value == 0


def test_choose_later_button_wins():
    shooter = Shooter()
    assert shooter.choose(True, False, False, True) is ShotSpeed.FULL_FIELD


def test_choose_no_button_keeps_choice():
    shooter = Shooter()
    shooter.choose(False, False, True, False)
    assert shooter.choose(False, False, False, False) is ShotSpeed.HALF_FIELD
    assert shooter.last_speed_choice is ShotSpeed.HALF_FIELD


def test_reset_zeroes_encoders_and_turns_off():
    hw = SimulatedHardware()
    hw.write(Sensor.RIGHT_GUN_ENCODER, 300)
    hw.write(Sensor.LEFT_GUN_ENCODER, 200)
    shooter = Shooter(speed_choice=ShotSpeed.FULL_FIELD, gun_on=True, right_value=90)
    shooter.reset(hw)
    assert hw.read(Sensor.RIGHT_GUN_ENCODER) == 0
    assert hw.read(Sensor.LEFT_GUN_ENCODER) == 0
    assert shooter.speed_choice is ShotSpeed.OFF
    assert (shooter.gun_on, shooter.right_value) == (False, 0)


def test_off_ramps_down_slowly():
    shooter = Shooter(right_value=100, left_value=100)
    right, left = shooter.update(0, 0)
    assert right == 100 - SHOOTER_OFF_RAMP
    assert left == 100 - SHOOTER_OFF_RAMP
    assert shooter.gun_on is False
    assert shooter.gun_at_speed is False


@pytest.mark.parametrize(
    "choice,rpm",
    [
        (ShotSpeed.SHORT_SHOT, 1510),
        (ShotSpeed.HALF_FIELD, 1570),
        (ShotSpeed.FULL_FIELD, 1985),
        (ShotSpeed.AUTON_SHOT, 1765),
    ],
)
def test_update_targets_shot_speed(choice, rpm):
    shooter = Shooter(speed_choice=choice)
    right, left = shooter.update(0, 0)
    assert shooter.des_speed == rpm
    assert shooter.gun_on is True
    assert MOTOR_MIN <= right <= MOTOR_MAX
    assert MOTOR_MIN <= left <= MOTOR_MAX


def test_at_speed_when_measured_matches():
    shooter = Shooter()
    shooter.choose(False, False, True, False)
    shooter.update(1570, 1570)
    assert shooter.gun_at_speed is True


def test_not_at_speed_when_far_off():
    shooter = Shooter()
    shooter.choose(False, False, True, False)
    shooter.update(1570, 1570)
    shooter.update(0, 0)
    assert shooter.gun_at_speed is False


def test_output_grows_while_ramping_up():
    shooter = Shooter(speed_choice=ShotSpeed.FULL_FIELD)
    outputs = [shooter.update(0, 0)[0] for _ in range(5)]
    assert outputs == sorted(outputs)