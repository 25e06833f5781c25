"""Flywheel shooter: shot selection, speed ramping and at-speed detection."""

from dataclasses import dataclass, field
from enum import Enum

from shooterbot.hardware import Sensor
from shooterbot.pid import VelocityController
from shooterbot.utils import ramp_pwm
from shooterbot.velocity_profile import VelocityProfile, VelocityState

SHOT_ERROR_THRESH = 95
LONG_SHOT_ERROR_THRESH = 100
SHOOTER_RAMP = 35
SHOOTER_OFF_RAMP = 2


class ShotSpeed(Enum):
    """Shot choices and the wheel speed each one needs, in rpm."""

    OFF = 0
    SHORT_SHOT = 1
    HALF_FIELD = 2
    FULL_FIELD = 3
    AUTON_SHOT = 4

    @property
    def rpm(self):
        return SHOOTER_SPEED[self]


SHOOTER_SPEED = {
    ShotSpeed.OFF: 0,
    ShotSpeed.SHORT_SHOT: 1510,
    ShotSpeed.HALF_FIELD: 1570,
    ShotSpeed.FULL_FIELD: 1985,
    ShotSpeed.AUTON_SHOT: 1765,
}


@dataclass
class Shooter:
    """Runs both flywheel sides towards the speed of the chosen shot."""

    speed_choice: ShotSpeed = ShotSpeed.OFF
    last_speed_choice: ShotSpeed = ShotSpeed.OFF
    right_value: int = 0
    left_value: int = 0
    pre_value: int = 0
    deflect_value: int = 0
    gun_on: bool = False
    gun_at_speed: bool = False
    des_speed: int = 0
    right_diff: int = 0
    left_diff: int = 0
    shot_thresh: int = SHOT_ERROR_THRESH
    profile: VelocityProfile = field(default_factory=VelocityProfile)
    right_controller: VelocityController = field(default_factory=VelocityController)
    left_controller: VelocityController = field(default_factory=VelocityController)

    def reset(self, hardware):
        """Turn the shooter off and zero both flywheel encoders."""
        self.speed_choice = ShotSpeed.OFF
        self.pre_value = self.right_value = self.left_value = 0
        self.gun_on = False
        self.deflect_value = 0
        hardware.write(Sensor.RIGHT_GUN_ENCODER, 0)
        hardware.write(Sensor.LEFT_GUN_ENCODER, 0)

    def choose(self, off, short, half, full):
        """Pick a shot from the buttons; later buttons win, none keeps the last choice."""
        if off:
            self.speed_choice = ShotSpeed.OFF
        if short:
            self.speed_choice = ShotSpeed.SHORT_SHOT
        if half:
            self.speed_choice = ShotSpeed.HALF_FIELD
        if full:
            self.speed_choice = ShotSpeed.FULL_FIELD
        self.last_speed_choice = self.speed_choice
        self.deflect_value = 1 if self.speed_choice is ShotSpeed.SHORT_SHOT else 0
        return self.speed_choice

    def update(self, right_speed, left_speed):
        """Compute both flywheel commands for this tick from the measured speeds."""
        self.des_speed = self.speed_choice.rpm
        off = self.speed_choice is ShotSpeed.OFF

        if off:
            self.gun_on = False
            self.pre_value = 0
            self.right_value = ramp_pwm(self.pre_value, self.right_value, SHOOTER_OFF_RAMP)
            self.left_value = ramp_pwm(self.pre_value, self.left_value, SHOOTER_OFF_RAMP)
        else:
            self.gun_on = True
            self.profile.update(SHOOTER_RAMP, self.des_speed)
            cruising = self.profile.state is VelocityState.CRUISE
            self.right_value = int(
                self.right_controller.update(
                    self.des_speed, right_speed, self.profile.velocity, cruising
                )
            )
            self.left_value = int(
                self.left_controller.update(
                    self.des_speed, left_speed, self.profile.velocity, cruising
                )
            )
            self.right_diff = int(self.des_speed - right_speed)
            self.left_diff = int(self.des_speed - left_speed)

        if self.speed_choice is ShotSpeed.FULL_FIELD:
            self.shot_thresh = LONG_SHOT_ERROR_THRESH
        else:
            self.shot_thresh = SHOT_ERROR_THRESH

        right_err, left_err = abs(self.right_diff), abs(self.left_diff)
        if right_err < self.shot_thresh and left_err < self.shot_thresh and not off:
            self.gun_at_speed = True
        if off:
            self.gun_at_speed = False
        if right_err > self.shot_thresh and left_err > self.shot_thresh:
            self.gun_at_speed = False
        return self.right_value, self.left_value