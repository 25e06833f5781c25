"""Drivetrain control: driver arcade drive, brakes and autonomous drive/turn moves."""

from dataclasses import dataclass, field
from typing import Optional

from shooterbot.hardware import Hardware, Sensor
from shooterbot.motion_profile import MotionProfile
from shooterbot.pid import Gains, PositionController
from shooterbot.utils import THROTTLE_STEP, WHEEL_STEP, limit_motor, ramp_pwm

QUICKTURN_THRESHOLD = 30
QUICKTURN_SCALE = 1.2
HALO_SCALE = 1.4

DRIVE_GAINS = Gains(kp=3.0, ki=2.0, kd=0.0, kv=5.5217)
HEADING_KP = 15.0

TURN_GAINS = Gains(kp=5.0, ki=1.0, kd=0.5, kv=2.1)
TURN_QUIT_TIME = 2000
TURN_TOLERANCE = 2
TURN_I_CAP = 15


def brake_value(request):
    """Return the pneumatic brake output for a brake request."""
    return 1 if request else 0


@dataclass
class DriveOutput:
    """Motor commands for both sides of the drivetrain."""

    right: int = 0
    left: int = 0
    done: bool = False


def _reset_drive_sensors(hardware, inputs):
    hardware.write(Sensor.LEFT_DRIVE_ENCODER, 0)
    hardware.write(Sensor.GYRO, 0)
    inputs.heading = 0.0


@dataclass
class ArcadeDrive:
    """Halo-style arcade drive with ramped stick inputs and a quick-turn mode."""

    hardware: Optional[Hardware] = None
    throttle: int = 0
    wheel: int = 0
    right_total: int = 0
    left_total: int = 0
    quickturn: bool = False
    brake_request: bool = False

    def reset(self):
        """Clear the side totals and zero the drive encoder."""
        self.right_total = 0
        self.left_total = 0
        if self.hardware is not None:
            self.hardware.write(Sensor.LEFT_DRIVE_ENCODER, 0)

    def update(self, throttle, wheel, brake):
        """Mix the stick values into left/right commands for this tick."""
        self.throttle = ramp_pwm(throttle, self.throttle, THROTTLE_STEP)
        self.wheel = ramp_pwm(wheel, self.wheel, WHEEL_STEP)

        self.quickturn = abs(self.wheel) > QUICKTURN_THRESHOLD
        if self.quickturn:
            turn = int(self.wheel * QUICKTURN_SCALE)
        else:
            turn = int(self.wheel * HALO_SCALE * (self.throttle / 127))

        self.left_total = limit_motor(self.throttle + turn)
        self.right_total = limit_motor(self.throttle - turn)
        self.brake_request = bool(brake)
        return DriveOutput(right=self.right_total, left=self.left_total)


@dataclass
class DriveStraight:
    """Drives a profiled distance while holding the heading it started on."""

    gains: Gains = DRIVE_GAINS
    heading_kp: float = HEADING_KP
    profile: MotionProfile = field(default_factory=MotionProfile)
    controller: PositionController = field(default_factory=PositionController)
    last_goal: int = 0
    heading_setpoint: float = 0.0
    heading_output: float = 0.0
    quit_timer: int = 0

    def update(self, hardware, inputs, accel, velocity, goal):
        """Run one tick of the move; ``done`` is set once within an inch of the goal."""
        if goal != self.last_goal:
            _reset_drive_sensors(hardware, inputs)
            self.quit_timer = 0
            self.heading_setpoint = 0.0

        measured = inputs.drive_distance
        self.profile.update(accel, velocity, goal)
        output = self.controller.update(
            self.gains,
            self.profile.position,
            self.profile.velocity,
            measured,
            self.profile.target_changed,
        )

        heading_error = self.heading_setpoint - inputs.heading
        self.heading_output = heading_error * self.heading_kp
        result = DriveOutput(
            right=int(output + self.heading_output),
            left=int(output - self.heading_output),
        )
        self.last_goal = goal

        if abs(int(goal - measured)) < 1:
            self.heading_output = 0.0
            return DriveOutput(done=True)
        return result


@dataclass
class ProfiledTurn:
    """Turns in place to a heading by following a motion profile."""

    gains: Gains = TURN_GAINS
    profile: MotionProfile = field(default_factory=MotionProfile)
    controller: PositionController = field(default_factory=PositionController)
    last_goal: int = 0
    quit_timer: int = 0

    def update(self, hardware, inputs, accel, velocity, goal):
        """Run one tick of the turn; ``done`` is set within two degrees of the goal."""
        if goal != self.last_goal:
            _reset_drive_sensors(hardware, inputs)
            self.quit_timer = 0
        if self.controller.error != self.controller.last_error:
            self.quit_timer = 0

        self.profile.update(accel, velocity, goal)
        output = self.controller.update(
            self.gains,
            self.profile.position,
            self.profile.velocity,
            inputs.heading,
            self.profile.target_changed,
        )
        self.last_goal = goal

        if abs(goal - inputs.heading) < TURN_TOLERANCE:
            self.controller.output = 0
            return DriveOutput(done=True)
        return DriveOutput(right=int(output), left=int(-output))


@dataclass
class SimpleTurn:
    """Plain PID turn on the gyro heading, without a motion profile."""

    kp: float = 10.0
    ki: float = 0.0
    kd: float = 0.0
    last_target: int = 0
    error: int = 0
    last_error: int = 0
    integral: int = 0
    output: int = 0

    def update(self, inputs, target):
        """Run one tick of the turn; ``done`` is set within two degrees of the target."""
        if target != self.last_target:
            inputs.heading = 0.0

        self.error = int(target - inputs.heading)
        proportional = int(self.error * self.kp)
        self.integral = int(self.integral + self.error * self.ki)
        self.integral = max(-TURN_I_CAP, min(TURN_I_CAP, self.integral))
        derivative = int((self.error - self.last_error) * self.kd)
        self.last_error = self.error

        self.output = limit_motor(proportional + self.integral + derivative)
        self.last_target = target

        if abs(self.error) < TURN_TOLERANCE:
            return DriveOutput(done=True)
        return DriveOutput(right=self.output, left=-self.output)