"""PID controllers with feed-forward for following motion profiles."""

from dataclasses import dataclass

from shooterbot.utils import limit_motor

I_CAP = 10
V_I_CAP = 20


def _clamp(value, cap):
    return max(-cap, min(cap, value))


@dataclass(frozen=True)
class Gains:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    kv: float = 0.0


VELOCITY_GAINS = Gains(kp=0.3, ki=0.035, kd=0.0, kv=0.031479)


@dataclass
class PositionController:
    """Follows a position profile using PID on the error plus velocity feed-forward."""

    integral: float = 0.0
    error: float = 0.0
    last_error: float = 0.0
    output: float = 0.0

    def update(self, gains, profile_position, profile_velocity, measured, target_changed):
        """Return the motor command for this tick."""
        self.error = profile_position - measured
        if target_changed:
            self.integral = self.last_error = 0.0

        proportional = gains.kp * self.error
        self.integral = _clamp(self.integral + gains.ki * self.error, I_CAP)
        derivative = (self.error - self.last_error) * gains.kd
        feed_forward = gains.kv * profile_velocity

        self.output = limit_motor(proportional + self.integral + derivative + feed_forward)
        self.last_error = self.error
        return self.output


@dataclass
class VelocityController:
    """Holds a shooter wheel at a set speed; feedback only acts while cruising."""

    gains: Gains = VELOCITY_GAINS
    integral: float = 0.0
    error: float = 0.0
    last_error: float = 0.0
    old_setpoint: float = 0.0
    output: float = 0.0

    def update(self, setpoint, measured, profile_velocity, cruising):
        """Return the motor command for this tick."""
        self.error = setpoint - measured
        if setpoint != self.old_setpoint:
            self.integral = self.last_error = 0.0
        if (self.error > 0 > self.last_error) or (self.error < 0 < self.last_error):
            self.integral = 0.0

        proportional = self.gains.kp * self.error
        self.integral = _clamp(self.integral + self.gains.ki * self.error, V_I_CAP)
        derivative = (self.error - self.last_error) * self.gains.kd
        feed_forward = self.gains.kv * profile_velocity

        if not cruising:
            proportional = derivative = 0.0
            self.integral = 0.0
        proportional = max(proportional, 0.0)

        self.output = limit_motor(proportional + self.integral + derivative + feed_forward)
        self.last_error = self.error
        self.old_setpoint = setpoint
        return self.output