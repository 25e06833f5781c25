"""Trapezoidal position profile generator (inches, inches/s, inches/s^2)."""

from dataclasses import dataclass
from enum import Enum

TICK_MS = 25


class MotionState(Enum):
    ACCEL = 0
    CRUISE = 1
    DECCEL = 2
    REST = 3


def _integrate(value, rate):
    return value + (rate / 1000) * TICK_MS


@dataclass
class MotionProfile:
    """Produces a position/velocity setpoint one control tick at a time."""

    velocity: float = 0.0
    position: float = 0.0
    old_target: float = 0.0
    accel_dist: float = 0.0
    error: float = 0.0
    forward: bool = False
    target_changed: bool = True
    state: MotionState = MotionState.ACCEL
    last_state: MotionState = MotionState.ACCEL

    def update(self, max_accel, max_vel, target):
        """Advance the profile by one tick towards ``target``."""
        self.error = target - self.position

        if target != self.old_target:
            self.state = MotionState.ACCEL
            self.position = self.velocity = 0.0
            self.target_changed = True
        if target == 0:
            max_accel = 0
        if target > 0:
            self.forward = True
        if target < 0:
            self.forward = False
        if abs(self.velocity) >= max_vel and self.state is not MotionState.DECCEL:
            self.state = MotionState.CRUISE
        if self.state is MotionState.CRUISE and self.last_state is MotionState.ACCEL:
            self.accel_dist = self.position

        if self.state is MotionState.ACCEL:
            if abs(self.position) > abs(target / 2):
                self.state = MotionState.DECCEL
            accel = max_accel if self.forward else -max_accel
            self.velocity = _integrate(self.velocity, accel)
            self.position = _integrate(self.position, self.velocity)
        elif self.state is MotionState.CRUISE:
            if self.forward:
                if self.error <= self.accel_dist:
                    self.state = MotionState.DECCEL
            elif self.error >= self.accel_dist:
                self.state = MotionState.DECCEL
            self.position = _integrate(self.position, self.velocity)
        elif self.state is MotionState.DECCEL:
            if self.forward:
                accel = -max_accel
                if self.velocity < 0:
                    self.state = MotionState.REST
            else:
                accel = max_accel
                if self.velocity > 0:
                    self.state = MotionState.REST
            self.velocity = _integrate(self.velocity, accel)
            self.position = _integrate(self.position, self.velocity)
        else:
            self.velocity = 0.0

        self.old_target = target
        self.last_state = self.state