"""Linear ramp profile for the shooter wheel speed (rpm per tick)."""

from dataclasses import dataclass
from enum import Enum


class VelocityState(Enum):
    ACCEL = 0
    NACCEL = 1
    CRUISE = 2
    REST = 3


@dataclass
class VelocityProfile:
    """Ramps a velocity setpoint towards a target by a fixed step each tick."""

    velocity: float = 0.0
    old_target: float = 0.0
    target_changed: bool = True
    state: VelocityState = VelocityState.ACCEL
    last_state: VelocityState = VelocityState.ACCEL

    def update(self, max_accel, target_velocity):
        """Advance the ramp by one tick towards ``target_velocity``."""
        if target_velocity > self.old_target:
            self.state = VelocityState.ACCEL
            self.target_changed = True
        elif target_velocity < self.old_target:
            self.state = VelocityState.NACCEL
            self.target_changed = True
        if target_velocity == 0:
            max_accel = 0
            self.state = VelocityState.REST

        if self.state is VelocityState.ACCEL:
            if self.velocity >= target_velocity:
                self.state = VelocityState.CRUISE
            self.velocity += max_accel
        elif self.state is VelocityState.NACCEL:
            if self.velocity <= target_velocity:
                self.state = VelocityState.CRUISE
            self.velocity -= max_accel
        elif self.state is VelocityState.REST:
            self.velocity = 0.0

        self.old_target = target_velocity
        self.last_state = self.state