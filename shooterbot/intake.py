"""Collector and conveyor control, including the shot-feeding state machine."""

from dataclasses import dataclass
from enum import Enum

FEED_POWER = 127


class ConveyorState(Enum):
    MANUAL = 0
    INDEX_UP = 1
    SEND_TO_GUN = 2
    FREEZE = 3


class FireState(Enum):
    CLEAR = 0
    PREP_FIRE = 1
    FIRE = 2


class CollectState(Enum):
    OFF = 0
    SUCK = 1
    BLOW = 2

    @property
    def power(self):
        return _COLLECT_POWER[self]


_COLLECT_POWER = {
    CollectState.OFF: 0,
    CollectState.SUCK: 127,
    CollectState.BLOW: -127,
}


def collector_power(suck, blow):
    """Collector command from the suck/blow buttons; blow wins when both are held."""
    power = CollectState.OFF.power
    if suck:
        power = CollectState.SUCK.power
    if blow:
        power = CollectState.BLOW.power
    return power


@dataclass
class Conveyor:
    """Indexes balls up to the top switch and feeds them to the shooter when at speed."""

    state: ConveyorState = ConveyorState.MANUAL
    last_state: ConveyorState = ConveyorState.MANUAL
    fire_state: FireState = FireState.CLEAR
    value: int = 0
    time_passed: float = 0.0

    def reset(self):
        """Return to manual control with the conveyor stopped."""
        self.value = 0
        self.state = ConveyorState.MANUAL
        self.fire_state = FireState.CLEAR

    def update(
        self,
        collect_value,
        manual,
        at_bottom,
        at_middle,
        at_top,
        gun_on,
        gun_at_speed,
        in_auton,
        stop_intake,
    ):
        """Advance the conveyor one tick and return its motor command."""
        state = self.state
        if state is ConveyorState.MANUAL:
            if at_bottom or at_top or at_middle:
                self.state = ConveyorState.MANUAL if manual else ConveyorState.INDEX_UP
            if gun_on:
                self.state = ConveyorState.MANUAL if manual else ConveyorState.SEND_TO_GUN
            self.value = collect_value
        elif state is ConveyorState.INDEX_UP:
            if (at_bottom or at_middle) and not at_top:
                self.value = FEED_POWER
            if at_top:
                self.value = 0
                self.state = ConveyorState.FREEZE
            if gun_on:
                self.value = 0
                self.state = ConveyorState.SEND_TO_GUN
            if not (at_bottom or at_top or at_middle):
                self.value = 0
            if manual:
                self.state = ConveyorState.MANUAL
        elif state is ConveyorState.FREEZE:
            if not at_top:
                self.state = ConveyorState.INDEX_UP
            if gun_on:
                self.state = ConveyorState.SEND_TO_GUN
            if manual:
                self.state = ConveyorState.MANUAL
        else:
            if manual:
                self.state = ConveyorState.MANUAL
            if not gun_on:
                self.state = ConveyorState.INDEX_UP
            self._fire(gun_at_speed)

        self.last_state = self.state

        if in_auton and stop_intake:
            self.value = 0
        return self.value

    def _fire(self, gun_at_speed):
        if self.fire_state is FireState.CLEAR:
            self.time_passed = 0.0
            self.value = 0
            self.fire_state = FireState.PREP_FIRE
        elif self.fire_state is FireState.PREP_FIRE:
            if gun_at_speed:
                self.fire_state = FireState.FIRE
        else:
            self.value = FEED_POWER
            if not gun_at_speed:
                self.value = 0
                self.fire_state = FireState.PREP_FIRE