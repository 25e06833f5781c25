"""Sensor and actuator access, plus per-tick processing of raw sensor readings."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DRIVE_ENC_CPI = 107.54
GUN_ENC_CPI = 42
DEGREE = 10
LOOP_TIME = 0.025
SWITCH_MIDPOINT = 2048


class Sensor(Enum):
    """Sensors, by the port they are wired to."""

    GYRO = "in1"
    COLOR_SWITCH = "in2"
    AUTON_SWITCH = "in3"
    PWR_EXPANDER = "in4"
    LEFT_DRIVE_ENCODER = "dgtl11"
    TOP_SWITCH = "dgtl3"
    BOTTOM_SWITCH = "dgtl4"
    MIDDLE_SWITCH = "dgtl8"
    LEFT_GUN_ENCODER = "dgtl9"
    RIGHT_GUN_ENCODER = "dgtl1"


class Actuator(Enum):
    """Actuators, by the ports that are driven together."""

    DRIVE_RIGHT = ("port4", "port2")
    DRIVE_LEFT = ("port9", "port3")
    COLLECTOR = ("port1",)
    CONVEYOR = ("port10",)
    SHOOTER_RIGHT = ("port7", "port8")
    SHOOTER_LEFT = ("port5", "port6")
    DEFLECTOR = ("dgtl6",)
    BRAKES = ("dgtl5",)


class Hardware(ABC):
    """Access to the robot's sensors and actuators."""

    @abstractmethod
    def read(self, sensor):
        """Return the current value of ``sensor``."""

    @abstractmethod
    def write(self, actuator, value):
        """Drive ``actuator``; writing a Sensor sets it (e.g. resets an encoder)."""


@dataclass
class SimulatedHardware(Hardware):
    """In-memory hardware: sensors hold what was written, outputs are recorded."""

    sensors: dict = field(default_factory=dict)
    outputs: dict = field(default_factory=dict)
    ports: dict = field(default_factory=dict)

    def read(self, sensor):
        if not isinstance(sensor, Sensor):
            raise TypeError(f"not a sensor: {sensor!r}")
        return self.sensors.get(sensor, 0)

    def write(self, actuator, value):
        if isinstance(actuator, Sensor):
            self.sensors[actuator] = value
        elif isinstance(actuator, Actuator):
            self.outputs[actuator] = value
            for port in actuator.value:
                self.ports[port] = value
        else:
            raise TypeError(f"not an actuator or sensor: {actuator!r}")


class Alliance(Enum):
    RED = "red"
    BLUE = "blue"


class Routine(Enum):
    FOUR_BALL = "four_ball"
    FOUR_BALL_PLUS = "four_ball_plus"


def pick_alliance(value) -> Optional[Alliance]:
    """Select the alliance from the colour potentiometer; None at the exact midpoint."""
    if value > SWITCH_MIDPOINT:
        return Alliance.RED
    if value < SWITCH_MIDPOINT:
        return Alliance.BLUE
    return None


def pick_routine(value) -> Optional[Routine]:
    """Select the autonomous routine from its potentiometer; None at the exact midpoint."""
    if value > SWITCH_MIDPOINT:
        return Routine.FOUR_BALL_PLUS
    if value < SWITCH_MIDPOINT:
        return Routine.FOUR_BALL
    return None


@dataclass
class Inputs:
    """Processed sensor readings for one control tick."""

    drive_distance: float = 0.0
    heading: float = 0.0
    at_bottom: bool = False
    at_top: bool = False
    at_middle: bool = False
    right_gun_rotations: float = 0.0
    left_gun_rotations: float = 0.0
    right_gun_speed: float = 0.0
    left_gun_speed: float = 0.0


def _gun_rpm(rotations, old_rotations):
    return ((rotations - old_rotations) / LOOP_TIME * 60) / GUN_ENC_CPI


class InputProcessor:
    """Turns raw sensor readings into distances, headings and shooter speeds."""

    def __init__(self, hardware):
        self.hardware = hardware
        self.inputs = Inputs()
        self._old_right = 0.0
        self._old_left = 0.0

    def update(self):
        """Sample all sensors and return the processed readings."""
        hw = self.hardware
        inputs = self.inputs
        inputs.drive_distance = hw.read(Sensor.LEFT_DRIVE_ENCODER) / DRIVE_ENC_CPI
        inputs.heading = float(int(hw.read(Sensor.GYRO) / DEGREE))
        inputs.at_bottom = bool(hw.read(Sensor.BOTTOM_SWITCH))
        inputs.at_top = bool(hw.read(Sensor.TOP_SWITCH))
        inputs.at_middle = bool(hw.read(Sensor.MIDDLE_SWITCH))

        inputs.right_gun_rotations = hw.read(Sensor.RIGHT_GUN_ENCODER)
        inputs.left_gun_rotations = hw.read(Sensor.LEFT_GUN_ENCODER)
        inputs.right_gun_speed = _gun_rpm(inputs.right_gun_rotations, self._old_right)
        inputs.left_gun_speed = _gun_rpm(inputs.left_gun_rotations, self._old_left)
        self._old_right = inputs.right_gun_rotations
        self._old_left = inputs.left_gun_rotations
        return inputs