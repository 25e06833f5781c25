"""Autonomous period: match clock, step sequencing and the scripted routines."""

from dataclasses import dataclass, field
from typing import Optional

from shooterbot.drive import DriveStraight, SimpleTurn
from shooterbot.hardware import Alliance, Routine
from shooterbot.intake import CollectState
from shooterbot.shooter import ShotSpeed

AUTO_TIME = 15
SHUT_DOWN_TIME = 2.5
WAIT_TICK_MS = 25


@dataclass
class AutonCommands:
    """What the running routine currently asks of the robot's subsystems."""

    speed_choice: ShotSpeed = ShotSpeed.OFF
    brake_request: bool = False
    collect_state: CollectState = CollectState.OFF
    stop_intake: bool = False
    right: int = 0
    left: int = 0


@dataclass
class Autonomous:
    """Sequences the chosen routine one control tick at a time."""

    alliance: Optional[Alliance] = None
    routine: Optional[Routine] = None
    index: int = 0
    elapsed: float = 0.0
    time_left: float = AUTO_TIME
    almost_out_of_time: bool = False
    wait_counter: int = 0
    commands: AutonCommands = field(default_factory=AutonCommands)
    drive_straight: DriveStraight = field(default_factory=DriveStraight)
    turn: SimpleTurn = field(default_factory=SimpleTurn)

    def reset(self, alliance, routine):
        """Start the period over with the given alliance and routine."""
        self.alliance = alliance
        self.routine = routine
        self.index = 0
        self.elapsed = 0.0
        self.time_left = AUTO_TIME

    def update_clock(self, loop_time):
        """Account for one loop of ``loop_time`` seconds and return the time left."""
        self.elapsed += loop_time
        self.time_left = AUTO_TIME - self.elapsed
        self.almost_out_of_time = abs(self.time_left) <= SHUT_DOWN_TIME
        return self.time_left

    def wait(self, how_long):
        """Count one tick towards ``how_long`` ms; advance the step once exceeded.

        The counter is shared by every wait of the period and is never cleared.
        """
        self.wait_counter += WAIT_TICK_MS
        if self.wait_counter > how_long:
            self.index += 1
            return True
        return False

    def step(self, hardware, inputs):
        """Run one tick of the selected routine and return the current commands."""
        routines = {
            (Alliance.RED, Routine.FOUR_BALL): self._four_ball,
            (Alliance.RED, Routine.FOUR_BALL_PLUS): self._four_ball_disrupt,
            (Alliance.BLUE, Routine.FOUR_BALL): self._four_ball,
            (Alliance.BLUE, Routine.FOUR_BALL_PLUS): self._four_ball_plus_stay,
        }
        routine = routines.get((self.alliance, self.routine))
        if routine is not None:
            routine(hardware, inputs)
        return self.commands

    def _apply(self, output):
        self.commands.right = output.right
        self.commands.left = output.left
        if output.done:
            self.index += 1

    def _drive(self, hardware, inputs, accel, velocity, goal):
        self._apply(self.drive_straight.update(hardware, inputs, accel, velocity, goal))

    def _turn(self, inputs, target):
        self._apply(self.turn.update(inputs, target))

    def _four_ball(self, hardware, inputs):
        """Shoot the preloads from the start position."""
        match self.index:
            case 0:
                self.commands.speed_choice = ShotSpeed.FULL_FIELD
                self.index += 1
            case 1:
                pass
            case _:
                self.index = 0

    def _four_ball_disrupt(self, hardware, inputs):
        """Drive into the opponents' path, then shoot and collect what rolls by."""
        match self.index:
            case 0:
                self._drive(hardware, inputs, 9, 22, 65)
            case 1:
                self.index += 1
            case 2:
                self.commands.speed_choice = ShotSpeed.HALF_FIELD
                self.commands.brake_request = True
                self.index += 1
            case 3:
                self.wait(1000)
            case 4:
                self.commands.collect_state = CollectState.SUCK
            case _:
                self.index = 0

    def _four_ball_plus_stay(self, hardware, inputs):
        """Shoot, collect the nearby stack and shoot again from beside it."""
        match self.index:
            case 0:
                self.commands.speed_choice = ShotSpeed.FULL_FIELD
                self.index += 1
            case 1:
                self.wait(6500)
            case 2:
                self.commands.speed_choice = ShotSpeed.OFF
                self._turn(inputs, -12)
            case 3:
                self.commands.collect_state = CollectState.SUCK
                self._drive(hardware, inputs, 9, 22, 23)
            case 4:
                self._drive(hardware, inputs, 6, 10, 16)
            case 5:
                self.wait(100)
            case 6:
                self._turn(inputs, 11)
            case 7:
                self.commands.brake_request = True
                self.commands.speed_choice = ShotSpeed.AUTON_SHOT
            case _:
                self.index = 0

    def _four_ball_plus_backup(self, hardware, inputs):
        """Shoot, collect the stack, back away and shoot from full field."""
        match self.index:
            case 0:
                self.commands.speed_choice = ShotSpeed.FULL_FIELD
                self.index += 1
            case 1:
                self.wait(6500)
            case 2:
                self.commands.speed_choice = ShotSpeed.OFF
                self._turn(inputs, -8)
            case 3:
                self.commands.collect_state = CollectState.SUCK
                self._drive(hardware, inputs, 8, 22, 39)
            case 4:
                self._drive(hardware, inputs, 10, 21, -37)
            case 5:
                self._turn(inputs, 9)
            case 6:
                self.commands.speed_choice = ShotSpeed.FULL_FIELD
                self.commands.brake_request = True
            case _:
                self.index = 0