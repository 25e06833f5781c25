"""Top-level robot: wires inputs, subsystems and outputs for each competition mode."""

from dataclasses import dataclass

from shooterbot.auton import AutonCommands, Autonomous
from shooterbot.drive import ArcadeDrive, brake_value
from shooterbot.hardware import (
    LOOP_TIME,
    Actuator,
    InputProcessor,
    Sensor,
    pick_alliance,
    pick_routine,
)
from shooterbot.intake import Conveyor, collector_power
from shooterbot.shooter import Shooter


@dataclass
class Controller:
    """One sample of the driver's joystick axes and buttons."""

    ch1: int = 0
    ch3: int = 0
    btn5u: bool = False
    btn5d: bool = False
    btn6u: bool = False
    btn6d: bool = False
    btn8u: bool = False
    btn8r: bool = False
    btn8d: bool = False
    btn8l: bool = False


class Robot:
    """Runs the robot's control loop, one tick per call."""

    def __init__(self, hardware):
        self.hardware = hardware
        self.input_processor = InputProcessor(hardware)
        self.drive = ArcadeDrive(hardware=hardware)
        self.shooter = Shooter()
        self.conveyor = Conveyor()
        self.autonomous = Autonomous()
        self.alliance = None
        self.routine = None
        self.in_auton = False
        self.collect_value = 0
        self.right_output = 0
        self.left_output = 0
        self.brake_output = 0

    @property
    def inputs(self):
        return self.input_processor.inputs

    def _init_subsystems(self):
        self.drive.reset()
        self.conveyor.reset()
        self.collect_value = 0
        self.shooter.reset(self.hardware)

    def _pick_selection(self):
        self.alliance = pick_alliance(self.hardware.read(Sensor.COLOR_SWITCH))
        self.routine = pick_routine(self.hardware.read(Sensor.AUTON_SWITCH))

    def pre_auton(self):
        """Initialise every subsystem and read the routine selector switches."""
        self.in_auton = False
        self._init_subsystems()
        self._pick_selection()

    def start_autonomous(self):
        """Enter the autonomous period."""
        self.in_auton = True
        self._pick_selection()
        self.autonomous.reset(self.alliance, self.routine)
        self.autonomous.commands = AutonCommands(
            speed_choice=self.shooter.speed_choice,
            brake_request=self.drive.brake_request,
            right=self.right_output,
            left=self.left_output,
        )

    def autonomous_step(self, controller):
        """Run one autonomous tick and write the outputs."""
        inputs = self.input_processor.update()
        self.autonomous.update_clock(LOOP_TIME)
        commands = self.autonomous.step(self.hardware, inputs)
        self.right_output = commands.right
        self.left_output = commands.left

        self.drive.brake_request = commands.brake_request
        self.brake_output = brake_value(commands.brake_request)
        self.shooter.speed_choice = commands.speed_choice
        self.shooter.update(inputs.right_gun_speed, inputs.left_gun_speed)
        self.collect_value = commands.collect_state.power
        self._run_conveyor(controller, commands.stop_intake)
        self.write_outputs()

    def start_usercontrol(self):
        """Enter the driver-controlled period."""
        self._init_subsystems()
        self.in_auton = False

    def usercontrol_step(self, controller):
        """Run one driver-control tick and write the outputs."""
        inputs = self.input_processor.update()
        drive = self.drive.update(controller.ch3, controller.ch1, controller.btn6u)
        self.right_output = drive.right
        self.left_output = drive.left
        self.collect_value = collector_power(controller.btn5u, controller.btn5d)
        self.shooter.choose(
            controller.btn8u, controller.btn8r, controller.btn8d, controller.btn8l
        )
        self.brake_output = brake_value(self.drive.brake_request)
        self.shooter.update(inputs.right_gun_speed, inputs.left_gun_speed)
        self._run_conveyor(controller, False)
        self.write_outputs()

    def _run_conveyor(self, controller, stop_intake):
        inputs = self.inputs
        self.conveyor.update(
            self.collect_value,
            controller.btn6d,
            inputs.at_bottom,
            inputs.at_middle,
            inputs.at_top,
            self.shooter.gun_on,
            self.shooter.gun_at_speed,
            self.in_auton,
            stop_intake,
        )

    def write_outputs(self):
        """Send every actuator its current command."""
        hw = self.hardware
        hw.write(Actuator.DRIVE_RIGHT, self.right_output)
        hw.write(Actuator.DRIVE_LEFT, self.left_output)
        hw.write(Actuator.COLLECTOR, self.collect_value)
        hw.write(Actuator.CONVEYOR, self.conveyor.value)
        hw.write(Actuator.SHOOTER_RIGHT, self.shooter.right_value)
        hw.write(Actuator.SHOOTER_LEFT, self.shooter.left_value)
        hw.write(Actuator.DEFLECTOR, self.shooter.deflect_value)
        hw.write(Actuator.BRAKES, self.brake_output)