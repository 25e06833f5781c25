# shooterbot

Control logic for a small competition robot that collects balls, indexes
them up a conveyor and fires them from a two-sided flywheel shooter. The
package holds everything that runs once per 25 ms control loop: reading
sensors, driver controls, closed-loop control, the intake and shooter state
machines, autonomous routines and writing motor outputs.

All hardware access goes through a small `Hardware` interface
(`read(sensor)` and `write(actuator, value)`), so the whole robot can be
driven in plain Python against `SimulatedHardware`.

## Modules

- `shooterbot.utils` – motor helpers: `limit_motor` clamps a command to
  the motor range of -127..127, `ramp_pwm` moves a command toward a target
  by at most a fixed step per loop, and `falling_edge` detects a signal
  going from true to false.
- `shooterbot.motion_profile` – `MotionProfile`, a trapezoidal position
  profile (accelerate, cruise, decelerate, rest) with its `MotionState`.
- `shooterbot.velocity_profile` – `VelocityProfile`, a ramp toward a target
  flywheel speed, with its `VelocityState`.
- `shooterbot.pid` – `PositionController` (PID plus velocity feed-forward,
  tuned through `Gains`) and `VelocityController` for the flywheels, whose
  feedback only acts while the speed profile is cruising.
- `shooterbot.hardware` – the `Sensor` and `Actuator` names, the
  `Hardware` interface and `SimulatedHardware`, the alliance and routine
  selector switches (`pick_alliance`, `pick_routine`, which return `None`
  when the potentiometer sits exactly at its midpoint), and the
  `InputProcessor` that turns raw readings into `Inputs` (drive distance,
  heading, limit switches and flywheel speeds in rpm).
- `shooterbot.drive` – `ArcadeDrive` for the driver, the autonomous moves
  `DriveStraight`, `ProfiledTurn` and `SimpleTurn` (each returning a
  `DriveOutput` whose `done` flag is set on arrival), and `brake_value`.
- `shooterbot.shooter` – `Shooter` with its `ShotSpeed` presets: off,
  short shot, half field, full field and the autonomous shot. It ramps the
  flywheels toward the preset's rpm and reports `gun_on` and
  `gun_at_speed`.
- `shooterbot.intake` – the collector (`collector_power`, `CollectState`)
  and the `Conveyor` state machine that indexes balls up to the top switch
  and feeds the shooter through its `FireState` sequence while the
  flywheels are at speed.
- `shooterbot.auton` – `Autonomous`, which runs the routine picked by the
  alliance and routine switches step by step, keeps the 15 second
  autonomous clock, and exposes what the routine asks for as
  `AutonCommands`.
- `shooterbot.robot` – `Robot`, which ties it all together for the
  pre-autonomous, autonomous and user-control phases, fed by a
  `Controller` snapshot each loop.

## Example

```python
from shooterbot.utils import limit_motor, ramp_pwm, falling_edge

limit_motor(200)           # 127
limit_motor(-300)          # -127
ramp_pwm(127, 0, 25)       # 25: one step toward the target
ramp_pwm(10, 0, 25)        # 10: close enough to jump straight there
falling_edge(False, True)  # True
```

A full loop is run through `Robot`:

```python
from shooterbot.hardware import Actuator, Sensor, SimulatedHardware
from shooterbot.robot import Controller, Robot

hardware = SimulatedHardware()
hardware.write(Sensor.COLOR_SWITCH, 3000)   # red alliance
hardware.write(Sensor.AUTON_SWITCH, 1000)   # four-ball routine

robot = Robot(hardware)
robot.pre_auton()
robot.start_autonomous()
for _ in range(10):
    robot.autonomous_step(Controller())

robot.start_usercontrol()
robot.usercontrol_step(Controller(ch3=100, btn8l=True))
hardware.outputs[Actuator.DRIVE_RIGHT]
```

Call `pre_auton()` once, then `start_autonomous()` followed by
`autonomous_step(controller)` every loop, or `start_usercontrol()`
followed by `usercontrol_step(controller)`. Each step finishes by writing
every motor, the shot deflector and the brakes through `write_outputs()`.

## What the package does not do

- It has no connection to real robot hardware. `SimulatedHardware` is the
  only `Hardware` implementation; to run on a robot, subclass `Hardware`
  and implement `read` and `write` for your controller.
- It does not run a timed loop or switch competition modes by itself. The
  caller decides which phase is active and calls the step method once per
  25 ms loop.
- It has no command-line program.

## Running the tests

The tests use pytest and are listed under the `test` extra:

```
pip install -e .[test]
pytest
```