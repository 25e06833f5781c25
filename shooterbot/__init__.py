"""Control logic for a ball-shooting competition robot, run against a hardware interface."""

__version__ = "0.1.0"