"""Small helpers shared by the control loops."""

MOTOR_MAX = 127
MOTOR_MIN = -127

THROTTLE_STEP = 25
WHEEL_STEP = 30


def limit_motor(value):
    """Clamp a motor command to the range the motor controllers accept."""
    return max(MOTOR_MIN, min(MOTOR_MAX, value))


def ramp_pwm(target, current, step):
    """Move ``current`` towards ``target`` by at most ``step`` and clamp the result."""
    if target >= current + step:
        current = current + step
    elif target <= current - step:
        current = current - step
    else:
        current = target
    return limit_motor(current)


def falling_edge(signal, last_signal):
    """Return True when a signal has just gone from high to low."""
    return bool(last_signal) and not signal