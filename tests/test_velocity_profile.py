from shooterbot.velocity_profile import VelocityProfile, VelocityState


def _run_until_cruise(profile, accel, target, ticks=500):
    for _ in range(ticks):
        profile.update(accel, target)
        if profile.state is VelocityState.CRUISE:
            break


def test_initial_state():
    profile = VelocityProfile()
    assert profile.state is VelocityState.ACCEL
    assert profile.velocity == 0


def test_first_step_adds_accel():
    profile = VelocityProfile()
    profile.update(35, 1985)
    assert profile.velocity == 35
    assert profile.state is VelocityState.ACCEL


def test_ramp_up_reaches_cruise():
    profile = VelocityProfile()
    _run_until_cruise(profile, 35, 1985)
    assert profile.state is VelocityState.CRUISE
    assert 1985 <= profile.velocity < 1985 + 2 * 35


def test_cruise_holds_velocity():
    profile = VelocityProfile()
    _run_until_cruise(profile, 35, 1985)
    held = profile.velocity
    for _ in range(10):
        profile.update(35, 1985)
    assert profile.state is VelocityState.CRUISE
    assert profile.velocity == held


def test_ramp_down_to_lower_target():
    profile = VelocityProfile()
    _run_until_cruise(profile, 35, 1985)
    start = profile.velocity
    profile.update(35, 1510)
    assert profile.state is VelocityState.NACCEL
    assert profile.velocity == start - 35
    _run_until_cruise(profile, 35, 1510)
    assert profile.state is VelocityState.CRUISE
    assert 1510 - 2 * 35 < profile.velocity <= 1510


def test_zero_target_rests():
    profile = VelocityProfile()
    _run_until_cruise(profile, 35, 1570)
    profile.update(35, 0)
    assert profile.state is VelocityState.REST
    assert profile.velocity == 0
    assert profile.last_state is VelocityState.REST