import pytest

from sensorfan.core import FanAnimator, Reading, SensorLimits, smooth_damp

DT = 1.0 / 60.0


def run_filter(start, target, smooth_time, seconds, dt=DT):
    value, velocity = start, 0.0
    values = []
    for _ in range(int(round(seconds / dt))):
        value, velocity = smooth_damp(value, target, velocity, smooth_time, dt)
        values.append(value)
    return values


@pytest.mark.parametrize("smooth_time", [0.05, 0.2, 1.0])
def test_smooth_damp_converges_without_overshoot(smooth_time):
    values = run_filter(0.0, 800.0, smooth_time, seconds=5 * smooth_time)

    assert all(b >= a for a, b in zip(values, values[1:]))
    assert max(values) <= 800.0
    assert values[-1] == pytest.approx(800.0, rel=0.01)


def test_smooth_damp_falling_target():
    values = run_filter(600.0, 100.0, 0.2, seconds=1.0)

    assert all(b <= a for a, b in zip(values, values[1:]))
    assert min(values) >= 100.0
    assert values[-1] == pytest.approx(100.0, rel=0.01)


def test_smooth_damp_zero_dt_is_noop():
    assert smooth_damp(10.0, 50.0, 3.0, 0.2, 0.0) == (10.0, 3.0)


def test_smooth_damp_respects_max_speed():
    value, _ = smooth_damp(0.0, 1000.0, 0.0, 0.2, 0.1, max_speed=10.0)

    # the distance covered is bounded by max_speed * smooth_time
    assert 0.0 < value <= 10.0 * 0.2


def test_smooth_damp_at_target_stays():
    assert smooth_damp(5.0, 5.0, 0.0, 0.2, DT) == (5.0, 0.0)


@pytest.fixture
def limits():
    return SensorLimits(max_temperature=50.0, max_gas=1023.0)


def test_target_is_mean_of_normalized_readings(limits):
    animator = FanAnimator(limits, max_speed=800.0)

    assert animator.target_for(Reading(0.0, 0.0, 0.0)) == 0.0
    assert animator.target_for(Reading(50.0, 100.0, 1023.0)) == pytest.approx(800.0)
    assert animator.target_for(Reading(25.0, 100.0, 0.0)) == pytest.approx(400.0)


def test_target_saturates_above_limits(limits):
    animator = FanAnimator(limits, max_speed=800.0)

    assert animator.target_for(Reading(500.0, 100.0, 99999.0)) == pytest.approx(800.0)


def test_step_change_in_reading_ramps_speed(limits):
    animator = FanAnimator(limits, max_speed=800.0, smooth_time=0.2)
    state = animator.update(Reading(50.0, 100.0, 1023.0), DT)

    assert state.target_speed == pytest.approx(800.0)
    assert 0.0 < state.current_speed < 0.05 * 800.0


def test_speed_reaches_target(limits):
    animator = FanAnimator(limits, max_speed=800.0, smooth_time=0.2)
    reading = Reading(25.0, 100.0, 0.0)
    for _ in range(120):
        state = animator.update(reading, DT)

    assert state.current_speed == pytest.approx(400.0, rel=0.01)


def test_angle_advances_with_speed(limits):
    animator = FanAnimator(limits, max_speed=800.0, smooth_time=0.2)
    reading = Reading(25.0, 100.0, 0.0)
    for _ in range(600):
        animator.update(reading, DT)

    before = animator.state.angle
    speed = animator.state.current_speed
    after = animator.update(reading, 0.01).angle

    expected = (before + speed * 6.0 * 0.01) % 360.0
    assert after == pytest.approx(expected, abs=1e-3)


def test_angle_stays_in_range(limits):
    animator = FanAnimator(limits, max_speed=800.0)
    reading = Reading(50.0, 100.0, 1023.0)
    for _ in range(1000):
        angle = animator.update(reading, DT).angle
        assert 0.0 <= angle < 360.0


def test_idle_fan_does_not_rotate(limits):
    animator = FanAnimator(limits)
    for _ in range(10):
        animator.update(Reading(), DT)

    assert animator.state.angle == 0.0
    assert animator.state.current_speed == 0.0
