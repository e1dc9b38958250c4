"""Fan speed model driven by the sensor readings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .reading import Reading, SensorLimits


def smooth_damp(
    current: float,
    target: float,
    velocity: float,
    smooth_time: float,
    dt: float,
    max_speed: float = math.inf,
) -> Tuple[float, float]:
    """Move ``current`` towards ``target`` with a critically damped spring.

    Uses the polynomial approximation of ``exp(-omega * dt)`` from Game
    Programming Gems 4 (ch. 1.10). The result never passes the target.

    Args:
        current: Current value
        target: Value to approach
        velocity: Rate of change carried over from the previous call
        smooth_time: Approximate time to reach the target (seconds)
        dt: Elapsed time since the previous call (seconds)
        max_speed: Optional cap on the rate of change

    Returns:
        Tuple (new_value, new_velocity)
    """
    if dt <= 0:
        return current, velocity

    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time
    x = omega * dt
    decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

    original_target = target
    change = current - target
    max_change = max_speed * smooth_time
    change = max(-max_change, min(change, max_change))
    target = current - change

    temp = (velocity + omega * change) * dt
    velocity = (velocity - omega * temp) * decay
    output = target + (change + temp) * decay

    # Snap to the target instead of overshooting it
    if (original_target - current > 0.0) == (output > original_target):
        output = original_target
        velocity = 0.0

    return output, velocity


@dataclass
class FanState:
    """Animated fan state, updated once per frame."""
    current_speed: float = 0.0
    target_speed: float = 0.0
    velocity: float = 0.0
    angle: float = 0.0  # degrees, [0, 360)


class FanAnimator:
    """Maps readings to a smoothed fan speed and a rotation angle.

    All three sensors contribute equally: the target speed is the mean of
    the normalized readings times ``max_speed``.
    """

    DEFAULT_MAX_SPEED = 800.0
    DEFAULT_SMOOTH_TIME = 0.2
    DEGREES_PER_UNIT_SPEED = 6.0  # 6 degrees per second per RPM

    def __init__(
        self,
        limits: SensorLimits,
        max_speed: float = DEFAULT_MAX_SPEED,
        smooth_time: float = DEFAULT_SMOOTH_TIME,
        degrees_per_unit_speed: float = DEGREES_PER_UNIT_SPEED,
    ):
        self.limits = limits
        self.max_speed = max_speed
        self.smooth_time = smooth_time
        self.degrees_per_unit_speed = degrees_per_unit_speed
        self.state = FanState()

    def target_for(self, reading: Reading) -> float:
        """Target speed for a reading, in [0, max_speed]."""
        average_factor = float(reading.factors(self.limits).mean())
        return average_factor * self.max_speed

    def update(self, reading: Reading, dt: float) -> FanState:
        """Advance speed and angle by ``dt`` seconds."""
        state = self.state
        state.target_speed = self.target_for(reading)
        state.current_speed, state.velocity = smooth_damp(
            state.current_speed,
            state.target_speed,
            state.velocity,
            self.smooth_time,
            dt,
        )
        if dt > 0:
            step = state.current_speed * self.degrees_per_unit_speed * dt
            state.angle = (state.angle + step) % 360.0
        return state
