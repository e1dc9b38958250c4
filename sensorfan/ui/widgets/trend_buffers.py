"""Rolling buffers for the live trend plot."""

from __future__ import annotations

from collections import deque
from typing import Deque, Tuple

import numpy as np


class TrendBuffers:
    """Fixed-capacity history of normalized values.

    Only the display keeps history; the monitor itself holds just the
    latest reading. Values are stored as percentages of their range so all
    series share one axis.
    """

    SERIES = ('temperature', 'humidity', 'gas', 'fan')

    def __init__(self, max_points: int = 600):
        self._max_points = max_points
        self._times: Deque[float] = deque(maxlen=max_points)
        self._series = {name: deque(maxlen=max_points) for name in self.SERIES}
        self._cache_valid = False
        self._np_cache: Tuple[np.ndarray, ...] = ()

    def append(self, t: float, temperature: float, humidity: float, gas: float, fan: float) -> None:
        """Append one sample of [0, 1] fractions taken at time ``t``."""
        if self._times and t <= self._times[-1]:
            return
        self._times.append(t)
        for name, value in zip(self.SERIES, (temperature, humidity, gas, fan)):
            self._series[name].append(100.0 * value)
        self._cache_valid = False

    def clear(self) -> None:
        self._times.clear()
        for values in self._series.values():
            values.clear()
        self._cache_valid = False

    @property
    def is_empty(self) -> bool:
        return not self._times

    def __len__(self) -> int:
        return len(self._times)

    @property
    def max_points(self) -> int:
        return self._max_points

    @max_points.setter
    def max_points(self, value: int) -> None:
        if value == self._max_points:
            return
        self._max_points = value
        self._times = deque(self._times, maxlen=value)
        self._series = {name: deque(v, maxlen=value) for name, v in self._series.items()}
        self._cache_valid = False

    def get_arrays(self) -> Tuple[np.ndarray, ...]:
        """(times relative to the newest sample, temperature, humidity, gas, fan)."""
        if not self._cache_valid:
            times = np.array(self._times, dtype=np.float64)
            if len(times):
                times = times - times[-1]
            self._np_cache = (times,) + tuple(
                np.array(self._series[name], dtype=np.float64) for name in self.SERIES
            )
            self._cache_valid = True
        return self._np_cache
