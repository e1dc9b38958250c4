import numpy as np

from sensorfan.ui.widgets.trend_buffers import TrendBuffers


def test_empty():
    buffers = TrendBuffers()
    times, temperature, humidity, gas, fan = buffers.get_arrays()

    assert buffers.is_empty
    assert len(times) == 0
    assert len(fan) == 0


def test_values_are_stored_as_percentages():
    buffers = TrendBuffers()
    buffers.append(1.0, 0.5, 0.25, 1.0, 0.1)

    _, temperature, humidity, gas, fan = buffers.get_arrays()

    assert temperature[0] == 50.0
    assert humidity[0] == 25.0
    assert gas[0] == 100.0
    assert np.isclose(fan[0], 10.0)


def test_times_are_relative_to_newest():
    buffers = TrendBuffers()
    for t in (10.0, 10.5, 11.0):
        buffers.append(t, 0.0, 0.0, 0.0, 0.0)

    times = buffers.get_arrays()[0]

    np.testing.assert_allclose(times, [-1.0, -0.5, 0.0])


def test_non_increasing_time_is_ignored():
    buffers = TrendBuffers()
    buffers.append(2.0, 0.1, 0.1, 0.1, 0.1)
    buffers.append(2.0, 0.9, 0.9, 0.9, 0.9)
    buffers.append(1.0, 0.9, 0.9, 0.9, 0.9)

    assert len(buffers) == 1


def test_capacity_drops_oldest():
    buffers = TrendBuffers(max_points=3)
    for i in range(5):
        buffers.append(float(i), i / 10, 0.0, 0.0, 0.0)

    _, temperature, *_ = buffers.get_arrays()

    assert len(buffers) == 3
    np.testing.assert_allclose(temperature, [20.0, 30.0, 40.0])


def test_shrinking_capacity_keeps_newest():
    buffers = TrendBuffers(max_points=10)
    for i in range(6):
        buffers.append(float(i), 0.0, 0.0, 0.0, i / 10)

    buffers.max_points = 2

    _, *_, fan = buffers.get_arrays()
    assert buffers.max_points == 2
    np.testing.assert_allclose(fan, [40.0, 50.0])


def test_clear():
    buffers = TrendBuffers()
    buffers.append(1.0, 0.5, 0.5, 0.5, 0.5)
    buffers.get_arrays()

    buffers.clear()

    assert buffers.is_empty
    assert len(buffers.get_arrays()[0]) == 0
