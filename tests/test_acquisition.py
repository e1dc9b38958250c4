import logging

import pytest

from conftest import FakeSerial
from sensorfan.core import FallbackSource, Reading, SensorLimits
from sensorfan.core.errors import ReadError
from sensorfan.serial import AcquisitionLoop, PortManager, SensorLineParser, SerialPortHandler


@pytest.fixture
def loop_factory(make_ports):
    def _make(connected=True, interval=0.1):
        manager, factory = make_ports()
        if connected:
            manager.connect()
        loop = AcquisitionLoop(
            Reading(),
            SensorLineParser(SensorLimits(max_temperature=50.0, max_gas=1023.0)),
            manager,
            FallbackSource(),
            interval=interval,
        )
        return loop, factory
    return _make


def test_tick_waits_for_interval(loop_factory):
    loop, _ = loop_factory(connected=False)

    assert not loop.tick(0.04)
    assert not loop.tick(0.04)
    assert loop.tick(0.04)
    # elapsed time restarts from zero after a step
    assert not loop.tick(0.07)
    assert loop.tick(0.07)


def test_large_dt_runs_a_single_step(loop_factory):
    loop, factory = loop_factory()
    handler = factory.created[0]
    handler.lines.extend(["H:10.0,T:10.0,G:10", "H:20.0,T:20.0,G:20"])

    assert loop.tick(1.0)
    assert len(handler.lines) == 1
    assert loop.reading.humidity == 10.0


def test_step_reads_one_line(loop_factory):
    loop, factory = loop_factory()
    factory.created[0].lines.append("H:90.0,T:27.9,G:169")

    loop.step()

    assert loop.reading == Reading(temperature=27.9, humidity=90.0, gas=169.0)
    assert loop.last_line == "H:90.0,T:27.9,G:169"
    assert loop.last_result.ok


def test_no_data_leaves_reading_unchanged(loop_factory):
    loop, _ = loop_factory()
    loop.reading.temperature = 12.0

    assert loop.read_device() is None
    assert loop.reading.temperature == 12.0
    assert loop.last_line == ""


def test_read_error_is_logged_and_connection_kept(loop_factory, caplog):
    loop, factory = loop_factory()
    handler = factory.created[0]
    handler.lines.append("H:90.0,T:27.9,G:169")
    handler.read_error = ReadError("device disconnected")

    with caplog.at_level(logging.ERROR):
        assert loop.read_device() is None

    assert "device disconnected" in caplog.text
    assert loop.ports.is_connected

    handler.read_error = None
    loop.step()
    assert loop.reading.humidity == 90.0


def test_rejected_line_is_recorded_but_not_applied(loop_factory):
    loop, factory = loop_factory()
    factory.created[0].lines.append("H:50,T:10")

    loop.step()

    assert loop.last_line == "H:50,T:10"
    assert not loop.last_result.ok
    assert loop.reading == Reading()


def test_fallback_is_scaled_by_limits(loop_factory):
    loop, _ = loop_factory(connected=False)
    loop.fallback.set_fraction('temperature', 0.5)
    loop.fallback.set_fraction('humidity', 0.25)
    loop.fallback.set_fraction('gas', 1.0)

    loop.step()

    assert loop.reading.temperature == 25.0
    assert loop.reading.humidity == 25.0
    assert loop.reading.gas == 1023.0


def test_fallback_ignored_while_connected(loop_factory):
    loop, _ = loop_factory()
    loop.fallback.set_fraction('temperature', 1.0)

    loop.step()

    assert loop.reading.temperature == 0.0


def test_reset_clears_elapsed_time(loop_factory):
    loop, _ = loop_factory(connected=False)
    loop.tick(0.09)
    loop.reset()

    assert not loop.tick(0.09)


def test_corrupted_byte_keeps_previous_value():
    fake = FakeSerial([b"H:1\xff0.0,T:20.0,G:5\n"])
    ports = PortManager(
        port_lister=lambda: ["COM3"],
        handler_factory=lambda port, baud: SerialPortHandler(port, baud, serial_factory=lambda: fake),
    )
    ports.connect()
    loop = AcquisitionLoop(Reading(humidity=55.0), SensorLineParser(), ports, FallbackSource())

    loop.step()

    assert loop.reading == Reading(temperature=20.0, humidity=55.0, gas=5.0)
    assert len(loop.last_result.skipped) == 1
