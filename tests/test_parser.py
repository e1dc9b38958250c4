import pytest

from sensorfan.core import PartialReading, Reading, SensorLimits
from sensorfan.core.errors import (
    FieldParseFailure,
    MalformedLine,
    UnknownFieldPrefix,
    WrongFieldCount,
)
from sensorfan.serial import SensorLineParser


@pytest.fixture
def parser():
    return SensorLineParser(SensorLimits(max_temperature=50.0, max_gas=1023.0))


def test_parses_device_line(parser):
    result = parser.parse("H:90.0,T:27.9,G:169")

    assert result.ok
    assert result.skipped == []
    assert result.reading == PartialReading(temperature=27.9, humidity=90.0, gas=169.0)


@pytest.mark.parametrize("h, t, g", [
    (0.0, 0.0, 0.0),
    (45.5, 21.3, 512.0),
    (100.0, 50.0, 1023.0),
])
def test_values_in_range_are_kept(parser, h, t, g):
    result = parser.parse(f"H:{h},T:{t},G:{g}")

    assert result.reading.humidity == pytest.approx(h)
    assert result.reading.temperature == pytest.approx(t)
    assert result.reading.gas == pytest.approx(g)


def test_field_order_does_not_matter(parser):
    result = parser.parse("G:300,T:20.5,H:60.0")

    assert result.reading == PartialReading(temperature=20.5, humidity=60.0, gas=300.0)


def test_humidity_is_clamped_to_100(parser):
    result = parser.parse("H:150.0,T:10,G:5")

    assert result.reading.humidity == 100.0
    assert result.reading.temperature == 10.0
    assert result.reading.gas == 5.0


def test_temperature_and_gas_are_clamped_to_limits(parser):
    result = parser.parse("H:50.0,T:-12.5,G:5000")

    assert result.reading.temperature == 0.0
    assert result.reading.gas == 1023.0


def test_configured_limits_apply():
    parser = SensorLineParser(SensorLimits(max_temperature=30.0, max_gas=500.0))
    result = parser.parse("H:50.0,T:45.0,G:800")

    assert result.reading.temperature == 30.0
    assert result.reading.gas == 500.0


def test_surrounding_whitespace_is_ignored(parser):
    result = parser.parse("  H:50.0 , T: 20.0 ,G:5 \r\n")

    assert result.reading == PartialReading(temperature=20.0, humidity=50.0, gas=5.0)


@pytest.mark.parametrize("line", ["", "   ", "\r\n", "H:1,T:,G:"])
def test_empty_or_short_lines_are_malformed(parser, line):
    result = parser.parse(line)

    assert isinstance(result.error, MalformedLine)
    assert result.reading.is_empty


def test_none_is_treated_as_empty(parser):
    assert isinstance(parser.parse(None).error, MalformedLine)


def test_minimum_length_is_configurable():
    assert SensorLineParser().parse("H:1,T:2,G:3").ok

    strict = SensorLineParser(min_line_length=25)
    result = strict.parse("H:90.0,T:27.9,G:169")

    assert isinstance(result.error, MalformedLine)
    assert result.error.min_length == 25


@pytest.mark.parametrize("line, count", [
    ("H:50,T:10", 2),
    ("H:50.0,T:10.0", 2),
    ("H:1,T:2", 2),
    ("H:50.0,T:10.0,G:5,X:1", 4),
    ("H:50,5,T:10,5,G:5", 5),  # decimal comma is not accepted
])
def test_wrong_field_count_rejects_whole_line(parser, line, count):
    result = parser.parse(line)

    assert isinstance(result.error, WrongFieldCount)
    assert result.error.count == count
    assert result.reading.is_empty


def test_unknown_prefix_is_skipped_and_rest_applies(parser):
    result = parser.parse("X:1.0,T:20.0,G:5")

    assert result.ok
    assert result.reading == PartialReading(temperature=20.0, gas=5.0)
    assert len(result.skipped) == 1
    assert isinstance(result.skipped[0], UnknownFieldPrefix)
    assert result.skipped[0].field == "X:1.0"


@pytest.mark.parametrize("bad", ["-", "abc", "nan", "inf", "1_000", "", "\u0665\u0660.0", "1\ufffd0.0"])
def test_unparsable_value_is_skipped(parser, bad):
    result = parser.parse(f"H:{bad},T:20.0,G:5.00")

    assert result.ok
    assert result.reading.humidity is None
    assert result.reading.temperature == 20.0
    assert isinstance(result.skipped[0], FieldParseFailure)


def test_gas_accepts_integers_and_exponents(parser):
    assert parser.parse("H:1.0,T:1.0,G:169").reading.gas == 169.0
    assert parser.parse("H:1.0,T:1.0,G:1e2").reading.gas == 100.0


def test_failed_field_keeps_previous_value(parser):
    reading = Reading()
    reading.merge(parser.parse("H:50.0,T:10,G:5").reading)
    reading.merge(parser.parse("H:-,T:20,G:5").reading)

    assert reading.humidity == 50.0
    assert reading.temperature == 20.0
    assert reading.gas == 5.0


def test_rejected_line_leaves_reading_unchanged(parser):
    reading = Reading(temperature=10.0, humidity=50.0, gas=5.0)
    for line in ("H:50,T:10", "H:99.0,T:49.0", "garbage line without commas"):
        result = parser.parse(line)
        assert not result.ok
        reading.merge(result.reading)

    assert reading == Reading(temperature=10.0, humidity=50.0, gas=5.0)


def test_parser_never_raises_on_noise(parser):
    for line in ("\x00\x01\x02,,,", ",,", "H:,T:,G:", "::::::::::,", "H:1e400,T:1,G:1"):
        parser.parse(line)
