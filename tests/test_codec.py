"""Tests for izone - the wire codec."""

from __future__ import annotations

import pytest

from izone import exceptions as exc
from izone.schemas import (
    ScheduleTime,
    bool_to_int,
    days_from_wire,
    days_to_wire,
    decode_enum,
    display,
    int_to_bool,
    parse_celsius,
    render_enum,
)
from izone.schemas.const import FanSpeed, SystemMode, Weekday, ZoneMode


def test_bool_codec() -> None:
    assert int_to_bool(0) is False
    assert int_to_bool(1) is True

    assert bool_to_int(True) == 1
    assert bool_to_int(False) == 0


@pytest.mark.parametrize("value", [2, -1, "1", None, 1.0])
def test_bool_codec_rejects(value: object) -> None:
    with pytest.raises(exc.CodecError):
        int_to_bool(value)


@pytest.mark.parametrize(
    ("raw", "text"),
    [
        (0, "0.0"),
        (2150, "21.5"),
        (2200, "22.0"),
        (2155, "21.55"),
        (1501, "15.01"),
        (3000, "30.0"),
    ],
)
def test_display(raw: int, text: str) -> None:
    assert display(raw) == text


def test_temperature_round_trip() -> None:
    """Check displaying then parsing a temperature returns the same hundredths."""

    for raw in range(0, 6001):
        assert parse_celsius(display(raw)) == raw


@pytest.mark.parametrize(
    ("text", "raw"), [("22.5", 2250), ("15", 1500), (21.55, 2155), (" 30.0 ", 3000)]
)
def test_parse_celsius(text: str | float, raw: int) -> None:
    assert parse_celsius(text) == raw


@pytest.mark.parametrize("text", ["warm", "", "nan", "inf", "1e307", "-1e307"])
def test_parse_celsius_rejects(text: str) -> None:
    with pytest.raises(exc.InputValidationError):
        parse_celsius(text)


def test_enums() -> None:
    assert decode_enum(SystemMode, 1) is SystemMode.COOL
    assert decode_enum(ZoneMode, 9) == 9  # unknown codes are kept

    assert render_enum(SystemMode.COOL) == "Cool"
    assert render_enum(FanSpeed.NON_GAS_HEAT) == "NonGasHeat"
    assert render_enum(9) == "Unknown(9)"

    with pytest.raises(exc.CodecError):
        decode_enum(SystemMode, True)
    with pytest.raises(exc.CodecError):
        decode_enum(SystemMode, "1")


def test_days() -> None:
    assert days_from_wire({"M": 1}) == {Weekday.MONDAY}
    assert days_from_wire({}) == frozenset()
    assert days_from_wire(None) == frozenset()

    assert days_to_wire({Weekday.FRIDAY, Weekday.MONDAY}) == {
        "M": 1,
        "Tu": 0,
        "W": 0,
        "Th": 0,
        "F": 1,
        "Sa": 0,
        "Su": 0,
    }
    assert list(days_to_wire([])) == ["M", "Tu", "W", "Th", "F", "Sa", "Su"]

    with pytest.raises(exc.CodecError):
        days_from_wire({"M": 2})


def test_schedule_time() -> None:
    assert str(ScheduleTime(6, 5)) == "06:05"
    assert ScheduleTime(0, 0).is_set

    assert str(ScheduleTime(31, 63)) == "N/A"
    assert str(ScheduleTime(255, 255)) == "N/A"
    assert str(ScheduleTime(None, 30)) == "N/A"
    assert not ScheduleTime(31, 63).is_set
