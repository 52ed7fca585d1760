"""Tests for izone - the query (status) schemas, and the entities built on them."""

from __future__ import annotations

import logging
from copy import deepcopy

import pytest

from izone import Schedule, System, Zone, exceptions as exc
from izone.schemas import (
    S2_SCHEDULES_V2,
    S2_SYSTEM_V2,
    S2_ZONES_V2,
    SCH_SCHEDULE_STATUS,
    SCH_SYSTEM_STATUS,
    SCH_ZONE_STATUS,
    unwrap_and_decode,
)
from izone.schemas.const import (
    CtrlSensor,
    FanSpeed,
    SystemMode,
    Weekday,
    ZoneMode,
    ZoneType,
)
from izone.schedule import ZoneOverride

from .const import (
    SCHEDULE_V2,
    SCHEDULE_V2_UNSET,
    SYSTEM_V2,
    SYSTEM_V2_MINIMAL,
    ZONE_V2,
)

_LOGGER = logging.getLogger(__name__)


def test_system_status() -> None:
    status = unwrap_and_decode(SCH_SYSTEM_STATUS, S2_SYSTEM_V2, deepcopy(SYSTEM_V2))
    system = System(status, _LOGGER)

    assert system.power is True
    assert system.mode is SystemMode.COOL
    assert system.fan is FanSpeed.MEDIUM
    assert system.temperature_display == "21.5"
    assert system.setpoint_display == "22.0"
    assert system.error == "OK"
    assert system.is_ok

    assert system.supply == 1655
    assert system.economy_lock is True
    assert (system.economy_min, system.economy_max) == (1800, 2600)
    assert system.filter_warning == 6
    assert system.airflow_lock is None  # absent in older firmware

    assert system.coolbreeze is not None
    assert system.coolbreeze.drain_cycle_period == 24  # sent as minutes
    assert system.coolbreeze.control_sensor is CtrlSensor.REMOTE
    assert system.coolbreeze.temp_calibration == -10
    assert system.coolbreeze.inverter is None
    assert system.ventilation is None


def test_system_status_minimal(caplog: pytest.LogCaptureFixture) -> None:
    status = unwrap_and_decode(
        SCH_SYSTEM_STATUS, S2_SYSTEM_V2, deepcopy(SYSTEM_V2_MINIMAL)
    )
    with caplog.at_level(logging.WARNING):
        system = System(status, _LOGGER)

    assert "Unknown system mode 9 (YMMV)" in caplog.text
    assert "Unknown fan speed" not in caplog.text

    assert system.power is False
    assert system.mode == 9  # an unknown mode is not an error
    assert system.temperature_display == "21.55"
    assert not system.is_ok
    assert system.supply is None
    assert system.coolbreeze is None


def test_zone_status() -> None:
    status = unwrap_and_decode(SCH_ZONE_STATUS, S2_ZONES_V2, deepcopy(ZONE_V2))
    zone = Zone(0, status, _LOGGER)

    assert zone.name == "Kitchen"
    assert zone.mode is ZoneMode.AUTO
    assert zone.zone_type is ZoneType.AUTO
    assert zone.temperature_display == "23.1"
    assert zone.setpoint_display == "22.5"
    assert zone.bypass is False
    assert zone.rf_signal == 74

    assert zone.low_battery
    assert zone.faults == ["low battery"]


def test_zone_status_unknown_mode(caplog: pytest.LogCaptureFixture) -> None:
    rsp = deepcopy(ZONE_V2)
    rsp[S2_ZONES_V2]["Mode"] = 9

    with caplog.at_level(logging.WARNING):
        zone = Zone(0, unwrap_and_decode(SCH_ZONE_STATUS, S2_ZONES_V2, rsp), _LOGGER)

    assert zone.mode == 9
    assert "Unknown zone mode 9 (YMMV)" in caplog.text
    assert "Unknown zone type" not in caplog.text


def test_zone_status_wired() -> None:
    """Check a wired sensor (no battery) is not reported as a low battery."""

    rsp = deepcopy(ZONE_V2)
    del rsp[S2_ZONES_V2]["RfSignal"]
    del rsp[S2_ZONES_V2]["BattVolt"]
    rsp[S2_ZONES_V2]["SensorFault"] = 2
    rsp[S2_ZONES_V2]["DmpFlt"] = 1

    zone = Zone(0, unwrap_and_decode(SCH_ZONE_STATUS, S2_ZONES_V2, rsp), _LOGGER)

    assert zone.battery_level is None
    assert not zone.low_battery
    assert zone.faults == ["sensor fault (2)", "damper fault"]


def test_schedule_status() -> None:
    status = unwrap_and_decode(
        SCH_SCHEDULE_STATUS, S2_SCHEDULES_V2, deepcopy(SCHEDULE_V2)
    )
    schedule = Schedule(2, status, _LOGGER)

    assert schedule.name == "Mornings"
    assert schedule.active is True
    assert schedule.mode is SystemMode.HEAT
    assert str(schedule.start) == "06:30"
    assert str(schedule.stop) == "08:00"
    assert schedule.days_in_order == (
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    )
    assert schedule.coolbreeze is None
    assert schedule.zones == [
        ZoneOverride(ZoneMode.AUTO, 2100),
        ZoneOverride(ZoneMode.CLOSE, 2200),
    ]


def test_schedule_status_unset() -> None:
    status = unwrap_and_decode(
        SCH_SCHEDULE_STATUS, S2_SCHEDULES_V2, deepcopy(SCHEDULE_V2_UNSET)
    )
    schedule = Schedule(5, status, _LOGGER)

    assert str(schedule.start) == "N/A"
    assert str(schedule.stop) == "N/A"
    assert schedule.days == {Weekday.MONDAY}
    assert schedule.mode is None
    assert schedule.zones is None


def test_missing_wrapper() -> None:
    with pytest.raises(exc.CodecError):
        unwrap_and_decode(SCH_SYSTEM_STATUS, S2_SYSTEM_V2, ZONE_V2)


@pytest.mark.parametrize(
    ("key", "value"), [("SysOn", 2), ("Temp", "21.5"), ("SysMode", None)]
)
def test_invalid_field(key: str, value: object) -> None:
    rsp = deepcopy(SYSTEM_V2)
    rsp[S2_SYSTEM_V2][key] = value

    with pytest.raises(exc.CodecError):
        unwrap_and_decode(SCH_SYSTEM_STATUS, S2_SYSTEM_V2, rsp)


def test_missing_field() -> None:
    rsp = deepcopy(SYSTEM_V2)
    del rsp[S2_SYSTEM_V2]["Setpoint"]

    with pytest.raises(exc.CodecError):
        unwrap_and_decode(SCH_SYSTEM_STATUS, S2_SYSTEM_V2, rsp)
