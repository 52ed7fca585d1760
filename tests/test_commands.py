"""Tests for izone - the commands (their validation, and their JSON)."""

from __future__ import annotations

import pytest

from izone import commands as cmd, exceptions as exc
from izone.schemas.const import FanSpeed, SystemMode, Weekday, ZoneMode


@pytest.mark.parametrize("value", [1500, 2250, 3000])
def test_setpoint_in_range(value: int) -> None:
    assert cmd.SysSetpoint(value).as_json() == {"SysSetpoint": value}


@pytest.mark.parametrize("value", [1499, 3001, -1])
def test_setpoint_out_of_range(value: int) -> None:
    with pytest.raises(exc.InputValidationError):
        cmd.SysSetpoint(value)


def test_value_is_not_bool() -> None:
    with pytest.raises(exc.InputValidationError):
        cmd.SysSleepTimer(True)  # type: ignore[arg-type]


def test_system_commands() -> None:
    assert cmd.SysOn(True).as_json() == {"SysOn": 1}
    assert cmd.SysOn(False).as_json() == {"SysOn": 0}
    assert cmd.SysMode(SystemMode.HEAT).as_json() == {"SysMode": 2}
    assert cmd.SysFan(FanSpeed.AUTO).as_json() == {"SysFan": 4}
    assert cmd.ResetWarning("filter").as_json() == {"ResetWarning": "filter"}
    assert cmd.FilterWarn(12).as_json() == {"FilterWarn": 12}

    with pytest.raises(exc.InputValidationError):
        cmd.SysMode(42)  # type: ignore[arg-type]
    with pytest.raises(exc.InputValidationError):
        cmd.FilterWarn(4)
    with pytest.raises(exc.InputValidationError):
        cmd.StaticP(5)


@pytest.mark.parametrize(
    ("command", "valid", "invalid"),
    [
        (cmd.CoolbreezeFanSpeed, (1, 100), (0, 101)),
        (cmd.CoolbreezeRhSetpoint, (10, 90), (9, 91)),
        (cmd.CoolbreezePrewTime, (1, 60), (0, 61)),
        (cmd.CoolbreezePostwT, (5, 30), (4, 31)),
        (cmd.CoolbreezeDrCycPer, (1, 50), (0, 51)),
        (cmd.CoolbreezeAutoFanMaxTime, (0, 60), (-1, 61)),
        (cmd.CoolbreezeCalibTemp, (-50, 50), (-51, 51)),
        (cmd.CoolbreezeDeadTemp, (100, 500), (99, 501)),
        (cmd.VentilationRfSetpoint, (5, 95), (4, 96)),
        (cmd.VentilationVocsSetpoint, (50, 2500), (49, 2501)),
        (cmd.VentilationEco2Setpoint, (500, 1500), (499, 1501)),
        (cmd.VentilationFanStageDelay, (3, 240), (2, 241)),
        (cmd.AutoModeDeadB, (75, 500), (74, 501)),
    ],
)
def test_ranges(
    command: type[cmd.Command], valid: tuple[int, int], invalid: tuple[int, int]
) -> None:
    for value in valid:
        command(value)  # type: ignore[call-arg]

    for value in invalid:
        with pytest.raises(exc.InputValidationError):
            command(value)  # type: ignore[call-arg]


def test_drain_cycle_period_is_sent_as_minutes() -> None:
    assert cmd.CoolbreezeDrCycPer(24).as_json() == {"CoolbreezeDrCycPer": 1440}


def test_zone_commands() -> None:
    assert cmd.ZoneStatus(3, ZoneMode.OPEN).as_json() == {
        "ZoneStatus": {"Index": 3, "Mode": 1}
    }
    assert cmd.ZoneSetpoint(0, 2250).as_json() == {
        "ZoneSetpoint": {"Index": 0, "Setpoint": 2250}
    }
    assert cmd.ZoneAirflow(1, max_air=80).as_json() == {
        "ZoneAirflow": {"Index": 1, "MaxAir": 80}
    }
    assert cmd.ZoneAirflow(1, min_air=5).as_json() == {
        "ZoneAirflow": {"Index": 1, "MinAir": 5}
    }
    assert cmd.ZoneName(2, "Lounge").as_json() == {
        "ZoneName": {"Index": 2, "Name": "Lounge"}
    }

    with pytest.raises(exc.InputValidationError):
        cmd.ZoneAirflow(1)  # neither
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneAirflow(1, max_air=80, min_air=5)  # both
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneAirflow(1, max_air=101)
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneName(2, "A very long zone name")
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneName(2, "")
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneStatus(256, ZoneMode.OPEN)


def test_schedule_index() -> None:
    assert cmd.SchedEnable(7, True).as_json() == {
        "SchedEnable": {"Index": 7, "Enabled": 1}
    }

    with pytest.raises(exc.InputValidationError):
        cmd.SchedEnable(8, True)
    with pytest.raises(exc.InputValidationError):
        cmd.SchedName(-1, "Evenings")


def test_schedule_settings() -> None:
    command = cmd.SchedSettings(1, (6, 30), (8, 0), frozenset({Weekday.SATURDAY}))

    assert command.as_json() == {
        "SchedSettings": {
            "Index": 1,
            "StartH": 6,
            "StartM": 30,
            "StopH": 8,
            "StopM": 0,
            "DaysEnabled": {
                "M": 0,
                "Tu": 0,
                "W": 0,
                "Th": 0,
                "F": 0,
                "Sa": 1,
                "Su": 0,
            },
        }
    }


def test_schedule_settings_unset_times() -> None:
    payload = cmd.SchedSettings(1, None, None).as_json()["SchedSettings"]

    assert (payload["StartH"], payload["StartM"]) == (31, 63)
    assert (payload["StopH"], payload["StopM"]) == (31, 63)
    assert set(payload["DaysEnabled"].values()) == {0}

    with pytest.raises(exc.InputValidationError):
        cmd.SchedSettings(1, (24, 0), None)
    with pytest.raises(exc.InputValidationError):
        cmd.SchedSettings(1, None, (7, 60))


def test_schedule_zones() -> None:
    zones = (
        cmd.ZoneOverrideSetting(0, ZoneMode.AUTO, 2250),
        cmd.ZoneOverrideSetting(4, ZoneMode.CLOSE, 2000),
    )

    assert cmd.SchedZones(3, zones).as_json() == {
        "SchedZones": {
            "Index": 3,
            "Zones": [
                {"Index": 0, "Mode": 3, "Setpoint": 2250},
                {"Index": 4, "Mode": 2, "Setpoint": 2000},
            ],
        }
    }

    with pytest.raises(exc.InputValidationError):
        cmd.SchedZones(3, ())
    with pytest.raises(exc.InputValidationError):
        cmd.ZoneOverrideSetting(0, ZoneMode.AUTO, 3100)


def test_schedule_mode_fan() -> None:
    assert cmd.SchedAcMode(0, SystemMode.DRY).as_json() == {
        "SchedAcMode": {"Index": 0, "Mode": 4}
    }
    assert cmd.SchedAcFan(0, FanSpeed.HIGH).as_json() == {
        "SchedAcFan": {"Index": 0, "Fan": 3}
    }
