"""izone provides an async client for the iZone v2 local API.

Each command is a frozen object that is validated when it is created, so an invalid
value is rejected before any request is made. `Command.as_json()` returns the
single-key object that is POSTed to /iZoneCommandV2, e.g. {"SysOn": 1}.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from .exceptions import InputValidationError
from .schemas.codec import bool_to_int, days_to_wire
from .schemas.commands import (
    SCH_AUTO_MODE_DEADBAND,
    SCH_CB_AUTO_FAN_MAX_TIME,
    SCH_CB_DRAIN_CYCLE_HOURS,
    SCH_CB_FAN_SPEED,
    SCH_CB_POSTWASH_TIME,
    SCH_CB_PREWASH_TIME,
    SCH_CB_RH_SETPOINT,
    SCH_CB_TEMP_CALIBRATION,
    SCH_CB_TEMP_DEADBAND,
    SCH_FILTER_WARNING,
    SCH_HOUR,
    SCH_MINUTE,
    SCH_NAME,
    SCH_PERCENT,
    SCH_SCHEDULE_INDEX,
    SCH_SETPOINT,
    SCH_STATIC_PRESSURE,
    SCH_UINT,
    SCH_VENT_ECO2_SETPOINT,
    SCH_VENT_FAN_STAGE_DELAY,
    SCH_VENT_RH_SETPOINT,
    SCH_VENT_VOCS_SETPOINT,
    SCH_WARNING_KIND,
    SCH_ZONE_AREA,
    SCH_ZONE_CALIBRATION,
    SCH_ZONE_INDEX,
    SCH_ZONE_MODE,
    validate,
)
from .schemas.const import (
    S2_AREA,
    S2_BALANCE_MAX,
    S2_BALANCE_MIN,
    S2_BYPASS,
    S2_CALIBRATION,
    S2_DAYS_ENABLED,
    S2_ENABLED,
    S2_FAN,
    S2_INDEX,
    S2_MAX_AIR,
    S2_MIN_AIR,
    S2_MODE,
    S2_NAME,
    S2_SETPOINT,
    S2_START_H,
    S2_START_M,
    S2_STOP_H,
    S2_STOP_M,
    S2_ZONES,
    UNSET_TIME,
    CtrlSensor,
    FanSpeed,
    SystemMode,
    Weekday,
    ZoneMode,
)


@dataclass(frozen=True)
class Command(ABC):
    """The base class of all commands."""

    NAME: ClassVar[str]  # the device's name for the command

    def as_json(self) -> dict[str, Any]:
        """Return the JSON object that is POSTed to the command endpoint."""
        return {self.NAME: self._payload()}

    @abstractmethod
    def _payload(self) -> Any:
        """Return the value of the command (an int, str, or dict)."""


@dataclass(frozen=True)
class _FlagCommand(Command):
    """A command with an enable/disable value (sent as 0/1)."""

    enable: bool

    def _payload(self) -> int:
        return bool_to_int(self.enable)


@dataclass(frozen=True)
class _ValueCommand(Command):
    """A command with a single numeric value, validated against a range."""

    value: int

    _SCHEMA: ClassVar[Any] = SCH_UINT
    _FIELD: ClassVar[str] = "Value"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "value", validate(self._SCHEMA, self.value, self._FIELD)
        )

    def _payload(self) -> int:
        return self.value  # type: ignore[no-any-return]


@dataclass(frozen=True)
class _EnumCommand(Command):
    """A command with an enumerated value (sent as its integer code)."""

    value: IntEnum

    _ENUM: ClassVar[type[IntEnum]]

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "value", self._ENUM(self.value))
        except ValueError:
            raise InputValidationError(
                f"{self._ENUM.__name__} {self.value!r} is invalid "
                f"(valid values: {', '.join(m.name.lower() for m in self._ENUM)})"
            ) from None

    def _payload(self) -> int:
        return int(self.value)


def _check_index(index: int) -> int:
    return validate(SCH_ZONE_INDEX, index, "Zone index")  # type: ignore[no-any-return]


def _check_schedule(index: int) -> int:
    return validate(SCH_SCHEDULE_INDEX, index, "Schedule index")  # type: ignore[no-any-return]


#
# System commands...


class SysOn(_FlagCommand):
    NAME = "SysOn"


class SysMode(_EnumCommand):
    NAME = "SysMode"
    _ENUM = SystemMode


class SysFan(_EnumCommand):
    NAME = "SysFan"
    _ENUM = FanSpeed


class SysSetpoint(_ValueCommand):
    NAME = "SysSetpoint"
    _SCHEMA = SCH_SETPOINT
    _FIELD = "Setpoint"


class SysSleepTimer(_ValueCommand):
    NAME = "SysSleepTimer"
    _FIELD = "Sleep timer (minutes)"


class EconomyLock(_FlagCommand):
    NAME = "EconomyLock"


class EconomyMin(_ValueCommand):
    NAME = "EconomyMin"
    _SCHEMA = SCH_SETPOINT
    _FIELD = "Economy minimum setpoint"


class EconomyMax(_ValueCommand):
    NAME = "EconomyMax"
    _SCHEMA = SCH_SETPOINT
    _FIELD = "Economy maximum setpoint"


class FilterWarn(_ValueCommand):
    NAME = "FilterWarn"
    _SCHEMA = SCH_FILTER_WARNING
    _FIELD = "Filter warning (months)"


@dataclass(frozen=True)
class ResetWarning(Command):
    """Clear a warning shown on the controller (e.g. 'filter')."""

    NAME = "ResetWarning"

    kind: str

    def __post_init__(self) -> None:
        validate(SCH_WARNING_KIND, self.kind, "Warning")

    def _payload(self) -> str:
        return self.kind


class DamperTime(_ValueCommand):
    NAME = "DamperTime"
    _FIELD = "Damper time (seconds)"


class AutoModeDeadB(_ValueCommand):
    NAME = "AutoModeDeadB"
    _SCHEMA = SCH_AUTO_MODE_DEADBAND
    _FIELD = "Auto mode deadband"


class AirflowLock(_FlagCommand):
    NAME = "AirflowLock"


class AirflowMinLock(_FlagCommand):
    NAME = "AirflowMinLock"


class StaticP(_ValueCommand):
    NAME = "StaticP"
    _SCHEMA = SCH_STATIC_PRESSURE
    _FIELD = "Static pressure"


class OpenDampersWhenOff(_FlagCommand):
    NAME = "OpenDampersWhenOff"


class ScroogeMode(_FlagCommand):
    NAME = "ScroogeMode"


class ReverseDampers(_FlagCommand):
    NAME = "ReverseDampers"


class CnstCtrlAreaEn(_FlagCommand):
    NAME = "CnstCtrlAreaEn"


class CnstCtrlArea(_ValueCommand):
    NAME = "CnstCtrlArea"
    _SCHEMA = SCH_ZONE_AREA
    _FIELD = "Constant control area"


#
# Coolbreeze (evaporative cooler) commands...


class CoolbreezeFanSpeed(_ValueCommand):
    NAME = "CoolbreezeFanSpeed"
    _SCHEMA = SCH_CB_FAN_SPEED
    _FIELD = "Fan speed"


class CoolbreezeRhSetpoint(_ValueCommand):
    NAME = "CoolbreezeRhSetpoint"
    _SCHEMA = SCH_CB_RH_SETPOINT
    _FIELD = "Humidity setpoint"


class CoolbreezePrewEn(_FlagCommand):
    NAME = "CoolbreezePrewEn"


class CoolbreezePrewTime(_ValueCommand):
    NAME = "CoolbreezePrewTime"
    _SCHEMA = SCH_CB_PREWASH_TIME
    _FIELD = "Prewash time"


class CoolbreezeDrAfPrewEn(_FlagCommand):
    NAME = "CoolbreezeDrAfPrewEn"


class CoolbreezeDrCycEn(_FlagCommand):
    NAME = "CoolbreezeDrCycEn"


class CoolbreezeDrCycPer(_ValueCommand):
    """Set the drain cycle period: the value is in hours, it is sent in minutes."""

    NAME = "CoolbreezeDrCycPer"
    _SCHEMA = SCH_CB_DRAIN_CYCLE_HOURS
    _FIELD = "Drain cycle period"

    def _payload(self) -> int:
        return self.value * 60


class CoolbreezePostwEn(_FlagCommand):
    NAME = "CoolbreezePostwEn"


class CoolbreezePostwT(_ValueCommand):
    NAME = "CoolbreezePostwT"
    _SCHEMA = SCH_CB_POSTWASH_TIME
    _FIELD = "Postwash time"


class CoolbreezeDrBfPostwEn(_FlagCommand):
    NAME = "CoolbreezeDrBfPostwEn"


class CoolbreezeInverter(_FlagCommand):
    NAME = "CoolbreezeInverter"


class CoolbreezeResumeLast(_FlagCommand):
    NAME = "CoolbreezeResumeLast"


class CoolbreezeFanMaxAuto(_ValueCommand):
    NAME = "CoolbreezeFanMaxAuto"
    _SCHEMA = SCH_CB_FAN_SPEED
    _FIELD = "Fan max (auto)"


class CoolbreezeFanMax(_ValueCommand):
    NAME = "CoolbreezeFanMax"
    _SCHEMA = SCH_CB_FAN_SPEED
    _FIELD = "Fan max"


class CoolbreezeExhMax(_ValueCommand):
    NAME = "CoolbreezeExhMax"
    _SCHEMA = SCH_CB_FAN_SPEED
    _FIELD = "Exhaust max"


class CoolbreezeExhEn(_FlagCommand):
    NAME = "CoolbreezeExhEn"


class CoolbreezeCtrlSens(_EnumCommand):
    NAME = "CoolbreezeCtrlSens"
    _ENUM = CtrlSensor


class CoolbreezeCalibTemp(_ValueCommand):
    NAME = "CoolbreezeCalibTemp"
    _SCHEMA = SCH_CB_TEMP_CALIBRATION
    _FIELD = "Temperature calibration"


class CoolbreezeDeadTemp(_ValueCommand):
    NAME = "CoolbreezeDeadTemp"
    _SCHEMA = SCH_CB_TEMP_DEADBAND
    _FIELD = "Temperature deadband"


class CoolbreezeAutoFanMaxTime(_ValueCommand):
    NAME = "CoolbreezeAutoFanMaxTime"
    _SCHEMA = SCH_CB_AUTO_FAN_MAX_TIME
    _FIELD = "Auto fan max time"


#
# Ventilation commands (the names are the device's, including its spelling)...


class VentilationRfSetpoint(_ValueCommand):
    NAME = "VentilationRfSetpoint"
    _SCHEMA = SCH_VENT_RH_SETPOINT
    _FIELD = "Humidity setpoint"


class VentilationVocsSetpoint(_ValueCommand):
    NAME = "VentilationVocsSetpoint"
    _SCHEMA = SCH_VENT_VOCS_SETPOINT
    _FIELD = "VOCs setpoint"


class VentilationEco2Setpoint(_ValueCommand):
    NAME = "VentilationEco2Setpoint"
    _SCHEMA = SCH_VENT_ECO2_SETPOINT
    _FIELD = "eCO2 setpoint"


class VentilationFanStageDelay(_ValueCommand):
    NAME = "VentilationFanStageDelay"
    _SCHEMA = SCH_VENT_FAN_STAGE_DELAY
    _FIELD = "Fan stage delay"


class VentilationCycleFanOff(_FlagCommand):
    NAME = "VentilationCycleFanOff"


class VentilationUseRhControl(_FlagCommand):
    NAME = "VentilationUseRhControl"


class VentilationUseVcosControl(_FlagCommand):
    NAME = "VentilationUseVcosControl"


class VentilationUseEco2Control(_FlagCommand):
    NAME = "VentilationUseEco2Control"


#
# Zone commands...


@dataclass(frozen=True)
class ZoneStatus(Command):
    """Set the mode of a zone (open, close, auto, override, constant)."""

    NAME = "ZoneStatus"

    index: int
    mode: ZoneMode

    def __post_init__(self) -> None:
        _check_index(self.index)
        object.__setattr__(self, "mode", validate(SCH_ZONE_MODE, self.mode, "Mode"))

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_MODE: int(self.mode)}


@dataclass(frozen=True)
class ZoneSetpoint(Command):
    NAME = "ZoneSetpoint"

    index: int
    setpoint: int

    def __post_init__(self) -> None:
        _check_index(self.index)
        validate(SCH_SETPOINT, self.setpoint, "Setpoint")

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_SETPOINT: self.setpoint}


@dataclass(frozen=True)
class _ZoneMaxMinCommand(Command):
    """A zone command with either a maximum or a minimum percentage (not both)."""

    index: int
    max_air: int | None = None
    min_air: int | None = None

    _MAX_KEY: ClassVar[str]
    _MIN_KEY: ClassVar[str]

    def __post_init__(self) -> None:
        _check_index(self.index)

        if (self.max_air is None) == (self.min_air is None):
            raise InputValidationError("Exactly one of maximum/minimum is required")

        for value, field in ((self.max_air, "Maximum"), (self.min_air, "Minimum")):
            if value is not None:
                validate(SCH_PERCENT, value, f"{field} airflow")

    def _payload(self) -> dict[str, int]:
        if self.max_air is not None:
            return {S2_INDEX: self.index, self._MAX_KEY: self.max_air}
        return {S2_INDEX: self.index, self._MIN_KEY: self.min_air}  # type: ignore[dict-item]


class ZoneAirflow(_ZoneMaxMinCommand):
    NAME = "ZoneAirflow"
    _MAX_KEY = S2_MAX_AIR
    _MIN_KEY = S2_MIN_AIR


class ZoneBalance(_ZoneMaxMinCommand):
    NAME = "ZoneBalance"
    _MAX_KEY = S2_BALANCE_MAX
    _MIN_KEY = S2_BALANCE_MIN


@dataclass(frozen=True)
class ZoneName(Command):
    NAME = "ZoneName"

    index: int
    name: str

    def __post_init__(self) -> None:
        _check_index(self.index)
        validate(SCH_NAME, self.name, "Name")

    def _payload(self) -> dict[str, Any]:
        return {S2_INDEX: self.index, S2_NAME: self.name}


@dataclass(frozen=True)
class ZoneCalibration(Command):
    NAME = "ZoneCalibration"

    index: int
    calibration: int  # tenths of a degree

    def __post_init__(self) -> None:
        _check_index(self.index)
        validate(SCH_ZONE_CALIBRATION, self.calibration, "Calibration")

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_CALIBRATION: self.calibration}


@dataclass(frozen=True)
class ZoneBypass(Command):
    NAME = "ZoneBypass"

    index: int
    enable: bool

    def __post_init__(self) -> None:
        _check_index(self.index)

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_BYPASS: bool_to_int(self.enable)}


@dataclass(frozen=True)
class ZoneArea(Command):
    NAME = "ZoneArea"

    index: int
    area: int  # m²

    def __post_init__(self) -> None:
        _check_index(self.index)
        validate(SCH_ZONE_AREA, self.area, "Area")

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_AREA: self.area}


#
# Schedule (favourite) commands...


@dataclass(frozen=True)
class SchedName(Command):
    NAME = "SchedName"

    index: int
    name: str

    def __post_init__(self) -> None:
        _check_schedule(self.index)
        validate(SCH_NAME, self.name, "Name")

    def _payload(self) -> dict[str, Any]:
        return {S2_INDEX: self.index, S2_NAME: self.name}


@dataclass(frozen=True)
class SchedSettings(Command):
    """Set the start/stop times and enabled days of a schedule.

    A time of None is sent as the 'not configured' sentinel (31, 63).
    """

    NAME = "SchedSettings"

    index: int
    start: tuple[int, int] | None
    stop: tuple[int, int] | None
    days: frozenset[Weekday] = frozenset()

    def __post_init__(self) -> None:
        _check_schedule(self.index)

        for time, field in ((self.start, "Start"), (self.stop, "Stop")):
            if time is not None:
                validate(SCH_HOUR, time[0], f"{field} hour")
                validate(SCH_MINUTE, time[1], f"{field} minute")

        object.__setattr__(self, "days", frozenset(Weekday(d) for d in self.days))

    def _payload(self) -> dict[str, Any]:
        start_h, start_m = self.start or UNSET_TIME
        stop_h, stop_m = self.stop or UNSET_TIME

        return {
            S2_INDEX: self.index,
            S2_START_H: start_h,
            S2_START_M: start_m,
            S2_STOP_H: stop_h,
            S2_STOP_M: stop_m,
            S2_DAYS_ENABLED: days_to_wire(self.days),
        }


@dataclass(frozen=True)
class _SchedEnumCommand(Command):
    index: int
    value: IntEnum

    _ENUM: ClassVar[type[IntEnum]]
    _KEY: ClassVar[str]

    def __post_init__(self) -> None:
        _check_schedule(self.index)
        try:
            object.__setattr__(self, "value", self._ENUM(self.value))
        except ValueError:
            raise InputValidationError(
                f"{self._ENUM.__name__} {self.value!r} is invalid"
            ) from None

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, self._KEY: int(self.value)}


class SchedAcMode(_SchedEnumCommand):
    NAME = "SchedAcMode"
    _ENUM = SystemMode
    _KEY = S2_MODE


class SchedAcFan(_SchedEnumCommand):
    NAME = "SchedAcFan"
    _ENUM = FanSpeed
    _KEY = S2_FAN


@dataclass(frozen=True)
class SchedEnable(Command):
    NAME = "SchedEnable"

    index: int
    enable: bool

    def __post_init__(self) -> None:
        _check_schedule(self.index)

    def _payload(self) -> dict[str, int]:
        return {S2_INDEX: self.index, S2_ENABLED: bool_to_int(self.enable)}


@dataclass(frozen=True)
class ZoneOverrideSetting:
    """The mode/setpoint a schedule applies to one zone."""

    index: int
    mode: ZoneMode
    setpoint: int

    def __post_init__(self) -> None:
        _check_index(self.index)
        object.__setattr__(self, "mode", validate(SCH_ZONE_MODE, self.mode, "Mode"))
        validate(SCH_SETPOINT, self.setpoint, "Setpoint")

    def as_json(self) -> dict[str, int]:
        return {
            S2_INDEX: self.index,
            S2_MODE: int(self.mode),
            S2_SETPOINT: self.setpoint,
        }


@dataclass(frozen=True)
class SchedZones(Command):
    NAME = "SchedZones"

    index: int
    zones: tuple[ZoneOverrideSetting, ...]

    def __post_init__(self) -> None:
        _check_schedule(self.index)
        if not self.zones:
            raise InputValidationError("At least one zone override is required")
        object.__setattr__(self, "zones", tuple(self.zones))

    def _payload(self) -> dict[str, Any]:
        return {S2_INDEX: self.index, S2_ZONES: [z.as_json() for z in self.zones]}
