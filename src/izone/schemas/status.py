"""izone schema - for the query (status) JSON of the local API.

Each schema decodes as it validates: integer booleans become bools, enum codes
become enum members (or stay as raw ints if unknown), and absent optional fields
are filled in where there is a sensible default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NotRequired, TypedDict

import voluptuous as vol

from .codec import days_from_wire, decode_enum, int_to_bool
from ..exceptions import CodecError
from .const import (
    S2_AC_ERROR,
    S2_ACTIVE,
    S2_AIRFLOW_LOCK,
    S2_AIRFLOW_MIN_LOCK,
    S2_AREA,
    S2_AUTO_FAN_MAX_TIME,
    S2_AUTO_MODE_DEADB,
    S2_BALANCE_MAX,
    S2_BALANCE_MIN,
    S2_BATT_VOLT,
    S2_BYPASS,
    S2_CALIB_TEMP,
    S2_CALIBRATION,
    S2_CONST,
    S2_CONST_A,
    S2_COOLBREEZE,
    S2_CTRL_SENS,
    S2_CTRL_ZONE,
    S2_CYCLE_FAN_OFF,
    S2_DAMPER_SKIP,
    S2_DAMPER_TIME,
    S2_DAYS_ENABLED,
    S2_DEAD_TEMP,
    S2_DMP_FLT,
    S2_DMP_POS,
    S2_DR_AF_PREW_EN,
    S2_DR_BF_POSTW_EN,
    S2_DR_CYC_EN,
    S2_DR_CYC_PER,
    S2_ECO2_SETPOINT,
    S2_ECO_LOCK,
    S2_ECO_MAX,
    S2_ECO_MIN,
    S2_EXH_EN,
    S2_EXH_MAX,
    S2_FAN,
    S2_FAN_MAX,
    S2_FAN_MAX_AUTO,
    S2_FAN_SPEED,
    S2_FAN_STAGE_DELAY,
    S2_FILTER_WARN,
    S2_INDEX,
    S2_INVERTER,
    S2_ISENSE,
    S2_MASTER,
    S2_MAX_AIR,
    S2_MIN_AIR,
    S2_MODE,
    S2_NAME,
    S2_NO_OF_ZONES,
    S2_OPEN_DAMPERS_WHEN_OFF,
    S2_POSTW_EN,
    S2_POSTW_T,
    S2_PREW_EN,
    S2_PREW_TIME,
    S2_RAS,
    S2_RESUME_LAST,
    S2_REVERSE_DAMPERS,
    S2_RF_SIGNAL,
    S2_RH_SETPOINT,
    S2_SCROOGE_MODE,
    S2_SENS_TYPE,
    S2_SENSOR_FAULT,
    S2_SETPOINT,
    S2_SLEEP_TIMER,
    S2_START_H,
    S2_START_M,
    S2_STATIC_P,
    S2_STOP_H,
    S2_STOP_M,
    S2_SUPPLY,
    S2_SYS_FAN,
    S2_SYS_MODE,
    S2_SYS_ON,
    S2_TEMP,
    S2_UNIT_SETPOINT,
    S2_USE_ECO2_CONTROL,
    S2_USE_RH_CONTROL,
    S2_USE_VOCS_CONTROL,
    S2_VENTILATION,
    S2_VOCS_SETPOINT,
    S2_WARNINGS,
    S2_ZONE_TYPE,
    S2_ZONES,
    CtrlSensor,
    FanSpeed,
    SystemMode,
    Weekday,
    ZoneMode,
    ZoneType,
)

if TYPE_CHECKING:
    from enum import IntEnum


# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 1, ...}} returns this dict
class IzSystemStatusResponseT(TypedDict):
    """Response to a system query (Type 1), within the SystemV2 wrapper."""

    SysOn: bool
    SysMode: SystemMode | int
    SysFan: FanSpeed | int
    Temp: int
    Setpoint: int
    ACError: str
    Supply: NotRequired[int]
    SleepTimer: NotRequired[int]
    RAS: NotRequired[int]
    CtrlZone: NotRequired[int]
    NoOfZones: NotRequired[int]
    Warnings: NotRequired[str]
    EcoLock: NotRequired[bool]
    EcoMax: NotRequired[int]
    EcoMin: NotRequired[int]
    FilterWarn: NotRequired[int]
    AirflowLock: NotRequired[bool]
    AirflowMinLock: NotRequired[bool]
    StaticP: NotRequired[int]
    OpenDampersWhenOff: NotRequired[bool]
    ScroogeMode: NotRequired[bool]
    ReverseDampers: NotRequired[bool]
    DamperTime: NotRequired[int]
    AutoModeDeadB: NotRequired[int]
    Coolbreeze: NotRequired[IzCoolbreezeStatusT]
    Ventilation: NotRequired[IzVentilationStatusT]


class IzCoolbreezeStatusT(TypedDict, total=False):
    FanSpeed: int
    RhSetpoint: int
    PrewEn: bool
    PrewTime: int
    DrAfPrewEn: bool
    DrCycEn: bool
    DrCycPer: int  # minutes
    PostwEn: bool
    PostwT: int
    DrBfPostwEn: bool
    Inverter: bool
    ResumeLast: bool
    FanMaxAuto: int
    FanMax: int
    ExhMax: int
    ExhEn: bool
    CtrlSens: CtrlSensor | int
    CalibTemp: int
    DeadTemp: int
    AutoFanMaxTime: int


class IzVentilationStatusT(TypedDict, total=False):
    RhSetpoint: int
    VocsSetpoint: int
    Eco2Setpoint: int
    FanStageDelay: int
    CycleFanOff: bool
    UseRhControl: bool
    UseVocsControl: bool
    UseEco2Control: bool


# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 2, ...}} returns this dict
class IzZoneStatusResponseT(TypedDict):
    """Response to a zone query, within the ZonesV2 wrapper."""

    Index: NotRequired[int]
    Name: str
    Mode: ZoneMode | int
    Setpoint: int
    Temp: int
    DmpPos: int
    ZoneType: ZoneType | int
    SensType: int
    MaxAir: int
    MinAir: int
    Const: int
    ConstA: int
    Master: int
    DmpFlt: bool
    iSense: int
    Area: int
    Calibration: int
    Bypass: bool
    RfSignal: NotRequired[int]  # wireless sensors only
    BattVolt: NotRequired[int]
    SensorFault: int
    BalanceMax: int
    BalanceMin: int
    DamperSkip: int


# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 3, ...}} returns this dict
class IzScheduleStatusResponseT(TypedDict):
    """Response to a schedule (favourite) query, within the SchedulesV2 wrapper."""

    Index: int
    Name: str
    Active: bool
    Mode: NotRequired[SystemMode | int]
    Fan: NotRequired[FanSpeed | int]
    StartH: NotRequired[int]
    StartM: NotRequired[int]
    StopH: NotRequired[int]
    StopM: NotRequired[int]
    DaysEnabled: frozenset[Weekday]
    Coolbreeze: NotRequired[IzCoolbreezePresetT]
    Zones: NotRequired[list[IzZoneOverrideT]]


class IzCoolbreezePresetT(TypedDict):
    UnitSetpoint: int
    FanSpeed: int
    RhSetpoint: int


class IzZoneOverrideT(TypedDict):
    Mode: ZoneMode | int
    Setpoint: int


def as_bool(value: Any) -> bool:
    """Validate/decode an integer boolean (for use within a vol.Schema)."""

    try:
        return int_to_bool(value)
    except CodecError as err:
        raise vol.Invalid(err.message) from err


def as_enum(enum_cls: type[IntEnum]) -> Any:
    """Return a validator that decodes an enum code (unknown codes are kept)."""

    def validator(value: Any) -> IntEnum | int:
        try:
            return decode_enum(enum_cls, value)
        except CodecError as err:
            raise vol.Invalid(err.message) from err

    return validator


def as_days(value: Any) -> frozenset[Weekday]:
    """Validate/decode a DaysEnabled object (absent days are not enabled)."""

    if not isinstance(value, dict):
        raise vol.Invalid(f"expected a DaysEnabled object, got: {value!r}")

    try:
        return days_from_wire(value)
    except CodecError as err:
        raise vol.Invalid(err.message) from err


_UINT = vol.All(int, vol.Range(min=0))


def factory_coolbreeze_status() -> vol.Schema:
    """Factory for the Coolbreeze sub-record of the system schema."""

    return vol.Schema(
        {
            vol.Optional(S2_FAN_SPEED): _UINT,
            vol.Optional(S2_RH_SETPOINT): _UINT,
            vol.Optional(S2_PREW_EN): as_bool,
            vol.Optional(S2_PREW_TIME): _UINT,
            vol.Optional(S2_DR_AF_PREW_EN): as_bool,
            vol.Optional(S2_DR_CYC_EN): as_bool,
            vol.Optional(S2_DR_CYC_PER): _UINT,
            vol.Optional(S2_POSTW_EN): as_bool,
            vol.Optional(S2_POSTW_T): _UINT,
            vol.Optional(S2_DR_BF_POSTW_EN): as_bool,
            vol.Optional(S2_INVERTER): as_bool,
            vol.Optional(S2_RESUME_LAST): as_bool,
            vol.Optional(S2_FAN_MAX_AUTO): _UINT,
            vol.Optional(S2_FAN_MAX): _UINT,
            vol.Optional(S2_EXH_MAX): _UINT,
            vol.Optional(S2_EXH_EN): as_bool,
            vol.Optional(S2_CTRL_SENS): as_enum(CtrlSensor),
            vol.Optional(S2_CALIB_TEMP): int,
            vol.Optional(S2_DEAD_TEMP): _UINT,
            vol.Optional(S2_AUTO_FAN_MAX_TIME): _UINT,
        },
        extra=vol.ALLOW_EXTRA,
    )


def factory_ventilation_status() -> vol.Schema:
    """Factory for the Ventilation sub-record of the system schema."""

    return vol.Schema(
        {
            vol.Optional(S2_RH_SETPOINT): _UINT,
            vol.Optional(S2_VOCS_SETPOINT): _UINT,
            vol.Optional(S2_ECO2_SETPOINT): _UINT,
            vol.Optional(S2_FAN_STAGE_DELAY): _UINT,
            vol.Optional(S2_CYCLE_FAN_OFF): as_bool,
            vol.Optional(S2_USE_RH_CONTROL): as_bool,
            vol.Optional(S2_USE_VOCS_CONTROL): as_bool,
            vol.Optional(S2_USE_ECO2_CONTROL): as_bool,
        },
        extra=vol.ALLOW_EXTRA,
    )


def factory_system_status() -> vol.Schema:
    """Factory for the system schema (the content of the SystemV2 wrapper)."""

    return vol.Schema(
        {
            vol.Required(S2_SYS_ON, default=0): as_bool,
            vol.Required(S2_SYS_MODE): as_enum(SystemMode),
            vol.Required(S2_SYS_FAN): as_enum(FanSpeed),
            vol.Required(S2_TEMP): _UINT,
            vol.Required(S2_SETPOINT): _UINT,
            vol.Required(S2_AC_ERROR): str,
            # these were added in later firmware...
            vol.Optional(S2_SUPPLY): _UINT,
            vol.Optional(S2_SLEEP_TIMER): _UINT,
            vol.Optional(S2_RAS): int,
            vol.Optional(S2_CTRL_ZONE): int,
            vol.Optional(S2_NO_OF_ZONES): _UINT,
            vol.Optional(S2_WARNINGS): str,
            vol.Optional(S2_ECO_LOCK): as_bool,
            vol.Optional(S2_ECO_MAX): _UINT,
            vol.Optional(S2_ECO_MIN): _UINT,
            vol.Optional(S2_FILTER_WARN): _UINT,
            vol.Optional(S2_AIRFLOW_LOCK): as_bool,
            vol.Optional(S2_AIRFLOW_MIN_LOCK): as_bool,
            vol.Optional(S2_STATIC_P): _UINT,
            vol.Optional(S2_OPEN_DAMPERS_WHEN_OFF): as_bool,
            vol.Optional(S2_SCROOGE_MODE): as_bool,
            vol.Optional(S2_REVERSE_DAMPERS): as_bool,
            vol.Optional(S2_DAMPER_TIME): _UINT,
            vol.Optional(S2_AUTO_MODE_DEADB): _UINT,
            vol.Optional(S2_COOLBREEZE): factory_coolbreeze_status(),
            vol.Optional(S2_VENTILATION): factory_ventilation_status(),
        },
        extra=vol.ALLOW_EXTRA,
    )


def factory_zone_status() -> vol.Schema:
    """Factory for the zone schema (the content of the ZonesV2 wrapper)."""

    return vol.Schema(
        {
            vol.Optional(S2_INDEX): _UINT,
            vol.Required(S2_NAME): str,
            vol.Required(S2_MODE): as_enum(ZoneMode),
            vol.Required(S2_SETPOINT): _UINT,
            vol.Required(S2_TEMP): _UINT,
            vol.Required(S2_DMP_POS): _UINT,
            vol.Required(S2_ZONE_TYPE): as_enum(ZoneType),
            vol.Required(S2_SENS_TYPE): int,
            vol.Required(S2_MAX_AIR): _UINT,
            vol.Required(S2_MIN_AIR): _UINT,
            vol.Required(S2_CONST, default=0): int,
            vol.Required(S2_CONST_A, default=0): int,
            vol.Required(S2_MASTER, default=0): int,
            vol.Required(S2_DMP_FLT, default=0): as_bool,
            vol.Required(S2_ISENSE, default=0): int,
            vol.Required(S2_AREA, default=0): _UINT,
            vol.Required(S2_CALIBRATION, default=0): int,
            vol.Required(S2_BYPASS, default=0): as_bool,
            vol.Optional(S2_RF_SIGNAL): _UINT,
            vol.Optional(S2_BATT_VOLT): _UINT,
            vol.Required(S2_SENSOR_FAULT, default=0): _UINT,
            vol.Required(S2_BALANCE_MAX, default=100): _UINT,
            vol.Required(S2_BALANCE_MIN, default=0): _UINT,
            vol.Required(S2_DAMPER_SKIP, default=0): int,
        },
        extra=vol.ALLOW_EXTRA,
    )


def factory_schedule_status() -> vol.Schema:
    """Factory for the schedule schema (the content of the SchedulesV2 wrapper)."""

    return vol.Schema(
        {
            vol.Required(S2_INDEX): _UINT,
            vol.Required(S2_NAME, default=""): str,
            vol.Required(S2_ACTIVE, default=0): as_bool,
            vol.Optional(S2_MODE): as_enum(SystemMode),
            vol.Optional(S2_FAN): as_enum(FanSpeed),
            vol.Optional(S2_START_H): _UINT,
            vol.Optional(S2_START_M): _UINT,
            vol.Optional(S2_STOP_H): _UINT,
            vol.Optional(S2_STOP_M): _UINT,
            vol.Required(S2_DAYS_ENABLED, default={}): as_days,
            vol.Optional(S2_COOLBREEZE): vol.Schema(
                {
                    vol.Required(S2_UNIT_SETPOINT): _UINT,
                    vol.Required(S2_FAN_SPEED): _UINT,
                    vol.Required(S2_RH_SETPOINT): _UINT,
                },
                extra=vol.ALLOW_EXTRA,
            ),
            vol.Optional(S2_ZONES): [
                vol.Schema(
                    {
                        vol.Required(S2_MODE): as_enum(ZoneMode),
                        vol.Required(S2_SETPOINT): _UINT,
                    },
                    extra=vol.ALLOW_EXTRA,
                )
            ],
        },
        extra=vol.ALLOW_EXTRA,
    )
