"""izone schema - shared constants."""

from __future__ import annotations

from enum import EnumCheck, IntEnum, StrEnum, verify
from typing import Final

# The request wrapper, and the wrappers of each entity's response
S2_IZONE_V2_REQUEST: Final = "iZoneV2Request"
S2_SYSTEM_V2: Final = "SystemV2"
S2_ZONES_V2: Final = "ZonesV2"
S2_SCHEDULES_V2: Final = "SchedulesV2"

S2_TYPE: Final = "Type"
S2_NO: Final = "No"
S2_NO1: Final = "No1"


# These are vendor constants, used for keys in the vendor's schema (PascalCase)
S2_AC_ERROR: Final = "ACError"
S2_ACTIVE: Final = "Active"
S2_AIRFLOW_LOCK: Final = "AirflowLock"
S2_AIRFLOW_MIN_LOCK: Final = "AirflowMinLock"
S2_AREA: Final = "Area"
S2_AUTO_MODE_DEADB: Final = "AutoModeDeadB"
S2_BALANCE_MAX: Final = "BalanceMax"
S2_BALANCE_MIN: Final = "BalanceMin"
S2_BATT_VOLT: Final = "BattVolt"
S2_BYPASS: Final = "Bypass"
S2_CALIBRATION: Final = "Calibration"
S2_CONST: Final = "Const"
S2_CONST_A: Final = "ConstA"
S2_COOLBREEZE: Final = "Coolbreeze"
S2_CTRL_ZONE: Final = "CtrlZone"
S2_DAMPER_SKIP: Final = "DamperSkip"
S2_DAMPER_TIME: Final = "DamperTime"
S2_DAYS_ENABLED: Final = "DaysEnabled"
S2_DMP_FLT: Final = "DmpFlt"
S2_DMP_POS: Final = "DmpPos"
S2_ECO_LOCK: Final = "EcoLock"
S2_ECO_MAX: Final = "EcoMax"
S2_ECO_MIN: Final = "EcoMin"
S2_ENABLED: Final = "Enabled"
S2_FAN: Final = "Fan"
S2_FAN_SPEED: Final = "FanSpeed"
S2_FILTER_WARN: Final = "FilterWarn"
S2_INDEX: Final = "Index"
S2_ISENSE: Final = "iSense"
S2_MASTER: Final = "Master"
S2_MAX_AIR: Final = "MaxAir"
S2_MIN_AIR: Final = "MinAir"
S2_MODE: Final = "Mode"
S2_NAME: Final = "Name"
S2_NO_OF_ZONES: Final = "NoOfZones"
S2_OPEN_DAMPERS_WHEN_OFF: Final = "OpenDampersWhenOff"
S2_RAS: Final = "RAS"
S2_REVERSE_DAMPERS: Final = "ReverseDampers"
S2_RF_SIGNAL: Final = "RfSignal"
S2_RH_SETPOINT: Final = "RhSetpoint"
S2_SCROOGE_MODE: Final = "ScroogeMode"
S2_SENS_TYPE: Final = "SensType"
S2_SENSOR_FAULT: Final = "SensorFault"
S2_SETPOINT: Final = "Setpoint"
S2_SLEEP_TIMER: Final = "SleepTimer"
S2_START_H: Final = "StartH"
S2_START_M: Final = "StartM"
S2_STATIC_P: Final = "StaticP"
S2_STOP_H: Final = "StopH"
S2_STOP_M: Final = "StopM"
S2_SUPPLY: Final = "Supply"
S2_SYS_FAN: Final = "SysFan"
S2_SYS_MODE: Final = "SysMode"
S2_SYS_ON: Final = "SysOn"
S2_TEMP: Final = "Temp"
S2_UNIT_SETPOINT: Final = "UnitSetpoint"
S2_VENTILATION: Final = "Ventilation"
S2_WARNINGS: Final = "Warnings"
S2_ZONE_TYPE: Final = "ZoneType"
S2_ZONES: Final = "Zones"

# Coolbreeze (evaporative cooler) sub-record of SystemV2
S2_AUTO_FAN_MAX_TIME: Final = "AutoFanMaxTime"
S2_CALIB_TEMP: Final = "CalibTemp"
S2_CTRL_SENS: Final = "CtrlSens"
S2_DEAD_TEMP: Final = "DeadTemp"
S2_DR_AF_PREW_EN: Final = "DrAfPrewEn"
S2_DR_BF_POSTW_EN: Final = "DrBfPostwEn"
S2_DR_CYC_EN: Final = "DrCycEn"
S2_DR_CYC_PER: Final = "DrCycPer"
S2_EXH_EN: Final = "ExhEn"
S2_EXH_MAX: Final = "ExhMax"
S2_FAN_MAX: Final = "FanMax"
S2_FAN_MAX_AUTO: Final = "FanMaxAuto"
S2_INVERTER: Final = "Inverter"
S2_POSTW_EN: Final = "PostwEn"
S2_POSTW_T: Final = "PostwT"
S2_PREW_EN: Final = "PrewEn"
S2_PREW_TIME: Final = "PrewTime"
S2_RESUME_LAST: Final = "ResumeLast"

# Ventilation sub-record of SystemV2
S2_CYCLE_FAN_OFF: Final = "CycleFanOff"
S2_ECO2_SETPOINT: Final = "Eco2Setpoint"
S2_FAN_STAGE_DELAY: Final = "FanStageDelay"
S2_USE_ECO2_CONTROL: Final = "UseEco2Control"
S2_USE_RH_CONTROL: Final = "UseRhControl"
S2_USE_VOCS_CONTROL: Final = "UseVocsControl"
S2_VOCS_SETPOINT: Final = "VocsSetpoint"

# DaysEnabled keys (Monday to Sunday)
S2_MON: Final = "M"
S2_TUE: Final = "Tu"
S2_WED: Final = "W"
S2_THU: Final = "Th"
S2_FRI: Final = "F"
S2_SAT: Final = "Sa"
S2_SUN: Final = "Su"


@verify(EnumCheck.UNIQUE)
class QueryType(IntEnum):
    SYSTEM = 1
    ZONES = 2
    SCHEDULES = 3


@verify(EnumCheck.UNIQUE)
class SystemMode(IntEnum):
    COOL = 1
    HEAT = 2
    VENT = 3
    DRY = 4
    AUTO = 5
    EXHAUST = 6  # device-internal
    PUMP_ONLY = 7  # device-internal


@verify(EnumCheck.UNIQUE)
class FanSpeed(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    AUTO = 4
    TOP = 5
    NON_GAS_HEAT = 99


@verify(EnumCheck.UNIQUE)
class ZoneMode(IntEnum):
    OPEN = 1
    CLOSE = 2
    AUTO = 3  # i.e. climate control
    OVERRIDE = 4
    CONSTANT = 5


@verify(EnumCheck.UNIQUE)
class ZoneType(IntEnum):
    OPEN_CLOSE = 1
    CONSTANT = 2
    AUTO = 3


@verify(EnumCheck.UNIQUE)
class CtrlSensor(IntEnum):
    SCREEN = 0
    REMOTE = 1


@verify(EnumCheck.UNIQUE)
class Weekday(StrEnum):
    MONDAY = S2_MON
    TUESDAY = S2_TUE
    WEDNESDAY = S2_WED
    THURSDAY = S2_THU
    FRIDAY = S2_FRI
    SATURDAY = S2_SAT
    SUNDAY = S2_SUN


WEEKDAYS: Final = tuple(Weekday)  # in wire order, Monday first

# (hour, minute) pairs the controller uses for "no time configured"
UNSET_TIMES: Final = ((255, 255), (31, 63))
UNSET_TIME: Final = (31, 63)  # as sent by this client
