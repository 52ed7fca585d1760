"""Provides handling of the iZone system (the air conditioner as a whole)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from .schemas.codec import display
from .schemas.const import (
    S2_AC_ERROR,
    S2_AIRFLOW_LOCK,
    S2_AIRFLOW_MIN_LOCK,
    S2_AUTO_FAN_MAX_TIME,
    S2_AUTO_MODE_DEADB,
    S2_CALIB_TEMP,
    S2_COOLBREEZE,
    S2_CTRL_SENS,
    S2_CTRL_ZONE,
    S2_CYCLE_FAN_OFF,
    S2_DAMPER_TIME,
    S2_DEAD_TEMP,
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
    S2_FAN_MAX,
    S2_FAN_MAX_AUTO,
    S2_FAN_SPEED,
    S2_FAN_STAGE_DELAY,
    S2_FILTER_WARN,
    S2_INVERTER,
    S2_NO_OF_ZONES,
    S2_OPEN_DAMPERS_WHEN_OFF,
    S2_POSTW_EN,
    S2_POSTW_T,
    S2_PREW_EN,
    S2_PREW_TIME,
    S2_RAS,
    S2_RESUME_LAST,
    S2_REVERSE_DAMPERS,
    S2_RH_SETPOINT,
    S2_SCROOGE_MODE,
    S2_SETPOINT,
    S2_SLEEP_TIMER,
    S2_STATIC_P,
    S2_SUPPLY,
    S2_SYS_FAN,
    S2_SYS_MODE,
    S2_SYS_ON,
    S2_TEMP,
    S2_USE_ECO2_CONTROL,
    S2_USE_RH_CONTROL,
    S2_USE_VOCS_CONTROL,
    S2_VENTILATION,
    S2_VOCS_SETPOINT,
    S2_WARNINGS,
    CtrlSensor,
    FanSpeed,
    SystemMode,
)
from .zone import EntityBase

if TYPE_CHECKING:
    import logging

    from .schemas import (
        IzCoolbreezeStatusT,
        IzSystemStatusResponseT,
        IzVentilationStatusT,
    )

_AC_OK: Final = "OK"


class Coolbreeze:
    """The configuration of an evaporative cooler (a Coolbreeze unit)."""

    def __init__(self, status: IzCoolbreezeStatusT) -> None:
        self._status = status

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(fan_speed={self.fan_speed})"

    @property
    def fan_speed(self) -> int | None:
        return self._status.get(S2_FAN_SPEED)

    @property
    def rh_setpoint(self) -> int | None:
        return self._status.get(S2_RH_SETPOINT)

    @property
    def prewash_enabled(self) -> bool | None:
        return self._status.get(S2_PREW_EN)

    @property
    def prewash_time(self) -> int | None:
        return self._status.get(S2_PREW_TIME)

    @property
    def drain_after_prewash(self) -> bool | None:
        return self._status.get(S2_DR_AF_PREW_EN)

    @property
    def drain_cycle_enabled(self) -> bool | None:
        return self._status.get(S2_DR_CYC_EN)

    @property
    def drain_cycle_period(self) -> int | None:
        """Return the drain cycle period in hours (it is minutes on the wire)."""

        if (minutes := self._status.get(S2_DR_CYC_PER)) is None:
            return None
        return minutes // 60

    @property
    def postwash_enabled(self) -> bool | None:
        return self._status.get(S2_POSTW_EN)

    @property
    def postwash_time(self) -> int | None:
        return self._status.get(S2_POSTW_T)

    @property
    def drain_before_postwash(self) -> bool | None:
        return self._status.get(S2_DR_BF_POSTW_EN)

    @property
    def inverter(self) -> bool | None:
        return self._status.get(S2_INVERTER)

    @property
    def resume_last(self) -> bool | None:
        return self._status.get(S2_RESUME_LAST)

    @property
    def fan_max_auto(self) -> int | None:
        return self._status.get(S2_FAN_MAX_AUTO)

    @property
    def fan_max(self) -> int | None:
        return self._status.get(S2_FAN_MAX)

    @property
    def exhaust_max(self) -> int | None:
        return self._status.get(S2_EXH_MAX)

    @property
    def exhaust_enabled(self) -> bool | None:
        return self._status.get(S2_EXH_EN)

    @property
    def control_sensor(self) -> CtrlSensor | int | None:
        return self._status.get(S2_CTRL_SENS)

    @property
    def temp_calibration(self) -> int | None:
        """Return the temperature calibration (tenths of a degree)."""
        return self._status.get(S2_CALIB_TEMP)

    @property
    def temp_deadband(self) -> int | None:
        """Return the temperature deadband (hundredths of a degree)."""
        return self._status.get(S2_DEAD_TEMP)

    @property
    def auto_fan_max_time(self) -> int | None:
        return self._status.get(S2_AUTO_FAN_MAX_TIME)


class Ventilation:
    """The configuration of a ventilation unit."""

    def __init__(self, status: IzVentilationStatusT) -> None:
        self._status = status

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(rh_setpoint={self.rh_setpoint})"

    @property
    def rh_setpoint(self) -> int | None:
        return self._status.get(S2_RH_SETPOINT)

    @property
    def vocs_setpoint(self) -> int | None:
        return self._status.get(S2_VOCS_SETPOINT)

    @property
    def eco2_setpoint(self) -> int | None:
        return self._status.get(S2_ECO2_SETPOINT)

    @property
    def fan_stage_delay(self) -> int | None:
        return self._status.get(S2_FAN_STAGE_DELAY)

    @property
    def cycle_fan_off(self) -> bool | None:
        return self._status.get(S2_CYCLE_FAN_OFF)

    @property
    def use_rh_control(self) -> bool | None:
        return self._status.get(S2_USE_RH_CONTROL)

    @property
    def use_vocs_control(self) -> bool | None:
        return self._status.get(S2_USE_VOCS_CONTROL)

    @property
    def use_eco2_control(self) -> bool | None:
        return self._status.get(S2_USE_ECO2_CONTROL)


class System(EntityBase):
    """Instance of the system, as at the time of the query.

    The optional attrs (e.g. sleep_timer) are None if the controller's firmware
    doesn't report them.
    """

    _status: IzSystemStatusResponseT

    def __init__(self, status: IzSystemStatusResponseT, logger: logging.Logger) -> None:
        super().__init__(status, logger)

        if not isinstance(self.mode, SystemMode):
            self._logger.warning("%s: Unknown system mode %s (YMMV)", self, self.mode)
        if not isinstance(self.fan, FanSpeed):
            self._logger.warning("%s: Unknown fan speed %s (YMMV)", self, self.fan)

        self.coolbreeze: Final[Coolbreeze | None] = (
            Coolbreeze(status[S2_COOLBREEZE]) if S2_COOLBREEZE in status else None
        )
        self.ventilation: Final[Ventilation | None] = (
            Ventilation(status[S2_VENTILATION]) if S2_VENTILATION in status else None
        )

    def __str__(self) -> str:
        """Return a string representation of the entity."""
        return f"{self.__class__.__name__}(power={self.power}, mode={self.mode!r})"

    @property
    def power(self) -> bool:
        return self._status[S2_SYS_ON]

    @property
    def mode(self) -> SystemMode | int:
        return self._status[S2_SYS_MODE]

    @property
    def fan(self) -> FanSpeed | int:
        return self._status[S2_SYS_FAN]

    @property
    def temperature(self) -> int:
        """Return the controller's temperature (hundredths of a degree)."""
        return self._status[S2_TEMP]

    @property
    def setpoint(self) -> int:
        """Return the target temperature (hundredths of a degree)."""
        return self._status[S2_SETPOINT]

    @property
    def temperature_display(self) -> str:
        return display(self.temperature)

    @property
    def setpoint_display(self) -> str:
        return display(self.setpoint)

    @property
    def error(self) -> str:
        """Return the controller's diagnostic string ('OK' if there is no fault)."""
        return self._status[S2_AC_ERROR]

    @property
    def is_ok(self) -> bool:
        return self.error.strip() == _AC_OK

    def _get(self, key: str) -> Any:
        return self._status.get(key)

    @property
    def supply(self) -> int | None:
        """Return the supply air temperature (hundredths of a degree)."""
        return self._get(S2_SUPPLY)

    @property
    def sleep_timer(self) -> int | None:
        return self._get(S2_SLEEP_TIMER)

    @property
    def ras(self) -> int | None:
        """Return the return air sensor's setting."""
        return self._get(S2_RAS)

    @property
    def ctrl_zone(self) -> int | None:
        return self._get(S2_CTRL_ZONE)

    @property
    def zone_count(self) -> int | None:
        return self._get(S2_NO_OF_ZONES)

    @property
    def warnings(self) -> str | None:
        return self._get(S2_WARNINGS)

    @property
    def economy_lock(self) -> bool | None:
        return self._get(S2_ECO_LOCK)

    @property
    def economy_min(self) -> int | None:
        return self._get(S2_ECO_MIN)

    @property
    def economy_max(self) -> int | None:
        return self._get(S2_ECO_MAX)

    @property
    def filter_warning(self) -> int | None:
        """Return the filter warning interval in months (0 is disabled)."""
        return self._get(S2_FILTER_WARN)

    @property
    def airflow_lock(self) -> bool | None:
        return self._get(S2_AIRFLOW_LOCK)

    @property
    def airflow_min_lock(self) -> bool | None:
        return self._get(S2_AIRFLOW_MIN_LOCK)

    @property
    def static_pressure(self) -> int | None:
        return self._get(S2_STATIC_P)

    @property
    def open_dampers_when_off(self) -> bool | None:
        return self._get(S2_OPEN_DAMPERS_WHEN_OFF)

    @property
    def scrooge_mode(self) -> bool | None:
        return self._get(S2_SCROOGE_MODE)

    @property
    def reverse_dampers(self) -> bool | None:
        return self._get(S2_REVERSE_DAMPERS)

    @property
    def damper_time(self) -> int | None:
        return self._get(S2_DAMPER_TIME)

    @property
    def auto_mode_deadband(self) -> int | None:
        """Return the auto mode deadband (hundredths of a degree)."""
        return self._get(S2_AUTO_MODE_DEADB)
