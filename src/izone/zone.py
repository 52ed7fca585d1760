"""Provides handling of iZone zones (the dampered areas of the ductwork)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from .schemas.codec import display
from .schemas.const import (
    S2_AREA,
    S2_BALANCE_MAX,
    S2_BALANCE_MIN,
    S2_BATT_VOLT,
    S2_BYPASS,
    S2_CALIBRATION,
    S2_CONST,
    S2_CONST_A,
    S2_DAMPER_SKIP,
    S2_DMP_FLT,
    S2_DMP_POS,
    S2_ISENSE,
    S2_MASTER,
    S2_MAX_AIR,
    S2_MIN_AIR,
    S2_MODE,
    S2_NAME,
    S2_RF_SIGNAL,
    S2_SENS_TYPE,
    S2_SENSOR_FAULT,
    S2_SETPOINT,
    S2_TEMP,
    S2_ZONE_TYPE,
    ZoneMode,
    ZoneType,
)

if TYPE_CHECKING:
    import logging

    from .schemas import (
        IzScheduleStatusResponseT,
        IzSystemStatusResponseT,
        IzZoneStatusResponseT,
    )


class EntityBase:
    """A read-only snapshot of one facet of the controller's state."""

    _status: (
        IzSystemStatusResponseT | IzZoneStatusResponseT | IzScheduleStatusResponseT
    )

    def __init__(self, status: Any, logger: logging.Logger) -> None:
        self._status = status
        self._logger = logger

    def __str__(self) -> str:
        """Return a string representation of the entity."""
        return f"{self.__class__.__name__}()"

    @property
    def status(self) -> Any:
        """Return the (decoded) status of the entity."""
        return self._status


class Zone(EntityBase):
    """Instance of a zone, as at the time of the query."""

    _status: IzZoneStatusResponseT

    def __init__(
        self, index: int, status: IzZoneStatusResponseT, logger: logging.Logger
    ) -> None:
        super().__init__(status, logger)

        self._index: Final = index

        if not isinstance(self.mode, ZoneMode):
            self._logger.warning("%s: Unknown zone mode %s (YMMV)", self, self.mode)
        if not isinstance(self.zone_type, ZoneType):
            self._logger.warning(
                "%s: Unknown zone type %s (YMMV)", self, self.zone_type
            )

    def __str__(self) -> str:
        """Return a string representation of the entity."""
        return f"{self.__class__.__name__}(index={self._index}, name='{self.name}')"

    @property
    def index(self) -> int:
        return self._index

    @property
    def name(self) -> str:
        return self._status[S2_NAME]

    @property
    def mode(self) -> ZoneMode | int:
        return self._status[S2_MODE]

    @property
    def temperature(self) -> int:
        """Return the current temperature (hundredths of a degree)."""
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
    def damper_position(self) -> int:
        """Return the damper's position (percent open)."""
        return self._status[S2_DMP_POS]

    @property
    def zone_type(self) -> ZoneType | int:
        return self._status[S2_ZONE_TYPE]

    @property
    def sensor_type(self) -> int:
        return self._status[S2_SENS_TYPE]

    @property
    def max_air(self) -> int:
        return self._status[S2_MAX_AIR]

    @property
    def min_air(self) -> int:
        return self._status[S2_MIN_AIR]

    @property
    def constant(self) -> int:
        return self._status[S2_CONST]

    @property
    def constant_a(self) -> int:
        return self._status[S2_CONST_A]

    @property
    def master(self) -> int:
        return self._status[S2_MASTER]

    @property
    def isense(self) -> int:
        return self._status[S2_ISENSE]

    @property
    def damper_fault(self) -> bool:
        return self._status[S2_DMP_FLT]

    @property
    def area(self) -> int:
        """Return the zone's floor area (m²)."""
        return self._status[S2_AREA]

    @property
    def calibration(self) -> int:
        """Return the sensor's calibration offset (tenths of a degree)."""
        return self._status[S2_CALIBRATION]

    @property
    def bypass(self) -> bool:
        return self._status[S2_BYPASS]

    @property
    def rf_signal(self) -> int | None:
        """Return the wireless sensor's signal strength (percent), if any."""
        return self._status.get(S2_RF_SIGNAL)

    @property
    def battery_level(self) -> int | None:
        """Return the wireless sensor's battery level code (0 is low), if any."""
        return self._status.get(S2_BATT_VOLT)

    @property
    def sensor_fault(self) -> int:
        """Return the sensor's fault code (0 is OK)."""
        return self._status[S2_SENSOR_FAULT]

    @property
    def balance_max(self) -> int:
        return self._status[S2_BALANCE_MAX]

    @property
    def balance_min(self) -> int:
        return self._status[S2_BALANCE_MIN]

    @property
    def damper_skip(self) -> int:
        return self._status[S2_DAMPER_SKIP]

    @property
    def low_battery(self) -> bool:
        return self.battery_level == 0

    @property
    def faults(self) -> list[str]:
        """Return a list of the zone's active faults (empty if there are none)."""

        result = []
        if self.sensor_fault:
            result.append(f"sensor fault ({self.sensor_fault})")
        if self.damper_fault:
            result.append("damper fault")
        if self.low_battery:
            result.append("low battery")
        return result
