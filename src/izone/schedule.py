"""Provides handling of iZone schedules (the controller calls them favourites)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from .schemas.codec import ScheduleTime
from .schemas.const import (
    S2_ACTIVE,
    S2_COOLBREEZE,
    S2_DAYS_ENABLED,
    S2_FAN,
    S2_FAN_SPEED,
    S2_MODE,
    S2_NAME,
    S2_RH_SETPOINT,
    S2_SETPOINT,
    S2_START_H,
    S2_START_M,
    S2_STOP_H,
    S2_STOP_M,
    S2_UNIT_SETPOINT,
    S2_ZONES,
    WEEKDAYS,
    FanSpeed,
    SystemMode,
    Weekday,
    ZoneMode,
)
from .zone import EntityBase

if TYPE_CHECKING:
    import logging

    from .schemas import IzScheduleStatusResponseT


class CoolbreezePreset(NamedTuple):
    """The evaporative cooler settings applied by a schedule."""

    unit_setpoint: int
    fan_speed: int
    rh_setpoint: int


class ZoneOverride(NamedTuple):
    """The mode/setpoint a schedule applies to a zone (by position)."""

    mode: ZoneMode | int
    setpoint: int


class Schedule(EntityBase):
    """Instance of a schedule, as at the time of the query."""

    _status: IzScheduleStatusResponseT

    def __init__(
        self, index: int, status: IzScheduleStatusResponseT, logger: logging.Logger
    ) -> None:
        super().__init__(status, logger)

        self._index: Final = index

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
    def active(self) -> bool:
        return self._status[S2_ACTIVE]

    @property
    def mode(self) -> SystemMode | int | None:
        return self._status.get(S2_MODE)

    @property
    def fan(self) -> FanSpeed | int | None:
        return self._status.get(S2_FAN)

    @property
    def start(self) -> ScheduleTime:
        return ScheduleTime(self._status.get(S2_START_H), self._status.get(S2_START_M))

    @property
    def stop(self) -> ScheduleTime:
        return ScheduleTime(self._status.get(S2_STOP_H), self._status.get(S2_STOP_M))

    @property
    def days(self) -> frozenset[Weekday]:
        return self._status[S2_DAYS_ENABLED]

    @property
    def days_in_order(self) -> tuple[Weekday, ...]:
        """Return the enabled days, Monday first."""
        return tuple(d for d in WEEKDAYS if d in self.days)

    @property
    def coolbreeze(self) -> CoolbreezePreset | None:
        if (preset := self._status.get(S2_COOLBREEZE)) is None:
            return None
        return CoolbreezePreset(
            preset[S2_UNIT_SETPOINT], preset[S2_FAN_SPEED], preset[S2_RH_SETPOINT]
        )

    @property
    def zones(self) -> list[ZoneOverride] | None:
        """Return the zone overrides (in zone index order), if there are any."""

        if (zones := self._status.get(S2_ZONES)) is None:
            return None
        return [ZoneOverride(z[S2_MODE], z[S2_SETPOINT]) for z in zones]
