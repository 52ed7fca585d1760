"""izone provides an async client for the iZone v2 local API."""

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeVar

from . import commands as cmd, exceptions as exc
from .config import IzoneConfig
from .const import SETPOINT_RESEND_DELAY
from .schedule import Schedule
from .schemas import (
    S2_SCHEDULES_V2,
    S2_SYSTEM_V2,
    S2_ZONES_V2,
    SCH_SCHEDULE_STATUS,
    SCH_SYSTEM_STATUS,
    SCH_ZONE_STATUS,
    parse_celsius,
    unwrap_and_decode,
)
from .schemas.commands import (
    MAX_SCHEDULES,
    SCH_HOUR,
    SCH_MINUTE,
    SCH_SCHEDULE_INDEX,
    validate,
)
from .schemas.const import (
    CtrlSensor,
    FanSpeed,
    QueryType,
    SystemMode,
    Weekday,
    ZoneMode,
)
from .system import System
from .transport import Transport
from .zone import Zone

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    import aiohttp


_LOGGER: Final = logging.getLogger(__name__.rpartition(".")[0])

_T = TypeVar("_T")


# user-facing names -> device codes
SYSTEM_MODES: Final = MappingProxyType(
    {
        "cool": SystemMode.COOL,
        "heat": SystemMode.HEAT,
        "vent": SystemMode.VENT,
        "dry": SystemMode.DRY,
        "auto": SystemMode.AUTO,
    }
)
FAN_SPEEDS: Final = MappingProxyType(
    {
        "low": FanSpeed.LOW,
        "medium": FanSpeed.MEDIUM,
        "high": FanSpeed.HIGH,
        "auto": FanSpeed.AUTO,
        "top": FanSpeed.TOP,
        "nongasheat": FanSpeed.NON_GAS_HEAT,
    }
)
ZONE_MODES: Final = MappingProxyType(
    {
        "on": ZoneMode.AUTO,
        "auto": ZoneMode.AUTO,
        "off": ZoneMode.CLOSE,
        "close": ZoneMode.CLOSE,
        "open": ZoneMode.OPEN,
        "override": ZoneMode.OVERRIDE,
        "constant": ZoneMode.CONSTANT,
    }
)
CTRL_SENSORS: Final = MappingProxyType(
    {"screen": CtrlSensor.SCREEN, "remote": CtrlSensor.REMOTE}
)
DAY_NAMES: Final = MappingProxyType(
    {
        "m": Weekday.MONDAY,
        "mon": Weekday.MONDAY,
        "monday": Weekday.MONDAY,
        "tu": Weekday.TUESDAY,
        "tue": Weekday.TUESDAY,
        "tuesday": Weekday.TUESDAY,
        "w": Weekday.WEDNESDAY,
        "wed": Weekday.WEDNESDAY,
        "wednesday": Weekday.WEDNESDAY,
        "th": Weekday.THURSDAY,
        "thu": Weekday.THURSDAY,
        "thursday": Weekday.THURSDAY,
        "f": Weekday.FRIDAY,
        "fri": Weekday.FRIDAY,
        "friday": Weekday.FRIDAY,
        "sa": Weekday.SATURDAY,
        "sat": Weekday.SATURDAY,
        "saturday": Weekday.SATURDAY,
        "su": Weekday.SUNDAY,
        "sun": Weekday.SUNDAY,
        "sunday": Weekday.SUNDAY,
    }
)


def _lookup(table: Mapping[str, _T], name: str | _T, what: str) -> _T:
    """Return the value of a (case-insensitive) name from a table of choices."""

    if not isinstance(name, str):
        return name
    try:
        return table[name.strip().lower()]
    except KeyError:
        raise exc.InputValidationError(
            f"Invalid {what} '{name}' (valid values: {', '.join(table)})"
        ) from None


def parse_days(days: Iterable[str | Weekday]) -> frozenset[Weekday]:
    """Return a set of weekdays from a list of names, e.g. ['mon', 'tu', 'F'].

    Unlike the controller, an unknown day name is rejected.
    """

    return frozenset(
        d if isinstance(d, Weekday) else _lookup(DAY_NAMES, d, "day")
        for d in days
    )


def parse_time(value: str | tuple[int, int]) -> tuple[int, int]:
    """Return an (hour, minute) pair from 'HH:MM' (or from a pair)."""

    if isinstance(value, str):
        hour, sep, minute = value.strip().partition(":")
        try:
            if not sep:
                raise ValueError(value)
            value = (int(hour), int(minute))
        except ValueError:
            raise exc.InputValidationError(
                f"Invalid time '{value}' (must be HH:MM, e.g. 07:30)"
            ) from None

    hour, minute = value
    validate(SCH_HOUR, hour, "Hour")
    validate(SCH_MINUTE, minute, "Minute")
    return hour, minute


class IzoneClient:
    """Provide a client to access the local API of an iZone controller.

    Each method is one user-facing operation: it validates its arguments (so that
    nothing is sent if any are invalid), then sends one command (or a short, fixed
    sequence of commands), or queries and decodes the controller's state.
    """

    def __init__(
        self,
        websession: aiohttp.ClientSession,
        /,
        *,
        config: IzoneConfig | None = None,
        debug: bool = False,
    ) -> None:
        """Construct the IzoneClient object."""

        self.logger = _LOGGER
        if debug:
            self.logger.setLevel(logging.DEBUG)
            self.logger.debug("Debug mode explicitly enabled via kwarg.")

        self.config: Final = config or IzoneConfig()
        self.transport = Transport(websession, self.config, logger=self.logger)

    def __str__(self) -> str:
        """Return a string representation of this object."""
        return f"{self.__class__.__name__}(transport='{self.transport}')"

    async def _send(self, *commands: cmd.Command) -> None:
        """Send the commands in order, stopping at the first failure."""

        for command in commands:
            await self.transport.command(command)

    #
    # Reads...

    async def get_system(self) -> System:
        """Return the state of the system."""

        response = await self.transport.query(QueryType.SYSTEM)
        status = unwrap_and_decode(SCH_SYSTEM_STATUS, S2_SYSTEM_V2, response)
        return System(status, self.logger)

    async def get_zone(self, name: str) -> Zone:
        """Return the state of a zone (by its name)."""

        index = self.config.zone_index(name)

        response = await self.transport.query(self.config.zone_query_type, index)
        status = unwrap_and_decode(SCH_ZONE_STATUS, S2_ZONES_V2, response)
        return Zone(index, status, self.logger)

    async def get_zones(self) -> list[Zone]:
        """Return the state of every configured zone, sorted by name."""
        return [await self.get_zone(name) for name in sorted(self.config.zones)]

    async def get_schedule(self, index: int) -> Schedule:
        """Return the state of a schedule (by its index, 0-7)."""

        validate(SCH_SCHEDULE_INDEX, index, "Schedule index")

        response = await self.transport.query(self.config.schedule_query_type, index)
        status = unwrap_and_decode(SCH_SCHEDULE_STATUS, S2_SCHEDULES_V2, response)
        return Schedule(index, status, self.logger)

    async def get_schedules(self) -> list[Schedule]:
        """Return the state of every schedule, sorted by index."""
        return [await self.get_schedule(i) for i in range(MAX_SCHEDULES)]

    #
    # System...

    async def turn_on(self) -> None:
        await self._send(cmd.SysOn(True))

    async def turn_off(self) -> None:
        await self._send(cmd.SysOn(False))

    async def set_mode(self, mode: str | SystemMode) -> None:
        """Set the system mode (cool, heat, vent, dry, auto)."""
        await self._send(cmd.SysMode(_lookup(SYSTEM_MODES, mode, "mode")))

    async def set_fan(self, fan: str | FanSpeed) -> None:
        """Set the fan speed (low, medium, high, auto, top)."""
        await self._send(cmd.SysFan(_lookup(FAN_SPEEDS, fan, "fan speed")))

    async def set_setpoint(self, celsius: str | float) -> None:
        """Set the system setpoint (15.0-30.0°C).

        The command is sent twice, a second apart, as the controller can drop the
        first of a new setpoint.
        """

        command = cmd.SysSetpoint(parse_celsius(celsius))

        await self._send(command)
        await asyncio.sleep(SETPOINT_RESEND_DELAY)
        await self._send(command)

    async def set_sleep_timer(self, minutes: int) -> None:
        """Set the sleep timer (0 to cancel it)."""
        await self._send(cmd.SysSleepTimer(minutes))

    async def set_economy_lock(
        self,
        enable: bool,
        minimum: str | float | None = None,
        maximum: str | float | None = None,
    ) -> None:
        """Enable/disable the economy lock, and optionally set its setpoint limits."""

        commands: list[cmd.Command] = [cmd.EconomyLock(enable)]
        if minimum is not None:
            commands.append(cmd.EconomyMin(parse_celsius(minimum)))
        if maximum is not None:
            commands.append(cmd.EconomyMax(parse_celsius(maximum)))

        await self._send(*commands)

    async def set_filter_warning(self, months: int) -> None:
        """Set the filter warning interval (0 to disable, 3, 6 or 12 months)."""
        await self._send(cmd.FilterWarn(months))

    async def reset_warning(self, kind: str) -> None:
        """Clear a warning on the controller (e.g. 'filter')."""
        await self._send(cmd.ResetWarning(kind))

    async def set_damper_time(self, seconds: int) -> None:
        await self._send(cmd.DamperTime(seconds))

    async def set_auto_mode_deadband(self, celsius: str | float) -> None:
        """Set the auto mode deadband (0.75-5.0°C)."""

        await self._send(cmd.AutoModeDeadB(parse_celsius(celsius)))

    async def set_airflow_lock(self, enable: bool) -> None:
        await self._send(cmd.AirflowLock(enable))

    async def set_airflow_min_lock(self, enable: bool) -> None:
        await self._send(cmd.AirflowMinLock(enable))

    async def set_static_pressure(self, level: int) -> None:
        """Set the static pressure level (0-4)."""
        await self._send(cmd.StaticP(level))

    async def set_open_dampers_when_off(self, enable: bool) -> None:
        await self._send(cmd.OpenDampersWhenOff(enable))

    async def set_scrooge_mode(self, enable: bool) -> None:
        await self._send(cmd.ScroogeMode(enable))

    async def set_reverse_dampers(self, enable: bool) -> None:
        await self._send(cmd.ReverseDampers(enable))

    async def set_constant_control_by_area(
        self, enable: bool, area: int | None = None
    ) -> None:
        """Enable/disable constant control by area, and optionally set the area."""

        commands: list[cmd.Command] = [cmd.CnstCtrlAreaEn(enable)]
        if area is not None:
            commands.append(cmd.CnstCtrlArea(area))

        await self._send(*commands)

    #
    # Coolbreeze (evaporative cooler)...

    async def set_coolbreeze_fan_speed(self, percent: int) -> None:
        await self._send(cmd.CoolbreezeFanSpeed(percent))

    async def set_coolbreeze_rh_setpoint(self, percent: int) -> None:
        await self._send(cmd.CoolbreezeRhSetpoint(percent))

    async def set_coolbreeze_prewash(
        self, enable: bool, minutes: int | None = None
    ) -> None:
        """Enable/disable prewash, and optionally set its duration (1-60 minutes)."""

        commands: list[cmd.Command] = [cmd.CoolbreezePrewEn(enable)]
        if minutes is not None:
            commands.append(cmd.CoolbreezePrewTime(minutes))

        await self._send(*commands)

    async def set_coolbreeze_drain_after_prewash(self, enable: bool) -> None:
        await self._send(cmd.CoolbreezeDrAfPrewEn(enable))

    async def set_coolbreeze_drain_cycle(
        self, enable: bool, hours: int | None = None
    ) -> None:
        """Enable/disable the drain cycle, and optionally set its period (hours)."""

        commands: list[cmd.Command] = [cmd.CoolbreezeDrCycEn(enable)]
        if hours is not None:
            commands.append(cmd.CoolbreezeDrCycPer(hours))

        await self._send(*commands)

    async def set_coolbreeze_postwash(
        self, enable: bool, minutes: int | None = None
    ) -> None:
        """Enable/disable postwash, and optionally set its duration (5-30 minutes)."""

        commands: list[cmd.Command] = [cmd.CoolbreezePostwEn(enable)]
        if minutes is not None:
            commands.append(cmd.CoolbreezePostwT(minutes))

        await self._send(*commands)

    async def set_coolbreeze_drain_before_postwash(self, enable: bool) -> None:
        await self._send(cmd.CoolbreezeDrBfPostwEn(enable))

    async def set_coolbreeze_inverter(self, enable: bool) -> None:
        await self._send(cmd.CoolbreezeInverter(enable))

    async def set_coolbreeze_resume_last(self, enable: bool) -> None:
        await self._send(cmd.CoolbreezeResumeLast(enable))

    async def set_coolbreeze_fan_max_auto(self, percent: int) -> None:
        await self._send(cmd.CoolbreezeFanMaxAuto(percent))

    async def set_coolbreeze_fan_max(self, percent: int) -> None:
        await self._send(cmd.CoolbreezeFanMax(percent))

    async def set_coolbreeze_exhaust_max(self, percent: int) -> None:
        await self._send(cmd.CoolbreezeExhMax(percent))

    async def set_coolbreeze_exhaust(self, enable: bool) -> None:
        await self._send(cmd.CoolbreezeExhEn(enable))

    async def set_coolbreeze_control_sensor(self, sensor: str | CtrlSensor) -> None:
        """Set which sensor controls the cooler (screen, remote)."""
        await self._send(
            cmd.CoolbreezeCtrlSens(_lookup(CTRL_SENSORS, sensor, "control sensor"))
        )

    async def set_coolbreeze_temp_calibration(self, tenths: int) -> None:
        """Set the temperature calibration (-50 to 50 tenths of a degree)."""
        await self._send(cmd.CoolbreezeCalibTemp(tenths))

    async def set_coolbreeze_temp_deadband(self, celsius: str | float) -> None:
        """Set the temperature deadband (1.0-5.0°C)."""
        await self._send(cmd.CoolbreezeDeadTemp(parse_celsius(celsius)))

    async def set_coolbreeze_auto_fan_max_time(self, minutes: int) -> None:
        await self._send(cmd.CoolbreezeAutoFanMaxTime(minutes))

    #
    # Ventilation...

    async def set_ventilation_rh_setpoint(self, percent: int) -> None:
        await self._send(cmd.VentilationRfSetpoint(percent))

    async def set_ventilation_vocs_setpoint(self, ppb: int) -> None:
        await self._send(cmd.VentilationVocsSetpoint(ppb))

    async def set_ventilation_eco2_setpoint(self, ppm: int) -> None:
        await self._send(cmd.VentilationEco2Setpoint(ppm))

    async def set_ventilation_fan_stage_delay(self, minutes: int) -> None:
        await self._send(cmd.VentilationFanStageDelay(minutes))

    async def set_ventilation_cycle_fan_off(self, enable: bool) -> None:
        await self._send(cmd.VentilationCycleFanOff(enable))

    async def set_ventilation_use_rh_control(self, enable: bool) -> None:
        await self._send(cmd.VentilationUseRhControl(enable))

    async def set_ventilation_use_vocs_control(self, enable: bool) -> None:
        await self._send(cmd.VentilationUseVcosControl(enable))

    async def set_ventilation_use_eco2_control(self, enable: bool) -> None:
        await self._send(cmd.VentilationUseEco2Control(enable))

    #
    # Zones (by name)...

    async def set_zone_mode(self, name: str, mode: str | ZoneMode) -> None:
        """Set the mode of a zone (on/auto, off/close, open, override, constant)."""

        index = self.config.zone_index(name)
        await self._send(cmd.ZoneStatus(index, _lookup(ZONE_MODES, mode, "zone mode")))

    async def set_zone_setpoint(self, name: str, celsius: str | float) -> None:
        """Set the setpoint of a zone (15.0-30.0°C)."""

        index = self.config.zone_index(name)
        await self._send(cmd.ZoneSetpoint(index, parse_celsius(celsius)))

    async def set_zone_max_air(self, name: str, percent: int) -> None:
        index = self.config.zone_index(name)
        await self._send(cmd.ZoneAirflow(index, max_air=percent))

    async def set_zone_min_air(self, name: str, percent: int) -> None:
        index = self.config.zone_index(name)
        await self._send(cmd.ZoneAirflow(index, min_air=percent))

    async def set_zone_name(self, name: str, new_name: str) -> None:
        """Rename a zone on the controller (at most 15 characters).

        The local name->index table is not changed.
        """

        index = self.config.zone_index(name)
        await self._send(cmd.ZoneName(index, new_name))

    async def set_zone_balance_max(self, name: str, percent: int) -> None:
        index = self.config.zone_index(name)
        await self._send(cmd.ZoneBalance(index, max_air=percent))

    async def set_zone_balance_min(self, name: str, percent: int) -> None:
        index = self.config.zone_index(name)
        await self._send(cmd.ZoneBalance(index, min_air=percent))

    async def set_zone_calibration(self, name: str, tenths: int) -> None:
        """Set the calibration offset of a zone's sensor (-50 to 50 tenths of °C)."""

        index = self.config.zone_index(name)
        await self._send(cmd.ZoneCalibration(index, tenths))

    async def set_zone_bypass(self, name: str, enable: bool) -> None:
        index = self.config.zone_index(name)
        await self._send(cmd.ZoneBypass(index, enable))

    async def set_zone_area(self, name: str, area: int) -> None:
        """Set the floor area of a zone (0-1000 m²)."""

        index = self.config.zone_index(name)
        await self._send(cmd.ZoneArea(index, area))

    #
    # Schedules (by index)...

    async def set_schedule_name(self, index: int, name: str) -> None:
        await self._send(cmd.SchedName(index, name))

    async def set_schedule_time(
        self,
        index: int,
        start: str | tuple[int, int],
        stop: str | tuple[int, int],
        days: Iterable[str | Weekday] | None = None,
    ) -> None:
        """Set the start/stop times of a schedule, and (optionally) its days.

        As the controller sets both together, any days not given are disabled.
        """

        await self._send(
            cmd.SchedSettings(
                index, parse_time(start), parse_time(stop), parse_days(days or ())
            )
        )

    async def set_schedule_days(
        self, index: int, days: Iterable[str | Weekday]
    ) -> None:
        """Set the days of a schedule (its start/stop times are sent as not set)."""
        await self._send(cmd.SchedSettings(index, None, None, parse_days(days)))

    async def set_schedule_mode_fan(
        self,
        index: int,
        mode: str | SystemMode | None = None,
        fan: str | FanSpeed | None = None,
    ) -> None:
        """Set the system mode and/or fan speed of a schedule (at least one)."""

        commands: list[cmd.Command] = []
        if mode is not None:
            mode = _lookup(SYSTEM_MODES, mode, "mode")
            commands.append(cmd.SchedAcMode(index, mode))
        if fan is not None:
            fan = _lookup(FAN_SPEEDS, fan, "fan speed")
            commands.append(cmd.SchedAcFan(index, fan))

        if not commands:
            raise exc.InputValidationError("A mode and/or a fan speed is required")

        await self._send(*commands)

    async def enable_schedule(self, index: int) -> None:
        await self._send(cmd.SchedEnable(index, True))

    async def disable_schedule(self, index: int) -> None:
        await self._send(cmd.SchedEnable(index, False))

    async def set_schedule_zones(
        self,
        index: int,
        overrides: Iterable[tuple[str, str | ZoneMode, str | float]],
    ) -> None:
        """Set the zone overrides of a schedule, as (zone name, mode, setpoint).

        Unlike the controller, an unknown zone or invalid setpoint is rejected (rather
        than skipped).
        """

        validate(SCH_SCHEDULE_INDEX, index, "Schedule index")

        zones = tuple(
            cmd.ZoneOverrideSetting(
                self.config.zone_index(name),
                _lookup(ZONE_MODES, mode, "zone mode"),
                parse_celsius(setpoint),
            )
            for name, mode, setpoint in overrides
        )

        await self._send(cmd.SchedZones(index, zones))
