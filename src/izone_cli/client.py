#!/usr/bin/env python3
"""izone - a CLI utility to control an iZone controller, via its local API."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, TypeVar

import aiohttp
import asyncclick as click
from colorama import Fore, init as colorama_init

from izone import IzoneClient, exceptions as exc
from izone.main import CTRL_SENSORS, FAN_SPEEDS, SYSTEM_MODES, ZONE_MODES
from izone.schemas.commands import FILTER_WARNING_MONTHS, MAX_SCHEDULES

from .config import build_config
from .render import (
    colour,
    render_coolbreeze,
    render_error,
    render_schedule,
    render_schedules,
    render_system,
    render_temperature,
    render_ventilation,
    render_zone,
    render_zones,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from izone import IzoneConfig

_T = TypeVar("_T")

SZ_CONFIG: Final = "config"
SZ_DEBUG: Final = "debug"

_ON_OFF: Final = click.Choice(["on", "off"], case_sensitive=False)


_LOGGER: Final = logging.getLogger(__name__)


def _is_on(value: str) -> bool:
    return value.lower() == "on"


def _check_schedule_idx(ctx: click.Context, param: click.Parameter, value: int) -> int:
    """Validate the schedule index is 0 to 7."""

    if value is not None and not 0 <= value < MAX_SCHEDULES:
        raise click.BadParameter(f"must be 0 to {MAX_SCHEDULES - 1}")

    return value


def _check_positive_int(ctx: click.Context, param: click.Parameter, value: int) -> int:
    """Validate the parameter is a positive int."""

    if value is not None and value < 0:
        raise click.BadParameter("must >= 0")

    return value


def parse_zone_setting(value: str) -> tuple[str, str, str]:
    """Return (zone, mode, setpoint) from a string such as 'kitchen:auto:22.5'."""

    parts = value.split(":")
    if len(parts) != 3 or not all(parts):
        raise click.BadParameter(
            f"'{value}' is not ZONE:MODE:SETPOINT (e.g. kitchen:auto:22.5)"
        )
    return parts[0], parts[1], parts[2]


async def _run(
    ctx: click.Context, action: Callable[[IzoneClient], Awaitable[_T]]
) -> _T:
    """Run one operation with a client (and its own websession)."""

    config: IzoneConfig = ctx.obj[SZ_CONFIG]

    async with aiohttp.ClientSession() as websession:
        client = IzoneClient(websession, config=config, debug=ctx.obj[SZ_DEBUG])
        return await action(client)


def _done(message: str) -> None:
    click.echo(colour(message, Fore.GREEN))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log each request/response.")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging.")
@click.option("--host", "-H", default=None, help="The controller's IP address/URL.")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="The config file (default: search for izone.toml).",
)
@click.pass_context
async def cli(
    ctx: click.Context,
    verbose: bool | None = None,
    debug: bool | None = None,
    host: str | None = None,
    config_file: Path | None = None,
) -> None:
    """A CLI for the local API of an iZone controller."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    ctx.ensure_object(dict)
    ctx.obj[SZ_CONFIG] = build_config(
        host=host, config_file=config_file, verbose=bool(verbose or debug)
    )
    ctx.obj[SZ_DEBUG] = bool(debug)

    _LOGGER.debug(f"Using: {ctx.obj[SZ_CONFIG]}")


#
# Top-level shortcuts...


@cli.command("on")
@click.pass_context
async def turn_on(ctx: click.Context) -> None:
    """Turn the aircon on."""

    await _run(ctx, lambda c: c.turn_on())
    _done("Aircon turned ON")


@cli.command("off")
@click.pass_context
async def turn_off(ctx: click.Context) -> None:
    """Turn the aircon off."""

    await _run(ctx, lambda c: c.turn_off())
    click.echo(colour("Aircon turned OFF", Fore.RED))


@cli.command("status")
@click.pass_context
async def status(ctx: click.Context) -> None:
    """Show the status of the system."""

    aircon = await _run(ctx, lambda c: c.get_system())
    click.echo(render_system(aircon))


#
# System...


@cli.group()
async def system() -> None:
    """Query/control the system (the aircon as a whole)."""


@system.command("status")
@click.pass_context
async def system_status(ctx: click.Context) -> None:
    """Show the status of the system."""

    aircon = await _run(ctx, lambda c: c.get_system())
    click.echo(render_system(aircon))


@system.command("temperature")
@click.pass_context
async def system_temperature(ctx: click.Context) -> None:
    """Show the controller's temperature."""

    aircon = await _run(ctx, lambda c: c.get_system())
    click.echo(render_temperature(aircon))


@system.command("on")
@click.pass_context
async def system_on(ctx: click.Context) -> None:
    """Turn the aircon on."""

    await _run(ctx, lambda c: c.turn_on())
    _done("Aircon turned ON")


@system.command("off")
@click.pass_context
async def system_off(ctx: click.Context) -> None:
    """Turn the aircon off."""

    await _run(ctx, lambda c: c.turn_off())
    click.echo(colour("Aircon turned OFF", Fore.RED))


@system.command("mode")
@click.argument("mode", type=click.Choice(list(SYSTEM_MODES), case_sensitive=False))
@click.pass_context
async def system_mode(ctx: click.Context, mode: str) -> None:
    """Set the system mode."""

    await _run(ctx, lambda c: c.set_mode(mode))
    _done(f"Mode set to {mode.lower()}")


@system.command("fan")
@click.argument("fan", type=click.Choice(list(FAN_SPEEDS), case_sensitive=False))
@click.pass_context
async def system_fan(ctx: click.Context, fan: str) -> None:
    """Set the fan speed."""

    await _run(ctx, lambda c: c.set_fan(fan))
    _done(f"Fan speed set to {fan.lower()}")


@system.command("setpoint")
@click.argument("celsius")
@click.pass_context
async def system_setpoint(ctx: click.Context, celsius: str) -> None:
    """Set the system setpoint (15.0-30.0°C)."""

    await _run(ctx, lambda c: c.set_setpoint(celsius))
    _done(f"Setpoint set to {celsius}°C")


@system.command("sleep-timer")
@click.argument("minutes", type=int, callback=_check_positive_int)
@click.pass_context
async def system_sleep_timer(ctx: click.Context, minutes: int) -> None:
    """Set the sleep timer (0 to cancel it)."""

    await _run(ctx, lambda c: c.set_sleep_timer(minutes))
    _done(f"Sleep timer set to {minutes} minutes")


@system.command("economy-lock")
@click.argument("state", type=_ON_OFF)
@click.option("--min", "minimum", default=None, help="Minimum setpoint (°C).")
@click.option("--max", "maximum", default=None, help="Maximum setpoint (°C).")
@click.pass_context
async def system_economy_lock(
    ctx: click.Context, state: str, minimum: str | None, maximum: str | None
) -> None:
    """Enable/disable the economy lock (and set its limits)."""

    await _run(ctx, lambda c: c.set_economy_lock(_is_on(state), minimum, maximum))
    _done(f"Economy lock turned {state.upper()}")


@system.command("filter-warning")
@click.argument(
    "months", type=click.Choice([str(m) for m in FILTER_WARNING_MONTHS])
)
@click.pass_context
async def system_filter_warning(ctx: click.Context, months: str) -> None:
    """Set the filter warning interval (0 to disable)."""

    await _run(ctx, lambda c: c.set_filter_warning(int(months)))
    _done(f"Filter warning set to {months} months")


@system.command("reset-warning")
@click.argument("kind", default="filter")
@click.pass_context
async def system_reset_warning(ctx: click.Context, kind: str) -> None:
    """Clear a warning on the controller (default: filter)."""

    await _run(ctx, lambda c: c.reset_warning(kind))
    _done(f"Warning reset: {kind}")


@system.command("damper-time")
@click.argument("seconds", type=int, callback=_check_positive_int)
@click.pass_context
async def system_damper_time(ctx: click.Context, seconds: int) -> None:
    """Set the damper time."""

    await _run(ctx, lambda c: c.set_damper_time(seconds))
    _done(f"Damper time set to {seconds}")


@system.command("auto-mode-deadband")
@click.argument("celsius")
@click.pass_context
async def system_auto_mode_deadband(ctx: click.Context, celsius: str) -> None:
    """Set the auto mode deadband (0.75-5.0°C)."""

    await _run(ctx, lambda c: c.set_auto_mode_deadband(celsius))
    _done(f"Auto mode deadband set to {celsius}°C")


@system.command("static-pressure")
@click.argument("level", type=int)
@click.pass_context
async def system_static_pressure(ctx: click.Context, level: int) -> None:
    """Set the static pressure level (0-4)."""

    await _run(ctx, lambda c: c.set_static_pressure(level))
    _done(f"Static pressure set to {level}")


@system.command("constant-area")
@click.argument("state", type=_ON_OFF)
@click.option("--area", type=int, default=None, help="The area (m²).")
@click.pass_context
async def system_constant_area(
    ctx: click.Context, state: str, area: int | None
) -> None:
    """Enable/disable constant control by area (and set the area)."""

    await _run(ctx, lambda c: c.set_constant_control_by_area(_is_on(state), area))
    _done(f"Constant control by area turned {state.upper()}")


def _register_system_flag(name: str, method: str, label: str) -> None:
    """Register a system command that turns a setting on/off."""

    @system.command(name, help=f"Turn {label.lower()} on/off.")
    @click.argument("state", type=_ON_OFF)
    @click.pass_context
    async def command(ctx: click.Context, state: str) -> None:
        await _run(ctx, lambda c: getattr(c, method)(_is_on(state)))
        _done(f"{label} turned {state.upper()}")


for _name, _method, _label in (
    ("airflow-lock", "set_airflow_lock", "Airflow lock"),
    ("airflow-min-lock", "set_airflow_min_lock", "Airflow minimum lock"),
    ("open-dampers-when-off", "set_open_dampers_when_off", "Open dampers when off"),
    ("scrooge-mode", "set_scrooge_mode", "Scrooge mode"),
    ("reverse-dampers", "set_reverse_dampers", "Reverse dampers"),
):
    _register_system_flag(_name, _method, _label)


#
# Zones...


@cli.group()
async def zone() -> None:
    """Query/control the zones (by name, e.g. kitchen)."""


@zone.command("status")
@click.argument("name", required=False)
@click.pass_context
async def zone_status(ctx: click.Context, name: str | None) -> None:
    """Show the status of a zone (or a summary of all zones)."""

    if name is None:
        zones = await _run(ctx, lambda c: c.get_zones())
        click.echo(render_zones(zones))
    else:
        zon = await _run(ctx, lambda c: c.get_zone(name))
        click.echo(render_zone(zon))


@zone.command("temp")
@click.argument("name")
@click.pass_context
async def zone_temp(ctx: click.Context, name: str) -> None:
    """Show the temperature of a zone."""

    zon = await _run(ctx, lambda c: c.get_zone(name))
    click.echo(f"{zon.name}: {zon.temperature_display}°C")


@zone.command("mode")
@click.argument("name")
@click.argument("mode", type=click.Choice(list(ZONE_MODES), case_sensitive=False))
@click.pass_context
async def zone_mode(ctx: click.Context, name: str, mode: str) -> None:
    """Set the mode of a zone."""

    await _run(ctx, lambda c: c.set_zone_mode(name, mode))
    _done(f"Zone {name} set to {mode.lower()}")


def _register_zone_mode(mode: str) -> None:
    """Register a shortcut for a zone mode, e.g. `izone zone open kitchen`."""

    @zone.command(mode, help=f"Set a zone to {mode}.")
    @click.argument("name")
    @click.pass_context
    async def command(ctx: click.Context, name: str) -> None:
        await _run(ctx, lambda c: c.set_zone_mode(name, mode))
        _done(f"Zone {name} set to {mode}")


for _mode in ZONE_MODES:
    _register_zone_mode(_mode)


@zone.command("setpoint")
@click.argument("name")
@click.argument("celsius")
@click.pass_context
async def zone_setpoint(ctx: click.Context, name: str, celsius: str) -> None:
    """Set the setpoint of a zone (15.0-30.0°C)."""

    await _run(ctx, lambda c: c.set_zone_setpoint(name, celsius))
    _done(f"Zone {name} setpoint set to {celsius}°C")


@zone.command("rename")
@click.argument("name")
@click.argument("new_name")
@click.pass_context
async def zone_rename(ctx: click.Context, name: str, new_name: str) -> None:
    """Rename a zone on the controller (max 15 characters)."""

    await _run(ctx, lambda c: c.set_zone_name(name, new_name))
    _done(f"Zone {name} renamed to {new_name}")


@zone.command("bypass")
@click.argument("name")
@click.argument("state", type=_ON_OFF)
@click.pass_context
async def zone_bypass(ctx: click.Context, name: str, state: str) -> None:
    """Enable/disable a zone as a bypass zone."""

    await _run(ctx, lambda c: c.set_zone_bypass(name, _is_on(state)))
    _done(f"Zone {name} bypass turned {state.upper()}")


def _register_zone_value(name: str, method: str, label: str, units: str) -> None:
    """Register a zone command that sets an integer value."""

    @zone.command(name, help=f"Set the {label} of a zone ({units}).")
    @click.argument("zone_name", metavar="NAME")
    @click.argument("value", type=int)
    @click.pass_context
    async def command(ctx: click.Context, zone_name: str, value: int) -> None:
        await _run(ctx, lambda c: getattr(c, method)(zone_name, value))
        _done(f"Zone {zone_name} {label} set to {value}")


for _name, _method, _label, _units in (
    ("max-air", "set_zone_max_air", "maximum airflow", "0-100%"),
    ("min-air", "set_zone_min_air", "minimum airflow", "0-100%"),
    ("balance-max", "set_zone_balance_max", "maximum balance", "0-100%"),
    ("balance-min", "set_zone_balance_min", "minimum balance", "0-100%"),
    ("calibration", "set_zone_calibration", "sensor calibration", "-50 to 50 tenths"),
    ("area", "set_zone_area", "area", "0-1000 m²"),
):
    _register_zone_value(_name, _method, _label, _units)


#
# Schedules...


@cli.group()
async def schedule() -> None:
    """Query/control the schedules (favourites, by index 0-7)."""


@schedule.command("status")
@click.argument("index", type=int, required=False, callback=_check_schedule_idx)
@click.pass_context
async def schedule_status(ctx: click.Context, index: int | None) -> None:
    """Show the status of a schedule (or a summary of all schedules)."""

    if index is None:
        schedules = await _run(ctx, lambda c: c.get_schedules())
        click.echo(render_schedules(schedules))
    else:
        sch = await _run(ctx, lambda c: c.get_schedule(index))
        click.echo(render_schedule(sch))


@schedule.command("name")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.argument("name")
@click.pass_context
async def schedule_name(ctx: click.Context, index: int, name: str) -> None:
    """Set the name of a schedule (max 15 characters)."""

    await _run(ctx, lambda c: c.set_schedule_name(index, name))
    _done(f"Schedule {index} renamed to {name}")


@schedule.command("time")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.argument("start")
@click.argument("stop")
@click.option("--days", default=None, help="Comma-separated days, e.g. mon,tue,fri.")
@click.pass_context
async def schedule_time(
    ctx: click.Context, index: int, start: str, stop: str, days: str | None
) -> None:
    """Set the start/stop times (HH:MM) of a schedule.

    As the controller sets times and days together, days not given are disabled.
    """

    day_list = [d for d in (days or "").split(",") if d.strip()]

    await _run(ctx, lambda c: c.set_schedule_time(index, start, stop, day_list))
    _done(f"Schedule {index} time set to {start}-{stop}")


@schedule.command("days")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.argument("days", nargs=-1, required=True)
@click.pass_context
async def schedule_days(ctx: click.Context, index: int, days: tuple[str, ...]) -> None:
    """Set the days of a schedule (e.g. mon tue fri)."""

    await _run(ctx, lambda c: c.set_schedule_days(index, days))
    _done(f"Schedule {index} days set")


@schedule.command("mode-fan")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.option(
    "--mode", type=click.Choice(list(SYSTEM_MODES), case_sensitive=False)
)
@click.option("--fan", type=click.Choice(list(FAN_SPEEDS), case_sensitive=False))
@click.pass_context
async def schedule_mode_fan(
    ctx: click.Context, index: int, mode: str | None, fan: str | None
) -> None:
    """Set the mode and/or fan speed of a schedule."""

    await _run(ctx, lambda c: c.set_schedule_mode_fan(index, mode, fan))
    _done(f"Schedule {index} mode/fan set")


@schedule.command("enable")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.pass_context
async def schedule_enable(ctx: click.Context, index: int) -> None:
    """Enable a schedule."""

    await _run(ctx, lambda c: c.enable_schedule(index))
    _done(f"Schedule {index} enabled")


@schedule.command("disable")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.pass_context
async def schedule_disable(ctx: click.Context, index: int) -> None:
    """Disable a schedule."""

    await _run(ctx, lambda c: c.disable_schedule(index))
    click.echo(colour(f"Schedule {index} disabled", Fore.RED))


@schedule.command("zones")
@click.argument("index", type=int, callback=_check_schedule_idx)
@click.argument("settings", nargs=-1, required=True)
@click.pass_context
async def schedule_zones(
    ctx: click.Context, index: int, settings: tuple[str, ...]
) -> None:
    """Set the zone overrides of a schedule.

    Each is ZONE:MODE:SETPOINT, e.g. kitchen:auto:22.5 (zones not given are unchanged).
    """

    overrides = [parse_zone_setting(s) for s in settings]

    await _run(ctx, lambda c: c.set_schedule_zones(index, overrides))
    _done(f"Schedule {index} zone settings updated")


#
# Coolbreeze (evaporative cooler)...


@cli.group()
async def coolbreeze() -> None:
    """Query/configure an evaporative cooler (Coolbreeze)."""


@coolbreeze.command("status")
@click.pass_context
async def coolbreeze_status(ctx: click.Context) -> None:
    """Show the configuration of the evaporative cooler."""

    aircon = await _run(ctx, lambda c: c.get_system())
    click.echo(render_coolbreeze(aircon.coolbreeze))


def _register_optioned_flag(
    group: click.Group, name: str, method: str, label: str, option: str, units: str
) -> None:
    """Register a command that turns a setting on/off, with a dependent value."""

    @group.command(name, help=f"Turn {label.lower()} on/off (and set its {units}).")
    @click.argument("state", type=_ON_OFF)
    @click.option(f"--{option}", "value", type=int, default=None, help=units)
    @click.pass_context
    async def command(ctx: click.Context, state: str, value: int | None) -> None:
        await _run(ctx, lambda c: getattr(c, method)(_is_on(state), value))
        _done(f"{label} turned {state.upper()}")


for _name, _method, _label, _option, _units in (
    ("prewash", "set_coolbreeze_prewash", "Prewash", "minutes", "1-60 minutes"),
    ("drain-cycle", "set_coolbreeze_drain_cycle", "Drain cycle", "hours", "1-50 hours"),
    ("postwash", "set_coolbreeze_postwash", "Postwash", "minutes", "5-30 minutes"),
):
    _register_optioned_flag(coolbreeze, _name, _method, _label, _option, _units)


def _register_flag(group: click.Group, name: str, method: str, label: str) -> None:
    """Register a command that turns a setting on/off."""

    @group.command(name, help=f"Turn {label.lower()} on/off.")
    @click.argument("state", type=_ON_OFF)
    @click.pass_context
    async def command(ctx: click.Context, state: str) -> None:
        await _run(ctx, lambda c: getattr(c, method)(_is_on(state)))
        _done(f"{label} turned {state.upper()}")


def _register_value(
    group: click.Group, name: str, method: str, label: str, units: str
) -> None:
    """Register a command that sets an integer value."""

    @group.command(name, help=f"Set the {label} ({units}).")
    @click.argument("value", type=int)
    @click.pass_context
    async def command(ctx: click.Context, value: int) -> None:
        await _run(ctx, lambda c: getattr(c, method)(value))
        _done(f"{label.capitalize()} set to {value}")


for _name, _label in (
    ("drain-after-prewash", "Drain after prewash"),
    ("drain-before-postwash", "Drain before postwash"),
    ("inverter", "Inverter"),
    ("resume-last", "Resume last"),
    ("exhaust", "Exhaust"),
):
    _method = f"set_coolbreeze_{_name.replace('-', '_')}"
    _register_flag(coolbreeze, _name, _method, _label)

for _name, _label, _units in (
    ("fan-speed", "fan speed", "1-100%"),
    ("rh-setpoint", "humidity setpoint", "10-90%"),
    ("fan-max-auto", "maximum fan speed (auto)", "1-100%"),
    ("fan-max", "maximum fan speed", "1-100%"),
    ("exhaust-max", "maximum exhaust", "1-100%"),
    ("temp-calibration", "temperature calibration", "-50 to 50 tenths"),
    ("auto-fan-max-time", "auto fan max time", "0-60 minutes"),
):
    _method = f"set_coolbreeze_{_name.replace('-', '_')}"
    _register_value(coolbreeze, _name, _method, _label, _units)


@coolbreeze.command("control-sensor")
@click.argument("sensor", type=click.Choice(list(CTRL_SENSORS), case_sensitive=False))
@click.pass_context
async def coolbreeze_control_sensor(ctx: click.Context, sensor: str) -> None:
    """Set which sensor controls the evaporative cooler."""

    await _run(ctx, lambda c: c.set_coolbreeze_control_sensor(sensor))
    _done(f"Control sensor set to {sensor.lower()}")


@coolbreeze.command("temp-deadband")
@click.argument("celsius")
@click.pass_context
async def coolbreeze_temp_deadband(ctx: click.Context, celsius: str) -> None:
    """Set the temperature deadband (1.0-5.0°C)."""

    await _run(ctx, lambda c: c.set_coolbreeze_temp_deadband(celsius))
    _done(f"Temperature deadband set to {celsius}°C")


#
# Ventilation...


@cli.group()
async def ventilation() -> None:
    """Query/configure a ventilation unit."""


@ventilation.command("status")
@click.pass_context
async def ventilation_status(ctx: click.Context) -> None:
    """Show the configuration of the ventilation unit."""

    aircon = await _run(ctx, lambda c: c.get_system())
    click.echo(render_ventilation(aircon.ventilation))


for _name, _method, _label in (
    ("cycle-fan-off", "set_ventilation_cycle_fan_off", "Cycle fan off"),
    ("rh-control", "set_ventilation_use_rh_control", "Humidity control"),
    ("vocs-control", "set_ventilation_use_vocs_control", "VOCs control"),
    ("eco2-control", "set_ventilation_use_eco2_control", "eCO2 control"),
):
    _register_flag(ventilation, _name, _method, _label)

for _name, _label, _units in (
    ("rh-setpoint", "humidity setpoint", "5-95%"),
    ("vocs-setpoint", "VOCs setpoint", "50-2500 ppb"),
    ("eco2-setpoint", "eCO2 setpoint", "500-1500 ppm"),
    ("fan-stage-delay", "fan stage delay", "3-240 minutes"),
):
    _method = f"set_ventilation_{_name.replace('-', '_')}"
    _register_value(ventilation, _name, _method, _label, _units)


def main() -> None:
    """Run the CLI."""

    colorama_init()

    try:  # default for ctx.obj is None
        result = asyncio.run(cli(obj={}, standalone_mode=False))
    except click.ClickException as err:  # e.g. UsageError, BadParameter
        err.show()
        sys.exit(1)
    except click.Abort:
        print("Aborted!", file=sys.stderr)
        sys.exit(1)
    except exc.IzoneError as err:
        print(colour(f"Error: {render_error(err)}", Fore.RED), file=sys.stderr)
        sys.exit(1)

    if isinstance(result, int) and result:  # e.g. from ctx.exit()
        sys.exit(result)


if __name__ == "__main__":
    main()
