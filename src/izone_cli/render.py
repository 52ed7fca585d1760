"""izone - box-drawn, coloured rendering of the controller's state."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from colorama import Fore, Style

from izone import exceptions as exc
from izone.const import HINT_CHECK_FIRMWARE
from izone.schemas import display, render_enum
from izone.schemas.const import WEEKDAYS, SystemMode, Weekday

if TYPE_CHECKING:
    from collections.abc import Iterable

    from izone import Coolbreeze, Schedule, System, Ventilation, Zone

BOX_WIDTH: Final = 45  # the inner width, between the borders
LABEL_WIDTH: Final = 24

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

_MODE_COLOURS: Final = {
    SystemMode.COOL: Fore.BLUE,
    SystemMode.HEAT: Fore.RED,
    SystemMode.VENT: Fore.WHITE,
    SystemMode.DRY: Fore.YELLOW,
    SystemMode.AUTO: Fore.CYAN,
}

_DAY_LABELS: Final = {
    Weekday.MONDAY: "Mon",
    Weekday.TUESDAY: "Tue",
    Weekday.WEDNESDAY: "Wed",
    Weekday.THURSDAY: "Thu",
    Weekday.FRIDAY: "Fri",
    Weekday.SATURDAY: "Sat",
    Weekday.SUNDAY: "Sun",
}


def colour(text: str, fore: str) -> str:
    return f"{fore}{text}{Style.RESET_ALL}"


def visible_len(text: str) -> int:
    """Return the length of a string as displayed (ignoring colour codes)."""
    return len(_ANSI_ESCAPE.sub("", text))


def box(title: str, lines: Iterable[str], width: int = BOX_WIDTH) -> str:
    """Return a title and some lines, drawn within a double-lined box."""

    def row(text: str) -> str:
        return f"║ {text}{' ' * max(width - 2 - visible_len(text), 0)} ║"

    result = [
        f"╔{'═' * width}╗",
        f"║ {title.center(width - 2)} ║",
        f"╠{'═' * width}╣",
    ]
    result += [row(line) for line in lines]
    result.append(f"╚{'═' * width}╝")
    return "\n".join(result)


def field(label: str, value: str, width: int = LABEL_WIDTH) -> str:
    return f"{label + ':':<{width}} {value}"


def on_off(value: bool | None) -> str:
    if value is None:
        return "N/A"
    return colour("ON", Fore.GREEN) if value else colour("OFF", Fore.RED)


def _opt(value: int | None, units: str = "") -> str:
    return "N/A" if value is None else f"{value}{units}"


def _temp(value: int | None) -> str:
    return "N/A" if value is None else f"{display(value)}°C"


def system_mode(value: SystemMode | int | None) -> str:
    """Return a system mode, coloured as per the controller's own display."""

    if value is None:
        return "N/A"
    text = render_enum(value)
    if fore := _MODE_COLOURS.get(value):  # type: ignore[call-overload]
        return colour(text, fore)
    return text


def render_system(system: System) -> str:
    lines = [
        field("Aircon Power", on_off(system.power)),
        field("Mode", system_mode(system.mode)),
        field("Fan Speed", colour(render_enum(system.fan), Fore.CYAN)),
        field("Target Setpoint", _temp(system.setpoint)),
        field("Controller Temperature", colour(_temp(system.temperature), Fore.CYAN)),
        field(
            "System Check Status",
            colour(system.error, Fore.GREEN if system.is_ok else Fore.RED),
        ),
    ]

    if system.supply is not None:
        lines.append(field("Supply Temperature", _temp(system.supply)))
    if system.sleep_timer is not None:
        lines.append(field("Sleep Timer", f"{system.sleep_timer} min"))
    if system.economy_lock is not None:
        lines.append(field("Economy Lock", on_off(system.economy_lock)))
        lines.append(
            field(
                "Economy Range",
                f"{_temp(system.economy_min)} - {_temp(system.economy_max)}",
            )
        )
    if system.filter_warning is not None:
        months = system.filter_warning
        lines.append(
            field("Filter Warning", f"{months} months" if months else "disabled")
        )
    if system.airflow_lock is not None:
        lines.append(field("Airflow Lock", on_off(system.airflow_lock)))
    if system.airflow_min_lock is not None:
        lines.append(field("Airflow Min Lock", on_off(system.airflow_min_lock)))
    if system.static_pressure is not None:
        lines.append(field("Static Pressure", str(system.static_pressure)))
    if system.damper_time is not None:
        lines.append(field("Damper Time", f"{system.damper_time} s"))
    if system.auto_mode_deadband is not None:
        lines.append(field("Auto Mode Deadband", _temp(system.auto_mode_deadband)))
    if system.open_dampers_when_off is not None:
        lines.append(
            field("Open Dampers When Off", on_off(system.open_dampers_when_off))
        )
    if system.scrooge_mode is not None:
        lines.append(field("Scrooge Mode", on_off(system.scrooge_mode)))
    if system.reverse_dampers is not None:
        lines.append(field("Reverse Dampers", on_off(system.reverse_dampers)))
    if system.warnings:
        lines.append(field("Warnings", colour(system.warnings, Fore.YELLOW)))

    return box("AIRCON STATUS", lines)


def render_temperature(system: System) -> str:
    return box(
        "Controller Temperature",
        [field("Current Temperature", colour(_temp(system.temperature), Fore.CYAN))],
    )


def render_zone(zone: Zone) -> str:
    lines = [
        field("Mode", render_enum(zone.mode)),
        field("Temperature", colour(_temp(zone.temperature), Fore.CYAN)),
        field("Setpoint", _temp(zone.setpoint)),
        field("Damper Position", f"{zone.damper_position}%"),
        field("Airflow (min/max)", f"{zone.min_air}% / {zone.max_air}%"),
        field("Balance (min/max)", f"{zone.balance_min}% / {zone.balance_max}%"),
        field("Zone Type", render_enum(zone.zone_type)),
        field("Sensor Type", str(zone.sensor_type)),
        field("Area", f"{zone.area} m²"),
        field("Calibration", f"{zone.calibration / 10:+.1f}°C"),
        field("Bypass", on_off(zone.bypass)),
        field("RF Signal", _opt(zone.rf_signal, "%")),
        field(
            "Battery Level",
            colour("0", Fore.RED) if zone.low_battery else _opt(zone.battery_level),
        ),
        field(
            "Faults",
            colour(", ".join(zone.faults), Fore.RED)
            if zone.faults
            else colour("none", Fore.GREEN),
        ),
    ]
    return box(f"ZONE {zone.index}: {zone.name.upper()}", lines)


def render_zones(zones: Iterable[Zone]) -> str:
    """Return a summary of many zones, one per line."""

    lines = []
    for zone in zones:
        state = f"{render_enum(zone.mode):<8}"
        temps = f"{_temp(zone.temperature):>7} → {_temp(zone.setpoint):>7}"
        line = f"{zone.name[:12]:<12} {state} {temps}"
        if zone.faults:
            line += colour(" !", Fore.RED)
        lines.append(line)
    return box("ZONES SUMMARY", lines, width=BOX_WIDTH + 4)


def render_days(days: Iterable[Weekday]) -> str:
    enabled = set(days)
    if not enabled:
        return "none"
    return " ".join(_DAY_LABELS[d] for d in WEEKDAYS if d in enabled)


def render_schedule(schedule: Schedule) -> str:
    lines = [
        field("Name", schedule.name or "(unnamed)"),
        field("Enabled", on_off(schedule.active)),
        field("Mode", system_mode(schedule.mode)),
        field("Fan", "N/A" if schedule.fan is None else render_enum(schedule.fan)),
        field("Start", str(schedule.start)),
        field("Stop", str(schedule.stop)),
        field("Days", render_days(schedule.days)),
    ]

    if (preset := schedule.coolbreeze) is not None:
        lines.append(field("Coolbreeze Setpoint", _temp(preset.unit_setpoint)))
        lines.append(field("Coolbreeze Fan Speed", f"{preset.fan_speed}%"))
        lines.append(field("Coolbreeze RH Setpoint", f"{preset.rh_setpoint}%"))

    for idx, override in enumerate(schedule.zones or []):
        lines.append(
            field(
                f"Zone {idx}",
                f"{render_enum(override.mode)} {_temp(override.setpoint)}",
            )
        )

    return box(f"SCHEDULE {schedule.index}", lines)


def render_schedules(schedules: Iterable[Schedule]) -> str:
    lines = []
    for sch in schedules:
        state = colour("ON ", Fore.GREEN) if sch.active else colour("OFF", Fore.RED)
        name = (sch.name or "(unnamed)")[:14]
        times = f"{sch.start!s:>5}-{sch.stop!s:<5}"
        lines.append(f"{sch.index} {name:<14} {state} {times}")
    return box("SCHEDULES SUMMARY", lines)


def render_coolbreeze(coolbreeze: Coolbreeze | None) -> str:
    if coolbreeze is None:
        return box("COOLBREEZE", ["No evaporative cooler is reported"])

    lines = [
        field("Fan Speed", _opt(coolbreeze.fan_speed, "%")),
        field("RH Setpoint", _opt(coolbreeze.rh_setpoint, "%")),
        field("Prewash", on_off(coolbreeze.prewash_enabled)),
        field("Prewash Time", _opt(coolbreeze.prewash_time, " min")),
        field("Drain After Prewash", on_off(coolbreeze.drain_after_prewash)),
        field("Drain Cycle", on_off(coolbreeze.drain_cycle_enabled)),
        field("Drain Cycle Period", _opt(coolbreeze.drain_cycle_period, " h")),
        field("Postwash", on_off(coolbreeze.postwash_enabled)),
        field("Postwash Time", _opt(coolbreeze.postwash_time, " min")),
        field("Drain Before Postwash", on_off(coolbreeze.drain_before_postwash)),
        field("Inverter", on_off(coolbreeze.inverter)),
        field("Resume Last", on_off(coolbreeze.resume_last)),
        field("Fan Max (auto)", _opt(coolbreeze.fan_max_auto, "%")),
        field("Fan Max", _opt(coolbreeze.fan_max, "%")),
        field("Exhaust", on_off(coolbreeze.exhaust_enabled)),
        field("Exhaust Max", _opt(coolbreeze.exhaust_max, "%")),
        field(
            "Control Sensor",
            "N/A"
            if coolbreeze.control_sensor is None
            else render_enum(coolbreeze.control_sensor),
        ),
        field("Temp Deadband", _temp(coolbreeze.temp_deadband)),
        field("Auto Fan Max Time", _opt(coolbreeze.auto_fan_max_time, " min")),
    ]
    if coolbreeze.temp_calibration is not None:
        lines.append(
            field("Temp Calibration", f"{coolbreeze.temp_calibration / 10:+.1f}°C")
        )
    return box("COOLBREEZE", lines)


def render_ventilation(ventilation: Ventilation | None) -> str:
    if ventilation is None:
        return box("VENTILATION", ["No ventilation unit is reported"])

    lines = [
        field("RH Setpoint", _opt(ventilation.rh_setpoint, "%")),
        field("VOCs Setpoint", _opt(ventilation.vocs_setpoint, " ppb")),
        field("eCO2 Setpoint", _opt(ventilation.eco2_setpoint, " ppm")),
        field("Fan Stage Delay", _opt(ventilation.fan_stage_delay, " min")),
        field("Cycle Fan Off", on_off(ventilation.cycle_fan_off)),
        field("Use RH Control", on_off(ventilation.use_rh_control)),
        field("Use VOCs Control", on_off(ventilation.use_vocs_control)),
        field("Use eCO2 Control", on_off(ventilation.use_eco2_control)),
    ]
    return box("VENTILATION", lines)


def render_error(err: exc.IzoneError) -> str:
    """Return the message of an error, as shown to the user."""

    if isinstance(err, exc.DeviceReportedError):
        return f"The iZone controller reported an error: {err.response.strip()}"
    if isinstance(err, exc.CodecError | exc.ResponseError) and err.status is None:
        return f"{err.message}\n{HINT_CHECK_FIRMWARE}"
    return err.message
