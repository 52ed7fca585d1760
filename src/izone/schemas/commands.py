"""izone schema - the legal ranges of values that are sent to the controller.

The controller's own validation is inconsistent (and undocumented for many fields),
so every value is checked here before it is sent.
"""

from __future__ import annotations

from typing import Any, Final

import voluptuous as vol

from ..exceptions import InputValidationError
from .const import ZoneMode

MAX_NAME_LENGTH: Final = 15
MAX_SCHEDULES: Final = 8  # indices 0-7

SETPOINT_MIN: Final = 1500  # 15.0 C
SETPOINT_MAX: Final = 3000  # 30.0 C

FILTER_WARNING_MONTHS: Final = (0, 3, 6, 12)  # 0 is disabled


def _range(lo: int, hi: int, units: str = "") -> vol.All:
    return vol.All(
        int, vol.Range(min=lo, max=hi, msg=f"must be {lo}-{hi}{units}")
    )


# System / Zone / Schedule
SCH_SETPOINT: Final = vol.All(
    int,
    vol.Range(
        min=SETPOINT_MIN, max=SETPOINT_MAX, msg="must be 15.0-30.0°C (1500-3000)"
    ),
)
SCH_PERCENT: Final = _range(0, 100, "%")
SCH_NAME: Final = vol.All(
    str,
    vol.Length(
        min=1,
        max=MAX_NAME_LENGTH,
        msg=f"must be 1-{MAX_NAME_LENGTH} characters",
    ),
)
SCH_SCHEDULE_INDEX: Final = _range(0, MAX_SCHEDULES - 1)
SCH_HOUR: Final = _range(0, 23)
SCH_MINUTE: Final = _range(0, 59)
SCH_ZONE_MODE: Final = vol.All(
    vol.Coerce(ZoneMode), msg=f"must be one of {[int(m) for m in ZoneMode]}"
)
SCH_ZONE_INDEX: Final = _range(0, 255)
SCH_ZONE_CALIBRATION: Final = _range(-50, 50, " (tenths of °C)")
SCH_ZONE_AREA: Final = _range(0, 1000, " m²")

# Coolbreeze
SCH_CB_FAN_SPEED: Final = _range(1, 100, "%")
SCH_CB_RH_SETPOINT: Final = _range(10, 90, "%")
SCH_CB_PREWASH_TIME: Final = _range(1, 60, " minutes")
SCH_CB_POSTWASH_TIME: Final = _range(5, 30, " minutes")
SCH_CB_DRAIN_CYCLE_HOURS: Final = _range(1, 50, " hours")
SCH_CB_AUTO_FAN_MAX_TIME: Final = _range(0, 60, " minutes")
SCH_CB_TEMP_CALIBRATION: Final = _range(-50, 50, " (-5.0°C to +5.0°C)")
SCH_CB_TEMP_DEADBAND: Final = _range(100, 500, " (1.0-5.0°C)")

# Ventilation
SCH_VENT_RH_SETPOINT: Final = _range(5, 95, "%")
SCH_VENT_VOCS_SETPOINT: Final = _range(50, 2500, " ppb")
SCH_VENT_ECO2_SETPOINT: Final = _range(500, 1500, " ppm")
SCH_VENT_FAN_STAGE_DELAY: Final = _range(3, 240, " minutes")

# System configuration
SCH_AUTO_MODE_DEADBAND: Final = _range(75, 500, " (0.75-5.0°C)")
SCH_STATIC_PRESSURE: Final = _range(0, 4)
SCH_FILTER_WARNING: Final = vol.In(
    FILTER_WARNING_MONTHS, msg="must be 0 (disabled), 3, 6, or 12 months"
)
SCH_UINT: Final = vol.All(int, vol.Range(min=0, msg="must not be negative"))
SCH_WARNING_KIND: Final = vol.All(
    str, vol.Length(min=1, msg="must not be empty")
)


def validate(schema: Any, value: Any, field: str) -> Any:
    """Return the value if it is valid, otherwise raise an InputValidationError."""

    if isinstance(value, bool):  # bool is a subclass of int
        raise InputValidationError(f"{field} {value!r} is not a number")

    try:
        return schema(value)
    except vol.Invalid as err:
        raise InputValidationError(f"{field} {value!r} {err.msg}") from err
