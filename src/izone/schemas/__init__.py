"""izone schema - for the JSON of the controller's local (v2) API."""

from __future__ import annotations

from typing import Any, Final

import voluptuous as vol

from ..exceptions import CodecError
from .codec import (  # noqa: F401
    NOT_AVAILABLE,
    ScheduleTime,
    bool_to_int,
    days_from_wire,
    days_to_wire,
    decode_enum,
    display,
    int_to_bool,
    parse_celsius,
    render_enum,
)
from .const import (  # noqa: F401
    S2_SCHEDULES_V2,
    S2_SYSTEM_V2,
    S2_ZONES_V2,
    CtrlSensor,
    FanSpeed,
    QueryType,
    SystemMode,
    Weekday,
    ZoneMode,
    ZoneType,
)
from .status import (  # noqa: F401
    IzCoolbreezePresetT,
    IzCoolbreezeStatusT,
    IzScheduleStatusResponseT,
    IzSystemStatusResponseT,
    IzVentilationStatusT,
    IzZoneOverrideT,
    IzZoneStatusResponseT,
    factory_schedule_status,
    factory_system_status,
    factory_zone_status,
)

#
# The query responses are PascalCase, and each is wrapped in a single-key object...

# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 1, "No": 0, "No1": 0}}
SCH_SYSTEM_STATUS: Final = factory_system_status()

# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 2, "No": zone_idx, "No1": 0}}
SCH_ZONE_STATUS: Final = factory_zone_status()

# POST /iZoneRequestV2 {"iZoneV2Request": {"Type": 3, "No": sched_idx, "No1": 0}}
SCH_SCHEDULE_STATUS: Final = factory_schedule_status()


def unwrap_and_decode(schema: vol.Schema, wrapper: str, response: Any) -> Any:
    """Return the decoded content of a query response, e.g. {"SystemV2": {...}}.

    Raise a CodecError if the wrapper is missing, or its content is invalid.
    """

    if not isinstance(response, dict) or wrapper not in response:
        raise CodecError(f"Response has no '{wrapper}' object: {response!r}")

    try:
        return schema(response[wrapper])
    except vol.Invalid as err:
        raise CodecError(f"Unable to decode '{wrapper}': {err}") from err
