"""izone provides an async client for the iZone v2 local API."""

from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Final

from .schemas.const import QueryType

DEFAULT_HOST: Final = "192.168.1.130"
DEFAULT_BASE_URL: Final = f"http://{DEFAULT_HOST}"

QUERY_URL_SUFFIX: Final = "iZoneRequestV2"
COMMAND_URL_SUFFIX: Final = "iZoneCommandV2"

# The controller's JSON is sent/received as "application/json"
HEADERS_BASE: Final = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

DEFAULT_ZONE_QUERY_TYPE: Final = QueryType.ZONES
DEFAULT_SCHEDULE_QUERY_TYPE: Final = QueryType.SCHEDULES

# zone name -> zone index (the controller has no zone discovery via names)
DEFAULT_ZONES: Final = MappingProxyType(
    {
        "kitchen": 0,
        "theatre": 1,
        "living": 2,
        "master": 3,
        "work": 4,
        "guest": 5,
        "rayden": 6,
        "rumpus": 7,
    }
)

# the controller ignores the first of two closely-spaced setpoint changes
SETPOINT_RESEND_DELAY: Final = 1.0  # seconds

# The reply to a failed command is free text containing this (in any case)
DEVICE_ERROR_MARKER: Final = "error"

HINT_CHECK_ADDRESS = (
    "Unable to contact the iZone controller. Check its IP address (--host, or "
    "izone_ip in izone.toml) and that it is reachable from this network."
)
HINT_CHECK_FIRMWARE = (
    "The iZone controller's response was not understood. Check that its "
    "firmware supports the v2 local API (and the configured query types)."
)

ERR_MSG_LOOKUP: Final[dict[int, str]] = {
    HTTPStatus.NOT_FOUND: "Not Found (is this an iZone controller?)",
    HTTPStatus.BAD_REQUEST: "Bad request (invalid JSON?)",
    HTTPStatus.INTERNAL_SERVER_ERROR: HINT_CHECK_FIRMWARE,
}
