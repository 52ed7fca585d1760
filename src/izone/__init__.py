"""izone provides an async client for the local (v2) API of iZone controllers.

The controller is an HVAC zoning system on the LAN; its API is plain HTTP/JSON with
no authentication.
"""

from __future__ import annotations

from .config import IzoneConfig
from .exceptions import (
    ApiRequestFailedError,
    BadApiResponseError,
    CodecError,
    DeviceReportedError,
    InputValidationError,
    IzoneError,
    ResponseError,
    TransportError,
)
from .main import IzoneClient
from .schedule import CoolbreezePreset, Schedule, ZoneOverride
from .schemas.const import (
    CtrlSensor,
    FanSpeed,
    QueryType,
    SystemMode,
    Weekday,
    ZoneMode,
    ZoneType,
)
from .system import Coolbreeze, System, Ventilation
from .transport import Transport
from .zone import Zone

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    "IzoneClient",
    "IzoneConfig",
    "Transport",
    #
    "Coolbreeze",
    "CoolbreezePreset",
    "Schedule",
    "System",
    "Ventilation",
    "Zone",
    "ZoneOverride",
    #
    "CtrlSensor",
    "FanSpeed",
    "QueryType",
    "SystemMode",
    "Weekday",
    "ZoneMode",
    "ZoneType",
    #
    "ApiRequestFailedError",
    "BadApiResponseError",
    "CodecError",
    "DeviceReportedError",
    "InputValidationError",
    "IzoneError",
    "ResponseError",
    "TransportError",
]
