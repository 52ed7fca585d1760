"""izone provides an async client for the iZone v2 local API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .const import (
    DEFAULT_BASE_URL,
    DEFAULT_SCHEDULE_QUERY_TYPE,
    DEFAULT_ZONE_QUERY_TYPE,
    DEFAULT_ZONES,
)
from .exceptions import InputValidationError
from .schemas.const import QueryType


def normalise_base_url(host: str) -> str:
    """Return the base URL of a controller from an IP address, hostname or URL.

    A bare address gets an http:// prefix, and any trailing slash is removed.
    """

    host = host.strip()
    if not host:
        raise InputValidationError("The controller's address must not be empty")

    if "://" not in host:
        host = f"http://{host}"
    return host.rstrip("/")


@dataclass(frozen=True)
class IzoneConfig:
    """The (immutable) configuration of a client, fixed for its lifetime."""

    base_url: str = DEFAULT_BASE_URL
    verbose: bool = False
    zone_query_type: QueryType | int = DEFAULT_ZONE_QUERY_TYPE
    schedule_query_type: QueryType | int = DEFAULT_SCHEDULE_QUERY_TYPE
    zones: Mapping[str, int] = field(default=DEFAULT_ZONES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", normalise_base_url(self.base_url))
        object.__setattr__(
            self,
            "zones",
            MappingProxyType({k.lower(): v for k, v in self.zones.items()}),
        )

    @classmethod
    def from_dict(cls, config: dict[str, Any], /, **kwargs: Any) -> IzoneConfig:
        """Return a config from a (validated) dict, with any overrides applied."""

        params: dict[str, Any] = {}

        if "izone_ip" in config:
            params["base_url"] = config["izone_ip"]
        for key in ("zone_query_type", "schedule_query_type", "zones"):
            if key in config:
                params[key] = config[key]

        params.update({k: v for k, v in kwargs.items() if v is not None})
        return cls(**params)

    def zone_index(self, name: str) -> int:
        """Return the index of a zone from its (case-insensitive) name.

        Raise an InputValidationError (listing the valid names) if it is unknown.
        """

        try:
            return self.zones[name.strip().lower()]
        except KeyError:
            raise InputValidationError(
                f"Unknown zone '{name}' (valid zones: {', '.join(self.zones)})"
            ) from None
