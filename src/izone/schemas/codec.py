"""izone schema - the wire codec.

The controller's JSON dialect: booleans are the integers 0/1, temperatures are
hundredths of a degree Celsius, modes/fan speeds are small integer codes, and the
days of a schedule are a nested object of integer booleans.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Final, NamedTuple, TypeVar

from ..exceptions import CodecError, InputValidationError
from .const import UNSET_TIMES, WEEKDAYS, Weekday

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_EnumT = TypeVar("_EnumT", bound=IntEnum)

NOT_AVAILABLE: Final = "N/A"


def int_to_bool(value: Any) -> bool:
    """Return a bool from the controller's 0/1 encoding.

    Any other value (including 2, or a non-integer) is a CodecError.
    """

    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise CodecError(f"invalid boolean integer: {value!r}")


def bool_to_int(value: bool) -> int:
    """Return the controller's 0/1 encoding of a bool."""
    return 1 if value else 0


def display(raw: int) -> str:
    """Return a temperature (hundredths of a degree) as a string of degrees.

    One decimal place, unless the value carries hundredths (e.g. 2155 -> '21.55').
    """

    if raw % 10:
        return f"{raw / 100:.2f}"
    return f"{raw / 100:.1f}"


def parse_celsius(text: str | float) -> int:
    """Return a temperature in degrees (e.g. '22.5') as hundredths of a degree.

    There is no range check here: that is for the caller.
    """

    try:
        value = float(text)
    except (TypeError, ValueError) as err:
        raise InputValidationError(
            f"Invalid temperature '{text}' (must be a number, e.g. 22.5)"
        ) from err

    if not math.isfinite(value * 100):  # 1e307 is finite, but overflows
        raise InputValidationError(f"Invalid temperature '{text}' (must be finite)")

    return round(value * 100)


def decode_enum(enum_cls: type[_EnumT], value: Any) -> _EnumT | int:
    """Return the enum member of a code, or the raw int if the code is unknown.

    Unknown codes are never rejected: newer firmware adds codes.
    """

    if not isinstance(value, int) or isinstance(value, bool):
        raise CodecError(f"invalid {enum_cls.__name__} code: {value!r}")

    try:
        return enum_cls(value)
    except ValueError:
        return value


def render_enum(value: IntEnum | int) -> str:
    """Return a human-readable form of an enum code, e.g. 'Cool', 'Unknown(9)'."""

    if isinstance(value, IntEnum):
        return value.name.replace("_", " ").title().replace(" ", "")
    return f"Unknown({value})"


def days_from_wire(days: Mapping[str, Any] | None) -> frozenset[Weekday]:
    """Return the enabled days from a DaysEnabled object.

    Absent keys mean the day is not enabled.
    """

    if days is None:
        return frozenset()
    return frozenset(d for d in WEEKDAYS if int_to_bool(days.get(d, 0)))


def days_to_wire(days: Iterable[Weekday]) -> dict[str, int]:
    """Return a DaysEnabled object (all seven keys, in wire order)."""

    enabled = set(days)
    return {str(d): bool_to_int(d in enabled) for d in WEEKDAYS}


class ScheduleTime(NamedTuple):
    """The start/stop time of a schedule, as the controller encodes it."""

    hour: int | None
    minute: int | None

    @property
    def is_set(self) -> bool:
        """Return False if no time is configured (absent, or a sentinel pair)."""

        if self.hour is None or self.minute is None:
            return False
        return (self.hour, self.minute) not in UNSET_TIMES

    def __str__(self) -> str:
        if not self.is_set:
            return NOT_AVAILABLE
        return f"{self.hour:02d}:{self.minute:02d}"
