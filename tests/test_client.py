"""Tests for izone - the client (its user-facing operations)."""

from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, call, patch

import pytest

from izone import IzoneClient, IzoneConfig, exceptions as exc
from izone.const import SETPOINT_RESEND_DELAY
from izone.main import parse_days, parse_time
from izone.schemas.const import SystemMode, Weekday

from .const import (
    RSP_APPLIED,
    SCHEDULE_V2,
    SYSTEM_V2,
    URL_COMMAND,
    URL_QUERY,
    ZONE_V2,
)
from .helpers import sent_json

if TYPE_CHECKING:
    import aiohttp
    from aioresponses import aioresponses


async def test_get_system(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_QUERY, payload=SYSTEM_V2)

    system = await client.get_system()

    assert system.power is True
    assert system.mode is SystemMode.COOL


async def test_get_zone(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_QUERY, payload=ZONE_V2)

    zone = await client.get_zone("Master")

    assert zone.index == 3
    assert sent_json(block_aiohttp, URL_QUERY) == [
        {"iZoneV2Request": {"Type": 2, "No": 3, "No1": 0}}
    ]


async def test_get_zones(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_QUERY, payload=ZONE_V2, repeat=True)

    zones = await client.get_zones()

    assert len(zones) == 8
    assert [z.index for z in zones] == [5, 0, 2, 3, 6, 7, 1, 4]  # by name


async def test_get_schedule(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_QUERY, payload=SCHEDULE_V2)

    schedule = await client.get_schedule(2)

    assert schedule.name == "Mornings"
    assert sent_json(block_aiohttp, URL_QUERY) == [
        {"iZoneV2Request": {"Type": 3, "No": 2, "No1": 0}}
    ]


async def test_configured_query_types(
    block_aiohttp: aioresponses, client_session: aiohttp.ClientSession
) -> None:
    config = IzoneConfig(zone_query_type=7, zones={"Den": 9})
    client = IzoneClient(client_session, config=config)
    url = "http://192.168.1.130/iZoneRequestV2"

    block_aiohttp.post(url, payload=ZONE_V2)
    await client.get_zone("den")

    assert sent_json(block_aiohttp, url) == [
        {"iZoneV2Request": {"Type": 7, "No": 9, "No1": 0}}
    ]


async def test_unknown_zone(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    """Check an unknown zone fails before any request is made."""

    with pytest.raises(exc.InputValidationError) as err:
        await client.set_zone_mode("attic", "open")

    assert "attic" in err.value.message
    assert "kitchen" in err.value.message
    assert "rumpus" in err.value.message
    assert not block_aiohttp.requests


async def test_invalid_schedule_index(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    with pytest.raises(exc.InputValidationError):
        await client.get_schedule(8)

    assert not block_aiohttp.requests


async def test_turn_on_off(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED, repeat=True)

    await client.turn_on()
    await client.turn_off()

    assert sent_json(block_aiohttp, URL_COMMAND) == [{"SysOn": 1}, {"SysOn": 0}]


async def test_set_setpoint_is_sent_twice(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED, repeat=True)

    with patch("izone.main.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        await client.set_setpoint("22.5")

    assert mock_sleep.await_args_list.count(call(SETPOINT_RESEND_DELAY)) == 1
    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {"SysSetpoint": 2250},
        {"SysSetpoint": 2250},
    ]


async def test_set_setpoint_out_of_range(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    with pytest.raises(exc.InputValidationError):
        await client.set_setpoint("14.99")

    assert not block_aiohttp.requests


@pytest.mark.parametrize(
    ("mode", "code"), [("cool", 1), ("HEAT", 2), ("Vent", 3), ("dry", 4), ("auto", 5)]
)
async def test_set_mode(
    block_aiohttp: aioresponses, client: IzoneClient, mode: str, code: int
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED)

    await client.set_mode(mode)

    assert sent_json(block_aiohttp, URL_COMMAND) == [{"SysMode": code}]


async def test_set_mode_invalid(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    with pytest.raises(exc.InputValidationError) as err:
        await client.set_mode("freeze")

    assert "cool, heat, vent, dry, auto" in err.value.message
    assert not block_aiohttp.requests


@pytest.mark.parametrize(
    ("mode", "code"),
    [("on", 3), ("auto", 3), ("off", 2), ("close", 2), ("open", 1), ("override", 4)],
)
async def test_set_zone_mode(
    block_aiohttp: aioresponses, client: IzoneClient, mode: str, code: int
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED)

    await client.set_zone_mode("Kitchen", mode)

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {"ZoneStatus": {"Index": 0, "Mode": code}}
    ]


async def test_economy_lock_compound(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED, repeat=True)

    await client.set_economy_lock(True, minimum="18", maximum="26.5")

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {"EconomyLock": 1},
        {"EconomyMin": 1800},
        {"EconomyMax": 2650},
    ]


async def test_compound_validated_before_sending(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    """Check nothing is sent if any part of a compound operation is invalid."""

    with pytest.raises(exc.InputValidationError):
        await client.set_coolbreeze_prewash(True, minutes=61)

    with pytest.raises(exc.InputValidationError):
        await client.set_economy_lock(True, minimum="18", maximum="31")

    assert not block_aiohttp.requests


async def test_compound_stops_at_first_failure(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body="Error: not supported")

    with pytest.raises(exc.DeviceReportedError):
        await client.set_coolbreeze_drain_cycle(True, hours=24)

    assert sent_json(block_aiohttp, URL_COMMAND) == [{"CoolbreezeDrCycEn": 1}]


async def test_drain_cycle(block_aiohttp: aioresponses, client: IzoneClient) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED, repeat=True)

    await client.set_coolbreeze_drain_cycle(True, hours=24)

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {"CoolbreezeDrCycEn": 1},
        {"CoolbreezeDrCycPer": 1440},
    ]


async def test_set_schedule_time(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED)

    await client.set_schedule_time(0, "07:30", "9:05", ["mon", "Su"])

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {
            "SchedSettings": {
                "Index": 0,
                "StartH": 7,
                "StartM": 30,
                "StopH": 9,
                "StopM": 5,
                "DaysEnabled": {
                    "M": 1,
                    "Tu": 0,
                    "W": 0,
                    "Th": 0,
                    "F": 0,
                    "Sa": 0,
                    "Su": 1,
                },
            }
        }
    ]


async def test_set_schedule_days(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED)

    await client.set_schedule_days(4, ["tue", "thursday"])

    (payload,) = sent_json(block_aiohttp, URL_COMMAND)
    assert payload["SchedSettings"]["StartH"] == 31
    assert payload["SchedSettings"]["StopM"] == 63
    assert payload["SchedSettings"]["DaysEnabled"]["Tu"] == 1
    assert payload["SchedSettings"]["DaysEnabled"]["Th"] == 1
    assert payload["SchedSettings"]["DaysEnabled"]["M"] == 0


async def test_set_schedule_mode_fan(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED, repeat=True)

    await client.set_schedule_mode_fan(1, mode="heat", fan="low")

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {"SchedAcMode": {"Index": 1, "Mode": 2}},
        {"SchedAcFan": {"Index": 1, "Fan": 1}},
    ]

    with pytest.raises(exc.InputValidationError):
        await client.set_schedule_mode_fan(1)


async def test_set_schedule_zones(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body=RSP_APPLIED)

    await client.set_schedule_zones(
        6, [("kitchen", "auto", "22.5"), ("Guest", "off", 20)]
    )

    assert sent_json(block_aiohttp, URL_COMMAND) == [
        {
            "SchedZones": {
                "Index": 6,
                "Zones": [
                    {"Index": 0, "Mode": 3, "Setpoint": 2250},
                    {"Index": 5, "Mode": 2, "Setpoint": 2000},
                ],
            }
        }
    ]


async def test_set_schedule_zones_invalid(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    """Check an invalid override is rejected, rather than skipped."""

    with pytest.raises(exc.InputValidationError):
        await client.set_schedule_zones(
            6, [("kitchen", "auto", "22.5"), ("attic", "auto", "22.5")]
        )

    with pytest.raises(exc.InputValidationError):
        await client.set_schedule_zones(6, [("kitchen", "auto", "35")])

    assert not block_aiohttp.requests


async def test_device_error_is_raised(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    block_aiohttp.post(URL_COMMAND, body="Setting applied, no errors found")

    with pytest.raises(exc.DeviceReportedError):
        await client.set_zone_name("living", "Lounge")


async def test_bad_status_is_raised(
    block_aiohttp: aioresponses, client: IzoneClient
) -> None:
    rsp = deepcopy(SYSTEM_V2)
    rsp["SystemV2"]["SysOn"] = 2

    block_aiohttp.post(URL_QUERY, payload=rsp)

    with pytest.raises(exc.CodecError):
        await client.get_system()


def test_parse_days() -> None:
    assert parse_days(["m", "TUE", "Wednesday", Weekday.SUNDAY]) == {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.SUNDAY,
    }
    assert parse_days([]) == frozenset()

    with pytest.raises(exc.InputValidationError):
        parse_days(["mon", "funday"])


@pytest.mark.parametrize(
    ("text", "time"), [("07:30", (7, 30)), ("0:00", (0, 0)), ("23:59", (23, 59))]
)
def test_parse_time(text: str, time: tuple[int, int]) -> None:
    assert parse_time(text) == time


@pytest.mark.parametrize("text", ["24:00", "12:60", "noon", "1230", "12:3x"])
def test_parse_time_invalid(text: str) -> None:
    with pytest.raises(exc.InputValidationError):
        parse_time(text)
