"""Tests for izone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiohttp
import pytest
from aioresponses import aioresponses

from izone import IzoneClient, IzoneConfig

from .const import BASE_URL

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


@pytest.fixture
def block_aiohttp() -> Generator[aioresponses]:
    """Prevent any actual I/O: will raise ClientConnectionError(Connection refused)."""

    with aioresponses() as mock:
        yield mock


@pytest.fixture
async def client_session() -> AsyncGenerator[aiohttp.ClientSession]:
    """Yield an aiohttp.ClientSession (its requests are faked by aioresponses)."""

    client_session = aiohttp.ClientSession()

    try:
        yield client_session
    finally:
        await client_session.close()


@pytest.fixture
def config() -> IzoneConfig:
    return IzoneConfig(base_url=BASE_URL)


@pytest.fixture
def client(client_session: aiohttp.ClientSession, config: IzoneConfig) -> IzoneClient:
    return IzoneClient(client_session, config=config)

