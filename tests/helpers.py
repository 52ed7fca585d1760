"""Tests for izone - helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from yarl import URL

if TYPE_CHECKING:
    from aioresponses import aioresponses


def sent_json(mock: aioresponses, url: str) -> list[Any]:
    """Return the JSON bodies POSTed to a URL, in the order they were sent."""

    calls = mock.requests.get(("POST", URL(url)), [])
    return [c.kwargs["json"] for c in calls]
