"""izone provides an async client for the iZone v2 local API."""

from __future__ import annotations

import json
import logging
from http import HTTPMethod
from typing import TYPE_CHECKING, Any, Final

import aiohttp

from . import exceptions as exc
from .const import (
    COMMAND_URL_SUFFIX,
    DEVICE_ERROR_MARKER,
    ERR_MSG_LOOKUP,
    HEADERS_BASE,
    HINT_CHECK_ADDRESS,
    QUERY_URL_SUFFIX,
)
from .schemas.const import S2_IZONE_V2_REQUEST, S2_NO, S2_NO1, S2_TYPE, QueryType

if TYPE_CHECKING:
    from .commands import Command
    from .config import IzoneConfig


class Transport:
    """A class to make the two kinds of request of the controller's local API.

    Queries (POST /iZoneRequestV2) return a JSON object; commands (POST
    /iZoneCommandV2) return a free-text acknowledgement.
    """

    def __init__(
        self,
        websession: aiohttp.ClientSession,
        config: IzoneConfig,
        /,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialise the transport (it does not own the websession)."""

        self.websession: Final = websession
        self.config: Final = config

        self.logger: Final = logger or logging.getLogger(__name__)

    def __str__(self) -> str:
        """Return a string representation of the object."""
        return f"{self.__class__.__name__}(base='{self.url_base}')"

    @property
    def url_base(self) -> str:
        """Return the URL base of the controller, e.g. 'http://192.168.1.130'."""
        return self.config.base_url

    async def query(
        self, query_type: QueryType | int, index: int = 0
    ) -> dict[str, Any]:
        """Query the controller and return the response (a dict).

        The response is the entity wrapped in a single-key object, for example
        {"SystemV2": {...}}, and is not otherwise decoded here.
        """

        payload = {
            S2_IZONE_V2_REQUEST: {S2_TYPE: int(query_type), S2_NO: index, S2_NO1: 0}
        }

        body = await self._make_request(QUERY_URL_SUFFIX, payload)

        try:
            response = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            raise exc.ResponseError(
                f"POST {QUERY_URL_SUFFIX}: response is not valid JSON: {body!r}"
            ) from err

        if not isinstance(response, dict):
            raise exc.ResponseError(
                f"POST {QUERY_URL_SUFFIX}: response is not a JSON object: {body!r}"
            )

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"POST {QUERY_URL_SUFFIX}: {response}")

        return response

    async def command(self, command: Command) -> str:
        """Send a command to the controller and return its reply (a string).

        The controller signals failure only by including the word 'error' (in any
        case) in the reply, so any such reply raises a DeviceReportedError, even
        one that comes with a non-2xx status.
        """

        body = await self._make_request(
            COMMAND_URL_SUFFIX, command.as_json(), command=command
        )
        return body.decode("utf-8", errors="replace")

    async def _make_request(
        self,
        url: str,
        payload: dict[str, Any],
        /,
        *,
        command: Command | None = None,
    ) -> bytes:
        """POST a request and return the body of the response (as bytes).

        Will raise an exception if the request is not successful. For a command,
        the device's own error reply takes precedence over the HTTP status.
        """

        rsp: aiohttp.ClientResponse | None = None  # to prevent unbound error

        url = f"{self.url_base}/{url}"

        if self.config.verbose:
            self.logger.info(f"POST {url}: request={json.dumps(payload)}")

        try:
            rsp = await self._request(HTTPMethod.POST, url, json=payload)

            body = await rsp.read()
            text = body.decode("utf-8", errors="replace")

            if self.config.verbose:
                self.logger.info(f"POST {url}: status={rsp.status}, response={text}")

            if command is not None and DEVICE_ERROR_MARKER in text.lower():
                raise exc.DeviceReportedError(
                    f"{command.NAME}: the controller reported an error: {text}",
                    text,
                    status=None if rsp.ok else rsp.status,
                )

            rsp.raise_for_status()

        except aiohttp.ClientResponseError as err:
            if hint := ERR_MSG_LOOKUP.get(err.status):
                self.logger.error(hint)  # noqa: TRY400

            raise exc.ResponseError(
                f"POST {url}: {err.status} {err.message}", status=err.status
            ) from err

        except aiohttp.ClientError as err:  # e.g. ClientConnectionError
            self.logger.error(HINT_CHECK_ADDRESS)  # noqa: TRY400

            raise exc.TransportError(f"POST {url}: {err}") from err

        except TimeoutError as err:
            self.logger.error(HINT_CHECK_ADDRESS)  # noqa: TRY400

            raise exc.TransportError(f"POST {url}: timed out") from err

        else:
            return body

        finally:
            if rsp is not None:
                rsp.release()

    async def _request(  # dev/test wrapper
        self, method: HTTPMethod, url: str, /, **kwargs: Any
    ) -> aiohttp.ClientResponse:
        """Wrap the request to the ClientSession (useful for dev/test)."""
        return await self.websession.request(
            method, url, headers=HEADERS_BASE, **kwargs
        )
