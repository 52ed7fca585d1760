"""An async client for the iZone v2 local API."""

from __future__ import annotations


class _IzoneBaseError(Exception):
    """The base class for all exceptions."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IzoneError(_IzoneBaseError):
    """The base class for all exceptions."""


# These occur before any request is made
class InputValidationError(IzoneError):
    """A supplied value is out of range, too long, or not a known name.

    Raised before any request is sent, so the controller is never contacted.
    """


# These occur whilst a request is being made
class ApiRequestFailedError(IzoneError):  # a base exception, API failed
    """The API request failed for some reason (no/invalid/unexpected response).

    If the cause was a non-2xx response, then the `status` attr will have an integer
    value.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class TransportError(ApiRequestFailedError):
    """Unable to contact the controller (connection refused, DNS failure, timeout)."""


class DeviceReportedError(ApiRequestFailedError):
    """The controller replied to a command with a body that contains 'error'.

    This is the controller's only way of signalling a failed command; the body is
    free text and is kept verbatim in the `response` attr.
    """

    def __init__(
        self, message: str, response: str, status: int | None = None
    ) -> None:
        super().__init__(message, status=status)
        self.response = response


# These occur after a request was made (the JSON was received, but not understood)
class BadApiResponseError(ApiRequestFailedError):  # a base exception, API data bad
    """The received JSON is not as expected (e.g. missing a required key)."""


class ResponseError(BadApiResponseError):
    """The response failed (non-2xx status), or its body is not a JSON object."""


class CodecError(BadApiResponseError):
    """A field of the received JSON could not be decoded (e.g. a boolean of 2)."""
