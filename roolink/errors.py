"""
Exception types raised by the RooLink client.

Every failure of a request surfaces as a RequestFailedError; the subclasses
tell apart a network fault, a non-success status, and a 2xx body that lacks
the field an operation reads.
"""
from typing import Any


class RooLinkError(Exception):
    """Base class for all client errors."""


class ConfigError(RooLinkError):
    """Required settings are missing or malformed."""


class RequestFailedError(RooLinkError):
    """A request did not produce a usable response."""

    def __init__(self, status_code: int | None = None, body: str | None = None, reason: str | None = None):
        self.status_code = status_code
        self.body = body
        self.reason = reason
        message = f"Request failed: {status_code} - {body}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UpstreamStatusError(RequestFailedError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, payload: Any = None):
        super().__init__(status_code, body)
        self.payload = payload


class TransportError(RequestFailedError):
    """The exchange could not be completed (connection error, timeout, ...)."""


class ResponseDecodeError(RequestFailedError):
    """A successful response did not carry the expected field."""

    def __init__(self, field: str, payload: Any, status_code: int | None = None, body: str | None = None):
        if body is None:
            body = repr(payload)
        super().__init__(status_code, body, reason=f"missing field {field!r}")
        self.field = field
        self.payload = payload
