"""Client for the RooLink API."""

from roolink.client import ApiClient
from roolink.config import BASE_URL, Settings
from roolink.errors import (
    ConfigError,
    RequestFailedError,
    ResponseDecodeError,
    RooLinkError,
    TransportError,
    UpstreamStatusError,
)
from roolink.models import PixelData, RequestLimit, SensorData, SensorOptions

RooLink = ApiClient

__all__ = [
    "ApiClient",
    "BASE_URL",
    "ConfigError",
    "PixelData",
    "RequestFailedError",
    "RequestLimit",
    "ResponseDecodeError",
    "RooLink",
    "RooLinkError",
    "SensorData",
    "SensorOptions",
    "Settings",
    "TransportError",
    "UpstreamStatusError",
]
