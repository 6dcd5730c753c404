from dataclasses import asdict, dataclass
from typing import Any

from roolink.errors import ResponseDecodeError


def _field(payload: Any, name: str) -> Any:
    if not isinstance(payload, dict) or name not in payload:
        raise ResponseDecodeError(name, payload)
    return payload[name]


@dataclass
class SensorOptions:
    script_data: str | None = None
    sec_cpt: bool = False
    stepper: bool = False
    index: int = 2
    flags: str = ""

    def to_payload(self) -> dict[str, Any]:
        # Falsy values fall back to the defaults; scriptData is only sent when set.
        payload: dict[str, Any] = {
            "sec_cpt": self.sec_cpt or False,
            "stepper": self.stepper or False,
            "index": self.index or 2,
            "flags": self.flags or "",
        }
        if self.script_data:
            payload["scriptData"] = self.script_data
        return payload


@dataclass
class RequestLimit:
    requests: int

    @staticmethod
    def from_response(d: Any) -> "RequestLimit":
        return RequestLimit(requests=_field(d, "requests"))


@dataclass
class SensorData:
    sensor_data: str

    @staticmethod
    def from_response(d: Any) -> "SensorData":
        return SensorData(sensor_data=_field(d, "sensor"))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class PixelData:
    sensor: str

    @staticmethod
    def from_response(d: Any) -> "PixelData":
        return PixelData(sensor=_field(d, "sensor"))
