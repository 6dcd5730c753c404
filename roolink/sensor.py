"""
Sensor API module: script parsing and sensor data generation.
"""
from typing import TYPE_CHECKING, Any

from roolink.models import SensorData, SensorOptions

if TYPE_CHECKING:
    from roolink.client import ApiClient


class SensorAPI:
    """Sensor endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def parse_script(self, script_body: str) -> Any:
        """Parse a bot-manager script (POST /parse, text/plain)."""
        return self.client.http.post_text("parse", self.client.api_key, script_body)

    def generate(self, abck: str, bm_sz: str, options: SensorOptions | None = None) -> dict[str, str]:
        """
        Generate sensor data (POST /sensor).
        Returns {"sensor_data": ...} built from the response's 'sensor' field.
        """
        options = options or SensorOptions()
        body = {
            "url": self.client.protected_url,
            "userAgent": self.client.user_agent,
            "_abck": abck,
            "bm_sz": bm_sz,
            **options.to_payload(),
        }
        payload = self.client.http.post_json("sensor", self.client.api_key, json=body, required_field="sensor")
        return SensorData.from_response(payload).to_dict()
