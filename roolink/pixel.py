from typing import TYPE_CHECKING

from roolink.models import PixelData

if TYPE_CHECKING:
    from roolink.client import ApiClient


class PixelAPI:
    """Pixel endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def generate(self, bazadebezolkohpepadr: int, pixel_hash: str) -> str:
        """Generate pixel data (POST /pixel) and return the 'sensor' string."""
        body = {
            "userAgent": self.client.user_agent,
            "bazadebezolkohpepadr": bazadebezolkohpepadr,
            "hash": pixel_hash,
        }
        payload = self.client.http.post_json("pixel", self.client.api_key, json=body, required_field="sensor")
        return PixelData.from_response(payload).sensor
