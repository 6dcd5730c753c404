"""
SBSD API module for generating SBSD challenge bodies.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from roolink.client import ApiClient


class SbsdAPI:
    """SBSD endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def generate_body(self, vid: str, cookie: str, static_body: bool = False) -> Any:
        """Generate an SBSD body (POST /sbsd). The response is passed through as decoded."""
        body = {
            "userAgent": self.client.user_agent,
            "vid": vid,
            "bm_o": cookie,
            "static": static_body,
        }
        return self.client.http.post_json("sbsd", self.client.api_key, json=body)
