"""
sec-cpt API module for solving sec-cpt challenges.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from roolink.client import ApiClient


class SecCptAPI:
    """sec-cpt endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def generate_answers(self, token: str, timestamp: int, nonce: str, difficulty: int, cookie: str) -> Any:
        """Generate challenge answers (POST /sec-cpt). The response is passed through as decoded."""
        body = {
            "token": token,
            "timestamp": timestamp,
            "nonce": nonce,
            "difficulty": difficulty,
            "cookie": cookie,
        }
        return self.client.http.post_json("sec-cpt", self.client.api_key, json=body)
