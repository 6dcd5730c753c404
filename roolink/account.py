"""
Account API module for reading the request quota of an API key.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from roolink.client import ApiClient


class AccountAPI:
    """Account endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def request_limit(self) -> dict[str, Any]:
        """Fetch the request quota (GET /limit?key=...). Returns the payload unmodified; requires "requests"."""
        return self.client.http.get_json(
            "limit", params={"key": self.client.api_key}, required_field="requests"
        )
