"""
API Client module providing centralized access to RooLink API endpoints.
Holds the session credentials, orchestrates the sub-API modules, and exposes
every operation as a coroutine that runs the blocking call in a worker thread.
"""

import asyncio
from typing import Any

from roolink.account import AccountAPI
from roolink.config import BASE_URL, Settings
from roolink.handle_requests import RequestHandler
from roolink.models import SensorOptions
from roolink.pixel import PixelAPI
from roolink.sbsd import SbsdAPI
from roolink.sec_cpt import SecCptAPI
from roolink.sensor import SensorAPI


class ApiClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        api_key: str,
        protected_url: str,
        user_agent: str,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        requests_per_second: float | None = None,
        requests_per_minute: float | None = None,
    ):
        """
        Args:
            api_key: RooLink API key, sent as x-api-key.
            protected_url: URL of the site being protected.
            user_agent: User-Agent string of the simulated browser.
            base_url: API root, without trailing slash.
            timeout: Per-request timeout in seconds; None waits indefinitely.
            requests_per_second / requests_per_minute: optional local throttle.
        """
        self._api_key = api_key
        self._protected_url = protected_url
        self._user_agent = user_agent
        self.http = RequestHandler(
            base_url,
            timeout=timeout,
            requests_per_second=requests_per_second,
            requests_per_minute=requests_per_minute,
        )
        self.account = AccountAPI(self)
        self.sensor = SensorAPI(self)
        self.sbsd = SbsdAPI(self)
        self.pixel = PixelAPI(self)
        self.sec_cpt = SecCptAPI(self)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApiClient":
        return cls(
            settings.api_key,
            settings.protected_url,
            settings.user_agent,
            base_url=settings.base_url,
            timeout=settings.timeout,
            requests_per_second=settings.requests_per_second,
            requests_per_minute=settings.requests_per_minute,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def protected_url(self) -> str:
        return self._protected_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def base_url(self) -> str:
        return self.http.base_url

    def __repr__(self) -> str:
        return f"ApiClient(protected_url={self._protected_url!r}, base_url={self.base_url!r})"

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    async def request_limit(self) -> dict[str, Any]:
        """Fetch the API request limit for the account, e.g. {"requests": 42}."""
        return await asyncio.to_thread(self.account.request_limit)

    async def parse_script_data(self, script_body: str) -> Any:
        """Send raw script text to the parser and return its decoded output."""
        return await asyncio.to_thread(self.sensor.parse_script, script_body)

    async def generate_sensor_data(self, abck: str, bm_sz: str, options: SensorOptions | None = None) -> dict[str, str]:
        """
        Generate sensor data for the protected URL.

        Args:
            abck: The _abck cookie value.
            bm_sz: The bm_sz cookie value.
            options: Generation options; defaults apply when omitted.

        Returns:
            {"sensor_data": <generated sensor>}
        """
        return await asyncio.to_thread(self.sensor.generate, abck, bm_sz, options)

    async def generate_sbsd_body(self, vid: str, cookie: str, static_body: bool = False) -> Any:
        """Generate the SBSD body, nominally {"body": ...}."""
        return await asyncio.to_thread(self.sbsd.generate_body, vid, cookie, static_body)

    async def generate_pixel_data(self, bazadebezolkohpepadr: int, pixel_hash: str) -> str:
        """Generate pixel data; returns the sensor string itself."""
        return await asyncio.to_thread(self.pixel.generate, bazadebezolkohpepadr, pixel_hash)

    async def generate_sec_cpt_answers(
        self, token: str, timestamp: int, nonce: str, difficulty: int, cookie: str
    ) -> Any:
        return await asyncio.to_thread(self.sec_cpt.generate_answers, token, timestamp, nonce, difficulty, cookie)
