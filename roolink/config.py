"""
Environment-driven settings for building a client (python-dotenv + os.getenv).
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from roolink.errors import ConfigError

BASE_URL = "https://www.roolink.io/api/v1"


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    api_key: str
    protected_url: str = ""
    user_agent: str = ""
    base_url: str = BASE_URL
    timeout: float | None = None
    requests_per_second: float | None = None
    requests_per_minute: float | None = None

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        """Read ROOLINK_* variables, loading a .env file first unless dotenv=False."""
        if dotenv:
            load_dotenv()
        api_key = os.getenv("ROOLINK_API_KEY")
        if not api_key:
            raise ConfigError("ROOLINK_API_KEY not found in environment.")
        return Settings(
            api_key=api_key,
            protected_url=os.getenv("ROOLINK_PROTECTED_URL", ""),
            user_agent=os.getenv("ROOLINK_USER_AGENT", ""),
            base_url=os.getenv("ROOLINK_BASE_URL") or BASE_URL,
            timeout=_optional_float("ROOLINK_TIMEOUT"),
            requests_per_second=_optional_float("ROOLINK_RATE_PER_SECOND"),
            requests_per_minute=_optional_float("ROOLINK_RATE_PER_MINUTE"),
        )
