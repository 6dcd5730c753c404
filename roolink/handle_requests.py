"""
HTTP request handler for the RooLink API.
Issues one request per call, decodes the body, and maps every failure onto the
RequestFailedError family. Optional client-side throttling via requests-ratelimiter.
"""
import logging
import re
from typing import Any

import requests
from requests_ratelimiter import LimiterSession

from roolink.errors import ResponseDecodeError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)

_KEY_PARAM = re.compile(r"(key=)[^&]+")


class RequestHandler:
    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        requests_per_second: float | None = None,
        requests_per_minute: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if requests_per_second or requests_per_minute:
            self.session = LimiterSession(
                per_second=requests_per_second or 0,
                per_minute=requests_per_minute or 0,
                per_host=False,
            )
        else:
            self.session = requests.Session()

    def close(self):
        self.session.close()

    def default_headers(self, api_key: str, content_type: str = "application/json") -> dict:
        return {"x-api-key": api_key, "Content-Type": content_type}

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        headers: dict | None = None,
        params: dict | None = None,
        json: Any = None,
        data: Any = None,
        required_field: str | None = None,
    ) -> Any:
        """
        Perform one request and return the decoded body.
          - 2xx: parsed JSON, raw text when the body is not JSON, None when empty
          - non-2xx: UpstreamStatusError carrying status and body
          - network fault / timeout: TransportError
          - 2xx without required_field in the JSON object: ResponseDecodeError
        """
        url = self.url_for(path)
        logger.debug(f"{method} {path}")
        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json,
                data=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            status, body = _response_details(getattr(e, "response", None))
            logger.error(f"{method} {path} failed: {_redact(str(e))}")
            raise TransportError(status, body, reason=_redact(str(e))) from e

        if not 200 <= resp.status_code < 300:
            logger.warning(f"{method} {path} returned {resp.status_code}")
            raise UpstreamStatusError(resp.status_code, resp.text, payload=_decode(resp))
        payload = _decode(resp)
        if required_field and (not isinstance(payload, dict) or required_field not in payload):
            logger.warning(f"{method} {path} response lacks {required_field!r}")
            raise ResponseDecodeError(required_field, payload, status_code=resp.status_code, body=resp.text)
        return payload

    def get_json(self, path: str, params: dict | None = None, required_field: str | None = None) -> Any:
        """GET without custom headers; returns the decoded body."""
        return self.request("GET", path, params=params, required_field=required_field)

    def post_json(
        self, path: str, api_key: str, json: dict | None = None, required_field: str | None = None
    ) -> Any:
        """Authenticated JSON POST."""
        return self.request(
            "POST", path, headers=self.default_headers(api_key), json=json, required_field=required_field
        )

    def post_text(self, path: str, api_key: str, text: str) -> Any:
        """Authenticated text/plain POST; the body is sent as UTF-8."""
        headers = self.default_headers(api_key, "text/plain")
        return self.request("POST", path, headers=headers, data=text.encode("utf-8"))


def _decode(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _response_details(resp: requests.Response | None) -> tuple[int | None, str | None]:
    if resp is None:
        return None, None
    return resp.status_code, resp.text


# The limit endpoint takes the API key as a query parameter.
def _redact(text: str) -> str:
    return _KEY_PARAM.sub(r"\1***", text)
