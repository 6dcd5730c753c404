"""Shared fixtures: a client whose session returns canned responses."""

import json as jsonlib
from unittest.mock import MagicMock

import pytest
import requests

from roolink import ApiClient

API_KEY = "test-key"
PROTECTED_URL = "https://shop.example.com/"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


def make_response(status: int = 200, body=None, text: str | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    if text is None:
        text = "" if body is None else jsonlib.dumps(body)
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def client():
    c = ApiClient(API_KEY, PROTECTED_URL, USER_AGENT)
    c.http.session.request = MagicMock(return_value=make_response(200, {}))
    yield c
    c.close()


@pytest.fixture
def respond(client):
    """Set the next response returned by the client's session."""

    def _respond(status: int = 200, body=None, text: str | None = None):
        client.http.session.request.return_value = make_response(status, body, text)
        return client.http.session.request

    return _respond
