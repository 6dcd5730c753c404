import asyncio
from unittest.mock import MagicMock

import pytest

from roolink import ApiClient, BASE_URL, ResponseDecodeError, RooLink, SensorOptions, UpstreamStatusError

from conftest import API_KEY, PROTECTED_URL, USER_AGENT


def _sent(session_request):
    args, kwargs = session_request.call_args
    return args[0], args[1], kwargs


def test_constructor_state_is_read_only(client):
    assert client.api_key == API_KEY
    assert client.protected_url == PROTECTED_URL
    assert client.user_agent == USER_AGENT
    assert client.base_url == BASE_URL
    with pytest.raises(AttributeError):
        client.api_key = "other"


def test_repr_hides_api_key(client):
    assert API_KEY not in repr(client)


def test_roolink_alias():
    assert RooLink is ApiClient


@pytest.mark.asyncio
async def test_request_limit(client, respond):
    session_request = respond(200, {"requests": 42})
    assert await client.request_limit() == {"requests": 42}
    method, url, kwargs = _sent(session_request)
    assert method == "GET"
    assert url == f"{BASE_URL}/limit"
    assert kwargs["params"] == {"key": API_KEY}
    assert kwargs["headers"] is None
    assert kwargs["json"] is None
    assert kwargs["data"] is None


@pytest.mark.asyncio
async def test_request_limit_passes_extra_fields_through(client, respond):
    respond(200, {"requests": 7, "plan": "pro"})
    assert await client.request_limit() == {"requests": 7, "plan": "pro"}


@pytest.mark.asyncio
async def test_parse_script_data(client, respond):
    script = "var _cf = ['bm', 'ñ'];\n(function(){})();"
    parsed = {"ver": "3.2", "key": 123, "dvc": "abc"}
    session_request = respond(200, parsed)
    assert await client.parse_script_data(script) == parsed
    method, url, kwargs = _sent(session_request)
    assert method == "POST"
    assert url == f"{BASE_URL}/parse"
    assert kwargs["headers"] == {"x-api-key": API_KEY, "Content-Type": "text/plain"}
    assert kwargs["data"] == script.encode("utf-8")
    assert kwargs["json"] is None


@pytest.mark.asyncio
async def test_generate_sensor_data_defaults(client, respond):
    session_request = respond(200, {"sensor": "XYZ"})
    assert await client.generate_sensor_data("abck-value", "bmsz-value") == {"sensor_data": "XYZ"}
    method, url, kwargs = _sent(session_request)
    assert method == "POST"
    assert url == f"{BASE_URL}/sensor"
    assert kwargs["headers"] == {"x-api-key": API_KEY, "Content-Type": "application/json"}
    assert kwargs["json"] == {
        "url": PROTECTED_URL,
        "userAgent": USER_AGENT,
        "_abck": "abck-value",
        "bm_sz": "bmsz-value",
        "sec_cpt": False,
        "stepper": False,
        "index": 2,
        "flags": "",
    }


@pytest.mark.asyncio
async def test_generate_sensor_data_with_options(client, respond):
    session_request = respond(200, {"sensor": "S"})
    options = SensorOptions(script_data="{\"ver\":\"3\"}", sec_cpt=True, index=4, flags="x")
    await client.generate_sensor_data("a", "b", options)
    body = session_request.call_args.kwargs["json"]
    assert body["scriptData"] == "{\"ver\":\"3\"}"
    assert body["sec_cpt"] is True
    assert body["stepper"] is False
    assert body["index"] == 4
    assert body["flags"] == "x"


@pytest.mark.asyncio
async def test_generate_sensor_data_missing_sensor(client, respond):
    respond(200, text='{"error":"bad cookie"}')
    with pytest.raises(ResponseDecodeError) as exc:
        await client.generate_sensor_data("a", "b")
    err = exc.value
    assert err.field == "sensor"
    assert err.status_code == 200
    assert err.body == '{"error":"bad cookie"}'
    assert err.payload == {"error": "bad cookie"}
    assert str(err).startswith('Request failed: 200 - {"error":"bad cookie"}')


@pytest.mark.asyncio
async def test_request_limit_without_requests_field(client, respond):
    respond(200, text='{"error":"invalid key"}')
    with pytest.raises(ResponseDecodeError) as exc:
        await client.request_limit()
    assert exc.value.field == "requests"
    assert exc.value.status_code == 200
    assert exc.value.body == '{"error":"invalid key"}'


@pytest.mark.asyncio
async def test_generate_pixel_data_missing_sensor(client, respond):
    respond(200, text="not json")
    with pytest.raises(ResponseDecodeError) as exc:
        await client.generate_pixel_data(1, "h")
    assert exc.value.status_code == 200
    assert exc.value.body == "not json"


@pytest.mark.asyncio
async def test_generate_sbsd_body(client, respond):
    session_request = respond(200, {"body": "sbsd-body"})
    assert await client.generate_sbsd_body("vid-1", "bm-o") == {"body": "sbsd-body"}
    method, url, kwargs = _sent(session_request)
    assert url == f"{BASE_URL}/sbsd"
    assert kwargs["headers"]["x-api-key"] == API_KEY
    assert kwargs["json"] == {"userAgent": USER_AGENT, "vid": "vid-1", "bm_o": "bm-o", "static": False}


@pytest.mark.asyncio
async def test_generate_sbsd_body_static(client, respond):
    session_request = respond(200, {"body": "x"})
    await client.generate_sbsd_body("vid-1", "bm-o", static_body=True)
    assert session_request.call_args.kwargs["json"]["static"] is True


@pytest.mark.asyncio
async def test_generate_pixel_data_returns_string(client, respond):
    session_request = respond(200, {"sensor": "abc123"})
    assert await client.generate_pixel_data(9876, "deadbeef") == "abc123"
    method, url, kwargs = _sent(session_request)
    assert url == f"{BASE_URL}/pixel"
    assert kwargs["json"] == {"userAgent": USER_AGENT, "bazadebezolkohpepadr": 9876, "hash": "deadbeef"}


@pytest.mark.asyncio
async def test_generate_pixel_data_sends_hash_key(client, respond):
    session_request = respond(200, {"sensor": "s"})
    await client.generate_pixel_data(bazadebezolkohpepadr=1, pixel_hash="cafe")
    assert session_request.call_args.kwargs["json"]["hash"] == "cafe"


@pytest.mark.asyncio
async def test_generate_sec_cpt_answers(client, respond):
    answers = {"answers": ["0.1", "0.2"]}
    session_request = respond(200, answers)
    result = await client.generate_sec_cpt_answers("tok", 1700000000, "n0nce", 3, "sec_cpt=abc")
    assert result == answers
    method, url, kwargs = _sent(session_request)
    assert url == f"{BASE_URL}/sec-cpt"
    assert kwargs["headers"] == {"x-api-key": API_KEY, "Content-Type": "application/json"}
    assert kwargs["json"] == {
        "token": "tok",
        "timestamp": 1700000000,
        "nonce": "n0nce",
        "difficulty": 3,
        "cookie": "sec_cpt=abc",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.request_limit(),
        lambda c: c.parse_script_data("x"),
        lambda c: c.generate_sensor_data("a", "b"),
        lambda c: c.generate_sbsd_body("v", "c"),
        lambda c: c.generate_pixel_data(1, "h"),
        lambda c: c.generate_sec_cpt_answers("t", 1, "n", 1, "c"),
    ],
)
async def test_rate_limited_response_rejects_every_operation(client, respond, call):
    respond(429, text='{"error":"rate limited"}')
    with pytest.raises(UpstreamStatusError) as exc:
        await call(client)
    assert exc.value.status_code == 429
    assert "429" in str(exc.value)
    assert '{"error":"rate limited"}' in str(exc.value)


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_client(client, respond):
    respond(200, {"sensor": "same"})
    results = await asyncio.gather(*(client.generate_pixel_data(i, "h") for i in range(5)))
    assert results == ["same"] * 5
    assert client.http.session.request.call_count == 5


@pytest.mark.asyncio
async def test_async_context_manager_closes_session():
    async with ApiClient("k", "u", "ua") as c:
        c.http.session.close = MagicMock()
    c.http.session.close.assert_called_once_with()


def test_sync_sub_apis(client, respond):
    respond(200, {"sensor": "sync"})
    assert client.pixel.generate(1, "h") == "sync"
    assert client.sensor.generate("a", "b") == {"sensor_data": "sync"}
