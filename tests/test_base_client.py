"""
Tests for BaseClient.
"""
import httpx
import pytest
import respx

from endpoint_fetch.core.base_client import BaseClient, _format_body
from endpoint_fetch.core.request import RequestBuilder
from endpoint_fetch.errors import FetchErrorKind, TransportError

BASE_URL = "https://hws.dev"


def _options(path="/headlines.json", method="GET"):
    return RequestBuilder(f"{BASE_URL}{path}", method).build()


@pytest.mark.asyncio
async def test_send_returns_body(environment):
    client = BaseClient(environment)
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/headlines.json").respond(200, content=b"[]")

        body = await client.send(_options())

        assert body == b"[]"


@pytest.mark.asyncio
async def test_send_uses_session_headers(environment):
    client = BaseClient(environment)
    with respx.mock(base_url=BASE_URL) as mock:
        route = mock.get("/headlines.json").respond(200, json=[])

        await client.send(_options())

        request = route.calls.last.request
        assert request.headers["APIKey"] == "test-key"
        assert request.headers["Cache-Control"] == "no-cache"


@pytest.mark.asyncio
async def test_send_non_success_status(environment):
    client = BaseClient(environment)
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/headlines.json").respond(503)

        with pytest.raises(TransportError) as exc:
            await client.send(_options())

        assert exc.value.kind == FetchErrorKind.TRANSPORT
        assert exc.value.status_code == 503
        assert isinstance(exc.value.cause, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_send_connection_error(environment):
    client = BaseClient(environment)
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/headlines.json").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(TransportError) as exc:
            await client.send(_options())

        assert exc.value.status_code is None
        assert isinstance(exc.value.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_send_timeout(environment):
    client = BaseClient(environment)
    with respx.mock(base_url=BASE_URL) as mock:
        mock.get("/headlines.json").mock(side_effect=httpx.ReadTimeout("too slow"))

        with pytest.raises(TransportError) as exc:
            await client.send(_options())

        assert isinstance(exc.value.cause, httpx.TimeoutException)


@pytest.mark.asyncio
async def test_resolve_url(environment):
    client = BaseClient(environment)
    assert str(client.resolve_url("messages.json")) == "https://hws.dev/messages.json"


def test_format_body_safety():
    assert _format_body(None) == "<empty>"
    assert _format_body(b"") == "<empty>"

    # Text
    assert _format_body(b"hello") == "hello"

    # JSON
    assert _format_body(b'{"a": 1}') == '{\n  "a": 1\n}'

    # Binary
    assert _format_body(b"\xff\xfe\x00") == "<binary data: 3 bytes>"

    # Truncation
    long_body = b"a" * 6000
    formatted = _format_body(long_body)
    assert len(formatted) < 6000
    assert "... (truncated)" in formatted
