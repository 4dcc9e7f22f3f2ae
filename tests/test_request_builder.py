"""
Tests for RequestBuilder and location resolution.
"""
import httpx
import pytest

from endpoint_fetch.core.request import RequestBuilder, resolve_location
from endpoint_fetch.errors import FetchErrorKind, InvalidLocationError


def test_request_builder():
    opts = (
        RequestBuilder("https://hws.dev/messages.json")
        .method("POST")
        .header("APIKey", "test-key")
        .content(b'{"text": "hi"}')
        .build()
    )

    assert opts["url"] == "https://hws.dev/messages.json"
    assert opts["method"] == "POST"
    assert opts["headers"]["APIKey"] == "test-key"
    assert opts["content"] == b'{"text": "hi"}'


def test_request_builder_later_headers_win():
    opts = (
        RequestBuilder("https://hws.dev/headlines.json")
        .headers({"APIKey": "session-key", "Accept": "application/json"})
        .headers({"apikey": "endpoint-key"})
        .build()
    )

    assert opts["headers"].get_list("APIKey") == ["endpoint-key"]
    assert opts["headers"]["Accept"] == "application/json"


@pytest.mark.parametrize(
    "location, base_url, expected",
    [
        ("headlines.json", "https://hws.dev", "https://hws.dev/headlines.json"),
        ("x.json", "https://hws.dev/v1/", "https://hws.dev/v1/x.json"),
        ("/x.json", "https://hws.dev/v1/", "https://hws.dev/x.json"),
        ("https://example.com/feed.json", "https://hws.dev", "https://example.com/feed.json"),
    ],
)
def test_resolve_location(location, base_url, expected):
    assert str(resolve_location(location, base_url)) == expected


def test_resolve_location_accepts_httpx_url():
    url = resolve_location("messages.json", httpx.URL("https://hws.dev"))
    assert str(url) == "https://hws.dev/messages.json"


@pytest.mark.parametrize(
    "location",
    [
        "",
        "   ",
        "ftp://hws.dev/headlines.json",
        "https://",
        "https:",
        "//",
        "http://exa mple.com/x",
    ],
)
def test_resolve_location_invalid(location):
    with pytest.raises(InvalidLocationError) as exc:
        resolve_location(location, "https://hws.dev")
    assert exc.value.kind == FetchErrorKind.INVALID_LOCATION
    assert exc.value.location == location
