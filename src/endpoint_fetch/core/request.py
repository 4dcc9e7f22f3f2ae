"""
Request builder helper and location resolution.
"""
from typing import Mapping, Optional, Union

import httpx

from ..errors import InvalidLocationError
from ..types import Content, HttpMethod, RequestOptions

SUPPORTED_SCHEMES = ("http", "https")


def resolve_location(location: str, base_url: Union[str, httpx.URL]) -> httpx.URL:
    """
    Resolve an endpoint location to an absolute http(s) URL.

    Absolute locations are used as-is, relative ones are joined onto
    ``base_url``.
    """
    if not location or not location.strip():
        raise InvalidLocationError(location, "location is empty")

    try:
        target = httpx.URL(location)
        url = httpx.URL(base_url).join(location)
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidLocationError(location, str(e), cause=e) from e

    # join() fills a bare "https:" or "//" in from the base, so check the
    # authority the location itself names before trusting the joined URL
    if target.scheme or location.lstrip().startswith("//"):
        if target.scheme and target.scheme not in SUPPORTED_SCHEMES:
            raise InvalidLocationError(location, f"unsupported scheme '{target.scheme}'")
        if not target.host:
            raise InvalidLocationError(location, "no host")
        if "%" in target.host or any(c.isspace() for c in target.host):
            raise InvalidLocationError(location, f"malformed host '{target.host}'")

    if url.scheme not in SUPPORTED_SCHEMES:
        raise InvalidLocationError(location, f"unsupported scheme '{url.scheme}'")
    if not url.host:
        raise InvalidLocationError(location, "no host")
    return url


class RequestBuilder:
    """Fluent builder for RequestOptions."""

    def __init__(self, url: str = "", method: HttpMethod = "GET"):
        self._options: RequestOptions = {
            "url": url,
            "method": method,
            "headers": httpx.Headers(),
            "content": None,
        }

    def url(self, url: str) -> "RequestBuilder":
        self._options["url"] = url
        return self

    def method(self, method: HttpMethod) -> "RequestBuilder":
        self._options["method"] = method
        return self

    def header(self, key: str, value: str) -> "RequestBuilder":
        self._options["headers"][key] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> "RequestBuilder":
        # Later calls win on matching keys, compared case-insensitively
        self._options["headers"].update(headers)
        return self

    def content(self, content: Optional[Content]) -> "RequestBuilder":
        self._options["content"] = content
        return self

    def build(self) -> RequestOptions:
        """Get the constructed options."""
        return self._options
