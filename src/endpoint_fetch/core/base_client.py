"""
Single-attempt HTTP transport on top of an environment's httpx session.
"""
import json
import logging
from typing import Any

import httpx

from ..environment import AppEnvironment
from ..errors import TransportError
from ..types import RequestOptions
from .request import resolve_location

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[NetworkManager]"
MAX_BODY_PREVIEW = 5000

def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None or body == b"" or body == "":
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        try:
            # Try to pretty print if it looks like JSON
            if body.strip().startswith(("{", "[")) and len(body) <= MAX_BODY_PREVIEW:
                return json.dumps(json.loads(body), indent=2)
        except json.JSONDecodeError:
            pass
        # Truncate long strings
        if len(body) > MAX_BODY_PREVIEW:
            return body[:MAX_BODY_PREVIEW] + "... (truncated)"
        return body
    return str(body)

class BaseClient:
    """
    Executes one request against the active environment.
    """
    def __init__(self, environment: AppEnvironment):
        self._environment = environment

    @property
    def environment(self) -> AppEnvironment:
        return self._environment

    def resolve_url(self, location: str) -> httpx.URL:
        """Resolve a location against the environment base URL."""
        return resolve_location(location, self._environment.base_url)

    async def send(self, options: RequestOptions) -> bytes:
        """
        Send a request and return the complete response body.

        Raises TransportError for connection, timeout and protocol failures
        and for any non-2xx status.
        """
        method = options.get("method", "GET")
        url = options.get("url", "")

        logger.debug(f"{LOG_PREFIX} Request: {method} {url}")

        try:
            response = await self._environment.session.request(
                method=method,
                url=url,
                headers=options.get("headers"),
                content=options.get("content"),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{LOG_PREFIX} Request failed: {method} {url} -> {status}")
            raise TransportError(
                f"{method} {url} returned {status} {e.response.reason_phrase}",
                cause=e,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {method} {url}: {e!r}")
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        logger.debug(
            f"{LOG_PREFIX} Response: {response.status_code} {url}\n"
            f"{_format_body(response.content)}"
        )
        return response.content
