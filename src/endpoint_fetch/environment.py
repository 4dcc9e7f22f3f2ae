"""
Deployment environments and their HTTP sessions.
"""
import logging
from typing import Callable, Dict, Optional

import httpx

from .config import EnvironmentConfig, normalize_timeout, resolve

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Environment]"

DEFAULT_BASE_URL = "https://hws.dev"
ENV_BASE_URL = "ENDPOINT_FETCH_BASE_URL"
ENV_PRODUCTION_API_KEY = "ENDPOINT_FETCH_PRODUCTION_API_KEY"
ENV_TESTING_API_KEY = "ENDPOINT_FETCH_TESTING_API_KEY"


class AppEnvironment:
    """
    A named deployment target: base URL plus a configured HTTP session.

    The session is created lazily from the config. A pre-built
    ``httpx.AsyncClient`` may be passed instead; it is then owned by the
    caller and never closed here.
    """

    def __init__(
        self,
        config: EnvironmentConfig,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = config
        self._base_url = httpx.URL(config.base_url)
        self._client = httpx_client
        self._own_client = httpx_client is None

    @property
    def config(self) -> EnvironmentConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def session(self) -> httpx.AsyncClient:
        """The transport for this environment."""
        if self._client is None or self._client.is_closed:
            self._client = self._create_client()
            self._own_client = True
        return self._client

    def _create_client(self) -> httpx.AsyncClient:
        timeout_config = normalize_timeout(self._config.timeout)
        timeout = httpx.Timeout(
            connect=timeout_config.connect,
            read=timeout_config.read,
            write=timeout_config.write,
            pool=timeout_config.pool,
        )
        logger.debug(
            f"{LOG_PREFIX} Creating session for '{self.name}' "
            f"(ephemeral={self._config.ephemeral})"
        )
        return httpx.AsyncClient(
            timeout=timeout,
            headers=self._config.default_headers(),
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the session if we own it."""
        if self._own_client and self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AppEnvironment":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AppEnvironment(name={self.name!r}, base_url={str(self._base_url)!r})"


def production(api_key: Optional[str] = None) -> AppEnvironment:
    """Persistent session authenticated with the production key."""
    return AppEnvironment(
        EnvironmentConfig(
            name="Production",
            base_url=resolve(None, ENV_BASE_URL, DEFAULT_BASE_URL),
            api_key=resolve(api_key, ENV_PRODUCTION_API_KEY, "production-key-from-keychain"),
        )
    )


def testing(api_key: Optional[str] = None) -> AppEnvironment:
    """Ephemeral, non-caching session authenticated with the test key."""
    return AppEnvironment(
        EnvironmentConfig(
            name="Testing",
            base_url=resolve(None, ENV_BASE_URL, DEFAULT_BASE_URL),
            api_key=resolve(api_key, ENV_TESTING_API_KEY, "test-key"),
            ephemeral=True,
        )
    )


PROFILES: Dict[str, Callable[..., AppEnvironment]] = {
    "production": production,
    "testing": testing,
}


def get_environment(name: str, api_key: Optional[str] = None) -> AppEnvironment:
    """Build one of the named environment profiles."""
    try:
        factory = PROFILES[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown environment '{name}'. Available: {', '.join(sorted(PROFILES))}"
        ) from None
    return factory(api_key=api_key)
