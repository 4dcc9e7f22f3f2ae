"""
High-level NetworkManager implementation.
"""
import asyncio
import logging
from typing import Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from .core.base_client import BaseClient, LOG_PREFIX
from .core.request import RequestBuilder
from .endpoint import Endpoint
from .environment import AppEnvironment
from .errors import FetchError
from .types import AttemptFailure, Content, FailureObserver

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RETRY_DELAY = 1.0


class NetworkManager(BaseClient):
    """
    Fetches typed endpoints from the environment it was created with.

    ``on_failure`` is the default observer for failed attempts made by
    :meth:`fetch_with_retry`; a per-call observer takes its place.
    """

    def __init__(
        self,
        environment: AppEnvironment,
        on_failure: Optional[FailureObserver] = None,
    ):
        super().__init__(environment)
        self._on_failure = on_failure

    @classmethod
    def create(
        cls,
        environment: AppEnvironment,
        on_failure: Optional[FailureObserver] = None,
    ) -> "NetworkManager":
        """Factory method to create a manager."""
        return cls(environment, on_failure=on_failure)

    async def fetch(self, endpoint: Endpoint[T], body: Optional[Content] = None) -> T:
        """
        Make a single attempt at fetching and decoding ``endpoint``.

        Raises InvalidLocationError before any request is sent, TransportError
        when the request does not complete with a 2xx status and DecodeError
        when the body does not match the endpoint's shape.
        """
        url = self.resolve_url(endpoint.location)

        options = (
            RequestBuilder(str(url), endpoint.method)
            .headers(self._environment.session.headers)
            .headers(endpoint.headers)
            .content(body)
            .build()
        )
        raw = await self.send(options)
        return endpoint.decode(raw)

    async def fetch_with_retry(
        self,
        endpoint: Endpoint[T],
        body: Optional[Content] = None,
        *,
        attempts: int,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        on_failure: Optional[FailureObserver] = None,
    ) -> T:
        """
        Fetch ``endpoint``, making up to ``attempts`` attempts in total.

        Failed attempts are followed by a fixed wait of ``retry_delay``
        seconds while attempts remain. The last attempt's error is raised.
        """
        attempts = max(attempts, 1)
        observer = on_failure or self._on_failure

        def after_attempt(retry_state: RetryCallState) -> None:
            attempt = retry_state.attempt_number
            self._report_failure(
                AttemptFailure(
                    attempt=attempt,
                    attempts=attempts,
                    error=retry_state.outcome.exception(),
                    will_retry=attempt < attempts,
                ),
                observer,
            )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_fixed(max(retry_delay, 0.0)),
            retry=retry_if_exception_type(FetchError),
            after=after_attempt,
            sleep=self._sleep,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                number = attempt.retry_state.attempt_number
                logger.debug(
                    f"{LOG_PREFIX} Fetching '{endpoint.location}' "
                    f"(attempt {number}/{attempts}, remaining: {attempts - number + 1})"
                )
                result = await self.fetch(endpoint, body)
        return result

    async def fetch_with_fallback(
        self,
        endpoint: Endpoint[T],
        body: Optional[Content] = None,
        *,
        default: T,
    ) -> T:
        """Fetch ``endpoint`` once, returning ``default`` on any fetch error."""
        try:
            return await self.fetch(endpoint, body)
        except FetchError as e:
            logger.debug(
                f"{LOG_PREFIX} Using default for '{endpoint.location}' after {e.kind.value} error: {e}"
            )
            return default

    def _report_failure(
        self, failure: AttemptFailure, observer: Optional[FailureObserver]
    ) -> None:
        logger.warning(
            f"{LOG_PREFIX} Attempt {failure.attempt}/{failure.attempts} failed "
            f"({failure.error.kind.value}): {failure.error}"
        )
        if observer:
            observer(failure)

    async def _sleep(self, delay: float) -> None:
        await asyncio.sleep(delay)
