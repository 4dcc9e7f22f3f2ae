"""
Core type definitions for endpoint-fetch.
"""
from dataclasses import dataclass
from typing import Callable, Literal, Optional, TypedDict, Union

import httpx

from .errors import FetchError

# HTTP Methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

# Raw request body
Content = Union[bytes, str]

class RequestOptions(TypedDict, total=False):
    """Options for a single request attempt."""
    method: HttpMethod
    url: str  # Fully resolved URL
    headers: httpx.Headers
    content: Optional[Content]

@dataclass(frozen=True)
class AttemptFailure:
    """One failed attempt inside a retrying fetch."""
    attempt: int
    attempts: int
    error: FetchError
    will_retry: bool

    @property
    def remaining(self) -> int:
        return self.attempts - self.attempt

FailureObserver = Callable[[AttemptFailure], None]
