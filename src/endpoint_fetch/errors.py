"""
Fetch error taxonomy.
"""
from enum import Enum
from typing import Optional


class FetchErrorKind(str, Enum):
    INVALID_LOCATION = "invalid_location"
    TRANSPORT = "transport"
    DECODE = "decode"


class FetchError(Exception):
    """Base exception for a failed fetch attempt."""
    kind: FetchErrorKind

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidLocationError(FetchError):
    kind = FetchErrorKind.INVALID_LOCATION

    def __init__(self, location: str, reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid location '{location}': {reason}", cause)
        self.location = location
        self.reason = reason


class TransportError(FetchError):
    kind = FetchErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, cause)
        self.status_code = status_code


class DecodeError(FetchError):
    kind = FetchErrorKind.DECODE
