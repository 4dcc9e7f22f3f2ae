"""
Endpoint Fetch - typed JSON resource client
"""

__version__ = "0.1.0"

from .client import NetworkManager
from .config import EnvironmentConfig, TimeoutConfig
from .core.request import RequestBuilder, resolve_location
from .endpoint import ENDPOINTS, HEADLINES, MESSAGES, Endpoint, get_endpoint
from .environment import AppEnvironment, get_environment, production, testing
from .errors import (
    DecodeError,
    FetchError,
    FetchErrorKind,
    InvalidLocationError,
    TransportError,
)
from .models import Message, News
from .types import AttemptFailure, FailureObserver, HttpMethod

__all__ = [
    "NetworkManager",
    "Endpoint", "HEADLINES", "MESSAGES", "ENDPOINTS", "get_endpoint",
    "AppEnvironment", "EnvironmentConfig", "TimeoutConfig",
    "get_environment", "production", "testing",
    "RequestBuilder", "resolve_location",
    "FetchError", "FetchErrorKind", "InvalidLocationError", "TransportError", "DecodeError",
    "News", "Message",
    "AttemptFailure", "FailureObserver", "HttpMethod",
]
