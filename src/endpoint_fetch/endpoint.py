"""
Typed descriptors for remote JSON resources.
"""
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Generic, List, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError
from .models import Message, News
from .types import HTTP_METHODS, HttpMethod

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """
    Describes a remote JSON document of a known shape.

    ``location`` is either an absolute URL or a path that is resolved against
    the base URL of the active environment. ``type`` is the shape the body is
    decoded into, e.g. ``List[News]``.
    """
    location: str
    type: Any
    method: HttpMethod = "GET"
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        method = str(self.method).upper()
        if method not in HTTP_METHODS:
            raise ValueError(
                f"Unsupported HTTP method '{self.method}'. Expected one of: {', '.join(HTTP_METHODS)}"
            )
        for name, value in self.headers.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise ValueError(f"Header '{name}' must have a string name and value")
            if not (name.isascii() and value.isascii()):
                raise ValueError(f"Header '{name}' must be ASCII")
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def decode(self, raw: bytes) -> T:
        """Decode a complete JSON body into this endpoint's shape."""
        try:
            return _adapter_for(self.type).validate_json(raw)
        except ValidationError as e:
            raise DecodeError(
                f"Response for '{self.location}' does not match the expected shape: "
                f"{e.error_count()} validation error(s)",
                cause=e,
            ) from e


HEADLINES: Endpoint[List[News]] = Endpoint("headlines.json", List[News])
MESSAGES: Endpoint[List[Message]] = Endpoint("messages.json", List[Message])

ENDPOINTS: Dict[str, Endpoint[Any]] = {
    "headlines": HEADLINES,
    "messages": MESSAGES,
}


def get_endpoint(name: str) -> Endpoint[Any]:
    """Look up one of the named endpoints."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown endpoint '{name}'. Available: {', '.join(sorted(ENDPOINTS))}"
        ) from None
