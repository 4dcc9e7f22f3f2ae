"""
Configuration models and value resolution for endpoint-fetch environments.
"""
import os
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, SecretStr, field_validator

# Constants
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0
DEFAULT_API_KEY_HEADER = "APIKey"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


def resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    """
    Resolve a configuration value from multiple sources in priority order:
    1. Direct argument (if not None)
    2. Environment variables
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        if key:
            val = os.getenv(key)
            if val:
                return val

    return default


class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


class EnvironmentConfig(BaseModel):
    """A named deployment target."""
    name: str
    base_url: str
    api_key: Optional[SecretStr] = None
    api_key_header: str = DEFAULT_API_KEY_HEADER
    headers: Dict[str, str] = Field(default_factory=dict)
    # Ephemeral sessions ask every intermediary to skip cached copies
    ephemeral: bool = False
    timeout: Optional[Union[float, TimeoutConfig]] = None

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    def default_headers(self) -> Dict[str, str]:
        """Headers every request in this environment carries."""
        headers = dict(self.headers)
        if self.api_key:
            headers[self.api_key_header] = self.api_key.get_secret_value()
        if self.ephemeral:
            headers.update(NO_CACHE_HEADERS)
        return headers


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout
