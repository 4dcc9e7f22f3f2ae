"""
Shared fixtures.
"""
import pytest
import pytest_asyncio

from endpoint_fetch.client import NetworkManager
from endpoint_fetch.config import EnvironmentConfig
from endpoint_fetch.environment import AppEnvironment

BASE_URL = "https://hws.dev"


@pytest.fixture
def environment_config():
    return EnvironmentConfig(
        name="Testing",
        base_url=BASE_URL,
        api_key="test-key",
        ephemeral=True,
    )


@pytest_asyncio.fixture
async def environment(environment_config):
    env = AppEnvironment(environment_config)
    yield env
    await env.close()


@pytest.fixture
def manager(environment):
    return NetworkManager(environment)


@pytest.fixture
def headlines_json():
    return [
        {"id": 1, "title": "A", "strap": "B", "url": "https://hws.dev/a"},
        {"id": 2, "title": "Second", "strap": "Another strap", "url": "https://hws.dev/b"},
    ]


@pytest.fixture
def messages_json():
    return [
        {"id": 1, "from": "Tim", "text": "Hello"},
        {"id": 2, "from": "Eric", "text": "Hi there"},
    ]
