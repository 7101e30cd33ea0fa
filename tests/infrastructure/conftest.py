"""Client test fixtures — fake Centrifugo server wired into sync and async clients.

Invariants:
    - Every test gets a fresh FakeCentrifugo (no state shared between tests)
    - Clients authenticate with the same API key the fake expects
"""

import pytest

from centrifugo_push.infrastructure.async_centrifugo_client import AsyncCentrifugoPushClient
from centrifugo_push.infrastructure.centrifugo_client import CentrifugoPushClient

from tests.infrastructure.fake_centrifugo import API_KEY, API_URL, FakeCentrifugo


@pytest.fixture
def fake_server():
    return FakeCentrifugo(api_key=API_KEY)


@pytest.fixture
def client(fake_server):
    with CentrifugoPushClient(
        API_URL, api_key=API_KEY, transport=fake_server.transport,
    ) as c:
        yield c


@pytest.fixture
async def async_client(fake_server):
    async with AsyncCentrifugoPushClient(
        API_URL, api_key=API_KEY, transport=fake_server.transport,
    ) as c:
        yield c
