"""Client Factory — clients built from Settings talk to the configured server."""

from centrifugo_push.config import Settings
from centrifugo_push.infrastructure.async_centrifugo_client import AsyncCentrifugoPushClient
from centrifugo_push.infrastructure.centrifugo_client import CentrifugoPushClient
from centrifugo_push.infrastructure.client_factory import (
    create_async_push_client, create_push_client,
)
from centrifugo_push.schemas.device import DeviceListRequest

from tests.infrastructure.fake_centrifugo import API_KEY, API_URL, FakeCentrifugo


def test_create_push_client_uses_settings():
    fake = FakeCentrifugo(api_key=API_KEY)
    settings = Settings(api_url=API_URL, api_key=API_KEY, timeout_seconds=3)
    with create_push_client(settings, transport=fake.transport) as client:
        assert isinstance(client, CentrifugoPushClient)
        assert client.api_url == API_URL
        client.device_list(DeviceListRequest())
    assert fake.calls[0]["headers"]["x-api-key"] == API_KEY


def test_create_push_client_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("CENTRIFUGO_API_URL", "http://env.centrifugo.test/api/")
    client = create_push_client()
    try:
        assert client.api_url == "http://env.centrifugo.test/api"
    finally:
        client.close()


async def test_create_async_push_client():
    fake = FakeCentrifugo()
    settings = Settings(api_url=API_URL)
    async with create_async_push_client(settings, transport=fake.transport) as client:
        assert isinstance(client, AsyncCentrifugoPushClient)
        await client.device_list(DeviceListRequest())
    assert fake.calls[0]["method"] == "device_list"
