"""Client Factory — build push clients from Settings.

Invariants:
    - Settings default to get_settings() (environment / .env)
    - Logging is configured only when configure_logging=True
"""

import logging

import httpx

from centrifugo_push.config import Settings, get_settings
from centrifugo_push.infrastructure.async_centrifugo_client import AsyncCentrifugoPushClient
from centrifugo_push.infrastructure.centrifugo_client import CentrifugoPushClient
from centrifugo_push.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_push_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    configure_logging: bool = False,
) -> CentrifugoPushClient:
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Centrifugo push client targeting {settings.api_url}")
    return CentrifugoPushClient(
        settings.api_url,
        api_key=settings.api_key.get_secret_value(),
        timeout_seconds=settings.timeout_seconds,
        transport=transport,
    )


def create_async_push_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    configure_logging: bool = False,
) -> AsyncCentrifugoPushClient:
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Async Centrifugo push client targeting {settings.api_url}")
    return AsyncCentrifugoPushClient(
        settings.api_url,
        api_key=settings.api_key.get_secret_value(),
        timeout_seconds=settings.timeout_seconds,
        transport=transport,
    )
