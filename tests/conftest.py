"""Root conftest — shared test configuration."""

import os

import pytest

from centrifugo_push.config import get_settings

# Ensure tests don't accidentally target a real server
os.environ.setdefault("CENTRIFUGO_API_URL", "http://centrifugo.test/api")
os.environ.setdefault("CENTRIFUGO_API_KEY", "test-api-key")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
